# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures describing the on-disk files.
"""

from datetime import date, timedelta
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ComponentFilter(BaseModel):
    """A single bug-tracker product/component pair to triage."""
    product: str = Field(..., min_length=1, description="Bugzilla product")
    component: str = Field(..., min_length=1, description="Bugzilla component")


class GitHubQuery(BaseModel):
    """An issue search on one GitHub repository."""
    repository: str = Field(
        ..., pattern=r"^[\w.-]+/[\w.-]+$", description="owner/name"
    )
    labels: list[str] = Field(default_factory=list)
    title: str = Field(default="Untriaged GitHub issues", min_length=1)


class RosterConfig(BaseModel):
    """
    Contents of the config file. Key order of ``triagers`` is the rotation
    order; values are free-form contact metadata.
    """
    triagers: dict[str, Any]
    components: list[ComponentFilter] = Field(default_factory=list)
    github_queries: list[GitHubQuery] = Field(default_factory=list)

    @property
    def triager_names(self) -> list[str]:
        return list(self.triagers)


def _check_names(value: dict[date, str]) -> dict[date, str]:
    for day, name in value.items():
        if not name.strip():
            raise ValueError(f"empty triager name for {day.isoformat()}")
    return value


class DutyCycleHistory(BaseModel):
    """history.json — cycle start date -> assigned triager."""
    model_config = ConfigDict(populate_by_name=True)

    duty_cycle_history: dict[date, str] = Field(alias="dutyCycleHistory")

    @field_validator("duty_cycle_history")
    @classmethod
    def names_not_empty(cls, v: dict[date, str]) -> dict[date, str]:
        return _check_names(v)


class TriageSnapshot(BaseModel):
    """<dist>/triage.json — roster metadata cache plus published dates."""
    model_config = ConfigDict(populate_by_name=True)

    triagers: dict[str, Any]
    duty_start_dates: dict[date, str] = Field(alias="duty-start-dates")

    @field_validator("duty_start_dates")
    @classmethod
    def names_not_empty(cls, v: dict[date, str]) -> dict[date, str]:
        return _check_names(v)


class DutyCycle(BaseModel):
    """One week of duty assigned to one triager."""
    model_config = ConfigDict(frozen=True)

    start_date: date
    triager_name: str = Field(..., min_length=1)

    def end_date(self, cycle_length_days: int = 7) -> date:
        return self.start_date + timedelta(days=cycle_length_days)
