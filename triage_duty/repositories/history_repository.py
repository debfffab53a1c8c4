# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Duty cycle history data access.
Append-only log of cycle start date -> triager, persisted as JSON.
NO business rules here — pure file I/O and validation.
"""

import os
from datetime import date

from pydantic import ValidationError

from triage_duty.core.exceptions import StateFileError
from triage_duty.models.domain import DutyCycle, DutyCycleHistory
from triage_duty.repositories.json_file import read_json, write_json

HISTORY_KEY = "dutyCycleHistory"


class HistoryRepository:
    """JSON-file backed duty cycle history."""

    def __init__(self, path: str) -> None:
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def exists(self) -> bool:
        return os.path.exists(self._path)

    # ── Read ──

    def load(self) -> dict[date, str]:
        """Return the history ordered by date. A missing file is an empty history."""
        if not self.exists():
            return {}
        raw = read_json(self._path)
        try:
            model = DutyCycleHistory.model_validate(raw)
        except ValidationError as exc:
            raise StateFileError(self._path, str(exc)) from exc
        return dict(sorted(model.duty_cycle_history.items()))

    # ── Write ──

    def save(self, history: dict[date, str]) -> None:
        model = DutyCycleHistory(duty_cycle_history=dict(sorted(history.items())))
        write_json(self._path, model.model_dump(mode="json", by_alias=True))

    def append(self, cycle: DutyCycle) -> dict[date, str]:
        """Add one cycle and persist. Existing entries are never rewritten."""
        history = self.load()
        if cycle.start_date in history:
            raise StateFileError(
                self._path,
                f"a cycle starting {cycle.start_date.isoformat()} is already recorded",
            )
        history[cycle.start_date] = cycle.triager_name
        self.save(history)
        return history

    # ── Bulk / internal ──

    def clear(self) -> None:
        self.save({})
