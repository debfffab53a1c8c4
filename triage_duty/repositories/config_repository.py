# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Roster config access. Read-only.
"""

from pydantic import ValidationError

from triage_duty.core.exceptions import ConfigError, StateFileError
from triage_duty.models.domain import RosterConfig
from triage_duty.repositories.json_file import read_json


class ConfigRepository:
    """Loads the roster and query filters from a JSON config file."""

    def __init__(self, path: str) -> None:
        self._path = path

    def load(self) -> RosterConfig:
        """Raises ConfigError when the file is absent or malformed."""
        try:
            raw = read_json(self._path)
        except FileNotFoundError as exc:
            raise ConfigError(f"Config file not found: {self._path}") from exc
        except StateFileError as exc:
            raise ConfigError(f"Invalid config file {self._path}: {exc.reason}") from exc

        try:
            return RosterConfig.model_validate(raw)
        except ValidationError as exc:
            raise ConfigError(f"Invalid config file {self._path}: {exc}") from exc
