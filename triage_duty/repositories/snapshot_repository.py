# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Published snapshot (dist/triage.json).
Derived state — roster metadata for everyone who has served plus the
published cycle start dates.
"""

import os
from datetime import date
from typing import Any, Mapping

from pydantic import ValidationError

from triage_duty.core.exceptions import StateFileError
from triage_duty.models.domain import DutyCycle, TriageSnapshot
from triage_duty.repositories.json_file import read_json, write_json


class SnapshotRepository:
    """JSON-file backed snapshot used to render published artifacts."""

    def __init__(self, path: str) -> None:
        self._path = path

    @property
    def path(self) -> str:
        return self._path

    def exists(self) -> bool:
        return os.path.exists(self._path)

    # ── Read ──

    def load(self) -> TriageSnapshot:
        """A missing file is an empty snapshot; a malformed one is fatal."""
        if not self.exists():
            return TriageSnapshot(triagers={}, duty_start_dates={})
        raw = read_json(self._path)
        try:
            return TriageSnapshot.model_validate(raw)
        except ValidationError as exc:
            raise StateFileError(self._path, str(exc)) from exc

    # ── Write ──

    def save(self, snapshot: TriageSnapshot) -> None:
        write_json(self._path, snapshot.model_dump(mode="json", by_alias=True))

    def append(self, cycle: DutyCycle, triager_data: Any) -> TriageSnapshot:
        """Record ``cycle``; seed the triager's metadata only if not cached yet."""
        snapshot = self.load()
        if cycle.triager_name not in snapshot.triagers:
            snapshot.triagers[cycle.triager_name] = triager_data
        snapshot.duty_start_dates[cycle.start_date] = cycle.triager_name
        self.save(snapshot)
        return snapshot

    # ── Bulk / internal ──

    def rebuild(self, history: Mapping[date, str], triagers: Mapping[str, Any]) -> TriageSnapshot:
        """Recreate the snapshot from the authoritative history."""
        snapshot = TriageSnapshot(triagers={}, duty_start_dates={})
        for start_date in sorted(history):
            name = history[start_date]
            snapshot.duty_start_dates[start_date] = name
            snapshot.triagers.setdefault(name, triagers.get(name, {}))
        self.save(snapshot)
        return snapshot

    def clear(self) -> None:
        self.save(TriageSnapshot(triagers={}, duty_start_dates={}))
