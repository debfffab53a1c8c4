# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Triage duty management — business logic for update and reset.
Coordinates repository writes with rotation, calendar output, and metrics.
"""

import os
from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from triage_duty.core.logging import get_logger
from triage_duty.metrics.prometheus import (
    CALENDAR_EVENTS,
    DUTY_CYCLES_GENERATED,
    HISTORY_LENGTH,
    RESETS_TOTAL,
    ROSTER_FALLBACKS,
)
from triage_duty.models.domain import DutyCycle, RosterConfig
from triage_duty.repositories.config_repository import ConfigRepository
from triage_duty.repositories.history_repository import HistoryRepository
from triage_duty.repositories.snapshot_repository import SnapshotRepository
from triage_duty.services.calendar_builder import CalendarBuilder, TriageQueryBuilder
from triage_duty.services.rotation import compute_next_duty_cycle, get_last_duty_cycle

logger = get_logger(__name__)

_UPDATE = {"command": "update"}


class TriageService:
    """Business logic for the weekly triage duty rotation."""

    def __init__(
        self,
        config_repo: ConfigRepository,
        history_repo: HistoryRepository,
        snapshot_repo: SnapshotRepository,
        dist_dir: str,
        ical_path: str,
        timezone_name: str,
        start_weekday: str = "sunday",
        cycle_length_days: int = 7,
        calendar_name: str = "Team Triage",
        calendar_description: str = "Weekly triage duty rotation",
        bugzilla_url: str = "https://bugzilla.mozilla.org/buglist.cgi",
        github_url: str = "https://github.com",
        lookback_days: int = 60,
        refresh_hours: int = 1,
    ) -> None:
        self._config = config_repo
        self._history = history_repo
        self._snapshot = snapshot_repo
        self._dist_dir = dist_dir
        self._ical_path = ical_path
        self._timezone = timezone_name
        self._start_weekday = start_weekday
        self._cycle_length_days = cycle_length_days
        self._calendar_name = calendar_name
        self._calendar_description = calendar_description
        self._bugzilla_url = bugzilla_url
        self._github_url = github_url
        self._lookback_days = lookback_days
        self._refresh_hours = refresh_hours

    def _today(self) -> date:
        try:
            tz = ZoneInfo(self._timezone)
        except ZoneInfoNotFoundError as exc:
            raise ValueError(f"Unknown calendar timezone '{self._timezone}'") from exc
        return datetime.now(tz).date()

    # ── Commands ──

    def update(self, today: date | None = None) -> DutyCycle:
        """
        Compute the next cycle, append it to history and snapshot, and
        regenerate the calendar. Raises ValueError subclasses on bad state.
        """
        config = self._config.load()
        roster = config.triager_names
        history = self._history.load()

        last_cycle = get_last_duty_cycle(history)
        if last_cycle is None:
            logger.warning(
                "No existing duty cycle history. Generating first cycle.", extra=_UPDATE
            )
        elif roster and last_cycle.triager_name not in roster:
            ROSTER_FALLBACKS.inc()
            logger.warning(
                "Unable to find triager named %s in config. Starting over from first triager.",
                last_cycle.triager_name,
                extra=_UPDATE,
            )

        cycle = compute_next_duty_cycle(
            history,
            roster,
            today or self._today(),
            start_weekday=self._start_weekday,
            cycle_length_days=self._cycle_length_days,
        )

        os.makedirs(self._dist_dir, exist_ok=True)
        if history and not self._snapshot.exists():
            logger.warning(
                "Snapshot %s is missing. Rebuilding it from %d history entries.",
                self._snapshot.path, len(history),
                extra=_UPDATE,
            )
            self._snapshot.rebuild(history, config.triagers)
        self._snapshot.append(cycle, config.triagers[cycle.triager_name])
        history = self._history.append(cycle)
        self.generate_calendar(history, config)

        DUTY_CYCLES_GENERATED.inc()
        HISTORY_LENGTH.set(len(history))
        logger.info(
            "Duty cycle generated: date=%s, triager=%s",
            cycle.start_date.isoformat(), cycle.triager_name,
            extra=_UPDATE,
        )
        return cycle

    def reset(self) -> None:
        """Clear history and snapshot, then write an empty calendar."""
        os.makedirs(self._dist_dir, exist_ok=True)
        self._snapshot.clear()
        self._history.clear()
        self.generate_calendar({})

        RESETS_TOTAL.inc()
        HISTORY_LENGTH.set(0)
        logger.info(
            "Triage state reset: history=%s, snapshot=%s",
            self._history.path, self._snapshot.path,
            extra={"command": "reset"},
        )

    def generate_calendar(
        self,
        history: dict[date, str],
        config: RosterConfig | None = None,
    ) -> int:
        """Rebuild the calendar file from the full history. Returns event count."""
        queries = TriageQueryBuilder(
            bugzilla_url=self._bugzilla_url,
            github_url=self._github_url,
            components=config.components if config else (),
            github_queries=config.github_queries if config else (),
            lookback_days=self._lookback_days,
        )
        builder = CalendarBuilder(
            queries,
            calendar_name=self._calendar_name,
            calendar_description=self._calendar_description,
            timezone_name=self._timezone,
            cycle_length_days=self._cycle_length_days,
            refresh_hours=self._refresh_hours,
        )
        os.makedirs(self._dist_dir, exist_ok=True)
        count = builder.write(history, self._ical_path)
        CALENDAR_EVENTS.set(count)
        logger.info("Calendar written: path=%s, events=%d", self._ical_path, count)
        return count
