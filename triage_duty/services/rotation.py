# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Rotation logic — pure computation, no side effects.
"""

from datetime import date, timedelta
from typing import Mapping, Optional, Sequence

from triage_duty.models.domain import DutyCycle

WEEKDAYS: tuple[str, ...] = (
    "monday",
    "tuesday",
    "wednesday",
    "thursday",
    "friday",
    "saturday",
    "sunday",
)


def weekday_number(name: str) -> int:
    """Map a weekday name to date.weekday() numbering. Raises ValueError."""
    key = name.strip().lower()
    if key not in WEEKDAYS:
        raise ValueError(f"Unknown weekday '{name}', expected one of {WEEKDAYS}")
    return WEEKDAYS.index(key)


def last_weekday_on_or_before(day: date, weekday: str) -> date:
    """Most recent ``weekday`` on or before ``day`` (``day`` itself if it matches)."""
    delta = (day.weekday() - weekday_number(weekday)) % 7
    return day - timedelta(days=delta)


def next_roster_index(last_index: int, roster_size: int) -> int:
    """
    Advance one position in the roster and wrap.
    ``last_index`` of -1 means nobody has served yet.
    """
    if roster_size <= 0:
        raise ValueError("Roster is empty: at least one triager is required")
    return (last_index + 1) % roster_size


def get_last_duty_cycle(history: Mapping[date, str]) -> Optional[DutyCycle]:
    """Return the chronologically last cycle, or None for an empty history."""
    if not history:
        return None
    last_date = max(history)
    last_name = history[last_date]
    if not last_name:
        raise ValueError(f"Invalid data in history: no triager for {last_date.isoformat()}")
    return DutyCycle(start_date=last_date, triager_name=last_name)


def compute_next_duty_cycle(
    history: Mapping[date, str],
    roster: Sequence[str],
    today: date,
    start_weekday: str = "sunday",
    cycle_length_days: int = 7,
) -> DutyCycle:
    """
    Return the cycle that follows ``history``.

    Empty history starts on the last ``start_weekday`` on or before ``today``
    with the first roster entry. Otherwise the next cycle begins one cycle
    after the last recorded date, with the triager after the last one in
    roster order. A last triager missing from the roster restarts at the top.
    """
    if not roster:
        raise ValueError("Roster is empty: at least one triager is required")

    last_cycle = get_last_duty_cycle(history)
    if last_cycle is None:
        return DutyCycle(
            start_date=last_weekday_on_or_before(today, start_weekday),
            triager_name=roster[0],
        )

    try:
        last_index = list(roster).index(last_cycle.triager_name)
    except ValueError:
        last_index = -1

    next_index = next_roster_index(last_index, len(roster))
    return DutyCycle(
        start_date=last_cycle.start_date + timedelta(days=cycle_length_days),
        triager_name=roster[next_index],
    )
