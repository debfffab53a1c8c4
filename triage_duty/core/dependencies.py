# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Dependency wiring — build repositories and services from settings.
The only place that turns env-driven settings into explicit arguments.
"""

from triage_duty.core.config import Settings, settings
from triage_duty.repositories.config_repository import ConfigRepository
from triage_duty.repositories.history_repository import HistoryRepository
from triage_duty.repositories.snapshot_repository import SnapshotRepository
from triage_duty.services.publisher import Publisher
from triage_duty.services.triage_service import TriageService


def get_triage_service(config: Settings = settings) -> TriageService:
    return TriageService(
        config_repo=ConfigRepository(config.CONFIG_FILE),
        history_repo=HistoryRepository(config.HISTORY_FILE),
        snapshot_repo=SnapshotRepository(config.snapshot_path),
        dist_dir=config.DIST_DIR,
        ical_path=config.ical_path,
        timezone_name=config.CALENDAR_TIMEZONE,
        start_weekday=config.CYCLE_START_WEEKDAY,
        cycle_length_days=config.CYCLE_LENGTH_DAYS,
        calendar_name=config.CALENDAR_NAME,
        calendar_description=config.CALENDAR_DESCRIPTION,
        bugzilla_url=config.BUGZILLA_URL,
        github_url=config.GITHUB_URL,
        lookback_days=config.TRIAGE_LOOKBACK_DAYS,
        refresh_hours=config.CALENDAR_REFRESH_HOURS,
    )


def get_publisher(config: Settings = settings) -> Publisher:
    return Publisher(
        remote=config.PUBLISH_REMOTE,
        branch=config.PUBLISH_BRANCH,
        message=config.PUBLISH_MESSAGE,
    )
