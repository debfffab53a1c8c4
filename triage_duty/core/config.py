# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
Only the dependency wiring reads these; services get explicit values.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "triage-duty")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # ── Files ──
    CONFIG_FILE: str = os.getenv("TRIAGE_CONFIG_FILE", "config.json")
    HISTORY_FILE: str = os.getenv("TRIAGE_HISTORY_FILE", "history.json")
    DIST_DIR: str = os.getenv("TRIAGE_DIST_DIR", "dist")
    SNAPSHOT_FILE: str = os.getenv("TRIAGE_SNAPSHOT_FILE", "triage.json")
    ICAL_FILE: str = os.getenv("TRIAGE_ICAL_FILE", "triage.ics")

    # ── Rotation ──
    CYCLE_LENGTH_DAYS: int = int(os.getenv("CYCLE_LENGTH_DAYS", "7"))
    CYCLE_START_WEEKDAY: str = os.getenv("CYCLE_START_WEEKDAY", "sunday").lower()

    # ── Calendar ──
    CALENDAR_NAME: str = os.getenv("CALENDAR_NAME", "Team Triage")
    CALENDAR_DESCRIPTION: str = os.getenv("CALENDAR_DESCRIPTION", "Weekly triage duty rotation")
    CALENDAR_TIMEZONE: str = os.getenv("CALENDAR_TIMEZONE", "America/Los_Angeles")
    CALENDAR_REFRESH_HOURS: int = int(os.getenv("CALENDAR_REFRESH_HOURS", "1"))
    TRIAGE_LOOKBACK_DAYS: int = int(os.getenv("TRIAGE_LOOKBACK_DAYS", "60"))
    BUGZILLA_URL: str = os.getenv(
        "BUGZILLA_URL", "https://bugzilla.mozilla.org/buglist.cgi"
    )
    GITHUB_URL: str = os.getenv("GITHUB_URL", "https://github.com")

    # ── Publishing ──
    PUBLISH_REMOTE: str = os.getenv("PUBLISH_REMOTE", "origin")
    PUBLISH_BRANCH: str = os.getenv("PUBLISH_BRANCH", "gh-pages")
    PUBLISH_MESSAGE: str = os.getenv("PUBLISH_MESSAGE", "Update triage calendar")

    # ── Metrics ──
    METRICS_TEXTFILE: str = os.getenv("METRICS_TEXTFILE", "")

    @property
    def snapshot_path(self) -> str:
        return os.path.join(self.DIST_DIR, self.SNAPSHOT_FILE)

    @property
    def ical_path(self) -> str:
        return os.path.join(self.DIST_DIR, self.ICAL_FILE)


settings = Settings()
