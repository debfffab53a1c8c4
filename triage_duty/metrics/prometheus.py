# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Prometheus metrics — single source of truth for all metric objects.
Batch job: metrics live on a dedicated registry and are exported through the
node-exporter textfile collector at the end of each run.
"""

from prometheus_client import CollectorRegistry, Counter, Gauge, write_to_textfile

REGISTRY = CollectorRegistry()

# ── Business Metrics (updated by service layer only) ──
DUTY_CYCLES_GENERATED = Counter(
    "triage_duty_cycles_generated_total",
    "Total duty cycles appended to the history",
    registry=REGISTRY,
)
ROSTER_FALLBACKS = Counter(
    "triage_duty_roster_fallbacks_total",
    "Rotations restarted at the first triager because the last one left the roster",
    registry=REGISTRY,
)
RESETS_TOTAL = Counter(
    "triage_duty_resets_total",
    "Total resets of the rotation state",
    registry=REGISTRY,
)
PUBLISH_ATTEMPTS = Counter(
    "triage_duty_publish_attempts_total",
    "Publish attempts by outcome",
    ["outcome"],
    registry=REGISTRY,
)
HISTORY_LENGTH = Gauge(
    "triage_duty_history_length",
    "Number of duty cycles in the history",
    registry=REGISTRY,
)
CALENDAR_EVENTS = Gauge(
    "triage_duty_calendar_events",
    "Number of events in the generated calendar",
    registry=REGISTRY,
)
LAST_SUCCESS = Gauge(
    "triage_duty_last_success_timestamp_seconds",
    "Unix time of the last successful command",
    ["command"],
    registry=REGISTRY,
)


def export_metrics(path: str) -> None:
    """Atomically write the registry in textfile-collector format."""
    write_to_textfile(path, REGISTRY)
