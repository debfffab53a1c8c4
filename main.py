# type: ignore
# pyright: reportGeneralTypeIssues=false
"""
Triage Duty Rotation
====================
Rotates a weekly triage duty through a fixed roster, keeps the assignment
history, and publishes an iCalendar feed with links to the triage queues.

Commands:
    update   append the next duty cycle and regenerate the calendar
    reset    clear all history and write an empty calendar
    publish  push the output directory to the static hosting branch

Meant to run from a scheduled job; one invocation per command.
"""

import argparse
import sys
import time
from typing import Optional, Sequence

from triage_duty.core.config import settings
from triage_duty.core.dependencies import get_publisher, get_triage_service
from triage_duty.core.logging import get_logger
from triage_duty.metrics.prometheus import LAST_SUCCESS, export_metrics

logger = get_logger("triage-duty")

COMMANDS = ("update", "reset", "publish")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="triage-duty",
        description="Weekly triage duty rotation and calendar generator.",
    )
    parser.add_argument("command", choices=COMMANDS, help="operation to run")
    return parser


def run_update() -> bool:
    cycle = get_triage_service().update()
    print(f"{cycle.start_date.isoformat()}: {cycle.triager_name}")
    return True


def run_reset() -> bool:
    get_triage_service().reset()
    return True


def run_publish() -> bool:
    return get_publisher().publish(settings.DIST_DIR)


HANDLERS = {
    "update": run_update,
    "reset": run_reset,
    "publish": run_publish,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    extra = {"command": args.command}

    try:
        ok = HANDLERS[args.command]()
    except (ValueError, OSError) as exc:
        logger.critical("FATAL ERROR: %s", exc, exc_info=True, extra=extra)
        return 1
    else:
        if ok:
            LAST_SUCCESS.labels(command=args.command).set(time.time())
        # publish failures are reported by the publisher, not escalated
        return 0
    finally:
        if settings.METRICS_TEXTFILE:
            export_metrics(settings.METRICS_TEXTFILE)


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
