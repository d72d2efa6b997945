"""Preview an organization's signup window and current cycle.

Usage (after pip install):
    rsvp-preview --config org.yaml
    rsvp-preview --config org.yaml --at 2026-01-08T12:00:00Z
    rsvp-preview --config org.yaml --tz Europe/London
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml
from tabulate import tabulate

from rsvp_window.exceptions import ScheduleConfigError, SettingsError, UnknownTimezoneError
from rsvp_window.formatting import DAY_NAMES, TimeFormatter, parse_instant
from rsvp_window.models.schedule import Recurrence, default_schedule, resolve_schedule
from rsvp_window.service.window import AccessWindowService, utc_now


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Preview RSVP window status and period id")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="YAML/JSON schedule document (default: new-organization defaults)",
    )
    parser.add_argument(
        "--at",
        default=None,
        help="ISO-8601 instant to evaluate (default: now)",
    )
    parser.add_argument(
        "--tz",
        default=None,
        help="Timezone override for the period id",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.config is None:
            schedule = default_schedule()
        else:
            with open(args.config) as f:
                schedule = resolve_schedule(yaml.safe_load(f) or {})
    except (OSError, yaml.YAMLError, ScheduleConfigError, SettingsError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    try:
        now = parse_instant(args.at) if args.at else utc_now()
    except ValueError as e:
        print(f"ERROR: --at {args.at!r} is not an ISO-8601 instant ({e})", file=sys.stderr)
        return 2

    fmt = TimeFormatter()
    svc = AccessWindowService(clock=lambda: now, formatter=fmt)

    try:
        status = svc.status(schedule)
        period_id = svc.period_id(schedule, timezone=args.tz)
    except UnknownTimezoneError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2

    game = schedule.game_info
    print(f"Evaluated at {fmt.instant(now)} ({schedule.timezone})")
    print(f"Recurrence: {game.recurrence.value}, game day {DAY_NAMES[game.game_day]}", end="")
    if game.recurrence == Recurrence.MONTHLY:
        print(f" ({fmt.ordinal(game.monthly_occurrence)} of the month)")
    else:
        print()
    print()

    rows = [
        {"Field": "Open", "Value": "YES" if status.is_open else "NO"},
        {"Field": "Period", "Value": period_id},
        {"Field": "Message", "Value": status.message or "-"},
        {"Field": "Next open", "Value": status.next_open_time or "-"},
        {"Field": "Countdown", "Value": svc.countdown(status) or "-"},
        {"Field": "Close", "Value": status.close_time or "-"},
    ]
    print("--- Window ---")
    print(tabulate(rows, headers="keys", tablefmt="simple"))

    timeline = svc.timeline(schedule)
    event_rows = [
        {
            "Event": event.label,
            "Day": DAY_NAMES[event.weekday],
            "Time": fmt.clock_time(event.hour, event.minute),
            "Date": event.date.isoformat() if event.date else "-",
        }
        for event in timeline.events
    ]
    print("\n--- Cycle ---")
    print(tabulate(event_rows, headers="keys", tablefmt="simple"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
