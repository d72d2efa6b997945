"""Human-readable time formatting shared by the weekly and monthly evaluators."""

from __future__ import annotations

from datetime import datetime, timezone

from rsvp_window.models.schedule import Occurrence

DAY_NAMES = ["Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"]
DAY_CODES = ["SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"]
MONTH_ABBR = ["Jan", "Feb", "Mar", "Apr", "May", "Jun",
              "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
_ORDINALS = {1: "1st", 2: "2nd", 3: "3rd", 4: "4th", "last": "last"}


class TimeFormatter:
    """Formats weekdays, clock times, ordinals, instants and countdowns.

    Evaluators take an optional formatter so callers can swap the wording
    (e.g. a localized subclass) without touching the window arithmetic.
    """

    def __init__(self, closed_prefix: str | None = None, relative_cutoff_days: int | None = None) -> None:
        if closed_prefix is None or relative_cutoff_days is None:
            from rsvp_window.config import get_settings

            display = get_settings().display
            if closed_prefix is None:
                closed_prefix = display.closed_prefix
            if relative_cutoff_days is None:
                relative_cutoff_days = display.relative_cutoff_days
        self.closed_prefix = closed_prefix
        self.relative_cutoff_days = relative_cutoff_days

    def weekday_name(self, weekday: int) -> str:
        return DAY_NAMES[weekday]

    def clock_time(self, hour: int, minute: int) -> str:
        """24h wall time to `9:00 AM` / `12:30 PM`."""
        display_hour = hour % 12 or 12
        ampm = "AM" if hour < 12 else "PM"
        return f"{display_hour}:{minute:02d} {ampm}"

    def ordinal(self, occurrence: Occurrence) -> str:
        return _ORDINALS.get(occurrence, str(occurrence))

    def instant(self, moment: datetime) -> str:
        """Aware datetime to a UTC ISO-8601 string with millisecond precision."""
        utc = moment.astimezone(timezone.utc)
        return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def weekly_closed_message(self, start_day: int, start_hour: int, start_minute: int) -> str:
        return (
            f"{self.closed_prefix} Opens {self.weekday_name(start_day)} "
            f"at {self.clock_time(start_hour, start_minute)}"
        )

    def monthly_closed_message(self, occurrence: Occurrence, game_day: int) -> str:
        return (
            f"{self.closed_prefix} Opens for the {self.ordinal(occurrence)} "
            f"{self.weekday_name(game_day)} of the month"
        )

    def relative(self, target: datetime | str, now: datetime) -> str:
        """Countdown from `now` to `target`.

        - past/now   -> "soon"
        - < 1 hour   -> "in 45m"
        - < 1 day    -> "in 5h 30m"
        - < cutoff   -> "in 3d 5h"
        - >= cutoff  -> "Feb 3"
        """
        if isinstance(target, str):
            target = parse_instant(target)
        diff_secs = (target - now).total_seconds()
        if diff_secs <= 0:
            return "soon"

        diff_mins = int(diff_secs // 60)
        diff_hours = diff_mins // 60
        diff_days = diff_hours // 24

        if diff_days >= self.relative_cutoff_days:
            utc = target.astimezone(timezone.utc)
            return f"{MONTH_ABBR[utc.month - 1]} {utc.day}"
        if diff_days >= 1:
            remain_hours = diff_hours % 24
            return f"in {diff_days}d {remain_hours}h" if remain_hours else f"in {diff_days}d"
        if diff_hours >= 1:
            remain_mins = diff_mins % 60
            return f"in {diff_hours}h {remain_mins}m" if remain_mins else f"in {diff_hours}h"
        return f"in {diff_mins}m"


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 string (`Z` suffix allowed); naive values are read as UTC."""
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
