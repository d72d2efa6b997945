"""Nth / last weekday of a month.

Weekdays here use the Sunday=0 convention of the stored settings, not
Python's Monday=0 `date.weekday()`.
"""

from __future__ import annotations

import calendar
from datetime import date, timedelta

from rsvp_window.models.schedule import Occurrence


def sunday_weekday(d: date) -> int:
    """Weekday of d with Sunday=0 ... Saturday=6."""
    return (d.weekday() + 1) % 7


def nth_weekday_of_month(year: int, month: int, weekday: int, n: Occurrence) -> date | None:
    """Return the nth occurrence of a weekday in a given month.

    Args:
        year: Calendar year.
        month: Calendar month (1-12).
        weekday: 0=Sunday, 6=Saturday.
        n: 1-based occurrence, or "last".

    Returns:
        The date, or None when the month has fewer than n such weekdays
        (e.g. a 5th Saturday). "last" always resolves.
    """
    if n == "last":
        return _last_weekday(year, month, weekday)

    days_in_month = calendar.monthrange(year, month)[1]
    count = 0
    for day in range(1, days_in_month + 1):
        d = date(year, month, day)
        if sunday_weekday(d) == weekday:
            count += 1
            if count == n:
                return d
    return None


def _last_weekday(year: int, month: int, weekday: int) -> date:
    """Return the last occurrence of a weekday in a given month."""
    last_day = date(year, month, calendar.monthrange(year, month)[1])
    days_back = (sunday_weekday(last_day) - weekday) % 7
    return last_day - timedelta(days=days_back)


def shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    """(year, month) moved by `offset` months, rolling the year as needed."""
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def candidate_game_dates(
    year: int, month: int, weekday: int, n: Occurrence, offsets: range,
) -> list[date]:
    """Game dates for each month offset from (year, month), skipping months without one."""
    dates: list[date] = []
    for offset in offsets:
        y, m = shift_month(year, month, offset)
        game_date = nth_weekday_of_month(y, m, weekday, n)
        if game_date is not None:
            dates.append(game_date)
    return dates
