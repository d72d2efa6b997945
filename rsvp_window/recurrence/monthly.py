"""Monthly access window anchored to the nth (or last) weekday of each month.

The configured start/end weekdays are offsets from the game day, always
falling on or before it: with a Saturday game, a Wednesday start means
"3 days before the game", never "4 days after".
"""

from __future__ import annotations

import logging
from datetime import date, datetime, time, timedelta

from rsvp_window.formatting import TimeFormatter
from rsvp_window.models.schedule import AccessPeriodConfig, GameInfoConfig
from rsvp_window.models.window import WindowResult
from rsvp_window.recurrence._clock import local_to_instant, resolve_zone, to_local
from rsvp_window.recurrence._nth_weekday import candidate_game_dates

logger = logging.getLogger(__name__)

# Month offsets from the current local month
_WINDOW_SPAN = range(-1, 2)
_EXTENDED_SPAN = range(2, 4)


def days_before_game(weekday: int, game_day: int) -> int:
    """Offset of `weekday` from the game day, normalized into (-7, 0]."""
    offset = weekday - game_day
    if offset > 0:
        offset -= 7
    return offset


def monthly_window_bounds(
    game_date: date, access: AccessPeriodConfig, game_day: int,
) -> tuple[datetime, datetime]:
    """Local (naive) open and close of the window leading up to `game_date`."""
    opens = datetime.combine(
        game_date + timedelta(days=days_before_game(access.start_day, game_day)),
        time(access.start_hour, access.start_minute),
    )
    closes = datetime.combine(
        game_date + timedelta(days=days_before_game(access.end_day, game_day)),
        time(access.end_hour, access.end_minute),
    )
    # Equal bounds stay a zero-length window that never opens, as in weekly.py
    if opens > closes:
        closes += timedelta(days=7)
    return opens, closes


def evaluate_monthly_window(
    access: AccessPeriodConfig,
    game_info: GameInfoConfig,
    now: datetime,
    formatter: TimeFormatter | None = None,
) -> WindowResult:
    """Open/closed status of the monthly window at `now`.

    Candidate game dates are last month's, this month's and next month's
    occurrence (months lacking the occurrence are skipped). The first
    window containing `now` wins; otherwise the earliest future open and
    the latest elapsed close are reported.
    """
    fmt = formatter or TimeFormatter()
    tz = resolve_zone(access.timezone)
    local = to_local(now, tz)
    game_day = game_info.game_day
    occurrence = game_info.monthly_occurrence

    candidates = candidate_game_dates(local.year, local.month, game_day, occurrence, _WINDOW_SPAN)
    windows = [monthly_window_bounds(gd, access, game_day) for gd in candidates]

    most_recent_close: datetime | None = None
    for game_date, (opens, closes) in zip(candidates, windows):
        if opens <= local < closes:
            logger.debug("Monthly window open for game on %s (closes %s local)", game_date, closes)
            return WindowResult(
                is_open=True,
                close_time=fmt.instant(local_to_instant(closes, tz)),
            )
        if closes <= local and (most_recent_close is None or closes > most_recent_close):
            most_recent_close = closes

    next_open = next((opens for opens, _ in windows if opens > local), None)
    if next_open is None:
        logger.debug("No future monthly open within +1 month of %s; searching further ahead", local)
        for game_date in candidate_game_dates(local.year, local.month, game_day, occurrence, _EXTENDED_SPAN):
            opens, _ = monthly_window_bounds(game_date, access, game_day)
            if opens > local:
                next_open = opens
                break

    return WindowResult(
        is_open=False,
        message=fmt.monthly_closed_message(occurrence, game_day),
        next_open_time=fmt.instant(local_to_instant(next_open, tz)) if next_open else None,
        close_time=fmt.instant(local_to_instant(most_recent_close, tz)) if most_recent_close else None,
    )
