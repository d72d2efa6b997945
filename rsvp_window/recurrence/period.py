"""Period identifiers: one stable key per recurrence cycle.

A cycle ends at local midnight after the game day. Callers store the id
of the last cycle they archived/reset/emailed and compare it with the
current one, so these functions must be pure in (config, now).

Formats:
    weekly   2026-W05       (week number of the cycle's game date)
    monthly  2026-M02-2SAT  (month of the cycle's game date, occurrence, weekday)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from datetime import date, datetime, time, timedelta
from typing import Any

from rsvp_window.formatting import DAY_CODES
from rsvp_window.models.schedule import GameInfoConfig, OrgSchedule, Recurrence, resolve_schedule
from rsvp_window.recurrence._clock import resolve_zone, to_local
from rsvp_window.recurrence._nth_weekday import (
    candidate_game_dates,
    nth_weekday_of_month,
    shift_month,
    sunday_weekday,
)

logger = logging.getLogger(__name__)

# previous, current, next, next-plus-one month
_PERIOD_SPAN = range(-1, 3)
_FALLBACK_OFFSET = 3


def week_number(d: date) -> int:
    """Sunday-started week of the year: Jan 1 falls in week 1."""
    jan1 = date(d.year, 1, 1)
    days = (d - jan1).days
    return math.ceil((days + sunday_weekday(jan1) + 1) / 7)


def weekly_period_id(game_info: GameInfoConfig, now: datetime, timezone: str | None = None) -> str:
    """Weekly cycle id; rolls over at local midnight the day after game day."""
    local = to_local(now, resolve_zone(timezone))
    today = local.date()

    reset_day = (game_info.game_day + 1) % 7
    days_since_reset = (sunday_weekday(today) - reset_day) % 7
    period_start = today - timedelta(days=days_since_reset)
    game_date = period_start + timedelta(days=6)

    return f"{game_date.year}-W{week_number(game_date):02d}"


def monthly_period_id(game_info: GameInfoConfig, now: datetime, timezone: str | None = None) -> str:
    """Monthly cycle id, keyed by the nearest game date whose reset is still ahead."""
    local = to_local(now, resolve_zone(timezone))
    game_day = game_info.game_day
    occurrence = game_info.monthly_occurrence

    game_date = None
    for candidate in candidate_game_dates(local.year, local.month, game_day, occurrence, _PERIOD_SPAN):
        reset_moment = datetime.combine(candidate + timedelta(days=1), time.min)
        if local < reset_moment:
            game_date = candidate
            break

    if game_date is None:
        y, m = shift_month(local.year, local.month, _FALLBACK_OFFSET)
        logger.warning(
            "All monthly candidates already reset at %s; falling back to %d-%02d", local, y, m,
        )
        game_date = nth_weekday_of_month(y, m, game_day, occurrence)
        if game_date is None:
            raise ValueError(f"No occurrence {occurrence!r} of weekday {game_day} in {y}-{m:02d}")

    occ_code = "L" if occurrence == "last" else str(occurrence)
    return f"{game_date.year}-M{game_date.month:02d}-{occ_code}{DAY_CODES[game_day]}"


def current_period_id(
    schedule: OrgSchedule | Mapping[str, Any] | None,
    now: datetime,
    timezone: str | None = None,
) -> str:
    """Period id for the schedule's recurrence (weekly when unset).

    Args:
        schedule: OrgSchedule or raw settings document; None means all defaults.
        now: Timezone-aware instant.
        timezone: Zone override. Default: the access period's zone, then
            the configured default zone.
    """
    schedule = resolve_schedule(schedule)
    tz_name = timezone or schedule.timezone
    game_info = schedule.game_info

    if game_info.recurrence == Recurrence.MONTHLY:
        period_id = monthly_period_id(game_info, now, tz_name)
    else:
        period_id = weekly_period_id(game_info, now, tz_name)
    logger.debug("Period id at %s (%s, %s): %s", now, game_info.recurrence, tz_name, period_id)
    return period_id
