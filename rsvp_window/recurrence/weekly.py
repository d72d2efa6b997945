"""Weekly access window: a fixed weekday/time span repeating every 7 days."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from rsvp_window.formatting import TimeFormatter
from rsvp_window.models.schedule import AccessPeriodConfig, GameInfoConfig
from rsvp_window.models.window import WindowResult
from rsvp_window.recurrence._clock import resolve_zone, to_local, wall_to_instant
from rsvp_window.recurrence._nth_weekday import sunday_weekday

logger = logging.getLogger(__name__)

MINUTES_PER_DAY = 24 * 60
MINUTES_PER_WEEK = 7 * MINUTES_PER_DAY


def week_minutes(day: int, hour: int, minute: int) -> int:
    """Minutes since Sunday 00:00, in [0, 10080)."""
    return day * MINUTES_PER_DAY + hour * 60 + minute


def in_weekly_window(current: int, start: int, end: int) -> bool:
    """Half-open membership; start > end means the window wraps past Saturday night."""
    if start <= end:
        return start <= current < end
    return current >= start or current < end


def evaluate_weekly_window(
    access: AccessPeriodConfig,
    game_info: GameInfoConfig | None,
    now: datetime,
    formatter: TimeFormatter | None = None,
) -> WindowResult:
    """Open/closed status of a weekly window at `now`.

    Args:
        access: Window boundaries, read as absolute weekday/time positions.
        game_info: Recurrence context (only used for diagnostics here).
        now: Timezone-aware instant to evaluate.
        formatter: Message/instant formatter. Default: TimeFormatter().

    Returns:
        WindowResult. `next_open_time` is set only when closed; `close_time`
        is the upcoming close when open, the most recent close otherwise.
    """
    fmt = formatter or TimeFormatter()
    tz = resolve_zone(access.timezone)
    local = to_local(now, tz)
    today = local.date()
    current_day = sunday_weekday(today)
    now_hm = (local.hour, local.minute)

    current = week_minutes(current_day, local.hour, local.minute)
    start = week_minutes(access.start_day, access.start_hour, access.start_minute)
    end = week_minutes(access.end_day, access.end_hour, access.end_minute)
    is_open = in_weekly_window(current, start, end)

    logger.debug(
        "Weekly window %d-%d (game day %s), local minute %d -> %s",
        start, end, game_info.game_day if game_info else None, current,
        "open" if is_open else "closed",
    )

    message = None
    next_open_time = None
    if not is_open:
        message = fmt.weekly_closed_message(access.start_day, access.start_hour, access.start_minute)
        days_until = access.start_day - current_day
        if days_until < 0 or (days_until == 0 and now_hm >= (access.start_hour, access.start_minute)):
            days_until += 7
        opens = wall_to_instant(
            today + timedelta(days=days_until), access.start_hour, access.start_minute, tz,
        )
        next_open_time = fmt.instant(opens)

    # Close of the current window when open, of the last elapsed one when closed
    end_hm = (access.end_hour, access.end_minute)
    days_to_close = access.end_day - current_day
    if is_open:
        if days_to_close < 0:
            days_to_close += 7
        if days_to_close == 0 and now_hm >= end_hm:
            days_to_close += 7
    else:
        if days_to_close > 0:
            days_to_close -= 7
        if days_to_close == 0 and now_hm < end_hm:
            days_to_close -= 7
    closes = wall_to_instant(
        today + timedelta(days=days_to_close), access.end_hour, access.end_minute, tz,
    )

    return WindowResult(
        is_open=is_open,
        message=message,
        next_open_time=next_open_time,
        close_time=fmt.instant(closes),
    )
