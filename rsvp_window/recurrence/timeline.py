"""Next game date and the dated Opens -> Closes -> Game Starts -> Game Ends cycle."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time, timedelta
from typing import Any

from rsvp_window.models.schedule import OrgSchedule, Recurrence, resolve_schedule
from rsvp_window.models.window import CycleTimeline, TimelineEvent, TimelineEventType
from rsvp_window.recurrence._clock import resolve_zone, to_local
from rsvp_window.recurrence._nth_weekday import candidate_game_dates, sunday_weekday
from rsvp_window.recurrence.monthly import days_before_game


def next_game_date(schedule: OrgSchedule | Mapping[str, Any] | None, now: datetime) -> date | None:
    """Local date of the next game whose start time has not passed.

    Monthly schedules look at this month and the two after it; None if
    none of them has the configured occurrence still ahead.
    """
    schedule = resolve_schedule(schedule)
    game = schedule.game_info
    local = to_local(now, resolve_zone(schedule.timezone))
    kickoff = time(game.start_hour, game.start_minute)

    if game.recurrence == Recurrence.MONTHLY:
        for candidate in candidate_game_dates(
            local.year, local.month, game.game_day, game.monthly_occurrence, range(0, 3),
        ):
            if datetime.combine(candidate, kickoff) > local:
                return candidate
        return None

    today = local.date()
    days_until = (game.game_day - sunday_weekday(today)) % 7
    if days_until == 0 and local >= datetime.combine(today, kickoff):
        days_until = 7
    return today + timedelta(days=days_until)


def cycle_timeline(schedule: OrgSchedule | Mapping[str, Any] | None, now: datetime) -> CycleTimeline:
    """The recurring cycle in logical order, dated against the next game.

    RSVP open/close never fall after the game day. Without an access
    period only the game events are listed.
    """
    schedule = resolve_schedule(schedule)
    game = schedule.game_info
    access = schedule.access_period
    game_date = next_game_date(schedule, now)

    def _dated(offset: int) -> date | None:
        return game_date + timedelta(days=offset) if game_date else None

    events: list[TimelineEvent] = []
    if access is not None:
        events.append(TimelineEvent(
            event_type=TimelineEventType.RSVP_OPENS, label="RSVP Opens",
            weekday=access.start_day, hour=access.start_hour, minute=access.start_minute,
            date=_dated(days_before_game(access.start_day, game.game_day)),
        ))
        events.append(TimelineEvent(
            event_type=TimelineEventType.RSVP_CLOSES, label="RSVP Closes",
            weekday=access.end_day, hour=access.end_hour, minute=access.end_minute,
            date=_dated(days_before_game(access.end_day, game.game_day)),
        ))
    events.append(TimelineEvent(
        event_type=TimelineEventType.GAME_STARTS, label="Game Starts",
        weekday=game.game_day, hour=game.start_hour, minute=game.start_minute,
        date=game_date,
    ))
    events.append(TimelineEvent(
        event_type=TimelineEventType.GAME_ENDS, label="Game Ends",
        weekday=game.game_day, hour=game.end_hour, minute=game.end_minute,
        date=game_date,
    ))
    return CycleTimeline(next_game_date=game_date, events=events)
