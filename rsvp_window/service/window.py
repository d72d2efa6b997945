"""AccessWindowService: the engine behind an injectable clock."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from rsvp_window.formatting import TimeFormatter
from rsvp_window.models.schedule import OrgSchedule, resolve_schedule
from rsvp_window.models.window import CycleCheck, CycleTimeline, WindowResult

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AccessWindowService:
    """Window status, period ids and once-per-cycle checks for request handlers and jobs.

    The only component that reads the clock; pass `clock` to pin "now".
    """

    def __init__(self, clock: Clock | None = None, formatter: TimeFormatter | None = None) -> None:
        self.clock = clock or utc_now
        self.formatter = formatter or TimeFormatter()

    def status(self, schedule: OrgSchedule | Mapping[str, Any] | None) -> WindowResult:
        """Is the signup form open right now."""
        from rsvp_window.recurrence.window import is_form_open

        return is_form_open(schedule, self.clock(), self.formatter)

    def period_id(
        self, schedule: OrgSchedule | Mapping[str, Any] | None, timezone: str | None = None,
    ) -> str:
        """Id of the current recurrence cycle."""
        from rsvp_window.recurrence.period import current_period_id

        return current_period_id(schedule, self.clock(), timezone)

    def countdown(self, result: WindowResult) -> str | None:
        """Countdown (e.g. "in 3d 5h") until the window next opens; None when open."""
        if result.is_open or result.next_open_time is None:
            return None
        return self.formatter.relative(result.next_open_time, self.clock())

    def timeline(self, schedule: OrgSchedule | Mapping[str, Any] | None) -> CycleTimeline:
        """Dated cycle events around the next game."""
        from rsvp_window.recurrence.timeline import cycle_timeline

        return cycle_timeline(schedule, self.clock())

    def needs_reset(
        self, schedule: OrgSchedule | Mapping[str, Any] | None, last_reset: str | None,
    ) -> CycleCheck:
        """Whether the signup list should be archived and reset now.

        Resets happen once per cycle, on the first check after the window
        has opened for a cycle other than `last_reset`.
        """
        from rsvp_window.recurrence.period import current_period_id
        from rsvp_window.recurrence.window import is_form_open

        schedule = resolve_schedule(schedule)
        now = self.clock()
        window = is_form_open(schedule, now, self.formatter)
        period_id = current_period_id(schedule, now)

        enabled = schedule.access_period is not None and schedule.access_period.enabled
        needs_reset = enabled and window.is_open and last_reset != period_id
        if needs_reset:
            logger.info("Cycle changed %s -> %s; reset due", last_reset, period_id)
        return CycleCheck(
            needs_reset=needs_reset,
            period_id=period_id,
            previous_period_id=last_reset,
            window=window,
        )

    def already_handled(
        self, schedule: OrgSchedule | Mapping[str, Any] | None, last_period_id: str | None,
    ) -> bool:
        """True when a once-per-cycle action (e.g. the digest email) already ran this cycle."""
        return last_period_id is not None and last_period_id == self.period_id(schedule)
