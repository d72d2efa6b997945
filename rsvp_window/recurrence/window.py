"""Route an organization's schedule to the weekly or monthly window evaluator."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from rsvp_window.formatting import TimeFormatter
from rsvp_window.models.schedule import OrgSchedule, Recurrence, resolve_schedule
from rsvp_window.models.window import WindowResult
from rsvp_window.recurrence.monthly import evaluate_monthly_window
from rsvp_window.recurrence.weekly import evaluate_weekly_window

logger = logging.getLogger(__name__)


def is_form_open(
    schedule: OrgSchedule | Mapping[str, Any] | None,
    now: datetime,
    formatter: TimeFormatter | None = None,
) -> WindowResult:
    """Whether signups are accepted at `now`.

    A missing or disabled access period means signups are always open.
    """
    schedule = resolve_schedule(schedule)
    access = schedule.access_period
    if access is None or not access.enabled:
        return WindowResult(is_open=True)

    game_info = schedule.game_info
    logger.debug("Evaluating %s access window at %s", game_info.recurrence, now)
    if game_info.recurrence == Recurrence.MONTHLY:
        return evaluate_monthly_window(access, game_info, now, formatter)
    return evaluate_weekly_window(access, game_info, now, formatter)
