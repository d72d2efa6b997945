"""Pydantic models for organizer schedule configuration.

These are the ingestion boundary: raw settings documents (camelCase JSON as
stored by the web app, or snake_case YAML) are validated and given their
defaults here, once, so the evaluators never probe optional fields.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from rsvp_window.config import get_settings
from rsvp_window.exceptions import ScheduleConfigError

Occurrence = int | Literal["last"]


class Recurrence(StrEnum):
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class _CamelModel(BaseModel):
    """Accepts both `startDay` and `start_day` keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _schedule_defaults():
    return get_settings().schedule


class AccessPeriodConfig(_CamelModel):
    """Weekly signup window: weekday (Sunday=0) plus wall-clock time in `timezone`.

    For monthly recurrence the weekdays are read relative to the game day
    (always on or before it), not as absolute week positions.
    """

    enabled: bool = False
    start_day: int = Field(default_factory=lambda: _schedule_defaults().default_access_period.start_day, ge=0, le=6)
    start_hour: int = Field(default_factory=lambda: _schedule_defaults().default_access_period.start_hour, ge=0, le=23)
    start_minute: int = Field(default_factory=lambda: _schedule_defaults().default_access_period.start_minute, ge=0, le=59)
    end_day: int = Field(default_factory=lambda: _schedule_defaults().default_access_period.end_day, ge=0, le=6)
    end_hour: int = Field(default_factory=lambda: _schedule_defaults().default_access_period.end_hour, ge=0, le=23)
    end_minute: int = Field(default_factory=lambda: _schedule_defaults().default_access_period.end_minute, ge=0, le=59)
    timezone: str | None = None

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, v: str | None) -> str | None:
        if v is None or v == "":
            return None
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"unknown IANA timezone {v!r}") from e
        return v


class GameInfoConfig(_CamelModel):
    """When the recurring event itself happens."""

    recurrence: Recurrence = Field(default_factory=lambda: Recurrence(_schedule_defaults().default_recurrence))
    game_day: int = Field(default_factory=lambda: _schedule_defaults().default_game_day, ge=0, le=6)
    monthly_occurrence: Occurrence = Field(
        default_factory=lambda: _schedule_defaults().default_monthly_occurrence,
    )
    # Game start/end times only feed the cycle timeline.
    start_hour: int = Field(default=0, ge=0, le=23)
    start_minute: int = Field(default=0, ge=0, le=59)
    end_hour: int = Field(default=0, ge=0, le=23)
    end_minute: int = Field(default=0, ge=0, le=59)

    @field_validator("recurrence", mode="before")
    @classmethod
    def _blank_recurrence(cls, v: Any) -> Any:
        if v is None or v == "":
            return _schedule_defaults().default_recurrence
        return v

    @field_validator("monthly_occurrence")
    @classmethod
    def _check_occurrence(cls, v: Occurrence) -> Occurrence:
        if v != "last" and not 1 <= v <= 4:
            raise ValueError("monthly_occurrence must be 1-4 or 'last'")
        return v


class OrgSchedule(_CamelModel):
    """An organization's full recurrence configuration."""

    access_period: AccessPeriodConfig | None = None
    game_info: GameInfoConfig = Field(default_factory=GameInfoConfig)

    @field_validator("game_info", mode="before")
    @classmethod
    def _missing_game_info(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def timezone(self) -> str:
        """Configured zone, falling back to the package default."""
        if self.access_period is not None and self.access_period.timezone:
            return self.access_period.timezone
        return _schedule_defaults().default_timezone


def resolve_schedule(raw: OrgSchedule | Mapping[str, Any] | None) -> OrgSchedule:
    """Validate a raw settings document into an OrgSchedule.

    None and empty mappings yield the all-defaults schedule (weekly,
    Sunday game, no access window).

    Raises:
        ScheduleConfigError: a field is out of range or of the wrong type.
    """
    if isinstance(raw, OrgSchedule):
        return raw
    try:
        return OrgSchedule.model_validate(dict(raw or {}))
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ScheduleConfigError(details, errors=e.errors()) from e


def default_schedule(timezone: str | None = None) -> OrgSchedule:
    """Schedule given to a newly created organization."""
    period = _schedule_defaults().default_access_period.model_dump()
    if timezone:
        period["timezone"] = timezone
    return resolve_schedule({"access_period": period})
