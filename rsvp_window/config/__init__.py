"""Package settings: packaged YAML defaults with an optional user override."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from rsvp_window.exceptions import SettingsError

logger = logging.getLogger(__name__)


# --- Settings models ---


class DefaultAccessPeriod(BaseModel):
    """Signup window given to a freshly created organization."""

    enabled: bool = True
    start_day: int = 4          # Thursday
    start_hour: int = 12
    start_minute: int = 0
    end_day: int = 5            # Friday
    end_hour: int = 10
    end_minute: int = 0
    timezone: str = "Africa/Lagos"


class ScheduleSettings(BaseModel):
    default_timezone: str = "Africa/Lagos"
    default_recurrence: str = "weekly"
    default_game_day: int = 0               # Sunday
    default_monthly_occurrence: int | str = 1
    default_access_period: DefaultAccessPeriod = Field(default_factory=DefaultAccessPeriod)


class DisplaySettings(BaseModel):
    relative_cutoff_days: int = Field(default=7, ge=1)  # countdowns at/after this switch to "Feb 3"
    closed_prefix: str = "RSVP is closed."


class Settings(BaseModel):
    """Root of the settings tree."""

    schedule: ScheduleSettings = Field(default_factory=ScheduleSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


# --- Loading ---

_DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"
_USER_CONFIG_PATH = Path.home() / ".rsvp_window" / "config.yaml"

_cached_settings: Settings | None = None


def _read_layer(path: Path) -> dict:
    """One YAML settings layer; an empty file is an empty layer."""
    with open(path) as f:
        layer = yaml.safe_load(f)
    if layer is None:
        return {}
    if not isinstance(layer, dict):
        raise SettingsError(path, f"expected a mapping at top level, got {type(layer).__name__}")
    return layer


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge `override` onto a copy of `base`; nested sections merge key by key."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        merged[key] = (
            _deep_merge(current, value)
            if isinstance(current, dict) and isinstance(value, dict)
            else value
        )
    return merged


def load_settings(
    user_config_path: Path | None = None,
    _force_reload: bool = False,
) -> Settings:
    """Packaged defaults.yaml, overlaid with the user's config.yaml when it exists.

    Args:
        user_config_path: User layer to read instead of ~/.rsvp_window/config.yaml.
        _force_reload: Ignore the cached instance (tests).

    Raises:
        SettingsError: the user layer is not a mapping or holds invalid values.
    """
    global _cached_settings
    if _cached_settings is None or _force_reload:
        user_path = user_config_path or _USER_CONFIG_PATH
        merged = _read_layer(_DEFAULTS_PATH)
        if user_path.exists():
            merged = _deep_merge(merged, _read_layer(user_path))
            logger.debug("Settings overridden from %s", user_path)
        try:
            _cached_settings = Settings.model_validate(merged)
        except ValidationError as e:
            raise SettingsError(user_path, str(e)) from e
    return _cached_settings


def get_settings() -> Settings:
    """Cached settings; the first call loads them."""
    return load_settings()


def reset_settings() -> None:
    """Drop the cached settings so the next access reloads from disk."""
    global _cached_settings
    _cached_settings = None
