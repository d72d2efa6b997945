"""Typed exceptions for the configuration boundary."""

from pathlib import Path


class ScheduleConfigError(Exception):
    """Organizer schedule failed validation at ingestion."""

    def __init__(self, message: str, errors: list[dict] | None = None) -> None:
        self.errors = errors or []
        super().__init__(f"Invalid schedule configuration: {message}")


class UnknownTimezoneError(Exception):
    """IANA zone name not found in the tz database."""

    def __init__(self, timezone: str) -> None:
        self.timezone = timezone
        super().__init__(f"Unknown timezone: {timezone}")


class SettingsError(Exception):
    """A settings YAML layer could not be applied."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid settings file {path}: {reason}")
