"""Service facade for callers that own a clock."""

from rsvp_window.service.window import AccessWindowService

__all__ = ["AccessWindowService"]
