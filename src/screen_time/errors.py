"""Errors raised by tracker commands.

Every error is a user-facing precondition failure; adapters catch
``ScreenTimeError`` and show ``str(exc)``.
"""

from __future__ import annotations


class ScreenTimeError(Exception):
    """Base class for recoverable tracker errors."""

    default_message = "Screen time command failed."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class AlreadyTrackingError(ScreenTimeError):
    default_message = "Tracking is already in progress!"


class NotTrackingError(ScreenTimeError):
    default_message = "No active tracking session."


class EmptyLogError(ScreenTimeError):
    default_message = "No usage data to export."


class ExportError(ScreenTimeError):
    default_message = "Error exporting the usage log."
