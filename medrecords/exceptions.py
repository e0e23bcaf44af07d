"""
Error taxonomy for record operations.

Every error carries:
- type:    error kind (validation_error / busy / fetch_error / remote_error / transport_error)
- code:    machine-readable code (PATIENT_NAME_REQUIRED / SAVE_IN_PROGRESS / ...)
- message: human-readable description
- detail:  optional extra info (dict / str / None)

Operations only raise; the GUI controller catches at the action boundary
and turns the error into a notification. Nothing is retried automatically.
"""

from typing import Any, Optional

from .config import get_settings


class RecordsError(Exception):
    """Base class for all record operation errors."""

    type = 'error'
    code = 'UNKNOWN_ERROR'
    retry_hint = False

    def __init__(self, message: str, code: Optional[str] = None, detail: Any = None):
        self.message = message
        if code is not None:
            self.code = code
        self.detail = detail
        super().__init__(message)

    @property
    def user_message(self) -> str:
        """Notification text; remote failures ask for a manual retry."""
        if self.retry_hint:
            return f"{self.message}\n\n{get_settings().retry_hint}"
        return self.message


class ValidationError(RecordsError):
    """A required field is missing. Raised before any network call."""

    type = 'validation_error'
    code = 'VALIDATION_ERROR'


class Busy(RecordsError):
    """A save is already outstanding; the trigger should be disabled, not queued."""

    type = 'busy'
    code = 'SAVE_IN_PROGRESS'


class TransportError(RecordsError):
    """The request never produced a response (unreachable host, reset, ...)."""

    type = 'transport_error'
    code = 'TRANSPORT_ERROR'
    retry_hint = True


class RemoteError(RecordsError):
    """The server answered with a non-2xx status."""

    type = 'remote_error'
    code = 'REMOTE_ERROR'
    retry_hint = True

    def __init__(self, message: str, status_code: Optional[int] = None, body: Optional[str] = None,
                 code: Optional[str] = None, detail: Any = None):
        self.status_code = status_code
        self.body = body or "Server error"
        super().__init__(message, code=code, detail=detail)


class FetchError(RecordsError):
    """Reading the collection failed. The snapshot was left unchanged."""

    type = 'fetch_error'
    code = 'FETCH_FAILED'
    retry_hint = True
