"""
Error taxonomy for fitroutine.

Every error raised on purpose is an AppError carrying an ErrorType and a
message fit to show an end user. handle_error() turns any exception into
an ErrorReport for display.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional


logger = logging.getLogger(__name__)


class ErrorType(Enum):
    VALIDATION = "VALIDATION_ERROR"
    STORAGE = "STORAGE_ERROR"
    GENERATION = "GENERATION_ERROR"
    UNKNOWN = "UNKNOWN_ERROR"


ERROR_MESSAGES = {
    ErrorType.VALIDATION: "Please verify that all fields are correctly filled out.",
    ErrorType.STORAGE: "Error saving or loading data. Please check that the progress file is writable.",
    ErrorType.GENERATION: "Error generating routine. Please try with different parameters.",
    ErrorType.UNKNOWN: "An unexpected error occurred. Please try again.",
}


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class AppError(Exception):
    """Base class for errors with a user-facing message."""

    def __init__(
        self,
        error_type: ErrorType,
        message: Optional[str] = None,
        original_error: Optional[BaseException] = None
    ):
        self.type = error_type
        self.message = message or ERROR_MESSAGES.get(error_type, ERROR_MESSAGES[ErrorType.UNKNOWN])
        self.original_error = original_error
        self.timestamp = _now_iso()
        super().__init__(self.message)


class InvalidSelectionError(AppError, ValueError):
    """Level, goal or day count does not resolve to a routine."""

    def __init__(self, field: str, value=None, message: Optional[str] = None):
        self.field = field
        self.value = value
        if message is None:
            message = f"Invalid {field}: {value!r}. Please check your selection."
        super().__init__(ErrorType.GENERATION, message)


class ValidationError(AppError, ValueError):
    """Form input failed validation. ``errors`` lists every problem found."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__(ErrorType.VALIDATION, ". ".join(self.errors))


class StorageError(AppError):
    """Progress file could not be written."""

    def __init__(self, message: Optional[str] = None, original_error: Optional[BaseException] = None):
        super().__init__(ErrorType.STORAGE, message, original_error)


@dataclass
class ErrorReport:
    type: ErrorType
    message: str
    context: str
    timestamp: str
    original_error: Optional[BaseException] = None


def handle_error(error: BaseException, context: str = '') -> ErrorReport:
    """
    Classify an exception and build a report for the user.

    AppErrors keep their own type and message. OSErrors are reported as
    storage problems; anything else is UNKNOWN with the generic message.
    """
    logger.error("Error in %s: %s", context or 'fitroutine', error)

    if isinstance(error, AppError):
        error_type = error.type
        message = error.message
    elif isinstance(error, OSError):
        error_type = ErrorType.STORAGE
        message = ERROR_MESSAGES[ErrorType.STORAGE]
    else:
        error_type = ErrorType.UNKNOWN
        message = ERROR_MESSAGES[ErrorType.UNKNOWN]

    return ErrorReport(
        type=error_type,
        message=message,
        context=context,
        timestamp=_now_iso(),
        original_error=error,
    )
