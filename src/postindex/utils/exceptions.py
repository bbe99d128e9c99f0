"""Exceptions raised by the shared utilities."""

from __future__ import annotations

from postindex.exceptions import PostIndexError


class DateTimeError(PostIndexError):
    """Base exception for date and time handling."""


class InvalidDateTimeInputError(DateTimeError):
    """Raised when the input cannot be interpreted as a date at all."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid datetime input '{value}': {reason}")


class DateTimeParsingError(DateTimeError):
    """Raised when a string does not parse as a datetime."""

    def __init__(self, value: str, original_exception: Exception) -> None:
        self.value = value
        self.original_exception = original_exception
        super().__init__(f"Failed to parse datetime from '{value}': {original_exception}")


class DateExtractionError(DateTimeError):
    """Raised when a date cannot be extracted from a string."""

    def __init__(self, date_str: str, original_exception: Exception | None = None) -> None:
        self.date_str = date_str
        self.original_exception = original_exception
        message = f"Could not extract a valid date from '{self.date_str}'"
        if original_exception:
            message += f". Original error: {original_exception}"
        super().__init__(message)
