"""Date utilities for front-matter values."""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

from dateutil import parser as dateutil_parser

from postindex.utils.exceptions import (
    DateExtractionError,
    DateTimeParsingError,
    InvalidDateTimeInputError,
)

DATE_PATTERN = re.compile(r"(\d{4}-\d{2}-\d{2})")


def _to_datetime(value: Any) -> datetime:
    """Convert a value to a datetime without timezone normalization."""
    if value is None:
        raise InvalidDateTimeInputError("None", "Input value cannot be None")

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, datetime.min.time())

    raw = str(value).strip()
    if not raw:
        raise InvalidDateTimeInputError(str(value), "Input value cannot be an empty or whitespace-only string")

    try:
        return dateutil_parser.parse(raw)
    except (TypeError, ValueError, OverflowError) as e:
        raise DateTimeParsingError(raw, e) from e


def extract_clean_date(date_obj: str | date | datetime | None) -> date:
    """Extract the calendar date from front-matter input.

    Datetimes keep their own calendar day; no timezone conversion is applied,
    so ``2025-04-07T23:30:00-05:00`` stays on the 7th.
    """
    if isinstance(date_obj, datetime):
        return date_obj.date()
    if isinstance(date_obj, date):
        return date_obj

    date_str = str(date_obj).strip()
    match = DATE_PATTERN.search(date_str)
    if not match:
        raise DateExtractionError(date_str)

    try:
        return _to_datetime(match.group(1)).date()
    except (DateTimeParsingError, InvalidDateTimeInputError) as e:
        raise DateExtractionError(date_str, e) from e


__all__ = ["DATE_PATTERN", "extract_clean_date"]
