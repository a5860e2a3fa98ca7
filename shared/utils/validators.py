"""
Validation utilities for mutation arguments: type checks, format checks,
length and numeric bounds, enum membership and date parsing.
"""

import math
import re
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional, Type

from pydantic import TypeAdapter, ValidationError

UUID_PATTERN = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)

_DATETIME_ADAPTER = TypeAdapter(datetime)

# =============================================================================
# TYPE VALIDATORS
# =============================================================================


def is_not_empty(value: Any) -> bool:
    """
    Checks that a value was actually supplied.

    Only ``None`` and the empty string count as empty; whitespace, ``0``
    and ``False`` are real values.

    Example:
        >>> is_not_empty("  ")
        True
        >>> is_not_empty("")
        False
    """
    if value is None:
        return False
    return not (isinstance(value, str) and value == "")


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_number(value: Any) -> bool:
    """
    Validates that a value is a finite number.

    Booleans are rejected even though ``bool`` subclasses ``int``, and so
    are NaN, infinities and values too large to be represented as a float
    (``10**400``, ``Decimal("1e400")``).

    Args:
        value (Any): Value to validate

    Returns:
        bool: True for finite int, float or Decimal values

    Example:
        >>> is_number(10.5)
        True
        >>> is_number(True)
        False
        >>> is_number(float("inf"))
        False
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    try:
        return math.isfinite(float(value))
    except (OverflowError, ValueError):
        return False


def is_uuid(value: Any) -> bool:
    """
    Validates the canonical 8-4-4-4-12 hexadecimal UUID form.

    Any version is accepted and case does not matter. Braced, URN and
    unhyphenated spellings are rejected.

    Example:
        >>> is_uuid("3f2b8c9e-1d4a-4f6b-9c3e-2a1b0c9d8e7f")
        True
        >>> is_uuid("not-a-uuid")
        False
    """
    return isinstance(value, str) and bool(UUID_PATTERN.fullmatch(value))


def is_enum_member(value: Any, enum_cls: Type[Enum]) -> bool:
    """
    Validates exact membership in an enum's declared values.

    Matching is case-sensitive: ``"flat"`` is not ``"FLAT"``.

    Args:
        value (Any): Value to validate
        enum_cls (Type[Enum]): Enum whose member values are allowed

    Returns:
        bool: True if value equals one of the member values
    """
    if isinstance(value, enum_cls):
        return True
    return any(
        type(value) is type(member.value) and value == member.value
        for member in enum_cls
    )


def is_datetime(value: Any) -> bool:
    return isinstance(value, datetime)


# =============================================================================
# LENGTH VALIDATORS
# =============================================================================


def is_length_between(
    text: str,
    min_len: Optional[int] = None,
    max_len: Optional[int] = None,
) -> bool:
    """
    Validates string length against inclusive bounds.

    Unlike form-style checks the text is not stripped, so surrounding
    whitespace counts towards the length.

    Args:
        text (str): Text to validate
        min_len (Optional[int]): Minimum allowed length, if any
        max_len (Optional[int]): Maximum allowed length, if any

    Returns:
        bool: True if the length is within the bounds

    Example:
        >>> is_length_between("abc", 3, 20)
        True
        >>> is_length_between("ab", 3, 20)
        False
    """
    length = len(text)
    if min_len is not None and length < min_len:
        return False
    if max_len is not None and length > max_len:
        return False
    return True


# =============================================================================
# NUMERIC VALIDATORS
# =============================================================================


def to_decimal(value: Any) -> Decimal:
    """
    Converts a number to Decimal through its shortest text form.

    Floats go through ``repr`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than the binary expansion.
    """
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def decimal_places(value: Any) -> int:
    """
    Counts the significant fractional digits of a number.

    Trailing zeros do not count: ``Decimal("10.10")`` has one place.

    Example:
        >>> decimal_places(10.12)
        2
        >>> decimal_places(10.123)
        3
        >>> decimal_places(7)
        0
    """
    exponent = to_decimal(value).normalize().as_tuple().exponent
    if not isinstance(exponent, int):
        return 0
    return max(0, -exponent)


def has_max_decimal_places(value: Any, places: int) -> bool:
    return decimal_places(value) <= places


def is_at_least(value: Any, minimum: Any) -> bool:
    """Inclusive lower bound, compared exactly in decimal."""
    return to_decimal(value) >= to_decimal(minimum)


# =============================================================================
# PARSERS
# =============================================================================


def parse_decimal(text: str) -> Optional[Decimal]:
    """
    Parses numeric text into a finite Decimal.

    Returns:
        Optional[Decimal]: The parsed value, or None when the text is not
        a finite number
    """
    try:
        parsed = Decimal(text.strip())
    except InvalidOperation:
        return None
    return parsed if parsed.is_finite() else None


def parse_date(value: Any) -> Optional[datetime]:
    """
    Parses a calendar date or timestamp into an aware datetime.

    Accepts ``datetime`` and ``date`` objects and ISO-8601 strings
    (``"2025-12-31"``, ``"2025-12-31T23:59:00Z"``). Naive values are taken
    as UTC. Impossible dates such as ``"2024-02-30"`` are rejected.
    Numeric input, including numeric text, is not read as epoch seconds.

    Args:
        value (Any): Value to parse

    Returns:
        Optional[datetime]: Aware datetime, or None if the value is not a
        valid date
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        text = value.strip()
        # epoch seconds are numbers, not dates
        if not text or parse_decimal(text) is not None:
            return None
        try:
            parsed = _DATETIME_ADAPTER.validate_python(text)
        except ValidationError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
