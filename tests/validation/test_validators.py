"""
Tests for the rule predicates in shared.utils.validators.
"""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum

import pytest

from shared.utils.validators import (
    decimal_places,
    has_max_decimal_places,
    is_at_least,
    is_boolean,
    is_enum_member,
    is_length_between,
    is_not_empty,
    is_number,
    is_string,
    is_uuid,
    parse_date,
    parse_decimal,
)


class Unit(str, Enum):
    FLAT = "FLAT"
    PERCENT = "PERCENT"


class TestTypeValidators:
    """Type checks."""

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_values(self, value):
        assert is_not_empty(value) is False

    @pytest.mark.parametrize("value", ["  ", 0, False, [], "x"])
    def test_non_empty_values(self, value):
        assert is_not_empty(value) is True

    def test_is_string(self):
        assert is_string("abc")
        assert not is_string(123)

    def test_is_boolean_rejects_truthy_values(self):
        assert is_boolean(False)
        assert not is_boolean(0)
        assert not is_boolean("true")

    @pytest.mark.parametrize("value", [0, 3, 1.5, Decimal("2.25")])
    def test_is_number_accepts_finite_numbers(self, value):
        assert is_number(value)

    @pytest.mark.parametrize(
        "value",
        [
            True,
            "3",
            None,
            float("nan"),
            float("inf"),
            Decimal("Infinity"),
            Decimal("sNaN"),
            10**400,
            Decimal("1e400"),
        ],
    )
    def test_is_number_rejects_others(self, value):
        assert not is_number(value)


class TestUuidValidator:
    """Canonical UUID format."""

    def test_accepts_any_version_and_case(self):
        assert is_uuid("3f2b8c9e-1d4a-4f6b-9c3e-2a1b0c9d8e7f")
        assert is_uuid("3F2B8C9E-1D4A-1F6B-9C3E-2A1B0C9D8E7F")
        assert is_uuid("00000000-0000-0000-0000-000000000000")

    @pytest.mark.parametrize(
        "value",
        [
            "not-a-uuid",
            "3f2b8c9e1d4a4f6b9c3e2a1b0c9d8e7f",
            "{3f2b8c9e-1d4a-4f6b-9c3e-2a1b0c9d8e7f}",
            "3f2b8c9e-1d4a-4f6b-9c3e-2a1b0c9d8e7",
            "3f2b8c9e-1d4a-4f6b-9c3e-2a1b0c9d8e7f ",
            "zf2b8c9e-1d4a-4f6b-9c3e-2a1b0c9d8e7f",
            42,
        ],
    )
    def test_rejects_malformed(self, value):
        assert not is_uuid(value)


class TestLengthValidator:
    """Inclusive length bounds."""

    def test_bounds_are_inclusive(self):
        assert is_length_between("abc", 3, 20)
        assert is_length_between("A" * 20, 3, 20)

    def test_outside_bounds(self):
        assert not is_length_between("ab", 3, 20)
        assert not is_length_between("A" * 21, 3, 20)

    def test_whitespace_counts(self):
        assert is_length_between("  a", 3, None)
        assert not is_length_between(" a ", None, 2)


class TestNumericValidators:
    """Precision and lower bounds."""

    @pytest.mark.parametrize(
        "value, places",
        [
            (10, 0),
            (10.0, 0),
            (10.1, 1),
            (10.12, 2),
            (10.123, 3),
            (0.05, 2),
            (1e-05, 5),
            (Decimal("10.10"), 1),
            (Decimal("100"), 0),
        ],
    )
    def test_decimal_places(self, value, places):
        assert decimal_places(value) == places

    def test_has_max_decimal_places(self):
        assert has_max_decimal_places(10.12, 2)
        assert not has_max_decimal_places(10.123, 2)

    def test_is_at_least_compares_exactly(self):
        assert is_at_least(0.1, 0.1)
        assert is_at_least(Decimal("0.1"), 0.1)
        assert not is_at_least(0.05, 0.1)
        assert is_at_least(0, 0)
        assert not is_at_least(-0.01, 0)

    def test_parse_decimal(self):
        assert parse_decimal(" 12.50 ") == Decimal("12.50")
        assert parse_decimal("abc") is None
        assert parse_decimal("") is None
        assert parse_decimal("NaN") is None


class TestEnumValidator:
    """Exact enum membership."""

    def test_members(self):
        assert is_enum_member("FLAT", Unit)
        assert is_enum_member(Unit.PERCENT, Unit)

    @pytest.mark.parametrize("value", ["PERCENTAGE", "flat", "", 1, None])
    def test_non_members(self, value):
        assert not is_enum_member(value, Unit)


class TestParseDate:
    """Calendar date parsing."""

    def test_date_only_string_is_midnight_utc(self):
        parsed = parse_date("2030-12-31")
        assert parsed == datetime(2030, 12, 31, tzinfo=timezone.utc)

    def test_zulu_suffix(self):
        parsed = parse_date("2030-12-31T23:59:00Z")
        assert parsed == datetime(2030, 12, 31, 23, 59, tzinfo=timezone.utc)

    def test_fractional_seconds(self):
        parsed = parse_date("2030-08-31T23:59:59.5+00:00")
        assert parsed == datetime(
            2030, 8, 31, 23, 59, 59, 500000, tzinfo=timezone.utc
        )

    def test_offset_is_kept(self):
        parsed = parse_date("2030-01-01T10:00:00+02:00")
        assert parsed.utcoffset() == timedelta(hours=2)

    def test_date_and_datetime_objects(self):
        assert parse_date(date(2030, 1, 2)) == datetime(
            2030, 1, 2, tzinfo=timezone.utc
        )
        aware = datetime(2030, 1, 2, 3, tzinfo=timezone.utc)
        assert parse_date(aware) is aware

    @pytest.mark.parametrize(
        "value",
        [
            "2024-02-30",
            "2030-13-01",
            "tomorrow",
            "",
            1700000000,
            "1700000000",
            True,
            None,
        ],
    )
    def test_invalid(self, value):
        assert parse_date(value) is None
