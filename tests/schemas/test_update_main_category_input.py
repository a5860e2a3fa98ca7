"""
Tests for parsing UpdateMainCategoryInput arguments.
"""

import pytest
from pydantic import ValidationError

from category_service.schemas.main_category import UpdateMainCategoryInput
from category_service.services.main_category import (
    parse_update_main_category_input,
)
from shared.core.exceptions import InputValidationError
from shared.validation import ViolationKind
from tests.utils.assertions import violation_pairs


class TestParseUpdateMainCategoryInput:
    """Optional-field update keyed by a mandatory UUID."""

    def test_all_fields_valid(self, main_category_update):
        update = parse_update_main_category_input(main_category_update)

        assert isinstance(update, UpdateMainCategoryInput)
        assert update.name == "Electronics"
        assert update.is_active is True
        assert update.order == 2
        assert update.seo_keywords == "phones,laptops"
        assert update.model_dump(by_alias=True, exclude_unset=True).keys() == (
            main_category_update.keys()
        )

    def test_id_only_yields_id_only(self, category_id):
        update = parse_update_main_category_input({"id": category_id})

        assert update.model_dump(by_alias=True, exclude_unset=True) == {
            "id": category_id
        }
        assert update.changes() == {}

    def test_partial_update_keeps_exactly_provided_fields(self, category_id):
        update = parse_update_main_category_input(
            {"id": category_id, "isActive": False, "seoTitle": "Gadgets"}
        )

        assert update.changes() == {"isActive": False, "seoTitle": "Gadgets"}

    def test_null_optional_fields_mean_unchanged(self, category_id):
        update = parse_update_main_category_input(
            {"id": category_id, "name": None, "order": None}
        )

        assert update.changes() == {}

    def test_missing_id(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_update_main_category_input({"name": "Books"})

        violations = exc_info.value.violations
        assert violation_pairs(violations) == [("id", "required")]
        assert violations[0].kind is ViolationKind.REQUIRED_FIELD_MISSING

    def test_malformed_id(self):
        with pytest.raises(InputValidationError) as exc_info:
            parse_update_main_category_input({"id": "not-a-uuid"})

        violation = exc_info.value.violations[0]
        assert (violation.field, violation.rule) == ("id", "is_uuid")
        assert violation.kind is ViolationKind.CONSTRAINT_VIOLATION
        assert violation.message == "id must be a UUID"

    def test_type_errors_are_collected_together(self, category_id):
        with pytest.raises(InputValidationError) as exc_info:
            parse_update_main_category_input(
                {
                    "id": category_id,
                    "name": 42,
                    "isActive": "true",
                    "order": "3",
                    "seoKeywords": ["a", "b"],
                }
            )

        assert violation_pairs(exc_info.value.violations) == [
            ("name", "is_string"),
            ("isActive", "is_boolean"),
            ("order", "is_number"),
            ("seoKeywords", "is_string"),
        ]
        messages = [v.message for v in exc_info.value.violations]
        assert messages == [
            "name must be a string",
            "isActive must be a boolean value",
            "order must be a number conforming to the specified constraints",
            "seoKeywords must be a string",
        ]

    @pytest.mark.parametrize("order", [10**400, -(10**400)])
    def test_order_beyond_float_range(self, category_id, order):
        with pytest.raises(InputValidationError) as exc_info:
            parse_update_main_category_input(
                {"id": category_id, "order": order}
            )

        assert violation_pairs(exc_info.value.violations) == [
            ("order", "is_number")
        ]

    def test_empty_strings_are_allowed_for_text(self, category_id):
        update = parse_update_main_category_input(
            {"id": category_id, "description": ""}
        )

        assert update.changes() == {"description": ""}

    def test_typed_object_is_immutable(self, category_id):
        update = parse_update_main_category_input({"id": category_id})

        with pytest.raises(ValidationError):
            update.name = "Changed"
