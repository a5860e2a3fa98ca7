"""
Input shape for creating a coupon.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from shared.constants import (
    RULE_IS_DATE,
    RULE_IS_ENUM,
    RULE_IS_NUMBER,
    RULE_IS_STRING,
    RULE_MAX_DECIMAL_PLACES,
    RULE_MAX_LENGTH,
    RULE_MIN,
    RULE_MIN_LENGTH,
    RULE_REQUIRED,
)
from shared.validation import FieldSpec, InputSchema, WireType
from shared.validation import rules


class DiscountUnit(str, Enum):
    """How a coupon's discount is applied."""

    FLAT = "FLAT"  # currency amount
    PERCENT = "PERCENT"  # 0-100 scale


# The discount unit does not bound the discount value here; a PERCENT
# coupon of 250 passes.
COUPON_MESSAGES = {
    ("name", RULE_REQUIRED): "Name is required",
    ("name", RULE_IS_STRING): "Name must be a string",
    ("name", RULE_MIN_LENGTH): "Name must be at least 3 characters long",
    ("name", RULE_MAX_LENGTH): "Name must be less than 50 characters",
    ("code", RULE_REQUIRED): "Code is required",
    ("code", RULE_IS_STRING): "Code must be a string",
    ("code", RULE_MIN_LENGTH): "Code must be at least 3 characters long",
    ("code", RULE_MAX_LENGTH): "Code must be less than 20 characters",
    ("discount", RULE_REQUIRED): "Discount is required",
    ("discount", RULE_IS_NUMBER): (
        "Discount must be a number with at most 2 decimal places"
    ),
    ("discount", RULE_MAX_DECIMAL_PLACES): (
        "Discount must be a number with at most 2 decimal places"
    ),
    ("discount", RULE_MIN): "Discount must be at least 0.1",
    ("discountUnit", RULE_REQUIRED): "Discount unit is required",
    ("discountUnit", RULE_IS_ENUM): (
        "Invalid discount unit, must be FLAT or PERCENT"
    ),
    ("minimumPurchase", RULE_IS_NUMBER): (
        "Minimum purchase must be a number with at most 2 decimal places"
    ),
    ("minimumPurchase", RULE_MAX_DECIMAL_PLACES): (
        "Minimum purchase must be a number with at most 2 decimal places"
    ),
    ("minimumPurchase", RULE_MIN): "Minimum purchase must be at least 0",
    ("expiresAt", RULE_REQUIRED): "Expiry date is required",
    ("expiresAt", RULE_IS_DATE): "Expiry date must be a valid date",
}

CREATE_COUPON_SCHEMA = InputSchema(
    name="CreateCouponInput",
    description="Arguments for creating a coupon.",
    messages=COUPON_MESSAGES,
    fields=(
        FieldSpec(
            "name",
            WireType.STRING,
            required=True,
            rules=(
                rules.is_string(),
                rules.min_length(3),
                rules.max_length(50),
            ),
            description="Display name, 3 to 50 characters",
        ),
        FieldSpec(
            "code",
            WireType.STRING,
            required=True,
            rules=(
                rules.is_string(),
                rules.min_length(3),
                rules.max_length(20),
            ),
            description="Redemption code, 3 to 20 characters",
        ),
        FieldSpec(
            "discount",
            WireType.FLOAT,
            required=True,
            rules=(
                rules.is_number(),
                rules.max_decimal_places(2),
                rules.min_value(0.1),
            ),
            coerce=rules.to_number,
            description="Discount amount, at least 0.1",
        ),
        FieldSpec(
            "discountUnit",
            DiscountUnit.__name__,
            required=True,
            rules=(rules.is_enum(DiscountUnit),),
            description="FLAT amount or PERCENT of the order",
        ),
        FieldSpec(
            "minimumPurchase",
            WireType.FLOAT,
            rules=(
                rules.is_number(),
                rules.max_decimal_places(2),
                rules.min_value(0),
            ),
            coerce=rules.to_number,
            description="Order total required before the coupon applies",
        ),
        FieldSpec(
            "expiresAt",
            WireType.DATE_TIME,
            required=True,
            rules=(rules.is_date(),),
            coerce=rules.to_datetime,
            description="Expiry date",
        ),
    ),
)


class CreateCouponInput(BaseModel):
    """Validated coupon creation arguments."""

    name: str = Field(..., description="Coupon display name")
    code: str = Field(..., description="Redemption code")
    discount: float = Field(..., description="Discount amount")
    discount_unit: DiscountUnit = Field(
        ..., alias="discountUnit", description="FLAT or PERCENT"
    )
    minimum_purchase: Optional[float] = Field(
        None, alias="minimumPurchase", description="Minimum order total"
    )
    expires_at: datetime = Field(
        ..., alias="expiresAt", description="Expiry timestamp (UTC)"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)
