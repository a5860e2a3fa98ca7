from typing import Any, Mapping

from coupon_service.schemas.coupons import (
    CREATE_COUPON_SCHEMA,
    CreateCouponInput,
)
from shared.core.logging_config import get_logger
from shared.dependencies.handlers import MutationHandler, accept_payload
from shared.validation import validate_or_raise

logger = get_logger(__name__)


def parse_create_coupon_input(raw: Mapping[str, Any]) -> CreateCouponInput:
    """
    Validate raw mutation arguments and build the typed coupon input.

    Raises:
        InputValidationError: with every violation found in ``raw``.
    """
    values = validate_or_raise(CREATE_COUPON_SCHEMA, raw)
    coupon = CreateCouponInput.model_validate(dict(values))
    logger.info(
        "Coupon creation accepted for code %s (%s %s)",
        coupon.code,
        coupon.discount,
        coupon.discount_unit.value,
    )
    return coupon


def get_coupon_handler() -> MutationHandler:
    """Downstream receiver of validated coupons; override to persist."""
    return accept_payload
