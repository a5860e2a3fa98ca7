from typing import Any

from fastapi import APIRouter, Body, Depends, status
from starlette.responses import JSONResponse

from coupon_service.services.coupons import (
    get_coupon_handler,
    parse_create_coupon_input,
)
from shared.core.api_response import api_response
from shared.dependencies.handlers import MutationHandler
from shared.utils.exception_handlers import exception_handler, require_object

router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED)
@exception_handler
async def create_coupon(
    payload: Any = Body(..., description="CreateCouponInput arguments"),
    handler: MutationHandler = Depends(get_coupon_handler),
) -> JSONResponse:
    coupon = parse_create_coupon_input(require_object(payload))
    result = await handler(coupon)
    return api_response(
        status_code=status.HTTP_201_CREATED,
        message="Coupon input accepted",
        data=result,
    )
