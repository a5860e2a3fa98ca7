from typing import Any

from fastapi import APIRouter, Body, Depends, status
from starlette.responses import JSONResponse

from category_service.services.main_category import (
    get_main_category_handler,
    parse_update_main_category_input,
)
from shared.core.api_response import api_response
from shared.dependencies.handlers import MutationHandler
from shared.utils.exception_handlers import exception_handler, require_object

router = APIRouter()


@router.patch("")
@exception_handler
async def update_main_category(
    payload: Any = Body(..., description="UpdateMainCategoryInput arguments"),
    handler: MutationHandler = Depends(get_main_category_handler),
) -> JSONResponse:
    update = parse_update_main_category_input(require_object(payload))
    result = await handler(update)
    return api_response(
        status_code=status.HTTP_200_OK,
        message="Main category update accepted",
        data=result,
    )
