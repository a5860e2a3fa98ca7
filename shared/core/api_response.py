from datetime import datetime, timezone
from typing import Any, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.requests import Request

from shared.core.logging_config import get_logger
from shared.core.request_context import request_context

logger = get_logger("api_response")


def build_response_body(
    status_code: int,
    message: str,
    request: Optional[Request] = None,
) -> dict[str, Any]:
    """Common envelope shared by success and error responses."""
    method: Optional[str] = None
    path: Optional[str] = None

    if request is None:
        request = request_context.get()
    if request is not None:
        method = request.method
        path = request.url.path

    return {
        "statusCode": status_code,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "method": method,
        "path": path,
    }


def api_response(
    status_code: int,
    message: str,
    data: Optional[Any] = None,
    log_error: bool = False,
) -> JSONResponse:
    """
    Clean and unified API response handler without request dependency.
    """
    response_body = build_response_body(status_code, message)

    if data is not None:
        response_body["data"] = jsonable_encoder(data)

    if log_error or status_code >= 400:
        logger.error(
            {
                "status_code": status_code,
                "message": message,
                "method": response_body["method"],
                "path": response_body["path"],
            }
        )
    else:
        logger.info({"message": message})

    return JSONResponse(status_code=status_code, content=response_body)
