# utils/exception_handlers.py

from functools import wraps
from typing import Any, Callable, Dict

from fastapi import HTTPException, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.core.api_response import api_response, build_response_body
from shared.core.config import settings
from shared.core.exceptions import (
    BadRequestError,
    BaseAPIException,
    InputValidationError,
)
from shared.core.logging_config import get_logger

# Scoped logger for this module
logger = get_logger(__name__)


def require_object(payload: Any) -> Dict[str, Any]:
    """Mutation arguments must arrive as a JSON object."""
    if not isinstance(payload, dict):
        raise BadRequestError(
            message="Request body must be a JSON object",
            details={"received": type(payload).__name__},
        )
    return payload


def handle_general_exception(e: Exception) -> JSONResponse:
    """
    Handles unhandled server-side exceptions.
    Logs and returns a standard API response.
    """
    logger.exception("Unhandled error: %s", e)
    return api_response(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        message="Something went wrong.",
        log_error=True,
    )


async def handle_api_exception(
    request: Request, exc: BaseAPIException
) -> JSONResponse:
    """
    Renders application exceptions in the shared response envelope.
    Input validation failures list every violation under ``errors``.
    """
    content = build_response_body(exc.status_code, exc.message, request)
    content["errorCode"] = exc.error_code

    if isinstance(exc, InputValidationError):
        violations = exc.violations
        limit = settings.MAX_REPORTED_VIOLATIONS
        if limit > 0:
            violations = violations[:limit]
        content["violationCount"] = len(exc.violations)
        content["errors"] = [
            violation.model_dump(mode="json") for violation in violations
        ]
        logger.warning(
            "Validation failed on %s %s: %s",
            request.method,
            request.url.path,
            [(v.field, v.rule) for v in exc.violations],
        )
    else:
        if exc.details:
            content["details"] = jsonable_encoder(exc.details)
        logger.warning(
            "%s on %s %s: %s",
            exc.error_code,
            request.method,
            request.url.path,
            exc.message,
        )

    return JSONResponse(status_code=exc.status_code, content=content)


async def handle_422_exception(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """
    Handles request parsing errors raised by FastAPI before the endpoint runs.
    """
    logger.warning("Validation error on %s: %s", request.url, exc.errors())
    content = build_response_body(
        status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation error", request
    )
    content["details"] = jsonable_encoder(exc.errors())
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=content
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """
    Handles unmatched routes and explicit HTTP errors at the application level.
    Includes details from the HTTPException if available.
    """
    detail = getattr(exc, "detail", None)
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.warning("404 Not Found: %s | Detail: %s", request.url, detail)
        message = str(detail) if detail else "Resource not found."
    else:
        message = str(detail) if detail else "Request failed."

    return JSONResponse(
        status_code=exc.status_code,
        content=build_response_body(exc.status_code, message, request),
        headers=getattr(exc, "headers", None),
    )


def exception_handler(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator for endpoints to standardize exception handling.
    Application and HTTP errors go to the app-level handlers; anything else
    is logged and turned into a 500 response.
    """

    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)
        except (BaseAPIException, HTTPException):
            raise
        except Exception as e:
            return handle_general_exception(e)

    return wrapper


def register_exception_handlers(app: Any) -> None:
    app.add_exception_handler(BaseAPIException, handle_api_exception)
    app.add_exception_handler(RequestValidationError, handle_422_exception)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
