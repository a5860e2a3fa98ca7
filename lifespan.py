from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI

from category_service.schemas.main_category import UPDATE_MAIN_CATEGORY_SCHEMA
from coupon_service.schemas.coupons import CREATE_COUPON_SCHEMA
from shared.core.config import settings
from shared.core.logging_config import get_logger

logger = get_logger(__name__)

INPUT_SCHEMAS = (UPDATE_MAIN_CATEGORY_SCHEMA, CREATE_COUPON_SCHEMA)


# Lifespan event manager
@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[Any, None]:
    """Handle startup and shutdown events for the FastAPI application."""
    logger.info(
        "Starting %s v%s (%s)",
        settings.APP_NAME,
        settings.VERSION,
        settings.ENVIRONMENT,
    )
    for schema in INPUT_SCHEMAS:
        logger.info(
            "Registered input %s: %d fields, required %s",
            schema.name,
            len(schema.fields),
            schema.required_fields,
        )

    yield

    logger.info("Shutting down %s...", settings.APP_NAME)
