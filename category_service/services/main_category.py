from typing import Any, Mapping

from category_service.schemas.main_category import (
    UPDATE_MAIN_CATEGORY_SCHEMA,
    UpdateMainCategoryInput,
)
from shared.core.logging_config import get_logger
from shared.dependencies.handlers import MutationHandler, accept_payload
from shared.validation import validate_or_raise

logger = get_logger(__name__)


def parse_update_main_category_input(
    raw: Mapping[str, Any],
) -> UpdateMainCategoryInput:
    """
    Validate raw mutation arguments and build the typed update.

    Raises:
        InputValidationError: with every violation found in ``raw``.
    """
    values = validate_or_raise(UPDATE_MAIN_CATEGORY_SCHEMA, raw)
    update = UpdateMainCategoryInput.model_validate(dict(values))
    logger.info(
        "Main category update accepted for %s (fields: %s)",
        update.id,
        sorted(update.changes()),
    )
    return update


def get_main_category_handler() -> MutationHandler:
    """Downstream receiver of validated updates; override to persist."""
    return accept_payload
