from typing import Any, Awaitable, Callable, Dict

from pydantic import BaseModel

from shared.core.logging_config import get_logger

logger = get_logger(__name__)

# Receives a validated input object and returns the data to send back.
# Deployments swap these in through FastAPI dependency overrides to reach
# the repository layer.
MutationHandler = Callable[[BaseModel], Awaitable[Any]]


async def accept_payload(payload: BaseModel) -> Dict[str, Any]:
    """Default handler: accept the input and echo the provided fields."""
    logger.debug(
        "Accepted %s without downstream handler", type(payload).__name__
    )
    return payload.model_dump(by_alias=True, exclude_unset=True, mode="json")
