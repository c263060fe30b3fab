"""Customer routes.

Both handlers are unfinished placeholders: they answer with a fixed
greeting and do not read any customer data yet.
"""

import logfire
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from customer.util.logging import get_logger

logger = get_logger(__name__)

PLACEHOLDER_BODY = "Hello World"

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get(
    "",
    response_class=PlainTextResponse,
    summary="List customers (placeholder)",
)
async def list_customers() -> str:
    """Return the placeholder greeting.

    Example:
        GET /customers
    """
    with logfire.span("api.list_customers"):
        return PLACEHOLDER_BODY


@router.get(
    "/{customer_id}",
    response_class=PlainTextResponse,
    summary="Get customer (placeholder)",
)
async def get_customer(customer_id: str) -> str:
    """Return the placeholder greeting; ``customer_id`` is not used.

    The path parameter is taken as a raw string so that any value
    matches and the route never fails on it.

    Example:
        GET /customers/42
    """
    with logfire.span("api.get_customer", customer_id=customer_id):
        logger.debug("Ignoring customer id %s", customer_id)
        return PLACEHOLDER_BODY
