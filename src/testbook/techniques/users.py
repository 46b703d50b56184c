"""
User-name lookup from the chapter on test doubles.

fetch_user_name() is deliberately thin: one GET per call, one field out of the
response, no retries, no caching, and every failure of the call reaches the
caller unchanged:

  - httpx.HTTPError (connection errors, timeouts)
  - httpx.HTTPStatusError for non-2xx responses (raised by raise_for_status())
  - pydantic.ValidationError when the body is not {"name": <str>, ...}

The `client` argument is the seam the chapter's stubs and mocks plug into.
"""

import logging
import uuid

import httpx
from pydantic import BaseModel, ConfigDict

from testbook.config.settings import Settings, get_settings
from testbook.core.logging.filters import set_request_id, reset_request_id
from testbook.validators.input_validators import ensure_non_negative_int

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class UserPayload(BaseModel):
    """Response body of GET /users/{id}; fields other than `name` are ignored."""

    model_config = ConfigDict(extra="ignore")

    name: str


def user_path(user_id: int) -> str:
    return f"/users/{user_id}"


async def _get_user(client: httpx.AsyncClient, user_id: int, request_id: str) -> str:
    response = await client.get(user_path(user_id), headers={REQUEST_ID_HEADER: request_id})
    response.raise_for_status()
    return UserPayload.model_validate(response.json()).name


async def fetch_user_name(
    user_id: int,
    *,
    client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> str:
    """
    Fetch the user with `user_id` and return its name.

    Args:
        user_id: non-negative integer id; validated before any request is made.
        client: an httpx.AsyncClient whose base_url points at the user API. It is
            used as-is and left open. When omitted, a client is built from
            USER_API_BASE_URL / USER_API_TIMEOUT and closed after the call.
        settings: overrides get_settings() when building the default client.

    Raises:
        InvalidInputError: if `user_id` is not a non-negative int.
    """
    ensure_non_negative_int(user_id, "user_id")

    request_id = str(uuid.uuid4())
    token = set_request_id(request_id)
    try:
        logger.info("Fetching user name", extra={"user_id": user_id})
        if client is not None:
            name = await _get_user(client, user_id, request_id)
        else:
            settings = settings or get_settings()
            async with httpx.AsyncClient(
                base_url=settings.USER_API_BASE_URL,
                timeout=settings.USER_API_TIMEOUT,
            ) as owned_client:
                name = await _get_user(owned_client, user_id, request_id)
        logger.debug("Fetched user name", extra={"user_id": user_id})
        return name
    finally:
        reset_request_id(token)


__all__ = ["UserPayload", "REQUEST_ID_HEADER", "user_path", "fetch_user_name"]
