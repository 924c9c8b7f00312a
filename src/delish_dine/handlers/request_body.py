"""JSON request body decoding with a size guard."""

import json
import logging
from typing import Any

from fastapi import Request

from delish_dine.errors import MalformedJSON, PayloadTooLarge, ValidationFailed

logger = logging.getLogger(__name__)

MAX_BODY_BYTES = 1_000_000


async def read_json_body(request: Request, max_bytes: int = MAX_BODY_BYTES) -> dict[str, Any]:
    """Read and decode a JSON object body.

    The body is read chunk by chunk and abandoned as soon as it exceeds
    ``max_bytes``. An empty body decodes to an empty object.

    Args:
        request: Incoming request
        max_bytes: Largest accepted body size

    Returns:
        The decoded JSON object

    Raises:
        PayloadTooLarge: If the body exceeds max_bytes
        MalformedJSON: If the body is not valid JSON
        ValidationFailed: If the body is JSON but not an object
    """
    declared = request.headers.get("content-length")
    if declared is not None and declared.isdigit() and int(declared) > max_bytes:
        logger.warning(f"Rejected body with declared length {declared}")
        raise PayloadTooLarge()

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > max_bytes:
            logger.warning(f"Aborted body read after {len(body)} bytes")
            raise PayloadTooLarge()

    if not body:
        return {}

    try:
        payload = json.loads(bytes(body))
    except (ValueError, RecursionError) as e:
        logger.info(f"Rejected malformed JSON body: {e}")
        raise MalformedJSON() from e

    if not isinstance(payload, dict):
        raise ValidationFailed("Request body must be a JSON object")
    return payload
