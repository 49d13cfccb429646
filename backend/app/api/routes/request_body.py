"""Request Body Decoding — turns a JSON or form-encoded body into a submission dict.

Invariants:
    - JSON bodies must decode to an object, otherwise MalformedBodyError
    - Form bodies (urlencoded or multipart) keep text values only; uploads are dropped
    - Unknown or missing content types yield an empty submission
"""

import json
import logging
from typing import Any

from fastapi import Request

from app.core.errors import MalformedBodyError

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = (
    "application/x-www-form-urlencoded",
    "multipart/form-data",
)


def _media_type(request: Request) -> str:
    return request.headers.get("content-type", "").split(";")[0].strip().lower()


async def read_submission(request: Request) -> dict[str, Any]:
    """Decode the request body according to its content type."""
    media_type = _media_type(request)

    if media_type == "application/json" or media_type.endswith("+json"):
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except ValueError as e:
            raise MalformedBodyError(f"invalid JSON: {e}") from e
        if not isinstance(data, dict):
            raise MalformedBodyError("JSON body is not an object")
        return data

    if media_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return {
            key: value for key, value in form.items() if isinstance(value, str)
        }

    logger.debug(f"Unsupported content type for submission: {media_type!r}")
    return {}
