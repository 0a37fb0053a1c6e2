"""JSON boundary: parse inbound payloads, render outbound ones."""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import MalformedPayload
from ..models.request import Request
from ..models.response import Response

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

Payload = bytes | bytearray | str | dict[str, Any]


def _parse(model: type[ModelT], payload: Payload) -> ModelT:
    try:
        if isinstance(payload, dict):
            return model.model_validate(payload)
        return model.model_validate_json(payload)
    except ValidationError as e:
        logger.warning(f"Malformed {model.__name__} payload: {e.error_count()} error(s)")
        raise MalformedPayload(
            f"Invalid {model.__name__} payload: {e}",
            errors=e.errors(include_url=False),
        ) from e


def parse_request(payload: Payload) -> Request:
    """
    Deserialize an Alexa request envelope.

    Args:
        payload: Raw JSON (bytes or str), or an already decoded dict as
            handed over by the Lambda runtime

    Returns:
        Fully populated Request

    Raises:
        MalformedPayload: Invalid JSON, a missing required field or a field
            of the wrong type
    """
    return _parse(Request, payload)


def parse_response(payload: Payload) -> Response:
    """Deserialize a rendered Alexa response envelope."""
    return _parse(Response, payload)


def response_to_dict(response: Response) -> dict[str, Any]:
    """Return the wire document for ``response`` as JSON-ready Python data."""
    return response.model_dump(mode="json", by_alias=True, exclude_none=True)


def render_response(response: Response) -> bytes:
    """
    Serialize a response to UTF-8 JSON.

    Wire field names are used throughout and unset optional fields are
    omitted rather than sent as null.
    """
    return response.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
