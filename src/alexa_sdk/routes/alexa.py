"""Alexa Skill webhook endpoint."""

import logging

from fastapi import APIRouter, HTTPException, Request
from fastapi.responses import Response

from ..exceptions import MalformedPayload
from ..services.codec import parse_request, render_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["alexa"])


@router.post("/alexa")
async def alexa_webhook(request: Request) -> Response:
    """
    Handle Alexa Skill requests.

    The raw body is parsed into the request model and handed to the skill
    handler configured on the application (``app.state.skill_handler``).
    The skill's response is rendered in Alexa wire format, with unset
    fields omitted.

    A body that does not match the Alexa request schema is rejected with 400.
    """
    body = await request.body()

    try:
        skill_request = parse_request(body)
    except MalformedPayload as e:
        logger.warning(f"Rejected Alexa request: {e}")
        raise HTTPException(status_code=400, detail="Malformed Alexa request") from e

    logger.info(f"Alexa request received: {skill_request.body.type}")

    skill_response = request.app.state.skill_handler(skill_request)

    return Response(content=render_response(skill_response), media_type="application/json")
