"""Reference Hello World skill built on the SDK."""

import logging

from ..config import settings
from ..models.request import Request
from ..models.response import Response, Speech
from ..models.vocabulary import BuiltinIntent, Locale, RequestType, UserIntent

logger = logging.getLogger(__name__)

LAST_SPEECH_ATTRIBUTE = "lastSpeech"

_LOCALE_GREETINGS = {
    Locale.AUSTRALIAN_ENGLISH: "G'day mate",
    Locale.GERMAN: "Hallo Welt",
    Locale.JAPANESE: "こんにちは世界",
}


def _prompt(text: str, reprompt: str | None = None) -> Response:
    """Build a response that keeps the session open."""
    response = Response.new(False).with_speech(Speech.plain(text))
    if reprompt:
        response.with_reprompt(Speech.plain(reprompt))
    return response.add_attribute(LAST_SPEECH_ATTRIBUTE, text)


def handle_hello_request(request: Request) -> Response:
    """
    Process an Alexa request and return the skill's response.

    Supported requests:
    - LaunchRequest: Welcome message, session stays open
    - User intents: Greeting in the request locale, or "hello <name>"
    - AMAZON.HelpIntent: Usage instructions
    - AMAZON.RepeatIntent: Repeat the last thing said in this session
    - AMAZON.CancelIntent / AMAZON.StopIntent / SessionEndedRequest: Exit

    Args:
        request: Parsed Alexa request envelope

    Returns:
        Alexa response envelope
    """
    request_type = request.request_type()

    logger.info(f"Alexa request type: {request.body.type}")

    # Launch request - welcome message
    if request_type is RequestType.LAUNCH:
        return _prompt(
            f"Welcome to {settings.skill_name}. Tell me: say hello to someone.",
            reprompt="Who should I say hello to?",
        )

    # Session ended - nothing may be spoken
    if request_type is RequestType.SESSION_ENDED:
        logger.info(f"Session ended: {request.body.reason}")
        return Response.end()

    if request_type is RequestType.INTENT:
        intent = request.intent_type()

        logger.info(f"Alexa intent: {intent}")

        if isinstance(intent, UserIntent):
            return _handle_hello(request)

        if intent is BuiltinIntent.HELP:
            return _prompt("To say hello, tell me: say hello to someone.")

        if intent is BuiltinIntent.REPEAT:
            last_speech = request.attribute_value(LAST_SPEECH_ATTRIBUTE)
            if last_speech:
                return _prompt(last_speech)
            return _prompt("I haven't said anything yet. Try: say hello to someone.")

        if intent in (BuiltinIntent.CANCEL, BuiltinIntent.STOP):
            return Response.end()

    # Unknown request type or unhandled built-in
    return _prompt("I'm not sure how to help with that. Try: say hello to someone.")


def _handle_hello(request: Request) -> Response:
    """Handle the custom hello intent."""
    greeting = _LOCALE_GREETINGS.get(request.locale())
    if greeting:
        return Response.simple("hello", greeting)

    name = request.resolved_slot_value("name") or request.slot_value("name")
    if name:
        return Response.simple("hello", f"hello {name}")

    return Response.simple("hello", "hello world")
