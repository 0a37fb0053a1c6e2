"""Pydantic models mirroring the Alexa request/response JSON contract."""

from .request import (
    Application,
    AudioPlayer,
    Context,
    Device,
    Intent,
    Request,
    RequestBody,
    Resolutions,
    ResolutionsPerAuthority,
    Session,
    Slot,
    System,
    User,
)
from .response import (
    Card,
    CardType,
    Image,
    PlayBehavior,
    Reprompt,
    Response,
    ResponseBody,
    Speech,
    SpeechType,
)
from .vocabulary import (
    BuiltinIntent,
    Locale,
    OtherRequestType,
    RequestType,
    UserIntent,
    classify_intent,
    classify_locale,
    classify_request_type,
)

__all__ = [
    "Request",
    "RequestBody",
    "Session",
    "Application",
    "User",
    "Context",
    "System",
    "Device",
    "AudioPlayer",
    "Intent",
    "Slot",
    "Resolutions",
    "ResolutionsPerAuthority",
    "Response",
    "ResponseBody",
    "Speech",
    "SpeechType",
    "PlayBehavior",
    "Card",
    "CardType",
    "Image",
    "Reprompt",
    "RequestType",
    "OtherRequestType",
    "BuiltinIntent",
    "UserIntent",
    "Locale",
    "classify_request_type",
    "classify_intent",
    "classify_locale",
]
