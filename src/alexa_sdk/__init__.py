"""Typed Alexa Skills Kit request/response models and response builder."""

from .exceptions import AlexaSDKError, MalformedPayload
from .models import (
    BuiltinIntent,
    Card,
    Image,
    Locale,
    OtherRequestType,
    PlayBehavior,
    Request,
    RequestType,
    Response,
    Speech,
    UserIntent,
)
from .services.codec import parse_request, parse_response, render_response, response_to_dict

__all__ = [
    "Request",
    "Response",
    "Speech",
    "PlayBehavior",
    "Card",
    "Image",
    "RequestType",
    "OtherRequestType",
    "BuiltinIntent",
    "UserIntent",
    "Locale",
    "parse_request",
    "parse_response",
    "render_response",
    "response_to_dict",
    "AlexaSDKError",
    "MalformedPayload",
]
