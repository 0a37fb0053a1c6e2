"""Alexa response models and the fluent response builder."""

from enum import Enum
from typing import Any, Literal

from pydantic import (
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    model_serializer,
    model_validator,
)

from .request import WireModel

RESPONSE_VERSION = "1.0"


class SpeechType(str, Enum):
    """Output speech format."""

    PLAIN_TEXT = "PlainText"
    SSML = "SSML"


class PlayBehavior(str, Enum):
    """How speech interacts with audio already queued on the device."""

    ENQUEUE = "ENQUEUE"
    REPLACE_ALL = "REPLACE_ALL"
    REPLACE_ENQUEUED = "REPLACE_ENQUEUED"


class CardType(str, Enum):
    """Card kinds displayed in the Alexa app."""

    SIMPLE = "Simple"
    STANDARD = "Standard"
    LINK_ACCOUNT = "LinkAccount"
    ASK_FOR_PERMISSIONS_CONSENT = "AskForPermissionsConsent"


class Speech(WireModel):
    """
    Alexa speech output.

    Build with ``Speech.plain`` or ``Speech.from_ssml``; the ``type`` tag and
    the populated ``text``/``ssml`` field always agree.
    """

    type: SpeechType
    text: str | None = None
    ssml: str | None = None
    play_behavior: PlayBehavior | None = Field(None, alias="playBehavior")

    @classmethod
    def plain(cls, text: str) -> "Speech":
        """Plain text speech."""
        return cls(type=SpeechType.PLAIN_TEXT, text=text)

    @classmethod
    def from_ssml(cls, ssml: str) -> "Speech":
        """SSML speech; ``ssml`` is sent as given, including ``<speak>`` tags."""
        return cls(type=SpeechType.SSML, ssml=ssml)

    def with_play_behavior(self, behavior: PlayBehavior) -> "Speech":
        """Return a copy of this speech with the given play behavior."""
        return self.model_copy(update={"play_behavior": PlayBehavior(behavior)})

    @model_validator(mode="after")
    def _check_payload(self) -> "Speech":
        if self.type is SpeechType.PLAIN_TEXT:
            if self.text is None or self.ssml is not None:
                raise ValueError("PlainText speech requires text and no ssml")
        elif self.ssml is None or self.text is not None:
            raise ValueError("SSML speech requires ssml and no text")
        return self


class Image(WireModel):
    """Image URLs for a Standard card."""

    small_image_url: str | None = Field(None, alias="smallImageUrl")
    large_image_url: str | None = Field(None, alias="largeImageUrl")

    def with_small_image_url(self, url: str) -> "Image":
        return self.model_copy(update={"small_image_url": url})

    def with_large_image_url(self, url: str) -> "Image":
        return self.model_copy(update={"large_image_url": url})


# Fields each card type must populate, and the ones it may populate.
_CARD_REQUIRED: dict[CardType, frozenset[str]] = {
    CardType.SIMPLE: frozenset({"title", "content"}),
    CardType.STANDARD: frozenset({"title", "text"}),
    CardType.LINK_ACCOUNT: frozenset(),
    CardType.ASK_FOR_PERMISSIONS_CONSENT: frozenset({"permissions"}),
}
_CARD_ALLOWED: dict[CardType, frozenset[str]] = {
    **_CARD_REQUIRED,
    CardType.STANDARD: frozenset({"title", "text", "image"}),
}
_CARD_FIELDS = ("title", "content", "text", "image", "permissions")


class Card(WireModel):
    """
    Alexa card for visual display.

    Use the tagged constructors (``simple``, ``standard``, ``link_account``,
    ``ask_for_permissions``); which fields are populated depends on ``type``.
    """

    type: CardType
    title: str | None = None
    content: str | None = None
    text: str | None = None
    image: Image | None = None
    permissions: list[str] | None = None

    @classmethod
    def simple(cls, title: str, content: str) -> "Card":
        """Card with a title and plain content."""
        return cls(type=CardType.SIMPLE, title=title, content=content)

    @classmethod
    def standard(cls, title: str, text: str, image: Image | None = None) -> "Card":
        """Card with a title, text and an optional image."""
        return cls(type=CardType.STANDARD, title=title, text=text, image=image)

    @classmethod
    def link_account(cls) -> "Card":
        """Card prompting the user to link their account."""
        return cls(type=CardType.LINK_ACCOUNT)

    @classmethod
    def ask_for_permissions(cls, permissions: list[str]) -> "Card":
        """Card asking the user to grant the given permission scopes."""
        return cls(type=CardType.ASK_FOR_PERMISSIONS_CONSENT, permissions=list(permissions))

    @model_validator(mode="after")
    def _check_fields(self) -> "Card":
        populated = {name for name in _CARD_FIELDS if getattr(self, name) is not None}
        missing = _CARD_REQUIRED[self.type] - populated
        if missing:
            raise ValueError(f"{self.type.value} card requires {', '.join(sorted(missing))}")
        unexpected = populated - _CARD_ALLOWED[self.type]
        if unexpected:
            raise ValueError(
                f"{self.type.value} card does not take {', '.join(sorted(unexpected))}"
            )
        return self


class Reprompt(WireModel):
    """Speech played when the user does not answer."""

    output_speech: Speech = Field(..., alias="outputSpeech")


class ResponseBody(WireModel):
    """Alexa response body."""

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    output_speech: Speech | None = Field(None, alias="outputSpeech")
    card: Card | None = None
    reprompt: Reprompt | None = None
    should_end_session: bool = Field(..., alias="shouldEndSession", strict=True)


class Response(WireModel):
    """
    Full Alexa response envelope.

    Start from ``Response.new``, ``Response.simple`` or ``Response.end`` and
    chain the ``with_*`` methods. Each call replaces a single field and
    returns the same response:

        Response.new(False).with_speech(Speech.plain("hi")).add_attribute("k", "v")

    Serialized output never carries ``null`` for unset fields, and
    ``sessionAttributes`` is left out while the bag is empty.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    version: Literal["1.0"] = RESPONSE_VERSION
    session_attributes: dict[str, str] | None = Field(None, alias="sessionAttributes")
    body: ResponseBody = Field(..., alias="response")

    @classmethod
    def new(cls, should_end_session: bool) -> "Response":
        """Response carrying nothing but ``shouldEndSession``."""
        return cls(body=ResponseBody(should_end_session=should_end_session))

    @classmethod
    def simple(cls, title: str, text: str) -> "Response":
        """Session-ending response with a simple card and matching plain speech."""
        return cls.new(True).with_card(Card.simple(title, text)).with_speech(Speech.plain(text))

    @classmethod
    def end(cls) -> "Response":
        """Silent response ending the session."""
        return cls.new(True)

    def with_speech(self, speech: Speech) -> "Response":
        self.body.output_speech = speech
        return self

    def with_card(self, card: Card) -> "Response":
        self.body.card = card
        return self

    def with_reprompt(self, speech: Speech) -> "Response":
        self.body.reprompt = Reprompt(output_speech=speech)
        return self

    def add_attribute(self, key: str, value: str) -> "Response":
        """
        Set a session attribute, replacing any previous value for ``key``.

        Attributes come back on the next request of the same session and are
        read there with ``Request.attribute_value``.
        """
        self.session_attributes = {**(self.session_attributes or {}), key: value}
        return self

    @property
    def should_end_session(self) -> bool:
        return self.body.should_end_session

    @property
    def output_speech(self) -> Speech | None:
        return self.body.output_speech

    @property
    def card(self) -> Card | None:
        return self.body.card

    @property
    def reprompt(self) -> Reprompt | None:
        return self.body.reprompt

    @model_serializer(mode="wrap")
    def _omit_empty_attributes(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if not self.session_attributes:
            data.pop("sessionAttributes", None)
            data.pop("session_attributes", None)
        return data
