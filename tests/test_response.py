"""Tests for the response builder and response value types."""

import pytest
from pydantic import ValidationError

from alexa_sdk.models import Card, CardType, Image, PlayBehavior, Response, Speech, SpeechType


def test_version() -> None:
    """Test that responses carry version 1.0."""
    assert Response.simple("hello, world", "hello, dude").version == "1.0"


def test_new_is_bare() -> None:
    """Test that a new response only carries shouldEndSession."""
    res = Response.new(False)
    assert res.should_end_session is False
    assert res.output_speech is None
    assert res.card is None
    assert res.reprompt is None
    assert res.session_attributes is None


def test_simple() -> None:
    """Test the simple card and plain speech composition."""
    res = Response.simple("t", "x")
    assert res.should_end_session is True
    assert res.card is not None
    assert res.card.type is CardType.SIMPLE
    assert res.card.title == "t"
    assert res.card.content == "x"
    assert res.output_speech == Speech.plain("x")
    assert res.output_speech.type is SpeechType.PLAIN_TEXT
    assert res.output_speech.text == "x"


def test_end() -> None:
    """Test that end() is a silent session-ending response."""
    res = Response.end()
    assert res.should_end_session is True
    assert res.output_speech is None
    assert res.card is None


def test_builder() -> None:
    """Test chaining card, speech and attribute."""
    res = (
        Response.new(False)
        .with_card(
            Card.standard(
                "foo",
                "bar",
                Image(small_image_url="baaz.png", large_image_url="baazLarge.png"),
            )
        )
        .with_speech(Speech.plain("hello"))
    )
    res.add_attribute("attr", "value")

    assert res.card is not None
    assert res.card.title == "foo"
    assert res.card.text == "bar"
    assert res.session_attributes == {"attr": "value"}


def test_builder_with_image_builder() -> None:
    """Test building the card image fluently."""
    image = Image().with_small_image_url("baaz.png").with_large_image_url("baazLarge.png")
    res = Response.new(False).with_card(Card.standard("foo", "bar", image))

    assert res.card is not None
    assert res.card.image is not None
    assert res.card.image.small_image_url == "baaz.png"
    assert res.card.image.large_image_url == "baazLarge.png"


def test_image_builder_returns_new_value() -> None:
    """Test that image setters leave the original untouched."""
    image = Image()
    image.with_small_image_url("small.png")
    assert image.small_image_url is None


def test_with_speech_replaces() -> None:
    """Test that setting speech twice keeps the last value only."""
    res = (
        Response.new(True)
        .with_speech(Speech.plain("one"))
        .with_speech(Speech.from_ssml("<speak>two</speak>"))
    )
    assert res.output_speech is not None
    assert res.output_speech.type is SpeechType.SSML
    assert res.output_speech.ssml == "<speak>two</speak>"
    assert res.output_speech.text is None


def test_with_reprompt() -> None:
    """Test that a reprompt wraps the given speech."""
    res = Response.new(False).with_reprompt(Speech.plain("still there?"))
    assert res.reprompt is not None
    assert res.reprompt.output_speech.text == "still there?"


def test_add_attribute_overwrites() -> None:
    """Test that repeated keys overwrite rather than accumulate."""
    res = Response.new(False)
    res.add_attribute("k", "1").add_attribute("k", "2").add_attribute("j", "3")
    assert res.session_attributes == {"k": "2", "j": "3"}


def test_play_behavior() -> None:
    """Test that play behavior is set on a copy."""
    speech = Speech.plain("hi")
    enqueued = speech.with_play_behavior(PlayBehavior.ENQUEUE)
    assert enqueued.play_behavior is PlayBehavior.ENQUEUE
    assert enqueued.text == "hi"
    assert speech.play_behavior is None


def test_card_constructors() -> None:
    """Test that each card constructor populates only its own fields."""
    link = Card.link_account()
    assert link.type is CardType.LINK_ACCOUNT
    assert (link.title, link.content, link.text, link.image, link.permissions) == (None,) * 5

    consent = Card.ask_for_permissions(["read::alexa:device:all:address"])
    assert consent.type is CardType.ASK_FOR_PERMISSIONS_CONSENT
    assert consent.permissions == ["read::alexa:device:all:address"]
    assert consent.title is None

    standard = Card.standard("title", "text")
    assert standard.content is None
    assert standard.image is None


def test_speech_is_immutable() -> None:
    """Test that speech fields cannot be reassigned."""
    speech = Speech.plain("hi")
    with pytest.raises(ValidationError):
        speech.ssml = "<speak>hi</speak>"


def test_card_is_immutable() -> None:
    """Test that card fields cannot be reassigned."""
    card = Card.simple("t", "x")
    with pytest.raises(ValidationError):
        card.text = "y"


@pytest.mark.parametrize(
    "data",
    [
        {"type": "PlainText"},
        {"type": "PlainText", "text": "hi", "ssml": "<speak>hi</speak>"},
        {"type": "SSML", "text": "hi"},
        {"type": "Whisper", "text": "hi"},
    ],
)
def test_inconsistent_speech_is_rejected(data: dict[str, str]) -> None:
    """Test that a speech tag must match its populated field."""
    with pytest.raises(ValidationError):
        Speech.model_validate(data)


@pytest.mark.parametrize(
    "data",
    [
        {"type": "Simple", "title": "t"},
        {"type": "Simple", "title": "t", "content": "x", "text": "y"},
        {"type": "Standard", "title": "t", "content": "x"},
        {"type": "LinkAccount", "title": "t"},
        {"type": "AskForPermissionsConsent"},
    ],
)
def test_inconsistent_card_is_rejected(data: dict[str, str]) -> None:
    """Test that a card tag must match its populated fields."""
    with pytest.raises(ValidationError):
        Card.model_validate(data)


@pytest.mark.parametrize("value", [3, None, ["a"], {"nested": "x"}])
def test_add_attribute_rejects_non_string_values(value: object) -> None:
    """Test that the attribute bag only takes string values."""
    res = Response.new(False).add_attribute("kept", "yes")
    with pytest.raises(ValidationError):
        res.add_attribute("count", value)  # type: ignore[arg-type]
    assert res.session_attributes == {"kept": "yes"}


def test_version_is_fixed() -> None:
    """Test that a response cannot claim another version."""
    with pytest.raises(ValidationError):
        Response(version="2.0", body={"should_end_session": True})


def test_should_end_session_must_be_boolean() -> None:
    """Test that shouldEndSession is not coerced from other types."""
    with pytest.raises(ValidationError):
        Response.new("yes")  # type: ignore[arg-type]
