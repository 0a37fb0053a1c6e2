"""Shared test fixtures: sample Alexa payloads and a webhook client."""

import copy
from typing import Any

import pytest
from fastapi.testclient import TestClient

from alexa_sdk.main import create_app

DEFAULT_REQUEST: dict[str, Any] = {
    "version": "1.0",
    "session": {
        "new": True,
        "sessionId": "amzn1.echo-api.session.abc123",
        "application": {"applicationId": "amzn1.ask.skill.myappid"},
        "attributes": {"lastSpeech": "Jupiter has the shortest day of all the planets"},
        "user": {"userId": "amzn1.ask.account.theuserid"},
    },
    "context": {
        "System": {
            "application": {"applicationId": "amzn1.ask.skill.myappid"},
            "user": {"userId": "amzn1.ask.account.theuserid"},
            "device": {
                "deviceId": "amzn1.ask.device.superfakedevice",
                "supportedInterfaces": {},
            },
            "apiEndpoint": "https://api.amazonalexa.com",
            "apiAccessToken": "53kr14t.k3y.d4t4-otherstuff",
        },
        "Viewport": {
            "shape": "RECTANGLE",
            "pixelWidth": 1024,
            "pixelHeight": 600,
            "dpi": 160,
            "touch": ["SINGLE"],
        },
    },
    "request": {
        "type": "IntentRequest",
        "requestId": "amzn1.echo-api.request.b8b49fde-4370-423f-bbb0-dc7305b788a0",
        "timestamp": "2018-12-03T00:33:58Z",
        "locale": "en-US",
        "intent": {"name": "hello", "confirmationStatus": "NONE"},
    },
}

SLOT_REQUEST: dict[str, Any] = {
    "version": "1.0",
    "session": {
        "new": True,
        "sessionId": "amzn1.echo-api.session.blahblahblah",
        "application": {"applicationId": "amzn1.ask.skill.testappliction"},
        "user": {"userId": "amzn1.ask.account.longstringuseridentifier"},
    },
    "context": {
        "Display": {},
        "System": {
            "application": {"applicationId": "amzn1.ask.skill.tehappz"},
            "user": {"userId": "amzn1.ask.account.longstringuseridentifier"},
            "device": {
                "deviceId": "amzn1.ask.device.testdevice",
                "supportedInterfaces": {
                    "Display": {"templateVersion": "1.0", "markupVersion": "1.0"}
                },
            },
            "apiEndpoint": "https://api.amazonalexa.com",
            "apiAccessToken": "teh.token.with-long-string-more-more-more-more",
        },
    },
    "request": {
        "type": "IntentRequest",
        "requestId": "amzn1.echo-api.request.id",
        "timestamp": "2018-12-08T05:37:32Z",
        "locale": "en-US",
        "intent": {
            "name": "hello",
            "confirmationStatus": "NONE",
            "slots": {
                "name": {
                    "name": "name",
                    "value": "bob",
                    "confirmationStatus": "NONE",
                    "source": "USER",
                }
            },
        },
    },
}


@pytest.fixture
def default_request() -> dict[str, Any]:
    """Intent request for the custom ``hello`` intent with a session attribute."""
    return copy.deepcopy(DEFAULT_REQUEST)


@pytest.fixture
def slot_request() -> dict[str, Any]:
    """Intent request carrying a ``name`` slot with value ``bob``."""
    return copy.deepcopy(SLOT_REQUEST)


@pytest.fixture
def client() -> TestClient:
    """Webhook client serving the reference skill."""
    return TestClient(create_app())
