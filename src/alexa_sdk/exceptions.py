"""Errors raised at the JSON boundary."""

from typing import Any


class AlexaSDKError(Exception):
    """Base class for all errors raised by this package."""


class MalformedPayload(AlexaSDKError):
    """A payload could not be deserialized into the schema model.

    Raised for invalid JSON, wrong field types, and missing required
    fields. Never accompanied by a partially populated value.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
