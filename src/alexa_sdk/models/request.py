"""Alexa request models and read accessors."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

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

ER_SUCCESS_MATCH = "ER_SUCCESS_MATCH"


class WireModel(BaseModel):
    """Base for models mirroring a JSON object of the Alexa contract.

    Fields carry their external name as an alias; unknown fields in the
    payload are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class Application(WireModel):
    """Skill application identity."""

    application_id: str = Field(..., alias="applicationId")


class User(WireModel):
    """Alexa user identity, with the account-linking token when linked."""

    user_id: str = Field(..., alias="userId")
    access_token: str | None = Field(None, alias="accessToken")


class Device(WireModel):
    """Device the request originated from."""

    device_id: str = Field(..., alias="deviceId")
    supported_interfaces: dict[str, Any] | None = Field(None, alias="supportedInterfaces")


class System(WireModel):
    """System section of the request context."""

    api_access_token: str | None = Field(None, alias="apiAccessToken")
    api_endpoint: str | None = Field(None, alias="apiEndpoint")
    device: Device | None = None
    application: Application | None = None
    user: User | None = None


class AudioPlayer(WireModel):
    """Audio player state reported by the device."""

    token: str | None = None
    offset_in_milliseconds: int | None = Field(None, alias="offsetInMilliseconds", strict=True)
    player_activity: str | None = Field(None, alias="playerActivity")


class Context(WireModel):
    """Device and runtime context of a request."""

    system: System = Field(..., alias="System")
    audio_player: AudioPlayer | None = Field(None, alias="AudioPlayer")


class Session(WireModel):
    """Alexa session information."""

    is_new: bool = Field(..., alias="new", strict=True)
    session_id: str = Field(..., alias="sessionId")
    attributes: dict[str, str] | None = None
    application: Application
    user: User


class ResolutionStatus(WireModel):
    """Outcome of entity resolution for one authority."""

    code: str


class ResolvedValue(WireModel):
    """Canonical slot value as defined in the interaction model."""

    name: str
    id: str


class ResolvedValueWrapper(WireModel):
    value: ResolvedValue


class ResolutionsPerAuthority(WireModel):
    """Entity resolution candidates from one authority."""

    authority: str
    status: ResolutionStatus
    values: list[ResolvedValueWrapper] = []


class Resolutions(WireModel):
    """Entity resolution results, in authority order."""

    resolutions_per_authority: list[ResolutionsPerAuthority] = Field(
        ..., alias="resolutionsPerAuthority"
    )


class Slot(WireModel):
    """Slot value extracted from the user's utterance."""

    name: str
    value: str | None = None
    confirmation_status: str | None = Field(None, alias="confirmationStatus")
    resolutions: Resolutions | None = None

    def resolved_value(self) -> str | None:
        """Return the canonical value of the first successful resolution."""
        if self.resolutions is None:
            return None
        for authority in self.resolutions.resolutions_per_authority:
            if authority.status.code == ER_SUCCESS_MATCH and authority.values:
                return authority.values[0].value.name
        return None


class Intent(WireModel):
    """Alexa intent with slots."""

    name: str
    confirmation_status: str | None = Field(None, alias="confirmationStatus")
    slots: dict[str, Slot] | None = None

    def get_slot(self, name: str) -> Slot | None:
        """Return the slot with exactly this name, if present."""
        if self.slots is None:
            return None
        return self.slots.get(name)


class RequestBody(WireModel):
    """The inbound event, sent under the ``request`` key."""

    type: str
    request_id: str = Field(..., alias="requestId")
    timestamp: str
    locale: str
    intent: Intent | None = None
    reason: str | None = None
    dialog_state: str | None = Field(None, alias="dialogState")


class Request(WireModel):
    """Full Alexa request envelope."""

    version: str
    session: Session | None = None
    body: RequestBody = Field(..., alias="request")
    context: Context

    def request_type(self) -> RequestType | OtherRequestType:
        """Classify the request type."""
        return classify_request_type(self.body.type)

    def intent_type(self) -> BuiltinIntent | UserIntent | None:
        """Classify the intent; None when the request carries no intent."""
        if self.body.intent is None:
            return None
        return classify_intent(self.body.intent.name)

    def locale(self) -> Locale:
        """Classify the request locale."""
        return classify_locale(self.body.locale)

    def slot_value(self, name: str) -> str | None:
        """Return the value of the named slot, if the intent carries it."""
        slot = self._slot(name)
        return slot.value if slot else None

    def resolved_slot_value(self, name: str) -> str | None:
        """Return the entity-resolved canonical value of the named slot."""
        slot = self._slot(name)
        return slot.resolved_value() if slot else None

    def attribute_value(self, key: str) -> str | None:
        """Return a session attribute set by a previous response."""
        if self.session is None or self.session.attributes is None:
            return None
        return self.session.attributes.get(key)

    def is_new_session(self) -> bool:
        """Return True only for the first request of a session."""
        return self.session is not None and self.session.is_new

    def _slot(self, name: str) -> Slot | None:
        if self.body.intent is None:
            return None
        return self.body.intent.get_slot(name)
