"""Classification of raw request fields into closed vocabularies.

Every function here is total: unrecognized or missing input degrades to an
escape variant (``OtherRequestType``, ``UserIntent``, ``Locale.UNKNOWN`` or
``None``) instead of raising.
"""

from dataclasses import dataclass
from enum import Enum

BUILTIN_INTENT_PREFIX = "AMAZON."


class RequestType(str, Enum):
    """Request types recognized by the SDK."""

    LAUNCH = "LaunchRequest"
    INTENT = "IntentRequest"
    SESSION_ENDED = "SessionEndedRequest"
    CAN_FULFILL_INTENT = "CanFulfillIntentRequest"


@dataclass(frozen=True)
class OtherRequestType:
    """Request type outside the recognized set, carrying the raw tag."""

    name: str


class BuiltinIntent(str, Enum):
    """Reserved platform intents."""

    HELP = "AMAZON.HelpIntent"
    CANCEL = "AMAZON.CancelIntent"
    FALLBACK = "AMAZON.FallbackIntent"
    LOOP_OFF = "AMAZON.LoopOffIntent"
    LOOP_ON = "AMAZON.LoopOnIntent"
    NAVIGATE_HOME = "AMAZON.NavigateHomeIntent"
    NEXT = "AMAZON.NextIntent"
    NO = "AMAZON.NoIntent"
    PAUSE = "AMAZON.PauseIntent"
    PREVIOUS = "AMAZON.PreviousIntent"
    REPEAT = "AMAZON.RepeatIntent"
    RESUME = "AMAZON.ResumeIntent"
    SELECT = "AMAZON.SelectIntent"
    SHUFFLE_OFF = "AMAZON.ShuffleOffIntent"
    SHUFFLE_ON = "AMAZON.ShuffleOnIntent"
    START_OVER = "AMAZON.StartOverIntent"
    STOP = "AMAZON.StopIntent"
    YES = "AMAZON.YesIntent"


@dataclass(frozen=True)
class UserIntent:
    """Custom (skill-defined) intent, carrying its name verbatim."""

    name: str


class Locale(str, Enum):
    """Locales with a dedicated variant."""

    ITALIAN = "it-IT"
    GERMAN = "de-DE"
    AUSTRALIAN_ENGLISH = "en-AU"
    CANADIAN_ENGLISH = "en-CA"
    BRITISH_ENGLISH = "en-GB"
    INDIAN_ENGLISH = "en-IN"
    AMERICAN_ENGLISH = "en-US"
    JAPANESE = "ja-JP"
    UNKNOWN = "unknown"

    @property
    def is_english(self) -> bool:
        """Return True for the English-speaking locales."""
        return self in _ENGLISH_LOCALES


_ENGLISH_LOCALES = frozenset(
    {
        Locale.AMERICAN_ENGLISH,
        Locale.AUSTRALIAN_ENGLISH,
        Locale.CANADIAN_ENGLISH,
        Locale.BRITISH_ENGLISH,
        Locale.INDIAN_ENGLISH,
    }
)

REQUEST_TYPES: dict[str, RequestType] = {member.value: member for member in RequestType}
BUILTIN_INTENTS: dict[str, BuiltinIntent] = {member.value: member for member in BuiltinIntent}
LOCALES: dict[str, Locale] = {
    member.value: member for member in Locale if member is not Locale.UNKNOWN
}


def classify_request_type(raw: str | None) -> RequestType | OtherRequestType:
    """Map a ``request.type`` tag to a RequestType, or OtherRequestType."""
    if isinstance(raw, str) and raw in REQUEST_TYPES:
        return REQUEST_TYPES[raw]
    return OtherRequestType(raw if isinstance(raw, str) else "")


def classify_intent(name: str | None) -> BuiltinIntent | UserIntent | None:
    """
    Map an intent name to a BuiltinIntent, or UserIntent for custom intents.

    Matching is exact and case-sensitive. Returns None when there is no
    intent at all.
    """
    if name is None:
        return None
    if name in BUILTIN_INTENTS:
        return BUILTIN_INTENTS[name]
    return UserIntent(name)


def classify_locale(tag: str | None) -> Locale:
    """Map a locale tag such as ``en-US`` to a Locale, else Locale.UNKNOWN."""
    if isinstance(tag, str) and tag in LOCALES:
        return LOCALES[tag]
    return Locale.UNKNOWN
