"""Translation errors - local taxonomy for everything that can go wrong in a translate cycle."""

from enum import Enum
from typing import Optional


class ErrorKind(Enum):
    VALIDATION = "validation"
    INVALID_CREDENTIAL = "invalid_credential"
    PERMISSION_DENIED = "permission_denied"
    QUOTA_EXHAUSTED = "quota_exhausted"
    MALFORMED_RESPONSE = "malformed_response"
    UNCLASSIFIED = "unclassified"
    NETWORK_UNAVAILABLE = "network_unavailable"
    TRANSPORT_FAILURE = "transport_failure"


class TranslationError(Exception):
    """
    Base class for classified translation failures.

    `message` is suitable for showing to the user as-is.
    """

    kind: ErrorKind = ErrorKind.UNCLASSIFIED
    default_message = "Translation failed."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TranslationError):
    kind = ErrorKind.VALIDATION
    default_message = "The request is not valid."


class InvalidCredentialError(TranslationError):
    kind = ErrorKind.INVALID_CREDENTIAL
    default_message = "Invalid API key. Please check your Gemini API key."


class PermissionDeniedError(TranslationError):
    kind = ErrorKind.PERMISSION_DENIED
    default_message = "This API key is not allowed to use the translation model."


class QuotaExhaustedError(TranslationError):
    kind = ErrorKind.QUOTA_EXHAUSTED
    default_message = "API quota exceeded. Please try again later."


class MalformedResponseError(TranslationError):
    kind = ErrorKind.MALFORMED_RESPONSE
    default_message = "The translation service returned an empty or unreadable response."


class UnclassifiedProviderError(TranslationError):
    kind = ErrorKind.UNCLASSIFIED


class NetworkUnavailableError(TranslationError):
    kind = ErrorKind.NETWORK_UNAVAILABLE
    default_message = "No network connection. Please check your connection and try again."


class TransportFailureError(TranslationError):
    kind = ErrorKind.TRANSPORT_FAILURE
    default_message = "The translation request failed. Please try again."
