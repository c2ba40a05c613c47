"""Translation services - request building, abstract gateway and Gemini implementation."""

from universal_translator.services.translation.translation_errors import (
    ErrorKind,
    InvalidCredentialError,
    MalformedResponseError,
    NetworkUnavailableError,
    PermissionDeniedError,
    QuotaExhaustedError,
    TranslationError,
    TransportFailureError,
    UnclassifiedProviderError,
    ValidationError,
)
from universal_translator.services.translation.request_builder import (
    TranslationPayload,
    TranslationRequestBuilder,
)
from universal_translator.services.translation.translation_service import TranslationService
from universal_translator.services.translation.gemini_translation_service import (
    GeminiTranslationService,
    classify_provider_error,
    extract_translation,
)

__all__ = [
    "ErrorKind",
    "TranslationError",
    "ValidationError",
    "InvalidCredentialError",
    "PermissionDeniedError",
    "QuotaExhaustedError",
    "MalformedResponseError",
    "UnclassifiedProviderError",
    "NetworkUnavailableError",
    "TransportFailureError",
    "TranslationPayload",
    "TranslationRequestBuilder",
    "TranslationService",
    "GeminiTranslationService",
    "classify_provider_error",
    "extract_translation",
]
