"""Services layer - business logic and external integrations."""

from universal_translator.services.input_validator import InputValidator, ValidationResult
from universal_translator.services.settings_manager import SettingsManager
from universal_translator.services.clipboard_service import ClipboardError, ClipboardService

# Translation services
from universal_translator.services.translation import (
    ErrorKind,
    GeminiTranslationService,
    TranslationError,
    TranslationPayload,
    TranslationRequestBuilder,
    TranslationService,
)

# Background workers
from universal_translator.services.api_workers import TranslationWorker, WorkerSignals

__all__ = [
    "InputValidator",
    "ValidationResult",
    "SettingsManager",
    "ClipboardError",
    "ClipboardService",
    "ErrorKind",
    "GeminiTranslationService",
    "TranslationError",
    "TranslationPayload",
    "TranslationRequestBuilder",
    "TranslationService",
    "TranslationWorker",
    "WorkerSignals",
]
