"""Domain layer - Pure entities for languages, translations and session state."""

from .constants import AUTO_DETECT, COPY_FEEDBACK_MS, MAX_CHARS
from .language_catalog import LanguageCatalog, LanguageEntry
from .session_state import CopyFeedback, SessionState, SessionStatus
from .translation_history import TranslationHistory
from .translation_record import TranslationRecord

__all__ = [
    "AUTO_DETECT",
    "COPY_FEEDBACK_MS",
    "MAX_CHARS",
    "LanguageCatalog",
    "LanguageEntry",
    "CopyFeedback",
    "SessionState",
    "SessionStatus",
    "TranslationHistory",
    "TranslationRecord",
]
