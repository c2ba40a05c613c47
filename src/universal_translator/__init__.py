"""
Universal Translator - A desktop client for translating text with Google Gemini.

This package provides:
- Input validation and deterministic translation prompts
- A Gemini gateway with classified errors
- A session state machine with an in-memory translation history
- Copy-to-clipboard with short-lived confirmation
"""

__version__ = "0.1.0"

# Make key components available at package level
from universal_translator.core import LanguageCatalog, TranslationHistory, TranslationRecord
from universal_translator.coordinators import (
    ClipboardFeedbackCoordinator,
    TranslationSessionCoordinator,
)

__all__ = [
    "LanguageCatalog",
    "TranslationHistory",
    "TranslationRecord",
    "ClipboardFeedbackCoordinator",
    "TranslationSessionCoordinator",
]
