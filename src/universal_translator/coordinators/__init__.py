"""Coordinators - Orchestration layer connecting UI with business logic."""

from .clipboard_feedback_coordinator import ClipboardFeedbackCoordinator
from .translation_session_coordinator import TranslationSessionCoordinator

__all__ = [
    "ClipboardFeedbackCoordinator",
    "TranslationSessionCoordinator",
]
