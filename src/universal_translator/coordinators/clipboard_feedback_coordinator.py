"""Clipboard Feedback Coordinator - Copies text and manages the transient "copied" indicator."""

import logging
import time
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal, Slot

from universal_translator.core import COPY_FEEDBACK_MS, CopyFeedback
from universal_translator.services import ClipboardError, ClipboardService

logger = logging.getLogger(__name__)


class ClipboardFeedbackCoordinator(QObject):
    """
    Copies text for a UI copy target and shows a short-lived confirmation.

    At most one indicator is active. A new copy, to any target, supersedes the
    current one and restarts the single expiry timer. Clipboard failures are
    logged and never shown as an error.
    """

    feedback_changed = Signal(object)  # Optional[CopyFeedback]

    def __init__(
        self,
        clipboard: ClipboardService,
        duration_ms: int = COPY_FEEDBACK_MS,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__()
        self.clipboard = clipboard
        self.duration_ms = duration_ms
        self._clock = clock
        self._feedback: Optional[CopyFeedback] = None

        self._expiry_timer = QTimer(self)
        self._expiry_timer.setSingleShot(True)
        self._expiry_timer.timeout.connect(self._on_expired)

    @property
    def active_feedback(self) -> Optional[CopyFeedback]:
        """Current indicator, or None if there is none or it has expired."""
        if self._feedback is not None and self._clock() >= self._feedback.expires_at:
            self._feedback = None
        return self._feedback

    def is_showing(self, target: str) -> bool:
        feedback = self.active_feedback
        return feedback is not None and feedback.target == target

    def copy(self, text: str, target: str) -> None:
        """Write `text` to the clipboard and flag `target` as copied."""
        try:
            self.clipboard.write_text(text)
        except ClipboardError as e:
            logger.warning("Clipboard write failed for %s: %s", target, e)
            return

        self._feedback = CopyFeedback(
            target=target,
            expires_at=self._clock() + self.duration_ms / 1000,
        )
        self._expiry_timer.start(self.duration_ms)
        self.feedback_changed.emit(self._feedback)

    def clear(self) -> None:
        """Drop the indicator before it expires."""
        self._expiry_timer.stop()
        if self._feedback is not None:
            self._feedback = None
            self.feedback_changed.emit(None)

    @Slot()
    def _on_expired(self) -> None:
        self._feedback = None
        self.feedback_changed.emit(None)
