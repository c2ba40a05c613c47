"""Async workers for non-blocking API calls using Qt threading."""

import logging

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from universal_translator.services.translation import (
    TranslationError,
    TranslationPayload,
    TranslationService,
    TransportFailureError,
)

logger = logging.getLogger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals. Every signal carries the request id so the
    receiver can tell which request it belongs to.
    """
    finished = Signal(int)
    error = Signal(int, object)  # TranslationError
    translation_result = Signal(int, str)


class TranslationWorker(QRunnable):
    """
    Worker that runs one translation API call in a background thread.

    Uses Qt's thread pool for efficient thread management.
    Emits signals when translation completes or fails.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        payload: TranslationPayload,
        api_key: str,
        request_id: int,
    ):
        super().__init__()
        self.translation_service = translation_service
        self.payload = payload
        self.api_key = api_key
        self.request_id = request_id
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            text = self.translation_service.send(self.payload, self.api_key)
            self.signals.translation_result.emit(self.request_id, text)
        except TranslationError as e:
            self.signals.error.emit(self.request_id, e)
        except Exception as e:
            # Anything the gateway did not classify is reported as a transport failure
            logger.exception("Unexpected error in translation worker")
            self.signals.error.emit(
                self.request_id,
                TransportFailureError(f"Unexpected translation error: {e}"),
            )
        finally:
            self.signals.finished.emit(self.request_id)
