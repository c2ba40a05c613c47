"""Translation Session Coordinator - Owns session state and drives the translate cycle."""

import logging
from datetime import datetime
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from universal_translator.core import (
    LanguageCatalog,
    SessionState,
    SessionStatus,
    TranslationHistory,
    TranslationRecord,
)
from universal_translator.services import (
    InputValidator,
    TranslationError,
    TranslationPayload,
    TranslationRequestBuilder,
    TranslationService,
    TranslationWorker,
)
from universal_translator.services.translation import ValidationError

logger = logging.getLogger(__name__)


class TranslationSessionCoordinator(QObject):
    """
    Orchestrates the translate workflow for one session.

    Responsibilities:
    - Own the mutable SessionState (inputs, status, output, error, history).
    - Gate translate actions: at most one request in flight, refused otherwise.
    - Build the request, dispatch it to a worker and apply the outcome.

    All state changes happen on the thread that owns this object; workers only
    report back through queued signals.
    """

    state_changed = Signal()
    translation_started = Signal()
    translation_completed = Signal(str)
    translation_failed = Signal(object)  # TranslationError
    history_changed = Signal()
    input_rejected = Signal(str)
    action_refused = Signal(str)

    def __init__(
        self,
        translation_service: TranslationService,
        catalog: Optional[LanguageCatalog] = None,
        validator: Optional[InputValidator] = None,
        request_builder: Optional[TranslationRequestBuilder] = None,
        api_key: Optional[str] = None,
        thread_pool=None,
    ):
        super().__init__()

        self.translation_service = translation_service
        self.catalog = catalog or LanguageCatalog()
        self.validator = validator or InputValidator()
        self.request_builder = request_builder or TranslationRequestBuilder()
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

        self.state = SessionState()
        self.set_api_key(api_key)

        self._request_counter = 0
        self._active_request_id: Optional[int] = None
        self._active_payload: Optional[TranslationPayload] = None
        # The running worker is referenced until it emits finished
        self._active_worker: Optional[TranslationWorker] = None

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def status(self) -> SessionStatus:
        return self.state.status

    @property
    def history(self) -> TranslationHistory:
        return self.state.history

    @property
    def output_text(self) -> str:
        return self.state.output_text

    @property
    def last_error(self) -> Optional[TranslationError]:
        return self.state.last_error

    @property
    def is_pending(self) -> bool:
        return self.state.in_flight

    def character_count(self) -> int:
        return len(self.state.input_text)

    def can_translate(self) -> bool:
        """Return True if the translate action should be enabled."""
        return (
            bool(self.state.input_text.strip())
            and bool(self.state.api_key)
            and not self.state.in_flight
        )

    # ------------------------------------------------------------------
    # Input mutations (allowed at any time, including while pending)
    # ------------------------------------------------------------------

    def set_input_text(self, text: str) -> bool:
        """
        Replace the input text if it passes validation.

        Returns:
            False if the text was rejected; the previous text is kept intact.
        """
        result = self.validator.validate(text)
        if not result.is_ok:
            self.input_rejected.emit(result.reason)
            return False

        self.state.input_text = text
        self.state_changed.emit()
        return True

    def set_source_language(self, code: str) -> None:
        if not self.catalog.is_valid_source(code):
            raise ValueError(f"Unsupported source language: {code!r}")
        self.state.source_lang = code
        self.state_changed.emit()

    def set_target_language(self, code: str) -> None:
        if not self.catalog.is_valid_target(code):
            raise ValueError(f"Unsupported target language: {code!r}")
        self.state.target_lang = code
        self.state_changed.emit()

    def set_formal(self, formal: bool) -> None:
        self.state.formal = bool(formal)
        self.state_changed.emit()

    def toggle_formality(self) -> None:
        self.set_formal(not self.state.formal)

    def set_api_key(self, api_key: Optional[str]) -> None:
        """Store the caller-supplied credential for subsequent requests."""
        key = api_key.strip() if api_key else ""
        self.state.api_key = key or None
        self.state_changed.emit()

    def clear_history(self) -> None:
        self.state.history.clear()
        self.history_changed.emit()

    # ------------------------------------------------------------------
    # Translate cycle
    # ------------------------------------------------------------------

    def translate(self) -> bool:
        """
        Start a translation of the current input.

        Refused without side effects when a request is already in flight, the
        text is blank or too long, or the credential is missing or malformed.

        Returns:
            True if a request was dispatched.
        """
        if self.state.in_flight:
            logger.debug("Translate refused: a request is already in flight")
            return False

        text = self.state.input_text
        api_key = self.state.api_key
        if not text.strip() or not api_key:
            logger.debug("Translate refused: missing text or API key")
            return False

        result = self.validator.validate(text)
        if not result.is_ok:
            return self._refuse(ValidationError(result.reason))

        if not self.validator.is_credential_well_formed(api_key):
            return self._refuse(
                ValidationError("API key format looks invalid. Gemini keys start with 'AIza'.")
            )

        payload = self.request_builder.build(
            text=text,
            source_lang=self.state.source_lang,
            target_lang=self.state.target_lang,
            formal=self.state.formal,
            catalog=self.catalog,
        )

        self._request_counter += 1
        request_id = self._request_counter
        self._active_request_id = request_id
        self._active_payload = payload

        self.state.output_text = ""
        self.state.last_error = None
        self.state.status = SessionStatus.PENDING
        self.translation_started.emit()
        self.state_changed.emit()

        worker = TranslationWorker(
            translation_service=self.translation_service,
            payload=payload,
            api_key=api_key,
            request_id=request_id,
        )
        worker.signals.translation_result.connect(self._on_translation_result)
        worker.signals.error.connect(self._on_translation_error)
        worker.signals.finished.connect(self._on_worker_finished)
        self._active_worker = worker

        self.thread_pool.start(worker)
        return True

    def _refuse(self, error: ValidationError) -> bool:
        logger.debug("Translate refused: %s", error.message)
        self.action_refused.emit(error.message)
        return False

    @Slot(int, str)
    def _on_translation_result(self, request_id: int, text: str) -> None:
        payload = self._take_active_payload(request_id)
        if payload is None:
            return

        self.state.output_text = text
        self.state.status = SessionStatus.SUCCEEDED
        self.state.history.prepend(
            TranslationRecord(
                source_text=payload.source_text,
                target_text=text,
                source_lang=payload.source_lang,
                target_lang=payload.target_lang,
                timestamp=datetime.now(),
            )
        )

        self.translation_completed.emit(text)
        self.history_changed.emit()
        self.state_changed.emit()

    @Slot(int, object)
    def _on_translation_error(self, request_id: int, error: TranslationError) -> None:
        if self._take_active_payload(request_id) is None:
            return

        logger.info("Translation failed: %s", error.kind.value)
        self.state.last_error = error
        self.state.status = SessionStatus.FAILED

        self.translation_failed.emit(error)
        self.state_changed.emit()

    def _take_active_payload(self, request_id: int) -> Optional[TranslationPayload]:
        """Close out the in-flight request, or return None for a stale report."""
        if request_id != self._active_request_id:
            logger.debug(
                "Ignoring stale translation report (request %s, current %s)",
                request_id,
                self._active_request_id,
            )
            return None

        payload = self._active_payload
        self._active_request_id = None
        self._active_payload = None
        return payload

    @Slot(int)
    def _on_worker_finished(self, request_id: int) -> None:
        if self._active_worker is not None and self._active_worker.request_id == request_id:
            self._active_worker = None
