"""Main Window - Application shell hosting the translator and history panels."""

from typing import Optional

from PySide6.QtWidgets import QMainWindow, QSplitter, QWidget, QVBoxLayout
from PySide6.QtCore import Qt

from universal_translator.core import MAX_CHARS, CopyFeedback
from universal_translator.ui.history_panel import HistoryPanel
from universal_translator.ui.translator_panel import TranslatorPanel


class MainWindow(QMainWindow):
    """Presentation layer over the session and clipboard coordinators."""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("Universal Translator")
        self.setGeometry(100, 100, 1100, 750)

        self.translator_panel = TranslatorPanel()
        self.history_panel = HistoryPanel()
        self._session = None
        self._feedback = None

        self._setup_ui()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        layout = QVBoxLayout(central_widget)
        layout.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Orientation.Vertical)
        splitter.addWidget(self.translator_panel)
        splitter.addWidget(self.history_panel)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 1)
        layout.addWidget(splitter)

    def bind(self, session, feedback) -> None:
        """
        Wire the panels to the coordinators.

        Args:
            session: TranslationSessionCoordinator owning the session state.
            feedback: ClipboardFeedbackCoordinator handling copy actions.
        """
        self._session = session
        self._feedback = feedback

        panel = self.translator_panel
        panel.set_languages(session.catalog.source_languages(), session.catalog.target_languages())
        panel.select_languages(session.state.source_lang, session.state.target_lang)
        panel.set_api_key(session.state.api_key or "")

        # UI -> coordinators
        panel.api_key_changed.connect(session.set_api_key)
        panel.source_language_changed.connect(session.set_source_language)
        panel.target_language_changed.connect(session.set_target_language)
        panel.text_edited.connect(session.set_input_text)
        panel.formality_toggled.connect(session.toggle_formality)
        panel.translate_clicked.connect(session.translate)
        panel.copy_clicked.connect(feedback.copy)
        self.history_panel.copy_clicked.connect(feedback.copy)
        self.history_panel.clear_clicked.connect(session.clear_history)

        # Coordinators -> UI
        session.state_changed.connect(self._refresh_controls)
        session.translation_started.connect(panel.show_translation_loading)
        session.translation_completed.connect(panel.show_translation_success)
        session.translation_failed.connect(lambda error: panel.show_translation_error(error.message))
        session.history_changed.connect(self._refresh_history)
        session.input_rejected.connect(self._on_input_rejected)
        session.action_refused.connect(panel.set_status)
        feedback.feedback_changed.connect(self._on_feedback_changed)

        self._refresh_controls()
        self._refresh_history()

    def _refresh_controls(self) -> None:
        session = self._session
        panel = self.translator_panel
        panel.set_character_count(session.character_count(), MAX_CHARS)
        panel.set_formal(session.state.formal)
        panel.set_translate_enabled(session.can_translate())

    def _refresh_history(self) -> None:
        self.history_panel.display_records(self._session.history.numbered_entries)
        active = self._feedback.active_feedback
        self.history_panel.set_copy_feedback(active.target if active else None)

    def _on_input_rejected(self, message: str) -> None:
        self.translator_panel.restore_input_text(self._session.state.input_text)
        self.translator_panel.set_status(message)

    def _on_feedback_changed(self, feedback: Optional[CopyFeedback]) -> None:
        target = feedback.target if feedback else None
        self.translator_panel.set_copy_feedback(target)
        self.history_panel.set_copy_feedback(target)
