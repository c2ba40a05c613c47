"""Translator Panel - credential, language pickers, input and output areas."""

from typing import Optional, Sequence

from PySide6.QtCore import Signal
from PySide6.QtGui import QTextCursor
from PySide6.QtWidgets import (
    QComboBox,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPlainTextEdit,
    QPushButton,
    QSizePolicy,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from universal_translator.core import LanguageEntry

SOURCE_COPY_TARGET = "source"
OUTPUT_COPY_TARGET = "output"


class TranslatorPanel(QWidget):
    """Source and target columns plus the translate button."""

    api_key_changed = Signal(str)
    source_language_changed = Signal(str)
    target_language_changed = Signal(str)
    text_edited = Signal(str)
    formality_toggled = Signal()
    translate_clicked = Signal()
    copy_clicked = Signal(str, str)  # text, copy target

    def __init__(self):
        super().__init__()

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(8, 8, 8, 8)
        main_layout.setSpacing(8)

        self.api_key_input = QLineEdit()
        self.api_key_input.setEchoMode(QLineEdit.EchoMode.Password)
        self.api_key_input.setPlaceholderText("Enter your Google Gemini API Key")
        self.api_key_input.textChanged.connect(self.api_key_changed.emit)
        main_layout.addWidget(self.api_key_input)

        columns = QGridLayout()

        # Source column
        source_header = QHBoxLayout()
        self.source_combo = QComboBox()
        self.source_combo.currentIndexChanged.connect(
            lambda _: self.source_language_changed.emit(self.source_combo.currentData())
        )
        source_header.addWidget(self.source_combo)
        source_header.addStretch()
        self.char_count_label = QLabel("0 characters")
        self.char_count_label.setStyleSheet("color: gray;")
        source_header.addWidget(self.char_count_label)
        self.copy_source_button = QPushButton("Copy")
        self.copy_source_button.clicked.connect(
            lambda: self.copy_clicked.emit(self.source_text.toPlainText(), SOURCE_COPY_TARGET)
        )
        source_header.addWidget(self.copy_source_button)
        columns.addLayout(source_header, 0, 0)

        self.source_text = QPlainTextEdit()
        self.source_text.setPlaceholderText("Enter text to translate...")
        self.source_text.setMinimumHeight(200)
        self.source_text.textChanged.connect(
            lambda: self.text_edited.emit(self.source_text.toPlainText())
        )
        columns.addWidget(self.source_text, 1, 0)

        # Target column
        target_header = QHBoxLayout()
        self.target_combo = QComboBox()
        self.target_combo.currentIndexChanged.connect(
            lambda _: self.target_language_changed.emit(self.target_combo.currentData())
        )
        target_header.addWidget(self.target_combo)
        target_header.addStretch()
        self.formality_button = QPushButton("Formal")
        self.formality_button.clicked.connect(self.formality_toggled.emit)
        target_header.addWidget(self.formality_button)
        self.copy_output_button = QPushButton("Copy")
        self.copy_output_button.clicked.connect(
            lambda: self.copy_clicked.emit(self.output_text.toPlainText(), OUTPUT_COPY_TARGET)
        )
        target_header.addWidget(self.copy_output_button)
        columns.addLayout(target_header, 0, 1)

        self.output_text = QTextEdit()
        self.output_text.setReadOnly(True)
        self.output_text.setPlaceholderText("Translation will appear here...")
        self.output_text.setMinimumHeight(200)
        self.output_text.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        columns.addWidget(self.output_text, 1, 1)

        main_layout.addLayout(columns, 1)

        actions_layout = QHBoxLayout()
        actions_layout.addStretch()
        self.translate_button = QPushButton("Translate")
        self.translate_button.setEnabled(False)
        self.translate_button.clicked.connect(self.translate_clicked.emit)
        actions_layout.addWidget(self.translate_button)
        actions_layout.addStretch()
        main_layout.addLayout(actions_layout)

        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: gray;")
        main_layout.addWidget(self.status_label)

    def set_languages(
        self,
        source_languages: Sequence[LanguageEntry],
        target_languages: Sequence[LanguageEntry],
    ) -> None:
        for combo, entries in (
            (self.source_combo, source_languages),
            (self.target_combo, target_languages),
        ):
            combo.blockSignals(True)
            combo.clear()
            for entry in entries:
                combo.addItem(entry.display_name, entry.code)
            combo.blockSignals(False)

    def select_languages(self, source_code: str, target_code: str) -> None:
        for combo, code in ((self.source_combo, source_code), (self.target_combo, target_code)):
            index = combo.findData(code)
            if index >= 0:
                combo.blockSignals(True)
                combo.setCurrentIndex(index)
                combo.blockSignals(False)

    def set_api_key(self, key: str) -> None:
        self.api_key_input.blockSignals(True)
        self.api_key_input.setText(key)
        self.api_key_input.blockSignals(False)

    def restore_input_text(self, text: str) -> None:
        """Put back the last accepted text after a rejected edit."""
        self.source_text.blockSignals(True)
        self.source_text.setPlainText(text)
        self.source_text.moveCursor(QTextCursor.MoveOperation.End)
        self.source_text.blockSignals(False)

    def set_character_count(self, count: int, limit: int) -> None:
        self.char_count_label.setText(f"{count} / {limit} characters")

    def set_formal(self, formal: bool) -> None:
        self.formality_button.setText("Formal" if formal else "Informal")

    def set_translate_enabled(self, enabled: bool) -> None:
        self.translate_button.setEnabled(enabled)

    def show_translation_loading(self) -> None:
        self.output_text.clear()
        self.output_text.setPlaceholderText("Translating...")
        self.status_label.setText("Loading...")
        self.status_label.setStyleSheet("color: gray;")

    def show_translation_success(self, text: str) -> None:
        self.output_text.setPlaceholderText("Translation will appear here...")
        self.output_text.setPlainText(text)
        self.status_label.clear()
        self.status_label.setStyleSheet("color: gray;")

    def show_translation_error(self, message: str) -> None:
        self.output_text.clear()
        self.output_text.setPlaceholderText("Translation will appear here...")
        self.status_label.setText(f"Error: {message}")
        self.status_label.setStyleSheet("color: red;")

    def set_status(self, text: str) -> None:
        self.status_label.setText(text)
        self.status_label.setStyleSheet("color: gray;")

    def set_copy_feedback(self, target: Optional[str]) -> None:
        self.copy_source_button.setText("Copied!" if target == SOURCE_COPY_TARGET else "Copy")
        self.copy_output_button.setText("Copied!" if target == OUTPUT_COPY_TARGET else "Copy")
