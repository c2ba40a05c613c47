"""History Panel - collapsible list of the session's translations."""

from typing import Optional, Sequence

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from universal_translator.core import TranslationRecord


def history_copy_target(sequence: int) -> str:
    """Copy target for the record with this history sequence number; never reused in a session."""
    return f"history:{sequence}"


class HistoryPanel(QWidget):
    """Shows TranslationRecords newest first; hidden until toggled open."""

    copy_clicked = Signal(str, str)  # text, copy target
    clear_clicked = Signal()

    def __init__(self):
        super().__init__()
        self._copy_buttons: dict[str, QPushButton] = {}

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(8, 8, 8, 8)

        header = QHBoxLayout()
        self.toggle_button = QPushButton("Translation History")
        self.toggle_button.setCheckable(True)
        self.toggle_button.toggled.connect(self._on_toggled)
        header.addWidget(self.toggle_button)
        header.addStretch()
        self.clear_button = QPushButton("Clear")
        self.clear_button.clicked.connect(self.clear_clicked.emit)
        header.addWidget(self.clear_button)
        main_layout.addLayout(header)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.list_container = QWidget()
        self.list_layout = QVBoxLayout(self.list_container)
        self.list_layout.addStretch()
        self.scroll_area.setWidget(self.list_container)
        self.scroll_area.hide()
        main_layout.addWidget(self.scroll_area, 1)

        self.empty_label = QLabel("No translations yet")
        self.empty_label.setStyleSheet("color: gray;")
        self.list_layout.insertWidget(0, self.empty_label)

    def _on_toggled(self, checked: bool) -> None:
        self.scroll_area.setVisible(checked)

    def display_records(self, records: Sequence[tuple[int, TranslationRecord]]) -> None:
        """Rebuild the list from (sequence, record) pairs, newest first."""
        # Remove all entries except the empty label and trailing stretch
        while self.list_layout.count() > 2:
            item = self.list_layout.takeAt(1)
            if item.widget():
                item.widget().deleteLater()
        self._copy_buttons.clear()

        self.empty_label.setVisible(not records)
        for sequence, record in records:
            entry = self._create_entry(sequence, record)
            self.list_layout.insertWidget(self.list_layout.count() - 1, entry)

    def _create_entry(self, sequence: int, record: TranslationRecord) -> QFrame:
        frame = QFrame()
        frame.setFrameShape(QFrame.Shape.StyledPanel)
        layout = QVBoxLayout(frame)

        meta = QHBoxLayout()
        timestamp = QLabel(record.timestamp.strftime("%Y-%m-%d %H:%M:%S"))
        timestamp.setStyleSheet("color: gray;")
        meta.addWidget(timestamp)
        meta.addStretch()
        direction = QLabel(f"{record.source_lang} → {record.target_lang}")
        direction.setStyleSheet("color: gray;")
        meta.addWidget(direction)

        target = history_copy_target(sequence)
        copy_button = QPushButton("Copy")
        copy_button.clicked.connect(lambda: self.copy_clicked.emit(record.target_text, target))
        meta.addWidget(copy_button)
        self._copy_buttons[target] = copy_button
        layout.addLayout(meta)

        source = QLabel(record.source_text)
        source.setWordWrap(True)
        layout.addWidget(source)
        translation = QLabel(record.target_text)
        translation.setWordWrap(True)
        translation.setStyleSheet("color: #555;")
        layout.addWidget(translation)
        return frame

    def entry_count(self) -> int:
        return len(self._copy_buttons)

    def set_copy_feedback(self, target: Optional[str]) -> None:
        for button_target, button in self._copy_buttons.items():
            button.setText("Copied!" if button_target == target else "Copy")
