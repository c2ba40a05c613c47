"""UI layer - PySide6 presentation components."""

from .history_panel import HistoryPanel
from .main_window import MainWindow
from .translator_panel import TranslatorPanel

__all__ = ["MainWindow", "TranslatorPanel", "HistoryPanel"]
