"""Clipboard Service - writes plain text to the platform clipboard through Qt."""

from PySide6.QtGui import QGuiApplication


class ClipboardError(RuntimeError):
    """Raised when the platform clipboard cannot be written."""


class ClipboardService:
    """Write-only access to the application clipboard."""

    def write_text(self, text: str) -> None:
        if QGuiApplication.instance() is None:
            raise ClipboardError("No Qt application is running; clipboard unavailable")

        clipboard = QGuiApplication.clipboard()
        if clipboard is None:
            raise ClipboardError("Platform clipboard unavailable")
        clipboard.setText(text)
