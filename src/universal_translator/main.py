"""Main entry point for the translator application."""

import logging
import os
import sys

from PySide6.QtWidgets import QApplication

from universal_translator.core import LanguageCatalog
from universal_translator.coordinators import (
    ClipboardFeedbackCoordinator,
    TranslationSessionCoordinator,
)
from universal_translator.services import (
    ClipboardService,
    GeminiTranslationService,
    SettingsManager,
    TranslationRequestBuilder,
)
from universal_translator.ui import MainWindow


def configure_logging() -> None:
    level = os.getenv("TRANSLATOR_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    configure_logging()

    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Universal Translator")
    app.setOrganizationName("UniversalTranslator")

    # 2. Load configuration; the API key may also be typed in at runtime
    settings = SettingsManager()
    translation_service = GeminiTranslationService(
        model_name=settings.get_model_name(),
        timeout_seconds=settings.get_request_timeout(),
    )

    # 3. Instantiate Coordinators (Dependency Injection)
    session = TranslationSessionCoordinator(
        translation_service=translation_service,
        catalog=LanguageCatalog(),
        request_builder=TranslationRequestBuilder(
            max_output_tokens=settings.get_max_output_tokens()
        ),
        api_key=settings.get_gemini_api_key(),
    )
    feedback = ClipboardFeedbackCoordinator(clipboard=ClipboardService())

    # 4. Construct UI and wire it to the coordinators
    main_window = MainWindow()
    main_window.bind(session, feedback)

    # 5. Show UI and start event loop
    main_window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
