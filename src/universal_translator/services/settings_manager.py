"""Settings Manager - Handles API key and request configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from universal_translator.services.translation.gemini_translation_service import (
    DEFAULT_MODEL_NAME,
    DEFAULT_TIMEOUT_SECONDS,
)
from universal_translator.services.translation.request_builder import DEFAULT_MAX_OUTPUT_TOKENS

logger = logging.getLogger(__name__)


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from a .env file in the project root, falling back to the
    process environment. There is deliberately no default API key.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment."""
        key = os.getenv("GEMINI_API_KEY")
        return key.strip() if key and key.strip() else None

    def get_model_name(self) -> str:
        name = os.getenv("GEMINI_MODEL")
        return name.strip() if name and name.strip() else DEFAULT_MODEL_NAME

    def get_max_output_tokens(self) -> int:
        """Upper bound on generated tokens; invalid values use the default."""
        return int(self._positive_number("TRANSLATOR_MAX_OUTPUT_TOKENS", DEFAULT_MAX_OUTPUT_TOKENS, int))

    def get_request_timeout(self) -> float:
        """Request timeout in seconds; invalid values use the default."""
        return float(self._positive_number("TRANSLATOR_REQUEST_TIMEOUT", DEFAULT_TIMEOUT_SECONDS, float))

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    def _positive_number(self, name: str, default, convert):
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = convert(raw.strip())
        except ValueError:
            logger.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
            return default
        if value <= 0:
            logger.warning("Ignoring non-positive %s=%r, using %s", name, raw, default)
            return default
        return value
