"""Input Validator - local checks run before a translate request is allowed."""

from dataclasses import dataclass
from typing import Optional

from universal_translator.core import MAX_CHARS

GEMINI_KEY_PREFIX = "AIza"
GEMINI_KEY_MIN_LENGTH = 39


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a piece of input."""

    reason: Optional[str] = None

    @property
    def is_ok(self) -> bool:
        return self.reason is None


class InputValidator:
    """
    Enforces the input length ceiling and the credential shape.

    The credential check is a cheap heuristic. A key that passes it can still
    be rejected by the provider; that case is classified by the gateway.
    """

    def __init__(self, max_chars: int = MAX_CHARS):
        self.max_chars = max_chars

    def validate(self, text: str) -> ValidationResult:
        if len(text) > self.max_chars:
            return ValidationResult(
                reason=f"Text exceeds the {self.max_chars} character limit."
            )
        return ValidationResult()

    def is_credential_well_formed(self, key: Optional[str]) -> bool:
        if not key:
            return False
        return key.startswith(GEMINI_KEY_PREFIX) and len(key) >= GEMINI_KEY_MIN_LENGTH
