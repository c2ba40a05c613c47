"""Session State entities - control state for the translate workflow and copy feedback."""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Optional

from universal_translator.core.constants import AUTO_DETECT
from universal_translator.core.translation_history import TranslationHistory

if TYPE_CHECKING:
    from universal_translator.services.translation.translation_errors import TranslationError


class SessionStatus(Enum):
    """States of the translate request cycle. There is no terminal state."""

    IDLE = "idle"
    PENDING = "pending"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class SessionState:
    """The single mutable state object owned by the session coordinator."""

    input_text: str = ""
    source_lang: str = AUTO_DETECT
    target_lang: str = "en"
    formal: bool = True
    api_key: Optional[str] = None
    status: SessionStatus = SessionStatus.IDLE
    output_text: str = ""
    last_error: Optional["TranslationError"] = None
    history: TranslationHistory = field(default_factory=TranslationHistory)

    @property
    def in_flight(self) -> bool:
        return self.status is SessionStatus.PENDING


@dataclass(frozen=True)
class CopyFeedback:
    """Transient "copied" indicator for one copy target."""

    target: str
    expires_at: float  # monotonic seconds
