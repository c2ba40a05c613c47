"""Translation Record entity - one completed translation in the session history."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TranslationRecord:
    """Created only for a successful request; never modified afterwards."""

    source_text: str
    target_text: str
    source_lang: str
    target_lang: str
    timestamp: datetime
