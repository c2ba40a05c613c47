"""Translation Service - abstract boundary between the app and a remote model."""

from abc import ABC, abstractmethod

from universal_translator.services.translation.request_builder import TranslationPayload


class TranslationService(ABC):
    """
    Abstract gateway for translating a prepared payload.

    Implementations (e.g., GeminiTranslationService) handle the API call and
    map provider failures onto TranslationError subclasses. They never retry.
    """

    @abstractmethod
    def send(self, payload: TranslationPayload, api_key: str) -> str:
        """
        Execute one translation request.

        Args:
            payload: Prompt and generation settings from the request builder.
            api_key: Caller-supplied provider credential.

        Returns:
            The translated text exactly as returned by the provider.

        Raises:
            TranslationError: On any classified failure.
        """
        pass
