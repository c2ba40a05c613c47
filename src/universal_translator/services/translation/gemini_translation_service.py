"""Gemini Translation Service - Implements the translation gateway via Google Gemini API."""

import logging
from typing import Any, Mapping

import google.genai as genai
import httpx
from google.genai import errors, types

from universal_translator.services.translation.request_builder import TranslationPayload
from universal_translator.services.translation.translation_errors import (
    InvalidCredentialError,
    MalformedResponseError,
    NetworkUnavailableError,
    PermissionDeniedError,
    QuotaExhaustedError,
    TranslationError,
    TransportFailureError,
    UnclassifiedProviderError,
)
from universal_translator.services.translation.translation_service import TranslationService

logger = logging.getLogger(__name__)

DEFAULT_MODEL_NAME = "gemini-2.0-flash"
DEFAULT_TIMEOUT_SECONDS = 30.0

_INVALID_KEY_REASONS = {"API_KEY_INVALID", "API_KEY_EXPIRED"}
_STATUS_BY_HTTP_CODE = {
    401: "UNAUTHENTICATED",
    403: "PERMISSION_DENIED",
    429: "RESOURCE_EXHAUSTED",
}


def classify_provider_error(error: Mapping[str, Any]) -> TranslationError:
    """
    Map a provider error object ({status, message, code, details}) to a local error.

    Gemini reports a bad key either as UNAUTHENTICATED or as INVALID_ARGUMENT
    with an API_KEY_INVALID reason, so both are treated as a bad credential.
    """
    status = str(error.get("status") or "").upper()
    if not status:
        status = _STATUS_BY_HTTP_CODE.get(error.get("code"), "")
    message = str(error.get("message") or "")

    if status == "UNAUTHENTICATED" or (
        status == "INVALID_ARGUMENT" and _names_invalid_key(error, message)
    ):
        return InvalidCredentialError()
    if status == "PERMISSION_DENIED":
        return PermissionDeniedError()
    if status == "RESOURCE_EXHAUSTED":
        return QuotaExhaustedError()
    return UnclassifiedProviderError(message or f"Translation failed ({status or 'unknown error'}).")


def _names_invalid_key(error: Mapping[str, Any], message: str) -> bool:
    if "api key" in message.lower():
        return True
    details = error.get("details") or []
    if not isinstance(details, list):
        return False
    return any(
        isinstance(detail, Mapping) and detail.get("reason") in _INVALID_KEY_REASONS
        for detail in details
    )


def extract_translation(body: Any) -> str:
    """
    Read the translated text out of a generateContent response envelope.

    Args:
        body: Decoded JSON, either {"error": {...}} or {"candidates": [...]}.

    Returns:
        Text of the first text part of the primary candidate, unmodified.

    Raises:
        TranslationError: Classified provider error, or MalformedResponseError
            when there is no usable candidate text.
    """
    if not isinstance(body, Mapping):
        raise MalformedResponseError()

    error = body.get("error")
    if error is not None:
        if not isinstance(error, Mapping):
            error = {"message": str(error)}
        raise classify_provider_error(error)

    candidates = body.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        raise MalformedResponseError()

    primary = candidates[0] if isinstance(candidates[0], Mapping) else {}
    content = primary.get("content")
    parts = content.get("parts") if isinstance(content, Mapping) else None
    for part in parts or []:
        text = part.get("text") if isinstance(part, Mapping) else None
        if isinstance(text, str) and text:
            return text

    raise MalformedResponseError()


class GeminiTranslationService(TranslationService):
    """
    Translation gateway using Google Gemini API.

    Performs exactly one generate_content call per send(); retrying is left
    to whoever invokes the translate action.
    """

    def __init__(
        self,
        model_name: str = DEFAULT_MODEL_NAME,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.model_name = model_name
        self.timeout_seconds = timeout_seconds

    def send(self, payload: TranslationPayload, api_key: str) -> str:
        """
        Translate a prepared payload using Gemini API.

        Args:
            payload: Prompt and generation settings.
            api_key: Gemini API key for authentication.

        Returns:
            Translated text, not trimmed or otherwise post-processed.
        """
        logger.debug(
            "Sending translation request: model=%s %s->%s chars=%d",
            self.model_name,
            payload.source_lang,
            payload.target_lang,
            len(payload.source_text),
        )

        try:
            client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(timeout=int(self.timeout_seconds * 1000)),
            )
            response = client.models.generate_content(
                model=self.model_name,
                contents=payload.prompt,
                config=types.GenerateContentConfig(
                    temperature=payload.temperature,
                    top_p=payload.top_p,
                    top_k=payload.top_k,
                    max_output_tokens=payload.max_output_tokens,
                ),
            )
        except errors.APIError as e:
            error = classify_provider_error(_error_object(e))
            logger.warning("Provider rejected translation request: %s (%s)", error.kind.value, e.status)
            raise error from e
        except httpx.ConnectError as e:
            logger.warning("Translation request could not connect: %s", e)
            raise NetworkUnavailableError() from e
        except httpx.TimeoutException as e:
            logger.warning("Translation request timed out after %.0fs", self.timeout_seconds)
            raise TransportFailureError(
                "Request timed out. Please check your connection."
            ) from e
        except httpx.HTTPError as e:
            logger.warning("Translation request failed: %s", e)
            raise TransportFailureError(f"Translation request failed: {e}") from e

        text = extract_translation(response.model_dump(mode="json", exclude_none=True))
        logger.debug("Translation received: %d chars", len(text))
        return text


def _error_object(exc: errors.APIError) -> dict[str, Any]:
    """Rebuild the provider error object carried by an SDK exception."""
    details = getattr(exc, "details", None)
    if not isinstance(details, Mapping):
        details = {}
    nested = details.get("error")
    error = dict(nested) if isinstance(nested, Mapping) else {}
    if exc.status:
        error.setdefault("status", exc.status)
    if exc.message:
        error.setdefault("message", exc.message)
    if exc.code:
        error.setdefault("code", exc.code)
    return error
