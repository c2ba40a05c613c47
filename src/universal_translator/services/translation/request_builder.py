"""Translation Request Builder - turns the current session inputs into a model request."""

from dataclasses import dataclass

from universal_translator.core import AUTO_DETECT, LanguageCatalog

AUTO_DETECTED_PHRASE = "auto-detected language"
DEFAULT_MAX_OUTPUT_TOKENS = 1000


@dataclass(frozen=True)
class TranslationPayload:
    """
    Everything the gateway needs for one call, captured at request time.

    The source fields are a snapshot of the session inputs so that later
    edits cannot change what gets recorded for this request.
    """

    prompt: str
    source_text: str
    source_lang: str
    target_lang: str
    temperature: float = 0.0
    top_k: int = 1
    top_p: float = 1.0
    max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS


class TranslationRequestBuilder:
    """Builds deterministic translation prompts (no sampling variation)."""

    TRANSLATION_PROMPT = """Translate the following text from {source_name} to {target_name}.
{register}
Preserve the original meaning and tone.
Keep proper nouns and technical terms that should not be translated as they are.
Only output the translated text, with no explanations, notes or quotation marks.

Text:
{text}"""

    FORMAL_REGISTER = "Use a formal register."
    INFORMAL_REGISTER = "Use an informal, casual register."

    def __init__(self, max_output_tokens: int = DEFAULT_MAX_OUTPUT_TOKENS):
        self.max_output_tokens = max_output_tokens

    def build(
        self,
        text: str,
        source_lang: str,
        target_lang: str,
        formal: bool,
        catalog: LanguageCatalog,
    ) -> TranslationPayload:
        """
        Assemble the payload for one translation request.

        Args:
            text: Literal source text, embedded last and unmodified.
            source_lang: Source code, may be the auto-detect sentinel.
            target_lang: Target code.
            formal: True for a formal register, False for informal.
            catalog: Catalog used to resolve display names.

        Returns:
            TranslationPayload with the prompt and fixed generation settings.
        """
        source_name = None
        if source_lang != AUTO_DETECT:
            source_name = catalog.display_name(source_lang)
        target_name = catalog.display_name(target_lang) or target_lang

        prompt = self.TRANSLATION_PROMPT.format(
            source_name=source_name or AUTO_DETECTED_PHRASE,
            target_name=target_name,
            register=self.FORMAL_REGISTER if formal else self.INFORMAL_REGISTER,
            text=text,
        )
        return TranslationPayload(
            prompt=prompt,
            source_text=text,
            source_lang=source_lang,
            target_lang=target_lang,
            max_output_tokens=self.max_output_tokens,
        )
