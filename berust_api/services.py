"""
Translation service.

Enforces the payload limit and runs each request on a fresh translation
context.
"""

from typing import Optional

from berust.core.config import Settings, settings as default_settings
from berust.core.errors import SourceTooLargeError
from berust.core.logging import get_logger
from berust.translator import TranslationResult, Translator

logger = get_logger(__name__)


class TranslationService:
    """Service for translation requests"""

    def __init__(
        self,
        translator: Optional[Translator] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or default_settings
        self.translator = translator or Translator(indent_width=self.settings.INDENT_WIDTH)

    def translate(self, source: str) -> TranslationResult:
        """
        Translate ``source``.

        Raises:
            SourceTooLargeError: If the encoded source exceeds MAX_SOURCE_BYTES
        """
        size = len(source.encode(self.settings.ENCODING))
        if size > self.settings.MAX_SOURCE_BYTES:
            raise SourceTooLargeError(size, self.settings.MAX_SOURCE_BYTES)

        result = self.translator.translate_source(source)
        logger.info(
            "Source translated",
            extra_data={"bytes": size, "lines": len(result.lines)}
        )
        return result


def get_translation_service() -> TranslationService:
    """Get translation service instance"""
    return TranslationService()
