"""Catalog of language identifiers and rule table maturity tags."""

from enum import Enum


class Language(Enum):
    """Languages and dialects a transcriber can be registered for.

    The value is the language code used on the command line and in the
    rule table files.
    """
    SPANISH = "es"
    ENGLISH_AMERICAN = "en-US"
    ENGLISH_BRITISH = "en-GB"
    # Classical Arabic, understood by most speakers of the dialects
    ARABIC = "ar"
    HINDI = "hi"
    BENGALI = "bn"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    JAPANESE = "ja"
    PUNJABI = "pa"
    JAVANESE = "jw"
    TURKISH = "tr"
    KOREAN = "ko"
    FRENCH = "fr"
    GERMAN = "de"
    TELUGU = "te"
    MARATHI = "mr"
    URDU = "ur"
    VIETNAMESE = "vi"
    TAMIL = "ta"
    ITALIAN = "it"
    PERSIAN = "fa"
    INTERNATIONAL_PHONETIC_ALPHABET = "ipa"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code):
        """Look up a catalog entry by its language code (case-insensitive)."""
        if isinstance(code, cls):
            return code
        for language in cls:
            if language.value.lower() == str(code).lower():
                return language
        raise ValueError(f"Unknown language code: {code!r}")


class CompletionStatus(Enum):
    """How far along the rule table of a transcriber is.

    Never consulted by the rewrite engine.
    """
    NOT_STARTED = "not_started"
    INCOMPLETE = "incomplete"
    IN_PROGRESS = "in_progress"
    COMPLETE = "complete"


LANGUAGE_CODES = [language.value for language in Language]

STATUS_NAMES = [status.name for status in CompletionStatus]
