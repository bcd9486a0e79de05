"""Bind rule tables and dialect variants to the rewrite engine, per language."""

import logging
from types import MappingProxyType
from typing import Iterable, Union

from .exceptions import UnsupportedLanguageError
from .languages import Language, CompletionStatus
from .rewriter import FALLBACKS, report_and_copy, process_with_rules
from .rule_objects import RuleTable
from .tables import BUILTIN_TABLES


class Transcriber:
    """Transcribe the native orthography of one language into IPA.

    Parameters
    ----------
    language: Language
        Catalog entry the transcriber is registered under
    table: RuleTable
    variants: list
        Labels of the dialect or register variants, in the order the
        alternatives of the rules are given
    status: CompletionStatus
        How complete the rule table is. Informational only.
    fallback: callable
        Policy for characters no rule matches, see ``rewriter.FALLBACKS``
    """

    def __init__(
            self,
            language: Language,
            table: RuleTable,
            variants: Iterable = ("",),
            status: CompletionStatus = CompletionStatus.NOT_STARTED,
            fallback=report_and_copy,
    ):
        self._language = language
        self._table = table
        self._variants = tuple(variants)
        self._status = status
        self._fallback = fallback

    @classmethod
    def from_dict(cls, table_dict: dict):
        """Instantiate a Transcriber from a rule table dictionary.

        The dict is validated with ``constants.rule_table_schema``.
        """
        table = RuleTable.from_dict(table_dict)
        return cls(
            language=Language.from_code(table_dict["language"]),
            table=table,
            variants=table_dict["variants"],
            status=CompletionStatus[table_dict.get("status", "NOT_STARTED")],
            fallback=FALLBACKS[table_dict.get("fallback", "report")],
        )

    def __repr__(self):
        return "{}(language={}, table={!r}, variants={!r}, status={})".format(
            self.__class__.__name__,
            self.language.name,
            self.table.name,
            list(self.variants),
            self.status.name,
        )

    @property
    def language(self):
        return self._language

    @property
    def table(self):
        return self._table

    @property
    def variants(self):
        return self._variants

    @property
    def status(self):
        return self._status

    @property
    def fallback(self):
        return self._fallback

    def transcribe(self, text: str):
        """Transcribe text, returning a TranscriptionResult with one entry per variant."""
        return process_with_rules(
            text, self._table, self._variants, fallback=self._fallback
        )

    def transcribe_many(self, texts: Iterable[str]):
        """Transcribe a collection of texts, e.g. a word list."""
        return [self.transcribe(text) for text in texts]


def build_registry(table_dicts: Iterable) -> MappingProxyType:
    """Create a read-only mapping of Language to Transcriber from rule table dicts.

    A later table for the same language replaces an earlier one.
    """
    registry = {}
    for table_dict in table_dicts:
        transcriber = Transcriber.from_dict(table_dict)
        if transcriber.language in registry:
            logging.info(
                "Rule table %s replaces %s for %s",
                transcriber.table.name,
                registry[transcriber.language].table.name,
                transcriber.language.code)
        registry[transcriber.language] = transcriber
    return MappingProxyType(registry)


REGISTRY = build_registry(BUILTIN_TABLES)
"""Transcribers for the built-in rule tables."""


def get_transcriber(
        language: Union[Language, str], registry=REGISTRY) -> Transcriber:
    """Look up the transcriber of a language by catalog entry or code.

    Raises
    ------
    UnsupportedLanguageError
        If the code isn't in the catalog or no table is registered for it.
    """
    try:
        language = Language.from_code(language)
    except ValueError as error:
        raise UnsupportedLanguageError(str(error)) from error
    try:
        return registry[language]
    except KeyError:
        raise UnsupportedLanguageError(
            f"No rule table is registered for {language.name} ({language.code})"
        ) from None


def transcribe(text: str, language: Union[Language, str], registry=REGISTRY):
    """Transcribe text with the registered transcriber for a language."""
    return get_transcriber(language, registry).transcribe(text)
