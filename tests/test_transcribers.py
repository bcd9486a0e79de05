"""Test suite for the transcribers and the registry of built-in rule tables."""
import logging
import time
from types import MappingProxyType

import pytest

from ipa_transcribers import transcribers
from ipa_transcribers.exceptions import ConfigurationDefect, UnsupportedLanguageError
from ipa_transcribers.languages import CompletionStatus, Language
from ipa_transcribers.rewriter import Gap, copy_through, report_and_copy
from ipa_transcribers.tables import BUILTIN_TABLES
from ipa_transcribers.tables.devanagari import CONSONANTS


class TestTranscriber:

    def test_from_dict(self, table_dict_list):
        # when
        result = transcribers.Transcriber.from_dict(table_dict_list[0])
        # then
        assert isinstance(result, transcribers.Transcriber)
        assert result.language is Language.SPANISH
        assert result.status is CompletionStatus.IN_PROGRESS
        assert result.variants == ("Peninsular", "American")
        assert result.fallback is copy_through
        assert result.table.name == "toy_spanish"

    def test_from_dict_defaults(self, table_dict_list):
        result = transcribers.Transcriber.from_dict(table_dict_list[1])
        assert result.status is CompletionStatus.NOT_STARTED
        assert result.fallback is report_and_copy

    def test_from_dict_invalid(self):
        from dummy_tables import broken_table
        with pytest.raises(ConfigurationDefect):
            transcribers.Transcriber.from_dict(broken_table)

    def test_transcribe(self, table_dict_list):
        # given
        transcriber = transcribers.Transcriber.from_dict(table_dict_list[0])
        # when
        result = transcriber.transcribe("Llave")
        # then
        assert result.to_dict() == {"Peninsular": "/ʎaβe/", "American": "/ʝaβe/"}
        assert result.gaps == (Gap(2, "a"), Gap(4, "e"))

    def test_lookahead_keeps_vowel_sign(self, table_dict_list):
        transcriber = transcribers.Transcriber.from_dict(table_dict_list[1])
        assert transcriber.transcribe("का").single == "/kaː/"
        assert transcriber.transcribe("क").single == "/kə/"

    def test_transcribe_many(self, table_dict_list):
        # given
        transcriber = transcribers.Transcriber.from_dict(table_dict_list[0])
        # when
        result = transcriber.transcribe_many(["vaquero", "zumo"])
        # then
        assert [r["American"] for r in result] == ["/bakero/", "/sumo/"]


@pytest.mark.parametrize(
    "word,peninsular,american",
    [
        ("cero", "/θero/", "/sero/"),
        ("cinco", "/θiŋko/", "/siŋko/"),
        ("llave", "/ʎaβe/", "/ʝaβe/"),
        ("zapato", "/θapato/", "/sapato/"),
        ("vaca", "/baka/", "/baka/"),
        ("hada", "/aða/", "/aða/"),
        ("queso", "/keso/", "/keso/"),
        ("chico", "/tʃiko/", "/tʃiko/"),
        ("tango", "/taŋgo/", "/taŋgo/"),
        ("guerra", "/gera/", "/gera/"),
    ]
)
def test_spanish(word, peninsular, american):
    # when
    result = transcribers.transcribe(word, "es")
    # then
    assert result.labels == ["Peninsular", "American"]
    assert result.texts == [peninsular, american]


def test_spanish_word_initial_context():
    result = transcribers.transcribe("la vaca", Language.SPANISH)
    assert result["Peninsular"] == "/la baka/"


@pytest.mark.parametrize(
    "word,expected,gaps",
    [
        ("phone", "/foʊn/", [Gap(3, "n")]),
        ("ship", "/ʃɪp/", [Gap(3, "p")]),
        ("ply", "/plaɪ/", [Gap(0, "p"), Gap(1, "l")]),
    ]
)
def test_english(word, expected, gaps, caplog):
    # given
    caplog.set_level(logging.INFO)
    # when
    result = transcribers.transcribe(word, "en-US")
    # then
    assert result.single == expected
    assert list(result.gaps) == gaps
    assert all(repr(gap.grapheme) in caplog.text for gap in gaps)


def test_marathi():
    # when
    result = transcribers.transcribe("नमस्ते", "mr")
    # then
    assert result.single == "/nəməs" + CONSONANTS["त"] + "e/"
    assert result.gaps == ()


def test_marathi_digits_and_gaps():
    assert transcribers.transcribe("१२", "mr").single == "/12/"
    result = transcribers.transcribe("न5", "mr")
    assert result.single == "/nə5/"
    assert result.gaps == (Gap(1, "5"),)


def test_registry():
    # then
    assert isinstance(transcribers.REGISTRY, MappingProxyType)
    assert set(transcribers.REGISTRY) == {
        Language.SPANISH, Language.ENGLISH_AMERICAN, Language.MARATHI
    }
    with pytest.raises(TypeError):
        transcribers.REGISTRY[Language.FRENCH] = None


def test_build_registry_later_table_wins(table_dict_list, caplog):
    # given
    caplog.set_level(logging.INFO)
    # when
    registry = transcribers.build_registry(BUILTIN_TABLES + table_dict_list)
    # then
    assert registry[Language.SPANISH].table.name == "toy_spanish"
    assert registry[Language.MARATHI].table.name == "toy_marathi"
    assert registry[Language.ENGLISH_AMERICAN].table.name == "english_american"
    assert "toy_spanish replaces spanish" in caplog.text


@pytest.mark.parametrize("code", ["es", "ES", Language.SPANISH])
def test_get_transcriber(code):
    result = transcribers.get_transcriber(code)
    assert result.language is Language.SPANISH


@pytest.mark.parametrize(
    "code", ["fr", "xx", Language.ENGLISH_BRITISH],
    ids=["no_table", "not_in_catalog", "catalog_entry_without_table"]
)
def test_get_transcriber_unsupported(code):
    with pytest.raises(UnsupportedLanguageError):
        transcribers.get_transcriber(code)


def test_unsupported_language_is_a_lookup_error():
    with pytest.raises(LookupError):
        transcribers.transcribe("bonjour", "fr")


def test_get_transcriber_from_custom_registry(table_dict_list):
    registry = transcribers.build_registry(table_dict_list[1:])
    assert transcribers.get_transcriber("mr", registry).table.name == "toy_marathi"
    with pytest.raises(UnsupportedLanguageError):
        transcribers.get_transcriber("es", registry)


def test_english_gu_rules_fire():
    assert transcribers.transcribe("guest", "en-US").single == "/gɛst/"


def _fastest_run(text, language, runs=3):
    timings = []
    for _ in range(runs):
        start = time.perf_counter()
        transcribers.transcribe(text, language)
        timings.append(time.perf_counter() - start)
    return min(timings)


@pytest.mark.parametrize(
    "language,sentence",
    [
        ("es", "el gato de la casa bebe vino "),
        ("en-US", "the cat in the house drinks wine "),
    ]
)
def test_time_grows_linearly_with_input_length(language, sentence):
    # when
    short = _fastest_run(sentence * 100, language)
    long = _fastest_run(sentence * 400, language)
    # then
    # four times the input, quadratic growth would take about sixteen times longer
    assert long < 8 * short
