"""
Test suite for the command line interface in cli.py
"""

import pandas as pd
import pytest
from click.testing import CliRunner

from ipa_transcribers import cli
from ipa_transcribers.tables.devanagari import CONSONANTS
from ipa_transcribers.utils import load_rule_tables


@pytest.fixture
def runner():
    return CliRunner()


def test_languages(runner):
    # when
    result = runner.invoke(cli.main, "languages")
    # then
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert "es\tSPANISH\tIN_PROGRESS\tPeninsular, American" in lines
    assert "mr\tMARATHI\tINCOMPLETE\tMarathi" in lines
    assert "fr\tFRENCH\tunsupported" in lines


@pytest.mark.parametrize(
    "args,expected",
    [
        ("transcribe -l es cero", ["Peninsular\t/θero/", "American\t/sero/"]),
        ("transcribe cinco", ["Peninsular\t/θiŋko/", "American\t/siŋko/"]),
        ("transcribe -l en-US ship", ["American\t/ʃɪp/"]),
        ("transcribe -l mr नमस्ते", ["Marathi\t/nəməs" + CONSONANTS["त"] + "e/"]),
    ],
    ids=["spanish", "default_language", "english", "marathi"]
)
def test_transcribe(args, expected, runner):
    # when
    result = runner.invoke(cli.main, args)
    # then
    assert result.exit_code == 0
    assert all(line in result.output.splitlines() for line in expected)


def test_transcribe_joins_words(runner):
    result = runner.invoke(cli.main, ["transcribe", "-l", "es", "la", "vaca"])
    assert result.exit_code == 0
    assert "Peninsular\t/la baka/" in result.output


def test_transcribe_unsupported_language(runner):
    # when
    result = runner.invoke(cli.main, "transcribe -l fr bonjour")
    # then
    assert result.exit_code == 2
    assert "FRENCH" in result.output


def test_rules_file_replaces_builtin_table(runner):
    # when
    result = runner.invoke(
        cli.main, "-r tests/dummy_tables.py transcribe -l es zumo")
    # then
    assert result.exit_code == 0
    assert "Peninsular\t/θumo/" in result.output.splitlines()


def test_rules_file_with_invalid_regex_keeps_builtin_table(tmp_path, runner):
    # given
    rule_file = tmp_path / "bad_rules.py"
    rule_file.write_text(
        "bad_spanish = {'name': 'bad_spanish', 'language': 'es', "
        "'variants': ['Peninsular', 'American'], "
        "'rules': [{'pattern': 'c[ie', 'output': ['θ', 's']}]}\n",
        encoding="utf-8")
    # when
    result = runner.invoke(cli.main, ["-r", str(rule_file), "transcribe", "-l", "es", "cero"])
    # then
    assert result.exit_code == 0
    assert "Peninsular\t/θero/" in result.output.splitlines()


def test_wordlist(wordlist_file, tmp_path, runner):
    # given
    outfile = tmp_path / "out.csv"
    # when
    result = runner.invoke(
        cli.main, f"wordlist -l es {wordlist_file} -o {outfile}")
    # then
    assert result.exit_code == 0
    assert outfile.exists()
    transcriptions = pd.read_csv(outfile)
    assert list(transcriptions.columns) == ["word", "Peninsular", "American", "gaps"]
    assert transcriptions["Peninsular"].tolist() == [
        "/θero/", "/θiŋko/", "/ʎaβe/", "/θero/"
    ]
    assert transcriptions["American"].tolist() == [
        "/sero/", "/siŋko/", "/ʝaβe/", "/sero/"
    ]


@pytest.fixture
def english_words(tmp_path):
    file_path = tmp_path / "english.csv"
    file_path.write_text("word\nship\nphone\nshop\n", encoding="utf-8")
    return file_path


def test_audit(english_words, runner):
    # when
    result = runner.invoke(cli.main, f"audit -l en-US {english_words}")
    # then
    assert result.exit_code == 0
    assert "english_american: IN_PROGRESS" in result.output
    assert "grapheme" in result.output


def test_audit_to_file(english_words, tmp_path, runner):
    # given
    outfile = tmp_path / "gaps.csv"
    # when
    result = runner.invoke(
        cli.main, f"audit -l en-US {english_words} -o {outfile}")
    # then
    assert result.exit_code == 0
    report = pd.read_csv(outfile)
    assert report.iloc[0].tolist() == ["p", 2]
    assert report.iloc[1].tolist() == ["n", 1]


def test_audit_full_coverage(tmp_path, runner):
    # given
    words = tmp_path / "marathi.csv"
    words.write_text("word\nनमस्ते\n", encoding="utf-8")
    # when
    result = runner.invoke(cli.main, f"audit -l mr {words}")
    # then
    assert result.exit_code == 0
    assert "Every character is covered by a rule." in result.output


def test_export(tmp_path, runner):
    # given
    output_dir = tmp_path / "exported"
    # when
    result = runner.invoke(cli.main, f"export -o {output_dir}")
    # then
    assert result.exit_code == 0
    rule_file = output_dir / "rules.py"
    assert rule_file.is_file()
    names = [table["name"] for table in load_rule_tables(rule_file)]
    assert names == ["spanish", "english_american", "marathi"]
    # and exporting again would duplicate the table names
    result = runner.invoke(cli.main, f"export -o {output_dir}")
    assert result.exit_code == 1
