"""Configuration values for the unit tests."""

import pandas as pd
import pytest

from ipa_transcribers.rule_objects import Rule, RuleTable


@pytest.fixture
def rule_fixture():
    """Dummy rule with one alternative per variant, looking ahead one character."""
    return Rule(pattern="c[ie]", output=["θ", "s"], consumes=1)


@pytest.fixture
def table_fixture(rule_fixture):
    """Dummy rule table: a digraph, a context rule and the general rule."""
    return RuleTable(
        name="test_rule_table",
        rules=[
            Rule(pattern="ch", output="tʃ"),
            rule_fixture,
            Rule(pattern="c", output="k"),
        ]
    )


@pytest.fixture(scope="session")
def two_variants():
    return ["Peninsular", "American"]


@pytest.fixture(scope="session")
def table_dict_list():
    """Set up test values for the rule tables."""
    from dummy_tables import toy_spanish, toy_marathi
    return [toy_spanish, toy_marathi]


@pytest.fixture
def wordlist_file(tmp_path):
    """Write a csv file with a word column, and return the path."""
    file_path = tmp_path / "words.csv"
    pd.DataFrame({"word": ["cero", "cinco", "llave", "cero"]}).to_csv(
        file_path, index=False
    )
    return file_path
