import logging
import re
from collections import Counter
from pathlib import Path
from typing import Iterable, Union

from schema import SchemaError

from .constants import (
    CONTEXT_WINDOW,
    RULES_FILENAME,
    rule_schema,
    rule_table_schema,
)
from .exceptions import ConfigurationDefect
from .utils import (
    ensure_path_exists,
    format_rule_tables,
    load_rule_tables,
)


def compile_context(context):
    """Turn a left-context description into a predicate over ``(text, cursor)``.

    A string is a regex that must match right before the cursor, so ``"^"``
    means the start of the input and ``"\\s"`` means right after whitespace.
    Only the last ``CONTEXT_WINDOW`` characters before the cursor are searched,
    and ``^`` only matches at the real start of the input.
    A callable receives the consumed text ``text[:cursor]``.
    """
    if context is None:
        return None
    if callable(context):
        return lambda text, cursor: context(text[:cursor])
    matcher = re.compile(f"(?:{context})\\Z")

    def context_matches(text, cursor):
        start = max(0, cursor - CONTEXT_WINDOW)
        return matcher.search(text, start, cursor) is not None

    return context_matches


class Rule:
    """Rewrite rule for a single position of the input text.

    The pattern is tested at the cursor,
    the optional context against the input already consumed.
    When the rule fires, its output is appended to the transcription
    and the cursor moves ``consumes`` characters ahead.

    Parameters
    ----------
    pattern: str
        regex anchored at the cursor. Lookbehinds see the consumed input,
        and ``^`` only matches at the start of the input.
    output: str or list[str]
        IPA to append, or one alternative per dialect variant
    consumes: int
        Number of characters to advance past. Defaults to the length of the
        match. May be shorter than the match, to look ahead without consuming.
    context: str or callable
        Condition on the consumed input to the left of the cursor
    """
    def __init__(self, pattern: str, output, consumes: int = None, context=None):
        self._pattern = pattern
        self._output = output if isinstance(output, str) else tuple(output)
        self._consumes = consumes
        self._context = context
        self._matcher = re.compile(pattern)
        self._context_matches = compile_context(context)

    @classmethod
    def from_dict(cls, rule_dict: dict):
        """Instantiate a Rule object from a valid rule dictionary.

        Parameters
        ----------
        rule_dict: dict
            Format is {"pattern": str, "output": str or list,
            "consumes": int, "context": str}, the last two optional.
        """
        return cls(**rule_dict)

    def to_dict(self):
        """Create a well-formed rule dict, leaving out unset fields."""
        rule_dict = {
            "pattern": self.pattern,
            "output": (
                self.output if isinstance(self.output, str)
                else list(self.output)
            ),
        }
        if self.consumes is not None:
            rule_dict["consumes"] = self.consumes
        if self.context is not None:
            rule_dict["context"] = self.context
        return rule_schema.validate(rule_dict)

    def __repr__(self):
        instance_repr = (
            "{}(pattern={!r}, output={!r}, consumes={!r}, context={!r})"
        ).format(
            self.__class__.__name__,
            self.pattern,
            self.output,
            self.consumes,
            self.context
        )
        return instance_repr

    def __eq__(self, other):
        if not isinstance(other, Rule):
            return NotImplemented
        return (
            (self.pattern, self.output, self.consumes, self.context)
            == (other.pattern, other.output, other.consumes, other.context)
        )

    def __hash__(self):
        return hash((self.pattern, self.output, self.consumes))

    @property
    def pattern(self):
        return self._pattern

    @property
    def output(self):
        """A string shared by all variants, or a tuple with one per variant."""
        return self._output

    @property
    def consumes(self):
        return self._consumes

    @property
    def context(self):
        return self._context

    @property
    def has_variants(self):
        return not isinstance(self._output, str)

    @property
    def is_valid(self):
        """Whether the rule can be written to a rule table file."""
        try:
            self.to_dict()
        except SchemaError:
            return False
        return True

    def match(self, text: str, cursor: int = 0):
        """Return the match object if the rule fires at the cursor, else None."""
        if self._context_matches is not None and not self._context_matches(text, cursor):
            return None
        return self._matcher.match(text, cursor)

    def consumed_length(self, match) -> int:
        """Characters to advance past once the rule has fired."""
        if self._consumes is None:
            return match.end() - match.pos
        return self._consumes


class RuleTable:
    """A named, ordered and immutable collection of rules.

    The first rule that matches wins, so digraphs and other
    context-specific rules must come before the general ones.
    """
    def __init__(self, name: str, rules: Iterable = ()):
        self._name = name
        self._rules = tuple(
            rule if isinstance(rule, Rule) else Rule.from_dict(rule)
            for rule in rules
        )
        logging.debug("Built rule table %s with %s rules", name, len(self._rules))

    @classmethod
    def from_dict(cls, table_dict: dict):
        """Instantiate a RuleTable from a rule table dictionary.

        Only the "name" and "rules" keys are used here, the rest of the
        dictionary describes the transcriber the table belongs to.
        """
        try:
            rule_table_schema.validate(table_dict)
            return cls(table_dict["name"], table_dict["rules"])
        except (SchemaError, re.error) as error:
            raise ConfigurationDefect(
                f"Invalid rule table {table_dict.get('name')!r}: {error}"
            ) from error

    def to_dict(self):
        return {
            "name": self.name,
            "rules": [rule.to_dict() for rule in self.rules],
        }

    def __repr__(self):
        return "{}(name={!r}, rules={!r})".format(
            self.__class__.__name__, self.name, list(self.rules)
        )

    def __eq__(self, other):
        if not isinstance(other, RuleTable):
            return NotImplemented
        return (self.name, self.rules) == (other.name, other.rules)

    def __hash__(self):
        return hash((self.name, self.rules))

    def __len__(self):
        return len(self._rules)

    def __iter__(self):
        return iter(self._rules)

    def __getitem__(self, idx):
        return self._rules[idx]

    @property
    def name(self):
        return self._name

    @property
    def rules(self):
        """Tuple of the rules, in order of priority."""
        return self._rules


def check_duplicate_table_names(table_dicts: Iterable):
    """Check if any rule tables share the same name."""
    seen = Counter([table["name"] for table in table_dicts])
    duplicates = [name for name in seen if seen[name] >= 2]
    if duplicates:
        logging.error("Some rule tables have the same names: %s", duplicates)
    return duplicates


def verify_all_rule_tables(rule_file: Union[str, Path], table_dicts: list):
    """Verify that no new or existing rule tables share the same name."""
    try:
        file_tables = list(load_rule_tables(rule_file))
    except FileNotFoundError:
        file_tables = []
    duplicates = check_duplicate_table_names(file_tables + list(table_dicts))
    if duplicates:
        raise ValueError(f"Rule table names are not unique: {duplicates}")


def save_rule_tables(table_dicts: list, output_dir: Union[str, Path] = "."):
    """Format rule table dicts and append them to the rules file in output_dir."""
    out_dir = ensure_path_exists(output_dir)
    rule_file = out_dir / RULES_FILENAME
    verify_all_rule_tables(rule_file, table_dicts)
    code = format_rule_tables(table_dicts)
    with rule_file.open(mode="a+", encoding="utf-8") as r_file:
        r_file.write(code)
    logging.info("Saved %s rule tables to %s", len(table_dicts), rule_file)
    return rule_file
