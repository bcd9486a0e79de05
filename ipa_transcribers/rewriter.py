"""Rewrite native text into IPA with an ordered rule table.

The engine walks the input from left to right. At each position it picks
the first rule in the table that matches, appends the rule's output to
every variant of the transcription, and moves past the characters the
rule consumes. When no rule matches, a fallback policy handles the
character at the cursor and the cursor moves one step.
"""

import logging
from collections import namedtuple
from typing import Callable, Iterable, List

from .constants import OPENING_DELIMITER, CLOSING_DELIMITER
from .exceptions import ConfigurationDefect


Gap = namedtuple("Gap", ["position", "grapheme"])
"""A character of the input that no rule matched."""

Application = namedtuple("Application", ["position", "length", "rule_index"])
"""One cycle of the engine. ``rule_index`` is None when the fallback ran."""


def report_and_copy(gap: Gap) -> str:
    """Copy the uncovered grapheme to the output and log it."""
    logging.info(
        "No rule for %r at position %s. Copying it verbatim.",
        gap.grapheme, gap.position)
    return gap.grapheme


def copy_through(gap: Gap) -> str:
    """Copy the uncovered grapheme to the output without logging."""
    return gap.grapheme


FALLBACKS = {
    "report": report_and_copy,
    "copy": copy_through,
}


class VariantAccumulator:
    """Growing transcription for one dialect or register variant."""

    def __init__(self, label: str, opening: str = OPENING_DELIMITER):
        self.label = label
        self._segments: List[str] = [opening]

    def __repr__(self):
        return f"{self.__class__.__name__}(label={self.label!r}, text={self.text!r})"

    def __len__(self):
        """Number of segments appended, the opening delimiter included."""
        return len(self._segments)

    def append(self, segment: str):
        self._segments.append(segment)

    @property
    def text(self) -> str:
        return "".join(self._segments)


class TranscriptionResult:
    """The labelled transcriptions produced by one call to the engine.

    Iterating over the result gives ``(label, text)`` pairs in the order
    the variants were declared.
    """

    def __init__(self, variants: Iterable, gaps: Iterable = (), trace: Iterable = ()):
        self._variants = tuple((label, text) for label, text in variants)
        self._gaps = tuple(gaps)
        self._trace = tuple(trace)

    def __repr__(self):
        return "{}(variants={!r}, gaps={!r})".format(
            self.__class__.__name__, list(self._variants), list(self._gaps)
        )

    def __eq__(self, other):
        if not isinstance(other, TranscriptionResult):
            return NotImplemented
        return (self._variants, self._gaps) == (other._variants, other._gaps)

    def __iter__(self):
        return iter(self._variants)

    def __len__(self):
        return len(self._variants)

    def __getitem__(self, label):
        for variant_label, text in self._variants:
            if variant_label == label:
                return text
        raise KeyError(label)

    @property
    def labels(self):
        return [label for label, _ in self._variants]

    @property
    def texts(self):
        return [text for _, text in self._variants]

    @property
    def single(self) -> str:
        """The transcription of a transcriber that declares a single variant."""
        if len(self._variants) != 1:
            raise ValueError(
                f"Expected a single variant, got {len(self._variants)}: "
                f"{self.labels}")
        return self._variants[0][1]

    @property
    def gaps(self):
        """Graphemes that were copied by the fallback, in input order."""
        return self._gaps

    @property
    def trace(self):
        """One Application per cycle of the engine."""
        return self._trace

    def to_dict(self):
        return dict(self._variants)


def expand_variants(output, accumulators: List[VariantAccumulator]):
    """Append a rule output to the accumulators.

    A string goes to every accumulator. A sequence of alternatives must have
    one entry per accumulator, and is distributed in order.
    """
    if isinstance(output, str):
        for accumulator in accumulators:
            accumulator.append(output)
        return
    if len(output) != len(accumulators):
        raise ConfigurationDefect(
            f"Output {list(output)!r} has {len(output)} alternatives, but "
            f"{len(accumulators)} variants are declared: "
            f"{[acc.label for acc in accumulators]}")
    for accumulator, alternative in zip(accumulators, output):
        accumulator.append(alternative)


def find_rule(rules, text: str, cursor: int):
    """Return (index, rule, match) for the first rule that fires, or None."""
    for idx, rule in enumerate(rules):
        match = rule.match(text, cursor)
        if match is not None:
            return idx, rule, match
    return None


def process_with_rules(
        text: str,
        rules,
        variants: Iterable = ("",),
        fallback: Callable = report_and_copy,
        fold_case: bool = True,
) -> TranscriptionResult:
    """Transcribe a text with an ordered collection of rules.

    Parameters
    ----------
    text: str
        Native orthography to transcribe
    rules: RuleTable or Iterable[Rule]
        Rules in order of priority
    variants: Iterable[str]
        Labels of the dialect variants to produce, at least one
    fallback: callable
        Receives a ``Gap`` when no rule matches, and returns the string to
        append to every variant
    fold_case: bool
        Case-fold the text before transcribing it. Gap positions refer to
        the folded text.

    Returns
    -------
    TranscriptionResult

    Raises
    ------
    ConfigurationDefect
        If a rule that fires consumes less than one character or more than
        remain, or its variant alternatives don't match the variants.
    """
    rules = tuple(rules)
    labels = list(variants)
    if not labels:
        raise ConfigurationDefect("At least one variant must be declared")
    if fold_case:
        text = text.casefold()

    accumulators = [VariantAccumulator(label) for label in labels]
    gaps = []
    trace = []
    cursor = 0
    while cursor < len(text):
        found = find_rule(rules, text, cursor)
        if found is None:
            gap = Gap(cursor, text[cursor])
            gaps.append(gap)
            expand_variants(fallback(gap), accumulators)
            trace.append(Application(cursor, 1, None))
            cursor += 1
            continue

        idx, rule, match = found
        length = rule.consumed_length(match)
        remaining = len(text) - cursor
        if length < 1 or length > remaining:
            raise ConfigurationDefect(
                f"Rule {idx} {rule!r} would consume {length} characters at "
                f"position {cursor}, but {remaining} remain of {text!r}")
        logging.debug(
            "Rule %s matched %r at position %s", idx, match.group(0), cursor)
        expand_variants(rule.output, accumulators)
        trace.append(Application(cursor, length, idx))
        cursor += length

    for accumulator in accumulators:
        accumulator.append(CLOSING_DELIMITER)
    return TranscriptionResult(
        ((acc.label, acc.text) for acc in accumulators), gaps, trace
    )
