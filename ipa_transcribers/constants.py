"""Constant values used by ipa_transcribers.

* Delimiters that bracket a broad transcription.
* Validation schemas for rule tables and the word lists given to the
  batch commands.
"""

import re

import pandera.pandas as pa
from pandera.pandas import Column, DataFrameSchema, Check
from schema import Schema, Optional, Or, And

from .languages import LANGUAGE_CODES, STATUS_NAMES


OPENING_DELIMITER = "/"
CLOSING_DELIMITER = "/"

FALLBACK_NAMES = ["report", "copy"]

# Characters before the cursor that a string context is searched in
CONTEXT_WINDOW = 32


def is_regex(pattern) -> bool:
    """Check that a string compiles as a regular expression."""
    try:
        re.compile(pattern)
    except re.error:
        return False
    return True


# Define validation Schemas
language_schema = Schema(Or(*LANGUAGE_CODES))

rule_schema = Schema({
    "pattern": And(str, is_regex),
    "output": Or(str, [str], (str,)),
    Optional("consumes"): int,
    Optional("context"): Or(None, And(str, is_regex)),
})

rule_table_schema = Schema({
    "name": str,
    "language": language_schema.schema,
    Optional("status"): Or(*STATUS_NAMES),
    "variants": And([str], len),
    Optional("fallback"): Or(*FALLBACK_NAMES),
    "rules": [rule_schema.schema],
})

wordlist_schema = DataFrameSchema({
    "word": Column(
        pa.String, Check(lambda s: s.str.strip().str.len() > 0)
    ),
})

wordlist_column_names = ["word"]

RULES_FILENAME = "rules.py"
TRANSCRIPTION_PREFIX = "transcriptions"
