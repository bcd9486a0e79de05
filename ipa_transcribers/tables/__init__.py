"""Rule tables shipped with ipa_transcribers.

Each table is a plain dict, validated with ``constants.rule_table_schema``
when a transcriber is built from it.
"""

from .devanagari import marathi
from .english import english_american
from .spanish import spanish

BUILTIN_TABLES = [spanish, english_american, marathi]
