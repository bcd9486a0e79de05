"""Configure default values for the ipa_transcribers command line interface."""

LANGUAGE = "es"
"""Language code to transcribe with when -l/--language isn't given"""

OUTPUT_DIR = "data/output"
"""Path to the output folder for transcribed word lists and exported rules"""

RULES_FILE = None
"""Path to a python file with extra rule tables.

Note that the order of the rules in a table matters:
the first rule that matches is applied.
"""

LOG_FILE = "log.txt"
"""Path to the file that all logging messages are written to"""
