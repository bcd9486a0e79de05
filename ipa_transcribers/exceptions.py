"""Errors raised by ipa_transcribers.

Unmatched input is not an error: it is handled by the fallback policy
of the rewrite engine and recorded as a ``Gap`` on the result.
"""


class TranscriptionError(Exception):
    """Base class for the errors of this package."""


class ConfigurationDefect(TranscriptionError, ValueError):
    """A rule table is broken.

    Raised when a selected rule consumes zero, negative or more characters
    than remain of the input, when the variant alternatives of a rule
    don't line up with the declared variants, or when a rule table
    dictionary doesn't validate.
    """


class UnsupportedLanguageError(TranscriptionError, LookupError):
    """No rule table is registered for the requested language."""
