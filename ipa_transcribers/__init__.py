"""Rule-based transcription of native orthography into broad IPA."""

from .exceptions import (
    ConfigurationDefect,
    TranscriptionError,
    UnsupportedLanguageError,
)
from .languages import CompletionStatus, Language
from .rewriter import (
    Gap,
    TranscriptionResult,
    copy_through,
    process_with_rules,
    report_and_copy,
)
from .rule_objects import Rule, RuleTable
from .transcribers import (
    REGISTRY,
    Transcriber,
    build_registry,
    get_transcriber,
    transcribe,
)
