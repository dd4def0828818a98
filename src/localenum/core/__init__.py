"""Core number validation and normalization.

The pure part of localenum: separator tokens, per-locale configs, pattern
construction and normalization. Nothing here performs I/O, logs, or keeps
mutable state, and nothing here imports Babel at module load.

    tokens <- config <- patterns <- normalizer

Exports:
    SeparatorToken: Validated regex fragment for one separator role
    LocaleNumberConfig: Thousands/decimal tokens plus grouping style
    build_validation_pattern: Grouped validation pattern for two tokens
    build_ungrouped_pattern: Validation pattern for plain digit runs
    build_patterns: Both patterns for a config
    PatternTable: Immutable config-key to patterns lookup
    normalize: Validate and clean a number representation

Python 3.13+.
"""

from .config import LocaleNumberConfig, PatternKey
from .normalizer import normalize
from .patterns import (
    PatternTable,
    ValidationPatterns,
    build_patterns,
    build_ungrouped_pattern,
    build_validation_pattern,
)
from .tokens import SeparatorToken

__all__ = [
    "LocaleNumberConfig",
    "PatternKey",
    "PatternTable",
    "SeparatorToken",
    "ValidationPatterns",
    "build_patterns",
    "build_ungrouped_pattern",
    "build_validation_pattern",
    "normalize",
]
