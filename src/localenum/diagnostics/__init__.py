"""Diagnostic system for localenum errors.

Provides structured error diagnostics with codes, hints and locale context.
Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory, FrozenErrorContext
from .errors import (
    LocaleConfigError,
    LocaleNumError,
    NumberParseError,
    SeparatorTokenError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "FrozenErrorContext",
    "LocaleConfigError",
    "LocaleNumError",
    "NumberParseError",
    "OutputFormat",
    "SeparatorTokenError",
]
