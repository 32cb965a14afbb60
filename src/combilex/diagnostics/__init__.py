"""Diagnostic system for combilex errors.

Provides structured error diagnostics with codes, spans and hints.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorReason, SourceSpan
from .errors import CombilexError, CombinatorConfigError, OwnedParseError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "CombilexError",
    "CombinatorConfigError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorReason",
    "ErrorTemplate",
    "OutputFormat",
    "OwnedParseError",
    "SourceSpan",
]
