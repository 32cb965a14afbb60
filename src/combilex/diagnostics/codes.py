"""Diagnostic codes and data structures.

Defines error reasons, error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorReason",
    "SourceSpan",
]


class ErrorReason(StrEnum):
    """Why a lexer or parser failed.

    Inherits from ``StrEnum`` so that ``str(reason)`` and direct string
    comparisons work without accessing ``.value``.

    Reasons:
        NO_MATCH: The input did not have the expected shape
        FAILED_CONVERSION: The input had the right shape but its content
            was rejected while converting it to the output type
    """

    NO_MATCH = "no_match"
    FAILED_CONVERSION = "failed_conversion"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Match errors (input did not have the expected shape)
        2000-2999: Repetition errors
        3000-3999: Conversion errors (shape matched, content rejected)
        4000-4999: Configuration errors (invalid combinator arguments)
    """

    # Match errors (1000-1999)
    EXPECTED_CHARACTER = 1001
    EXPECTED_LITERAL = 1002
    EXPECTED_END = 1003
    UNEXPECTED_EOF = 1004
    NO_ALTERNATIVE = 1005

    # Repetition errors (2000-2999)
    MINIMUM_REPETITIONS = 2001

    # Conversion errors (3000-3999)
    FAILED_CONVERSION = 3001
    INVALID_ESCAPE = 3002

    # Configuration errors (4000-4999)
    INVALID_BOUNDS = 4001
    EMPTY_LITERAL = 4002
    INVALID_RADIX = 4003
    INVALID_CHARACTER = 4004
    LOCALE_UNKNOWN = 4005


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Source code location for error reporting.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """

    start: int
    end: int
    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative, end precedes start, line is
                less than 1 (lines are 1-indexed), or column is less than 1
                (columns are 1-indexed).
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)
        if self.line < 1:
            msg = f"SourceSpan.line must be >= 1 (1-indexed), got {self.line}"
            raise ValueError(msg)
        if self.column < 1:
            msg = f"SourceSpan.column must be >= 1 (1-indexed), got {self.column}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        span: Source location (None for configuration errors)
        hint: Suggestion for fixing the error
        expected: Description of what the failing combinator was matching
        found: Input fragment found instead (None at end of input)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    expected: str | None = None
    found: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[EXPECTED_LITERAL]: expected literal '#', found 'x'
              --> line 1, column 1
              = expected: literal '#'
              = found: 'x'

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
