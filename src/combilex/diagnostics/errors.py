"""combilex exception hierarchy with structured diagnostics.

All exceptions can carry Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorReason, SourceSpan


class CombilexError(Exception):
    """Base exception for all combilex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CombilexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class OwnedParseError(CombilexError):
    """Parse failure detached from the input it was produced from.

    The borrowing ``ParseError`` returned by combinators points into the
    source text through its cursor. This exception is its owned counterpart:
    everything needed to report the failure is copied into plain fields so it
    can be raised across a conversion boundary (``Parse.parse_str``) and kept
    after the input is gone.

    Create it with ``ParseError.to_owned()``.

    Attributes:
        code: Diagnostic code of the failing combinator
        span: Source location of the failure
        reason: NO_MATCH or FAILED_CONVERSION
        expected: What the failing combinator was matching
        position: Character offset of the failure in the source
        found: Input fragment found instead (None at end of input)
        input_text: Input seen by the outermost parser, from its start
        remainder: Input left unparsed at the failure point
        cause: Exception raised by a fallible transform, if any
    """

    def __init__(
        self,
        diagnostic: Diagnostic,
        *,
        span: SourceSpan,
        reason: ErrorReason,
        expected: str,
        position: int,
        found: str | None,
        input_text: str,
        remainder: str,
        cause: BaseException | None = None,
    ) -> None:
        """Initialize OwnedParseError.

        Args:
            diagnostic: Diagnostic describing the failure
            span: Source location of the failure
            reason: NO_MATCH or FAILED_CONVERSION
            expected: What the failing combinator was matching
            position: Character offset of the failure in the source
            found: Input fragment found instead (None at end of input)
            input_text: Input seen by the outermost parser
            remainder: Input left unparsed at the failure point
            cause: Exception raised by a fallible transform, if any
        """
        super().__init__(diagnostic)
        self.code: DiagnosticCode = diagnostic.code
        self.span: SourceSpan = span
        self.reason = reason
        self.expected = expected
        self.position = position
        self.found = found
        self.input_text = input_text
        self.remainder = remainder
        self.cause = cause

    @property
    def matched(self) -> str:
        """Input matched before the failure, from the outermost parser's start."""
        return self.input_text[: len(self.input_text) - len(self.remainder)]

    @property
    def line(self) -> int:
        """Line of the failure (1-indexed)."""
        return self.span.line

    @property
    def column(self) -> int:
        """Column of the failure (1-indexed)."""
        return self.span.column


class CombinatorConfigError(CombilexError, ValueError):
    """Combinator constructed with invalid arguments.

    Raised at construction time, never while parsing. Subclasses ValueError
    so callers validating user-supplied bounds can catch the builtin.

    Examples:
    - Negative repetition bounds
    - Empty literal
    - Radix outside 2..36
    - Unknown locale for a locale-aware parser
    """
