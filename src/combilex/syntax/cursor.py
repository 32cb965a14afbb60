"""Immutable cursor infrastructure for type-safe parsing.

Implements the immutable cursor pattern shared by every lexer and parser.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Line:column computed on-demand (O(n) only for errors)
    - Errors point into the source through a cursor; text is copied only
      when an error is converted to its owned form

Line Ending Support:
    - LF (Unix, \\n) and CRLF (Windows, \\r\\n) are supported for line:column
      reporting (\\n is the line delimiter)
    - CR-only (Classic Mac, \\r) files report everything on line 1

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass, field, replace

from combilex.constants import MAX_FOUND_LENGTH
from combilex.diagnostics import (
    DiagnosticCode,
    ErrorReason,
    ErrorTemplate,
    OwnedParseError,
    SourceSpan,
)

__all__ = ["Cursor", "LineOffsetCache", "ParseError", "ParseResult", "as_cursor"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable view of the input remaining to be parsed.

    A cursor is the whole source plus an offset. Slicing never happens while
    matching; only the consumed span of a successful lex is materialized.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> cursor.current
        'h'
        >>> new_cursor = cursor.advance()
        >>> new_cursor.rest
        'ello'
        >>> cursor.current  # Original unchanged (immutability)
        'h'
        >>> Cursor("hi", 2).is_eof
        True
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """Check if at end of input.

        Returns:
            True if position >= source length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            diagnostic = ErrorTemplate.unexpected_eof(self.pos)
            raise EOFError(diagnostic.message)
        return self.source[self.pos]

    @property
    def rest(self) -> str:
        """Remaining input from the current position.

        Copies the tail of the source; meant for callers and tests, not for
        use inside matching loops.
        """
        return self.source[self.pos :]

    @property
    def remaining(self) -> int:
        """Number of characters left."""
        return max(len(self.source) - self.pos, 0)

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond EOF
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Args:
            count: Number of positions to advance (default: 1)

        Returns:
            New Cursor instance at new position (original unchanged), clamped
            to the end of the source
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def at(self, pos: int) -> "Cursor":
        """Return a cursor over the same source at an absolute position."""
        return Cursor(self.source, min(pos, len(self.source)))

    def startswith(self, literal: str) -> bool:
        """Check whether the remaining input starts with literal (no copy)."""
        return self.source.startswith(literal, self.pos)

    def find(self, pattern: str) -> int:
        """Absolute position of the next occurrence of pattern, or -1."""
        return self.source.find(pattern, self.pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos.

        Args:
            end_pos: End position (exclusive)

        Returns:
            Source substring from current position to end_pos

        Example:
            >>> start = Cursor("hello world", 0)
            >>> cursor = start
            >>> while not cursor.is_eof and cursor.current != " ":
            ...     cursor = cursor.advance()
            >>> start.slice_to(cursor.pos)
            'hello'
        """
        return self.source[self.pos : end_pos]

    def slice_ahead(self, n: int) -> str:
        """Get next n characters without advancing cursor.

        Returns:
            String of up to n characters starting at current position.
            May return fewer characters if near EOF.
        """
        return self.source[self.pos : self.pos + n]

    def compute_line_col(self) -> tuple[int, int]:
        """Compute line and column for current position.

        Returns:
            (line, column) tuple (1-indexed, like text editors)

        Performance:
            O(n) where n = current position
            Only call for error reporting, not during normal parsing!

        Example:
            >>> Cursor("line1\\nline2", 8).compute_line_col()
            (2, 3)
        """
        pos = min(self.pos, len(self.source))
        line = self.source.count("\n", 0, pos) + 1
        last_newline = self.source.rfind("\n", 0, pos)
        col = pos - last_newline if last_newline >= 0 else pos + 1
        return (line, col)


def as_cursor(source: "str | Cursor") -> Cursor:
    """Accept either raw text or an existing cursor as parser input."""
    if isinstance(source, Cursor):
        return source
    return Cursor(source, 0)


class LineOffsetCache:
    """Cached line offset computation for efficient position lookups.

    Precomputes line start offsets in O(n) single pass, then provides
    O(log n) lookups using binary search. Use this when reporting many
    errors against the same source.

    Example:
        >>> cache = LineOffsetCache("line1\\nline2\\nline3")
        >>> cache.get_line_col(8)
        (2, 3)

    Thread Safety:
        Thread-safe. Internal state is only set during __init__.
    """

    __slots__ = ("_offsets", "_source_len")

    def __init__(self, source: str) -> None:
        """Build line offset cache from source.

        Args:
            source: Source text to index
        """
        offsets = [0]
        for i, char in enumerate(source):
            if char == "\n":
                offsets.append(i + 1)
        self._offsets: tuple[int, ...] = tuple(offsets)
        self._source_len = len(source)

    def get_line_col(self, pos: int) -> tuple[int, int]:
        """Get line and column for position using binary search.

        Args:
            pos: Character position in source (0-indexed, clamped)

        Returns:
            (line, column) tuple (1-indexed)
        """
        pos = max(0, min(pos, self._source_len))

        left, right = 0, len(self._offsets) - 1
        while left < right:
            mid = (left + right + 1) // 2
            if self._offsets[mid] <= pos:
                left = mid
            else:
                right = mid - 1

        return (left + 1, pos - self._offsets[left] + 1)


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Successful outcome: parsed value and the cursor after it.

    For lexers the value is the consumed span itself, so
    ``value + cursor.rest`` reconstitutes the lexer's input.

    Example:
        >>> cursor = Cursor("hello", 0)
        >>> result = ParseResult("h", cursor.advance())
        >>> result.value
        'h'
        >>> result.rest
        'ello'
    """

    value: T
    cursor: Cursor

    @property
    def rest(self) -> str:
        """Remaining unparsed input."""
        return self.cursor.rest

    def __iter__(self):  # type: ignore[no-untyped-def]
        """Unpack as ``value, rest`` pairs: ``value, rest = parser.parse(text)``."""
        yield self.value
        yield self.cursor.rest


@dataclass(frozen=True, slots=True)
class ParseError:
    """Failure outcome: what was expected, and where.

    This is the borrowing form of a parse failure. It refers to the input
    through cursors and copies no text, which keeps failing cheap: ordered
    alternation and repetition discard most errors immediately. Convert to
    ``OwnedParseError`` with ``to_owned()`` before the error outlives the
    parse call (e.g. to raise it).

    Attributes:
        expected: Description of what was being matched
        cursor: Position of the failure
        reason: NO_MATCH or FAILED_CONVERSION
        code: Diagnostic code of the failing combinator
        found_length: Length of the offending fragment at ``cursor``
        origin: Input of the outermost ``parse()`` call (set by ``offset``)
        cause: Exception raised by a fallible transform, if any

    Example:
        >>> error = ParseError("literal '}'", Cursor("hello", 2), found_length=1)
        >>> error.format_error()
        "1:3: expected literal '}', found 'l'"
    """

    expected: str
    cursor: Cursor
    reason: ErrorReason = ErrorReason.NO_MATCH
    code: DiagnosticCode = DiagnosticCode.EXPECTED_CHARACTER
    found_length: int = 1
    origin: Cursor | None = None
    cause: BaseException | None = field(default=None, compare=False)

    @property
    def position(self) -> int:
        """Character offset of the failure in the source."""
        return self.cursor.pos

    @property
    def found(self) -> str | None:
        """Input fragment found instead of the expectation, None at end of input."""
        if self.cursor.is_eof:
            return None
        return self.cursor.slice_ahead(min(max(self.found_length, 0), MAX_FOUND_LENGTH))

    @property
    def remainder(self) -> str:
        """Input left unparsed at the failure point."""
        return self.cursor.rest

    @property
    def matched(self) -> str:
        """Input matched before the failure, from the outermost parser's start.

        Only meaningful once the error has left the parser that first saw the
        input (``parse()`` stamps the origin); inside a combinator chain the
        origin may still be unset, in which case this is empty.
        """
        if self.origin is None:
            return ""
        return self.origin.slice_to(self.cursor.pos)

    @property
    def message(self) -> str:
        """One-line description without location."""
        found = self.found
        if found is None:
            return f"expected {self.expected}, found end of input"
        return f"expected {self.expected}, found {found!r}"

    def offset(self, origin: Cursor) -> "ParseError":
        """Record the input of the parser that is returning this error.

        This is how the original input of a whole parser chain is found:
        each public ``parse()`` call stamps its own input, the outermost call
        stamps last.
        """
        return replace(self, origin=origin)

    def merge(self, other: "ParseError") -> "ParseError":
        """Merge with an error from an alternative branch.

        The error that got further into the input is kept, as it is the more
        specific and helpful of the two. On a tie the later error wins.
        """
        if self.cursor.pos > other.cursor.pos:
            return self
        return other

    def span(self) -> SourceSpan:
        """Source location of the failure."""
        line, col = self.cursor.compute_line_col()
        end = min(self.cursor.pos + max(self.found_length, 0), len(self.cursor.source))
        return SourceSpan(
            start=self.cursor.pos, end=max(end, self.cursor.pos), line=line, column=col
        )

    def to_owned(self) -> OwnedParseError:
        """Copy this error into an exception independent of the input.

        Returns:
            OwnedParseError carrying copies of every borrowed fragment
        """
        origin = self.origin if self.origin is not None else self.cursor
        span = self.span()
        diagnostic = ErrorTemplate.parse_failed(self.code, self.expected, self.found, span)
        return OwnedParseError(
            diagnostic,
            span=span,
            reason=self.reason,
            expected=self.expected,
            position=self.cursor.pos,
            found=self.found,
            input_text=origin.rest,
            remainder=self.cursor.rest,
            cause=self.cause,
        )

    def format_error(self) -> str:
        """Format error with line:column.

        Example:
            >>> ParseError("literal ']'", Cursor("hello\\nworld", 7)).format_error()
            "2:2: expected literal ']', found 'o'"
        """
        line, col = self.cursor.compute_line_col()
        return f"{line}:{col}: {self.message}"

    def format_with_context(self, context_lines: int = 2) -> str:
        """Format error with source context and pointer.

        Shows the problematic line and a caret pointing to the error location.

        Args:
            context_lines: Number of lines to show before/after error

        Returns:
            Multi-line formatted error with context

        Example:
            >>> source = "a = 1\\nb = [2\\nc = 3"
            >>> print(ParseError("literal ','", Cursor(source, 11)).format_with_context())
            2:6: expected literal ',', found '2'
            <BLANKLINE>
               1 | a = 1
               2 | b = [2
                 |      ^
               3 | c = 3
        """
        line, col = self.cursor.compute_line_col()
        lines = self.cursor.source.split("\n")

        result_lines = [self.format_error(), ""]

        start_line = max(1, line - context_lines)
        end_line = min(len(lines), line + context_lines)

        for i in range(start_line, end_line + 1):
            line_num_str = f"{i:4} | "
            result_lines.append(line_num_str + lines[i - 1])

            if i == line:
                pointer = " " * (len(line_num_str) - 2) + "| " + " " * (col - 1) + "^"
                result_lines.append(pointer)

        return "\n".join(result_lines)
