"""Input model shared by all lexers and parsers.

Public API:
    Cursor: Immutable view of the remaining input
    ParseResult: Successful outcome (value + cursor after it)
    ParseError: Borrowing failure outcome (expected + position)
    LineOffsetCache: O(log n) line:column lookups for repeated error reporting
"""

from .cursor import Cursor, LineOffsetCache, ParseError, ParseResult, as_cursor

__all__ = ["Cursor", "LineOffsetCache", "ParseError", "ParseResult", "as_cursor"]
