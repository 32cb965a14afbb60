"""Value transformation: map (total) and try_map (fallible).

The two are separate operators. ``map`` has no failure path of its own;
``try_map`` turns an exception raised by its function into a conversion
failure positioned at the start of the match.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from combilex.core.protocols import Outcome, Parse, coerce
from combilex.diagnostics import DiagnosticCode, ErrorReason, ErrorTemplate
from combilex.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = ["CONVERSION_ERRORS", "Map", "TryMap", "map_", "try_map"]

# Exceptions a conversion function may raise to reject its input. Anything
# else is a bug in the function and propagates.
CONVERSION_ERRORS: tuple[type[Exception], ...] = (
    ValueError,
    TypeError,
    ArithmeticError,
    LookupError,
)


@dataclass(frozen=True, slots=True)
class Map[T, U](Parse[U]):
    """Apply a total function to the item's value."""

    item: Parse[T]
    function: Callable[[T], U]

    def attempt(self, cursor: Cursor) -> Outcome[U]:
        result = self.item.attempt(cursor)
        if isinstance(result, ParseError):
            return result
        return ParseResult(self.function(result.value), result.cursor)


@dataclass(frozen=True, slots=True)
class TryMap[T, U](Parse[U]):
    """Apply a function that rejects values by raising.

    A rejection fails the whole combinator at the position where the item
    started, with ``found`` covering the span the item matched: the shape
    matched but the content was invalid.
    """

    item: Parse[T]
    function: Callable[[T], U]

    def attempt(self, cursor: Cursor) -> Outcome[U]:
        result = self.item.attempt(cursor)
        if isinstance(result, ParseError):
            return result
        try:
            value = self.function(result.value)
        except CONVERSION_ERRORS as e:
            return ParseError(
                ErrorTemplate.describe_conversion(str(e) or None),
                cursor,
                reason=ErrorReason.FAILED_CONVERSION,
                code=DiagnosticCode.FAILED_CONVERSION,
                found_length=result.cursor.pos - cursor.pos,
                cause=e,
            )
        return ParseResult(value, result.cursor)


def map_(item: Parse[Any] | str, function: Callable[[Any], Any]) -> Parse[Any]:
    """Transform ``item``'s value with ``function``.

    Example:
        >>> map_(digit().many(1), len).parse("1234").value
        4
    """
    return Map(coerce(item), function)


def try_map(item: Parse[Any] | str, function: Callable[[Any], Any]) -> Parse[Any]:
    """Transform ``item``'s value with a function that may raise.

    ``ValueError``, ``TypeError``, ``ArithmeticError`` and ``LookupError``
    count as a rejection of the matched content; the exception is kept as the
    error's ``cause``.

    Example:
        >>> byte = count(hex(), 2).try_map(lambda s: int(s, 16))
        >>> byte.parse("2F").value
        47
    """
    return TryMap(coerce(item), function)
