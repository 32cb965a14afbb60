"""Repetition operators: many, count, delimited, many-until and all.

Repetition is the one place where partial success is tolerated. A loop
stops at the first failure of its item (or when the upper bound is reached);
the failing attempt consumes nothing and its error is discarded as long as the
lower bound was met.

Loop state (count, current cursor, collected values) is local to each
``attempt`` call. The combinator objects only hold configuration.

A zero-width success ends a loop: attempting again at the same position
would match the same way forever. The zero-width value counts once; when the
lower bound is not yet met it is repeated up to that bound, since every
further attempt would produce exactly the same match.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from typing import Any

from combilex.constants import MAX_REPETITIONS
from combilex.core.protocols import Lex, Outcome, Parse, coerce, spanned
from combilex.diagnostics import CombinatorConfigError, DiagnosticCode, ErrorTemplate
from combilex.syntax.cursor import Cursor, ParseError, ParseResult

__all__ = [
    "AllOf",
    "Count",
    "Delimited",
    "LexAllOf",
    "LexCount",
    "LexDelimited",
    "LexMany",
    "LexManyUntil",
    "Many",
    "ManyUntil",
    "all_of",
    "count",
    "delimited",
    "many",
]


def _bounds(minimum: int, maximum: int | None) -> tuple[int, int]:
    """Validate repetition bounds; ``None`` means unbounded.

    Raises:
        CombinatorConfigError: If a bound is negative
    """
    if minimum < 0 or (maximum is not None and maximum < 0):
        raise CombinatorConfigError(ErrorTemplate.invalid_bounds(minimum, maximum))
    return minimum, MAX_REPETITIONS if maximum is None else maximum


def _too_few(minimum: int, got: int, cursor: Cursor) -> ParseError:
    return ParseError(
        ErrorTemplate.describe_repetitions(minimum, got),
        cursor,
        code=DiagnosticCode.MINIMUM_REPETITIONS,
    )


def _fill[T](values: list[T], value: T, minimum: int, maximum: int) -> None:
    """Repeat a zero-width value up to the bound it would reach by itself."""
    missing = min(minimum, maximum) - len(values)
    if missing > 0:
        values.extend([value] * missing)


# ============================================================================
# many
# ============================================================================


@dataclass(frozen=True, slots=True)
class Many[T](Parse[list[T]]):
    """Greedy repetition with inclusive bounds.

    Attributes:
        item: Repeated parser
        minimum: Fewest repetitions that count as success
        maximum: Most repetitions attempted
    """

    item: Parse[T]
    minimum: int = 0
    maximum: int = MAX_REPETITIONS

    def attempt(self, cursor: Cursor) -> Outcome[list[T]]:
        values: list[T] = []
        current = cursor
        while len(values) < self.maximum:
            result = self.item.attempt(current)
            if isinstance(result, ParseError):
                break
            values.append(result.value)
            if result.cursor.pos == current.pos:
                _fill(values, result.value, self.minimum, self.maximum)
                break
            current = result.cursor
        if len(values) < self.minimum:
            return _too_few(self.minimum, len(values), current)
        return ParseResult(values, current)

    def delimiter(self, separator: Parse[Any] | str) -> Parse[Any]:
        """The same repetition with ``separator`` between items."""
        return delimited(self.item, separator, self.minimum, self.maximum)

    def until(self, stop: Parse[Any] | str) -> Parse[Any]:
        """The same repetition, ending early where ``stop`` matches."""
        stop = coerce(stop)
        if isinstance(self.item, Lex) and isinstance(stop, Lex):
            return LexManyUntil(self.item, stop, self.minimum, self.maximum)
        return ManyUntil(self.item, stop, self.minimum, self.maximum)


class LexMany(Many[str], Lex):
    """Repeated lexer; value is the whole repeated span."""

    __slots__ = ()

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        return spanned(cursor, Many.attempt(self, cursor))


def many(item: Parse[Any] | str, minimum: int = 0, maximum: int | None = None) -> Parse[Any]:
    """Repeat ``item`` greedily, ``minimum <= n <= maximum`` times.

    Succeeds with the collected values (a list, or the whole span when
    ``item`` is a lexer) and the input after the last success. Fails with
    "at least <minimum> repetitions, got <n>" when the item stops matching
    too early. With ``minimum == 0`` a first failure is an empty success.

    Args:
        item: Repeated parser or lexer (strings become literals)
        minimum: Lower bound (inclusive)
        maximum: Upper bound (inclusive); None = unbounded

    Raises:
        CombinatorConfigError: If a bound is negative

    Example:
        >>> many(digit(), 1).parse("123abc")
        ParseResult(value='123', cursor=Cursor(source='123abc', pos=3))
        >>> many(digit(), 1).parse("abc").message
        "expected at least 1 repetitions, got 0, found 'a'"
    """
    item = coerce(item)
    low, high = _bounds(minimum, maximum)
    if isinstance(item, Lex):
        return LexMany(item, low, high)
    return Many(item, low, high)


# ============================================================================
# count
# ============================================================================


@dataclass(frozen=True, slots=True)
class Count[T](Parse[list[T]]):
    """Exactly ``times`` repetitions; the item's own error on any failure."""

    item: Parse[T]
    times: int

    def attempt(self, cursor: Cursor) -> Outcome[list[T]]:
        values: list[T] = []
        current = cursor
        for _ in range(self.times):
            result = self.item.attempt(current)
            if isinstance(result, ParseError):
                return result
            values.append(result.value)
            current = result.cursor
        return ParseResult(values, current)


class LexCount(Count[str], Lex):
    """Fixed-width lexer repetition; value is the whole span."""

    __slots__ = ()

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        return spanned(cursor, Count.attempt(self, cursor))


def count(item: Parse[Any] | str, times: int) -> Parse[Any]:
    """Match ``item`` exactly ``times`` times.

    Unlike ``many(item, times, times)`` a failure reports the item's own
    error at the point it failed, e.g. the third digit of ``count(digit(), 3)``
    on ``"12"``.

    Raises:
        CombinatorConfigError: If ``times`` is negative
    """
    item = coerce(item)
    times, _ = _bounds(times, times)
    if isinstance(item, Lex):
        return LexCount(item, times)
    return Count(item, times)


# ============================================================================
# delimited
# ============================================================================


@dataclass(frozen=True, slots=True)
class Delimited[T](Parse[list[T]]):
    """Items separated by a separator.

    A separator after the last item is consumed along with it. An item that
    is not followed by a separator still counts and ends the loop.
    """

    item: Parse[T]
    separator: Parse[Any]
    minimum: int = 0
    maximum: int = MAX_REPETITIONS

    def attempt(self, cursor: Cursor) -> Outcome[list[T]]:
        values: list[T] = []
        current = cursor
        while len(values) < self.maximum:
            result = self.item.attempt(current)
            if isinstance(result, ParseError):
                break
            values.append(result.value)
            separator = self.separator.attempt(result.cursor)
            if isinstance(separator, ParseError):
                current = result.cursor
                break
            if separator.cursor.pos == current.pos:
                _fill(values, result.value, self.minimum, self.maximum)
                break
            current = separator.cursor
        if len(values) < self.minimum:
            return _too_few(self.minimum, len(values), current)
        return ParseResult(values, current)


class LexDelimited(Delimited[str], Lex):
    """Delimited lexer repetition; value is the whole span."""

    __slots__ = ()

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        return spanned(cursor, Delimited.attempt(self, cursor))


def delimited(
    item: Parse[Any] | str,
    separator: Parse[Any] | str,
    minimum: int = 0,
    maximum: int | None = None,
) -> Parse[Any]:
    """Repeat ``item`` with ``separator`` between occurrences.

    Example:
        >>> delimited(integer(), ",").parse("1,2,3;").value
        [1, 2, 3]

    Raises:
        CombinatorConfigError: If a bound is negative
    """
    item = coerce(item)
    separator = coerce(separator)
    low, high = _bounds(minimum, maximum)
    if isinstance(item, Lex) and isinstance(separator, Lex):
        return LexDelimited(item, separator, low, high)
    return Delimited(item, separator, low, high)


# ============================================================================
# many ... until
# ============================================================================


@dataclass(frozen=True, slots=True)
class ManyUntil[T](Parse[list[T]]):
    """Repetition that also stops where ``stop`` matches (``stop`` is not consumed)."""

    item: Parse[T]
    stop: Parse[Any]
    minimum: int = 0
    maximum: int = MAX_REPETITIONS

    def attempt(self, cursor: Cursor) -> Outcome[list[T]]:
        values: list[T] = []
        current = cursor
        while len(values) < self.maximum:
            if isinstance(self.stop.attempt(current), ParseResult):
                break
            result = self.item.attempt(current)
            if isinstance(result, ParseError):
                break
            values.append(result.value)
            if result.cursor.pos == current.pos:
                _fill(values, result.value, self.minimum, self.maximum)
                break
            current = result.cursor
        if len(values) < self.minimum:
            return _too_few(self.minimum, len(values), current)
        return ParseResult(values, current)


class LexManyUntil(ManyUntil[str], Lex):
    """Lexer repetition with a stop lexer; value is the whole span."""

    __slots__ = ()

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        return spanned(cursor, ManyUntil.attempt(self, cursor))


# ============================================================================
# all
# ============================================================================


@dataclass(frozen=True, slots=True)
class AllOf[T](Parse[list[T]]):
    """Repetition that must consume the entire input.

    An item failure before the end is reported as the item's own error,
    since it is the most precise description of what went wrong.
    """

    item: Parse[T]
    minimum: int = 0

    def attempt(self, cursor: Cursor) -> Outcome[list[T]]:
        values: list[T] = []
        current = cursor
        while not current.is_eof:
            result = self.item.attempt(current)
            if isinstance(result, ParseError):
                return result
            values.append(result.value)
            if result.cursor.pos == current.pos:
                return ParseError(
                    ErrorTemplate.describe_end(),
                    current,
                    code=DiagnosticCode.EXPECTED_END,
                    found_length=current.remaining,
                )
            current = result.cursor
        if len(values) < self.minimum:
            return _too_few(self.minimum, len(values), current)
        return ParseResult(values, current)


class LexAllOf(AllOf[str], Lex):
    """Lexer repetition over the entire input; value is the whole input."""

    __slots__ = ()

    def attempt(self, cursor: Cursor) -> Outcome[str]:
        return spanned(cursor, AllOf.attempt(self, cursor))


def all_of(item: Parse[Any] | str, minimum: int = 0) -> Parse[Any]:
    """Repeat ``item`` until the input is exhausted.

    Example:
        >>> all_of(char("(") | char(")")).parse("(()").value
        '(()'

    Raises:
        CombinatorConfigError: If ``minimum`` is negative
    """
    item = coerce(item)
    low, _ = _bounds(minimum, None)
    if isinstance(item, Lex):
        return LexAllOf(item, low)
    return AllOf(item, low)
