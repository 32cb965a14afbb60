"""Locale-aware decimal parsing via Babel.

Lexes a number written with a locale's CLDR symbols (decimal separator,
grouping separator, plus and minus signs) and converts it with Babel's
``parse_decimal`` in strict mode, so misplaced grouping separators are
rejected as conversion failures.

Requires the optional Babel dependency (``pip install combilex[babel]``).

Python 3.13+.
"""

import logging
from decimal import Decimal

from combilex.constants import DEFAULT_LOCALE
from combilex.core.babel_compat import get_babel_numbers, get_unknown_locale_error
from combilex.core.locale_utils import get_babel_locale
from combilex.core.protocols import Lex, Parse
from combilex.diagnostics import CombinatorConfigError, ErrorTemplate
from combilex.lexers import char, digit, token

__all__ = ["locale_decimal"]

logger = logging.getLogger(__name__)


def _symbol(symbol: str) -> Lex:
    return char(symbol) if len(symbol) == 1 else token(symbol)


def locale_decimal(locale_code: str = DEFAULT_LOCALE) -> Parse[Decimal]:
    """Parser for a decimal number in a locale's notation.

    Accepts an optional sign, integer digits with optional grouping and an
    optional fraction: ``1,234.5`` in en_US, ``1.234,5`` in de_DE. Digits are
    ASCII. The value is a ``Decimal``.

    Args:
        locale_code: BCP-47 or POSIX locale identifier

    Returns:
        Parser producing ``Decimal`` values

    Raises:
        BabelImportError: If Babel is not installed
        CombinatorConfigError: If the locale is unknown

    Example:
        >>> locale_decimal("de_DE").parse("-1.234,5").value
        Decimal('-1234.5')
    """
    numbers = get_babel_numbers()
    unknown_locale_error = get_unknown_locale_error()
    try:
        locale = get_babel_locale(locale_code)
    except (unknown_locale_error, ValueError) as e:
        raise CombinatorConfigError(ErrorTemplate.locale_unknown(locale_code)) from e

    decimal_symbol = numbers.get_decimal_symbol(locale)
    group_symbol = numbers.get_group_symbol(locale)
    minus_signs = {numbers.get_minus_sign_symbol(locale), "-"}
    plus_signs = {numbers.get_plus_sign_symbol(locale), "+"}
    logger.debug(
        "Building locale_decimal for %s: decimal=%r group=%r",
        locale_code,
        decimal_symbol,
        group_symbol,
    )

    # Longest first: some locales prefix the sign with a direction mark.
    symbols = sorted(minus_signs | plus_signs, key=len, reverse=True)
    sign = _symbol(symbols[0])
    for symbol in symbols[1:]:
        sign = sign | _symbol(symbol)  # type: ignore[assignment]

    digits = digit().many(1)
    groups = _symbol(group_symbol).then(digits).many(0)
    fraction = _symbol(decimal_symbol).then(digits).optional()
    body = digits.then(groups).then(fraction)

    def convert(parts: tuple[str, str]) -> Decimal:
        signed, text = parts
        value = numbers.parse_decimal(text, locale=locale, strict=True)
        return value.copy_negate() if signed in minus_signs else value

    return sign.optional().text().then(body.text()).try_map(convert)
