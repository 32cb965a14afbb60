"""Hypothesis strategies for generating combinators and inputs.

Provides custom strategies for property-based testing of the combinator
laws: reconstitution, determinism and the repetition equivalences.
"""

from __future__ import annotations

import string

from hypothesis import strategies as st
from hypothesis.strategies import composite

from combilex import Lex, any_char, char, digit, end, hex, take, take_while, token, until, ws

# Characters the generated lexers care about, plus a little noise
ALPHABET = string.ascii_letters[:6] + string.digits[:4] + " -,.#"


def inputs() -> st.SearchStrategy[str]:
    """Short texts over the alphabet the lexers recognize."""
    return st.text(alphabet=ALPHABET, max_size=30)


@composite
def primitive_lexers(draw: st.DrawFn) -> Lex:
    """Generate one primitive lexer."""
    kind = draw(st.sampled_from(["char", "token", "digit", "hex", "ws", "any", "take", "while", "until", "end"]))
    match kind:
        case "char":
            return char(draw(st.sampled_from(ALPHABET)))
        case "token":
            return token(draw(st.text(alphabet=ALPHABET, min_size=1, max_size=3)))
        case "digit":
            return digit()
        case "hex":
            return hex()
        case "ws":
            return ws()
        case "any":
            return any_char()
        case "take":
            return take(draw(st.integers(min_value=0, max_value=4)))
        case "while":
            return take_while(str.isalpha)
        case "until":
            return until(draw(st.sampled_from(["-", ",", "ab"])))
        case _:
            return end()


@composite
def lexers(draw: st.DrawFn, depth: int = 2) -> Lex:
    """Generate a lexer tree built from primitives and lexer operators."""
    if depth <= 0 or draw(st.booleans()):
        return draw(primitive_lexers())
    op = draw(st.sampled_from(["then", "many", "count", "optional", "or"]))
    left = draw(lexers(depth=depth - 1))
    match op:
        case "then":
            return left.then(draw(lexers(depth=depth - 1)))  # type: ignore[return-value]
        case "many":
            low = draw(st.integers(min_value=0, max_value=2))
            high = draw(st.one_of(st.none(), st.integers(min_value=low, max_value=4)))
            return left.many(low, high)  # type: ignore[return-value]
        case "count":
            return left.count(draw(st.integers(min_value=0, max_value=3)))  # type: ignore[return-value]
        case "optional":
            return left.optional()  # type: ignore[return-value]
        case _:
            return left.or_(draw(lexers(depth=depth - 1)))  # type: ignore[return-value]
