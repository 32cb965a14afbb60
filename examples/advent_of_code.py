"""Two Advent of Code 2015 puzzles solved with combilex.

Day 1 ("Not Quite Lisp"): every '(' goes up a floor and every ')' goes down
one. Day 2 ("I Was Told There Would Be No Math"): each line is a present's
dimensions written LxWxH.
"""

from __future__ import annotations

from dataclasses import dataclass

from combilex import OwnedParseError, char, end, uint

# Day 1 - parsers are defined inline, the whole solution is one expression
UP = char("(").map(lambda _: 1)
DOWN = char(")").map(lambda _: -1)


def find_floor(instructions: str) -> int:
    """Sum the floor changes of a non-empty instruction string."""
    return sum((UP | DOWN).many(1).parse_str(instructions))


# Day 2 - parsers are defined once and used to build a value type
SIDE = uint()
DIMENSIONS = SIDE.then_skip(char("x").pad()).then(SIDE).then_skip(char("x").pad()).then(SIDE)


@dataclass(frozen=True)
class Dimensions:
    length: int
    width: int
    height: int

    @classmethod
    def from_str(cls, text: str) -> Dimensions:
        """Parse ``LxWxH``; anything after the third side is an error."""
        ((length, width), height), _ = DIMENSIONS.then(end()).parse_str(text)
        return cls(length, width, height)

    def wrapping_paper(self) -> int:
        """Surface area plus the area of the smallest side."""
        sides = (
            self.length * self.width,
            self.width * self.height,
            self.height * self.length,
        )
        return 2 * sum(sides) + min(sides)


if __name__ == "__main__":
    print(f"floor {find_floor('(()))()(((()())()()((()()()()()))()())(()()))))(()()()(((())()')}")

    for line in ("2x3x4", "1x1x10", "10 x 20 x 30"):
        present = Dimensions.from_str(line)
        print(f"{line}: {present.wrapping_paper()} square feet")

    try:
        Dimensions.from_str("10x20x30x40")
    except OwnedParseError as e:
        print(f"rejected: matched {e.matched!r}, remaining {e.remainder!r}")
