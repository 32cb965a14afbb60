"""Quickstart example for combilex.

This example builds a few small parsers from the primitive lexers and the
composition methods, and shows how failures are reported.

Note: parse() returns either a ParseResult or a ParseError value. parse_str()
is the conversion boundary: it returns the bare value and raises
OwnedParseError on failure.
"""

from dataclasses import dataclass

from combilex import OwnedParseError, ParseError, char, count, hex, integer, skip_then, ws

# Example 1: Hex color
print("=" * 50)
print("Example 1: Hex Color")
print("=" * 50)


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int


hex_byte = count(hex(), 2).try_map(lambda pair: int(pair, 16))
hex_color = skip_then("#", hex_byte.then(hex_byte).then(hex_byte)).map(
    lambda rgb: Color(rgb[0][0], rgb[0][1], rgb[1])
)

print(hex_color.parse_str("#2F14DF"))
# Output: Color(red=47, green=20, blue=223)

# Example 2: Remaining input
print("\n" + "=" * 50)
print("Example 2: Remaining Input")
print("=" * 50)

value, rest = integer().parse("-123abc")
print(f"value={value!r} rest={rest!r}")
# Output: value=-123 rest='abc'

# Example 3: Lists
print("\n" + "=" * 50)
print("Example 3: Delimited Lists")
print("=" * 50)

numbers = integer().many().delimiter(char(",").then(ws().many()))
print(numbers.parse_str("1, 2,3,  -4"))
# Output: [1, 2, 3, -4]

# Example 4: Errors
print("\n" + "=" * 50)
print("Example 4: Error Reporting")
print("=" * 50)

error = hex_color.parse("#2F14DG")
assert isinstance(error, ParseError)
print(error.message)
print(error.format_with_context())

try:
    hex_color.parse_str("#2F14DF trailing")
except OwnedParseError as e:
    print(f"line {e.line}, column {e.column}: {e.expected}")

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed!")
print("=" * 50)
