"""Conversion between Arabic and Roman numerals."""

import re
import sys
from collections import deque

_NUMERALS = (
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
)

_VALUES = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}


def to_roman(number):
    """Roman numeral for a non-negative integer (0 gives an empty string)."""
    if number < 0:
        raise ValueError("negative numbers have no Roman numeral")
    parts = []
    for value, symbol in _NUMERALS:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def from_roman(numeral):
    """Value of a Roman numeral; a smaller symbol before a larger one pairs with it."""
    try:
        values = deque(_VALUES[ch] for ch in numeral)
    except KeyError as exc:
        raise ValueError(f"invalid Roman numeral: {numeral!r}") from exc
    if not values:
        raise ValueError("empty Roman numeral")
    total = 0
    while values:
        current = values.popleft()
        if values and current < values[0]:
            total += values.popleft() - current
        else:
            total += current
    return total


def main(argv=None):
    """Convert each token: leading digit means Arabic to Roman, otherwise Roman to Arabic."""
    tokens = sys.stdin.read().split() if argv is None else list(argv)
    status = 0
    for token in tokens:
        try:
            if token[0].isdigit():
                print(to_roman(int(re.match(r"\d+", token).group())))
            else:
                print(from_roman(token))
        except ValueError as exc:
            print(exc, file=sys.stderr)
            status = 1
    return status