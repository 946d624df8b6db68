"""Arithmetic on decimal strings and base conversion."""

from itertools import zip_longest

_DIGITS = "0123456789ABCDEF"


def _validate(number):
    if not number or any(ch not in "0123456789" for ch in number):
        raise ValueError(f"not a decimal number: {number!r}")


def add_big(a, b):
    """Sum of two non-negative decimal strings, as a decimal string."""
    _validate(a)
    _validate(b)
    carry = 0
    digits = []
    for da, db in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        carry, digit = divmod(int(da) + int(db) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits)).lstrip("0") or "0"


def big_div(number, divisor):
    """Integer quotient of a decimal string by a positive int, as a decimal string."""
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if divisor < 0:
        raise ValueError("divisor must be positive")
    _validate(number)
    quotient = []
    remainder = 0
    for ch in number:
        remainder = remainder * 10 + int(ch)
        quotient.append(str(remainder // divisor))
        remainder %= divisor
    return "".join(quotient).lstrip("0") or "0"


def big_mod(number, divisor):
    """Remainder of a decimal string divided by a positive int."""
    if divisor == 0:
        raise ZeroDivisionError("modulo by zero")
    if divisor < 0:
        raise ValueError("divisor must be positive")
    _validate(number)
    result = 0
    for ch in number:
        result = (result * 10 + int(ch)) % divisor
    return result


def to_base(n, base):
    """Write the integer n in a base from 2 to 16 using digits 0-9A-F."""
    if not 2 <= base <= 16:
        raise ValueError("base must be between 2 and 16")
    if n == 0:
        return "0"
    sign = "-" if n < 0 else ""
    q = abs(n)
    digits = []
    while q:
        q, rem = divmod(q, base)
        digits.append(_DIGITS[rem])
    return sign + "".join(reversed(digits))