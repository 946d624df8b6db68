"""Polynomials as lists of terms in decreasing exponent order."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """One term: coefficient times x to the exponent."""

    coefficient: int
    exponent: int


def _combine(first, second, sign):
    left, right = iter(first), iter(second)
    a, b = next(left, None), next(right, None)
    while a is not None and b is not None:
        if a.exponent == b.exponent:
            yield Term(a.coefficient + sign * b.coefficient, a.exponent)
            a, b = next(left, None), next(right, None)
        elif a.exponent > b.exponent:
            yield a
            a = next(left, None)
        else:
            yield Term(sign * b.coefficient, b.exponent)
            b = next(right, None)
    if a is not None:
        yield a
        yield from left
    if b is not None:
        yield Term(sign * b.coefficient, b.exponent)
        yield from (Term(sign * t.coefficient, t.exponent) for t in right)


def add_poly(first, second):
    """Sum of two polynomials whose terms run from highest exponent down."""
    return list(_combine(first, second, 1))


def sub_poly(first, second):
    """Difference first - second of two polynomials in decreasing exponent order."""
    return list(_combine(first, second, -1))


def format_poly(terms):
    """One 'coefficient x exponent' line per term."""
    return "\n".join(f"{t.coefficient} x {t.exponent}" for t in terms)