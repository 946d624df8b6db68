"""Bit manipulation on integers used as bit sets."""


def _check_position(j):
    if j < 0:
        raise ValueError("bit position must not be negative")


def is_bit_on(s, j):
    """Whether bit j of s is set."""
    _check_position(j)
    return s & (1 << j) != 0


def set_bit(s, j):
    """s with bit j set."""
    _check_position(j)
    return s | (1 << j)


def clear_bit(s, j):
    """s with bit j cleared."""
    _check_position(j)
    return s & ~(1 << j)


def flip_bit(s, j):
    """s with bit j toggled."""
    _check_position(j)
    return s ^ (1 << j)


def lowest_set_bit(s):
    """Value of the least significant set bit of s (0 for 0)."""
    return s & -s


def all_bits_on(n):
    """Integer with its n lowest bits set."""
    _check_position(n)
    return (1 << n) - 1


def multiply_pow2(s, k):
    """s multiplied by 2**k."""
    _check_position(k)
    return s << k


def divide_pow2(s, k):
    """s divided by 2**k, rounding down."""
    _check_position(k)
    return s >> k