"""Classic recursive functions."""


def power(x, y):
    """x raised to a non-negative integer power y."""
    if y < 0:
        raise ValueError("exponent must not be negative")
    return x ** y


def factorial(n):
    """Factorial of a non-negative integer."""
    if n < 0:
        raise ValueError("factorial of a negative number")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fibonacci(n):
    """The n-th Fibonacci number, with fibonacci(0) == 0 and fibonacci(1) == 1."""
    if n < 0:
        raise ValueError("index must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a


def gcd(a, b):
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return abs(a)


def hanoi_moves(n, source="A", dest="C", spare="B"):
    """Yield (from, to) moves that carry n rings from source to dest."""
    if n <= 0:
        return
    if n == 1:
        yield source, dest
        return
    yield from hanoi_moves(n - 1, source, spare, dest)
    yield source, dest
    yield from hanoi_moves(n - 1, spare, dest, source)