"""Prime sieve and the number-theoretic functions built on it."""

from math import isqrt, prod


class PrimeSieve:
    """Sieve of Eratosthenes covering 0..limit+1, with trial-division helpers."""

    def __init__(self, limit):
        if limit < 1:
            raise ValueError("sieve limit must be at least 1")
        size = limit + 2
        table = bytearray([1]) * size
        table[0] = table[1] = 0
        for i in range(2, isqrt(size - 1) + 1):
            if table[i]:
                table[i * i::i] = bytes(len(range(i * i, size, i)))
        self.limit = limit
        self._table = table
        self.primes = [i for i, flag in enumerate(table) if flag]

    def is_prime(self, n):
        """Return whether n is prime."""
        if n < len(self._table):
            return n >= 0 and bool(self._table[n])
        if n >= (self.limit + 2) ** 2:
            raise ValueError(f"{n} is too large for a sieve up to {self.limit}")
        return all(n % p for p in self.primes if p * p <= n)

    def _factorize(self, n):
        """Yield (prime, power) pairs of n in increasing order of prime."""
        if n < 1:
            raise ValueError("n must be a positive integer")
        for p in self.primes:
            if p * p > n:
                break
            power = 0
            while n % p == 0:
                n //= p
                power += 1
            if power:
                yield p, power
        else:
            if n >= (self.limit + 2) ** 2:
                raise ValueError(f"sieve up to {self.limit} is too small to factor this number")
        if n != 1:
            yield n, 1

    def prime_factors(self, n):
        """Prime factors of n with multiplicity, smallest first."""
        return [p for p, power in self._factorize(n) for _ in range(power)]

    def num_div(self, n):
        """Number of divisors of n; 0 and 1 map to themselves."""
        if n in (0, 1):
            return n
        return prod(power + 1 for _, power in self._factorize(n))

    def sum_div(self, n):
        """Sum of the divisors of n."""
        return prod((p ** (power + 1) - 1) // (p - 1) for p, power in self._factorize(n))

    def euler_phi(self, n):
        """Euler's totient of n; 0 and 1 map to themselves."""
        if n in (0, 1):
            return n
        result = n
        for p, _ in self._factorize(n):
            result -= result // p
        return result

    def num_diff_pf(self, n):
        """Number of distinct prime factors of n."""
        return sum(1 for _ in self._factorize(n))

    def num_pf(self, n):
        """Number of prime factors of n counted with multiplicity."""
        return sum(power for _, power in self._factorize(n))

    def sum_pf(self, n):
        """Sum of the prime factors of n counted with multiplicity."""
        return sum(p * power for p, power in self._factorize(n))


def count_distinct_prime_factors(limit):
    """Table of distinct prime factor counts for 0..limit+1; entries 0 and 1 hold 1."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    size = limit + 2
    counts = [0] * size
    counts[0] = counts[1] = 1
    for i in range(2, size):
        if counts[i] == 0:
            for j in range(i, size, i):
                counts[j] += 1
    return counts