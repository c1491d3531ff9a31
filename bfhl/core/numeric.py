"""Pure arithmetic helpers behind the `fibonacci`, `prime`, `lcm` and `hcf` operations.

Inputs are validated upstream by `bfhl.core.classifier`; nothing here raises for
well-formed integer input. Python integers are unbounded, so folds stay exact.
"""

import math
from functools import reduce


def fibonacci(n: int) -> list[int]:
    """Return the first `n` terms of the sequence 0, 1, 1, 2, ...

    `n <= 0` yields an empty list and `n == 1` yields `[0]`.
    """
    result: list[int] = []
    if n <= 0:
        return result
    result.append(0)
    if n == 1:
        return result
    result.append(1)
    for i in range(2, n):
        result.append(result[i - 1] + result[i - 2])
    return result


def is_prime(value) -> bool:
    """Primality test by trial division up to the integer square root.

    Non-integers (floats, booleans, strings, ...) and values <= 1 are not prime.
    """
    if isinstance(value, bool) or not isinstance(value, int) or value <= 1:
        return False
    if value == 2:
        return True
    if value % 2 == 0:
        return False
    limit = math.isqrt(value)
    for divisor in range(3, limit + 1, 2):
        if value % divisor == 0:
            return False
    return True


def gcd(a: int, b: int) -> int:
    x, y = abs(a), abs(b)
    while y != 0:
        x, y = y, x % y
    return x


def lcm(a: int, b: int) -> int:
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // gcd(a, b)


def filter_primes(values) -> list[int]:
    return [value for value in values if is_prime(value)]


def lcm_of(values) -> int:
    """Left fold of `lcm` across `values` in their given order."""
    return reduce(lcm, values)


def hcf_of(values) -> int:
    """Left fold of `gcd` across `values` in their given order."""
    return reduce(gcd, values)
