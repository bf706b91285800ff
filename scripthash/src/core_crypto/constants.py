"""
SHA-256 Constant Tables

IV: first 32 bits of the fractional parts of the square roots of the first 8 primes
K:  first 32 bits of the fractional parts of the cube roots of the first 64 primes

Both tables are derived once at import using exact integer roots, so no
floating-point rounding can leak into the constants:
    floor(frac(p ** (1/n)) * 2**32) == floor((p * 2**(32*n)) ** (1/n)) mod 2**32
"""

import math
from typing import List, Tuple

from .bits import MASK_32


def first_primes(count: int) -> List[int]:
    """Return the first `count` primes by trial division."""
    primes: List[int] = []
    candidate = 2
    while len(primes) < count:
        if all(candidate % p for p in primes if p * p <= candidate):
            primes.append(candidate)
        candidate += 1
    return primes


def _icbrt(n: int) -> int:
    """Integer cube root (floor) via Newton's method."""
    if n < 2:
        return n
    x = 1 << -(-n.bit_length() // 3)
    while True:
        y = (2 * x + n // (x * x)) // 3
        if y >= x:
            return x
        x = y


def fractional_sqrt_word(prime: int) -> int:
    return math.isqrt(prime << 64) & MASK_32


def fractional_cbrt_word(prime: int) -> int:
    return _icbrt(prime << 96) & MASK_32


IV: Tuple[int, ...] = tuple(fractional_sqrt_word(p) for p in first_primes(8))

K: Tuple[int, ...] = tuple(fractional_cbrt_word(p) for p in first_primes(64))
