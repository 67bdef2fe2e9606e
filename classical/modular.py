"""
Number theory over Z/26: extended Euclid, residue normalization and
modular inverses.
"""
import logging
from typing import Tuple

from .errors import NonInvertibleKeyError

logger = logging.getLogger(__name__)

MODULUS = 26


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Extended Euclidean algorithm.
    Returns (g, u, v) with u*a + v*b == g.

    Iterates on (old_r, r), (old_s, s), (old_t, t) until the remainder
    reaches 0, e.g. extended_gcd(9, 26) -> (1, 3, -1) since 3*9 - 26 = 1.
    """
    old_r, r = a, b
    old_s, s = 1, 0
    old_t, t = 0, 1
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t
    return old_r, old_s, old_t


def normalize(x: int, m: int = MODULUS) -> int:
    # canonical residue in [0, m)
    return ((x % m) + m) % m


def mod_inverse(a: int, m: int = MODULUS) -> int:
    """
    Multiplicative inverse of a modulo m.
    Raises NonInvertibleKeyError if gcd(a, m) != 1.
    """
    g, u, _ = extended_gcd(a, m)
    # gcd of a negative a comes back negative
    if abs(g) != 1:
        raise NonInvertibleKeyError(a, m)
    inverse = normalize(u * g, m)
    logger.debug("inverse of %d mod %d is %d", a, m, inverse)
    return inverse
