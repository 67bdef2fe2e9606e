"""
2x2 key matrix for the Hill cipher.

    K = [ [a, b],
          [c, d] ]

A block (x, y) is sent to (a*x + b*y, c*x + d*y) mod 26.
The inverse key is
    det     = a*d - b*c
    inv_det = det^-1 mod 26        (exists only when gcd(det, 26) == 1)
    K^-1    = inv_det * [[d, -b], [-c, a]] mod 26
"""
import logging
from math import gcd
from typing import Iterable, List, NamedTuple

import numpy as np

from .errors import MalformedKeyError
from .modular import MODULUS, mod_inverse, normalize

logger = logging.getLogger(__name__)


class MatrixKey(NamedTuple):
    a: int
    b: int
    c: int
    d: int

    @classmethod
    def from_values(cls, values: Iterable) -> "MatrixKey":
        values = list(values)
        if len(values) != 4:
            raise MalformedKeyError(f"Key must be 4 numbers (got {len(values)}).")
        for v in values:
            # bool is an int subclass but never a sensible key entry
            if isinstance(v, bool) or not isinstance(v, (int, np.integer)):
                raise MalformedKeyError(f"Key entries must be integers (got {v!r}).")
        return cls(*(int(v) for v in values))

    @property
    def determinant(self) -> int:
        return self.a * self.d - self.b * self.c

    @property
    def is_invertible(self) -> bool:
        return gcd(self.determinant, MODULUS) == 1

    def invert(self) -> "MatrixKey":
        """
        Inverse key modulo 26, every entry in [0, 26).
        Raises NonInvertibleKeyError when gcd(det, 26) != 1.
        """
        inv_det = mod_inverse(self.determinant, MODULUS)
        adjugate = (self.d, -self.b, -self.c, self.a)
        inverse = MatrixKey(*(normalize(x * inv_det, MODULUS) for x in adjugate))
        logger.debug("key %s has det %d, inverse %s", tuple(self), self.determinant, tuple(inverse))
        return inverse

    def as_rows(self) -> List[List[int]]:
        return [[self.a, self.b], [self.c, self.d]]

    def as_array(self) -> np.ndarray:
        # reduced first so the products stay inside int64
        return np.array([[normalize(x, MODULUS) for x in row] for row in self.as_rows()], dtype=np.int64)

    def format_matrix(self) -> str:
        return "\n".join(" ".join(f"{num:3}" for num in row) for row in self.as_rows())


def invert_key(a: int, b: int, c: int, d: int) -> MatrixKey:
    return MatrixKey.from_values((a, b, c, d)).invert()


def parse_key(text: str) -> MatrixKey:
    """
    Parse whitespace separated decimal tokens, e.g. "3 3 2 5".
    Raises MalformedKeyError unless there are exactly four integers.
    """
    tokens = text.split()
    if len(tokens) != 4:
        raise MalformedKeyError(f"Key must be 4 numbers (got {len(tokens)}).")
    try:
        values = [int(token, 10) for token in tokens]
    except ValueError:
        raise MalformedKeyError(f"Key must be 4 numbers (got {text!r}).") from None
    return MatrixKey.from_values(values)
