"""
Classical ciphers for the modular arithmetic lessons:
the Caesar shift and the 2x2 Hill cipher.
"""
from .errors import (
    CipherError,
    MalformedKeyError,
    MalformedShiftError,
    NonInvertibleKeyError,
    InvalidMessageError,
)
from .modular import MODULUS, extended_gcd, normalize, mod_inverse
from .matrix_key import MatrixKey, invert_key, parse_key
from .hill import PAD_LETTER, hill_transform, hill_encrypt, hill_decrypt, hill_table
from .caesar import caesar_transform, caesar_encrypt, caesar_decrypt, parse_shift

__version__ = "1.0.0"
