"""
2x2 Hill cipher.

The message is stripped of whitespace, padded with 'z' to an even length,
cut into 2-letter blocks and every block is multiplied by the key matrix
modulo 26. Output is always uppercase.

Decryption is the same transform with the inverse key.
"""
import logging
from typing import Dict, Sequence, Union

import numpy as np

from .alphabet import index_letter, is_letter, letter_index
from .errors import InvalidMessageError, MalformedKeyError
from .matrix_key import MatrixKey
from .modular import MODULUS

logger = logging.getLogger(__name__)

PAD_LETTER = "z"

KeyLike = Union[MatrixKey, Sequence[int]]


def _as_key(key: KeyLike) -> MatrixKey:
    if isinstance(key, MatrixKey):
        return key
    if isinstance(key, (str, bytes)):
        raise MalformedKeyError("Key must be 4 numbers, not a string; use parse_key().")
    try:
        return MatrixKey.from_values(key)
    except TypeError:
        raise MalformedKeyError(f"Key must be 4 numbers (got {key!r}).") from None


def prepare_message(message: str) -> str:
    """
    Remove whitespace, pad to even length and lower-case.
    "ab c" -> "abcz"
    """
    message = "".join(message.split())
    for char in message:
        if not is_letter(char):
            raise InvalidMessageError(f"Hill cipher only handles letters A-Z (got {char!r}).")
    if len(message) % 2 != 0:
        message += PAD_LETTER
    return message.lower()


def to_blocks(message: str) -> np.ndarray:
    # shape (n, 2): one row per block, left to right
    numbers = [letter_index(char) for char in message]
    return np.array(numbers, dtype=np.int64).reshape(-1, 2)


def hill_transform(message: str, key: KeyLike) -> str:
    """
    Encrypts (or, given an inverse key, decrypts) a message.

    For each block (x, y):
        top    = (a*x + b*y) mod 26
        bottom = (c*x + d*y) mod 26
    """
    key = _as_key(key)
    message = prepare_message(message)
    if not message:
        return ""

    blocks = to_blocks(message)
    # row vector form of K @ [x, y]^T for every block at once
    result = (blocks @ key.as_array().T) % MODULUS
    logger.debug("blocks %s -> %s", blocks.tolist(), result.tolist())
    return "".join(index_letter(int(n)) for n in result.flatten())


def hill_encrypt(plaintext: str, key: KeyLike) -> str:
    return hill_transform(plaintext, key)


def hill_decrypt(ciphertext: str, key: KeyLike) -> str:
    """
    Decrypts with the inverse of `key`.
    Raises NonInvertibleKeyError if the key has no inverse modulo 26.
    """
    return hill_transform(ciphertext, _as_key(key).invert())


def hill_table(message: str, key: KeyLike) -> Dict[str, str]:
    """
    Both directions applied to the same text:
        {"encryption": E_K(message), "decryption": E_K^-1(message)}
    The inverse is computed first so a bad key produces no output at all.
    """
    key = _as_key(key)
    inverse = key.invert()
    return {
        "encryption": hill_transform(message, key),
        "decryption": hill_transform(message, inverse),
    }
