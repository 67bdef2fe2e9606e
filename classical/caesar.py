"""
Caesar (shift) cipher, case preserving.
"""
import logging
import math
from typing import Dict

from .alphabet import LOWER, UPPER, index_letter, letter_index
from .errors import MalformedShiftError
from .modular import MODULUS, normalize

logger = logging.getLogger(__name__)


def shift_mapping(shift: int) -> Dict[str, str]:
    """
    Mapping for uppercase letters, each letter shifted by `shift` (mod 26).
    """
    shift = normalize(shift, MODULUS)
    return {UPPER[i]: UPPER[(i + shift) % MODULUS] for i in range(MODULUS)}


def format_mapping_table(shift: int) -> str:
    """
    Key mapping as a three row table, e.g. for shift 3:

     A  B  C  D ...
     --+--+--+-- ...
     D  E  F  G ...
    """
    mapping = shift_mapping(shift)
    plain_letters = list(UPPER)

    row1 = " ".join(f"{letter:2}" for letter in plain_letters)
    row2 = " " + "--" + "+--" * (len(plain_letters) - 1) + " "
    row3 = " ".join(f"{mapping[letter]:2}" for letter in plain_letters)
    return "\n".join([row1, row2, row3])


def caesar_transform(text: str, shift: int) -> str:
    """
    Shifts every letter by `shift` inside its own case class.
    Whitespace is removed; any other non-letter is kept as is.
    Negative shifts wrap, e.g. -7 behaves like 19.
    """
    shift = normalize(shift, MODULUS)
    logger.debug("normalized shift %d", shift)
    text = "".join(text.split())

    result = []
    for char in text:
        if char in UPPER:
            result.append(index_letter(letter_index(char) + shift, upper=True))
        elif char in LOWER:
            result.append(index_letter(letter_index(char) + shift, upper=False))
        else:
            result.append(char)
    return "".join(result)


def caesar_encrypt(text: str, shift: int) -> str:
    return caesar_transform(text, shift)


def caesar_decrypt(text: str, shift: int) -> str:
    return caesar_transform(text, -shift)


def parse_shift(text: str) -> int:
    """
    Parse a shift typed by the user. Accepts integers and integral
    decimals such as "3.0"; anything else raises MalformedShiftError.
    """
    token = text.strip()
    try:
        return int(token, 10)
    except ValueError:
        pass
    try:
        value = float(token)
    except ValueError:
        raise MalformedShiftError(f"Shift must be a number (got {text!r}).") from None
    if not math.isfinite(value) or not value.is_integer():
        raise MalformedShiftError(f"Shift must be a whole number (got {text!r}).")
    return int(value)
