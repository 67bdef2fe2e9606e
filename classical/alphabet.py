import string

from .modular import MODULUS

UPPER = string.ascii_uppercase
LOWER = string.ascii_lowercase

# Explicit index tables, A/a -> 0 ... Z/z -> 25
_INDEX = {letter: i for i, letter in enumerate(UPPER)}
_INDEX.update({letter: i for i, letter in enumerate(LOWER)})


def is_letter(char: str) -> bool:
    return char in _INDEX


def letter_index(char: str) -> int:
    """
    Position of a letter in the alphabet, ignoring case.
    Raises KeyError for anything outside A-Z / a-z.
    """
    return _INDEX[char]


def index_letter(n: int, upper: bool = True) -> str:
    letters = UPPER if upper else LOWER
    return letters[n % MODULUS]
