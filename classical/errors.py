class CipherError(ValueError):
    """Base class for every input the ciphers refuse to work with."""


class MalformedKeyError(CipherError):
    pass


class MalformedShiftError(CipherError):
    pass


class InvalidMessageError(CipherError):
    pass


class NonInvertibleKeyError(CipherError):
    """
    Raised when a key has no inverse modulo 26, i.e. gcd(det, 26) != 1.
    Such a key still encrypts, but nothing can decrypt what it produced.
    """

    def __init__(self, determinant: int, modulus: int = 26):
        self.determinant = determinant
        self.modulus = modulus
        super().__init__(
            f"Key is not invertible modulo {modulus} "
            f"(determinant {determinant} shares a factor with {modulus})."
        )
