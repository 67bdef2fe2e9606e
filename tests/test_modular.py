import math

import pytest

from classical.errors import NonInvertibleKeyError
from classical.modular import extended_gcd, mod_inverse, normalize


@pytest.mark.parametrize("a, b", [(9, 26), (26, 9), (15, 26), (-3, 26), (0, 26), (240, 46)])
def test_extended_gcd_bezout_identity(a, b):
    g, u, v = extended_gcd(a, b)
    assert u * a + v * b == g
    assert abs(g) == math.gcd(a, b)


def test_extended_gcd_known_coefficients():
    assert extended_gcd(9, 26) == (1, 3, -1)


@pytest.mark.parametrize("x, expected", [(-7, 19), (27, 1), (26, 0), (-26, 0), (-53, 25), (5, 5)])
def test_normalize(x, expected):
    assert normalize(x) == expected


def test_mod_inverse_of_every_unit():
    for a in range(26):
        if a % 2 == 0 or a == 13:
            with pytest.raises(NonInvertibleKeyError):
                mod_inverse(a)
        else:
            assert (a * mod_inverse(a)) % 26 == 1


def test_mod_inverse_negative_input():
    # -9 == 17 mod 26, 17 * 23 = 391 = 15 * 26 + 1
    assert mod_inverse(-9) == 23


def test_mod_inverse_error_carries_value():
    with pytest.raises(NonInvertibleKeyError) as exc:
        mod_inverse(0)
    assert exc.value.determinant == 0
    assert isinstance(exc.value, ValueError)
