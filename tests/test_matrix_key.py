import pytest

from classical.errors import MalformedKeyError, NonInvertibleKeyError
from classical.matrix_key import MatrixKey, invert_key, parse_key


def test_determinant_and_invertibility():
    key = MatrixKey(3, 3, 2, 5)
    assert key.determinant == 9
    assert key.is_invertible
    assert not MatrixKey(2, 4, 4, 8).is_invertible
    assert not MatrixKey(1, 0, 0, 13).is_invertible


def test_invert_known_key():
    assert MatrixKey(3, 3, 2, 5).invert() == MatrixKey(15, 17, 20, 9)
    assert invert_key(3, 3, 2, 5) == (15, 17, 20, 9)


def test_inverse_entries_are_in_range():
    inverse = MatrixKey(-3, 41, 7, -12).invert()
    assert all(0 <= x < 26 for x in inverse)


@pytest.mark.parametrize("key", [(3, 3, 2, 5), (1, 0, 0, 1), (5, 17, 4, 15), (-3, 41, 7, -12)])
def test_inverse_of_inverse(key):
    key = MatrixKey(*key)
    assert key.invert().invert() == MatrixKey(*(x % 26 for x in key))


def test_key_times_inverse_is_identity():
    key = MatrixKey(5, 17, 4, 15)
    inv = key.invert()
    product = (key.as_array() @ inv.as_array()) % 26
    assert product.tolist() == [[1, 0], [0, 1]]


def test_zero_determinant_is_rejected():
    with pytest.raises(NonInvertibleKeyError) as exc:
        MatrixKey(2, 4, 4, 8).invert()
    assert exc.value.determinant == 0


def test_even_determinant_is_rejected():
    # det = 2
    with pytest.raises(NonInvertibleKeyError):
        invert_key(2, 0, 0, 1)


def test_parse_key():
    assert parse_key("3 3 2 5") == MatrixKey(3, 3, 2, 5)
    assert parse_key("  -1\t2  3 4\n") == MatrixKey(-1, 2, 3, 4)


@pytest.mark.parametrize("text", ["", "1 2 3", "1 2 3 4 5", "1 2 x 4", "1.5 2 3 4"])
def test_parse_key_rejects_malformed(text):
    with pytest.raises(MalformedKeyError):
        parse_key(text)


def test_from_values_rejects_non_integers():
    with pytest.raises(MalformedKeyError):
        MatrixKey.from_values([1, 2, 3.0, 4])
    with pytest.raises(MalformedKeyError):
        MatrixKey.from_values([1, 2, 3])


def test_format_matrix():
    assert MatrixKey(3, 3, 2, 5).format_matrix() == "  3   3\n  2   5"
