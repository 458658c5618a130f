import numpy as np
import pytest

from gfsolve.field import FieldElement
from gfsolve.utils import to_elements, to_integers


@pytest.mark.parametrize(
    "values",
    [
        [[1, -1], [7, 3]],
        np.array([[1, -1], [7, 3]]),
        np.array([[1, -1], [7, 3]], dtype=np.int8),
    ],
)
def test_to_elements(values):
    rows = to_elements(values, 5)
    assert rows == [
        [FieldElement(1, 5), FieldElement(4, 5)],
        [FieldElement(2, 5), FieldElement(3, 5)],
    ]
    assert all(type(x.value) is int for row in rows for x in row)


def test_to_elements_invalid():
    with pytest.raises(ValueError):
        to_elements(np.array([1, 2, 3]), 5)
    with pytest.raises(TypeError):
        to_elements(np.array([[1.0, 2.0]]), 5)


def test_to_integers():
    rows = [[FieldElement(1, 5), FieldElement(4, 5)], [FieldElement(2, 5), FieldElement(3, 5)]]
    values = to_integers(rows)
    assert values.dtype == int
    assert np.array_equal(values, np.array([[1, 4], [2, 3]]))


def test_to_integers_large_modulus():
    modulus = 2**127 - 1
    values = to_integers([[FieldElement(-1, modulus)]])
    assert values.dtype == object
    assert values[0, 0] == modulus - 1
