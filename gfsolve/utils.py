"""Utility functions for converting between numpy arrays and field elements."""

import numpy as np

from gfsolve.field import FieldElement


def to_elements(values, modulus: int) -> list[list[FieldElement]]:
    """
    Convert a 2D grid of integers into rows of field elements.

    Parameters
    ----------
    values : np.ndarray | list[list[int]]
        The integer grid, either a nested sequence or a 2D integer array.
    modulus : int
        The modulus of every element.

    Returns
    -------
    rows : list[list[FieldElement]]
        The reduced elements, one list per row.
    """

    if isinstance(values, np.ndarray):
        if values.ndim != 2:
            raise ValueError("values must be a 2D array")
        if not np.issubdtype(values.dtype, np.integer) and values.dtype != object:
            raise TypeError("values must be an ndarray of integers")
        values = values.tolist()
    return [[FieldElement(v, modulus) for v in row] for row in values]


def to_integers(rows) -> np.ndarray:
    """
    Convert rows of field elements into a 2D array of their canonical values.

    Parameters
    ----------
    rows : list[list[FieldElement]]
        The field elements, one list per row.

    Returns
    -------
    values : np.ndarray
        Integer array of shape (len(rows), len(rows[0])), of dtype object if a value overflows int64.
    """

    values = [[element.value for element in row] for row in rows]
    if any(v >= 2**63 for row in values for v in row):
        return np.array(values, dtype=object)
    return np.array(values, dtype=int)
