"""Implementation of the Matrix class over finite fields, with Gaussian elimination to solve linear systems."""

import numpy as np

from gfsolve.field import FieldElement, check_modulus
from gfsolve.utils import to_elements, to_integers


class Matrix:
    """Rectangular matrix of field elements.

    When used to solve a linear system the matrix is read as augmented: the last column holds the
    target vector and the remaining columns hold the coefficients.

    Parameters
    ----------
    rows : list[list[FieldElement]]
        The rows of the matrix, all of equal length and over the same modulus.
    """

    def __init__(self, rows):
        self._rows = [list(row) for row in rows]

    @classmethod
    def from_integers(cls, values, modulus: int) -> "Matrix":
        """Construct a Matrix from a 2D grid of integers, reduced modulo modulus."""
        check_modulus(modulus)
        return cls(to_elements(values, modulus))

    @property
    def rows(self) -> list[list[FieldElement]]:
        return [list(row) for row in self._rows]

    @property
    def shape(self) -> tuple[int, int]:
        return len(self._rows), len(self._rows[0]) if self._rows else 0

    @property
    def modulus(self) -> int:
        return self._rows[0][0].modulus

    def to_numpy(self) -> np.ndarray:
        """Return the canonical values of the matrix as a numpy array."""
        return to_integers(self._rows)

    def __eq__(self, other):
        """Check element-wise equality of two Matrix instances."""
        if isinstance(other, Matrix):
            return self._rows == other._rows
        return False

    def __ne__(self, other):
        return not self.__eq__(other)

    def __repr__(self):
        """Canonical string representation of Matrix."""
        values = [[element.value for element in row] for row in self._rows]
        return f"Matrix.from_integers({values}, {self.modulus})"

    def __str__(self):
        """String representation of Matrix, with right-aligned space separated columns."""
        vals = [[str(element) for element in row] for row in self._rows]
        width = max((len(v) for row in vals for v in row), default=0)
        return "\n".join(" ".join(v.rjust(width) for v in row) for row in vals)

    def to_rref(self) -> "Matrix":
        """
        Perform Gaussian elimination to find the reduced row echelon form (RREF).

        For each row the column scan starts again from column 0 and the first non-zero entry, after
        swapping in the first lower row which is non-zero there, becomes the pivot. This gives the
        standard RREF when the coefficient part is square, e.g. one switch per light.

        Returns
        -------
        rref : Matrix
            Row-reduced copy of the matrix, the original is left unchanged.
        """

        rows = self.rows
        n_rows, n_cols = len(rows), len(rows[0])

        for row in range(n_rows):
            for col in range(n_cols):
                # Swap in the first lower row with a non-zero entry in this column
                if rows[row][col].is_zero():
                    for lower in range(row + 1, n_rows):
                        if not rows[lower][col].is_zero():
                            rows[row], rows[lower] = rows[lower], rows[row]
                            break

                if rows[row][col].is_zero():
                    continue

                # Scale the pivot row to make the pivot element 1
                pivot = rows[row][col]
                for j in range(col, n_cols):
                    rows[row][j] = rows[row][j] / pivot

                # Eliminate other elements in the pivot column
                for other in range(n_rows):
                    if other == row or rows[other][col].is_zero():
                        continue
                    scale = rows[other][col]
                    for j in range(col, n_cols):
                        rows[other][j] = rows[other][j] - scale * rows[row][j]
                break

        return Matrix(rows)

    def transpose(self) -> "Matrix":
        """Return a new Matrix with rows and columns swapped."""
        n_cols = len(self._rows[0])
        return Matrix([[row[col] for row in self._rows] for col in range(n_cols)])

    def unaugmented_matrix(self) -> "Matrix":
        """Return a new Matrix without the last column, i.e. the coefficients only."""
        if not self._rows:
            raise ValueError("Matrix must have at least one row")
        return Matrix([row[:-1] for row in self._rows])

    def every_row_has_a_pivot(self) -> bool:
        """Check that the first non-zero entry of every row is 1, all-zero rows count as having a pivot."""
        for row in self._rows:
            leading = next((x for x in row if not x.is_zero()), None)
            if leading is not None and leading.value != 1:
                return False
        return True

    def every_column_has_a_pivot(self) -> bool:
        """Check every_row_has_a_pivot on the transposed matrix."""
        return self.transpose().every_row_has_a_pivot()

    def is_any_row_unsolvable(self) -> bool:
        """Check for a row of the form (0, ..., 0 | k) with k != 0, i.e. 0 = k."""
        return any(
            all(x.is_zero() for x in row[:-1]) and not row[-1].is_zero()
            for row in self._rows
        )

    def is_solvable(self) -> bool:
        """
        Determine whether the linear system given by the augmented matrix is solvable.

        Returns
        -------
        solvable : bool
            False if the RREF contains a contradiction row or a coefficient row without a pivot.
        """

        rref = self.to_rref()
        # Contradictions are checked first as they also lack a pivot in the coefficients
        if rref.is_any_row_unsolvable():
            return False
        return rref.unaugmented_matrix().every_row_has_a_pivot()

    def solution(self) -> list[FieldElement] | None:
        """
        Solve the linear system given by the augmented matrix.

        Returns
        -------
        solution : list[FieldElement] | None
            The last column of the RREF, one value per row, or None if the system is not solvable.
        """

        if not self.is_solvable():
            return None
        return [row[-1] for row in self.to_rref()._rows]
