"""
Matrix algebra: row reduction, determinant, cofactor/adjugate/inverse and
the elementary matrix arithmetic.

Functions that must not disturb their argument (determinant, rank) run on a
clone. ``order_rows`` and ``row_echelon_form`` mutate the matrix they are
given and report the number of row swaps, which fixes the determinant sign.

Plain float arithmetic with the configured absolute tolerance is used
throughout; results that are mathematically integral are reported as ints.
"""

from __future__ import annotations

import numbers
from typing import Sequence

from ..core.errors import (
    EmptyMatrixError,
    InvalidScalarError,
    InvalidSizeError,
    NonConformantShapesError,
    NonInvertibleMatrixError,
    NonSquareMatrixError,
)
from ..core.logging import get_context_logger
from . import numeric, vectors
from .geometric import Matrix
from .numeric import NO_PIVOT, Number

logger = get_context_logger(__name__, component="matrix_algebra")


# Preconditions

def _require_non_empty(*matrices: Matrix) -> None:
    for matrix in matrices:
        if matrix.is_empty():
            raise EmptyMatrixError()


def _require_square(matrix: Matrix) -> None:
    if not matrix.is_square():
        raise NonSquareMatrixError(*matrix.shape)


def _pivot(matrix: Matrix, row: int) -> int:
    return numeric.first_nonzero_index(matrix.rows[row])


# Row reduction

def order_rows(matrix: Matrix) -> int:
    """
    Sort the rows of ``matrix`` in place by pivot position.

    Rows with a pivot further left move up and all-zero rows sink to the
    bottom. Rows sharing a pivot keep their relative order.

    Returns:
        Number of row swaps performed
    """
    swaps = 0
    size = matrix.row_count
    for row1 in range(size - 1):
        for row2 in range(row1 + 1, size):
            pivot1 = _pivot(matrix, row1)
            pivot2 = _pivot(matrix, row2)
            if pivot1 == NO_PIVOT or (pivot1 > pivot2 and pivot2 != NO_PIVOT):
                matrix.swap_rows(row1, row2)
                swaps += 1
    return swaps


def row_echelon_form(matrix: Matrix) -> int:
    """
    Reduce ``matrix`` in place to row-echelon form by Gaussian elimination.

    Every row below the current one that shares its pivot column has a
    multiple of the current row subtracted from it; after each pass the rows
    are re-ordered by pivot. Entries left negligible by a subtraction are
    snapped to zero.

    Args:
        matrix: Matrix to reduce (mutated)

    Returns:
        Cumulative number of row swaps, used for the determinant sign
    """
    swaps = order_rows(matrix)
    size = matrix.row_count
    for row1 in range(size - 1):
        current = matrix.get_row(row1)
        pivot = numeric.first_nonzero_index(current)
        if pivot != NO_PIVOT:
            for row2 in range(row1 + 1, size):
                following = matrix.get_row(row2)
                if numeric.first_nonzero_index(following) != pivot:
                    continue
                alpha = float(following[pivot]) / float(current[pivot])
                reduced = numeric.subtract(following, numeric.scale(current, alpha))
                reduced = [numeric.snap_to_zero(value) for value in reduced]
                # zero by construction
                reduced[pivot] = 0
                matrix.set_row(row2, reduced)
        swaps += order_rows(matrix)
    logger.debug("Row echelon form reached", extra_data={"shape": matrix.shape, "swaps": swaps})
    return swaps


def determinant(matrix: Matrix) -> Number:
    """
    Determinant of a square matrix.

    1x1 and 2x2 matrices use the closed forms. Larger matrices are reduced
    on a clone and the determinant is the signed product of the diagonal.

    Raises:
        NonSquareMatrixError: If the matrix is empty or not square
    """
    _require_square(matrix)
    size = matrix.row_count
    if size == 1:
        return matrix.get_element(0, 0)
    if size == 2:
        (a, b), (c, d) = matrix.rows
        return numeric.int_or_float(a * d - b * c)

    reduced = matrix.clone()
    swaps = row_echelon_form(reduced)
    result: Number = (-1) ** swaps
    for i in range(size):
        result *= reduced.rows[i][i]
    logger.debug("Determinant by elimination", extra_data={"size": size, "swaps": swaps})
    return numeric.int_or_float(result)


def rank(matrix: Matrix) -> int:
    """Number of non-zero rows in the row-echelon form of ``matrix``."""
    if matrix.is_empty():
        return 0
    reduced = matrix.clone()
    row_echelon_form(reduced)
    return sum(1 for i in range(reduced.row_count) if _pivot(reduced, i) != NO_PIVOT)


def trace(matrix: Matrix) -> Number:
    """Sum of the diagonal of a square matrix."""
    _require_square(matrix)
    return sum(matrix.rows[i][i] for i in range(matrix.row_count))


# Cofactor, adjugate, inverse

def _cofactor_sign(row: int, column: int) -> int:
    return 1 if (row + column) % 2 == 0 else -1


def cofactor(matrix: Matrix) -> Matrix:
    """
    Cofactor matrix: each entry is the signed determinant of the minor
    obtained by deleting that entry's row and column.

    A 1x1 matrix is its own cofactor matrix.

    Raises:
        NonSquareMatrixError: If the matrix is empty or not square
    """
    _require_square(matrix)
    size = matrix.row_count
    if size == 1:
        return matrix.clone()
    rows = [
        [determinant(matrix.sub_matrix(i, j)) * _cofactor_sign(i, j) for j in range(size)]
        for i in range(size)
    ]
    return Matrix(rows)


def adjugate(matrix: Matrix) -> Matrix:
    """Transpose of the cofactor matrix."""
    return transpose(cofactor(matrix))


def inverse(matrix: Matrix) -> Matrix:
    """
    Inverse by the adjugate formula ``A^-1 = adj(A) / det(A)``.

    For a 1x1 matrix the determinant is squared before the zero check and the
    adjugate is divided by that squared value, which yields ``[1/a]``.

    Raises:
        NonSquareMatrixError: If the matrix is empty or not square
        NonInvertibleMatrixError: If the determinant is zero
    """
    det = determinant(matrix)
    if matrix.row_count == 1:
        det = det * det
    if det == 0:
        raise NonInvertibleMatrixError()
    logger.debug("Inverting matrix", extra_data={"size": matrix.row_count, "determinant": det})
    return scalar_multiply(adjugate(matrix), 1 / det)


# Arithmetic

def _combine(m1: Matrix, m2: Matrix, alpha: int, operation: str) -> Matrix:
    if m1.is_empty() or m2.is_empty() or m1.shape != m2.shape:
        raise NonConformantShapesError(operation, m1.shape, m2.shape)
    return Matrix([numeric.linear_combination(r1, r2, alpha) for r1, r2 in zip(m1.rows, m2.rows)])


def add(m1: Matrix, m2: Matrix) -> Matrix:
    """Element-wise sum of two matrices with identical dimensions."""
    return _combine(m1, m2, 1, "add")


def subtract(m1: Matrix, m2: Matrix) -> Matrix:
    """Element-wise difference ``m1 - m2``."""
    return _combine(m1, m2, -1, "subtract")


def scalar_multiply(matrix: Matrix, alpha: Number) -> Matrix:
    """
    Multiply every element by ``alpha``.

    Raises:
        EmptyMatrixError: If the matrix is empty
        InvalidScalarError: If alpha is not a finite real number
    """
    _require_non_empty(matrix)
    alpha = numeric.validate_scalar(alpha)
    return Matrix([numeric.scale(row, alpha) for row in matrix.rows])


def multiply(m1: Matrix, m2: Matrix) -> Matrix:
    """
    Matrix product ``m1 x m2``.

    Raises:
        EmptyMatrixError: If either matrix is empty
        NonConformantShapesError: If columns(m1) != rows(m2)
    """
    _require_non_empty(m1, m2)
    if m1.column_count != m2.row_count:
        raise NonConformantShapesError("multiply", m1.shape, m2.shape)
    columns = [m2.get_column(j) for j in range(m2.column_count)]
    return Matrix([
        [numeric.int_or_float(vectors.dot_product(row, column)) for column in columns]
        for row in m1.rows
    ])


def power(matrix: Matrix, exponent: int) -> Matrix:
    """
    Integer power of a square matrix.

    ``exponent == 0`` gives the identity and negative exponents raise the
    inverse to ``-exponent``.
    """
    if isinstance(exponent, bool) or not isinstance(exponent, numbers.Integral):
        raise InvalidScalarError(exponent)
    _require_square(matrix)
    if exponent == 0:
        return identity(matrix.row_count)
    base = inverse(matrix) if exponent < 0 else matrix
    result = base.clone()
    for _ in range(abs(int(exponent)) - 1):
        result = multiply(result, base)
    return result


def identity(size: int) -> Matrix:
    """
    Identity matrix of dimension ``size x size``.

    Raises:
        InvalidSizeError: If size is not an integer >= 1
    """
    if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size < 1:
        raise InvalidSizeError(size)
    size = int(size)
    return Matrix([[1 if i == j else 0 for j in range(size)] for i in range(size)])


def transpose(matrix: Matrix) -> Matrix:
    """Rows become columns: an R x C matrix becomes C x R."""
    return Matrix([list(column) for column in zip(*matrix.rows)])


# Conversions

def matrix_as_2d_list(matrix: Matrix) -> list[list[Number]]:
    """Rows of ``matrix`` as a new list of lists."""
    return [list(row) for row in matrix.rows]


def list_as_matrix(rows: Sequence[Sequence[Number]]) -> Matrix:
    """Build a matrix from a rectangular list of rows; ``[]`` gives an empty matrix."""
    return Matrix(rows)
