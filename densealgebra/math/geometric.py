"""
Value types: Vector and Matrix.

``Matrix`` is the validating facade over ``MatrixStore``: every external
mutation is checked for missing, non-numeric or wrongly sized input before
the store is touched. The algebra itself lives in ``algebra`` and
``vectors``; the methods here delegate to it.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from ..core.errors import InvalidSizeError, ShapeMismatchError
from . import numeric, vectors
from .numeric import Number
from .store import MatrixStore
from .value import AlgebraicValue


def _is_scalar(value: Any) -> bool:
    if isinstance(value, np.generic):
        value = value.item()
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _check_hint(hint: int) -> int:
    if isinstance(hint, bool) or not isinstance(hint, numbers.Integral) or hint < 0:
        raise InvalidSizeError(hint, minimum=0)
    return int(hint)


def _close(first: Any, second: Any, tolerance: float | None) -> bool:
    tol = numeric.tolerance() if tolerance is None else tolerance
    return bool(np.allclose(np.asarray(first, dtype=float), np.asarray(second, dtype=float), rtol=0.0, atol=tol))


class Vector(BaseModel, AlgebraicValue):
    """
    Vector in n-dimensional space.

    Supports vector operations: dot product, cross product, norm,
    perpendicularity.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    components: list[Any] = Field(default_factory=list)

    def __init__(self, *args: Any, components: Iterable[Any] | None = None, **kwargs: Any) -> None:
        """Accept ``Vector(1, 2, 3)``, ``Vector([1, 2, 3])`` or ``Vector(components=...)``."""
        if components is not None and args:
            raise ValueError("Vector accepts either components or positional arguments, not both")
        if components is None:
            if len(args) == 1 and isinstance(args[0], (list, tuple, np.ndarray, Vector)):
                components = args[0]
            else:
                components = list(args)
        if isinstance(components, Vector):
            components = components.components
        super().__init__(components=numeric.validate_vector(components, "vector"), **kwargs)

    def __len__(self) -> int:
        """Dimension of the vector."""
        return len(self.components)

    def __getitem__(self, index: int) -> Number:
        return self.components[index]

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Vector):
            return self.components == other.components
        return NotImplemented

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Vector({self.to_string()})"

    def compare(self, other: Any, tolerance: float | None = None) -> bool:
        """Compare vectors component-wise within an absolute tolerance."""
        if not isinstance(other, Vector) or len(self) != len(other):
            return False
        return _close(self.components, other.components, tolerance)

    def to_string(self) -> str:
        return "<" + ", ".join(str(c) for c in self.components) + ">"

    def to_tex(self) -> str:
        comps = ", ".join(str(c) for c in self.components)
        return f"\\left\\langle {comps} \\right\\rangle"

    def to_python(self) -> list[Number]:
        return list(self.components)

    to_list = to_python

    def to_numpy(self) -> np.ndarray:
        return np.array(self.components)

    # Vector operations

    def norm(self) -> float:
        """Euclidean length of the vector."""
        return vectors.length(self.components)

    length = norm

    def dot(self, other: Any) -> Number:
        return vectors.dot_product(self.components, other)

    def cross(self, other: Any) -> Vector:
        """Cross product with another 3D vector."""
        return Vector(vectors.cross_product(self.components, other))

    def is_perpendicular(self, other: Any) -> bool:
        return vectors.are_perpendicular(self.components, other)

    def perpendicular(self, rng: np.random.Generator | None = None) -> Vector:
        """A vector perpendicular to this one (random unless this is the zero vector)."""
        return Vector(vectors.perpendicular_vector(self.components, rng=rng))

    # Arithmetic operators

    def __add__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return Vector(vectors.add(self.components, other.components))
        return NotImplemented

    def __sub__(self, other: Any) -> Vector:
        if isinstance(other, Vector):
            return Vector(vectors.subtract(self.components, other.components))
        return NotImplemented

    def __mul__(self, other: Any) -> Any:
        """Scalar multiplication or dot product."""
        if _is_scalar(other):
            return Vector(vectors.scale(self.components, other))
        if isinstance(other, Vector):
            return self.dot(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Vector:
        if _is_scalar(other):
            return Vector(vectors.scale(self.components, other))
        return NotImplemented

    def __truediv__(self, other: Any) -> Vector:
        if _is_scalar(other):
            if other == 0:
                raise ZeroDivisionError("Vector division by zero")
            return Vector(vectors.scale(self.components, 1 / other))
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(vectors.scale(self.components, -1))

    def __abs__(self) -> float:
        """Magnitude (norm)."""
        return self.norm()


class Matrix(MatrixStore, AlgebraicValue):
    """
    Numeric matrix with validated mutation and the classical algebra.

    Rows are indexed top to bottom and columns left to right, both from 0.
    Every row has the same length and no element is missing; a matrix with
    no rows (or no columns) is empty and is never square.

    Derived matrices (clone, transpose, cofactor, adjugate, inverse and all
    arithmetic results) share no storage with their operands. A matrix is not
    safe for unsynchronized mutation from several threads; keep each
    instance owned by one thread at a time.
    """

    _rows_hint: int = PrivateAttr(default=0)
    _columns_hint: int = PrivateAttr(default=0)

    def __init__(
        self,
        rows: Iterable[Iterable[Any]] | np.ndarray | None = None,
        *,
        rows_hint: int = 0,
        columns_hint: int = 0,
        **kwargs: Any,
    ) -> None:
        """
        Initialize a Matrix ensuring rectangular structure.

        Args:
            rows: Rows of numbers (lists, tuples, a 2-D NumPy array or another
                Matrix); None or ``[]`` gives an empty matrix
            rows_hint: Expected number of rows (informational, >= 0)
            columns_hint: Expected number of columns (informational, >= 0)

        Raises:
            EmptyCollectionError: If a row is None or empty
            NullElementError: If an element is None
            NonNumericElementError: If an element is not a real number
            ShapeMismatchError: If rows have different lengths
        """
        processed_rows = self._coerce_rows(rows)
        super().__init__(rows=processed_rows, **kwargs)
        self._rows_hint = _check_hint(rows_hint)
        self._columns_hint = _check_hint(columns_hint)

    @staticmethod
    def _coerce_rows(raw_rows: Any) -> list[list[Number]]:
        """Validate raw rows and convert them into lists of Python numbers."""
        if raw_rows is None:
            return []
        if isinstance(raw_rows, Matrix):
            return [list(row) for row in raw_rows.rows]
        if isinstance(raw_rows, MatrixStore):
            raw_rows = raw_rows.rows
        if isinstance(raw_rows, np.ndarray):
            if raw_rows.size == 0:
                return []
            if raw_rows.ndim != 2:
                raise ShapeMismatchError(2, raw_rows.ndim, message="Matrix arrays must be two-dimensional")
            raw_rows = raw_rows.tolist()
        if not isinstance(raw_rows, Iterable) or isinstance(raw_rows, (str, bytes)):
            raise TypeError("Matrix rows must be iterable sequences")

        normalized = [numeric.validate_vector(row, "row") for row in raw_rows]
        if normalized:
            row_len = len(normalized[0])
            for row in normalized:
                if len(row) != row_len:
                    raise ShapeMismatchError(row_len, len(row), message="Matrix rows must all have same length")
        return normalized

    # Construction helpers

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[Any]]) -> Matrix:
        return cls(rows)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> Matrix:
        return cls(np.asarray(array))

    @classmethod
    def empty(cls, rows_hint: int = 0, columns_hint: int = 0) -> Matrix:
        """Empty matrix; the hints record the expected size but allocate nothing."""
        return cls(None, rows_hint=rows_hint, columns_hint=columns_hint)

    @classmethod
    def identity(cls, size: int) -> Matrix:
        from . import algebra

        return algebra.identity(size)

    @classmethod
    def random(cls, rows: int, columns: int, rng: np.random.Generator | None = None) -> Matrix:
        """
        Matrix of random integers within the configured bounds.

        Raises:
            InvalidSizeError: If rows or columns is < 1
        """
        for size in (rows, columns):
            if isinstance(size, bool) or not isinstance(size, numbers.Integral) or size < 1:
                raise InvalidSizeError(size)
        if rng is None:
            rng = numeric.default_rng()
        return cls([numeric.random_array(columns, rng=rng) for _ in range(rows)])

    @property
    def capacity_hint(self) -> tuple[int, int]:
        return (self._rows_hint, self._columns_hint)

    # Validated mutation

    def add_row(self, row: Iterable[Any], index: int | None = None) -> None:
        super().add_row(numeric.validate_vector(row, "row"), index)

    def add_column(self, column: Iterable[Any], index: int | None = None) -> None:
        super().add_column(numeric.validate_vector(column, "column"), index)

    def set_row(self, index: int, row: Iterable[Any]) -> list[Number]:
        return super().set_row(index, numeric.validate_vector(row, "row"))

    def set_column(self, index: int, column: Iterable[Any]) -> list[Number]:
        return super().set_column(index, numeric.validate_vector(column, "column"))

    def set_element(self, row: int, column: int, value: Any) -> Number:
        return super().set_element(row, column, numeric.validate_element(value))

    # Access

    def row_to_array(self, index: int) -> list[Number]:
        return self.get_row(index)

    def column_to_array(self, index: int) -> list[Number]:
        return self.get_column(index)

    def __getitem__(self, index: tuple[int, int] | int) -> Any:
        """Get element by (row, col) or a copy of a row."""
        if isinstance(index, tuple):
            row, col = index
            return self.get_element(row, col)
        return self.get_row(index)

    def is_square(self) -> bool:
        return not self.is_empty() and self.row_count == self.column_count

    # Conversion

    def to_python(self) -> list[list[Number]]:
        """Convert to Python nested list."""
        return [list(row) for row in self.rows]

    to_list = to_python

    def to_numpy(self) -> np.ndarray:
        if self.is_empty():
            return np.empty((0, 0))
        return np.array(self.rows)

    def to_string(self) -> str:
        rows_str = ", ".join("[" + ", ".join(str(el) for el in row) + "]" for row in self.rows)
        return f"[{rows_str}]"

    def to_tex(self) -> str:
        """Convert to LaTeX (pmatrix)."""
        rows_tex = " \\\\ ".join(" & ".join(str(el) for el in row) for row in self.rows)
        return f"\\begin{{pmatrix}} {rows_tex} \\end{{pmatrix}}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Matrix({self.to_string()})"

    # Comparison

    def __eq__(self, other: Any) -> bool:
        """Exact element-wise equality."""
        if isinstance(other, MatrixStore):
            return self.rows == other.rows
        return NotImplemented

    def compare(self, other: Any, tolerance: float | None = None) -> bool:
        """Compare matrices element-wise within an absolute tolerance."""
        if not isinstance(other, Matrix) or self.shape != other.shape:
            return False
        if self.is_empty():
            return True
        return _close(self.rows, other.rows, tolerance)

    # Algebra

    def order_rows(self) -> int:
        from . import algebra

        return algebra.order_rows(self)

    def row_echelon_form(self) -> int:
        """Reduce this matrix in place; returns the number of row swaps."""
        from . import algebra

        return algebra.row_echelon_form(self)

    def determinant(self) -> Number:
        from . import algebra

        return algebra.determinant(self)

    def cofactor(self) -> Matrix:
        from . import algebra

        return algebra.cofactor(self)

    def adjugate(self) -> Matrix:
        from . import algebra

        return algebra.adjugate(self)

    def inverse(self) -> Matrix:
        from . import algebra

        return algebra.inverse(self)

    def transpose(self) -> Matrix:
        from . import algebra

        return algebra.transpose(self)

    def trace(self) -> Number:
        from . import algebra

        return algebra.trace(self)

    def rank(self) -> int:
        from . import algebra

        return algebra.rank(self)

    # Arithmetic operators

    def __add__(self, other: Any) -> Matrix:
        from . import algebra

        if isinstance(other, Matrix):
            return algebra.add(self, other)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix:
        from . import algebra

        if isinstance(other, Matrix):
            return algebra.subtract(self, other)
        return NotImplemented

    def _times_vector(self, vector: Vector) -> Vector:
        from . import algebra

        column = Matrix([[c] for c in vector.components])
        return Vector(algebra.multiply(self, column).get_column(0))

    def __mul__(self, other: Any) -> Any:
        """Scalar, matrix or matrix-vector multiplication."""
        from . import algebra

        if _is_scalar(other):
            return algebra.scalar_multiply(self, other)
        if isinstance(other, Matrix):
            return algebra.multiply(self, other)
        if isinstance(other, Vector):
            return self._times_vector(other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        from . import algebra

        if _is_scalar(other):
            return algebra.scalar_multiply(self, other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Any:
        from . import algebra

        if isinstance(other, Matrix):
            return algebra.multiply(self, other)
        if isinstance(other, Vector):
            return self._times_vector(other)
        return NotImplemented

    def __truediv__(self, other: Any) -> Matrix:
        from . import algebra

        if _is_scalar(other):
            if other == 0:
                raise ZeroDivisionError("Matrix division by zero")
            return algebra.scalar_multiply(self, 1 / other)
        return NotImplemented

    def __pow__(self, other: Any) -> Matrix:
        """Matrix power (integer powers only)."""
        from . import algebra

        if isinstance(other, numbers.Integral) and not isinstance(other, bool):
            return algebra.power(self, other)
        return NotImplemented

    def __neg__(self) -> Matrix:
        from . import algebra

        return algebra.scalar_multiply(self, -1)
