"""
MatrixStore: the mutable two-dimensional container behind ``Matrix``.

The store only keeps the rectangle consistent (equal row lengths, valid
indices). It knows nothing about numbers; element validation is done by the
``Matrix`` facade before anything reaches the store.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Sequence, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.errors import EmptyCollectionError, ShapeMismatchError

StoreT = TypeVar("StoreT", bound="MatrixStore")


class Dimension(BaseModel):
    """Row and column counts of a matrix."""

    model_config = ConfigDict(frozen=True)

    rows: int = 0
    columns: int = 0

    def as_tuple(self) -> tuple[int, int]:
        return (self.rows, self.columns)

    def __str__(self) -> str:
        return f"{self.rows}x{self.columns}"


class MatrixStore(BaseModel):
    """
    Rectangle of elements stored as a list of row lists.

    An empty store holds no rows at all: removing the last column (or the
    last row) clears it, and adding a column to an empty store creates one
    row per element.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    rows: list[list[Any]] = Field(default_factory=list)

    @field_validator("rows", mode="before")
    @classmethod
    def _copy_rows(cls, value):
        if value is None:
            return []
        rows = [list(row) for row in value]
        if rows and any(len(row) != len(rows[0]) for row in rows):
            raise ValueError("Matrix rows must all have same length")
        if rows and not rows[0]:
            return []
        return rows

    @classmethod
    def _from_trusted_rows(cls: type[StoreT], rows: list[list[Any]]) -> StoreT:
        """Wrap already-validated rows without copying or re-validating them."""
        return cls.model_construct(rows=rows)

    # Dimensions

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @property
    def shape(self) -> tuple[int, int]:
        """Get matrix dimensions (rows, cols)."""
        return (self.row_count, self.column_count)

    @property
    def dimension(self) -> Dimension:
        return Dimension(rows=self.row_count, columns=self.column_count)

    def is_empty(self) -> bool:
        return not self.rows

    def __len__(self) -> int:
        return self.row_count

    # Index checks

    def _check_row_index(self, index: int, allow_end: bool = False) -> None:
        limit = self.row_count + (1 if allow_end else 0)
        if not 0 <= index < limit:
            raise IndexError(f"Row index {index} out of range for {self.dimension} matrix")

    def _check_column_index(self, index: int, allow_end: bool = False) -> None:
        limit = self.column_count + (1 if allow_end else 0)
        if not 0 <= index < limit:
            raise IndexError(f"Column index {index} out of range for {self.dimension} matrix")

    def _check_row_length(self, row: Sequence[Any]) -> None:
        if not row:
            raise EmptyCollectionError()
        if self.rows and len(row) != self.column_count:
            raise ShapeMismatchError(
                self.column_count, len(row),
                message=f"Row of size {len(row)} does not fit a matrix with {self.column_count} columns",
            )

    def _check_column_length(self, column: Sequence[Any]) -> None:
        if not column:
            raise EmptyCollectionError()
        if self.rows and len(column) != self.row_count:
            raise ShapeMismatchError(
                self.row_count, len(column),
                message=f"Column of size {len(column)} does not fit a matrix with {self.row_count} rows",
            )

    # Reading

    def get_row(self, index: int) -> list[Any]:
        """Copy of row ``index``."""
        self._check_row_index(index)
        return list(self.rows[index])

    def get_column(self, index: int) -> list[Any]:
        """Copy of column ``index``."""
        self._check_column_index(index)
        return [row[index] for row in self.rows]

    def get_element(self, row: int, column: int) -> Any:
        self._check_row_index(row)
        self._check_column_index(column)
        return self.rows[row][column]

    def iter_rows(self) -> Iterator[list[Any]]:
        """Iterate over copies of the rows, top to bottom."""
        for row in self.rows:
            yield list(row)

    # Mutation

    def set_element(self, row: int, column: int, value: Any) -> Any:
        """Replace one element and return the previous value."""
        self._check_row_index(row)
        self._check_column_index(column)
        previous = self.rows[row][column]
        self.rows[row][column] = value
        return previous

    def add_row(self, row: Iterable[Any], index: int | None = None) -> None:
        """Insert a row at ``index`` (default: append at the bottom)."""
        row = list(row)
        self._check_row_length(row)
        if index is None:
            self.rows.append(row)
        else:
            self._check_row_index(index, allow_end=True)
            self.rows.insert(index, row)

    def add_column(self, column: Iterable[Any], index: int | None = None) -> None:
        """Insert a column at ``index`` (default: append on the right)."""
        column = list(column)
        self._check_column_length(column)
        if not self.rows:
            self.rows = [[value] for value in column]
            return
        if index is None:
            index = self.column_count
        else:
            self._check_column_index(index, allow_end=True)
        for row, value in zip(self.rows, column):
            row.insert(index, value)

    def set_row(self, index: int, row: Iterable[Any]) -> list[Any]:
        """Replace row ``index`` and return its previous contents."""
        row = list(row)
        self._check_row_index(index)
        self._check_row_length(row)
        previous = self.rows[index]
        self.rows[index] = row
        return previous

    def set_column(self, index: int, column: Iterable[Any]) -> list[Any]:
        """Replace column ``index`` and return its previous contents."""
        column = list(column)
        self._check_column_index(index)
        self._check_column_length(column)
        previous = [row[index] for row in self.rows]
        for row, value in zip(self.rows, column):
            row[index] = value
        return previous

    def remove_row(self, index: int) -> list[Any]:
        self._check_row_index(index)
        return self.rows.pop(index)

    def remove_column(self, index: int) -> list[Any]:
        self._check_column_index(index)
        removed = [row.pop(index) for row in self.rows]
        if self.column_count == 0:
            self.rows = []
        return removed

    def swap_rows(self, first: int, second: int) -> None:
        self._check_row_index(first)
        self._check_row_index(second)
        self.rows[first], self.rows[second] = self.rows[second], self.rows[first]

    def swap_columns(self, first: int, second: int) -> None:
        self._check_column_index(first)
        self._check_column_index(second)
        for row in self.rows:
            row[first], row[second] = row[second], row[first]

    def clear(self) -> None:
        self.rows = []

    # Derived stores

    def clone(self: StoreT) -> StoreT:
        """Independent copy sharing no row lists with this store."""
        return self._from_trusted_rows([list(row) for row in self.rows])

    def sub_matrix(self: StoreT, row: int, column: int) -> StoreT:
        """New store without row ``row`` and column ``column``."""
        self._check_row_index(row)
        self._check_column_index(column)
        rows = [
            [value for j, value in enumerate(current) if j != column]
            for i, current in enumerate(self.rows)
            if i != row
        ]
        if rows and not rows[0]:
            rows = []
        return self._from_trusted_rows(rows)
