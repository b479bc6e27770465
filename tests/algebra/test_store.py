"""Tests for MatrixStore, the rectangle container behind Matrix."""

import pytest

from densealgebra.core.errors import EmptyCollectionError, ShapeMismatchError
from densealgebra.math.store import Dimension, MatrixStore


@pytest.fixture
def store():
    return MatrixStore(rows=[[1, 2, 3], [4, 5, 6]])


class TestStoreConstruction:
    """Test building stores."""

    def test_default_is_empty(self):
        """Test a store without rows is empty with shape (0, 0)."""
        empty = MatrixStore()
        assert empty.is_empty()
        assert empty.shape == (0, 0)
        assert len(empty) == 0

    def test_rows_are_copied(self):
        """Test the store does not alias the caller's row lists."""
        source = [[1, 2], [3, 4]]
        store = MatrixStore(rows=source)
        source[0][0] = 99
        assert store.get_element(0, 0) == 1

    def test_ragged_rows_rejected(self):
        """Test rows of different lengths are rejected."""
        with pytest.raises(ValueError):
            MatrixStore(rows=[[1, 2], [3]])

    def test_rows_without_columns_normalized(self):
        """Test rows of length zero give an empty store."""
        assert MatrixStore(rows=[[], []]).is_empty()

    def test_dimension(self, store):
        """Test the Dimension value object."""
        assert store.dimension == Dimension(rows=2, columns=3)
        assert store.dimension.as_tuple() == (2, 3)
        assert str(store.dimension) == "2x3"


class TestStoreReading:
    """Test reading rows, columns and elements."""

    def test_get_row_returns_copy(self, store):
        """Test mutating a returned row does not affect the store."""
        row = store.get_row(0)
        row[0] = 100
        assert store.get_row(0) == [1, 2, 3]

    def test_get_column(self, store):
        """Test reading a column top to bottom."""
        assert store.get_column(1) == [2, 5]

    def test_get_element(self, store):
        """Test reading a single element."""
        assert store.get_element(1, 2) == 6

    @pytest.mark.parametrize("row,column", [(2, 0), (-1, 0), (0, 3), (0, -1)])
    def test_get_element_out_of_range(self, store, row, column):
        """Test invalid indices raise IndexError."""
        with pytest.raises(IndexError):
            store.get_element(row, column)

    def test_iter_rows(self, store):
        """Test iteration yields row copies in order."""
        assert list(store.iter_rows()) == [[1, 2, 3], [4, 5, 6]]


class TestStoreMutation:
    """Test in-place edits."""

    def test_set_element_returns_previous(self, store):
        """Test set_element returns the value it replaced."""
        assert store.set_element(0, 1, 20) == 2
        assert store.get_element(0, 1) == 20

    def test_add_row_appends_and_inserts(self, store):
        """Test rows are appended by default and inserted at an index."""
        store.add_row([7, 8, 9])
        store.add_row([0, 0, 0], index=0)
        assert store.shape == (4, 3)
        assert store.get_row(0) == [0, 0, 0]
        assert store.get_row(3) == [7, 8, 9]

    def test_add_row_at_end_index(self, store):
        """Test inserting at index == row_count appends."""
        store.add_row([7, 8, 9], index=2)
        assert store.get_row(2) == [7, 8, 9]

    def test_add_row_wrong_length(self, store):
        """Test a row of the wrong size raises ShapeMismatchError and changes nothing."""
        with pytest.raises(ShapeMismatchError):
            store.add_row([1, 2])
        assert store.shape == (2, 3)

    def test_add_empty_row(self, store):
        """Test an empty row raises EmptyCollectionError."""
        with pytest.raises(EmptyCollectionError):
            store.add_row([])

    def test_add_row_to_empty_store(self):
        """Test the first row fixes the column count."""
        store = MatrixStore()
        store.add_row([1, 2])
        assert store.shape == (1, 2)

    def test_add_column_to_empty_store(self):
        """Test adding a column to an empty store creates one row per element."""
        store = MatrixStore()
        store.add_column([1, 2, 3])
        assert store.shape == (3, 1)
        assert store.get_column(0) == [1, 2, 3]

    def test_add_column_at_index(self, store):
        """Test inserting a column between existing ones."""
        store.add_column([0, 0], index=1)
        assert store.get_row(0) == [1, 0, 2, 3]
        assert store.get_row(1) == [4, 0, 5, 6]

    def test_add_column_wrong_length(self, store):
        """Test a column of the wrong size raises ShapeMismatchError."""
        with pytest.raises(ShapeMismatchError):
            store.add_column([1, 2, 3])

    def test_set_row_and_column_return_previous(self, store):
        """Test replacing a row and a column returns the old contents."""
        assert store.set_row(0, [7, 8, 9]) == [1, 2, 3]
        assert store.set_column(2, [0, 0]) == [9, 6]
        assert store.rows == [[7, 8, 0], [4, 5, 0]]

    def test_set_row_out_of_range(self, store):
        """Test replacing a missing row raises IndexError."""
        with pytest.raises(IndexError):
            store.set_row(5, [1, 2, 3])

    def test_remove_row(self, store):
        """Test removing a row returns it."""
        assert store.remove_row(0) == [1, 2, 3]
        assert store.shape == (1, 3)

    def test_remove_last_column_empties_store(self):
        """Test removing the only column leaves an empty store."""
        store = MatrixStore(rows=[[1], [2]])
        assert store.remove_column(0) == [1, 2]
        assert store.is_empty()
        assert store.shape == (0, 0)

    def test_swap_rows_and_columns(self, store):
        """Test swapping rows and columns in place."""
        store.swap_rows(0, 1)
        assert store.rows == [[4, 5, 6], [1, 2, 3]]
        store.swap_columns(0, 2)
        assert store.rows == [[6, 5, 4], [3, 2, 1]]

    def test_clear(self, store):
        """Test clear removes everything."""
        store.clear()
        assert store.is_empty()


class TestStoreDerived:
    """Test clone and sub_matrix."""

    def test_clone_is_independent(self, store):
        """Test edits on a clone never reach the original."""
        copy = store.clone()
        copy.set_element(0, 0, 42)
        assert store.get_element(0, 0) == 1
        assert type(copy) is MatrixStore

    def test_sub_matrix(self):
        """Test removing one row and one column."""
        store = MatrixStore(rows=[[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert store.sub_matrix(1, 1).rows == [[1, 3], [7, 9]]
        assert store.sub_matrix(0, 2).rows == [[4, 5], [7, 8]]

    def test_sub_matrix_of_single_element(self):
        """Test the minor of a 1x1 store is empty."""
        assert MatrixStore(rows=[[5]]).sub_matrix(0, 0).is_empty()

    def test_sub_matrix_out_of_range(self, store):
        """Test invalid indices raise IndexError."""
        with pytest.raises(IndexError):
            store.sub_matrix(0, 3)
