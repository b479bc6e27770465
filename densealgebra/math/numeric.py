"""
Numeric helpers shared by the vector and matrix algebra.

Elements are plain Python numbers. Any ``numbers.Real`` except ``bool`` is
accepted and NumPy scalars are unwrapped to their Python equivalents, so one
algorithm body serves ints, floats and fractions alike.

All "is this zero" decisions go through ``is_negligible`` and the configured
absolute tolerance.
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Iterable, Sequence

import numpy as np

from ..core.config import get_settings
from ..core.errors import (
    EmptyCollectionError,
    EmptyVectorError,
    InvalidScalarError,
    InvalidSizeError,
    NonNumericElementError,
    NullElementError,
    ShapeMismatchError,
)

Number = numbers.Real

# Sentinel returned by first_nonzero_index for an all-zero sequence
NO_PIVOT = -1


def tolerance() -> float:
    """Current absolute tolerance below which values count as zero."""
    return get_settings().TOLERANCE


def is_negligible(value: Number, tol: float | None = None) -> bool:
    """
    Check whether a value should be treated as exactly zero.

    Args:
        value: Number to test
        tol: Override for the configured tolerance

    Returns:
        True if ``abs(value) <= tol``
    """
    if tol is None:
        tol = tolerance()
    return abs(value) <= tol


def snap_to_zero(value: Number) -> Number:
    """Replace a negligible float by ``0.0``; integers are returned as-is."""
    if isinstance(value, float) and is_negligible(value):
        return 0.0
    return value


def int_or_float(value: Number) -> Number:
    """
    Narrow a computed value to ``int`` when it is mathematically an integer.

    A float within tolerance of an integer becomes that integer, so that
    ``2.9999999999996`` is reported as ``3``. Non-integral and non-finite
    values come back as floats.
    """
    if isinstance(value, numbers.Integral):
        return int(value)
    value = float(value)
    if not math.isfinite(value):
        return value
    nearest = round(value)
    if is_negligible(value - nearest):
        return int(nearest)
    return value


def all_integral(*sequences: Sequence[Number]) -> bool:
    """True if every element of every sequence is an integer type."""
    return all(isinstance(x, numbers.Integral) for seq in sequences for x in seq)


# Validation

def validate_element(value: Any, position: int | None = None) -> Number:
    """
    Validate a single matrix/vector element.

    Args:
        value: Candidate element
        position: Index of the element, reported in the error details

    Returns:
        The element as a Python number

    Raises:
        NullElementError: If the element is None
        NonNumericElementError: If the element is not a real number
    """
    if isinstance(value, np.generic):
        value = value.item()
    if value is None:
        raise NullElementError(position)
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise NonNumericElementError(value)
    return value


def validate_vector(values: Iterable[Any] | None, what: str = "vector") -> list[Number]:
    """
    Validate a row, column or vector and return it as a new list.

    Raises:
        EmptyCollectionError: If ``values`` is None or has no elements
        NullElementError: If an element is None
        NonNumericElementError: If an element is not a real number
    """
    if values is None:
        raise EmptyCollectionError(f"A {what} cannot be None")
    if isinstance(values, np.ndarray):
        values = values.tolist()
    elif isinstance(values, (str, bytes)):
        raise NonNumericElementError(values)
    values = list(values)
    if not values:
        raise EmptyCollectionError(f"Empty {what}s are not allowed")
    return [validate_element(value, index) for index, value in enumerate(values)]


def validate_scalar(alpha: Any) -> Number:
    """Return ``alpha`` as a Python number, raising InvalidScalarError unless it is finite and real."""
    if isinstance(alpha, np.generic):
        alpha = alpha.item()
    if isinstance(alpha, bool) or not isinstance(alpha, numbers.Real) or not math.isfinite(alpha):
        raise InvalidScalarError(alpha)
    return alpha


def check_operands(v1: Sequence[Number], v2: Sequence[Number]) -> None:
    """Raise unless both sequences are non-empty and of equal length."""
    if len(v1) == 0 or len(v2) == 0:
        raise EmptyVectorError()
    if len(v1) != len(v2):
        raise ShapeMismatchError(
            len(v1), len(v2), message=f"Vectors must have same dimension ({len(v1)} != {len(v2)})"
        )


# Element-wise arithmetic

def linear_combination(v1: Sequence[Number], v2: Sequence[Number], alpha: Number = 1) -> list[Number]:
    """Return ``v1 + alpha * v2`` element-wise."""
    check_operands(v1, v2)
    return [a + alpha * b for a, b in zip(v1, v2)]


def add(v1: Sequence[Number], v2: Sequence[Number]) -> list[Number]:
    return linear_combination(v1, v2, 1)


def subtract(v1: Sequence[Number], v2: Sequence[Number]) -> list[Number]:
    return linear_combination(v1, v2, -1)


def scale(values: Sequence[Number], alpha: Number) -> list[Number]:
    return [alpha * value for value in values]


def first_nonzero_index(values: Sequence[Number]) -> int:
    """Index of the first non-negligible element, or ``NO_PIVOT``."""
    for index, value in enumerate(values):
        if not is_negligible(value):
            return index
    return NO_PIVOT


def sum_of_squares(values: Sequence[Number]) -> Number:
    return sum(value * value for value in values)


# Random generation

def default_rng() -> np.random.Generator:
    """Generator seeded from ``Settings.RANDOM_SEED`` (fresh entropy when unset)."""
    return np.random.default_rng(get_settings().RANDOM_SEED)


def random_array(
    length: int,
    low: int | None = None,
    high: int | None = None,
    rng: np.random.Generator | None = None,
) -> list[int]:
    """
    Draw ``length`` integers uniformly from the closed range ``[low, high]``.

    Args:
        length: Number of elements (>= 1)
        low: Lower bound, defaults to ``Settings.RANDOM_LOWER``
        high: Upper bound, defaults to ``Settings.RANDOM_UPPER``
        rng: NumPy generator; a settings-seeded one is created when omitted

    Returns:
        List of Python ints
    """
    config = get_settings()
    low = config.RANDOM_LOWER if low is None else low
    high = config.RANDOM_UPPER if high is None else high
    if not isinstance(length, numbers.Integral) or isinstance(length, bool) or length < 1:
        raise InvalidSizeError(length)
    if low > high:
        raise ValueError(f"Lower bound {low} is greater than upper bound {high}")
    if rng is None:
        rng = default_rng()
    return [int(x) for x in rng.integers(low, high, size=int(length), endpoint=True)]
