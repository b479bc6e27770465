"""
Vector algebra over plain numeric sequences.

Every function accepts lists, tuples, 1-D NumPy arrays or ``Vector`` objects
and returns new Python lists (or numbers); operands are never modified.
"""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np

from ..core.errors import DimensionError, EmptyVectorError, NullScalarError
from ..core.logging import get_context_logger
from . import numeric
from .numeric import NO_PIVOT, Number
from .value import AlgebraicValue

logger = get_context_logger(__name__, component="vector_algebra")


def _operand(values: Any) -> list[Number]:
    """Validate one vector operand and return its elements as a list."""
    if values is None:
        raise EmptyVectorError("Vector cannot be None")
    if isinstance(values, AlgebraicValue):
        values = values.to_python()
    elif isinstance(values, np.ndarray):
        values = values.tolist()
    return [numeric.validate_element(value, index) for index, value in enumerate(values)]


def add(v1: Sequence[Number], v2: Sequence[Number]) -> list[Number]:
    """
    Element-wise sum ``v1 + v2``.

    Raises:
        ShapeMismatchError: If the vectors have different sizes
        EmptyVectorError: If either vector is empty
    """
    return numeric.add(_operand(v1), _operand(v2))


def subtract(v1: Sequence[Number], v2: Sequence[Number]) -> list[Number]:
    """Element-wise difference ``v1 - v2``."""
    return numeric.subtract(_operand(v1), _operand(v2))


def scale(v: Sequence[Number], alpha: Number) -> list[Number]:
    """
    Multiply every element of ``v`` by ``alpha``.

    Raises:
        NullScalarError: If alpha is None
        InvalidScalarError: If alpha is not a finite real number
        EmptyVectorError: If v is empty
    """
    if alpha is None:
        raise NullScalarError()
    alpha = numeric.validate_scalar(alpha)
    values = _operand(v)
    if not values:
        raise EmptyVectorError()
    return numeric.scale(values, alpha)


def length(v: Sequence[Number]) -> float:
    """Euclidean length (magnitude) of ``v``."""
    values = _operand(v)
    if not values:
        raise EmptyVectorError()
    return math.sqrt(numeric.sum_of_squares(values))


def dot_product(v1: Sequence[Number], v2: Sequence[Number]) -> Number:
    """
    Sum of the products of corresponding elements.

    Integer vectors give the exact integer sum. Anything involving floats is
    summed as a float and snapped to ``0.0`` when negligible, so rounding
    noise never reads as a non-zero result.

    Raises:
        ShapeMismatchError: If the vectors have different sizes
        EmptyVectorError: If either vector is empty
    """
    values1, values2 = _operand(v1), _operand(v2)
    numeric.check_operands(values1, values2)
    if numeric.all_integral(values1, values2):
        return sum(a * b for a, b in zip(values1, values2))
    total = math.fsum(a * b for a, b in zip(values1, values2))
    return numeric.snap_to_zero(total)


def are_perpendicular(v1: Sequence[Number], v2: Sequence[Number]) -> bool:
    """True if the dot product of ``v1`` and ``v2`` is zero."""
    return dot_product(v1, v2) == 0


def cross_product(v1: Sequence[Number], v2: Sequence[Number]) -> list[Number]:
    """
    Cross product of two three-dimensional vectors.

    The result is perpendicular to both operands.

    Raises:
        DimensionError: If either vector does not have exactly three components
    """
    a, b = _operand(v1), _operand(v2)
    for values in (a, b):
        if len(values) != 3:
            raise DimensionError("Cross product", len(values), "exactly 3 components")
    return [
        a[1] * b[2] - a[2] * b[1],
        -(a[0] * b[2] - a[2] * b[0]),
        a[0] * b[1] - a[1] * b[0],
    ]


def perpendicular_vector(v: Sequence[Number], rng: np.random.Generator | None = None) -> list[Number]:
    """
    Build a vector perpendicular to ``v``.

    A random candidate with integer components in the configured bounds is
    drawn and then corrected at the first non-zero position of ``v`` so that
    the dot product cancels exactly. The zero vector is perpendicular to
    everything, so a zero vector of the same size is returned for it.

    Args:
        v: Vector with at least two components
        rng: NumPy generator for the random candidate (settings-seeded when omitted)

    Returns:
        A new list ``p`` with ``dot_product(v, p) == 0``

    Raises:
        DimensionError: If v has fewer than two components
    """
    values = _operand(v)
    size = len(values)
    if size < 2:
        raise DimensionError("Perpendicular vector", size, "at least 2 components")

    index = numeric.first_nonzero_index(values)
    if index == NO_PIVOT:
        return [0] * size

    perp = numeric.random_array(size, rng=rng)
    dot = dot_product(values, perp)
    if dot == 0:
        return perp

    pivot = values[index]
    new_value = -dot + pivot * perp[index]
    perp = numeric.scale(perp, pivot)
    perp[index] = numeric.int_or_float(new_value)
    logger.debug("Perpendicular vector corrected", extra_data={"size": size, "index": index})
    return perp
