"""densealgebra - dense matrix and vector algebra.

Main namespace package:
- densealgebra.math: Vector/Matrix value types and the algebra behind them
- densealgebra.core: configuration, logging and the exception taxonomy
"""

from .core.errors import (
    AlgebraError,
    DimensionError,
    EmptyCollectionError,
    EmptyMatrixError,
    EmptyVectorError,
    InvalidScalarError,
    InvalidSizeError,
    NonConformantShapesError,
    NonInvertibleMatrixError,
    NonNumericElementError,
    NonSquareMatrixError,
    NullElementError,
    NullScalarError,
    ShapeMismatchError,
)
from .math import Dimension, Matrix, MatrixStore, Vector, algebra, vectors

__version__ = "0.1.0"

__all__ = [
    "Matrix",
    "MatrixStore",
    "Dimension",
    "Vector",
    "algebra",
    "vectors",
    "AlgebraError",
    "DimensionError",
    "EmptyCollectionError",
    "EmptyMatrixError",
    "EmptyVectorError",
    "InvalidScalarError",
    "InvalidSizeError",
    "NonConformantShapesError",
    "NonInvertibleMatrixError",
    "NonNumericElementError",
    "NonSquareMatrixError",
    "NullElementError",
    "NullScalarError",
    "ShapeMismatchError",
]
