"""Core utilities package"""

from .config import Settings, settings, get_settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    AlgebraError,
    ShapeMismatchError,
    NonConformantShapesError,
    DimensionError,
    NonSquareMatrixError,
    NonInvertibleMatrixError,
    EmptyMatrixError,
    EmptyVectorError,
    EmptyCollectionError,
    NullElementError,
    NonNumericElementError,
    NullScalarError,
    InvalidScalarError,
    InvalidSizeError,
)

__all__ = [
    "Settings",
    "settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "AlgebraError",
    "ShapeMismatchError",
    "NonConformantShapesError",
    "DimensionError",
    "NonSquareMatrixError",
    "NonInvertibleMatrixError",
    "EmptyMatrixError",
    "EmptyVectorError",
    "EmptyCollectionError",
    "NullElementError",
    "NonNumericElementError",
    "NullScalarError",
    "InvalidScalarError",
    "InvalidSizeError",
]
