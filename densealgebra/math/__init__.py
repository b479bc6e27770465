"""
densealgebra.math - dense vectors and matrices

Algebraic value types with:
- Validated construction and mutation
- Row reduction, determinant, cofactor/adjugate/inverse
- Vector products and perpendicular vectors
- Operator overloading and tolerance-based comparison
"""

from . import algebra, numeric, vectors
from .geometric import Matrix, Vector
from .store import Dimension, MatrixStore
from .value import AlgebraicValue

__all__ = [
    "AlgebraicValue",
    "Dimension",
    "MatrixStore",
    "Matrix",
    "Vector",
    "algebra",
    "numeric",
    "vectors",
]
