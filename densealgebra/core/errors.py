"""
Library exceptions.

Every failure raised by the algebra layer derives from ``AlgebraError``. Each
concrete kind also subclasses the closest builtin exception, so callers can
catch ``ValueError``/``TypeError`` without importing this module.
"""

from typing import Any, Dict, Optional


class AlgebraError(Exception):
    """Base exception for densealgebra errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Standardized error payload"""
        return {
            "error": {
                "type": self.__class__.__name__,
                "message": self.message,
                "details": self.details,
            }
        }


# Shape errors

class ShapeMismatchError(AlgebraError, ValueError):
    """Raised when operands have incompatible lengths or shapes"""

    def __init__(self, expected: Any, actual: Any, message: Optional[str] = None):
        super().__init__(
            message=message or f"Expected size {expected}, got {actual}",
            details={"expected": expected, "actual": actual},
        )


class NonConformantShapesError(ShapeMismatchError):
    """Raised when two matrices cannot be combined by the requested operation"""

    def __init__(self, operation: str, left: tuple, right: tuple):
        super().__init__(
            expected=left,
            actual=right,
            message=f"Cannot {operation} matrices of dimensions {left[0]}x{left[1]} and {right[0]}x{right[1]}",
        )
        self.details["operation"] = operation


class DimensionError(AlgebraError, ValueError):
    """Raised when a vector operation requires a specific dimension"""

    def __init__(self, operation: str, length: int, requirement: str):
        super().__init__(
            message=f"{operation} requires {requirement}, got vectors of size {length}",
            details={"operation": operation, "length": length, "requirement": requirement},
        )


class NonSquareMatrixError(AlgebraError, ValueError):
    """Raised when a square matrix is required"""

    def __init__(self, rows: int, columns: int):
        super().__init__(
            message=f"Matrix of dimension {rows}x{columns} is not square",
            details={"rows": rows, "columns": columns},
        )


class NonInvertibleMatrixError(AlgebraError, ArithmeticError):
    """Raised when inverting a matrix whose determinant is zero"""

    def __init__(self, message: str = "Matrix is not invertible (determinant is zero)"):
        super().__init__(message=message)


# Emptiness errors

class EmptyMatrixError(AlgebraError, ValueError):
    """Raised when an operation needs a non-empty matrix"""

    def __init__(self, message: str = "Given matrix is empty and not valid for this operation"):
        super().__init__(message=message)


class EmptyVectorError(AlgebraError, ValueError):
    """Raised when an operation needs a non-empty vector"""

    def __init__(self, message: str = "Operation cannot be performed on empty vectors"):
        super().__init__(message=message)


class EmptyCollectionError(AlgebraError, ValueError):
    """Raised when a missing or empty row, column or vector is supplied"""

    def __init__(self, message: str = "Empty rows/columns cannot be added"):
        super().__init__(message=message)


# Element and scalar errors

class NullElementError(AlgebraError, ValueError):
    """Raised when a supplied collection contains a missing element"""

    def __init__(self, position: Optional[int] = None):
        details = {"position": position} if position is not None else {}
        super().__init__(message="The given collection contains null elements", details=details)


class NonNumericElementError(AlgebraError, TypeError):
    """Raised when a supplied element is not a real number"""

    def __init__(self, value: Any):
        super().__init__(
            message=f"Element {value!r} of type {type(value).__name__} is not a real number",
            details={"type": type(value).__name__},
        )


class NullScalarError(AlgebraError, TypeError):
    """Raised when a scalar operand is missing"""

    def __init__(self):
        super().__init__(message="Scalar cannot be None")


class InvalidScalarError(AlgebraError, ValueError):
    """Raised when a scalar is not a finite real number"""

    def __init__(self, value: Any):
        super().__init__(
            message=f"Invalid number as scalar: {value!r}",
            details={"value": repr(value)},
        )


class InvalidSizeError(AlgebraError, ValueError):
    """Raised when a requested size is out of range"""

    def __init__(self, size: Any, minimum: int = 1):
        super().__init__(
            message=f"Invalid size {size!r}, must be an integer >= {minimum}",
            details={"size": repr(size), "minimum": minimum},
        )
