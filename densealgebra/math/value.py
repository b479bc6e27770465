"""
Base AlgebraicValue class for the densealgebra value types.

Provides the common surface of ``Vector`` and ``Matrix``:
- Fuzzy comparison with an absolute tolerance
- Operator overloading
- Multiple output formats (string, TeX, native Python)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class AlgebraicValue(ABC):
    """
    Base class for the algebraic value objects.

    Subclasses must implement all abstract methods.

    Note: Concrete subclasses should inherit from both BaseModel and
    AlgebraicValue, e.g., ``class Vector(BaseModel, AlgebraicValue):``.
    AlgebraicValue itself is abstract and does not inherit from BaseModel to
    avoid MRO conflicts.
    """

    @abstractmethod
    def compare(self, other: Any, tolerance: float | None = None) -> bool:
        """
        Fuzzy comparison with tolerance.

        Args:
            other: Value to compare against
            tolerance: Absolute tolerance (None = configured tolerance)

        Returns:
            True if values have the same shape and are equal within tolerance
        """
        pass

    # String representations

    @abstractmethod
    def to_string(self) -> str:
        """Convert to human-readable string."""
        pass

    @abstractmethod
    def to_tex(self) -> str:
        """Convert to LaTeX representation."""
        pass

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to native Python lists of numbers."""
        pass

    # Operator overloading

    @abstractmethod
    def __add__(self, other: Any) -> AlgebraicValue:
        pass

    @abstractmethod
    def __sub__(self, other: Any) -> AlgebraicValue:
        pass

    @abstractmethod
    def __mul__(self, other: Any) -> Any:
        pass

    @abstractmethod
    def __rmul__(self, other: Any) -> AlgebraicValue:
        pass

    @abstractmethod
    def __neg__(self) -> AlgebraicValue:
        pass

    def __pos__(self) -> AlgebraicValue:
        """Unary positive returns an independent copy."""
        return self * 1

    def __rtruediv__(self, other: Any) -> Any:
        raise TypeError(f"Cannot divide scalar by {self.__class__.__name__.lower()}")

    def __abs__(self) -> Any:
        raise TypeError(f"Absolute value not defined for {self.__class__.__name__.lower()}")
