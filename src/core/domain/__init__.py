"""
Domain models and value objects.

Contains the numeric value types: Complex, Vector3D, Matrix, Fraction.
"""

from src.core.domain.complex_number import Complex
from src.core.domain.display import (
    DEFAULT_DISPLAY,
    DisplayConfig,
    format_float,
    split_tokens,
)
from src.core.domain.fraction import Fraction
from src.core.domain.matrix import Matrix, MatrixRow
from src.core.domain.vector3d import Vector3D

__all__ = [
    # Display
    "DEFAULT_DISPLAY",
    "DisplayConfig",
    "format_float",
    "split_tokens",
    # Value types
    "Complex",
    "Vector3D",
    "Matrix",
    "MatrixRow",
    "Fraction",
]
