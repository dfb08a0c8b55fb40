"""
Domain models and value objects.

Contains the immutable Complex value type and its named constants.
"""

from src.core.domain.complex_number import (
    E,
    I,
    ONE,
    PI,
    ZERO,
    Complex,
    ComplexLike,
)

__all__ = [
    # Value type
    "Complex",
    "ComplexLike",
    # Constants
    "ZERO",
    "ONE",
    "I",
    "PI",
    "E",
]
