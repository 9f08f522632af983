"""
Domain value objects.

Contains the immutable ComplexNumber model and its shared constants.
"""

from numcore.core.domain.complex_number import (
    COMPLEX_I,
    COMPLEX_NAN,
    COMPLEX_ONE,
    ComplexNumber,
)

__all__ = [
    "ComplexNumber",
    "COMPLEX_I",
    "COMPLEX_NAN",
    "COMPLEX_ONE",
]
