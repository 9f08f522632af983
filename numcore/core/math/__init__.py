"""
Core math modules для numcore

Скалярные примитивы и комбинаторика в лог-пространстве.
"""

from numcore.core.math.scalar_math import (
    # Type bounds
    FLOAT32_MAX,
    INT64_MAX,
    INT64_MIN,
    IntWidth,
    # Exceptions
    Int64OverflowError,
    # Narrowing
    narrow_to_float32,
    round_to_int64,
    # Sign
    sign,
    sign_double,
    sign_float32,
    sign_int,
    # Indicator
    indicator,
    indicator_double,
    indicator_float32,
    indicator_int,
    # Factorial
    factorial,
    factorial_double,
    factorial_log,
    # Binomial coefficient
    binomial_coefficient,
    binomial_coefficient_double,
    binomial_coefficient_log,
    # Hyperbolic
    cosh,
    sinh,
)

__all__ = [
    # Type bounds
    "FLOAT32_MAX",
    "INT64_MAX",
    "INT64_MIN",
    "IntWidth",
    # Exceptions
    "Int64OverflowError",
    # Narrowing
    "narrow_to_float32",
    "round_to_int64",
    # Sign
    "sign",
    "sign_double",
    "sign_float32",
    "sign_int",
    # Indicator
    "indicator",
    "indicator_double",
    "indicator_float32",
    "indicator_int",
    # Factorial
    "factorial",
    "factorial_double",
    "factorial_log",
    # Binomial coefficient
    "binomial_coefficient",
    "binomial_coefficient_double",
    "binomial_coefficient_log",
    # Hyperbolic
    "cosh",
    "sinh",
]
