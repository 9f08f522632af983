"""
numcore: IEEE-754-aware numerical primitives.

- numcore.core.domain.complex_number: immutable ComplexNumber
- numcore.core.math.scalar_math: sign, indicator, factorial, binomial coefficient
- numcore.core.contracts: JSON Schema contract for serialized ComplexNumber
"""
