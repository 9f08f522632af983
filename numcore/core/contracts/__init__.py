"""
Contract Validation Module

Модуль для валидации и сериализации JSON контрактов numcore.
"""

from .complex_payload import (
    SCHEMA_VERSION,
    complex_from_payload,
    complex_to_payload,
)
from .validators import (
    ComplexNumberValidator,
    ContractValidator,
    SchemaLoader,
    validate_complex_number,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ComplexNumberValidator",
    # Functions
    "validate_complex_number",
    "complex_to_payload",
    "complex_from_payload",
    # Constants
    "SCHEMA_VERSION",
]
