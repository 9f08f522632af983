"""
Сериализация ComplexNumber в JSON payload и обратно.

Формат (complex_number.json):
    {"schema_version": "1", "real": 1.5, "imaginary": "NaN"}

Конечные компоненты — JSON числа, неконечные — строки "NaN", "Infinity",
"-Infinity", поэтому payload сериализуется через json.dumps(allow_nan=False).
Знак нуля сохраняется (-0.0).
"""

import math
from typing import Any, Dict, Final

from numcore.core.contracts.validators import validate_complex_number
from numcore.core.domain.complex_number import COMPLEX_NAN, ComplexNumber

SCHEMA_VERSION: Final[str] = "1"


def _encode_component(value: float) -> float | str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return value


def _decode_component(value: float | int | str) -> float:
    # float() понимает "NaN", "Infinity" и "-Infinity"
    try:
        return float(value)
    except OverflowError:
        # целое за пределами double, как json.loads("1e400")
        return math.inf if value > 0 else -math.inf


def complex_to_payload(value: ComplexNumber) -> Dict[str, Any]:
    """
    ComplexNumber → JSON-совместимый dict.

    Examples:
        >>> complex_to_payload(ComplexNumber(1.0, -2.0))
        {'schema_version': '1', 'real': 1.0, 'imaginary': -2.0}
    """
    return {
        "schema_version": SCHEMA_VERSION,
        "real": _encode_component(value.real),
        "imaginary": _encode_component(value.imaginary),
    }


def complex_from_payload(data: Dict[str, Any]) -> ComplexNumber:
    """
    JSON dict → ComplexNumber.

    Данные сначала валидируются по схеме. NaN-payload возвращает
    канонический COMPLEX_NAN.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_complex_number(data)

    result = ComplexNumber(
        _decode_component(data["real"]),
        _decode_component(data["imaginary"]),
    )
    if result.is_nan():
        return COMPLEX_NAN
    return result
