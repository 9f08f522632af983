"""
Scalar Math: знак, индикатор и комбинаторика в лог-пространстве

Модуль содержит скалярные примитивы:
- sign / indicator для double, float32 и целых 8/16/32/64 бит
- factorial / binomial_coefficient через суммирование логарифмов
- cosh / sinh, выраженные напрямую через экспоненту

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Плавающие варианты sign/indicator возвращают NaN для NaN (проверка первой)
2. n! и C(n, k) никогда не материализуются как промежуточные произведения:
   считается Σ log(i), экспонента берётся один раз в конце
3. Сужение к int64 насыщающее: всё, что не помещается, становится INT64_MAX,
   который служит сигналом переполнения
4. Все функции чистые и детерминированные
"""

import math
import struct
from enum import Enum
from typing import Final

# =============================================================================
# ГРАНИЦЫ ТИПОВ
# =============================================================================

# Максимальное значение знакового 64-битного целого (сигнал переполнения)
INT64_MAX: Final[int] = 2**63 - 1

INT64_MIN: Final[int] = -(2**63)

# Максимальное конечное значение IEEE-754 binary32
FLOAT32_MAX: Final[float] = 3.4028234663852886e38

# 2**63 как double: первое значение, которое не помещается в int64
_TWO_POW_63: Final[float] = 9.223372036854775808e18


class IntWidth(Enum):
    """Ширина знакового целого для sign_int / indicator_int"""

    INT8 = 8
    INT16 = 16
    INT32 = 32
    INT64 = 64

    @property
    def min_value(self) -> int:
        return -(1 << (self.value - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.value - 1)) - 1


# =============================================================================
# EXCEPTIONS
# =============================================================================


class Int64OverflowError(OverflowError):
    """
    Результат factorial / binomial_coefficient не представим в int64.

    Наследует OverflowError, поэтому ловится и как ArithmeticError.
    """

    pass


# =============================================================================
# IEEE-754 ПОМОЩНИКИ
# =============================================================================


def _exp(x: float) -> float:
    """math.exp с переполнением в +inf вместо OverflowError"""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def _floor_double(x: float) -> float:
    """Floor, который оставляет NaN/Inf без изменений и возвращает float"""
    if not math.isfinite(x):
        return x
    return float(math.floor(x))


def narrow_to_float32(x: float) -> float:
    """
    Сужение double до IEEE-754 binary32 (round-to-nearest-even).

    Значения за пределами диапазона binary32 становятся ±inf,
    слишком малые — нулём с сохранением знака.

    Examples:
        >>> narrow_to_float32(1e-50)
        0.0
        >>> narrow_to_float32(1e39)
        inf
    """
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def round_to_int64(x: float) -> int:
    """
    Округление double до ближайшего int64 (floor(x + 0.5)) с насыщением.

    Правила:
        - NaN → 0
        - x >= 2**63 (включая +inf) → INT64_MAX
        - x <= -2**63 (включая -inf) → INT64_MIN
        - иначе floor(x + 0.5)

    Насыщение делает сравнение с INT64_MAX полноценной проверкой
    переполнения: ни одно конечное значение double, округлённое честно,
    не равно 2**63 - 1, потому что оно не представимо в double.

    Examples:
        >>> round_to_int64(2.5)
        3
        >>> round_to_int64(-2.5)
        -2
        >>> round_to_int64(float("inf")) == INT64_MAX
        True
    """
    if math.isnan(x):
        return 0
    if x >= _TWO_POW_63:
        return INT64_MAX
    if x <= -_TWO_POW_63:
        return INT64_MIN
    return math.floor(x + 0.5)


# =============================================================================
# SIGN
# =============================================================================


def _check_int(x: int, width: IntWidth) -> None:
    if isinstance(x, bool) or not isinstance(x, int):
        raise ValueError(f"expected an integer for {width.name}, got {x!r}")
    if not width.min_value <= x <= width.max_value:
        raise ValueError(
            f"{x} out of range for {width.name} "
            f"[{width.min_value}, {width.max_value}]"
        )


def sign_double(x: float) -> float:
    """
    Знак double.

    Returns:
        NaN для NaN, 0.0 для ±0.0, 1.0 для x > 0, -1.0 для x < 0

    Examples:
        >>> sign_double(-0.0)
        0.0
        >>> sign_double(3.5)
        1.0
    """
    if math.isnan(x):
        return math.nan
    if x == 0.0:
        return 0.0
    return 1.0 if x > 0.0 else -1.0


def sign_float32(x: float) -> float:
    """
    Знак значения binary32.

    Аргумент сначала сужается до float32, поэтому 1e-50 даёт 0.0.
    """
    return sign_double(narrow_to_float32(x))


def sign_int(x: int, width: IntWidth = IntWidth.INT64) -> int:
    """
    Знак целого заданной ширины: 0, 1 или -1.

    Raises:
        ValueError: Если x не целое или вне диапазона width
    """
    _check_int(x, width)
    if x == 0:
        return 0
    return 1 if x > 0 else -1


def sign(x: float | int) -> float | int:
    """
    Знак числа с диспетчеризацией по типу.

    float идёт по пути double (NaN → NaN), int — по пути int64.

    Examples:
        >>> sign(0.0)
        0.0
        >>> sign(-3)
        -1
    """
    if isinstance(x, float):
        return sign_double(x)
    return sign_int(x, IntWidth.INT64)


# =============================================================================
# INDICATOR
# =============================================================================


def indicator_double(x: float) -> float:
    """
    Индикатор double: 1.0 если x >= 0, иначе -1.0; NaN для NaN.

    -0.0 >= 0.0, поэтому indicator_double(-0.0) == 1.0.
    """
    if math.isnan(x):
        return math.nan
    return 1.0 if x >= 0.0 else -1.0


def indicator_float32(x: float) -> float:
    """Индикатор значения binary32 (аргумент сужается до float32)"""
    return indicator_double(narrow_to_float32(x))


def indicator_int(x: int, width: IntWidth = IntWidth.INT64) -> int:
    """
    Индикатор целого заданной ширины: 1 если x >= 0, иначе -1.

    Одинаковое правило для всех ширин, включая INT16.

    Raises:
        ValueError: Если x не целое или вне диапазона width
    """
    _check_int(x, width)
    return 1 if x >= 0 else -1


def indicator(x: float | int) -> float | int:
    """Индикатор с диспетчеризацией по типу (float → double, int → int64)"""
    if isinstance(x, float):
        return indicator_double(x)
    return indicator_int(x, IntWidth.INT64)


# =============================================================================
# FACTORIAL
# =============================================================================


def _require_integer(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer, got {value!r}")


def _validate_factorial_arg(n: int) -> None:
    _require_integer("n", n)
    if n <= 0:
        raise ValueError(f"must have n > 0 for n!, got n={n}")


def factorial_log(n: int) -> float:
    """
    Натуральный логарифм n!.

    log(n!) = Σ log(i), i = 2..n

    В отличие от самого n! (переполняет int64 при n > 20 и double при
    n > 170), сумма логарифмов остаётся представимой далеко за этими
    пределами.

    Args:
        n: Аргумент факториала (n > 0)

    Returns:
        log(n!)

    Raises:
        ValueError: Если n <= 0

    Examples:
        >>> factorial_log(1)
        0.0
    """
    _validate_factorial_arg(n)

    log_sum = 0.0
    for i in range(2, n + 1):
        log_sum += math.log(i)
    return log_sum


def factorial_double(n: int) -> float:
    """
    n! как double, округлённый до ближайшего целого значения.

    floor(exp(factorial_log(n)) + 0.5); +inf если n! больше
    максимального конечного double (n > 170).

    Raises:
        ValueError: Если n <= 0
    """
    _validate_factorial_arg(n)
    return _floor_double(_exp(factorial_log(n)) + 0.5)


def factorial(n: int) -> int:
    """
    n! как int64.

    Args:
        n: Аргумент факториала (n > 0)

    Returns:
        n!, округлённый из factorial_double

    Raises:
        ValueError: Если n <= 0
        Int64OverflowError: Если результат не помещается в int64 (n > 20)

    Examples:
        >>> factorial(5)
        120
    """
    result = round_to_int64(factorial_double(n))
    if result == INT64_MAX:
        raise Int64OverflowError(
            f"{n}! too large to represent in a 64-bit integer"
        )
    return result


# =============================================================================
# BINOMIAL COEFFICIENT
# =============================================================================


def _validate_binomial_args(n: int, k: int) -> None:
    _require_integer("n", n)
    _require_integer("k", k)
    if n < k:
        raise ValueError(
            f"must have n >= k for binomial coefficient (n, k), got n={n}, k={k}"
        )
    if n <= 0:
        raise ValueError(
            f"must have n > 0 for binomial coefficient (n, k), got n={n}"
        )
    if k < 0:
        raise ValueError(
            f"must have k >= 0 for binomial coefficient (n, k), got k={k}"
        )


def binomial_coefficient_log(n: int, k: int) -> float:
    """
    Натуральный логарифм C(n, k).

    log C(n, k) = Σ log(i), i = k+1..n  −  Σ log(i), i = 2..n-k

    то есть log(n!) − log(k!) − log((n−k)!) без вычисления самих
    факториалов.

    Args:
        n: Размер множества (n > 0)
        k: Размер выборки (0 <= k <= n)

    Returns:
        log C(n, k)

    Raises:
        ValueError: Если n < k или n <= 0

    Examples:
        >>> binomial_coefficient_log(10, 0)
        0.0
    """
    _validate_binomial_args(n, k)

    if k == n or k == 0:
        return 0.0
    if k == 1 or k == n - 1:
        return math.log(n)

    log_sum = 0.0
    # n! / k!
    for i in range(k + 1, n + 1):
        log_sum += math.log(i)
    # / (n - k)!
    for i in range(2, n - k + 1):
        log_sum -= math.log(i)
    return log_sum


def binomial_coefficient_double(n: int, k: int) -> float:
    """
    C(n, k) как double: floor(exp(binomial_coefficient_log(n, k)) + 0.5).

    Raises:
        ValueError: Если n < k или n <= 0
    """
    return _floor_double(_exp(binomial_coefficient_log(n, k)) + 0.5)


def binomial_coefficient(n: int, k: int) -> int:
    """
    C(n, k) как int64.

    Быстрые пути без лог-вычислений:
        - k == n или k == 0 → 1
        - k == 1 или k == n - 1 → n

    Args:
        n: Размер множества (n > 0)
        k: Размер выборки (0 <= k <= n)

    Returns:
        Биномиальный коэффициент

    Raises:
        ValueError: Если n < k или n <= 0
        Int64OverflowError: Если результат не помещается в int64

    Examples:
        >>> binomial_coefficient(5, 2)
        10
        >>> binomial_coefficient(10, 1)
        10
    """
    _validate_binomial_args(n, k)

    if k == n or k == 0:
        return 1
    if k == 1 or k == n - 1:
        return n

    result = round_to_int64(binomial_coefficient_double(n, k))
    if result == INT64_MAX:
        raise Int64OverflowError(
            f"C({n}, {k}) too large to represent in a 64-bit integer"
        )
    return result


# =============================================================================
# HYPERBOLIC
# =============================================================================


def cosh(x: float) -> float:
    """Гиперболический косинус: (e^x + e^-x) / 2"""
    return (_exp(x) + _exp(-x)) / 2.0


def sinh(x: float) -> float:
    """
    Гиперболический синус: (e^x - e^-x) / 2

    Для малых |x| теряет точность из-за вычитания близких величин.
    """
    return (_exp(x) - _exp(-x)) / 2.0
