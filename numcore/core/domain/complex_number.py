"""
ComplexNumber: Комплексное число над парой double

Immutable Pydantic модель (frozen=True). Каждая операция возвращает новый
экземпляр или одну из разделяемых констант.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Число является NaN тогда и только тогда, когда хотя бы одна компонента NaN
2. Любая операция с NaN-операндом возвращает канонический COMPLEX_NAN
3. multiply использует формулу трёх умножений (бит-в-бит)
4. divide использует алгоритм Смита (без явной защиты от деления на ноль,
   деление на 0 даёт Inf/NaN по правилам IEEE-754)
5. Равенство побитовое: NaN == NaN, +0.0 != -0.0
"""

import math
import struct
from typing import Final

from pydantic import BaseModel, Field, field_validator


# =============================================================================
# IEEE-754 ПОМОЩНИКИ
# =============================================================================


def _raw_bits(value: float) -> int:
    """Сырое 64-битное представление double"""
    return struct.unpack("<q", struct.pack("<d", value))[0]


def _ieee_div(a: float, b: float) -> float:
    """
    Деление double по правилам IEEE-754.

    Python бросает ZeroDivisionError для x / 0.0; здесь результат
    ±inf (знак по знакам a и b) или NaN для 0/0 и NaN/0.
    """
    if b != 0.0:
        return a / b
    if a == 0.0 or math.isnan(a):
        return math.nan
    return math.copysign(math.inf, a) * math.copysign(1.0, b)


# =============================================================================
# COMPLEX NUMBER MODEL
# =============================================================================


class ComplexNumber(BaseModel):
    """
    Комплексное число real + imaginary·i.

    Immutable модель (frozen=True): изменение полей запрещено,
    все операции создают новый экземпляр.

    Операторы +, -, *, / и унарный минус делегируют в add, subtract,
    multiply, divide и negate; abs() — в метод abs; == — в побитовый equals.
    """

    real: float = Field(..., description="Действительная часть")
    imaginary: float = Field(..., description="Мнимая часть")

    model_config = {"frozen": True, "extra": "forbid"}  # Immutable

    def __init__(self, real: float, imaginary: float) -> None:
        super().__init__(real=real, imaginary=imaginary)

    @field_validator("real", "imaginary", mode="before")
    @classmethod
    def validate_component(cls, v: object) -> object:
        """Компонента — только int или float (bool и строки не приводятся)"""
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError(
                f"component must be int or float, got {type(v).__name__}"
            )
        return v

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    @classmethod
    def from_complex(cls, value: complex) -> "ComplexNumber":
        """Создание из встроенного complex"""
        return cls(value.real, value.imag)

    def to_complex(self) -> complex:
        """Конверсия во встроенный complex"""
        return complex(self.real, self.imaginary)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_nan(self) -> bool:
        """True если real или imaginary — NaN"""
        return math.isnan(self.real) or math.isnan(self.imaginary)

    def equals(self, other: object) -> bool:
        """
        Побитовое равенство.

        Сравниваются сырые битовые паттерны обеих компонент, а не значения:
        два NaN-числа равны друг другу, а +0.0 и -0.0 различаются.

        Args:
            other: Объект для сравнения

        Returns:
            True если other — ComplexNumber с идентичными битами компонент
        """
        if self is other:
            return True
        if not isinstance(other, ComplexNumber):
            return False
        return _raw_bits(self.real) == _raw_bits(other.real) and _raw_bits(
            self.imaginary
        ) == _raw_bits(other.imaginary)

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    def abs(self) -> float:
        """
        Модуль sqrt(real² + imaginary²).

        Считается напрямую, без масштабирования: для компонент порядка
        1e154 и выше сумма квадратов переполняется в inf.

        Returns:
            Евклидова норма или NaN для NaN-числа
        """
        if self.is_nan():
            return math.nan
        return math.sqrt(self._square_sum())

    def _square_sum(self) -> float:
        return self.real * self.real + self.imaginary * self.imaginary

    def negate(self) -> "ComplexNumber":
        """-(real + imaginary·i)"""
        if self.is_nan():
            return COMPLEX_NAN
        return ComplexNumber(-self.real, -self.imaginary)

    def conjugate(self) -> "ComplexNumber":
        """Сопряжённое число real - imaginary·i"""
        if self.is_nan():
            return COMPLEX_NAN
        return ComplexNumber(self.real, -self.imaginary)

    # -------------------------------------------------------------------------
    # Бинарные операции
    # -------------------------------------------------------------------------

    def add(self, rhs: "ComplexNumber") -> "ComplexNumber":
        """Покомпонентная сумма"""
        if self.is_nan() or rhs.is_nan():
            return COMPLEX_NAN
        return ComplexNumber(self.real + rhs.real, self.imaginary + rhs.imaginary)

    def subtract(self, rhs: "ComplexNumber") -> "ComplexNumber":
        """Покомпонентная разность"""
        if self.is_nan() or rhs.is_nan():
            return COMPLEX_NAN
        return ComplexNumber(self.real - rhs.real, self.imaginary - rhs.imaginary)

    def multiply(self, rhs: "ComplexNumber") -> "ComplexNumber":
        """
        Произведение по формуле трёх умножений.

        (a + bi)(c + di):
            ac = a·c
            bd = b·d
            p  = (a + b)(c + d)
            результат = (ac - bd) + (p - ac - bd)i

        Порядок операций фиксирован: результат должен совпадать с этой
        формулой бит-в-бит, а не только с точностью до округления.
        """
        if self.is_nan() or rhs.is_nan():
            return COMPLEX_NAN
        p = (self.real + self.imaginary) * (rhs.real + rhs.imaginary)
        ac = self.real * rhs.real
        bd = self.imaginary * rhs.imaginary
        return ComplexNumber(ac - bd, p - ac - bd)

    def divide(self, rhs: "ComplexNumber") -> "ComplexNumber":
        """
        Частное по алгоритму Смита.

        Ветвление по |c| < |d| для делителя c + di избегает
        переполнения c² + d² в наивной формуле (a+bi)(c-di)/(c²+d²).

        Деление на ноль не перехватывается: результат содержит Inf/NaN
        по правилам IEEE-754.

        Args:
            rhs: Делитель

        Returns:
            self / rhs или COMPLEX_NAN если любой операнд NaN
        """
        if self.is_nan() or rhs.is_nan():
            return COMPLEX_NAN

        c = rhs.real
        d = rhs.imaginary

        if abs(c) < abs(d):
            q = _ieee_div(c, d)
            denom = (c * q) + d
            return ComplexNumber(
                _ieee_div((self.real * q) + self.imaginary, denom),
                _ieee_div((self.imaginary * q) - self.real, denom),
            )

        q = _ieee_div(d, c)
        denom = (d * q) + c
        return ComplexNumber(
            _ieee_div((self.imaginary * q) + self.real, denom),
            _ieee_div(self.imaginary - (self.real * q), denom),
        )

    # -------------------------------------------------------------------------
    # Python протоколы
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((_raw_bits(self.real), _raw_bits(self.imaginary)))

    def __abs__(self) -> float:
        return self.abs()

    def __neg__(self) -> "ComplexNumber":
        return self.negate()

    def __add__(self, other: object) -> "ComplexNumber":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> "ComplexNumber":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: object) -> "ComplexNumber":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.multiply(other)

    def __truediv__(self, other: object) -> "ComplexNumber":
        if not isinstance(other, ComplexNumber):
            return NotImplemented
        return self.divide(other)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Мнимая единица sqrt(-1)
COMPLEX_I: Final[ComplexNumber] = ComplexNumber(0.0, 1.0)

# Канонический NaN, возвращается всеми NaN-пропагирующими операциями
COMPLEX_NAN: Final[ComplexNumber] = ComplexNumber(math.nan, math.nan)

# Мультипликативная единица
COMPLEX_ONE: Final[ComplexNumber] = ComplexNumber(1.0, 0.0)
