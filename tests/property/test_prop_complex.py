"""
Property-тесты для ComplexNumber.

Инварианты:
1. multiply совпадает с наивным произведением с точностью до округления
2. multiply бит-в-бит совпадает с формулой трёх умножений
3. (a * b) / b ≈ a для ненулевых конечных a, b
4. Любая операция с NaN-операндом даёт COMPLEX_NAN
5. equals рефлексивно и согласовано с hash
"""

import math

from hypothesis import assume, example, given
from hypothesis import strategies as st

from numcore.core.domain import COMPLEX_NAN, ComplexNumber

from .conftest import complex_numbers, nan_complex_numbers


@given(complex_numbers(), complex_numbers())
@example(ComplexNumber(1.5, 1.0), ComplexNumber(5.759e-240, 5.759e-240))
def test_multiply_matches_naive_product(a: ComplexNumber, b: ComplexNumber) -> None:
    """Три умножения vs четыре умножения."""
    naive_real = a.real * b.real - a.imaginary * b.imaginary
    naive_imaginary = a.real * b.imaginary + a.imaginary * b.real
    # допуск по частичным произведениям: a.abs() * b.abs() обнуляется,
    # когда квадраты компонент уходят в underflow
    partial = (
        abs(a.real * b.real)
        + abs(a.imaginary * b.imaginary)
        + abs(a.real * b.imaginary)
        + abs(a.imaginary * b.real)
    )
    tol = 1e-12 * partial + 1e-300

    product = a.multiply(b)
    assert abs(product.real - naive_real) <= tol
    assert abs(product.imaginary - naive_imaginary) <= tol


@given(complex_numbers(), complex_numbers())
def test_multiply_is_three_multiplication_formula(a: ComplexNumber, b: ComplexNumber) -> None:
    """Порядок операций фиксирован: результат совпадает побитово."""
    ac = a.real * b.real
    bd = a.imaginary * b.imaginary
    p = (a.real + a.imaginary) * (b.real + b.imaginary)
    assert a.multiply(b) == ComplexNumber(ac - bd, p - ac - bd)


@given(complex_numbers(), complex_numbers())
def test_divide_recovers_dividend(a: ComplexNumber, b: ComplexNumber) -> None:
    """(a * b) / b ≈ a."""
    assume(a.abs() > 1e-3)
    assume(b.abs() > 1e-3)

    recovered = a.multiply(b).divide(b)
    error = math.hypot(recovered.real - a.real, recovered.imaginary - a.imaginary)
    assert error <= 1e-9 * a.abs()


@given(nan_complex_numbers(), complex_numbers())
def test_nan_operand_propagates(nan_value: ComplexNumber, other: ComplexNumber) -> None:
    """Любая бинарная операция с NaN возвращает канонический NaN."""
    assert nan_value.is_nan()
    for result in (
        nan_value.add(other),
        other.subtract(nan_value),
        nan_value.multiply(other),
        other.divide(nan_value),
        nan_value.negate(),
        nan_value.conjugate(),
    ):
        assert result is COMPLEX_NAN
    assert math.isnan(nan_value.abs())


@given(st.floats(), st.floats())
def test_is_nan_iff_component_nan(real: float, imaginary: float) -> None:
    """is_nan() тогда и только тогда, когда есть NaN-компонента."""
    z = ComplexNumber(real, imaginary)
    assert z.is_nan() == (math.isnan(real) or math.isnan(imaginary))


@given(st.floats(), st.floats())
def test_equals_reflexive_and_hash_consistent(real: float, imaginary: float) -> None:
    """Равенство побитовое, включая NaN."""
    z = ComplexNumber(real, imaginary)
    copy = ComplexNumber(real, imaginary)
    assert z.equals(z)
    assert z == copy
    assert hash(z) == hash(copy)


@given(complex_numbers())
def test_conjugate_and_negate_are_involutions(z: ComplexNumber) -> None:
    """Двойное сопряжение и двойное отрицание возвращают исходное число."""
    assert z.conjugate().conjugate() == z
    assert z.negate().negate() == z
