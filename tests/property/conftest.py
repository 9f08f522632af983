"""
Hypothesis конфигурация и общие стратегии для property-тестов.
"""

from hypothesis import HealthCheck, Verbosity, settings
from hypothesis import strategies as st

from numcore.core.domain import ComplexNumber

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile(
    "default",
    max_examples=200,
    verbosity=Verbosity.normal,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)

settings.register_profile(
    "ci",
    max_examples=1000,
    verbosity=Verbosity.quiet,
    deadline=None,
    suppress_health_check=[HealthCheck.too_slow],
)

settings.register_profile(
    "dev",
    max_examples=25,
    verbosity=Verbosity.normal,
    deadline=None,
)

settings.load_profile("default")


# =============================================================================
# STRATEGIES
# =============================================================================


def components(max_magnitude: float = 1e6) -> st.SearchStrategy[float]:
    """Конечные компоненты умеренной величины"""
    return st.floats(
        min_value=-max_magnitude,
        max_value=max_magnitude,
        allow_nan=False,
        allow_infinity=False,
        allow_subnormal=False,
    )


@st.composite
def complex_numbers(draw: st.DrawFn, max_magnitude: float = 1e6) -> ComplexNumber:
    """Стратегия для конечных ComplexNumber"""
    return ComplexNumber(
        draw(components(max_magnitude)),
        draw(components(max_magnitude)),
    )


@st.composite
def nan_complex_numbers(draw: st.DrawFn) -> ComplexNumber:
    """ComplexNumber с NaN хотя бы в одной компоненте"""
    other = draw(st.floats(allow_nan=True))
    if draw(st.booleans()):
        return ComplexNumber(float("nan"), other)
    return ComplexNumber(other, float("nan"))
