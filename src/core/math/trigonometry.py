"""
Trigonometry: Circular, Hyperbolic and Inverse Circular Functions

Прямые функции вычисляются замкнутыми формулами по (re, im).
Обратные функции выражены алгебраически через log, sqrt и умножение на i,
поэтому наследуют главные ветви transcendental и выполняется
sin(asin(z)) ≈ z.

ФОРМУЛЫ:
    sin  = (sin(re) cosh(im),  cos(re) sinh(im))
    cos  = (cos(re) cosh(im), -sin(re) sinh(im))
    tan  = (sin(2re), sinh(2im)) / (cos(2re) + cosh(2im))
    sinh = (sinh(re) cos(im),  cosh(re) sin(im))
    cosh = (cosh(re) cos(im),  sinh(re) sin(im))
    tanh = (sinh(2re), sin(2im)) / (cosh(2re) + cos(2im))

    asin(z) = -i * log(i*z + sqrt(1 - z²))
    acos(z) = -i * log(z + i*sqrt(1 - z²))
    atan(z) = log((i + z) / (i - z)) * i / 2
"""

from src.core.math.arithmetic import add, div, mul, neg, sub
from src.core.math.numerical_safeguards import (
    ComplexPair,
    ieee_cos,
    ieee_cosh,
    ieee_divide,
    ieee_sin,
    ieee_sinh,
)
from src.core.math.transcendental import log, sqrt

_ONE = ComplexPair(1.0, 0.0)
_TWO = ComplexPair(2.0, 0.0)
_I = ComplexPair(0.0, 1.0)


# =============================================================================
# КРУГОВЫЕ ФУНКЦИИ
# =============================================================================


def sin(z: ComplexPair) -> ComplexPair:
    return ComplexPair(
        ieee_sin(z.re) * ieee_cosh(z.im),
        ieee_cos(z.re) * ieee_sinh(z.im),
    )


def cos(z: ComplexPair) -> ComplexPair:
    return ComplexPair(
        ieee_cos(z.re) * ieee_cosh(z.im),
        -ieee_sin(z.re) * ieee_sinh(z.im),
    )


def tan(z: ComplexPair) -> ComplexPair:
    """
    Тангенс через удвоенные аргументы.

    Знаменатель cos(2re) + cosh(2im) >= 0 и обращается в ноль только в полюсах
    re = π/2 + kπ, im = 0, которые в double непредставимы точно.
    """
    d = ieee_cos(2.0 * z.re) + ieee_cosh(2.0 * z.im)
    return ComplexPair(
        ieee_divide(ieee_sin(2.0 * z.re), d),
        ieee_divide(ieee_sinh(2.0 * z.im), d),
    )


# =============================================================================
# ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


def sinh(z: ComplexPair) -> ComplexPair:
    return ComplexPair(
        ieee_sinh(z.re) * ieee_cos(z.im),
        ieee_cosh(z.re) * ieee_sin(z.im),
    )


def cosh(z: ComplexPair) -> ComplexPair:
    return ComplexPair(
        ieee_cosh(z.re) * ieee_cos(z.im),
        ieee_sinh(z.re) * ieee_sin(z.im),
    )


def tanh(z: ComplexPair) -> ComplexPair:
    """Гиперболический тангенс; знаменатель cosh(2re) + cos(2im)."""
    d = ieee_cosh(2.0 * z.re) + ieee_cos(2.0 * z.im)
    return ComplexPair(
        ieee_divide(ieee_sinh(2.0 * z.re), d),
        ieee_divide(ieee_sin(2.0 * z.im), d),
    )


# =============================================================================
# ОБРАТНЫЕ КРУГОВЫЕ ФУНКЦИИ
# =============================================================================


def _times_minus_i(z: ComplexPair) -> ComplexPair:
    return neg(mul(z, _I))


def asin(z: ComplexPair) -> ComplexPair:
    """Арксинус, главная ветвь: -i * log(i*z + sqrt(1 - z²))."""
    root = sqrt(sub(_ONE, mul(z, z)))
    return _times_minus_i(log(add(root, mul(z, _I))))


def acos(z: ComplexPair) -> ComplexPair:
    """Арккосинус, главная ветвь: -i * log(z + i*sqrt(1 - z²))."""
    root = sqrt(sub(_ONE, mul(z, z)))
    return _times_minus_i(log(add(mul(root, _I), z)))


def atan(z: ComplexPair) -> ComplexPair:
    """
    Арктангенс, главная ветвь: log((i + z) / (i - z)) * i / 2.

    Порядок операций фиксирован: add, div, log, mul на i, div на 2.

    Raises:
        DivisionByZero: если z == i (полюс)
    """
    ratio = div(add(_I, z), sub(_I, z))
    return div(mul(log(ratio), _I), _TWO)
