"""
Transcendental: exp, log, sqrt, pow

Модуль реализует трансцендентные функции над парами (re, im) поверх
стабильного ядра модуля (magnitude, log_magnitude):
- exp(z) = e^re * (cos(im), sin(im))
- log(z) = (log|z|, arg z), главная ветвь
- sqrt(z) через модуль и heaviside-знак мнимой части
- pow(z, w) = exp(w * log(z)), разложенный на масштаб и угол

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. log и pow никогда не вычисляют re² + im² для больших компонент
2. exp(re) при большом re переполняется в inf по IEEE, это не ошибка
3. 0 ** w == 0 для любого w (вырожденное основание)

ФОРМУЛА pow (z = a + bi, w = c + di):
    z^w = exp((c + di) * log(a + bi))
    Re = exp(c * log|z| - d * arg z) * cos(d * log|z| + c * arg z)
    Im = exp(c * log|z| - d * arg z) * sin(d * log|z| + c * arg z)
"""

import math

from src.core.math.magnitude import argument, log_magnitude, magnitude
from src.core.math.numerical_safeguards import (
    ComplexPair,
    heaviside,
    ieee_cos,
    ieee_exp,
    ieee_pow,
    ieee_sin,
    ieee_sqrt,
)


def exp(z: ComplexPair) -> ComplexPair:
    """Экспонента: (e^re * cos(im), e^re * sin(im))."""
    scale = ieee_exp(z.re)
    return ComplexPair(scale * ieee_cos(z.im), scale * ieee_sin(z.im))


def log(z: ComplexPair) -> ComplexPair:
    """
    Натуральный логарифм, главная ветвь: (log|z|, atan2(im, re)).

    log(0) = (-inf, 0).
    """
    return ComplexPair(log_magnitude(z.re, z.im), argument(z.re, z.im))


def sqrt(z: ComplexPair) -> ComplexPair:
    """
    Главное значение квадратного корня.

    r = |z|
    sqrt(z) = (sqrt((r + re) / 2), sqrt((r - re) / 2) * heaviside(im))

    Нулевая мнимая часть даёт знак +1, поэтому sqrt(-4) = 2i.
    """
    r = magnitude(z.re, z.im)
    return ComplexPair(
        ieee_sqrt((r + z.re) * 0.5),
        ieee_sqrt((r - z.re) * 0.5) * heaviside(z.im),
    )


def _is_integral(value: float) -> bool:
    return math.isfinite(value) and value.is_integer()


def _pow_imaginary_base(im: float, exponent: float) -> ComplexPair:
    """
    (im * i) ** n для целого n через периодичность i^n.

    Python-модуль неотрицателен, поэтому n = -1 попадает в ветвь 3:
    (bi)^-1 = -i / b.
    """
    power = ieee_pow(im, exponent)
    quadrant = int(exponent) % 4

    if quadrant == 0:
        return ComplexPair(power, 0.0)
    if quadrant == 1:
        return ComplexPair(0.0, power)
    if quadrant == 2:
        return ComplexPair(-power, 0.0)
    return ComplexPair(0.0, -power)


def pow(z: ComplexPair, w: ComplexPair) -> ComplexPair:
    """
    Комплексная степень z ** w.

    Точные пути для вещественного показателя (w.im == 0):
    - z вещественное неотрицательное → (z.re ** w.re, 0)
    - z чисто мнимое и w.re целое → замкнутая форма по w.re mod 4

    Нецелый w.re при чисто мнимом z идёт по общей формуле.

    Args:
        z: Основание
        w: Показатель

    Returns:
        z ** w; (0, 0) если z == (0, 0)

    Examples:
        >>> pow(ComplexPair(0.0, 0.0), ComplexPair(5.0, 0.0))
        ComplexPair(re=0.0, im=0.0)
        >>> pow(ComplexPair(0.0, 2.0), ComplexPair(2.0, 0.0))
        ComplexPair(re=-4.0, im=0.0)
    """
    if z.re == 0.0 and z.im == 0.0:
        return ComplexPair(0.0, 0.0)

    if w.im == 0.0:
        if z.im == 0.0 and z.re >= 0.0:
            return ComplexPair(ieee_pow(z.re, w.re), 0.0)

        if z.re == 0.0 and _is_integral(w.re):
            return _pow_imaginary_base(z.im, w.re)

    arg = argument(z.re, z.im)
    log_abs = log_magnitude(z.re, z.im)

    scale = ieee_exp(w.re * log_abs - w.im * arg)
    angle = w.im * log_abs + w.re * arg

    return ComplexPair(scale * ieee_cos(angle), scale * ieee_sin(angle))
