"""
Rounding: Decimal Rounding and Epsilon Equality

- ceil / floor / round до заданного числа знаков после запятой
- equals: покомпонентное сравнение с абсолютной толерантностью EPSILON

round использует округление half-up (floor(v + 0.5)): -2.5 → -2, 2.5 → 3.
Бесконечности и NaN проходят без изменений. Экстремальное places не
вызывает exception: при 10^places = inf значение возвращается как есть,
при 10^places = 0 результат 0 / 0 = NaN.
"""

import math
from typing import Callable

from src.core.math.numerical_safeguards import (
    EPSILON,
    ComplexPair,
    ieee_divide,
    ieee_pow,
    is_valid_float,
    is_within_epsilon,
)


def _round_half_up(value: float) -> float:
    return math.floor(value + 0.5)


def _apply_scaled(
    z: ComplexPair, places: int, rounder: Callable[[float], float]
) -> ComplexPair:
    # 10^places: inf при переполнении, 0.0 при исчезновении порядка
    scale = ieee_pow(10.0, float(places))

    def _component(value: float) -> float:
        scaled = value * scale
        if not is_valid_float(scaled):
            return value
        return ieee_divide(rounder(scaled), scale)

    return ComplexPair(_component(z.re), _component(z.im))


def ceil(z: ComplexPair, places: int = 0) -> ComplexPair:
    """
    Округление вверх до places знаков.

    Examples:
        >>> ceil(ComplexPair(1.21, -1.29), 1)
        ComplexPair(re=1.3, im=-1.2)
    """
    return _apply_scaled(z, places, math.ceil)


def floor(z: ComplexPair, places: int = 0) -> ComplexPair:
    """Округление вниз до places знаков."""
    return _apply_scaled(z, places, math.floor)


def round_half_up(z: ComplexPair, places: int = 0) -> ComplexPair:
    """Округление к ближайшему до places знаков, половина вверх."""
    return _apply_scaled(z, places, _round_half_up)


def equals(x: ComplexPair, y: ComplexPair, eps: float = EPSILON) -> bool:
    """
    Покомпонентное сравнение: |x.re - y.re| <= eps и |x.im - y.im| <= eps.

    Пара с NaN не равна ничему, включая себя.
    """
    return is_within_epsilon(x.re, y.re, eps) and is_within_epsilon(x.im, y.im, eps)
