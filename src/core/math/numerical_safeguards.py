"""
Numerical Safeguards: IEEE-754 Primitives for Complex Arithmetic

Модуль обеспечивает численную устойчивость всех операций над комплексными числами:
- Epsilon-параметры сравнения и пороги перехода на масштабированные формулы
- IEEE-обёртки над math: переполнение даёт inf, недопустимый аргумент даёт NaN
- Heaviside-функция для выбора ветви квадратного корня
- Проверки NaN/Inf и epsilon-сравнения

Модуль math в Python выбрасывает OverflowError/ValueError там, где IEEE-754
возвращает inf/NaN. Комплексная арифметика опирается на IEEE-семантику:
переполнение распространяется как inf, невалидное значение как NaN.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна обёртка не выбрасывает исключений для float аргументов
2. NaN на входе всегда даёт NaN на выходе (NaN poisoning)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final, NamedTuple

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для покомпонентного сравнения комплексных чисел
EPSILON: Final[float] = 1e-16

# Если обе компоненты по модулю меньше порога, квадраты вычисляются напрямую
# (re² + im² не переполняется)
MAGNITUDE_DIRECT_LIMIT: Final[float] = 1000.0

# Если обе компоненты по модулю меньше порога, re² + im² уходит в subnormal
# или ноль; используется масштабированная формула
MAGNITUDE_UNDERFLOW_LIMIT: Final[float] = 1e-150


# =============================================================================
# ТИПЫ
# =============================================================================


class ComplexPair(NamedTuple):
    """Нормализованная пара (re, im), с которой работают все функции math."""

    re: float
    im: float


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def has_nan(re: float, im: float) -> bool:
    """
    Проверка пары на NaN.

    Пара с NaN в любой компоненте является каноническим "невалидным"
    комплексным числом.

    Examples:
        >>> has_nan(1.0, float("nan"))
        True
        >>> has_nan(float("inf"), 0.0)
        False
    """
    return math.isnan(re) or math.isnan(im)


def is_within_epsilon(a: float, b: float, eps: float = EPSILON) -> bool:
    """
    Абсолютное epsilon-сравнение: abs(a - b) <= eps.

    NaN никогда не равен ничему, включая себя.

    Examples:
        >>> is_within_epsilon(1.0, 1.0 + 1e-17)
        True
        >>> is_within_epsilon(1.0, 1.0 + 1e-10)
        False
    """
    return abs(a - b) <= eps


def heaviside(value: float) -> int:
    """
    Знак для выбора ветви sqrt: -1 если value < 0, иначе +1.

    Ноль отображается в +1, что соответствует главной ветви для
    неотрицательных вещественных чисел на разрезе.
    """
    return -1 if value < 0 else 1


# =============================================================================
# IEEE-754 ОБЁРТКИ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с IEEE-семантикой вместо ZeroDivisionError.

    Returns:
        numerator / denominator; x/0 → ±inf, 0/0 → NaN

    Examples:
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0.0 or math.isnan(numerator):
            return math.nan
        # Знак нуля в знаменателе учитывается как в IEEE-754
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def ieee_exp(value: float) -> float:
    """exp(value); переполнение даёт inf."""
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


def ieee_cosh(value: float) -> float:
    """cosh(value); переполнение даёт inf."""
    try:
        return math.cosh(value)
    except OverflowError:
        return math.inf


def ieee_sinh(value: float) -> float:
    """sinh(value); переполнение даёт inf со знаком аргумента."""
    try:
        return math.sinh(value)
    except OverflowError:
        return math.copysign(math.inf, value)


def ieee_sin(value: float) -> float:
    """sin(value); sin(±inf) = NaN."""
    if math.isinf(value):
        return math.nan
    return math.sin(value)


def ieee_cos(value: float) -> float:
    """cos(value); cos(±inf) = NaN."""
    if math.isinf(value):
        return math.nan
    return math.cos(value)


def ieee_log(value: float) -> float:
    """
    Натуральный логарифм с IEEE-семантикой.

    Examples:
        >>> ieee_log(0.0)
        -inf
        >>> ieee_log(-1.0)
        nan
    """
    if value == 0.0:
        return -math.inf
    if value < 0.0:
        return math.nan
    return math.log(value)


def ieee_sqrt(value: float) -> float:
    """sqrt(value); отрицательный аргумент даёт NaN."""
    if value < 0.0:
        return math.nan
    return math.sqrt(value)


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def ieee_pow(base: float, exponent: float) -> float:
    """
    Вещественное возведение в степень с IEEE-семантикой.

    - Переполнение → ±inf (минус для отрицательного основания и нечётной степени)
    - 0 ** (отрицательная степень) → inf
    - Отрицательное основание и нецелая степень → NaN

    Examples:
        >>> ieee_pow(2.0, 10.0)
        1024.0
        >>> ieee_pow(0.0, -1.0)
        inf
        >>> ieee_pow(-8.0, 1.0 / 3.0)
        nan
    """
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0.0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0.0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan
