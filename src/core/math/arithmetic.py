"""
Arithmetic: Core Complex Arithmetic

Модуль реализует базовую арифметику над парами (re, im):
- Сложение, вычитание, умножение
- Деление по алгоритму Смита (без возведения компонент делителя в квадрат)
- Обратное значение, отрицание, сопряжение, нормировка (sign)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на точный ноль (0, 0) → DivisionByZero
2. Все функции чистые: на вход пары, на выход новая пара
3. Переполнение и NaN распространяются по IEEE-754, исключений нет
"""

from src.core.math.magnitude import magnitude
from src.core.math.numerical_safeguards import ComplexPair, ieee_divide

# =============================================================================
# EXCEPTIONS
# =============================================================================


class DivisionByZero(ZeroDivisionError):
    """
    Деление (или обращение) на комплексный ноль (0, 0).

    Единственная арифметическая ошибка. Поднимается немедленно, частичного
    результата нет.
    """

    pass


# =============================================================================
# СЛОЖЕНИЕ / УМНОЖЕНИЕ
# =============================================================================


def add(x: ComplexPair, y: ComplexPair) -> ComplexPair:
    """Сумма: (x.re + y.re, x.im + y.im)."""
    return ComplexPair(x.re + y.re, x.im + y.im)


def sub(x: ComplexPair, y: ComplexPair) -> ComplexPair:
    """Разность: (x.re - y.re, x.im - y.im)."""
    return ComplexPair(x.re - y.re, x.im - y.im)


def mul(x: ComplexPair, y: ComplexPair) -> ComplexPair:
    """Произведение: (x.re*y.re - x.im*y.im, x.re*y.im + x.im*y.re)."""
    return ComplexPair(
        x.re * y.re - x.im * y.im,
        x.re * y.im + x.im * y.re,
    )


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def div(x: ComplexPair, y: ComplexPair) -> ComplexPair:
    """
    Деление по алгоритму Смита.

    Делимое и делитель масштабируются отношением меньшей компоненты делителя
    к большей, поэтому y.re² и y.im² не вычисляются.

    Алгоритм:
        |y.re| < |y.im|:  r = y.re / y.im,  t = y.re * r + y.im
                          ((x.re * r + x.im) / t, (x.im * r - x.re) / t)
        иначе:            r = y.im / y.re,  t = y.im * r + y.re
                          ((x.re + x.im * r) / t, (x.im - x.re * r) / t)

    Args:
        x: Делимое
        y: Делитель

    Returns:
        x / y

    Raises:
        DivisionByZero: если y == (0, 0)

    Examples:
        >>> div(ComplexPair(1.0, 0.0), ComplexPair(0.0, 1.0))
        ComplexPair(re=0.0, im=-1.0)
    """
    if y.re == 0.0 and y.im == 0.0:
        raise DivisionByZero(f"Complex division by zero: ({x.re}, {x.im}) / (0, 0)")

    if abs(y.re) < abs(y.im):
        ratio = y.re / y.im
        t = y.re * ratio + y.im
        return ComplexPair(
            ieee_divide(x.re * ratio + x.im, t),
            ieee_divide(x.im * ratio - x.re, t),
        )

    ratio = ieee_divide(y.im, y.re)
    t = y.im * ratio + y.re
    return ComplexPair(
        ieee_divide(x.re + x.im * ratio, t),
        ieee_divide(x.im - x.re * ratio, t),
    )


def inverse(x: ComplexPair) -> ComplexPair:
    """
    Обратное значение 1/x = (x.re / t, -x.im / t), t = x.re² + x.im².

    t вычисляется без масштабирования: для компонент порядка 1e154 и выше
    t переполняется (результат уходит в ноль), для компонент порядка 1e-154
    и ниже t исчезает (результат уходит в inf). Для таких значений
    точнее div(ONE, x).

    Raises:
        DivisionByZero: если x == (0, 0)
    """
    if x.re == 0.0 and x.im == 0.0:
        raise DivisionByZero("Complex zero has no multiplicative inverse")

    t = x.re * x.re + x.im * x.im
    return ComplexPair(ieee_divide(x.re, t), ieee_divide(-x.im, t))


# =============================================================================
# УНАРНЫЕ ОПЕРАЦИИ
# =============================================================================


def neg(x: ComplexPair) -> ComplexPair:
    return ComplexPair(-x.re, -x.im)


def conjugate(x: ComplexPair) -> ComplexPair:
    return ComplexPair(x.re, -x.im)


def sign(x: ComplexPair) -> ComplexPair:
    """
    Нормировка на единичную окружность: x / |x|.

    Модуль берётся из стабильного ядра, поэтому не переполняется.
    Для нуля результат (NaN, NaN).
    """
    scale = magnitude(x.re, x.im)
    return ComplexPair(ieee_divide(x.re, scale), ieee_divide(x.im, scale))
