"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Epsilon-параметры
2. IEEE-обёртки: переполнение → inf, недопустимый аргумент → NaN, без исключений
3. Heaviside-функцию
4. NaN/Inf проверки и epsilon-сравнения
"""

import math

import pytest

from src.core.math.numerical_safeguards import (
    EPSILON,
    MAGNITUDE_DIRECT_LIMIT,
    MAGNITUDE_UNDERFLOW_LIMIT,
    ComplexPair,
    has_nan,
    heaviside,
    ieee_cos,
    ieee_cosh,
    ieee_divide,
    ieee_exp,
    ieee_log,
    ieee_pow,
    ieee_sin,
    ieee_sinh,
    ieee_sqrt,
    is_valid_float,
    is_within_epsilon,
)

NAN = float("nan")
INF = float("inf")


# =============================================================================
# ТЕСТЫ КОНСТАНТ
# =============================================================================


class TestConstants:
    """Тесты epsilon-параметров"""

    def test_epsilon_value(self) -> None:
        """EPSILON сравнения равен 1e-16"""
        assert EPSILON == 1e-16

    def test_magnitude_limits(self) -> None:
        """Пороги прямого вычисления модуля"""
        assert MAGNITUDE_DIRECT_LIMIT == 1000.0
        assert MAGNITUDE_UNDERFLOW_LIMIT == 1e-150
        # Квадрат порога не уходит в subnormal
        assert MAGNITUDE_UNDERFLOW_LIMIT**2 > 2.2250738585072014e-308

    def test_complex_pair_fields(self) -> None:
        """ComplexPair: именованный кортеж (re, im)"""
        pair = ComplexPair(1.5, -2.0)
        assert pair.re == 1.5
        assert pair.im == -2.0
        assert tuple(pair) == (1.5, -2.0)


# =============================================================================
# ТЕСТЫ IEEE-ДЕЛЕНИЯ
# =============================================================================


class TestIeeeDivide:
    """Тесты для ieee_divide"""

    def test_normal_division(self) -> None:
        """Обычное деление работает корректно"""
        assert ieee_divide(6.0, 3.0) == 2.0
        assert ieee_divide(-1.0, 4.0) == -0.25

    def test_positive_by_zero_is_inf(self) -> None:
        """x / 0 → inf со знаком x"""
        assert ieee_divide(1.0, 0.0) == INF
        assert ieee_divide(-1.0, 0.0) == -INF

    def test_negative_zero_flips_sign(self) -> None:
        """Знак нуля в знаменателе учитывается"""
        assert ieee_divide(1.0, -0.0) == -INF
        assert ieee_divide(-1.0, -0.0) == INF

    def test_zero_by_zero_is_nan(self) -> None:
        """0 / 0 → NaN"""
        assert math.isnan(ieee_divide(0.0, 0.0))

    def test_nan_propagates(self) -> None:
        """NaN в числителе → NaN"""
        assert math.isnan(ieee_divide(NAN, 0.0))
        assert math.isnan(ieee_divide(NAN, 2.0))
        assert math.isnan(ieee_divide(1.0, NAN))


# =============================================================================
# ТЕСТЫ IEEE-ОБЁРТОК НАД math
# =============================================================================


class TestIeeeTranscendental:
    """Тесты для ieee_exp / ieee_cosh / ieee_sinh / ieee_sin / ieee_cos"""

    def test_exp_normal(self) -> None:
        """exp без переполнения совпадает с math.exp"""
        assert ieee_exp(0.0) == 1.0
        assert ieee_exp(1.0) == pytest.approx(math.e)

    def test_exp_overflow_is_inf(self) -> None:
        """exp переполняется в inf вместо OverflowError"""
        assert ieee_exp(1000.0) == INF
        assert ieee_exp(-1000.0) == 0.0

    def test_cosh_overflow_is_inf(self) -> None:
        """cosh переполняется в +inf для обоих знаков"""
        assert ieee_cosh(1000.0) == INF
        assert ieee_cosh(-1000.0) == INF

    def test_sinh_overflow_keeps_sign(self) -> None:
        """sinh переполняется в inf со знаком аргумента"""
        assert ieee_sinh(1000.0) == INF
        assert ieee_sinh(-1000.0) == -INF

    def test_sin_cos_of_infinity_is_nan(self) -> None:
        """sin(±inf), cos(±inf) → NaN вместо ValueError"""
        assert math.isnan(ieee_sin(INF))
        assert math.isnan(ieee_sin(-INF))
        assert math.isnan(ieee_cos(INF))
        assert math.isnan(ieee_cos(-INF))

    def test_sin_cos_normal(self) -> None:
        """Конечные аргументы совпадают с math"""
        assert ieee_sin(0.0) == 0.0
        assert ieee_cos(0.0) == 1.0
        assert ieee_sin(math.pi / 2) == pytest.approx(1.0)


class TestIeeeLogSqrt:
    """Тесты для ieee_log / ieee_sqrt"""

    def test_log_of_zero_is_minus_inf(self) -> None:
        """log(0) → -inf"""
        assert ieee_log(0.0) == -INF
        assert ieee_log(-0.0) == -INF

    def test_log_of_negative_is_nan(self) -> None:
        """log(x < 0) → NaN"""
        assert math.isnan(ieee_log(-1.0))

    def test_log_normal(self) -> None:
        """Положительные аргументы"""
        assert ieee_log(1.0) == 0.0
        assert ieee_log(math.e) == pytest.approx(1.0)
        assert ieee_log(INF) == INF

    def test_log_of_nan_is_nan(self) -> None:
        """NaN пропагирует"""
        assert math.isnan(ieee_log(NAN))

    def test_sqrt(self) -> None:
        """sqrt(x < 0) → NaN, иначе math.sqrt"""
        assert ieee_sqrt(9.0) == 3.0
        assert ieee_sqrt(0.0) == 0.0
        assert math.isnan(ieee_sqrt(-4.0))
        assert ieee_sqrt(INF) == INF


class TestIeeePow:
    """Тесты для ieee_pow"""

    def test_normal_power(self) -> None:
        """Обычное возведение в степень"""
        assert ieee_pow(2.0, 10.0) == 1024.0
        assert ieee_pow(4.0, 0.5) == 2.0
        assert ieee_pow(-2.0, 3.0) == -8.0

    def test_overflow_is_inf(self) -> None:
        """Переполнение → inf"""
        assert ieee_pow(10.0, 400.0) == INF
        assert ieee_pow(-10.0, 400.0) == INF

    def test_overflow_odd_negative_is_minus_inf(self) -> None:
        """Отрицательное основание и нечётная степень → -inf"""
        assert ieee_pow(-10.0, 401.0) == -INF

    def test_zero_to_negative_power_is_inf(self) -> None:
        """0 ** (отрицательная степень) → inf"""
        assert ieee_pow(0.0, -1.0) == INF
        assert ieee_pow(0.0, -2.0) == INF
        assert ieee_pow(-0.0, -1.0) == -INF
        assert ieee_pow(-0.0, -2.0) == INF

    def test_negative_base_fractional_exponent_is_nan(self) -> None:
        """Отрицательное основание и нецелая степень → NaN"""
        assert math.isnan(ieee_pow(-8.0, 1.0 / 3.0))


# =============================================================================
# ТЕСТЫ HEAVISIDE И ПРОВЕРОК
# =============================================================================


class TestHeaviside:
    """Тесты для heaviside"""

    def test_negative(self) -> None:
        """Отрицательные значения → -1"""
        assert heaviside(-2.0) == -1
        assert heaviside(-1e-300) == -1

    def test_zero_maps_to_plus_one(self) -> None:
        """Ноль (включая -0.0) → +1"""
        assert heaviside(0.0) == 1
        assert heaviside(-0.0) == 1

    def test_positive(self) -> None:
        """Положительные значения → +1"""
        assert heaviside(3.0) == 1


class TestFloatChecks:
    """Тесты для is_valid_float / has_nan / is_within_epsilon"""

    def test_is_valid_float(self) -> None:
        """Конечные значения валидны, NaN/Inf нет"""
        assert is_valid_float(1.0)
        assert is_valid_float(-1e308)
        assert not is_valid_float(NAN)
        assert not is_valid_float(INF)

    def test_has_nan(self) -> None:
        """NaN в любой компоненте"""
        assert has_nan(NAN, 0.0)
        assert has_nan(0.0, NAN)
        assert not has_nan(INF, -INF)
        assert not has_nan(1.0, 2.0)

    def test_within_epsilon(self) -> None:
        """Разница внутри EPSILON"""
        assert is_within_epsilon(0.0, 1e-17)
        assert is_within_epsilon(1.0, 1.0)

    def test_outside_epsilon(self) -> None:
        """Разница вне EPSILON"""
        assert not is_within_epsilon(0.0, 1e-10)
        assert not is_within_epsilon(1.0, 1.0 + 1e-10)

    def test_custom_epsilon(self) -> None:
        """Настраиваемая толерантность"""
        assert is_within_epsilon(1.0, 1.0 + 1e-10, eps=1e-9)

    def test_nan_never_within_epsilon(self) -> None:
        """NaN не равен ничему, включая себя"""
        assert not is_within_epsilon(NAN, NAN)
        assert not is_within_epsilon(NAN, 0.0)
