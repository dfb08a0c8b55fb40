"""
Тесты для модуля Trigonometry

Проверяет:
1. Прямые круговые и гиперболические функции против cmath
2. Обратные функции: главные ветви против cmath, sin(asin(z)) ≈ z
3. Полюс atan в z = i
"""

import cmath
import math

import pytest

from src.core.math.arithmetic import DivisionByZero
from src.core.math.numerical_safeguards import ComplexPair
from src.core.math.trigonometry import (
    acos,
    asin,
    atan,
    cos,
    cosh,
    sin,
    sinh,
    tan,
    tanh,
)

# Точки вне разрезов обратных функций
POINTS = [
    ComplexPair(0.5, 0.3),
    ComplexPair(-1.2, 0.7),
    ComplexPair(2.0, -1.0),
    ComplexPair(0.1, -0.2),
    ComplexPair(-0.8, -1.5),
]


def _as_complex(pair: ComplexPair) -> complex:
    return complex(pair.re, pair.im)


# =============================================================================
# КРУГОВЫЕ И ГИПЕРБОЛИЧЕСКИЕ ФУНКЦИИ
# =============================================================================


class TestCircular:
    """Тесты для sin / cos / tan"""

    @pytest.mark.parametrize("z", POINTS)
    def test_sin_matches_cmath(self, z: ComplexPair) -> None:
        """sin против cmath.sin"""
        assert _as_complex(sin(z)) == pytest.approx(cmath.sin(_as_complex(z)), rel=1e-13)

    @pytest.mark.parametrize("z", POINTS)
    def test_cos_matches_cmath(self, z: ComplexPair) -> None:
        """cos против cmath.cos"""
        assert _as_complex(cos(z)) == pytest.approx(cmath.cos(_as_complex(z)), rel=1e-13)

    @pytest.mark.parametrize("z", POINTS)
    def test_tan_matches_cmath(self, z: ComplexPair) -> None:
        """tan против cmath.tan"""
        assert _as_complex(tan(z)) == pytest.approx(cmath.tan(_as_complex(z)), rel=1e-13)

    def test_real_arguments(self) -> None:
        """На вещественной оси совпадают с math"""
        assert sin(ComplexPair(0.0, 0.0)) == (0.0, 0.0)
        assert cos(ComplexPair(0.0, 0.0)) == (1.0, -0.0)
        assert tan(ComplexPair(math.pi / 4, 0.0)).re == pytest.approx(1.0, rel=1e-15)

    def test_pythagorean_identity(self) -> None:
        """sin² + cos² ≈ 1 для комплексного аргумента"""
        for z in POINTS:
            s = _as_complex(sin(z))
            c = _as_complex(cos(z))
            assert s * s + c * c == pytest.approx(1.0, abs=1e-13)

    def test_tan_with_large_imaginary_part(self) -> None:
        """cosh(2000) переполняется в знаменателе без исключения"""
        result = tan(ComplexPair(0.5, 1000.0))
        assert result.re == 0.0


class TestHyperbolic:
    """Тесты для sinh / cosh / tanh"""

    @pytest.mark.parametrize("z", POINTS)
    def test_sinh_matches_cmath(self, z: ComplexPair) -> None:
        """sinh против cmath.sinh"""
        assert _as_complex(sinh(z)) == pytest.approx(cmath.sinh(_as_complex(z)), rel=1e-13)

    @pytest.mark.parametrize("z", POINTS)
    def test_cosh_matches_cmath(self, z: ComplexPair) -> None:
        """cosh против cmath.cosh"""
        assert _as_complex(cosh(z)) == pytest.approx(cmath.cosh(_as_complex(z)), rel=1e-13)

    @pytest.mark.parametrize("z", POINTS)
    def test_tanh_matches_cmath(self, z: ComplexPair) -> None:
        """tanh против cmath.tanh"""
        assert _as_complex(tanh(z)) == pytest.approx(cmath.tanh(_as_complex(z)), rel=1e-13)

    def test_cosh_sinh_identity(self) -> None:
        """cosh² - sinh² ≈ 1"""
        for z in POINTS:
            s = _as_complex(sinh(z))
            c = _as_complex(cosh(z))
            assert c * c - s * s == pytest.approx(1.0, abs=1e-12)

    def test_overflow_is_inf(self) -> None:
        """sinh(1000) и cosh(1000) переполняются в inf"""
        assert sinh(ComplexPair(1000.0, 0.0)).re == math.inf
        assert sinh(ComplexPair(-1000.0, 0.0)).re == -math.inf
        assert cosh(ComplexPair(1000.0, 0.0)).re == math.inf


# =============================================================================
# ОБРАТНЫЕ ФУНКЦИИ
# =============================================================================


class TestInverse:
    """Тесты для asin / acos / atan"""

    @pytest.mark.parametrize("z", POINTS)
    def test_asin_matches_cmath(self, z: ComplexPair) -> None:
        """asin: главная ветвь совпадает с cmath.asin"""
        assert _as_complex(asin(z)) == pytest.approx(cmath.asin(_as_complex(z)), rel=1e-12)

    @pytest.mark.parametrize("z", POINTS)
    def test_acos_matches_cmath(self, z: ComplexPair) -> None:
        """acos: главная ветвь совпадает с cmath.acos"""
        assert _as_complex(acos(z)) == pytest.approx(cmath.acos(_as_complex(z)), rel=1e-12)

    @pytest.mark.parametrize("z", POINTS)
    def test_atan_matches_cmath(self, z: ComplexPair) -> None:
        """atan: главная ветвь совпадает с cmath.atan"""
        assert _as_complex(atan(z)) == pytest.approx(cmath.atan(_as_complex(z)), rel=1e-12)

    @pytest.mark.parametrize("z", POINTS)
    def test_sin_of_asin(self, z: ComplexPair) -> None:
        """sin(asin(z)) ≈ z"""
        assert _as_complex(sin(asin(z))) == pytest.approx(_as_complex(z), abs=1e-12)

    @pytest.mark.parametrize("z", POINTS)
    def test_cos_of_acos(self, z: ComplexPair) -> None:
        """cos(acos(z)) ≈ z"""
        assert _as_complex(cos(acos(z))) == pytest.approx(_as_complex(z), abs=1e-12)

    @pytest.mark.parametrize("z", POINTS)
    def test_tan_of_atan(self, z: ComplexPair) -> None:
        """tan(atan(z)) ≈ z"""
        assert _as_complex(tan(atan(z))) == pytest.approx(_as_complex(z), abs=1e-12)

    def test_real_values(self) -> None:
        """asin(1) = π/2, acos(1) = 0, atan(1) = π/4"""
        assert asin(ComplexPair(1.0, 0.0)).re == pytest.approx(math.pi / 2, rel=1e-15)
        assert acos(ComplexPair(1.0, 0.0)).re == pytest.approx(0.0, abs=1e-15)

        result = atan(ComplexPair(1.0, 0.0))
        assert result.re == pytest.approx(math.pi / 4, rel=1e-15)
        assert result.im == pytest.approx(0.0, abs=1e-15)

    def test_atan_pole_raises(self) -> None:
        """atan(i): знаменатель i - z равен нулю"""
        with pytest.raises(DivisionByZero):
            atan(ComplexPair(0.0, 1.0))

    def test_asin_outside_unit_interval(self) -> None:
        """asin(2) = π/2 - i·ln(2 + √3)"""
        result = asin(ComplexPair(2.0, 0.0))
        assert result.re == pytest.approx(math.pi / 2, rel=1e-15)
        assert result.im == pytest.approx(-math.log(2.0 + math.sqrt(3.0)), rel=1e-14)
