"""
Complex: Immutable Complex Number Value Object

Immutable Pydantic модель комплексного числа (re, im).

Конструктор принимает любую форму, поддерживаемую parse_complex:
    Complex(3, 4)
    Complex("3+4i")
    Complex({"abs": 2, "arg": math.pi / 2})
    Complex(re=1, im=-1)
    Complex(2.5)
    Complex(1 + 2j)

Все операции возвращают новый экземпляр; экземпляр никогда не мутирует.
Значение с NaN в любой компоненте является каноническим невалидным и
распространяется через все операции. Напрямую сконструировать NaN нельзя
(InvalidArgument), NaN возникает только как результат операций
(например, Complex(0, 0).sign()).

Пример:
    Complex("99.3+8i").mul(Complex(3, 9)).div(4.9).sub(3, 2)
"""

import math
from typing import Any, ClassVar, Optional, Union

from pydantic import BaseModel, Field

from src.core.contracts.formatting import format_complex
from src.core.contracts.parsing import InvalidArgument, parse_complex
from src.core.math import arithmetic, rounding, transcendental, trigonometry
from src.core.math.magnitude import argument, magnitude
from src.core.math.numerical_safeguards import EPSILON, ComplexPair

ComplexLike = Union["Complex", ComplexPair, complex, float, int, str, dict, None]


class Complex(BaseModel):
    """
    Комплексное число.

    Immutable модель (frozen=True): все изменения создают новый экземпляр.

    Операторы Python (+, -, *, /, **, abs, унарный -) делегируют методам
    add, sub, mul, div, pow, abs, neg. Оператор == сравнивает компоненты
    точно; equals сравнивает с толерантностью EPSILON.
    """

    re: float = Field(0.0, description="Действительная часть")
    im: float = Field(0.0, description="Мнимая часть")

    model_config = {"frozen": True}

    ZERO: ClassVar["Complex"]
    ONE: ClassVar["Complex"]
    I: ClassVar["Complex"]
    PI: ClassVar["Complex"]
    E: ClassVar["Complex"]

    def __init__(self, a: Any = None, b: Any = None, /, **fields: Any) -> None:
        if fields:
            if a is not None or b is not None:
                raise InvalidArgument(
                    "Complex accepts either positional or keyword form, not both"
                )
            a = fields

        if b is None and isinstance(a, Complex):
            re, im = a.pair
        else:
            re, im = parse_complex(a, b)
        super().__init__(re=re, im=im)

    # ---------- construction ----------

    @classmethod
    def from_pair(cls, pair: ComplexPair) -> "Complex":
        """
        Конструирование из готовой пары без разбора и валидации.

        Используется для результатов операций: inf и NaN допускаются.
        """
        return cls.model_construct(re=float(pair[0]), im=float(pair[1]))

    @property
    def pair(self) -> ComplexPair:
        return ComplexPair(self.re, self.im)

    def _operand(self, a: Any, b: Any) -> ComplexPair:
        # Готовые значения не разбираются повторно: NaN-результаты
        # операций должны распространяться, а не отклоняться парсером
        if b is None and isinstance(a, Complex):
            return a.pair
        return parse_complex(a, b)

    # ---------- arithmetic ----------

    def add(self, a: ComplexLike, b: Optional[float] = None) -> "Complex":
        return Complex.from_pair(arithmetic.add(self.pair, self._operand(a, b)))

    def sub(self, a: ComplexLike, b: Optional[float] = None) -> "Complex":
        return Complex.from_pair(arithmetic.sub(self.pair, self._operand(a, b)))

    def mul(self, a: ComplexLike, b: Optional[float] = None) -> "Complex":
        return Complex.from_pair(arithmetic.mul(self.pair, self._operand(a, b)))

    def div(self, a: ComplexLike, b: Optional[float] = None) -> "Complex":
        """
        Деление по алгоритму Смита.

        Raises:
            DivisionByZero: если делитель равен (0, 0)
        """
        return Complex.from_pair(arithmetic.div(self.pair, self._operand(a, b)))

    def pow(self, a: ComplexLike, b: Optional[float] = None) -> "Complex":
        """Комплексная степень; 0 ** w == 0 для любого w."""
        return Complex.from_pair(transcendental.pow(self.pair, self._operand(a, b)))

    def neg(self) -> "Complex":
        return Complex.from_pair(arithmetic.neg(self.pair))

    def conjugate(self) -> "Complex":
        return Complex.from_pair(arithmetic.conjugate(self.pair))

    def inverse(self) -> "Complex":
        """
        1 / z.

        Raises:
            DivisionByZero: если z == (0, 0)
        """
        return Complex.from_pair(arithmetic.inverse(self.pair))

    def sign(self) -> "Complex":
        """z / |z|; для нуля (NaN, NaN)."""
        return Complex.from_pair(arithmetic.sign(self.pair))

    # ---------- magnitude ----------

    def abs(self) -> float:
        """Модуль без переполнения."""
        return magnitude(self.re, self.im)

    def arg(self) -> float:
        """Угол atan2(im, re)."""
        return argument(self.re, self.im)

    # ---------- transcendental ----------

    def exp(self) -> "Complex":
        return Complex.from_pair(transcendental.exp(self.pair))

    def log(self) -> "Complex":
        return Complex.from_pair(transcendental.log(self.pair))

    def sqrt(self) -> "Complex":
        return Complex.from_pair(transcendental.sqrt(self.pair))

    # ---------- trigonometry ----------

    def sin(self) -> "Complex":
        return Complex.from_pair(trigonometry.sin(self.pair))

    def cos(self) -> "Complex":
        return Complex.from_pair(trigonometry.cos(self.pair))

    def tan(self) -> "Complex":
        return Complex.from_pair(trigonometry.tan(self.pair))

    def asin(self) -> "Complex":
        return Complex.from_pair(trigonometry.asin(self.pair))

    def acos(self) -> "Complex":
        return Complex.from_pair(trigonometry.acos(self.pair))

    def atan(self) -> "Complex":
        """
        Арктангенс.

        Raises:
            DivisionByZero: в полюсе z == i
        """
        return Complex.from_pair(trigonometry.atan(self.pair))

    def sinh(self) -> "Complex":
        return Complex.from_pair(trigonometry.sinh(self.pair))

    def cosh(self) -> "Complex":
        return Complex.from_pair(trigonometry.cosh(self.pair))

    def tanh(self) -> "Complex":
        return Complex.from_pair(trigonometry.tanh(self.pair))

    # ---------- rounding / comparison ----------

    def ceil(self, places: int = 0) -> "Complex":
        return Complex.from_pair(rounding.ceil(self.pair, places))

    def floor(self, places: int = 0) -> "Complex":
        return Complex.from_pair(rounding.floor(self.pair, places))

    def round(self, places: int = 0) -> "Complex":
        """Округление half-up до places знаков после запятой."""
        return Complex.from_pair(rounding.round_half_up(self.pair, places))

    def equals(
        self, a: ComplexLike, b: Optional[float] = None, eps: float = EPSILON
    ) -> bool:
        """
        Сравнение с толерантностью: |Δre| <= eps и |Δim| <= eps.

        Значение с NaN не равно ничему.
        """
        return rounding.equals(self.pair, self._operand(a, b), eps)

    # ---------- conversion ----------

    def clone(self) -> "Complex":
        return Complex.from_pair(self.pair)

    def to_string(self) -> str:
        return format_complex(self.re, self.im)

    def to_vector(self) -> list[float]:
        return [self.re, self.im]

    def value_of(self) -> Optional[float]:
        """Действительная часть, если мнимая равна нулю, иначе None."""
        if self.im == 0.0:
            return self.re
        return None

    # ---------- Python protocol ----------

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Complex(re={self.re!r}, im={self.im!r})"

    def __complex__(self) -> complex:
        return complex(self.re, self.im)

    def __abs__(self) -> float:
        return self.abs()

    def __neg__(self) -> "Complex":
        return self.neg()

    def __pos__(self) -> "Complex":
        return self

    def __bool__(self) -> bool:
        return self.re != 0.0 or self.im != 0.0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Complex):
            return self.re == other.re and self.im == other.im
        if isinstance(other, (int, float, complex)):
            return complex(self.re, self.im) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(complex(self.re, self.im))

    def __add__(self, other: Any) -> "Complex":
        return self.add(other)

    def __radd__(self, other: Any) -> "Complex":
        return Complex(other).add(self)

    def __sub__(self, other: Any) -> "Complex":
        return self.sub(other)

    def __rsub__(self, other: Any) -> "Complex":
        return Complex(other).sub(self)

    def __mul__(self, other: Any) -> "Complex":
        return self.mul(other)

    def __rmul__(self, other: Any) -> "Complex":
        return Complex(other).mul(self)

    def __truediv__(self, other: Any) -> "Complex":
        return self.div(other)

    def __rtruediv__(self, other: Any) -> "Complex":
        return Complex(other).div(self)

    def __pow__(self, other: Any) -> "Complex":
        return self.pow(other)

    def __rpow__(self, other: Any) -> "Complex":
        return Complex(other).pow(self)


# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Complex = Complex.from_pair(ComplexPair(0.0, 0.0))
ONE: Complex = Complex.from_pair(ComplexPair(1.0, 0.0))
I: Complex = Complex.from_pair(ComplexPair(0.0, 1.0))
PI: Complex = Complex.from_pair(ComplexPair(math.pi, 0.0))
E: Complex = Complex.from_pair(ComplexPair(math.e, 0.0))

Complex.ZERO = ZERO
Complex.ONE = ONE
Complex.I = I
Complex.PI = PI
Complex.E = E
