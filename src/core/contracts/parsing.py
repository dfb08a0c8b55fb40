"""
Complex Input Parsing

Нормализация входа конструктора комплексного числа в пару (re, im).

Поддерживаемые формы:
- None                          → (0, 0)
- два вещественных числа (a, b) → (a, b)
- вещественное число            → (a, 0)
- complex                       → (real, imag)
- объект {re, im} / {abs, arg} / {r, phi} (валидируется JSON Schema)
- последовательность из двух чисел [re, im]
- строка: "23.1337", "15+3i", "3-i", "-2.5e-3i", "1 + 2j"

Функция чистая: никакого разделяемого промежуточного состояния между вызовами.
Любой вход вне перечисленных форм, а также NaN или
бесконечность в результате → InvalidArgument.
"""

import numbers
import re
from typing import Any, Mapping, Optional, Sequence

from jsonschema import ValidationError

from src.core.contracts.validators import validate_complex_object
from src.core.math.numerical_safeguards import (
    ComplexPair,
    has_nan,
    ieee_cos,
    ieee_sin,
    is_valid_float,
)

# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidArgument(ValueError):
    """
    Вход конструктора не соответствует ни одной допустимой форме.

    Поднимается немедленно, конструирование прерывается.
    """

    pass


# =============================================================================
# STRING FORM
# =============================================================================

# Одно слагаемое: знак, число (с экспонентой), суффикс мнимой единицы.
# Число и суффикс по отдельности необязательны, но хотя бы одно из них
# должно присутствовать (проверяется в _parse_string).
_TERM_RE = re.compile(
    r"""
    \s*
    (?P<sign>[+-])?
    \s*
    (?P<number>(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)?
    \s*
    (?P<unit>[iIjJ])?
    \s*
    """,
    re.VERBOSE,
)


def _parse_string(text: str) -> ComplexPair:
    """
    Разбор строки как суммы знаковых слагаемых.

    Слагаемое с суффиксом i/j добавляется к мнимой части, без суффикса к
    действительной. Голый i, +i, -i означает ±1 по модулю. Слагаемые после
    первого обязаны начинаться со знака.

    Examples:
        >>> _parse_string("15+3i")
        ComplexPair(re=15.0, im=3.0)
        >>> _parse_string("3-i")
        ComplexPair(re=3.0, im=-1.0)
    """
    real = 0.0
    imag = 0.0
    position = 0
    terms = 0

    while position < len(text):
        match = _TERM_RE.match(text, position)
        number = match.group("number")
        unit = match.group("unit")
        sign = match.group("sign")

        if number is None and unit is None:
            raise InvalidArgument(f"Cannot parse complex number from string: {text!r}")

        if terms and sign is None:
            raise InvalidArgument(
                f"Missing sign between terms in complex string: {text!r}"
            )

        value = float(number) if number is not None else 1.0
        if sign == "-":
            value = -value

        if unit is not None:
            imag += value
        else:
            real += value

        position = match.end()
        terms += 1

    if terms == 0:
        raise InvalidArgument(f"Cannot parse complex number from string: {text!r}")

    return ComplexPair(real, imag)


# =============================================================================
# OBJECT FORM
# =============================================================================


def _parse_mapping(data: Mapping[str, Any]) -> ComplexPair:
    """
    Разбор объектной формы.

    Приоритет: re/im, затем abs/arg, затем r/phi.
    """
    payload = dict(data)
    try:
        validate_complex_object(payload)
    except ValidationError as e:
        raise InvalidArgument(f"Invalid complex object {payload!r}: {e.message}") from e

    if "re" in payload and "im" in payload:
        return ComplexPair(float(payload["re"]), float(payload["im"]))

    if "abs" in payload and "arg" in payload:
        radius, angle = float(payload["abs"]), float(payload["arg"])
    else:
        radius, angle = float(payload["r"]), float(payload["phi"])

    return ComplexPair(radius * ieee_cos(angle), radius * ieee_sin(angle))


# =============================================================================
# PUBLIC API
# =============================================================================


def _is_real(value: Any) -> bool:
    return isinstance(value, numbers.Real)


def _normalize(a: Any, b: Any) -> ComplexPair:
    if a is None and b is None:
        return ComplexPair(0.0, 0.0)

    if b is not None:
        if not (_is_real(a) and _is_real(b)):
            raise InvalidArgument(
                f"Two-argument form needs two real numbers, got {a!r}, {b!r}"
            )
        return ComplexPair(float(a), float(b))

    if isinstance(a, str):
        return _parse_string(a)

    if isinstance(a, Mapping):
        return _parse_mapping(a)

    if _is_real(a):
        return ComplexPair(float(a), 0.0)

    if isinstance(a, numbers.Complex):
        return ComplexPair(float(a.real), float(a.imag))

    if isinstance(a, Sequence) and len(a) == 2 and _is_real(a[0]) and _is_real(a[1]):
        return ComplexPair(float(a[0]), float(a[1]))

    raise InvalidArgument(f"Cannot build a complex number from {a!r}")


def parse_complex(a: Any = None, b: Optional[Any] = None) -> ComplexPair:
    """
    Нормализация входа конструктора в пару (re, im).

    Args:
        a: Первый аргумент конструктора (любая допустимая форма)
        b: Мнимая часть для двухаргументной формы

    Returns:
        Новая пара (re, im)

    Raises:
        InvalidArgument: Если вход не соответствует ни одной форме или
            даёт NaN или бесконечность

    Examples:
        >>> parse_complex("2-4i")
        ComplexPair(re=2.0, im=-4.0)
        >>> parse_complex({"re": 1, "im": 2})
        ComplexPair(re=1.0, im=2.0)
        >>> parse_complex(7)
        ComplexPair(re=7.0, im=0.0)
    """
    pair = _normalize(a, b)

    if has_nan(pair.re, pair.im):
        raise InvalidArgument(f"Complex number input yields NaN: {a!r}, {b!r}")

    if not (is_valid_float(pair.re) and is_valid_float(pair.im)):
        raise InvalidArgument(
            f"Complex number input yields an infinite value: {a!r}, {b!r}"
        )

    return pair


def is_parsable(a: Any = None, b: Optional[Any] = None) -> bool:
    """Проверка входа без exception."""
    try:
        parse_complex(a, b)
    except InvalidArgument:
        return False
    return True

