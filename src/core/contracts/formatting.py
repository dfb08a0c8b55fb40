"""
Complex Rendering

Строковое представление комплексного числа, обратное строковой форме
parse_complex:

    (3, 4)   → "3+4i"
    (3, -1)  → "3-i"
    (0, 1)   → "i"
    (-2.5, 0)→ "-2.5"
    (0, 0)   → "0"
    NaN      → "NaN"
"""

from src.core.math.numerical_safeguards import has_nan

# Целые значения до этого порога печатаются без ".0"; выше repr(float)
# использует экспоненциальную запись, которую parse_complex тоже принимает
_INTEGER_RENDER_LIMIT = 1e16


def format_component(value: float) -> str:
    """
    Одна компонента без лишнего ".0".

    Examples:
        >>> format_component(3.0)
        '3'
        >>> format_component(-0.25)
        '-0.25'
        >>> format_component(1e20)
        '1e+20'
    """
    if value.is_integer() and abs(value) < _INTEGER_RENDER_LIMIT:
        return str(int(value))
    return repr(value)


def format_complex(re: float, im: float) -> str:
    """
    Строковое представление пары (re, im).

    Нулевые компоненты опускаются; мнимая единица печатается как "i" / "-i".
    """
    if has_nan(re, im):
        return "NaN"

    parts = []

    if re != 0.0:
        parts.append(format_component(re))

    if im != 0.0:
        if im > 0.0 and re != 0.0:
            parts.append("+")

        if im == -1.0:
            parts.append("-")
        elif im != 1.0:
            parts.append(format_component(im))

        parts.append("i")

    return "".join(parts) or "0"
