"""
Contract Module

Входные и выходные контракты комплексного числа:
- JSON Schema валидация объектной формы
- Нормализация входа конструктора (объект, строка, число, пара)
- Строковое представление
"""

from .formatting import format_complex, format_component
from .parsing import InvalidArgument, is_parsable, parse_complex
from .validators import (
    COMPLEX_OBJECT_SCHEMA,
    ComplexObjectValidator,
    ContractValidator,
    is_valid_complex_object,
    validate_complex_object,
)

__all__ = [
    # Schemas
    "COMPLEX_OBJECT_SCHEMA",
    # Classes
    "ContractValidator",
    "ComplexObjectValidator",
    # Exceptions
    "InvalidArgument",
    # Functions
    "format_complex",
    "format_component",
    "is_parsable",
    "is_valid_complex_object",
    "parse_complex",
    "validate_complex_object",
]
