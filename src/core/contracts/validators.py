"""
JSON Schema Contract Validators

Модуль для валидации объектной формы комплексного числа согласно
формальному JSON Schema контракту. Использует библиотеку jsonschema.

Допустимые формы объекта:
- {"re": <number>, "im": <number>}      (прямоугольная)
- {"abs": <number>, "arg": <number>}    (полярная)
- {"r": <number>, "phi": <number>}      (полярная, альтернативные имена)

Дополнительные ключи допускаются и игнорируются.
"""

from typing import Any, Dict, List, Mapping

import jsonschema
from jsonschema import Draft202012Validator

# =============================================================================
# SCHEMAS
# =============================================================================

_NUMBER: Dict[str, Any] = {"type": "number"}

COMPLEX_OBJECT_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "$id": "complex_object.json",
    "title": "Complex number in object form",
    "type": "object",
    "properties": {
        "re": _NUMBER,
        "im": _NUMBER,
        "abs": _NUMBER,
        "arg": _NUMBER,
        "r": _NUMBER,
        "phi": _NUMBER,
    },
    "anyOf": [
        {"required": ["re", "im"]},
        {"required": ["abs", "arg"]},
        {"required": ["r", "phi"]},
    ],
}


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Валидатор одной JSON Schema (draft 2020-12).

    Схема проверяется один раз при создании, далее валидатор переиспользуется.
    """

    def __init__(self, schema_name: str, schema: Dict[str, Any]):
        """
        Компиляция схемы.

        Args:
            schema_name: Имя схемы (для сообщений об ошибках)
            schema: JSON Schema

        Raises:
            ValueError: Если схема сама по себе невалидна
        """
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema {schema_name}: {e}") from e

        self.schema_name = schema_name
        self.schema = schema
        self.validator = Draft202012Validator(schema)

    def validate(self, data: Mapping[str, Any]) -> None:
        """
        Строгая проверка объекта.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Mapping[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def get_errors(self, data: Mapping[str, Any]) -> List[str]:
        """
        Получение списка ошибок валидации.

        Returns:
            Список сообщений об ошибках (пустой если данные валидны)
        """
        return [
            f"{'/'.join(str(p) for p in error.absolute_path) or '<root>'}: {error.message}"
            for error in self.validator.iter_errors(data)
        ]


class ComplexObjectValidator(ContractValidator):
    """Валидатор объектной формы комплексного числа."""

    def __init__(self):
        super().__init__("complex_object", COMPLEX_OBJECT_SCHEMA)


# Глобальный экземпляр валидатора
_COMPLEX_OBJECT_VALIDATOR = ComplexObjectValidator()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_complex_object(data: Mapping[str, Any]) -> None:
    """
    Валидация объектной формы комплексного числа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    _COMPLEX_OBJECT_VALIDATOR.validate(data)


def is_valid_complex_object(data: Mapping[str, Any]) -> bool:
    """Проверка объектной формы без exception."""
    return _COMPLEX_OBJECT_VALIDATOR.is_valid(data)
