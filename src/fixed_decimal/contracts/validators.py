"""
JSON Schema Contract Validators

Модуль для валидации сериализованных Decimal согласно JSON Schema контракту.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы:
- decimal.json: {"unscaled": int64, "scale": uint32}
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from fixed_decimal.domain.fixed_point import Decimal


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в contracts/schema/.
    """

    def __init__(self, schema_dir: Path = Path(__file__).parent / "schema"):
        self._schema_dir = schema_dir
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'decimal')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Валидируем саму схему (meta-validation)
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Валидация данных против схемы.

        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        """Проверка валидности данных без exception."""
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Итератор по всем ошибкам валидации."""
        return self.validator.iter_errors(data)


class DecimalContractValidator(ContractValidator):
    """Валидатор для decimal контракта."""

    def __init__(self):
        super().__init__("decimal")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_decimal_payload(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного Decimal.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    DecimalContractValidator().validate(data)


def decimal_to_payload(value: Decimal) -> Dict[str, Any]:
    """
    Сериализация Decimal в контрактный dict.

    Examples:
        >>> decimal_to_payload(Decimal(150, 2))
        {'unscaled': 150, 'scale': 2}
    """
    payload = value.model_dump()
    validate_decimal_payload(payload)
    return payload


def decimal_from_payload(data: Dict[str, Any]) -> Decimal:
    """
    Десериализация контрактного dict в Decimal.

    Сначала проверяется контракт, затем модель собирается напрямую
    через model_validate (без повторного разбора строк).

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    validate_decimal_payload(data)
    return Decimal.model_validate(data)
