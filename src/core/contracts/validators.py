"""
JSON Schema Contract Validators

Модуль для валидации JSON данных согласно формальным JSON Schema контрактам.
Использует библиотеку jsonschema для проверки соответствия данных схемам.

Схемы (src/core/contracts/schema/):
- pipeline_report.json
"""

import json
from collections.abc import Iterator
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'pipeline_report')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
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


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
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

    def iter_errors(self, data: Dict[str, Any]):
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)


class PipelineReportValidator(ContractValidator):
    """
    Валидатор для pipeline_report контракта.

    Помимо JSON Schema проверяет согласованность стадий, которую схема
    выразить не может:
    - len(squared_evens) == len(evens)
    - evens является упорядоченной подпоследовательностью original

    Проверки стадий не зависят от политики переполнения.
    """

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("pipeline_report", loader)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Нарушение схемы или согласованности стадий
        """
        self.validator.validate(data)
        for error in self.iter_stage_errors(data):
            raise error

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return next(self.iter_errors(data), None) is None

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        yield from self.validator.iter_errors(data)
        yield from self.iter_stage_errors(data)

    @staticmethod
    def iter_stage_errors(data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Ошибки согласованности стадий filter → transform.

        Структурно некорректные данные пропускаются: их уже отклоняет схема.
        """
        if not isinstance(data, dict):
            return
        original = data.get("original")
        evens = data.get("evens")
        squared_evens = data.get("squared_evens")
        if not all(isinstance(v, list) for v in (original, evens, squared_evens)):
            return

        if len(squared_evens) != len(evens):
            yield ValidationError(
                f"squared_evens length {len(squared_evens)} != evens length {len(evens)}",
                path=["squared_evens"],
            )

        remaining = iter(original)
        if not all(any(n == m for m in remaining) for n in evens):
            yield ValidationError(
                "evens is not an ordered subsequence of original",
                path=["evens"],
            )


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_pipeline_report(data: Dict[str, Any]) -> None:
    """
    Валидация pipeline_report данных.

    Args:
        data: Данные для валидации

    Raises:
        ValidationError: Если данные не соответствуют схеме или стадии несогласованы
    """
    PipelineReportValidator().validate(data)
