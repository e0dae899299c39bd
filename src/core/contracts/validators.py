"""
JSON Schema Contract Validators

Модуль для валидации JSON-документов value-типов согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema (Draft 2020-12).

Схемы (src/core/contracts/schema/):
- complex.json         {"real": number, "imag": number}
- complex_vector.json  {"components": [complex, ...]}
- complex_matrix.json  {"rows": int, "cols": int, "data": [complex, ...]}

Ограничение len(data) == rows * cols схемой не выражается; его проверяет
ComplexMatrixModel (src/core/domain/values.py).

Опциональный слой границы, как и values.py: ядро value-типов от него
не зависит и не импортирует jsonschema.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

logger = logging.getLogger(__name__)


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы лежат в каталоге schema/ рядом с этим модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'complex_matrix')

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

        logger.debug("loaded schema %s from %s", schema_name, schema_path)
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

    def __init__(self, schema_name: str):
        """
        Args:
            schema_name: Имя схемы для валидации
        """
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


class ComplexValidator(ContractValidator):
    """Валидатор для complex контракта."""

    def __init__(self):
        super().__init__("complex")


class ComplexVectorValidator(ContractValidator):
    """Валидатор для complex_vector контракта."""

    def __init__(self):
        super().__init__("complex_vector")


class ComplexMatrixValidator(ContractValidator):
    """Валидатор для complex_matrix контракта."""

    def __init__(self):
        super().__init__("complex_matrix")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_complex(data: Dict[str, Any]) -> None:
    """
    Валидация complex документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ComplexValidator().validate(data)


def validate_complex_vector(data: Dict[str, Any]) -> None:
    """
    Валидация complex_vector документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ComplexVectorValidator().validate(data)


def validate_complex_matrix(data: Dict[str, Any]) -> None:
    """
    Валидация complex_matrix документа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    ComplexMatrixValidator().validate(data)
