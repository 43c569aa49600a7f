"""
JSON Schema Contract Validators

Модуль для валидации JSON описаний пространств согласно формальным
JSON Schema контрактам. Использует библиотеку jsonschema для проверки
соответствия данных схемам до разбора в Pydantic модели.

Схемы:
- space_descriptor.json (описание составного пространства)
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

import jsonschema
from jsonschema import Draft202012Validator


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом (src/core/contracts/schema/).
    """

    def __init__(self):
        self._schema_dir = Path(__file__).parent / "schema"
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
            schema_name: Имя схемы без расширения (например, 'space_descriptor')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
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
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика (создаётся при первом обращении)
_SCHEMA_LOADER: Optional[SchemaLoader] = None


def get_schema_loader() -> SchemaLoader:
    """Общий загрузчик схем; импорт модуля не обращается к файловой системе."""
    global _SCHEMA_LOADER
    if _SCHEMA_LOADER is None:
        _SCHEMA_LOADER = SchemaLoader()
    return _SCHEMA_LOADER


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
        self.schema = get_schema_loader().load_schema(schema_name)
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

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        """
        Итератор по всем ошибкам валидации.

        Yields:
            ValidationError объекты для каждой найденной ошибки
        """
        return self.validator.iter_errors(data)

    def describe_errors(self, data: Dict[str, Any]) -> List[str]:
        """
        Все нарушения контракта в виде строк "путь: сообщение".

        Путь — JSON pointer до вложенного описания (/of/first/kind),
        корень обозначается "/". Порядок — по пути.
        """
        errors = sorted(self.iter_errors(data), key=lambda e: [str(p) for p in e.absolute_path])
        return [
            "/" + "/".join(str(p) for p in error.absolute_path) + f": {error.message}"
            for error in errors
        ]


class SpaceDescriptorValidator(ContractValidator):
    """Валидатор для space_descriptor контракта."""

    def __init__(self):
        super().__init__("space_descriptor")
