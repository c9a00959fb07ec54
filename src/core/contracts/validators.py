"""
BigUInt Contract — валидация сериализованного BigUInt

Контракт проверяется в два этапа:
1. Структура по JSON Schema (schema/biguint.json, draft 2020-12): набор
   полей, radix, диапазон каждого limb, форма десятичной записи
2. Семантика через BigUIntSnapshot: канонический вид limbs и совпадение
   decimal с limbs (то, что JSON Schema выразить не может)

Оба этапа сообщают о нарушениях одним типом jsonschema.ValidationError.

Схема лежит в ресурсах пакета и читается при первом обращении, а не при
импорте модуля.
"""

import json
from functools import lru_cache
from importlib.resources import files
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from pydantic import ValidationError as SnapshotValidationError

from src.core.domain.snapshot import BigUIntSnapshot


SCHEMA_DIR = "schema"
SCHEMA_FILE = "biguint.json"


# =============================================================================
# ЗАГРУЗКА СХЕМЫ
# =============================================================================


@lru_cache(maxsize=None)
def load_biguint_schema() -> Dict[str, Any]:
    """
    Чтение и meta-validation схемы biguint из ресурсов пакета.

    Результат кешируется: файл читается один раз за процесс.

    Raises:
        FileNotFoundError: Если ресурс схемы не установлен вместе с пакетом
        ValueError: Если файл не является валидной JSON Schema
    """
    resource = files(__package__).joinpath(SCHEMA_DIR).joinpath(SCHEMA_FILE)
    schema = json.loads(resource.read_text(encoding="utf-8"))

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {SCHEMA_FILE}: {e.message}") from e

    return schema


def _snapshot_error(error: Dict[str, Any], data: Any) -> ValidationError:
    # Ошибка pydantic в терминах jsonschema: путь из loc, сообщение из msg
    return ValidationError(error["msg"], path=error["loc"], instance=data)


# =============================================================================
# VALIDATOR
# =============================================================================


class BigUIntValidator:
    """
    Валидатор сериализованного BigUInt (dict вида snapshot.model_dump()).

    Examples:
        >>> BigUIntValidator().validate({"radix": 10**9, "limbs": [7, 1], "decimal": "1000000007"})
        BigUIntSnapshot(radix=1000000000, limbs=[7, 1], decimal='1000000007')
    """

    def __init__(self) -> None:
        self.schema = load_biguint_schema()
        self._schema_validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> BigUIntSnapshot:
        """
        Полная проверка контракта.

        Args:
            data: Сериализованное значение

        Returns:
            Проверенный BigUIntSnapshot

        Raises:
            ValidationError: Первое найденное нарушение структуры или семантики
        """
        self._schema_validator.validate(data)
        try:
            return BigUIntSnapshot.model_validate(data)
        except SnapshotValidationError as e:
            raise _snapshot_error(e.errors()[0], data) from e

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Все нарушения контракта.

        Семантика проверяется только для структурно корректных данных.
        """
        schema_errors = list(self._schema_validator.iter_errors(data))
        if schema_errors:
            yield from schema_errors
            return

        try:
            BigUIntSnapshot.model_validate(data)
        except SnapshotValidationError as e:
            for error in e.errors():
                yield _snapshot_error(error, data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return next(self.iter_errors(data), None) is None


def validate_biguint_payload(data: Dict[str, Any]) -> BigUIntSnapshot:
    """
    Проверка сериализованного BigUInt и построение снапшота.

    Raises:
        ValidationError: Если данные нарушают контракт
    """
    return BigUIntValidator().validate(data)
