"""
BigInteger State Contract

Валидация сериализованного BigInteger (dict из BigInteger.to_json) в два
прохода:
1. JSON Schema big_integer_state.json (jsonschema, Draft 2020-12): типы,
   диапазон limbs, отсутствие -0, формат decimal
2. Межполевые проверки канонической формы, которые JSON Schema выразить
   не может: старший limb != 0, len(limbs) <= capacity, decimal совпадает
   с format_decimal(sign, limbs)

Оба прохода сообщают об ошибках как jsonschema.ValidationError, так что
вызывающий обрабатывает один тип исключения.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

from limbint.core.math.decimal_codec import format_decimal

SCHEMA_DIR = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """Загрузчик JSON Schema файлов с кэшем и meta-validation."""

    def __init__(self, schema_dir: Path = SCHEMA_DIR):
        if not schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {schema_dir}")
        self._schema_dir = schema_dir
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
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

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# =============================================================================
# CONTRACT
# =============================================================================


class BigIntegerStateContract:
    """
    Контракт сериализованного BigInteger.

    Args:
        loader: Загрузчик схем (по умолчанию схемы пакета)
    """

    schema_name = "big_integer_state"

    def __init__(self, loader: SchemaLoader | None = None):
        self.schema = (loader or SchemaLoader()).load_schema(self.schema_name)
        self.validator = Draft202012Validator(self.schema)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """
        Все нарушения контракта.

        Межполевые проверки выполняются только для данных, прошедших
        схему: до этого типы полей не гарантированы.
        """
        schema_errors = list(self.validator.iter_errors(data))
        if schema_errors:
            yield from schema_errors
            return
        yield from _canonical_errors(data)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: наиболее релевантное нарушение контракта
        """
        errors = list(self.iter_errors(data))
        if errors:
            raise best_match(errors)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return next(self.iter_errors(data), None) is None


def _canonical_errors(data: Dict[str, Any]) -> Iterator[ValidationError]:
    limbs = data["limbs"]
    capacity = data["capacity"]

    if len(limbs) > 1 and limbs[-1] == 0:
        yield ValidationError(
            "limbs must not carry leading (most-significant) zeros",
            path=["limbs"],
            instance=limbs,
        )
    if len(limbs) > capacity:
        yield ValidationError(
            f"{len(limbs)} limbs exceed capacity {capacity}",
            path=["limbs"],
            instance=limbs,
        )
    if "decimal" in data:
        expected = format_decimal(data["sign"], limbs)
        if data["decimal"] != expected:
            yield ValidationError(
                f"decimal {data['decimal']!r} does not match limbs ({expected!r})",
                path=["decimal"],
                instance=data["decimal"],
            )


@lru_cache(maxsize=1)
def _default_contract() -> BigIntegerStateContract:
    return BigIntegerStateContract()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_integer_state(data: Dict[str, Any]) -> None:
    """
    Валидация сериализованного BigIntegerState.

    Raises:
        ValidationError: Если данные нарушают схему или каноническую форму
    """
    _default_contract().validate(data)
