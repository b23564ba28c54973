"""
Fraction Text Contract — JSON Schema контракт текстовой формы дроби

Формы, принимаемые контрактом:
    "N/D"  — числитель и знаменатель, десятичные числа без экспоненты
    "N"    — одиночное десятичное число

Схема лежит внутри пакета (schema/fraction_text.json) и устанавливается
вместе с ним. Контракт проверяет только форму текста: число вне
десятичной области проходит схему, но отвергается Fraction.parse.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Final, Iterator

import jsonschema
from jsonschema import Draft202012Validator

# =============================================================================
# РАСПОЛОЖЕНИЕ СХЕМ
# =============================================================================

SCHEMA_DIR: Final[Path] = Path(__file__).resolve().parent / "schema"

FRACTION_TEXT_SCHEMA: Final[str] = "fraction_text"


# =============================================================================
# ЗАГРУЗКА
# =============================================================================


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> dict[str, Any]:
    """
    Чтение схемы из SCHEMA_DIR с meta-валидацией по Draft 2020-12.

    Результат кэшируется по имени; ошибки не кэшируются.

    Args:
        schema_name: Имя схемы без расширения

    Raises:
        FileNotFoundError: Файла схемы нет в пакете
        ValueError: Файл не является валидной JSON Schema
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    if not schema_path.is_file():
        raise FileNotFoundError(f"Schema not found: {schema_path}")

    with schema_path.open("r", encoding="utf-8") as handle:
        schema = json.load(handle)

    try:
        Draft202012Validator.check_schema(schema)
    except jsonschema.SchemaError as exc:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {exc}") from exc

    return schema


# =============================================================================
# ВАЛИДАТОР
# =============================================================================


class FractionTextValidator:
    """
    Проверка текста дроби против fraction_text схемы.

    Examples:
        >>> FractionTextValidator().is_valid("3/4")
        True
        >>> FractionTextValidator().is_valid("1/2/3")
        False
    """

    def __init__(self) -> None:
        self.schema = load_schema(FRACTION_TEXT_SCHEMA)
        self._validator = Draft202012Validator(self.schema)

    @property
    def pattern(self) -> str:
        return self.schema["pattern"]

    def validate(self, text: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: Текст не соответствует схеме
        """
        self._validator.validate(text)

    def is_valid(self, text: Any) -> bool:
        return self._validator.is_valid(text)

    def iter_errors(self, text: Any) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(text)


@lru_cache(maxsize=1)
def get_fraction_text_validator() -> FractionTextValidator:
    """Общий экземпляр валидатора (создаётся при первом обращении)."""
    return FractionTextValidator()


def validate_fraction_text(text: Any) -> None:
    """
    Валидация текстовой формы дроби.

    Raises:
        jsonschema.ValidationError: Текст не соответствует схеме
    """
    get_fraction_text_validator().validate(text)
