"""
Contract Validation Module

Модуль для валидации JSON контрактов текстовой формы дробей.
"""

from .validators import (
    FRACTION_TEXT_SCHEMA,
    SCHEMA_DIR,
    FractionTextValidator,
    get_fraction_text_validator,
    load_schema,
    validate_fraction_text,
)

__all__ = [
    # Constants
    "FRACTION_TEXT_SCHEMA",
    "SCHEMA_DIR",
    # Classes
    "FractionTextValidator",
    # Functions
    "get_fraction_text_validator",
    "load_schema",
    "validate_fraction_text",
]
