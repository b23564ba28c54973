"""
Fraction Conversions — Конверсии между дробью и числовыми типами

Закрытый перечень поддерживаемых числовых видов (NumericKind) и три
семейства конверсий в обе стороны:

- checked: значение вне диапазона → UnsupportedConversion
- saturating: значение прижимается к границам диапазона
- truncating: то же, что saturating (дробная часть отбрасывается
  в обоих режимах)

Конверсия ИЗ числа всегда оборачивает его как (value, 1).
Конверсия В число читает value дроби.

Виды вне перечня (bool, str, datetime, ...) → UnsupportedConversion.
"""

import struct
import sys
from decimal import Decimal
from enum import Enum
from typing import Any, Final

from loguru import logger

from src.core.math.decimal_domain import (
    DECIMAL_MAX,
    DECIMAL_MIN,
    clamp_decimal,
    in_domain,
    to_decimal,
    truncate,
)
from src.core.math.fraction import Fraction, FractionError, UnsupportedConversion

# =============================================================================
# ENUMS
# =============================================================================


class NumericKind(str, Enum):
    """Числовой вид, поддерживаемый конверсиями."""

    SBYTE = "sbyte"
    BYTE = "byte"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    INT128 = "int128"
    NINT = "nint"
    INTEGER = "integer"  # Python int произвольной длины
    HALF = "half"
    SINGLE = "single"
    DOUBLE = "double"
    DECIMAL = "decimal"
    FRACTION = "fraction"


# =============================================================================
# ГРАНИЦЫ ВИДОВ
# =============================================================================

# (min, max) для целочисленных видов; None: без ограничений
INTEGER_BOUNDS: Final[dict[NumericKind, tuple[int, int] | None]] = {
    NumericKind.SBYTE: (-(2**7), 2**7 - 1),
    NumericKind.BYTE: (0, 2**8 - 1),
    NumericKind.INT16: (-(2**15), 2**15 - 1),
    NumericKind.UINT16: (0, 2**16 - 1),
    NumericKind.INT32: (-(2**31), 2**31 - 1),
    NumericKind.UINT32: (0, 2**32 - 1),
    NumericKind.INT64: (-(2**63), 2**63 - 1),
    NumericKind.UINT64: (0, 2**64 - 1),
    NumericKind.INT128: (-(2**127), 2**127 - 1),
    NumericKind.NINT: (-(2**63), 2**63 - 1),
    NumericKind.INTEGER: None,
}

# Максимальные конечные значения float видов (симметричный диапазон)
FLOAT_MAX: Final[dict[NumericKind, Decimal]] = {
    NumericKind.HALF: Decimal(65504),
    NumericKind.SINGLE: Decimal(struct.unpack("<f", b"\xff\xff\x7f\x7f")[0]),
    NumericKind.DOUBLE: Decimal(sys.float_info.max),
}

# struct-формат для округления до точности float вида
_FLOAT_FORMATS: Final[dict[NumericKind, str]] = {
    NumericKind.HALF: "<e",
    NumericKind.SINGLE: "<f",
}


# =============================================================================
# ОПРЕДЕЛЕНИЕ ВИДА
# =============================================================================


def kind_of(value: Any) -> NumericKind | None:
    """
    Вид Python значения; None для неподдерживаемых типов.

    Examples:
        >>> kind_of(3)
        <NumericKind.INTEGER: 'integer'>
        >>> kind_of(True) is None
        True
    """
    if isinstance(value, Fraction):
        return NumericKind.FRACTION
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return NumericKind.INTEGER
    if isinstance(value, float):
        return NumericKind.DOUBLE
    if isinstance(value, Decimal):
        return NumericKind.DECIMAL
    return None


def _cast_float(value: Decimal, kind: NumericKind) -> float:
    result = float(value)
    fmt = _FLOAT_FORMATS.get(kind)
    if fmt is None:
        return result
    return struct.unpack(fmt, struct.pack(fmt, result))[0]


def _require_kind(kind: Any) -> NumericKind:
    if not isinstance(kind, NumericKind):
        raise UnsupportedConversion(f"Unsupported numeric kind: {kind!r}")
    return kind


# =============================================================================
# КОНВЕРСИИ ИЗ ЧИСЛА В ДРОБЬ
# =============================================================================


def convert_from_checked(value: Any) -> Fraction:
    """
    Оборачивание числа в дробь (value, 1) с проверкой диапазона.

    Args:
        value: int, float, Decimal или Fraction

    Returns:
        Fraction (исходная дробь возвращается как есть)

    Raises:
        UnsupportedConversion: Неподдерживаемый тип, NaN/Inf или
            значение вне [DECIMAL_MIN, DECIMAL_MAX]
    """
    kind = kind_of(value)
    if kind is None:
        raise UnsupportedConversion(
            f"Can't convert \"{type(value).__name__}\" into a fraction"
        )
    if kind is NumericKind.FRACTION:
        return value

    decimal_value = to_decimal(value)
    if not in_domain(decimal_value):
        raise UnsupportedConversion(f"{value} is outside the decimal domain")
    return Fraction(decimal_value)


def convert_from_saturating(value: Any) -> Fraction:
    """
    Оборачивание числа в дробь (value, 1) с прижатием к границам области.

    Бесконечности прижимаются к DECIMAL_MIN/DECIMAL_MAX.

    Raises:
        UnsupportedConversion: Неподдерживаемый тип или NaN

    Examples:
        >>> convert_from_saturating(10**40) == Fraction.max_value()
        True
    """
    kind = kind_of(value)
    if kind is None:
        raise UnsupportedConversion(
            f"Can't convert \"{type(value).__name__}\" into a fraction"
        )
    if kind is NumericKind.FRACTION:
        return value

    decimal_value = to_decimal(value)
    if decimal_value.is_nan():
        raise UnsupportedConversion("Can't convert NaN into a fraction")

    clamped = clamp_decimal(decimal_value, DECIMAL_MIN, DECIMAL_MAX)
    if clamped != decimal_value:
        logger.debug("Saturated {} to {}", decimal_value, clamped)
    return Fraction(clamped)


def convert_from_truncating(value: Any) -> Fraction:
    """Синоним convert_from_saturating."""
    return convert_from_saturating(value)


# =============================================================================
# КОНВЕРСИИ ИЗ ДРОБИ В ЧИСЛО
# =============================================================================


def convert_to_checked(fraction: Fraction, kind: NumericKind) -> Any:
    """
    Конверсия value дроби в заданный вид с проверкой диапазона.

    Целочисленные виды получают value с отброшенной дробной частью.

    Args:
        fraction: Исходная дробь
        kind: Целевой вид

    Returns:
        int, float, Decimal или Fraction (для NumericKind.FRACTION)

    Raises:
        UnsupportedConversion: Неизвестный вид, NaN дробь или value вне
            диапазона вида
    """
    kind = _require_kind(kind)
    if kind is NumericKind.FRACTION:
        return fraction

    value = fraction.value
    if value.is_nan():
        raise UnsupportedConversion(f"Can't convert a NaN fraction into {kind.value}")

    if kind is NumericKind.DECIMAL:
        return value

    if kind in FLOAT_MAX:
        limit = FLOAT_MAX[kind]
        if not -limit <= value <= limit:
            raise UnsupportedConversion(f"{value} overflows {kind.value}")
        return _cast_float(value, kind)

    result = truncate(value)
    bounds = INTEGER_BOUNDS[kind]
    if bounds is not None and not bounds[0] <= result <= bounds[1]:
        raise UnsupportedConversion(f"{value} overflows {kind.value}")
    return result


def convert_to_saturating(fraction: Fraction, kind: NumericKind) -> Any:
    """
    Конверсия value дроби в заданный вид с прижатием к границам вида.

    Examples:
        >>> convert_to_saturating(Fraction(300), NumericKind.BYTE)
        255
        >>> convert_to_saturating(Fraction(-7, 2), NumericKind.INT32)
        -3

    Raises:
        UnsupportedConversion: Неизвестный вид или NaN дробь
    """
    kind = _require_kind(kind)
    if kind is NumericKind.FRACTION:
        return fraction

    value = fraction.value
    if value.is_nan():
        raise UnsupportedConversion(f"Can't convert a NaN fraction into {kind.value}")

    if kind is NumericKind.DECIMAL:
        return value

    if kind in FLOAT_MAX:
        limit = FLOAT_MAX[kind]
        clamped = clamp_decimal(value, -limit, limit)
        if clamped != value:
            logger.debug("Saturated {} to {} bounds", value, kind.value)
        return _cast_float(clamped, kind)

    bounds = INTEGER_BOUNDS[kind]
    if bounds is None:
        return truncate(value)

    min_value, max_value = bounds
    if value <= min_value:
        return min_value
    if value >= max_value:
        return max_value
    return truncate(value)


def convert_to_truncating(fraction: Fraction, kind: NumericKind) -> Any:
    """Синоним convert_to_saturating."""
    return convert_to_saturating(fraction, kind)


# =============================================================================
# TRY-ВАРИАНТЫ
# =============================================================================


def try_convert_from_checked(value: Any) -> tuple[Fraction, bool]:
    """convert_from_checked без исключений: (Fraction.zero(), False) при ошибке."""
    try:
        return convert_from_checked(value), True
    except FractionError:
        return Fraction.zero(), False


def try_convert_from_saturating(value: Any) -> tuple[Fraction, bool]:
    try:
        return convert_from_saturating(value), True
    except FractionError:
        return Fraction.zero(), False


def try_convert_from_truncating(value: Any) -> tuple[Fraction, bool]:
    return try_convert_from_saturating(value)


def try_convert_to_checked(fraction: Fraction, kind: NumericKind) -> tuple[Any, bool]:
    """convert_to_checked без исключений: (None, False) при ошибке."""
    try:
        return convert_to_checked(fraction, kind), True
    except FractionError:
        return None, False


def try_convert_to_saturating(
    fraction: Fraction, kind: NumericKind
) -> tuple[Any, bool]:
    try:
        return convert_to_saturating(fraction, kind), True
    except FractionError:
        return None, False


def try_convert_to_truncating(
    fraction: Fraction, kind: NumericKind
) -> tuple[Any, bool]:
    return try_convert_to_saturating(fraction, kind)
