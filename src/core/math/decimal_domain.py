"""
Decimal Domain — Параметры и примитивы десятичной области

Модуль фиксирует числовую область, над которой строятся дроби:
знаковое десятичное число фиксированной точности (128-bit decimal),
28 значащих цифр, банковское округление, диапазон ±(2^96 - 1).

Все операции над числителем и знаменателем выполняются через
DECIMAL_CONTEXT, а не через глобальный контекст decimal.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Область не содержит бесконечностей
2. NaN в области не хранится (NaN дроби кодируется знаменателем 0)
3. Текстовое представление всегда позиционное (без экспоненты)
"""

from decimal import ROUND_DOWN, ROUND_HALF_EVEN, Context, Decimal
from typing import Final

# =============================================================================
# ПАРАМЕТРЫ ОБЛАСТИ
# =============================================================================

# Количество значащих цифр для арифметики
DECIMAL_PRECISION: Final[int] = 28

# Режим округления (банковский, half-even)
DECIMAL_ROUNDING: Final[str] = ROUND_HALF_EVEN

# Границы представимого диапазона: ±(2^96 - 1)
DECIMAL_MAX: Final[Decimal] = Decimal("79228162514264337593543950335")
DECIMAL_MIN: Final[Decimal] = -DECIMAL_MAX

# Контекст для всех вычислений над дробями
DECIMAL_CONTEXT: Final[Context] = Context(
    prec=DECIMAL_PRECISION,
    rounding=DECIMAL_ROUNDING,
)

# Основание системы счисления дробей
FRACTION_RADIX: Final[int] = 10

# Разделитель числителя и знаменателя в текстовой форме "N/D"
FRACTION_SEPARATOR: Final[str] = "/"

# Текстовое представление NaN дроби
NAN_TEXT: Final[str] = "NaN"


# =============================================================================
# ПРЕОБРАЗОВАНИЕ ВХОДОВ
# =============================================================================


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """
    Приведение числа к Decimal без артефактов двоичного float.

    float проходит через repr(), поэтому 0.1 становится Decimal("0.1"),
    а не точным двоичным разложением.

    Args:
        value: int, float, str или Decimal

    Returns:
        Decimal значение

    Raises:
        TypeError: Если тип не поддерживается (в том числе bool)

    Examples:
        >>> to_decimal(3)
        Decimal('3')
        >>> to_decimal(0.1)
        Decimal('0.1')
    """
    if isinstance(value, bool):
        raise TypeError("bool has no numeric meaning in the decimal domain")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(repr(value))
    if isinstance(value, str):
        return Decimal(value)
    raise TypeError(f"Can't convert {type(value).__name__} to Decimal")


def is_integral(value: Decimal) -> bool:
    """
    Проверка, что значение целое (нет дробного остатка).

    NaN и бесконечности целыми не считаются.
    """
    if not value.is_finite():
        return False
    return value == value.to_integral_value()


def in_domain(value: Decimal) -> bool:
    """Проверка, что конечное значение лежит в [DECIMAL_MIN, DECIMAL_MAX]."""
    return value.is_finite() and DECIMAL_MIN <= value <= DECIMAL_MAX


def clamp_decimal(
    value: Decimal,
    min_value: Decimal = DECIMAL_MIN,
    max_value: Decimal = DECIMAL_MAX,
) -> Decimal:
    """
    Ограничение значения диапазоном [min_value, max_value].

    Бесконечности прижимаются к соответствующей границе.

    Raises:
        ValueError: Если value является NaN

    Examples:
        >>> clamp_decimal(Decimal("1e40"))
        Decimal('79228162514264337593543950335')
        >>> clamp_decimal(Decimal("-Infinity"))
        Decimal('-79228162514264337593543950335')
    """
    if value.is_nan():
        raise ValueError("Can't clamp NaN")

    if value <= min_value:
        return min_value
    if value >= max_value:
        return max_value
    return value


def round_half_even(value: Decimal) -> int:
    """
    Округление до ближайшего целого (half-even).

    Examples:
        >>> round_half_even(Decimal("2.5"))
        2
        >>> round_half_even(Decimal("3.5"))
        4
    """
    return int(value.to_integral_value(rounding=ROUND_HALF_EVEN))


def truncate(value: Decimal) -> int:
    """Отбрасывание дробной части (к нулю)."""
    return int(value.to_integral_value(rounding=ROUND_DOWN))


# =============================================================================
# ТЕКСТОВОЕ ПРЕДСТАВЛЕНИЕ
# =============================================================================


def format_decimal(value: Decimal) -> str:
    """
    Позиционная запись Decimal без экспоненты.

    Examples:
        >>> format_decimal(Decimal("1E+3"))
        '1000'
        >>> format_decimal(Decimal("0.50"))
        '0.50'
        >>> format_decimal(Decimal("NaN"))
        'NaN'
    """
    if value.is_nan():
        return NAN_TEXT
    if value.is_zero():
        # -0 печатается как 0
        value = value.copy_abs()
    return format(value, "f")


def safe_divide(numerator: Decimal, denominator: Decimal) -> Decimal:
    """
    Деление в контексте области.

    В отличие от обычного деления не бросает исключение при нулевом
    знаменателе: возвращает Decimal("NaN").

    Examples:
        >>> safe_divide(Decimal(1), Decimal(4))
        Decimal('0.25')
        >>> safe_divide(Decimal(1), Decimal(0))
        Decimal('NaN')
    """
    if denominator == 0:
        return Decimal("NaN")

    return DECIMAL_CONTEXT.divide(numerator, denominator)
