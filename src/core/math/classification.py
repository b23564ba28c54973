"""
Fraction Classification — Предикаты классификации дробей

Стандартный набор числовых предикатов поверх value дроби с двумя
правилами, специфичными для дробей:
- is_nan определяется знаменателем (lower == 0) и проверяется первым,
  так как value у NaN дроби не определено
- is_normal требует целых upper и lower, ненулевого upper и lower > 0

В десятичной области нет бесконечностей: все infinity-предикаты ложны.

Все функции чистые: аргумент не изменяется.
"""

from decimal import Decimal

from src.core.math.decimal_domain import is_integral
from src.core.math.fraction import Fraction

# =============================================================================
# NaN / ZERO / NORMAL
# =============================================================================


def is_nan(value: Fraction) -> bool:
    """NaN дробь: знаменатель равен нулю."""
    return value.lower == 0


def is_zero(value: Fraction) -> bool:
    """Ноль: не NaN и числитель равен нулю."""
    return not is_nan(value) and value.upper == 0


def is_normal(value: Fraction) -> bool:
    """
    Нормальная дробь: upper != 0, lower > 0, обе части целые.

    Examples:
        >>> is_normal(Fraction(1, 2))
        True
        >>> is_normal(Fraction(1, -2))
        False
        >>> is_normal(Fraction(Decimal("1.5"), 2))
        False
    """
    return (
        value.upper != 0
        and value.lower > 0
        and is_integral(value.upper)
        and is_integral(value.lower)
    )


def is_subnormal(value: Fraction) -> bool:
    return not is_normal(value)


def is_real_number(value: Fraction) -> bool:
    return not is_nan(value)


def is_canonical(value: Fraction) -> bool:
    return True


def is_complex_number(value: Fraction) -> bool:
    return False


def is_imaginary_number(value: Fraction) -> bool:
    return False


# =============================================================================
# ЗНАК
# =============================================================================


def is_negative(value: Fraction) -> bool:
    """
    Отрицательная дробь с учётом знака знаменателя.

    Знак вычисляется так, как его расставил бы process_sign(), но без
    изменения самой дроби.

    Examples:
        >>> is_negative(Fraction(1, -2))
        True
        >>> is_negative(Fraction(-1, -2))
        False
    """
    upper = value.upper
    lower = value.lower

    if upper < 0 and lower < 0:
        return False
    if lower < 0:
        return -upper < 0
    return upper < 0


def is_positive(value: Fraction) -> bool:
    """Не отрицательная (ноль считается положительным)."""
    return not is_negative(value)


# =============================================================================
# ЦЕЛОЧИСЛЕННОСТЬ (по value)
# =============================================================================


def _integral_value(value: Fraction) -> Decimal | None:
    if is_nan(value):
        return None
    decimal_value = value.value
    if not is_integral(decimal_value):
        return None
    return decimal_value


def is_integer(value: Fraction) -> bool:
    """
    Значение дроби целое.

    Examples:
        >>> is_integer(Fraction(4, 2))
        True
        >>> is_integer(Fraction(1, 2))
        False
    """
    return _integral_value(value) is not None


def is_even_integer(value: Fraction) -> bool:
    integral = _integral_value(value)
    return integral is not None and integral % 2 == 0


def is_odd_integer(value: Fraction) -> bool:
    integral = _integral_value(value)
    return integral is not None and integral % 2 != 0


# =============================================================================
# БЕСКОНЕЧНОСТИ
# =============================================================================


def is_finite(value: Fraction) -> bool:
    return True


def is_infinity(value: Fraction) -> bool:
    return False


def is_positive_infinity(value: Fraction) -> bool:
    return False


def is_negative_infinity(value: Fraction) -> bool:
    return False


# =============================================================================
# MAGNITUDE
# =============================================================================


def abs_fraction(value: Fraction) -> Fraction:
    """Новая дробь |upper|/|lower|."""
    return abs(value)


def max_magnitude(x: Fraction, y: Fraction) -> Fraction:
    """
    Большая из двух дробей по value (x при равенстве).

    NaN операнд возвращается как есть: сравнение с NaN не определено.
    """
    if is_nan(x):
        return x
    if is_nan(y):
        return y
    return x if x.value >= y.value else y


def min_magnitude(x: Fraction, y: Fraction) -> Fraction:
    """
    Меньшая из двух дробей по value (y при равенстве).

    NaN операнд возвращается как есть, как и в max_magnitude.
    """
    if is_nan(x):
        return x
    if is_nan(y):
        return y
    return y if x.value >= y.value else x


def max_magnitude_number(x: Fraction, y: Fraction) -> Fraction:
    """max_magnitude, но NaN операнд уступает другому."""
    if is_nan(x):
        return y
    if is_nan(y):
        return x
    return max_magnitude(x, y)


def min_magnitude_number(x: Fraction, y: Fraction) -> Fraction:
    """min_magnitude, но NaN операнд уступает другому."""
    if is_nan(x):
        return y
    if is_nan(y):
        return x
    return min_magnitude(x, y)
