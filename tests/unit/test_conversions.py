"""
Тесты для модуля Fraction Conversions

Проверяет:
1. Определение числового вида
2. Конверсии из числа: checked / saturating / truncating
3. Конверсии в число: границы целочисленных и float видов
4. Try-варианты без исключений
"""

from decimal import Decimal

import pytest

from src.core.math.conversions import (
    NumericKind,
    convert_from_checked,
    convert_from_saturating,
    convert_from_truncating,
    convert_to_checked,
    convert_to_saturating,
    convert_to_truncating,
    kind_of,
    try_convert_from_checked,
    try_convert_from_saturating,
    try_convert_to_checked,
    try_convert_to_saturating,
)
from src.core.math.fraction import Fraction, UnsupportedConversion

# =============================================================================
# ВИД ЗНАЧЕНИЯ
# =============================================================================


class TestKindOf:
    """Тесты для kind_of"""

    def test_supported(self) -> None:
        assert kind_of(3) is NumericKind.INTEGER
        assert kind_of(0.5) is NumericKind.DOUBLE
        assert kind_of(Decimal("1.5")) is NumericKind.DECIMAL
        assert kind_of(Fraction(1, 2)) is NumericKind.FRACTION

    def test_unsupported(self) -> None:
        assert kind_of(True) is None
        assert kind_of("1") is None
        assert kind_of(None) is None


# =============================================================================
# ИЗ ЧИСЛА В ДРОБЬ
# =============================================================================


class TestConvertFromChecked:
    """Тесты для convert_from_checked"""

    def test_wraps_as_whole(self) -> None:
        f = convert_from_checked(5)
        assert (f.upper, f.lower) == (5, 1)

    def test_float_via_text(self) -> None:
        f = convert_from_checked(0.1)
        assert f.upper == Decimal("0.1")
        assert f.lower == 1

    def test_fraction_passthrough(self) -> None:
        f = Fraction(1, 2)
        assert convert_from_checked(f) is f

    @pytest.mark.parametrize(
        "value", ["1", True, 10**40, float("inf"), float("nan"), Decimal("NaN")]
    )
    def test_rejected(self, value: object) -> None:
        with pytest.raises(UnsupportedConversion):
            convert_from_checked(value)

    def test_error_is_type_error(self) -> None:
        """UnsupportedConversion совместим с TypeError"""
        with pytest.raises(TypeError, match="str"):
            convert_from_checked("1")


class TestConvertFromSaturating:
    """Тесты для convert_from_saturating / convert_from_truncating"""

    def test_in_range(self) -> None:
        assert convert_from_saturating(7) == Fraction(7)

    def test_clamps_overflow(self) -> None:
        assert convert_from_saturating(10**40) == Fraction.max_value()
        assert convert_from_saturating(-(10**40)) == Fraction.min_value()

    def test_clamps_infinity(self) -> None:
        assert convert_from_saturating(float("inf")) == Fraction.max_value()
        assert convert_from_saturating(float("-inf")) == Fraction.min_value()

    def test_nan_rejected(self) -> None:
        with pytest.raises(UnsupportedConversion, match="NaN"):
            convert_from_saturating(float("nan"))

    def test_truncating_is_alias(self) -> None:
        assert convert_from_truncating(10**40) == Fraction.max_value()
        assert convert_from_truncating(3) == Fraction(3)


# =============================================================================
# ИЗ ДРОБИ В ЧИСЛО
# =============================================================================


class TestConvertToChecked:
    """Тесты для convert_to_checked"""

    def test_integer_truncates(self) -> None:
        assert convert_to_checked(Fraction(7, 2), NumericKind.INT32) == 3
        assert convert_to_checked(Fraction(-7, 2), NumericKind.INT32) == -3

    def test_integer_overflow(self) -> None:
        with pytest.raises(UnsupportedConversion, match="byte"):
            convert_to_checked(Fraction(300), NumericKind.BYTE)

    def test_unsigned_negative(self) -> None:
        with pytest.raises(UnsupportedConversion):
            convert_to_checked(Fraction(-1), NumericKind.UINT32)

    def test_unbounded_integer(self) -> None:
        assert convert_to_checked(Fraction(10**25), NumericKind.INTEGER) == 10**25

    def test_double(self) -> None:
        result = convert_to_checked(Fraction(1, 4), NumericKind.DOUBLE)
        assert isinstance(result, float)
        assert result == 0.25

    def test_single_precision(self) -> None:
        result = convert_to_checked(Fraction(1, 3), NumericKind.SINGLE)
        assert result == pytest.approx(1 / 3, rel=1e-6)
        assert result != 1 / 3

    def test_half_overflow(self) -> None:
        with pytest.raises(UnsupportedConversion, match="half"):
            convert_to_checked(Fraction(100000), NumericKind.HALF)

    def test_decimal(self) -> None:
        assert convert_to_checked(Fraction(1, 4), NumericKind.DECIMAL) == Decimal("0.25")

    def test_fraction_kind(self) -> None:
        f = Fraction(1, 2)
        assert convert_to_checked(f, NumericKind.FRACTION) is f

    def test_nan_fraction(self) -> None:
        with pytest.raises(UnsupportedConversion, match="NaN"):
            convert_to_checked(Fraction.nan(), NumericKind.INT32)

    def test_unknown_kind(self) -> None:
        with pytest.raises(UnsupportedConversion):
            convert_to_checked(Fraction(1), "int32")


class TestConvertToSaturating:
    """Тесты для convert_to_saturating / convert_to_truncating"""

    def test_byte(self) -> None:
        assert convert_to_saturating(Fraction(300), NumericKind.BYTE) == 255
        assert convert_to_saturating(Fraction(-5), NumericKind.BYTE) == 0
        assert convert_to_saturating(Fraction(7, 2), NumericKind.BYTE) == 3

    def test_int64(self) -> None:
        assert convert_to_saturating(Fraction(10**20), NumericKind.INT64) == 2**63 - 1
        assert convert_to_saturating(Fraction(-(10**20)), NumericKind.INT64) == -(2**63)

    def test_half(self) -> None:
        assert convert_to_saturating(Fraction(100000), NumericKind.HALF) == 65504.0
        assert convert_to_saturating(Fraction(-100000), NumericKind.HALF) == -65504.0

    def test_unbounded_integer(self) -> None:
        assert convert_to_saturating(Fraction(10**25), NumericKind.INTEGER) == 10**25

    def test_nan_fraction(self) -> None:
        with pytest.raises(UnsupportedConversion):
            convert_to_saturating(Fraction.nan(), NumericKind.DOUBLE)

    def test_truncating_is_alias(self) -> None:
        assert convert_to_truncating(Fraction(300), NumericKind.SBYTE) == 127
        assert convert_to_truncating(Fraction(-7, 2), NumericKind.INT16) == -3


# =============================================================================
# TRY-ВАРИАНТЫ
# =============================================================================


class TestTryConversions:
    """Тесты try_* вариантов"""

    def test_from_checked(self) -> None:
        f, ok = try_convert_from_checked(3)
        assert ok is True
        assert f == Fraction(3)

        f, ok = try_convert_from_checked("3")
        assert ok is False
        assert f == Fraction.zero()

    def test_from_saturating(self) -> None:
        f, ok = try_convert_from_saturating(float("nan"))
        assert ok is False
        assert f == Fraction.zero()

    def test_to_checked(self) -> None:
        result, ok = try_convert_to_checked(Fraction(300), NumericKind.BYTE)
        assert (result, ok) == (None, False)

        result, ok = try_convert_to_checked(Fraction(3), NumericKind.BYTE)
        assert (result, ok) == (3, True)

    def test_to_saturating(self) -> None:
        result, ok = try_convert_to_saturating(Fraction.nan(), NumericKind.INT32)
        assert (result, ok) == (None, False)

        result, ok = try_convert_to_saturating(Fraction(300), NumericKind.BYTE)
        assert (result, ok) == (255, True)
