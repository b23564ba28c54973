"""
Тесты для модуля Fraction Classification

Проверяет:
1. NaN / zero / normal предикаты
2. Знак без изменения аргумента
3. Целочисленность по value
4. Бесконечности (всегда ложны)
5. Magnitude хелперы и обработку NaN
"""

from decimal import Decimal

from src.core.math.classification import (
    abs_fraction,
    is_canonical,
    is_complex_number,
    is_even_integer,
    is_finite,
    is_imaginary_number,
    is_infinity,
    is_integer,
    is_nan,
    is_negative,
    is_negative_infinity,
    is_normal,
    is_odd_integer,
    is_positive,
    is_positive_infinity,
    is_real_number,
    is_subnormal,
    is_zero,
    max_magnitude,
    max_magnitude_number,
    min_magnitude,
    min_magnitude_number,
)
from src.core.math.fraction import Fraction


class TestNanZeroNormal:
    """Тесты is_nan, is_zero, is_normal"""

    def test_is_nan(self) -> None:
        assert is_nan(Fraction(1, 0))
        assert is_nan(Fraction.nan())
        assert not is_nan(Fraction(1, 2))

    def test_is_zero(self) -> None:
        assert is_zero(Fraction(0, 5))
        assert is_zero(Fraction.zero())
        assert not is_zero(Fraction(0, 0))
        assert not is_zero(Fraction(1, 2))

    def test_is_normal(self) -> None:
        assert is_normal(Fraction(1, 2))
        assert is_normal(Fraction(-3, 4))
        assert not is_normal(Fraction(0, 2))
        assert not is_normal(Fraction(1, -2))
        assert not is_normal(Fraction(Decimal("1.5"), 2))
        assert not is_normal(Fraction(1, 0))

    def test_is_subnormal(self) -> None:
        assert is_subnormal(Fraction(0, 2))
        assert not is_subnormal(Fraction(1, 2))

    def test_real_number(self) -> None:
        assert is_real_number(Fraction(1, 2))
        assert not is_real_number(Fraction(1, 0))

    def test_constant_predicates(self) -> None:
        f = Fraction(1, 2)
        assert is_canonical(f)
        assert not is_complex_number(f)
        assert not is_imaginary_number(f)


class TestSign:
    """Тесты is_negative / is_positive"""

    def test_negative_lower(self) -> None:
        assert is_negative(Fraction(1, -2))

    def test_double_negative(self) -> None:
        assert not is_negative(Fraction(-1, -2))

    def test_negative_upper(self) -> None:
        assert is_negative(Fraction(-1, 2))

    def test_zero_over_negative(self) -> None:
        assert not is_negative(Fraction(0, -1))

    def test_does_not_mutate(self) -> None:
        """Знак вычисляется без нормализации аргумента"""
        f = Fraction(1, -2)
        is_negative(f)
        assert f.upper == 1
        assert f.lower == -2

    def test_is_positive(self) -> None:
        assert is_positive(Fraction(1, 2))
        assert is_positive(Fraction(0, 1))
        assert not is_positive(Fraction(1, -2))


class TestIntegral:
    """Тесты is_integer / is_even_integer / is_odd_integer"""

    def test_is_integer(self) -> None:
        assert is_integer(Fraction(4, 2))
        assert not is_integer(Fraction(1, 2))
        assert not is_integer(Fraction(1, 0))

    def test_even(self) -> None:
        assert is_even_integer(Fraction(4, 2))
        assert not is_even_integer(Fraction(6, 2))
        assert not is_even_integer(Fraction(1, 2))

    def test_odd(self) -> None:
        assert is_odd_integer(Fraction(6, 2))
        assert is_odd_integer(Fraction(-3))
        assert not is_odd_integer(Fraction(4, 2))
        assert not is_odd_integer(Fraction(1, 0))


class TestInfinity:
    """В десятичной области бесконечностей нет"""

    def test_always_false(self) -> None:
        for f in (Fraction(1, 2), Fraction.max_value(), Fraction(1, 0)):
            assert not is_infinity(f)
            assert not is_positive_infinity(f)
            assert not is_negative_infinity(f)
            assert is_finite(f)


class TestMagnitude:
    """Тесты max/min magnitude"""

    def test_max_by_value(self) -> None:
        x = Fraction(1, 2)
        y = Fraction(2, 3)
        assert max_magnitude(x, y) is y
        assert max_magnitude(y, x) is y

    def test_max_prefers_first_on_tie(self) -> None:
        x = Fraction(1, 2)
        y = Fraction(2, 4)
        assert max_magnitude(x, y) is x

    def test_min(self) -> None:
        x = Fraction(1, 2)
        y = Fraction(2, 3)
        assert min_magnitude(x, y) is x
        assert min_magnitude(y, x) is x

    def test_nan_propagates(self) -> None:
        nan = Fraction.nan()
        f = Fraction(1, 2)
        assert max_magnitude(nan, f) is nan
        assert max_magnitude(f, nan) is nan
        assert min_magnitude(nan, f) is nan
        assert min_magnitude(f, nan) is nan

    def test_number_variants_skip_nan(self) -> None:
        nan = Fraction.nan()
        f = Fraction(1, 2)
        assert max_magnitude_number(nan, f) is f
        assert max_magnitude_number(f, nan) is f
        assert min_magnitude_number(nan, f) is f
        assert min_magnitude_number(f, nan) is f

    def test_abs_fraction(self) -> None:
        f = abs_fraction(Fraction(-1, -2))
        assert (f.upper, f.lower) == (1, 2)
