"""
Тесты для модуля Factors

Проверяет:
1. Перебор делителей с предварительным округлением
2. Пересечение делителей двух чисел
3. Граничные случаи (ноль, отрицательные, дробные значения)
"""

import math
from decimal import Decimal

import pytest

from src.core.math.factors import factors_of, shared_factors_of


class TestFactorsOf:
    """Тесты для factors_of"""

    def test_basic(self) -> None:
        assert factors_of(12) == [1, 2, 3, 4, 6, 12]
        assert factors_of(7) == [1, 7]
        assert factors_of(1) == [1]

    def test_ascending(self) -> None:
        result = factors_of(360)
        assert result == sorted(result)
        assert result[0] == 1
        assert result[-1] == 360

    def test_rounds_before_enumerating(self) -> None:
        """Значение округляется до ближайшего целого"""
        assert factors_of(Decimal("6.4")) == [1, 2, 3, 6]
        assert factors_of(9.0) == [1, 3, 9]

    def test_half_even_rounding(self) -> None:
        """2.5 → 2, 3.5 → 4"""
        assert factors_of(Decimal("2.5")) == [1, 2]
        assert factors_of(Decimal("3.5")) == [1, 2, 4]

    def test_zero_and_negative(self) -> None:
        """Нет положительных делителей"""
        assert factors_of(0) == []
        assert factors_of(-6) == []
        assert factors_of(Decimal("0.4")) == []


class TestSharedFactorsOf:
    """Тесты для shared_factors_of"""

    def test_basic(self) -> None:
        assert shared_factors_of(12, 18) == [1, 2, 3, 6]

    def test_coprime(self) -> None:
        """У взаимно простых чисел общий только 1"""
        assert shared_factors_of(7, 5) == [1]

    def test_same_number(self) -> None:
        assert shared_factors_of(12, 12) == factors_of(12)

    def test_no_factors(self) -> None:
        assert shared_factors_of(0, 5) == []
        assert shared_factors_of(-4, 8) == []

    @pytest.mark.parametrize("x, y", [(12, 18), (100, 75), (48, 36), (17, 51), (9, 28)])
    def test_last_is_greatest(self, x: int, y: int) -> None:
        """Последний элемент — наибольший общий делитель"""
        shared = shared_factors_of(x, y)
        assert shared[-1] == math.gcd(x, y)
        assert shared == sorted(shared)
