"""
Factors — Поиск делителей и общих делителей

Вспомогательные функции для сокращения дробей.

Линейный перебор до округлённого значения и вложенный цикл пересечения:
большие значения сокращаются медленно.
"""

from decimal import Decimal

from src.core.math.decimal_domain import round_half_even, to_decimal


def factors_of(value: int | float | Decimal) -> list[int]:
    """
    Все делители числа в порядке возрастания.

    Значение сначала округляется до ближайшего целого (half-even),
    затем перебираются i от 1 до округлённого значения включительно.
    Для значений, округляющихся к нулю или отрицательных, делителей нет.

    Args:
        value: Число, делители которого нужны

    Returns:
        Список делителей по возрастанию

    Examples:
        >>> factors_of(12)
        [1, 2, 3, 4, 6, 12]
        >>> factors_of(Decimal("6.4"))
        [1, 2, 3, 6]
        >>> factors_of(-4)
        []
    """
    rounded = round_half_even(to_decimal(value))
    if rounded <= 0:
        return []

    return [i for i in range(1, rounded + 1) if rounded % i == 0]


def shared_factors_of(x: int | float | Decimal, y: int | float | Decimal) -> list[int]:
    """
    Делители, общие для двух чисел.

    Порядок следует factors_of(x), поэтому последний элемент всегда
    наибольший общий делитель. Единица присутствует, если оба числа
    округляются к положительным значениям.

    Args:
        x: Первое число
        y: Второе число

    Returns:
        Общие делители по возрастанию

    Examples:
        >>> shared_factors_of(12, 18)
        [1, 2, 3, 6]
        >>> shared_factors_of(7, 5)
        [1]
    """
    x_factors = factors_of(x)
    y_factors = factors_of(y)

    return [xf for xf in x_factors for yf in y_factors if xf == yf]
