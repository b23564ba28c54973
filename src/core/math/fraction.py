"""
Fraction — Точная дробь над десятичной областью

Дробь хранит пару upper/lower (числитель/знаменатель) как Decimal
и выполняет арифметику без промежуточного деления, что точнее, чем
работа с готовым частным.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. После нормализации знак хранится только в upper, lower >= 0
2. lower == 0 означает NaN; деление на ноль не бросает исключение,
   а даёт NaN, который тихо распространяется дальше
3. Результат +, -, *, / всегда проходит через simplify()
4. Сокращаются только целые дроби (1.5/3 остаётся как есть)
5. upper и lower всегда лежат в [DECIMAL_MIN, DECIMAL_MAX]; арифметика,
   выводящая часть за эти границы, бросает UnsupportedConversion

ТЕКСТОВЫЕ ФОРМЫ:
    "N/D"     — форма для хранения и обмена, читается Fraction.parse
    "N"       — одиночное десятичное число, читается как N/1
    str(f)    — многострочная форма для отображения (не для парсинга)
"""

import re
from decimal import Decimal
from typing import Any, Final

from loguru import logger
from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from src.core.math.decimal_domain import (
    DECIMAL_CONTEXT,
    DECIMAL_MAX,
    DECIMAL_MIN,
    FRACTION_RADIX,
    FRACTION_SEPARATOR,
    NAN_TEXT,
    format_decimal,
    in_domain,
    is_integral,
    safe_divide,
    to_decimal,
    truncate,
)
from src.core.math.factors import shared_factors_of

# =============================================================================
# ГРАММАТИКА ТЕКСТА
# =============================================================================

# Десятичное число: знак, цифры, необязательная дробная часть (без экспоненты)
_DECIMAL_RE: Final[str] = r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"

_DECIMAL_PATTERN: Final[re.Pattern[str]] = re.compile(_DECIMAL_RE)

# Полная форма "N" или "N/D" с пробелами вокруг частей
FRACTION_TEXT_PATTERN: Final[str] = (
    rf"^\s*{_DECIMAL_RE}\s*(?:/\s*{_DECIMAL_RE}\s*)?$"
)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FractionError(Exception):
    """Базовая ошибка операций над дробями."""


class InvalidComparand(FractionError, TypeError):
    """Сравнение дроби с несовместимым значением."""


class UnsupportedConversion(FractionError, TypeError):
    """
    Конверсия в/из типа без числового смысла.

    Примеры: bool, datetime, произвольный тип, значение вне области.
    """


class MalformedInput(FractionError, ValueError):
    """
    Текст не разбирается как дробь.

    Attributes:
        text: Исходный текст
        half: "upper" или "lower", если текст имел форму "N/D" и одна
            из половин не разобралась; иначе None
    """

    def __init__(self, text: Any, message: str, half: str | None = None):
        super().__init__(f"{message}: {text!r}")
        self.text = text
        self.half = half


# =============================================================================
# ВНУТРЕННИЕ ХЕЛПЕРЫ
# =============================================================================


def _parse_decimal(text: str) -> Decimal | None:
    """Разбор одной половины; None если текст не является числом области."""
    stripped = text.strip()
    if not _DECIMAL_PATTERN.fullmatch(stripped):
        return None

    value = Decimal(stripped)
    if not in_domain(value):
        return None
    return value


def _coerce_part(value: Any) -> Decimal:
    """Приведение числителя/знаменателя к Decimal."""
    if isinstance(value, str):
        parsed = _parse_decimal(value)
        if parsed is None:
            raise MalformedInput(value, "Can't turn string into a decimal")
        return parsed

    try:
        result = to_decimal(value)
    except TypeError as exc:
        raise UnsupportedConversion(
            f"Can't build a fraction from {type(value).__name__}"
        ) from exc

    if not in_domain(result):
        raise UnsupportedConversion(f"{value} is outside the decimal domain")
    return result


def _mul(a: Decimal, b: Decimal) -> Decimal:
    return DECIMAL_CONTEXT.multiply(a, b)


def _three_way(this: Decimal, that: Decimal) -> int:
    # Положительный результат, если сравниваемое значение больше
    if that < this:
        return -1
    if that > this:
        return 1
    return 0


# =============================================================================
# FRACTION
# =============================================================================


class Fraction:
    """
    Дробь upper/lower над 128-bit decimal областью.

    Конструктор сохраняет части как есть, без нормализации знака и
    сокращения: Fraction(1, -2) хранит lower == -2 до вызова simplify().

    Args:
        numerator: Числитель (int, float, Decimal или десятичный текст)
        denominator: Знаменатель (default: 1)

    Raises:
        UnsupportedConversion: Для bool, NaN/Inf, прочих типов и значений
            вне [DECIMAL_MIN, DECIMAL_MAX]
        MalformedInput: Если часть передана текстом и не разбирается

    Examples:
        >>> Fraction(1, 2) + Fraction(1, 3)
        Fraction('5', '6')
        >>> Fraction(2, 4) == Fraction(1, 2)
        True
        >>> str(Fraction(1, 0))
        'NaN'
    """

    RADIX: Final[int] = FRACTION_RADIX

    def __init__(self, numerator: Any = 0, denominator: Any = 1):
        self.upper: Decimal = _coerce_part(numerator)
        self.lower: Decimal = _coerce_part(denominator)

    # -------------------------------------------------------------------------
    # Константы
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "Fraction":
        """0/1"""
        return cls(0)

    @classmethod
    def one(cls) -> "Fraction":
        """1/1"""
        return cls(1)

    @classmethod
    def negative_one(cls) -> "Fraction":
        """-1/1"""
        return cls(-1)

    @classmethod
    def nan(cls) -> "Fraction":
        """0/0"""
        return cls(0, 0)

    @classmethod
    def max_value(cls) -> "Fraction":
        """Максимум области: DECIMAL_MAX/1"""
        return cls(DECIMAL_MAX)

    @classmethod
    def min_value(cls) -> "Fraction":
        """Минимум области: DECIMAL_MIN/1"""
        return cls(DECIMAL_MIN)

    @classmethod
    def additive_identity(cls) -> "Fraction":
        return cls.zero()

    @classmethod
    def multiplicative_identity(cls) -> "Fraction":
        return cls.one()

    # -------------------------------------------------------------------------
    # Значение и нормализация
    # -------------------------------------------------------------------------

    @property
    def value(self) -> Decimal:
        """
        Десятичное значение upper / lower.

        Для NaN дроби (lower == 0) возвращает Decimal("NaN").
        """
        return safe_divide(self.upper, self.lower)

    def process_sign(self) -> None:
        """
        Перенос знака в числитель.

        Два минуса взаимно уничтожаются; минус только в знаменателе
        переходит в числитель. Идемпотентно.
        """
        if self.upper < 0 and self.lower < 0:
            self.upper = self.upper.copy_abs()
            self.lower = self.lower.copy_abs()
        elif self.lower < 0:
            self.upper = self.upper.copy_negate()
            self.lower = self.lower.copy_abs()

    def simplify(self) -> None:
        """
        Сокращение дроби на месте.

        Сначала нормализует знак. Затем, только если обе части целые,
        делит их на наибольший общий делитель из shared_factors_of,
        пока общих делителей кроме 1 не останется.

        Дробные части (1.5/3) не сокращаются. Отрицательный или нулевой
        числитель и нулевой знаменатель тоже остаются как есть: у них
        нет положительных делителей.
        """
        self.process_sign()
        if not (is_integral(self.upper) and is_integral(self.lower)):
            return

        while True:
            shared = shared_factors_of(self.upper, self.lower)
            if len(shared) <= 1:
                break

            biggest = Decimal(shared[-1])
            self.upper = DECIMAL_CONTEXT.divide(self.upper, biggest)
            self.lower = DECIMAL_CONTEXT.divide(self.lower, biggest)
            logger.debug(
                "Fraction reduced by {}: {}/{}", biggest, self.upper, self.lower
            )

    def get_simplified(self) -> "Fraction":
        """simplify() на месте; возвращает self для цепочек вызовов."""
        self.simplify()
        return self

    # -------------------------------------------------------------------------
    # Сравнения
    # -------------------------------------------------------------------------

    def compare_to(self, other: Any) -> int:
        """
        Трёхстороннее сравнение с дробью, целым или десятичным числом.

        Знак результата: 1 если other больше дроби, -1 если меньше,
        0 если равны. None всегда даёт 1.

        - Fraction: перекрёстное умножение при разных знаменателях
          (без вычисления value и потери точности)
        - int: upper сравнивается с other * lower
        - Decimal/float: сравнение с value

        Raises:
            InvalidComparand: Для прочих типов и для сравнения NaN
                с десятичным числом
        """
        if other is None:
            return 1

        if isinstance(other, Fraction):
            this_comparable = self.upper
            that_comparable = other.upper
            if other.lower != self.lower:
                this_comparable = _mul(this_comparable, other.lower)
                that_comparable = _mul(that_comparable, self.lower)
            return _three_way(this_comparable, that_comparable)

        if isinstance(other, bool):
            raise InvalidComparand("Can't compare \"bool\" with a fraction")

        if isinstance(other, int):
            return _three_way(self.upper, _mul(Decimal(other), self.lower))

        if isinstance(other, (Decimal, float)):
            comparable = to_decimal(other)
            value = self.value
            if value.is_nan() or comparable.is_nan():
                raise InvalidComparand("Can't order NaN against a decimal")
            return _three_way(value, comparable)

        raise InvalidComparand(
            f"Can't compare \"{type(other).__name__}\" with a fraction"
        )

    @staticmethod
    def _coerce(other: Any) -> "Fraction | None":
        """int/Decimal → (n, 1); None для несовместимых операндов."""
        if isinstance(other, Fraction):
            return other
        if isinstance(other, bool):
            return None
        if isinstance(other, int):
            return Fraction(other)
        if isinstance(other, Decimal) and other.is_finite():
            return Fraction(other)
        return None

    def _cross(self, other: "Fraction") -> tuple[Decimal, Decimal]:
        """Числители, приведённые к общему знаменателю."""
        if self.lower == other.lower:
            return self.upper, other.upper
        return _mul(self.upper, other.lower), _mul(other.upper, self.lower)

    def __eq__(self, other: object) -> bool:
        coerced = Fraction._coerce(other)
        if coerced is None:
            return NotImplemented
        left, right = self._cross(coerced)
        return left == right

    def __lt__(self, other: Any) -> bool:
        coerced = Fraction._coerce(other)
        if coerced is None:
            return NotImplemented
        left, right = self._cross(coerced)
        return left < right

    def __le__(self, other: Any) -> bool:
        coerced = Fraction._coerce(other)
        if coerced is None:
            return NotImplemented
        left, right = self._cross(coerced)
        return left <= right

    def __gt__(self, other: Any) -> bool:
        coerced = Fraction._coerce(other)
        if coerced is None:
            return NotImplemented
        left, right = self._cross(coerced)
        return left > right

    def __ge__(self, other: Any) -> bool:
        coerced = Fraction._coerce(other)
        if coerced is None:
            return NotImplemented
        left, right = self._cross(coerced)
        return left >= right

    def __hash__(self) -> int:
        return hash(self.value)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "Fraction":
        coerced = Fraction._coerce(other)
        if coerced is None:
            return NotImplemented

        if self.lower == coerced.lower:
            result = Fraction(
                DECIMAL_CONTEXT.add(self.upper, coerced.upper), self.lower
            )
        else:
            result = Fraction(
                DECIMAL_CONTEXT.add(
                    _mul(self.upper, coerced.lower), _mul(coerced.upper, self.lower)
                ),
                _mul(self.lower, coerced.lower),
            )
        return result.get_simplified()

    def __radd__(self, other: Any) -> "Fraction":
        coerced = Fraction._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced + self

    def __sub__(self, other: Any) -> "Fraction":
        coerced = Fraction._coerce(other)
        if coerced is None:
            return NotImplemented

        if self.lower == coerced.lower:
            result = Fraction(
                DECIMAL_CONTEXT.subtract(self.upper, coerced.upper), self.lower
            )
        else:
            result = Fraction(
                DECIMAL_CONTEXT.subtract(
                    _mul(self.upper, coerced.lower), _mul(coerced.upper, self.lower)
                ),
                _mul(self.lower, coerced.lower),
            )
        return result.get_simplified()

    def __rsub__(self, other: Any) -> "Fraction":
        coerced = Fraction._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced - self

    def __mul__(self, other: Any) -> "Fraction":
        coerced = Fraction._coerce(other)
        if coerced is None:
            return NotImplemented

        result = Fraction(
            _mul(self.upper, coerced.upper), _mul(self.lower, coerced.lower)
        )
        return result.get_simplified()

    def __rmul__(self, other: Any) -> "Fraction":
        coerced = Fraction._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced * self

    def __truediv__(self, other: Any) -> "Fraction":
        """
        Умножение на обратную дробь.

        Нулевой делитель не бросает исключение: знаменатель результата
        становится 0 (NaN).
        """
        coerced = Fraction._coerce(other)
        if coerced is None:
            return NotImplemented

        result = Fraction(
            _mul(self.upper, coerced.lower), _mul(self.lower, coerced.upper)
        )
        return result.get_simplified()

    def __rtruediv__(self, other: Any) -> "Fraction":
        coerced = Fraction._coerce(other)
        if coerced is None:
            return NotImplemented
        return coerced / self

    def __mod__(self, other: Any) -> Decimal:
        """
        Остаток от деления значений: value % other.value.

        Определён только между дробями и возвращает Decimal, а не Fraction.

        Raises:
            ZeroDivisionError: Если значение делителя равно нулю
        """
        if not isinstance(other, Fraction):
            return NotImplemented

        dividend = self.value
        divisor = other.value
        if divisor == 0:
            raise ZeroDivisionError("Fraction modulo by zero")
        if dividend.is_nan() or divisor.is_nan():
            return Decimal("NaN")

        # Целая часть частного должна уместиться в точность контекста
        quotient_digits = max(0, dividend.adjusted() - divisor.adjusted()) + 1
        context = DECIMAL_CONTEXT.copy()
        context.prec = DECIMAL_CONTEXT.prec + quotient_digits
        return DECIMAL_CONTEXT.plus(context.remainder(dividend, divisor))

    def __neg__(self) -> "Fraction":
        return Fraction(self.upper.copy_negate(), self.lower)

    def __pos__(self) -> "Fraction":
        return Fraction(self.upper, self.lower)

    def __abs__(self) -> "Fraction":
        return Fraction(self.upper.copy_abs(), self.lower.copy_abs())

    def increment(self) -> "Fraction":
        """Новая дробь (upper + lower)/lower, т.е. value + 1. Не сокращается."""
        return Fraction(DECIMAL_CONTEXT.add(self.upper, self.lower), self.lower)

    def decrement(self) -> "Fraction":
        """Новая дробь (upper - lower)/lower, т.е. value - 1. Не сокращается."""
        return Fraction(DECIMAL_CONTEXT.subtract(self.upper, self.lower), self.lower)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_decimal(self) -> Decimal:
        return self.value

    def __int__(self) -> int:
        value = self.value
        if value.is_nan():
            raise UnsupportedConversion("Can't turn a NaN fraction into an int")
        return truncate(value)

    __trunc__ = __int__

    def __float__(self) -> float:
        return float(self.value)

    def __bool__(self) -> bool:
        raise UnsupportedConversion("Can't turn a fraction into a boolean")

    def to_datetime(self) -> Any:
        raise UnsupportedConversion("Can't turn a fraction into a date")

    def to_type(self, target: type) -> Any:
        raise UnsupportedConversion(
            f"Can't generate a cast to {getattr(target, '__name__', target)} "
            f"through this form"
        )

    # -------------------------------------------------------------------------
    # Парсинг
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "Fraction":
        """
        Разбор текста "N/D" или "N".

        "N/D": обе половины разбираются как десятичные числа, результат
        сокращается. "N": одиночное число, результат N/1.

        Args:
            text: Исходный текст

        Returns:
            Новая дробь

        Raises:
            MalformedInput: Пустой текст, больше одного "/", нечисловая
                половина или число вне области

        Examples:
            >>> Fraction.parse("6/8")
            Fraction('3', '4')
            >>> Fraction.parse("2.5")
            Fraction('2.5', '1')
        """
        if not isinstance(text, str) or not text.strip():
            raise MalformedInput(text, "Can't parse an empty value into a fraction")

        halves = text.split(FRACTION_SEPARATOR)

        if len(halves) == 1:
            value = _parse_decimal(text)
            if value is None:
                raise MalformedInput(text, "Can't turn string into a decimal")
            return cls(value)

        if len(halves) == 2:
            upper = _parse_decimal(halves[0])
            if upper is None:
                raise MalformedInput(
                    text, "Malformed number located in the upper side of the fraction",
                    half="upper",
                )
            lower = _parse_decimal(halves[1])
            if lower is None:
                raise MalformedInput(
                    text, "Malformed number located in the lower side of the fraction",
                    half="lower",
                )
            return cls(upper, lower).get_simplified()

        raise MalformedInput(text, "Malformed fraction representation")

    @classmethod
    def try_parse(cls, text: str | None) -> tuple["Fraction", bool]:
        """
        parse() без исключений.

        Returns:
            (fraction, True) при успехе, (Fraction.zero(), False) иначе
        """
        try:
            return cls.parse(text), True
        except MalformedInput as exc:
            logger.debug("Rejected fraction text: {}", exc)
            return cls.zero(), False

    # -------------------------------------------------------------------------
    # Форматирование
    # -------------------------------------------------------------------------

    def to_string(self, value_only: bool = False) -> str:
        """
        Текстовое представление для отображения.

        value_only=True: только десятичное значение.

        Иначе:
        - lower == 1: просто числитель
        - lower == 0: "NaN"
        - иначе три строки: числитель, черта с [value], знаменатель.
          Числа выравниваются по правому краю; у отрицательной дроби
          черта начинается с "- ", а числа сдвинуты на два пробела.

        Examples:
            >>> print(Fraction(-3, 4))
              3
            - - [-0.75]
              4
        """
        if value_only:
            return format_decimal(self.value)

        if self.lower == 1:
            return format_decimal(self.upper)
        if self.lower == 0:
            return NAN_TEXT

        upper_str = format_decimal(self.upper.copy_abs())
        lower_str = format_decimal(self.lower)
        width = max(len(upper_str), len(lower_str))
        is_negative = self.upper < 0
        padding = "  " if is_negative else ""
        sign = "- " if is_negative else ""

        return (
            f"{padding}{upper_str.rjust(width)}\n"
            f"{sign}{'-' * width} [{format_decimal(self.value)}]\n"
            f"{padding}{lower_str.rjust(width)}"
        )

    def format_ratio(self) -> str:
        """Форма "N/D" для хранения; читается обратно через parse()."""
        return (
            f"{format_decimal(self.upper)}{FRACTION_SEPARATOR}"
            f"{format_decimal(self.lower)}"
        )

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"Fraction('{format_decimal(self.upper)}', "
            f"'{format_decimal(self.lower)}')"
        )

    def __format__(self, format_spec: str) -> str:
        # "v": только значение; прочие спецификаторы применяются к value
        if not format_spec:
            return self.to_string()
        if format_spec == "v":
            return self.to_string(value_only=True)
        return format(self.value, format_spec)

    # -------------------------------------------------------------------------
    # Pydantic
    # -------------------------------------------------------------------------

    @classmethod
    def _validate(cls, value: Any) -> "Fraction":
        if isinstance(value, Fraction):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        if isinstance(value, (int, Decimal)) and not isinstance(value, bool):
            try:
                return cls(value)
            except UnsupportedConversion as exc:
                raise ValueError(str(exc)) from exc
        raise ValueError(f"Can't build a fraction from {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda fraction: fraction.format_ratio(), when_used="json"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {
            "type": "string",
            "pattern": FRACTION_TEXT_PATTERN,
            "examples": ["3/4", "-1.5"],
        }
