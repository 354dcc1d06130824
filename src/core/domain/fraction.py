"""
Fraction — обыкновенная дробь

Точное рациональное число numerator/denominator с целыми компонентами.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Дробь всегда несократима: gcd(|numerator|, denominator) == 1
2. Знаменатель всегда строго положительный
3. Инварианты восстанавливаются после каждого изменения (simplify)
4. Нулевой знаменатель недопустим → InvalidArgument

Благодаря инвариантам равенство — точное совпадение полей, а сравнение
сводится к перекрёстному умножению.

ФОРМУЛЫ:
    a/b ± c/d = (a·(L/b) ± c·(L/d)) / L,  L = lcm(b, d)
    a/b · c/d = (a·c) / (b·d)
    a/b ÷ c/d = (a·d) / (b·c)
"""

from numbers import Integral

from src.core.domain.display import split_tokens
from src.core.math.exceptions import DivisionByZero, InvalidArgument
from src.core.math.numerical_safeguards import (
    FRACTION_FLOAT_PRECISION_DEFAULT,
    gcd,
    lcm,
    round_half_away_from_zero,
)


class Fraction:
    """
    Обыкновенная дробь numerator/denominator.

    Целые числа допускаются как операнды с обеих сторон и трактуются как n/1.
    """

    __slots__ = ("_numerator", "_denominator")

    def __init__(self, numerator: int = 0, denominator: int = 1):
        self.set(numerator, denominator)

    @classmethod
    def from_float(
        cls, value: float, precision: int = FRACTION_FLOAT_PRECISION_DEFAULT
    ) -> "Fraction":
        """
        Приближение float дробью с знаменателем 10^precision.

        Это приближение, а не точное преобразование: 0.333333 → 333333/1000000.
        Отрицательная точность заменяется на значение по умолчанию.

        Examples:
            >>> str(Fraction.from_float(0.75))
            '3/4'
        """
        if precision < 0:
            precision = FRACTION_FLOAT_PRECISION_DEFAULT

        multiplier = 10**precision
        return cls(round_half_away_from_zero(value * multiplier), multiplier)

    @classmethod
    def parse(cls, text: str) -> "Fraction":
        """
        Разбор строки "NUMERATOR DENOMINATOR" с последующим сокращением.

        Raises:
            InvalidArgument: Если полей не два или знаменатель равен нулю
            ValueError: Если поле не является целым числом
        """
        numerator, denominator = split_tokens(text, 2, cls.__name__)
        return cls(int(numerator), int(denominator))

    # -------------------------------------------------------------------------
    # Доступ к компонентам
    # -------------------------------------------------------------------------

    @staticmethod
    def _checked_int(value: int, name: str) -> int:
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise InvalidArgument(f"{name} должен быть целым числом, получено {value!r}")
        return int(value)

    def _simplify(self) -> None:
        if self._denominator == 0:
            raise InvalidArgument("Знаменатель не может быть равен нулю")

        if self._denominator < 0:
            self._numerator = -self._numerator
            self._denominator = -self._denominator

        divisor = gcd(self._numerator, self._denominator)
        self._numerator //= divisor
        self._denominator //= divisor

    @property
    def numerator(self) -> int:
        return self._numerator

    @numerator.setter
    def numerator(self, value: int) -> None:
        self.set(value, self._denominator)

    @property
    def denominator(self) -> int:
        return self._denominator

    @denominator.setter
    def denominator(self, value: int) -> None:
        self.set(self._numerator, value)

    def set(self, numerator: int, denominator: int) -> None:
        """
        Установка числителя и знаменателя с сокращением.

        Raises:
            InvalidArgument: Если denominator == 0
        """
        numerator = self._checked_int(numerator, "Числитель")
        denominator = self._checked_int(denominator, "Знаменатель")
        if denominator == 0:
            raise InvalidArgument("Знаменатель не может быть равен нулю")

        self._numerator = numerator
        self._denominator = denominator
        self._simplify()

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    @staticmethod
    def _coerce(other: object) -> "Fraction | None":
        if isinstance(other, Fraction):
            return other
        if isinstance(other, Integral) and not isinstance(other, bool):
            return Fraction(int(other))
        return None

    def _sum_parts(self, other: "Fraction", sign: int) -> tuple[int, int]:
        common = lcm(self._denominator, other._denominator)
        numerator = self._numerator * (common // self._denominator) + sign * (
            other._numerator * (common // other._denominator)
        )
        return numerator, common

    def _quotient_parts(self, other: "Fraction") -> tuple[int, int]:
        if other._numerator == 0:
            raise DivisionByZero("Деление дроби на ноль")
        return self._numerator * other._denominator, self._denominator * other._numerator

    def __add__(self, other: object) -> "Fraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fraction(*self._sum_parts(rhs, 1))

    __radd__ = __add__

    def __sub__(self, other: object) -> "Fraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fraction(*self._sum_parts(rhs, -1))

    def __rsub__(self, other: object) -> "Fraction":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> "Fraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fraction(self._numerator * rhs._numerator, self._denominator * rhs._denominator)

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Fraction":
        """
        Деление дробей (умножение на обратную).

        Raises:
            DivisionByZero: Если числитель делителя равен нулю
        """
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Fraction(*self._quotient_parts(rhs))

    def __rtruediv__(self, other: object) -> "Fraction":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __neg__(self) -> "Fraction":
        return Fraction(-self._numerator, self._denominator)

    def __pos__(self) -> "Fraction":
        return Fraction(self._numerator, self._denominator)

    def __iadd__(self, other: object) -> "Fraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self.set(*self._sum_parts(rhs, 1))
        return self

    def __isub__(self, other: object) -> "Fraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self.set(*self._sum_parts(rhs, -1))
        return self

    def __imul__(self, other: object) -> "Fraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self.set(self._numerator * rhs._numerator, self._denominator * rhs._denominator)
        return self

    def __itruediv__(self, other: object) -> "Fraction":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self.set(*self._quotient_parts(rhs))
        return self

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._numerator == rhs._numerator and self._denominator == rhs._denominator

    __hash__ = None  # mutable

    def _cross(self, other: object) -> tuple[int, int] | None:
        rhs = self._coerce(other)
        if rhs is None:
            return None
        # Знаменатели положительны, поэтому знак неравенства сохраняется
        return self._numerator * rhs._denominator, rhs._numerator * self._denominator

    def __lt__(self, other: object) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] < cross[1]

    def __le__(self, other: object) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] <= cross[1]

    def __gt__(self, other: object) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] > cross[1]

    def __ge__(self, other: object) -> bool:
        cross = self._cross(other)
        if cross is None:
            return NotImplemented
        return cross[0] >= cross[1]

    # -------------------------------------------------------------------------
    # Дополнительные функции
    # -------------------------------------------------------------------------

    def abs(self) -> "Fraction":
        return Fraction(abs(self._numerator), self._denominator)

    def __abs__(self) -> "Fraction":
        return self.abs()

    def reciprocal(self) -> "Fraction":
        """
        Обратная дробь d/n.

        Raises:
            DivisionByZero: Если дробь равна нулю
        """
        if self._numerator == 0:
            raise DivisionByZero("Нельзя получить обратную дробь от нуля")
        return Fraction(self._denominator, self._numerator)

    def power(self, exponent: int) -> "Fraction":
        """
        Целая степень; отрицательная — через обратную дробь.

        Raises:
            InvalidArgument: Если ноль возводится в отрицательную степень
        """
        if exponent < 0:
            if self._numerator == 0:
                raise InvalidArgument("Нельзя возвести ноль в отрицательную степень")
            return self.reciprocal().power(-exponent)

        return Fraction(self._numerator**exponent, self._denominator**exponent)

    def to_float(self) -> float:
        return self._numerator / self._denominator

    def __float__(self) -> float:
        return self.to_float()

    def is_integer(self) -> bool:
        return self._denominator == 1

    def is_proper(self) -> bool:
        """|numerator| < |denominator|."""
        return abs(self._numerator) < self._denominator

    def integer_part(self) -> int:
        """Целая часть с отбрасыванием дробной (округление к нулю): -7/3 → -2."""
        quotient = abs(self._numerator) // self._denominator
        return quotient if self._numerator >= 0 else -quotient

    def fractional_part(self) -> "Fraction":
        """Дробная часть со знаком числителя: 7/3 → 1/3, -7/3 → -1/3."""
        remainder = self._numerator - self.integer_part() * self._denominator
        return Fraction(remainder, self._denominator)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def to_string(self) -> str:
        if self._denominator == 1:
            return str(self._numerator)
        return f"{self._numerator}/{self._denominator}"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Fraction({self._numerator}, {self._denominator})"
