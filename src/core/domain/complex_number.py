"""
Complex — комплексное число

Пара float (real, imag) с арифметикой, модулем, аргументом,
сопряжением, степенью через полярную форму и квадратным корнем.

Бинарные операторы возвращают новое значение, составные (+=, -=, *=, /=)
изменяют объект на месте. Равенство — покомпонентно с epsilon 1e-10.
"""

import math
from numbers import Real

from src.core.domain.display import DEFAULT_DISPLAY, DisplayConfig, format_float, split_tokens
from src.core.math.exceptions import DivisionByZero
from src.core.math.numerical_safeguards import EPS_VALUE_COMPARE, is_close_abs, is_zero


class Complex:
    """
    Комплексное число real + imag·i.

    Действительные числа (int, float) допускаются как операнды с обеих сторон
    и трактуются как Complex(x, 0).
    """

    __slots__ = ("_real", "_imag")

    def __init__(self, real: float = 0.0, imag: float = 0.0):
        self._real = float(real)
        self._imag = float(imag)

    @classmethod
    def from_polar(cls, r: float, theta: float) -> "Complex":
        """Построение из полярной формы r·e^{iθ}."""
        return cls(r * math.cos(theta), r * math.sin(theta))

    @classmethod
    def parse(cls, text: str) -> "Complex":
        """
        Разбор строки "REAL IMAG".

        Raises:
            InvalidArgument: Если полей не два
            ValueError: Если поле не является числом
        """
        real, imag = split_tokens(text, 2, cls.__name__)
        return cls(float(real), float(imag))

    # -------------------------------------------------------------------------
    # Доступ к компонентам
    # -------------------------------------------------------------------------

    @property
    def real(self) -> float:
        return self._real

    @real.setter
    def real(self, value: float) -> None:
        self._real = float(value)

    @property
    def imag(self) -> float:
        return self._imag

    @imag.setter
    def imag(self, value: float) -> None:
        self._imag = float(value)

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    @staticmethod
    def _coerce(other: object) -> "Complex | None":
        if isinstance(other, Complex):
            return other
        if isinstance(other, Real):
            return Complex(float(other), 0.0)
        return None

    def _divided_parts(self, other: "Complex") -> tuple[float, float]:
        denominator = other._real * other._real + other._imag * other._imag
        if is_zero(denominator):
            raise DivisionByZero("Деление на ноль: модуль делителя равен нулю")

        real = (self._real * other._real + self._imag * other._imag) / denominator
        imag = (self._imag * other._real - self._real * other._imag) / denominator
        return real, imag

    def __add__(self, other: object) -> "Complex":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self._real + rhs._real, self._imag + rhs._imag)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Complex":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(self._real - rhs._real, self._imag - rhs._imag)

    def __rsub__(self, other: object) -> "Complex":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: object) -> "Complex":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(
            self._real * rhs._real - self._imag * rhs._imag,
            self._real * rhs._imag + self._imag * rhs._real,
        )

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> "Complex":
        """
        Деление (a + bi) / (c + di).

        Raises:
            DivisionByZero: Если c² + d² < 1e-10
        """
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Complex(*self._divided_parts(rhs))

    def __rtruediv__(self, other: object) -> "Complex":
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __iadd__(self, other: object) -> "Complex":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self._real += rhs._real
        self._imag += rhs._imag
        return self

    def __isub__(self, other: object) -> "Complex":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self._real -= rhs._real
        self._imag -= rhs._imag
        return self

    def __imul__(self, other: object) -> "Complex":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        real = self._real * rhs._real - self._imag * rhs._imag
        self._imag = self._real * rhs._imag + self._imag * rhs._real
        self._real = real
        return self

    def __itruediv__(self, other: object) -> "Complex":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        self._real, self._imag = self._divided_parts(rhs)
        return self

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return is_close_abs(self._real, rhs._real, EPS_VALUE_COMPARE) and is_close_abs(
            self._imag, rhs._imag, EPS_VALUE_COMPARE
        )

    __hash__ = None  # mutable

    # -------------------------------------------------------------------------
    # Математические функции
    # -------------------------------------------------------------------------

    def magnitude(self) -> float:
        return math.sqrt(self._real * self._real + self._imag * self._imag)

    def argument(self) -> float:
        """Аргумент в радианах, atan2(imag, real)."""
        return math.atan2(self._imag, self._real)

    def conjugate(self) -> "Complex":
        return Complex(self._real, -self._imag)

    def power(self, exponent: float) -> "Complex":
        """
        Возведение в степень через полярную форму.

        z^p = r^p · (cos(pθ) + i·sin(pθ)).
        Для точного нуля возвращается 0 + 0i при любом показателе.
        """
        if self._real == 0.0 and self._imag == 0.0:
            return Complex(0.0, 0.0)

        new_r = self.magnitude() ** exponent
        new_theta = exponent * self.argument()
        return Complex(new_r * math.cos(new_theta), new_r * math.sin(new_theta))

    def sqrt(self) -> "Complex":
        """Главное значение квадратного корня."""
        return self.power(0.5)

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def to_string(self, config: DisplayConfig = DEFAULT_DISPLAY) -> str:
        real = format_float(self._real, config)
        if self._imag >= 0:
            return f"{real} + {format_float(self._imag, config)}i"
        return f"{real} - {format_float(abs(self._imag), config)}i"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Complex({self._real!r}, {self._imag!r})"
