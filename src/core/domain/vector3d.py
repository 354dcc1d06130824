"""
Vector3D — трёхмерный вектор

Тройка float (x, y, z) с покомпонентной арифметикой, умножением на скаляр,
скалярным и векторным произведением, нормализацией, углом, расстоянием,
проекцией и предикатами (нулевой, перпендикулярный, параллельный).

Геометрически невозможные операции над почти нулевым вектором
поднимают InvalidOperation.
"""

import math
from numbers import Real

from src.core.domain.display import DEFAULT_DISPLAY, DisplayConfig, format_float, split_tokens
from src.core.math.exceptions import DivisionByZero, InvalidOperation
from src.core.math.numerical_safeguards import EPS_VALUE_COMPARE, clamp, is_close_abs, is_zero


class Vector3D:
    """Трёхмерный вектор (x, y, z)."""

    __slots__ = ("_x", "_y", "_z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        self.set(x, y, z)

    @classmethod
    def parse(cls, text: str) -> "Vector3D":
        """Разбор строки "X Y Z"."""
        x, y, z = split_tokens(text, 3, cls.__name__)
        return cls(float(x), float(y), float(z))

    # -------------------------------------------------------------------------
    # Доступ к компонентам
    # -------------------------------------------------------------------------

    @property
    def x(self) -> float:
        return self._x

    @x.setter
    def x(self, value: float) -> None:
        self._x = float(value)

    @property
    def y(self) -> float:
        return self._y

    @y.setter
    def y(self, value: float) -> None:
        self._y = float(value)

    @property
    def z(self) -> float:
        return self._z

    @z.setter
    def z(self, value: float) -> None:
        self._z = float(value)

    def set(self, x: float, y: float, z: float) -> None:
        """Установка всех трёх компонент."""
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)

    def __iter__(self):
        return iter((self._x, self._y, self._z))

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    @staticmethod
    def _checked_scalar(scalar: float) -> float:
        if is_zero(scalar):
            raise DivisionByZero("Деление вектора на ноль")
        return float(scalar)

    def __add__(self, other: object) -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self._x + other._x, self._y + other._y, self._z + other._z)

    def __sub__(self, other: object) -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        return Vector3D(self._x - other._x, self._y - other._y, self._z - other._z)

    def __neg__(self) -> "Vector3D":
        return Vector3D(-self._x, -self._y, -self._z)

    def __mul__(self, scalar: object) -> "Vector3D":
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vector3D(self._x * scalar, self._y * scalar, self._z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: object) -> "Vector3D":
        """
        Деление на скаляр.

        Raises:
            DivisionByZero: Если |scalar| < 1e-10
        """
        if not isinstance(scalar, Real):
            return NotImplemented
        scalar = self._checked_scalar(scalar)
        return Vector3D(self._x / scalar, self._y / scalar, self._z / scalar)

    def __iadd__(self, other: object) -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        self.set(self._x + other._x, self._y + other._y, self._z + other._z)
        return self

    def __isub__(self, other: object) -> "Vector3D":
        if not isinstance(other, Vector3D):
            return NotImplemented
        self.set(self._x - other._x, self._y - other._y, self._z - other._z)
        return self

    def __imul__(self, scalar: object) -> "Vector3D":
        if not isinstance(scalar, Real):
            return NotImplemented
        self.set(self._x * scalar, self._y * scalar, self._z * scalar)
        return self

    def __itruediv__(self, scalar: object) -> "Vector3D":
        if not isinstance(scalar, Real):
            return NotImplemented
        scalar = self._checked_scalar(scalar)
        self.set(self._x / scalar, self._y / scalar, self._z / scalar)
        return self

    # -------------------------------------------------------------------------
    # Сравнение
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return (
            is_close_abs(self._x, other._x)
            and is_close_abs(self._y, other._y)
            and is_close_abs(self._z, other._z)
        )

    __hash__ = None  # mutable

    # -------------------------------------------------------------------------
    # Векторные операции
    # -------------------------------------------------------------------------

    def magnitude(self) -> float:
        return math.sqrt(self.magnitude_squared())

    def magnitude_squared(self) -> float:
        return self._x * self._x + self._y * self._y + self._z * self._z

    def normalize(self) -> "Vector3D":
        """
        Единичный вектор того же направления.

        Raises:
            InvalidOperation: Если длина вектора < 1e-10
        """
        mag = self.magnitude()
        if is_zero(mag):
            raise InvalidOperation("Нельзя нормализовать нулевой вектор")
        return Vector3D(self._x / mag, self._y / mag, self._z / mag)

    def normalize_self(self) -> None:
        """Нормализация на месте (см. normalize)."""
        mag = self.magnitude()
        if is_zero(mag):
            raise InvalidOperation("Нельзя нормализовать нулевой вектор")
        self.set(self._x / mag, self._y / mag, self._z / mag)

    def dot_product(self, other: "Vector3D") -> float:
        return self._x * other._x + self._y * other._y + self._z * other._z

    def cross_product(self, other: "Vector3D") -> "Vector3D":
        """Векторное произведение (правая тройка)."""
        return Vector3D(
            self._y * other._z - self._z * other._y,
            self._z * other._x - self._x * other._z,
            self._x * other._y - self._y * other._x,
        )

    def angle_between(self, other: "Vector3D") -> float:
        """
        Угол между векторами в радианах, [0, π].

        Косинус ограничивается диапазоном [-1, 1] для защиты acos
        от погрешности округления.

        Raises:
            InvalidOperation: Если длина одного из векторов < 1e-10
        """
        mag1 = self.magnitude()
        mag2 = other.magnitude()
        if is_zero(mag1) or is_zero(mag2):
            raise InvalidOperation("Нельзя вычислить угол с нулевым вектором")

        cos_angle = clamp(self.dot_product(other) / (mag1 * mag2), -1.0, 1.0)
        return math.acos(cos_angle)

    def distance_to(self, other: "Vector3D") -> float:
        return (self - other).magnitude()

    def project_onto(self, other: "Vector3D") -> "Vector3D":
        """
        Проекция на вектор other.

        Raises:
            InvalidOperation: Если |other|² < 1e-10
        """
        other_mag_squared = other.magnitude_squared()
        if is_zero(other_mag_squared):
            raise InvalidOperation("Нельзя проецировать на нулевой вектор")
        return other * (self.dot_product(other) / other_mag_squared)

    # -------------------------------------------------------------------------
    # Предикаты
    # -------------------------------------------------------------------------

    def is_zero(self, eps: float = EPS_VALUE_COMPARE) -> bool:
        return self.magnitude() < eps

    def is_perpendicular(self, other: "Vector3D", eps: float = EPS_VALUE_COMPARE) -> bool:
        return abs(self.dot_product(other)) < eps

    def is_parallel(self, other: "Vector3D", eps: float = EPS_VALUE_COMPARE) -> bool:
        return self.cross_product(other).magnitude() < eps

    # -------------------------------------------------------------------------
    # Представление
    # -------------------------------------------------------------------------

    def to_string(self, config: DisplayConfig = DEFAULT_DISPLAY) -> str:
        parts = ", ".join(format_float(value, config) for value in self)
        return f"({parts})"

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Vector3D({self._x!r}, {self._y!r}, {self._z!r})"
