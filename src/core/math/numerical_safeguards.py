"""
Numerical Safeguards — Safe Math Primitives

Модуль содержит общие численные примитивы для всех классов библиотеки:
- Единый epsilon для сравнений float и проверок «почти ноль»
- Epsilon-сравнения (абсолютная толерантность)
- Ограничение значения диапазоном (clamp)
- Округление «half away from zero» (как std::round)
- Целочисленные НОД/НОК для сокращения дробей
- Валидация размеров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Все типы используют один и тот же EPS_VALUE_COMPARE (1e-10)
2. Сравнение с нулём строгое: abs(x) < eps
3. Все операции детерминированы и не имеют побочных эффектов
"""

import math
from typing import Final

from src.core.math.exceptions import InvalidArgument

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float компонентов (Complex, Vector3D, Matrix)
# и для детекции делителя, близкого к нулю
EPS_VALUE_COMPARE: Final[float] = 1e-10

# Точность по умолчанию для Fraction.from_float (десятичных знаков)
FRACTION_FLOAT_PRECISION_DEFAULT: Final[int] = 6


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_zero(value: float, tol: float = EPS_VALUE_COMPARE) -> bool:
    """
    Проверка, близко ли значение к нулю.

    Args:
        value: Проверяемое значение
        tol: Абсолютная толерантность (default: EPS_VALUE_COMPARE)

    Returns:
        True если abs(value) < tol

    Examples:
        >>> is_zero(1e-11)
        True
        >>> is_zero(1e-10)
        False
    """
    return abs(value) < tol


def is_close_abs(a: float, b: float, tol: float = EPS_VALUE_COMPARE) -> bool:
    """
    Сравнение двух float по абсолютной разнице.

    Args:
        a: Первое значение
        b: Второе значение
        tol: Абсолютная толерантность (default: EPS_VALUE_COMPARE)

    Returns:
        True если abs(a - b) < tol
    """
    return abs(a - b) < tol


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Args:
        value: Исходное значение
        min_value: Минимальное допустимое значение (optional)
        max_value: Максимальное допустимое значение (optional)

    Returns:
        Значение, ограниченное диапазоном [min_value, max_value]

    Examples:
        >>> clamp(1.0000000002, -1.0, 1.0)
        1.0
        >>> clamp(-1.5, -1.0, 1.0)
        -1.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def round_half_away_from_zero(value: float) -> int:
    """
    Округление до ближайшего целого, половина — от нуля.

    Встроенный round() использует banker's rounding (2.5 → 2),
    здесь 2.5 → 3 и -2.5 → -3.

    Raises:
        InvalidArgument: Если value равно NaN/Inf

    Examples:
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
    """
    if not is_valid_float(value):
        raise InvalidArgument(f"Нельзя округлить невалидное значение: {value}")

    if value >= 0:
        return math.floor(value + 0.5)
    return math.ceil(value - 0.5)


# =============================================================================
# ЦЕЛОЧИСЛЕННАЯ АРИФМЕТИКА
# =============================================================================


def gcd(a: int, b: int) -> int:
    """
    Наибольший общий делитель по абсолютным значениям.

    gcd(0, 0) == 0.
    """
    return math.gcd(a, b)


def lcm(a: int, b: int) -> int:
    """
    Наименьшее общее кратное по абсолютным значениям.

    lcm(a, 0) == lcm(0, b) == 0.
    """
    return math.lcm(a, b)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative_int(value: int, name: str) -> None:
    """
    Валидация размера: целое неотрицательное число.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        InvalidArgument: Если value не int или value < 0
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} должно быть целым числом, получено {value!r}")

    if value < 0:
        raise InvalidArgument(f"{name} не может быть отрицательным, получено {value}")
