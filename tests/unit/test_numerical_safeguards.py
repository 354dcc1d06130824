"""
Тесты для модуля Numerical Safeguards

Проверяет:
1. Epsilon-сравнения float
2. Ограничение диапазоном (clamp)
3. Округление half away from zero
4. НОД/НОК
5. Валидацию размеров
6. Иерархию исключений
"""

import math

import pytest

from src.core.math import (
    EPS_VALUE_COMPARE,
    FRACTION_FLOAT_PRECISION_DEFAULT,
    DivisionByZero,
    InvalidArgument,
    InvalidOperation,
    MathLibraryError,
    OutOfRange,
    clamp,
    gcd,
    is_close_abs,
    is_valid_float,
    is_zero,
    lcm,
    round_half_away_from_zero,
    validate_non_negative_int,
)

# =============================================================================
# ТЕСТЫ EPSILON-СРАВНЕНИЙ
# =============================================================================


class TestEpsilonConstants:
    """Тесты констант"""

    def test_values(self) -> None:
        """Значения констант зафиксированы"""
        assert EPS_VALUE_COMPARE == 1e-10
        assert FRACTION_FLOAT_PRECISION_DEFAULT == 6


class TestIsZero:
    """Тесты для is_zero"""

    def test_exact_zero(self) -> None:
        assert is_zero(0.0)
        assert is_zero(-0.0)

    def test_below_eps(self) -> None:
        """Значения меньше eps считаются нулём"""
        assert is_zero(1e-11)
        assert is_zero(-1e-11)

    def test_boundary_is_strict(self) -> None:
        """Ровно eps уже не ноль (строгое сравнение)"""
        assert not is_zero(EPS_VALUE_COMPARE)
        assert not is_zero(-EPS_VALUE_COMPARE)

    def test_custom_tolerance(self) -> None:
        assert is_zero(0.05, tol=0.1)
        assert not is_zero(0.5, tol=0.1)


class TestIsCloseAbs:
    """Тесты для is_close_abs"""

    def test_close_values(self) -> None:
        assert is_close_abs(1.0, 1.0 + 1e-12)
        assert is_close_abs(-3.0, -3.0)

    def test_distant_values(self) -> None:
        assert not is_close_abs(1.0, 1.0 + 1e-9)
        assert not is_close_abs(1.0, 2.0)

    def test_symmetry(self) -> None:
        assert is_close_abs(2.0, 2.0 + 5e-11) == is_close_abs(2.0 + 5e-11, 2.0)


class TestIsValidFloat:
    """Тесты для is_valid_float"""

    def test_finite(self) -> None:
        assert is_valid_float(0.0)
        assert is_valid_float(-1e300)

    def test_nan_and_inf(self) -> None:
        assert not is_valid_float(float("nan"))
        assert not is_valid_float(float("inf"))
        assert not is_valid_float(float("-inf"))


# =============================================================================
# ТЕСТЫ УТИЛИТ
# =============================================================================


class TestClamp:
    """Тесты для clamp"""

    def test_inside_range(self) -> None:
        assert clamp(0.5, -1.0, 1.0) == 0.5

    def test_above_and_below(self) -> None:
        assert clamp(1.0000001, -1.0, 1.0) == 1.0
        assert clamp(-1.0000001, -1.0, 1.0) == -1.0

    def test_one_sided(self) -> None:
        assert clamp(-5.0, min_value=0.0) == 0.0
        assert clamp(5.0, max_value=1.0) == 1.0
        assert clamp(5.0) == 5.0


class TestRoundHalfAwayFromZero:
    """Тесты для round_half_away_from_zero"""

    def test_half_cases(self) -> None:
        """Половина округляется от нуля (в отличие от round())"""
        assert round_half_away_from_zero(2.5) == 3
        assert round_half_away_from_zero(-2.5) == -3
        assert round_half_away_from_zero(0.5) == 1
        assert round(2.5) == 2

    def test_regular_cases(self) -> None:
        assert round_half_away_from_zero(2.4) == 2
        assert round_half_away_from_zero(-2.6) == -3
        assert round_half_away_from_zero(0.0) == 0

    def test_returns_int(self) -> None:
        assert isinstance(round_half_away_from_zero(750000.0), int)

    def test_invalid_value_raises(self) -> None:
        with pytest.raises(InvalidArgument):
            round_half_away_from_zero(float("nan"))
        with pytest.raises(InvalidArgument):
            round_half_away_from_zero(math.inf)


class TestGcdLcm:
    """Тесты для gcd и lcm"""

    def test_gcd(self) -> None:
        assert gcd(12, 18) == 6
        assert gcd(-12, 18) == 6
        assert gcd(7, 3) == 1
        assert gcd(0, 5) == 5
        assert gcd(0, 0) == 0

    def test_lcm(self) -> None:
        assert lcm(4, 6) == 12
        assert lcm(-4, 6) == 12
        assert lcm(3, 3) == 3
        assert lcm(0, 6) == 0
        assert lcm(5, 0) == 0
        assert lcm(0, 0) == 0


class TestValidateNonNegativeInt:
    """Тесты для validate_non_negative_int"""

    def test_valid(self) -> None:
        validate_non_negative_int(0, "rows")
        validate_non_negative_int(10, "rows")

    def test_negative_raises(self) -> None:
        with pytest.raises(InvalidArgument, match="rows"):
            validate_non_negative_int(-1, "rows")

    def test_non_int_raises(self) -> None:
        with pytest.raises(InvalidArgument):
            validate_non_negative_int(2.0, "cols")
        with pytest.raises(InvalidArgument):
            validate_non_negative_int(True, "cols")


# =============================================================================
# ТЕСТЫ ИЕРАРХИИ ИСКЛЮЧЕНИЙ
# =============================================================================


class TestExceptionHierarchy:
    """Исключения совместимы со стандартными типами Python"""

    def test_invalid_argument_is_value_error(self) -> None:
        assert issubclass(InvalidArgument, ValueError)
        assert issubclass(InvalidArgument, MathLibraryError)

    def test_division_by_zero(self) -> None:
        """DivisionByZero — частный случай InvalidArgument"""
        assert issubclass(DivisionByZero, InvalidArgument)
        assert issubclass(DivisionByZero, ZeroDivisionError)

    def test_out_of_range_is_index_error(self) -> None:
        assert issubclass(OutOfRange, IndexError)
        assert issubclass(OutOfRange, MathLibraryError)

    def test_invalid_operation_is_arithmetic_error(self) -> None:
        assert issubclass(InvalidOperation, ArithmeticError)
        assert not issubclass(InvalidOperation, InvalidArgument)
