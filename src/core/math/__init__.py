"""
Core math modules

Численные примитивы и таксономия ошибок, общие для всех классов библиотеки.
"""

# Exceptions
from src.core.math.exceptions import (
    DivisionByZero,
    InvalidArgument,
    InvalidOperation,
    MathLibraryError,
    OutOfRange,
)

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Epsilon constants
    EPS_VALUE_COMPARE,
    FRACTION_FLOAT_PRECISION_DEFAULT,
    # Epsilon comparisons
    is_close_abs,
    is_valid_float,
    is_zero,
    # Utilities
    clamp,
    round_half_away_from_zero,
    # Integer arithmetic
    gcd,
    lcm,
    # Validation
    validate_non_negative_int,
)

__all__ = [
    # Exceptions
    "MathLibraryError",
    "InvalidArgument",
    "DivisionByZero",
    "OutOfRange",
    "InvalidOperation",
    # Numerical Safeguards — Epsilon constants
    "EPS_VALUE_COMPARE",
    "FRACTION_FLOAT_PRECISION_DEFAULT",
    # Numerical Safeguards — Epsilon comparisons
    "is_close_abs",
    "is_valid_float",
    "is_zero",
    # Numerical Safeguards — Utilities
    "clamp",
    "round_half_away_from_zero",
    # Numerical Safeguards — Integer arithmetic
    "gcd",
    "lcm",
    # Numerical Safeguards — Validation
    "validate_non_negative_int",
]
