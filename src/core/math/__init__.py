"""
Core math modules

Целочисленные примитивы numeric pipeline: parity filter, squaring,
обобщённая сумма и явные политики переполнения.
"""

# Integral Ops
from src.core.math.integral_ops import (
    # Width constants
    DEFAULT_INTEGER_BITS,
    DIRECT_STR_MAX_BITS,
    INT32_MAX,
    INT32_MIN,
    # Exceptions
    IntegerOverflowError,
    # Types
    OverflowPolicy,
    # Validation
    is_integral,
    validate_bits,
    validate_integral,
    # Width helpers
    apply_overflow_policy,
    fits_in_width,
    int_bounds,
    saturate_to_width,
    to_decimal_str,
    wrap_to_width,
)

# Sequence Ops
from src.core.math.sequence_ops import (
    filter_even,
    is_even,
    iter_even,
    iter_squares,
    square_all,
    sum_integral,
)

__all__ = [
    # Integral Ops — Constants
    "DEFAULT_INTEGER_BITS",
    "DIRECT_STR_MAX_BITS",
    "INT32_MAX",
    "INT32_MIN",
    # Integral Ops — Exceptions
    "IntegerOverflowError",
    # Integral Ops — Types
    "OverflowPolicy",
    # Integral Ops — Validation
    "is_integral",
    "validate_bits",
    "validate_integral",
    # Integral Ops — Width helpers
    "apply_overflow_policy",
    "fits_in_width",
    "int_bounds",
    "saturate_to_width",
    "to_decimal_str",
    "wrap_to_width",
    # Sequence Ops
    "filter_even",
    "is_even",
    "iter_even",
    "iter_squares",
    "square_all",
    "sum_integral",
]
