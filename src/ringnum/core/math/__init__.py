"""
Core math modules для ringnum

Строковая арифметика неограниченной точности, на которой построена
конвертация систем счисления.
"""

from ringnum.core.math.decimal_arithmetic import (
    ZERO,
    add_small,
    divmod_small,
    is_decimal_string,
    multiply_small,
    strip_leading_zeros,
    validate_decimal_string,
)

__all__ = [
    # Constants
    "ZERO",
    # Validation
    "is_decimal_string",
    "validate_decimal_string",
    "strip_leading_zeros",
    # Arithmetic
    "add_small",
    "multiply_small",
    "divmod_small",
]
