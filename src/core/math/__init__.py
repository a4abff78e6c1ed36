"""
Core math modules для Scientific Number Engine

Арифметика над большими беззнаковыми числами в научной нотации
с ограниченной шириной мантиссы.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    # Integer width
    UINT256_MAX,
    UINT_BITS,
    uint_max,
    # Exceptions
    ArithmeticOverflow,
    ArithmeticUnderflow,
    DivisionByZero,
    SciArithmeticError,
    # Checked operations
    checked_add,
    checked_mul,
    checked_sub,
    truncating_div,
    # Powers of ten
    pow10,
    scale_up,
    shift_down,
    # Validation
    validate_uint,
)

# Normalization
from src.core.math.normalization import (
    CONVERSION_CEILING,
    DEFAULT_CONFIG,
    DIVISION_UPSCALE_DIGITS,
    MANTISSA_CEILING,
    NEGLIGIBILITY_CUTOFF,
    ArithmeticConfig,
    from_integer,
    normalize,
    to_integer,
)

# Sci Arithmetic
from src.core.math.sci_arithmetic import (
    Operation,
    add,
    apply_operation,
    div,
    mul,
    sub,
)

__all__ = [
    # Numerical Safeguards — Integer width
    "UINT256_MAX",
    "UINT_BITS",
    "uint_max",
    # Numerical Safeguards — Exceptions
    "ArithmeticOverflow",
    "ArithmeticUnderflow",
    "DivisionByZero",
    "SciArithmeticError",
    # Numerical Safeguards — Checked operations
    "checked_add",
    "checked_mul",
    "checked_sub",
    "truncating_div",
    # Numerical Safeguards — Powers of ten
    "pow10",
    "scale_up",
    "shift_down",
    # Numerical Safeguards — Validation
    "validate_uint",
    # Normalization — Constants
    "CONVERSION_CEILING",
    "DEFAULT_CONFIG",
    "DIVISION_UPSCALE_DIGITS",
    "MANTISSA_CEILING",
    "NEGLIGIBILITY_CUTOFF",
    # Normalization — Types
    "ArithmeticConfig",
    # Normalization — Functions
    "from_integer",
    "normalize",
    "to_integer",
    # Sci Arithmetic — Types
    "Operation",
    # Sci Arithmetic — Functions
    "add",
    "apply_operation",
    "div",
    "mul",
    "sub",
]
