"""
Core math modules

Беззнаковая арифметика произвольной точности над limbs по основанию 10^9.
"""

# Errors
from src.core.math.errors import (
    BigUIntError,
    BigUIntOverflowError,
    BigUIntRangeError,
    DecimalParseError,
    DivisionByZeroError,
    LimbRangeError,
    NegativeDifferenceError,
    NegativeValueError,
    ZeroToZeroPowerError,
)

# Limb Arithmetic
from src.core.math.limb_arithmetic import (
    # Radix constants
    DIGITS_PER_LIMB,
    HALF_OF_RADIX,
    RADIX,
    TEN,
    # Canonical form
    is_canonical,
    trim,
    validate_limbs,
    # Conversion
    limbs_from_int,
    limbs_to_int,
    # Operations
    add_limbs,
    add_small,
    compare_limbs,
    divmod_small,
    mul_limbs,
    mul_small,
    sub_limbs,
    sub_small,
)

# Long Division (Algorithm D)
from src.core.math.long_division import (
    divmod_limbs,
    estimate_quotient_digit,
    normalization_factor,
)

# Decimal Codec
from src.core.math.decimal_codec import (
    DEFAULT_PARSE_CONFIG,
    ParseConfig,
    format_decimal,
    parse_decimal,
    read_token,
)

__all__ = [
    # Errors
    "BigUIntError",
    "BigUIntRangeError",
    "NegativeValueError",
    "NegativeDifferenceError",
    "LimbRangeError",
    "BigUIntOverflowError",
    "DivisionByZeroError",
    "ZeroToZeroPowerError",
    "DecimalParseError",
    # Limb Arithmetic — Constants
    "RADIX",
    "HALF_OF_RADIX",
    "DIGITS_PER_LIMB",
    "TEN",
    # Limb Arithmetic — Canonical form
    "trim",
    "is_canonical",
    "validate_limbs",
    # Limb Arithmetic — Conversion
    "limbs_from_int",
    "limbs_to_int",
    # Limb Arithmetic — Operations
    "compare_limbs",
    "add_small",
    "add_limbs",
    "sub_small",
    "sub_limbs",
    "mul_small",
    "mul_limbs",
    "divmod_small",
    # Long Division
    "normalization_factor",
    "estimate_quotient_digit",
    "divmod_limbs",
    # Decimal Codec
    "ParseConfig",
    "DEFAULT_PARSE_CONFIG",
    "format_decimal",
    "parse_decimal",
    "read_token",
]
