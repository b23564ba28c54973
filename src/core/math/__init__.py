"""
Core math modules

Точные дроби над десятичной областью и связанные примитивы.
"""

# Decimal Domain
from src.core.math.decimal_domain import (
    DECIMAL_CONTEXT,
    DECIMAL_MAX,
    DECIMAL_MIN,
    DECIMAL_PRECISION,
    DECIMAL_ROUNDING,
    FRACTION_RADIX,
    FRACTION_SEPARATOR,
    NAN_TEXT,
    clamp_decimal,
    format_decimal,
    in_domain,
    is_integral,
    round_half_even,
    safe_divide,
    to_decimal,
    truncate,
)

# Factors
from src.core.math.factors import factors_of, shared_factors_of

# Fraction
from src.core.math.fraction import (
    FRACTION_TEXT_PATTERN,
    Fraction,
    FractionError,
    InvalidComparand,
    MalformedInput,
    UnsupportedConversion,
)

# Classification
from src.core.math.classification import (
    abs_fraction,
    is_canonical,
    is_complex_number,
    is_even_integer,
    is_finite,
    is_imaginary_number,
    is_infinity,
    is_integer,
    is_nan,
    is_negative,
    is_negative_infinity,
    is_normal,
    is_odd_integer,
    is_positive,
    is_positive_infinity,
    is_real_number,
    is_subnormal,
    is_zero,
    max_magnitude,
    max_magnitude_number,
    min_magnitude,
    min_magnitude_number,
)

# Conversions
from src.core.math.conversions import (
    FLOAT_MAX,
    INTEGER_BOUNDS,
    NumericKind,
    convert_from_checked,
    convert_from_saturating,
    convert_from_truncating,
    convert_to_checked,
    convert_to_saturating,
    convert_to_truncating,
    kind_of,
    try_convert_from_checked,
    try_convert_from_saturating,
    try_convert_from_truncating,
    try_convert_to_checked,
    try_convert_to_saturating,
    try_convert_to_truncating,
)

__all__ = [
    # Decimal Domain — Constants
    "DECIMAL_CONTEXT",
    "DECIMAL_MAX",
    "DECIMAL_MIN",
    "DECIMAL_PRECISION",
    "DECIMAL_ROUNDING",
    "FRACTION_RADIX",
    "FRACTION_SEPARATOR",
    "NAN_TEXT",
    # Decimal Domain — Functions
    "clamp_decimal",
    "format_decimal",
    "in_domain",
    "is_integral",
    "round_half_even",
    "safe_divide",
    "to_decimal",
    "truncate",
    # Factors
    "factors_of",
    "shared_factors_of",
    # Fraction — Types
    "FRACTION_TEXT_PATTERN",
    "Fraction",
    # Fraction — Exceptions
    "FractionError",
    "InvalidComparand",
    "MalformedInput",
    "UnsupportedConversion",
    # Classification
    "abs_fraction",
    "is_canonical",
    "is_complex_number",
    "is_even_integer",
    "is_finite",
    "is_imaginary_number",
    "is_infinity",
    "is_integer",
    "is_nan",
    "is_negative",
    "is_negative_infinity",
    "is_normal",
    "is_odd_integer",
    "is_positive",
    "is_positive_infinity",
    "is_real_number",
    "is_subnormal",
    "is_zero",
    "max_magnitude",
    "max_magnitude_number",
    "min_magnitude",
    "min_magnitude_number",
    # Conversions — Types
    "FLOAT_MAX",
    "INTEGER_BOUNDS",
    "NumericKind",
    # Conversions — Functions
    "convert_from_checked",
    "convert_from_saturating",
    "convert_from_truncating",
    "convert_to_checked",
    "convert_to_saturating",
    "convert_to_truncating",
    "kind_of",
    "try_convert_from_checked",
    "try_convert_from_saturating",
    "try_convert_from_truncating",
    "try_convert_to_checked",
    "try_convert_to_saturating",
    "try_convert_to_truncating",
]
