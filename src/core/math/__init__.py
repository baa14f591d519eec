"""
Core math modules

Capability-предикаты, fixed-width типы представления и generic
числовые примитивы (absolute, gcd, lcm).
"""

# Type Traits
from src.core.math.type_traits import (
    CapabilityError,
    is_convertible,
    is_integral,
    is_lessthan_comparable,
    is_negatable,
    is_signed,
    require_capabilities,
    require_integral,
)

# Fixed-width integral representations
from src.core.math.integral import (
    INTMAX_BITS,
    SUPPORTED_WIDTHS,
    FixedWidthInteger,
    Int8,
    Int16,
    Int32,
    Int64,
    IntegralSpec,
    IntMax,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    UIntMax,
    common_type,
    make_integral,
)

# Numeric primitives
from src.core.math.numeric import absolute, gcd, lcm

__all__ = [
    # Type Traits — Exceptions
    "CapabilityError",
    # Type Traits — Predicates
    "is_convertible",
    "is_integral",
    "is_lessthan_comparable",
    "is_negatable",
    "is_signed",
    # Type Traits — Guards
    "require_capabilities",
    "require_integral",
    # Integral — Constants
    "INTMAX_BITS",
    "SUPPORTED_WIDTHS",
    # Integral — Types
    "FixedWidthInteger",
    "IntegralSpec",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "IntMax",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "UIntMax",
    # Integral — Functions
    "common_type",
    "make_integral",
    # Numeric — Functions
    "absolute",
    "gcd",
    "lcm",
]
