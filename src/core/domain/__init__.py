"""
Domain models and value objects.

Contains the rational number value type.
"""

from src.core.domain.rational import (
    DEFAULT_DENOMINATOR,
    BasicRational,
    Rational,
    RationalDomainError,
)

__all__ = [
    "DEFAULT_DENOMINATOR",
    "BasicRational",
    "Rational",
    "RationalDomainError",
]
