"""
Domain models and value objects.

Contains the SciNumber value type (mantissa × 10^exponent).
"""

from src.core.domain.sci_number import MAGNITUDE_EXPONENT_LIMIT, UINT256_MAX, SciNumber

__all__ = [
    "MAGNITUDE_EXPONENT_LIMIT",
    "UINT256_MAX",
    "SciNumber",
]
