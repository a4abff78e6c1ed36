"""
Contract Validation Module

Модуль для валидации JSON представления SciNumber на границе сериализации.
"""

from .validators import (
    ContractValidator,
    SchemaLoader,
    SciNumberValidator,
    validate_sci_number,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "SciNumberValidator",
    # Functions
    "validate_sci_number",
]
