"""
Core value type, numerical primitives, and contracts.

This module contains the scientific-notation number engine: the SciNumber
value type, checked fixed-width integer primitives, normalization, and the
four arithmetic operations. No I/O and no shared state.
"""
