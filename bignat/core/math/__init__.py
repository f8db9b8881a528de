"""
Core math modules для bignat

Примитивы представления больших натуральных чисел в виде лимбов.
"""

from bignat.core.math.limbs import (
    # Limb constants
    LIMB_BASE,
    LIMB_BITS,
    LIMB_MAX,
    # Types
    Limb,
    # Canonicalization
    is_canonical_limbs,
    strip_trailing_zeros,
    # Numeric interpretation
    int_to_limbs,
    limbs_to_int,
)

__all__ = [
    # Limbs — Constants
    "LIMB_BASE",
    "LIMB_BITS",
    "LIMB_MAX",
    # Limbs — Types
    "Limb",
    # Limbs — Canonicalization
    "is_canonical_limbs",
    "strip_trailing_zeros",
    # Limbs — Numeric interpretation
    "int_to_limbs",
    "limbs_to_int",
]
