"""
bignat — arbitrary-precision natural numbers as canonical 64-bit limb sequences.
"""

from bignat.core.contracts import CanonicalInvariantViolation, Duplicable, ensure_canonical
from bignat.core.domain import BigNat, Maybe, Nothing, Some, nothing, some
from bignat.core.math import LIMB_BITS

__all__ = [
    "LIMB_BITS",
    "BigNat",
    "Maybe",
    "Nothing",
    "Some",
    "nothing",
    "some",
    "Duplicable",
    "CanonicalInvariantViolation",
    "ensure_canonical",
]
