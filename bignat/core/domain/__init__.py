"""
Domain models and value objects.

Contains the canonical big natural number and the optional value carrier.
"""

from bignat.core.domain.big_nat import BigNat
from bignat.core.domain.maybe import Maybe, Nothing, Some, nothing, some

__all__ = [
    # BigNat model
    "BigNat",
    # Maybe carrier
    "Maybe",
    "Nothing",
    "Some",
    "nothing",
    "some",
]
