"""
Contracts Module

Контракты значений bignat: способность к глубокому копированию
и проверка инварианта CANONICAL.
"""

from .duplicable import Duplicable
from .invariants import CanonicalInvariantViolation, ensure_canonical

__all__ = [
    # Protocols
    "Duplicable",
    # Exceptions
    "CanonicalInvariantViolation",
    # Functions
    "ensure_canonical",
]
