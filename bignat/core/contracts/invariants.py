"""
Invariants — эскалация нарушений инварианта CANONICAL

BigNat.is_canonical() — чистый предикат. Здесь он превращается в
исключение для точек, где нарушение считается ошибкой программиста
(тесты, отладочные проверки, границы модулей арифметики).
"""

import logging

from bignat.core.domain.big_nat import BigNat

logger = logging.getLogger(__name__)


class CanonicalInvariantViolation(Exception):
    """
    Обнаружено BigNat с хвостовым нулевым лимбом.

    Достижимо только прямым созданием BigNat(limbs=...) в обход
    конструкторов либо мутатором, не восстановившим инвариант.
    """

    pass


def ensure_canonical(nat: BigNat) -> BigNat:
    """
    Проверка инварианта CANONICAL.

    Args:
        nat: Проверяемое число

    Returns:
        nat без изменений, если инвариант выполнен

    Raises:
        CanonicalInvariantViolation: Если последний лимб равен нулю
    """
    if nat.is_canonical():
        return nat

    logger.error(
        "BigNat canonical invariant violated: %d limbs, trailing limb is zero",
        nat.limb_count(),
    )
    raise CanonicalInvariantViolation(
        f"BigNat with {nat.limb_count()} limbs has a trailing zero limb "
        f"(canonical_invariant_violation)"
    )
