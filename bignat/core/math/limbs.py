"""
Limbs — примитивы работы с последовательностью лимбов

Лимб — беззнаковое целое фиксированной ширины LIMB_BITS.
Последовательность лимбов хранится little-endian: индекс 0 — младший лимб.

Модуль содержит единственную процедуру канонизации (удаление хвостовых нулей)
и числовую интерпретацию последовательности:

    value = Σ limbs[i] · 2^(LIMB_BITS · i)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Каноническая последовательность пуста (ноль) или её последний лимб ≠ 0
2. strip_trailing_zeros — единственное место, где удаляются хвостовые нули
3. Канонизация не меняет представляемое число
"""

from typing import Annotated, Final, Iterable, Sequence

from pydantic import Field, StrictInt

# =============================================================================
# ПАРАМЕТРЫ ЛИМБА
# =============================================================================

# Ширина лимба в битах
LIMB_BITS: Final[int] = 64

# Основание системы счисления лимбов (2^64)
LIMB_BASE: Final[int] = 1 << LIMB_BITS

# Максимальное значение одного лимба (2^64 - 1)
LIMB_MAX: Final[int] = LIMB_BASE - 1

# Тип лимба: строго int (bool/str/float отклоняются), 0 <= x <= LIMB_MAX
Limb = Annotated[StrictInt, Field(ge=0, le=LIMB_MAX)]


# =============================================================================
# КАНОНИЗАЦИЯ
# =============================================================================


def strip_trailing_zeros(limbs: list[int]) -> list[int]:
    """
    Удаление хвостовых нулевых лимбов на месте.

    Пока последовательность не пуста и последний лимб равен нулю,
    последний лимб отбрасывается. Новый буфер не выделяется — меняется
    только длина списка.

    Args:
        limbs: Список лимбов (изменяется на месте)

    Returns:
        Тот же самый список (для удобства цепочек)

    Examples:
        >>> strip_trailing_zeros([7, 3, 3, 1, 0, 0])
        [7, 3, 3, 1]
        >>> strip_trailing_zeros([0, 0, 0])
        []
    """
    while limbs and limbs[-1] == 0:
        limbs.pop()
    return limbs


def is_canonical_limbs(limbs: Sequence[int]) -> bool:
    """
    Проверка канонической формы: пусто или последний лимб ненулевой.

    Args:
        limbs: Последовательность лимбов

    Returns:
        True если последовательность каноническая
    """
    return len(limbs) == 0 or limbs[-1] != 0


# =============================================================================
# ЧИСЛОВАЯ ИНТЕРПРЕТАЦИЯ
# =============================================================================


def limbs_to_int(limbs: Iterable[int]) -> int:
    """
    Значение последовательности лимбов как Python int.

    Хвостовые нули допускаются и не влияют на результат.

    Args:
        limbs: Лимбы, младший первым

    Returns:
        Σ limbs[i] · 2^(LIMB_BITS · i)
    """
    value = 0
    for i, limb in enumerate(limbs):
        value |= limb << (LIMB_BITS * i)
    return value


def int_to_limbs(value: int) -> list[int]:
    """
    Разложение неотрицательного int на канонические лимбы.

    Args:
        value: Неотрицательное целое

    Returns:
        Каноническая последовательность лимбов (пустая для нуля)

    Raises:
        ValueError: Если value не int (bool тоже отклоняется) или отрицательное
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(
            f"Cannot represent non-integer value as limbs: {value!r} "
            f"({type(value).__name__})"
        )

    if value < 0:
        raise ValueError(f"Cannot represent negative value as limbs: {value}")

    limbs: list[int] = []
    while value:
        limbs.append(value & LIMB_MAX)
        value >>= LIMB_BITS
    return limbs
