"""
BigNat — Каноническое большое натуральное число

Число хранится как кортеж 64-битных лимбов, младший первым:

    value = Σ limbs[i] · 2^(64 · i)

Пустой кортеж представляет ноль.

ИНВАРИАНТ CANONICAL: limbs пуст или limbs[-1] ≠ 0.
Хвостовых нулей нет, поэтому равенство кортежей лимбов совпадает
с равенством представляемых чисел.

Конструкторы from_small / from_limbs / from_int всегда возвращают
каноническое значение. Прямой вызов BigNat(limbs=...) канонизацию
не выполняет и предназначен только для тестов нарушений инварианта.
"""

from typing import Iterable

from pydantic import BaseModel, Field, TypeAdapter

from bignat.core.math.limbs import (
    Limb,
    int_to_limbs,
    is_canonical_limbs,
    limbs_to_int,
    strip_trailing_zeros,
)

# Валидатор рабочего буфера лимбов (до фиксации в кортеж)
_LIMB_BUFFER = TypeAdapter(list[Limb])


class BigNat(BaseModel):
    """
    Большое натуральное число произвольной точности.

    Immutable (frozen=True): ссылку limbs переназначить нельзя, а сам
    кортеж лимбов неизменяем, поэтому значение остаётся каноническим
    и хэш стабилен на всё время жизни экземпляра.
    """

    limbs: tuple[Limb, ...] = Field(
        default=(), description="Лимбы little-endian, без хвостовых нулей"
    )

    model_config = {"frozen": True}

    # =========================================================================
    # КОНСТРУКТОРЫ
    # =========================================================================

    @classmethod
    def zero(cls) -> "BigNat":
        """Ноль: пустой кортеж лимбов."""
        return cls()

    @classmethod
    def from_small(cls, x: int) -> "BigNat":
        """
        Число из одного лимба.

        Args:
            x: Значение 0 <= x <= LIMB_MAX

        Returns:
            BigNat с limbs == () при x == 0, иначе (x,)

        Raises:
            ValidationError: Если x не является лимбом
        """
        return cls.from_limbs((x,))

    @classmethod
    def from_limbs(cls, limbs: Iterable[int]) -> "BigNat":
        """
        Канонизация произвольной последовательности лимбов.

        Входная последовательность не изменяется: лимбы валидируются в
        рабочий буфер, хвостовые нули отбрасываются на месте (меняется
        только длина буфера), после чего буфер фиксируется в
        неизменяемый кортеж.

        Args:
            limbs: Лимбы little-endian, допускаются хвостовые нули и пустая последовательность

        Returns:
            Каноническое BigNat с тем же числовым значением

        Raises:
            ValidationError: Если хотя бы один элемент не является лимбом
        """
        buffer = _LIMB_BUFFER.validate_python(list(limbs))
        strip_trailing_zeros(buffer)
        return cls.model_construct(limbs=tuple(buffer))

    @classmethod
    def from_int(cls, value: int) -> "BigNat":
        """
        Число из неотрицательного Python int.

        Raises:
            ValueError: Если value отрицательное или не является int
        """
        return cls(limbs=int_to_limbs(value))

    # =========================================================================
    # ИНВАРИАНТ И КОПИРОВАНИЕ
    # =========================================================================

    def is_canonical(self) -> bool:
        """
        Проверка инварианта CANONICAL.

        Returns:
            True если limbs пуст или последний лимб ненулевой
        """
        return is_canonical_limbs(self.limbs)

    def duplicate(self) -> "BigNat":
        """
        Глубокая копия: новый кортеж с поэлементной копией лимбов.

        Лимбы повторно не валидируются. Пустой кортеж в CPython —
        единственный объект, для нуля копия разделяет его с оригиналом.
        """
        return type(self).model_construct(limbs=tuple(list(self.limbs)))

    # =========================================================================
    # ЧИСЛОВАЯ ИНТЕРПРЕТАЦИЯ
    # =========================================================================

    def to_int(self) -> int:
        """Значение числа как Python int."""
        return limbs_to_int(self.limbs)

    def is_zero(self) -> bool:
        return not self.limbs

    def limb_count(self) -> int:
        return len(self.limbs)
