"""
Тесты для Maybe (Nothing | Some)

Проверяет:
1. Конструкторы и различение вариантов
2. Доступ к payload без передачи владения
3. Структурное копирование с сохранением варианта
4. Композицию Maybe[BigNat]
5. Immutability (frozen=True)
"""

import pytest

from bignat.core.contracts import Duplicable
from bignat.core.domain import BigNat, Maybe, Nothing, Some, nothing, some


class TestVariants:
    """Тесты конструкторов и различения"""

    def test_nothing(self) -> None:
        m = nothing()
        assert isinstance(m, Nothing)
        assert m.is_nothing()
        assert not m.is_some()

    def test_some(self) -> None:
        m = some(BigNat.from_small(7))
        assert isinstance(m, Some)
        assert m.is_some()
        assert not m.is_nothing()

    def test_payload_is_borrowed(self) -> None:
        """value отдаёт сам payload, а не копию"""
        payload = BigNat.from_small(7)
        m = some(payload)
        assert m.value is payload

    def test_value_or(self) -> None:
        fallback = BigNat.zero()
        assert nothing().value_or(fallback) is fallback
        assert some(BigNat.from_small(3)).value_or(fallback) == BigNat.from_small(3)

    def test_nothing_value_or_returns_default_of_any_type(self) -> None:
        """Nothing не параметризован: тип результата задаёт default"""
        assert nothing().value_or(0) == 0
        assert nothing().value_or("empty") == "empty"
        assert nothing().value_or(None) is None

    def test_pattern_matching(self) -> None:
        def describe(m: Maybe[BigNat]) -> str:
            match m:
                case Some(value):
                    return f"some:{value.to_int()}"
                case Nothing():
                    return "nothing"
            return "unreachable"

        assert describe(some(BigNat.from_small(9))) == "some:9"
        assert describe(nothing()) == "nothing"

    def test_variants_are_frozen(self) -> None:
        """Immutability (frozen=True): вариант нельзя переназначить на месте"""
        m = some(BigNat.from_small(1))
        with pytest.raises(Exception):  # FrozenInstanceError
            m.value = BigNat.from_small(2)  # type: ignore[misc]


class TestDuplicate:
    """Тесты структурного копирования"""

    def test_nothing_duplicates_to_nothing(self) -> None:
        """S7: nothing().duplicate() → Nothing"""
        dup = nothing().duplicate()
        assert isinstance(dup, Nothing)
        assert dup == nothing()

    def test_some_bignat_roundtrip(self) -> None:
        """S7: some(from_small(42)).duplicate() → Some(from_small(42))"""
        original = some(BigNat.from_small(42))
        dup = original.duplicate()
        assert isinstance(dup, Some)
        assert dup.value == BigNat.from_small(42)
        assert dup == original

    def test_payload_duplicated_not_moved(self) -> None:
        """Payload копируется своим duplicate(), оригинал остаётся на месте"""
        payload = BigNat.from_limbs((5, 0, 9))
        original = some(payload)
        dup = original.duplicate()

        assert original.value is payload
        assert dup.value is not payload
        assert dup.value.limbs is not payload.limbs
        assert dup.value == payload
        assert payload.limbs == (5, 0, 9)

    def test_nested_maybe(self) -> None:
        """Maybe[Maybe[BigNat]] копируется рекурсивно"""
        inner = some(BigNat.from_small(11))
        outer = some(inner)
        dup = outer.duplicate()
        assert dup == outer
        assert dup.value is not inner
        assert dup.value.value is not inner.value

    def test_bignat_satisfies_duplicable(self) -> None:
        def clone_twice(value: Duplicable) -> Duplicable:
            return value.duplicate().duplicate()

        nat = BigNat.from_small(5)
        assert clone_twice(nat) == nat
        assert clone_twice(some(nat)) == some(nat)
        assert clone_twice(nothing()) == nothing()
