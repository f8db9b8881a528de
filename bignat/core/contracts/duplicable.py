"""
Duplicable — контракт глубокого копирования

Тип удовлетворяет контракту, если у него есть метод duplicate(),
возвращающий независимое значение того же типа, равное исходному
и не разделяющее с ним изменяемого состояния.

Контракт структурный (typing.Protocol): наследование не требуется.
"""

from typing import Protocol, TypeVar

_SelfDuplicable = TypeVar("_SelfDuplicable", bound="Duplicable")


class Duplicable(Protocol):
    """Значение, умеющее создавать свою глубокую копию."""

    def duplicate(self: _SelfDuplicable) -> _SelfDuplicable:
        ...
