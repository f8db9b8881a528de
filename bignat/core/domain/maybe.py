"""
Maybe — опциональное значение: Nothing | Some(value)

Два варианта, ровно один из которых занят. Значения неизменяемы
(frozen dataclass): вариант нельзя переназначить на месте, поэтому
ссылка на payload, полученная через Some.value, остаётся валидной.

Копирование структурное и сохраняет вариант:
- Nothing.duplicate() → Nothing
- Some(v).duplicate() → Some(v.duplicate())

duplicate() у Some доступен только если payload удовлетворяет
контракту Duplicable (ограничение выражено через self-тип).
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from bignat.core.contracts.duplicable import Duplicable

T = TypeVar("T")
V = TypeVar("V")
D = TypeVar("D", bound=Duplicable)


# =============================================================================
# VARIANTS
# =============================================================================


@dataclass(frozen=True)
class Nothing:
    """Пустой вариант."""

    def is_some(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def value_or(self, default: V) -> V:
        return default

    def duplicate(self) -> "Nothing":
        return Nothing()


@dataclass(frozen=True)
class Some(Generic[T]):
    """
    Вариант с payload.

    value — ссылка на payload без передачи владения: вызывающий код
    читает его, но не должен изменять.
    """

    value: T

    def is_some(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def value_or(self, default: object) -> T:
        return self.value

    def duplicate(self: "Some[D]") -> "Some[D]":
        """Some с копией payload, полученной его собственным duplicate()."""
        return Some(self.value.duplicate())


Maybe = Union[Nothing, Some[T]]


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def nothing() -> Nothing:
    return Nothing()


def some(value: T) -> Some[T]:
    return Some(value)
