"""
Vertex labels of the fundamental quadrilateral.

For an obtuse triangle we label the base vertices B0 and B1 and the apex A0,
then reflect through the base to get the conjugate apex A1. The oriented
(counter-clockwise) quadrilateral is B0-A1-B1-A0; the original triangle is
B0-B1-A0. Only the base vertices carry walk state.
"""
from __future__ import annotations

from enum import Enum
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


class BaseSingularity(Enum):
    B0 = 0
    B1 = 1


class ApexSingularity(Enum):
    A0 = 0
    A1 = 1


class Singularity(Enum):
    B0 = "B0"
    B1 = "B1"
    A0 = "A0"
    A1 = "A1"

    @classmethod
    def of(cls, s: "BaseSingularity | ApexSingularity") -> "Singularity":
        return cls(s.name)


class BaseOrientation(Enum):
    # "forward" means from B0 to B1
    FORWARD = "forward"
    BACKWARD = "backward"

    def from_(self) -> BaseSingularity:
        return BaseSingularity.B0 if self is BaseOrientation.FORWARD else BaseSingularity.B1

    def to(self) -> BaseSingularity:
        return BaseSingularity.B1 if self is BaseOrientation.FORWARD else BaseSingularity.B0

    def reversed(self) -> "BaseOrientation":
        return BaseOrientation.BACKWARD if self is BaseOrientation.FORWARD else BaseOrientation.FORWARD


class BaseValues(Generic[T]):
    """A pair of values indexed by base vertex."""

    __slots__ = ("_values",)

    def __init__(self, v0: T, v1: T):
        self._values = [v0, v1]

    def __getitem__(self, s: BaseSingularity) -> T:
        return self._values[s.value]

    def __setitem__(self, s: BaseSingularity, v: T) -> None:
        self._values[s.value] = v

    def with_value(self, s: BaseSingularity, v: T) -> "BaseValues[T]":
        out = BaseValues(*self._values)
        out[s] = v
        return out

    def __iter__(self) -> Iterator[T]:
        return iter(tuple(self._values))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseValues):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        return f"BaseValues({self._values[0]!r}, {self._values[1]!r})"
