"""
billiards.core.algebra
----------------------
Capability contracts for the scalar field underlying every planar value.

Arithmetic itself goes through Python's numeric operators; a `Field` object
supplies what the operators cannot: the identities, coercion of user input,
and the squared norm. Two fields exist and are never mixed inside one walk:

  RATIONAL  exact, backed by fractions.Fraction (sign tests are decidable)
  FLOAT     binary64 approximation, useful for quick previews only
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Any, Callable, Protocol

from .errors import FieldMismatchError


class FieldElement(Protocol):
    """Operator capabilities a scalar must have to be used inside `V2`."""

    def __add__(self, other: Any) -> Any: ...
    def __sub__(self, other: Any) -> Any: ...
    def __neg__(self) -> Any: ...
    def __mul__(self, other: Any) -> Any: ...
    def __truediv__(self, other: Any) -> Any: ...
    def __eq__(self, other: object) -> bool: ...


@dataclass(frozen=True)
class Field:
    name: str
    kind: type
    exact: bool
    _coerce: Callable[[Any], Any]

    def zero(self) -> Any:
        return self.kind(0)

    def one(self) -> Any:
        return self.kind(1)

    def coerce(self, x: Any) -> Any:
        """Convert an int, str or same-kind value into an element of this field."""
        if isinstance(x, bool):
            raise TypeError("bool is not a field element")
        if isinstance(x, str):
            return self._coerce(x.strip())
        if not isinstance(x, (int, self.kind)):
            if isinstance(x, (float, Fraction)):
                raise FieldMismatchError(f"{type(x).__name__} value {x!r} cannot enter the {self.name} field")
            raise TypeError(f"unsupported scalar type {type(x).__name__}")
        return self._coerce(x)

    def squared_norm(self, x: Any) -> Any:
        return x * x

    def equals(self, a: Any, b: Any) -> bool:
        return a == b

    def duplicate(self, a: Any) -> Any:
        # elements are immutable
        return a

    def __repr__(self) -> str:
        return f"Field({self.name})"


RATIONAL = Field(name="rational", kind=Fraction, exact=True, _coerce=Fraction)
FLOAT = Field(name="float", kind=float, exact=False, _coerce=float)


def field_of(*values: Any) -> Field:
    """
    Select the field for a group of concrete scalars.

    Plain ints are neutral; Fractions select RATIONAL and floats select FLOAT.
    A group containing both Fractions and floats is rejected.
    """
    saw_fraction = False
    saw_float = False
    for v in values:
        if isinstance(v, bool):
            raise TypeError("bool is not a field element")
        if isinstance(v, float):
            saw_float = True
        elif isinstance(v, Fraction):
            saw_fraction = True
        elif not isinstance(v, int):
            raise TypeError(f"unsupported scalar type {type(v).__name__}")

    if saw_float and saw_fraction:
        raise FieldMismatchError("cannot mix float and Fraction values")
    return FLOAT if saw_float else RATIONAL
