from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from .algebra import Field, FieldElement


@dataclass(frozen=True)
class V2:
    """
    A planar point, or a complex-like value re + i*im.

    `V2 * V2` and `V2 / V2` are the complex product and quotient; multiplying or
    dividing by a bare scalar scales both components.
    """
    re: FieldElement
    im: FieldElement

    @classmethod
    def zero(cls, field: Field) -> "V2":
        return cls(field.zero(), field.zero())

    @classmethod
    def one(cls, field: Field) -> "V2":
        return cls(field.one(), field.zero())

    @classmethod
    def from_real(cls, r: Any) -> "V2":
        return cls(r, r * 0)

    @classmethod
    def coerce(cls, field: Field, re: Any, im: Any) -> "V2":
        return cls(field.coerce(re), field.coerce(im))

    def __add__(self, v: "V2") -> "V2":
        if not isinstance(v, V2):
            return NotImplemented
        return V2(self.re + v.re, self.im + v.im)

    def __sub__(self, v: "V2") -> "V2":
        if not isinstance(v, V2):
            return NotImplemented
        return self + (-v)

    def __neg__(self) -> "V2":
        return V2(-self.re, -self.im)

    def __mul__(self, v: Any) -> "V2":
        if isinstance(v, V2):
            return V2(
                self.re * v.re + (-(self.im * v.im)),
                self.re * v.im + self.im * v.re,
            )
        return V2(self.re * v, self.im * v)

    def __rmul__(self, k: Any) -> "V2":
        return V2(k * self.re, k * self.im)

    def __truediv__(self, v: Any) -> "V2":
        if isinstance(v, V2):
            n = v.squared_norm()
            if n == 0:
                raise ZeroDivisionError("complex division by a zero-norm value")
            p = self * v.complex_conjugate()
            return V2(p.re / n, p.im / n)
        return V2(self.re / v, self.im / v)

    def dot(self, v: "V2") -> Any:
        return self.re * v.re + self.im * v.im

    def squared_norm(self) -> Any:
        return self.dot(self)

    def complex_conjugate(self) -> "V2":
        return V2(self.re, -self.im)

    def to_float(self) -> Tuple[float, float]:
        return float(self.re), float(self.im)

    def __iter__(self):
        yield self.re
        yield self.im

    def __str__(self) -> str:
        return f"({self.re}, {self.im})"
