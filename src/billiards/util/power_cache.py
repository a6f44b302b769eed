from __future__ import annotations

from typing import Any, Generic, List, Optional, TypeVar

T = TypeVar("T")


def one_like(base: Any) -> Any:
    """Multiplicative identity of the same type as `base` (scalar or V2)."""
    from ..core.vector import V2

    if isinstance(base, V2):
        return V2.from_real(base.re ** 0)
    return base ** 0


class PowerCache(Generic[T]):
    """
    Ascending powers of a fixed base, realised lazily and never recomputed.

    powers[0] is the multiplicative identity and powers[1] the base itself.
    """

    def __init__(self, base: T, one: Optional[T] = None):
        self.base = base
        self._powers: List[T] = [one_like(base) if one is None else one, base]

    def get(self, degree: int) -> T:
        if degree < 0:
            raise ValueError(f"degree must be non-negative, got {degree}")
        while len(self._powers) <= degree:
            self._powers.append(self._powers[-1] * self.base)
        return self._powers[degree]

    def __len__(self) -> int:
        """Number of powers realised so far."""
        return len(self._powers)

    def __repr__(self) -> str:
        return f"PowerCache(base={self.base!r}, realised={len(self._powers)})"
