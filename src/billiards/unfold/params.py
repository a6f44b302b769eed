"""
billiards.unfold.params
-----------------------
Cached invariants for one explicit apex.

The triangle has base vertices B0 = (0, 0) and B1 = (1, 0) and apex `apex`.
Rotating an edge around a base vertex by twice that vertex's angle is the
composition of the two reflections in the triangle's edges meeting there, so
each vertex gets a unit-modulus generator:

  g0 = (e0 / |e0|)^2           e0 = apex - B0
  g1 = conj((e1 / |e1|)^2)     e1 = B1 - apex

Both computed without square roots as e*e / |e|^2. A run of n same-direction
turns around a vertex is only meaningful while g^n still points strictly into
the upper half plane; the largest such n is the vertex's turn bound.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

from ..core.algebra import Field, field_of
from ..core.errors import DegenerateGeometryError, WalkInProgressError
from ..core.singularity import BaseSingularity, BaseValues
from ..core.vector import V2
from ..util.power_cache import PowerCache

log = logging.getLogger(__name__)

B0 = BaseSingularity.B0
B1 = BaseSingularity.B1


class Params:
    """
    Rotation generators and turn bounds for an apex over a fixed field.

    turn_limit:
        Optional ceiling for the bound scan. Apexes close to the base have
        very large bounds; callers that only care whether a given turn fits
        can stop scanning once the bound reaches that turn.
    """

    def __init__(self, apex: V2, *, field: Optional[Field] = None, turn_limit: Optional[int] = None):
        if field is None:
            field = field_of(apex.re, apex.im)
        self.field = field
        apex = V2.coerce(field, apex.re, apex.im)

        bases = BaseValues(V2.zero(field), V2.one(field))
        left_edge = apex - bases[B0]
        right_edge = bases[B1] - apex
        left_norm = field.squared_norm(left_edge.re) + field.squared_norm(left_edge.im)
        right_norm = field.squared_norm(right_edge.re) + field.squared_norm(right_edge.im)
        zero = field.zero()
        if field.equals(left_norm, zero) or field.equals(right_norm, zero):
            raise DegenerateGeometryError(f"apex {apex} coincides with a base vertex")

        left_factor = left_edge * left_edge / V2.from_real(left_norm)
        right_factor = (right_edge * right_edge / V2.from_real(right_norm)).complex_conjugate()

        one = V2.one(field)
        self._apex = apex
        self._rotations = BaseValues(PowerCache(left_factor, one), PowerCache(right_factor, one))
        self._max_turns = BaseValues(
            self._scan_max_turns(B0, turn_limit),
            self._scan_max_turns(B1, turn_limit),
        )
        self._walker: Any = None
        log.debug("params apex=%s field=%s max_turns=%s", apex, field.name, tuple(self._max_turns))

    def _scan_max_turns(self, around: BaseSingularity, limit: Optional[int]) -> int:
        n = 0
        while limit is None or n < limit:
            if not self._rotations[around].get(n + 1).im > 0:
                break
            n += 1
        return n

    def apex(self) -> V2:
        return self._apex

    def turn_vec(self, around: BaseSingularity, by: int) -> V2:
        """Rotation for `by` elementary turns around a base vertex; negative turns conjugate."""
        if by < 0:
            return self._rotations[around].get(-by).complex_conjugate()
        return self._rotations[around].get(by)

    def max_turn_around(self, around: BaseSingularity) -> int:
        return self._max_turns[around]

    # -------- single-walk ownership --------
    def _acquire(self, walker: Any) -> None:
        if self._walker is not None and self._walker is not walker:
            raise WalkInProgressError("these Params already have an active walk; release it first")
        self._walker = walker

    def _release(self, walker: Any) -> None:
        if self._walker is walker:
            self._walker = None

    @property
    def busy(self) -> bool:
        return self._walker is not None

    def __repr__(self) -> str:
        return f"Params(apex={self._apex}, field={self.field.name}, max_turns={tuple(self._max_turns)})"
