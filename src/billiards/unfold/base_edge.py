from __future__ import annotations

from typing import Optional

from ..core.singularity import BaseOrientation, BaseSingularity, BaseValues
from ..core.vector import V2
from .params import Params

B0 = BaseSingularity.B0
B1 = BaseSingularity.B1


class BaseEdge:
    """
    The current base edge of an unfolding, as a walk over `Params`.

    `coords` holds the images of B0 and B1; `orientation` says which of them is
    the pivot side (`from_`) and which the free end (`to`). Each `step` swings
    the free end around itself by a power of that vertex's generator and then
    swaps the roles, so consecutive turns alternate between the two vertices.

    A walk owns its Params until `release()` (or the end of a `with` block);
    starting a second walk on the same Params raises WalkInProgressError.
    """

    def __init__(
        self,
        params: Params,
        coords: BaseValues[V2],
        orientation: BaseOrientation = BaseOrientation.FORWARD,
    ):
        params._acquire(self)
        self.params = params
        # own copy; step writes into it
        self.coords = BaseValues(*(params.field.duplicate(c) for c in coords))
        self.orientation = orientation

    @classmethod
    def new_default(cls, params: Params) -> "BaseEdge":
        """Start on the unit interval (0, 0) -> (1, 0), pointing forward."""
        field = params.field
        return cls(params, BaseValues(V2.zero(field), V2.one(field)), BaseOrientation.FORWARD)

    def release(self) -> None:
        self.params._release(self)

    def __enter__(self) -> "BaseEdge":
        return self

    def __exit__(self, *exc) -> Optional[bool]:
        self.release()
        return None

    def offset(self) -> V2:
        return self.to_coords() - self.from_coords()

    def step(self, turn: int) -> None:
        # no bound check here; see Params.max_turn_around
        turn_vec = self.params.turn_vec(self.to(), turn)
        new_offset = turn_vec * (-self.offset())
        new_to_coords = self.to_coords() + new_offset
        self.orientation = self.orientation.reversed()
        self.coords[self.to()] = new_to_coords

    def left_apex(self) -> V2:
        apex = self.params.apex()
        if self.orientation.from_() == B1:
            apex = apex.complex_conjugate()
        return self._place(apex)

    def right_apex(self) -> V2:
        apex = self.params.apex()
        if self.orientation.from_() == B0:
            apex = apex.complex_conjugate()
        return self._place(apex)

    def _place(self, apex: V2) -> V2:
        # affine image of the apex over the edge, always measured from the B0 slot
        return self.coords[B0] + apex * (self.coords[B1] - self.coords[B0])

    def from_(self) -> BaseSingularity:
        return self.orientation.from_()

    def from_coords(self) -> V2:
        return self.coords[self.orientation.from_()]

    def to(self) -> BaseSingularity:
        return self.orientation.to()

    def to_coords(self) -> V2:
        return self.coords[self.orientation.to()]

    def __repr__(self) -> str:
        return f"BaseEdge({self.coords!r}, {self.orientation.value})"
