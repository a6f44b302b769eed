"""
billiards.unfold.validity
-------------------------
Decide whether a fixed turn sequence can be realised by a straight line
through the unfolded copies of a triangle.

Walking the sequence collects the vertices that must lie on each side of the
unfolded trajectory: the left and right apex images of every edge visited,
plus each pivot vertex, placed on the side its turn bends away from (a
positive turn bends right and keeps the pivot on the left). The sequence is
realisable when the two clouds are strictly separated along the normal of the
chord joining the first and last left-side points.

With the exact field every comparison here is decidable.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field as dc_field
from typing import Iterable, Iterator, List, Optional, Sequence

from ..core.algebra import Field
from ..core.vector import V2
from .base_edge import BaseEdge
from .params import Params
from .turns import Turn

log = logging.getLogger(__name__)


@dataclass
class Unfolding:
    left: List[V2] = dc_field(default_factory=list)
    right: List[V2] = dc_field(default_factory=list)
    turns: List[Turn] = dc_field(default_factory=list)
    complete: bool = True
    aborted_at: Optional[int] = None


def unfold(params: Params, turns: Sequence[int]) -> Unfolding:
    """
    Walk `turns` from the default base edge, stopping at the first turn whose
    size exceeds the bound of the vertex it pivots around.
    """
    out = Unfolding()
    with BaseEdge.new_default(params) as edge:
        out.left.append(edge.left_apex())
        out.right.append(edge.right_apex())

        for i, t in enumerate(turns):
            around = edge.to()
            if abs(t) > params.max_turn_around(around):
                out.complete = False
                out.aborted_at = i
                return out

            edge.step(t)
            out.turns.append(Turn(around=around, degree=t))

            pivot = edge.from_coords()
            if t > 0:
                out.left.append(pivot)
            elif t < 0:
                out.right.append(pivot)

            out.left.append(edge.left_apex())
            out.right.append(edge.right_apex())
    return out


def is_separated(u: Unfolding) -> bool:
    """True when every left point lies strictly beyond every right point along the chord normal."""
    chord = u.left[-1] - u.left[0]
    normal = V2(-chord.im, chord.re)
    lo = min(normal.dot(p) for p in u.left)
    hi = max(normal.dot(p) for p in u.right)
    return lo > hi


def is_valid(apex: V2, turns: Sequence[int], *, field: Optional[Field] = None) -> bool:
    turns = tuple(turns)
    limit = max((abs(t) for t in turns), default=0)
    params = Params(apex, field=field, turn_limit=limit)

    u = unfold(params, turns)
    if not u.complete:
        log.debug("apex %s: turn %d exceeds bound, excluded", apex, u.aborted_at)
        return False
    return is_separated(u)


def filter_valid(points: Iterable[V2], turns: Sequence[int], *, field: Optional[Field] = None) -> Iterator[V2]:
    turns = tuple(turns)
    for p in points:
        if is_valid(p, turns, field=field):
            yield p
