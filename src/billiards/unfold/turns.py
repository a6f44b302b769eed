from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from ..core.singularity import BaseSingularity

_TURN_RE = re.compile(r"^[+-]?\d+$")


@dataclass(frozen=True)
class Turn:
    # The base vertex this turn rotates around.
    around: BaseSingularity

    # Exponent relative to the vertex's rotation generator; the sign picks
    # the rotational sense.
    degree: int


def parse_turns(s: str) -> Tuple[int, ...]:
    """Parse a comma separated list of signed integers such as "1,-2,3"."""
    parts = [x.strip() for x in s.split(",") if x.strip()]
    out = []
    for x in parts:
        if not _TURN_RE.match(x):
            raise ValueError(f"bad turn {x!r}: expected a signed integer")
        out.append(int(x))
    return tuple(out)
