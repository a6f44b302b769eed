"""billiards public API.

Keep this surface small: exact planar values, the rotation parameters of an
apex, the base-edge walker and the validity test built on them.
"""
import logging as _logging

from .core.algebra import FLOAT, RATIONAL, Field, field_of
from .core.errors import BilliardsError, DegenerateGeometryError, WalkInProgressError
from .core.singularity import ApexSingularity, BaseOrientation, BaseSingularity, BaseValues, Singularity
from .core.vector import V2
from .unfold import BaseEdge, Params, Turn, Unfolding, filter_valid, is_valid, parse_turns, unfold
from .util.power_cache import PowerCache

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "V2",
    "Field",
    "RATIONAL",
    "FLOAT",
    "field_of",
    "PowerCache",
    "BaseSingularity",
    "ApexSingularity",
    "Singularity",
    "BaseOrientation",
    "BaseValues",
    "Params",
    "BaseEdge",
    "Turn",
    "parse_turns",
    "Unfolding",
    "unfold",
    "is_valid",
    "filter_valid",
    "BilliardsError",
    "DegenerateGeometryError",
    "WalkInProgressError",
]
