from .params import Params
from .base_edge import BaseEdge
from .turns import Turn, parse_turns
from .validity import Unfolding, unfold, is_separated, is_valid, filter_valid

__all__ = [
    "Params",
    "BaseEdge",
    "Turn",
    "parse_turns",
    "Unfolding",
    "unfold",
    "is_separated",
    "is_valid",
    "filter_valid",
]
