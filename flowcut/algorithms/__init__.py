"""Max-flow/min-cut algorithms over dense residual graphs."""

from flowcut.algorithms.bfs import find_augmenting_path, reachable_from
from flowcut.algorithms.max_flow import calc_max_flow, saturated_edges, solve
from flowcut.algorithms.min_cut import cut_capacity, cut_edges, find_cut_source_side
from flowcut.algorithms.validate import validate_flow

__all__ = [
    "find_augmenting_path",
    "reachable_from",
    "calc_max_flow",
    "solve",
    "saturated_edges",
    "find_cut_source_side",
    "cut_edges",
    "cut_capacity",
    "validate_flow",
]
