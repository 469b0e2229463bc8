"""Residual graph storage and NetworkX conversion."""

from flowcut.graph.convert import NodeMap, from_networkx, to_networkx
from flowcut.graph.residual import ResidualGraph, coerce_capacity_matrix

__all__ = [
    "ResidualGraph",
    "coerce_capacity_matrix",
    "NodeMap",
    "from_networkx",
    "to_networkx",
]
