"""Minimum-cut extraction from a residual graph at maximum flow."""

from __future__ import annotations

from typing import AbstractSet, FrozenSet, List

import numpy as np

from flowcut.algorithms.bfs import reachable_from
from flowcut.graph.residual import ResidualGraph
from flowcut.logging import get_logger
from flowcut.types.base import Capacity, Edge, FlowInvariantError, VertexID

logger = get_logger(__name__)


def find_cut_source_side(
    graph: ResidualGraph,
    src_node: VertexID,
    dst_node: VertexID,
) -> FrozenSet[VertexID]:
    """Return the vertices reachable from ``src_node`` over positive residuals.

    Must only be called once no augmenting path is left. The returned set and
    its complement then form a minimum cut.

    Raises:
        FlowInvariantError: If ``dst_node`` is reachable, meaning the flow in
            ``graph`` is not maximal.
    """
    if len(graph) == 0:
        return frozenset()
    if src_node == dst_node:
        return frozenset({src_node})

    parent = reachable_from(graph, src_node)
    if dst_node in parent:
        logger.error(
            "Sink %d reachable from source %d after augmentation finished",
            dst_node,
            src_node,
        )
        raise FlowInvariantError(
            f"sink {dst_node} is reachable in the residual graph; flow is not maximal"
        )
    return frozenset(parent) | {src_node}


def _side_mask(num_vertices: int, source_side: AbstractSet[VertexID]) -> np.ndarray:
    mask = np.zeros(num_vertices, dtype=bool)
    mask[sorted(source_side)] = True
    return mask


def cut_edges(capacity: np.ndarray, source_side: AbstractSet[VertexID]) -> List[Edge]:
    """Return edges with positive capacity leaving ``source_side``, sorted."""
    mask = _side_mask(capacity.shape[0], source_side)
    crossing = (capacity > 0) & mask[:, None] & ~mask[None, :]
    return [(int(u), int(v)) for u, v in np.argwhere(crossing)]


def cut_capacity(capacity: np.ndarray, source_side: AbstractSet[VertexID]) -> Capacity:
    """Return the summed capacity of edges leaving ``source_side``."""
    mask = _side_mask(capacity.shape[0], source_side)
    return int(capacity[np.ix_(mask, ~mask)].sum())
