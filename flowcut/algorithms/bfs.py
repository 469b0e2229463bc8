"""Breadth-first search for shortest augmenting paths (Edmonds-Karp)."""

from __future__ import annotations

from collections import deque
from typing import Dict, Optional

from flowcut.graph.residual import ResidualGraph
from flowcut.types.base import INT64_MAX, Capacity, VertexID
from flowcut.types.dto import AugmentingPath


def find_augmenting_path(
    graph: ResidualGraph,
    src_node: VertexID,
    dst_node: VertexID,
) -> Optional[AugmentingPath]:
    """Find a fewest-edges path with positive residual capacity.

    Vertices are expanded in FIFO order and neighbours are scanned in
    increasing index order, so among equally short paths the one found first
    in that order wins. The search stops as soon as ``dst_node`` is reached.

    Args:
        graph: Residual graph; it is not modified.
        src_node: Vertex the search starts from.
        dst_node: Vertex to reach.

    Returns:
        The path with its bottleneck residual, or None if ``dst_node`` cannot
        be reached (or equals ``src_node``).
    """
    if src_node == dst_node:
        return None

    parent: Dict[VertexID, VertexID] = {}
    # The source carries an unbounded notional residual.
    bottleneck: Dict[VertexID, Capacity] = {src_node: INT64_MAX}
    queue = deque([src_node])

    while queue:
        node = queue.popleft()
        residuals = graph.residual_row(node)
        for neighbor in graph.neighbors(node).tolist():
            res = int(residuals[neighbor])
            if res <= 0 or neighbor in bottleneck:
                continue
            parent[neighbor] = node
            bottleneck[neighbor] = min(bottleneck[node], res)
            if neighbor == dst_node:
                return AugmentingPath(
                    source=src_node,
                    sink=dst_node,
                    parent=parent,
                    bottleneck=bottleneck[neighbor],
                )
            queue.append(neighbor)
    return None


def reachable_from(graph: ResidualGraph, src_node: VertexID) -> Dict[VertexID, VertexID]:
    """Return the BFS tree of vertices reachable over positive-residual edges.

    Uses the same edge predicate as ``find_augmenting_path`` but sweeps the
    whole reachable set instead of stopping at a target.

    Returns:
        Mapping ``child -> parent`` for every reached vertex except
        ``src_node`` itself.
    """
    parent: Dict[VertexID, VertexID] = {}
    visited = {src_node}
    queue = deque([src_node])
    while queue:
        node = queue.popleft()
        residuals = graph.residual_row(node)
        for neighbor in graph.neighbors(node).tolist():
            if residuals[neighbor] <= 0 or neighbor in visited:
                continue
            visited.add(neighbor)
            parent[neighbor] = node
            queue.append(neighbor)
    return parent
