"""Immutable containers exchanged between the flow engine and its callers.

``AugmentingPath`` lives for a single search/augment round. ``MaxFlowResult``
is what a completed computation hands back: the total flow, the signed flow
matrix, and the source side of a minimum cut.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, FrozenSet, List, Tuple

import numpy as np

from flowcut.types.base import Capacity, Edge, VertexID


@dataclass(frozen=True)
class AugmentingPath:
    """Shortest source-to-sink path with positive residual capacity.

    Attributes:
        source: Start vertex of the search.
        sink: Vertex the search terminated on.
        parent: BFS tree as ``child -> parent`` for every vertex reached
            before the sink was found (sink included). The source has no
            entry: it has no parent.
        bottleneck: Smallest residual capacity along the source-to-sink path.
    """

    source: VertexID
    sink: VertexID
    parent: Dict[VertexID, VertexID]
    bottleneck: Capacity

    @property
    def reached(self) -> FrozenSet[VertexID]:
        """Vertices discovered by the search, source included."""
        return frozenset(self.parent) | {self.source}

    def vertices(self) -> List[VertexID]:
        """Return the path vertices in source-to-sink order."""
        path = [self.sink]
        node = self.sink
        while node != self.source:
            node = self.parent[node]
            path.append(node)
        path.reverse()
        return path

    def edges(self) -> List[Edge]:
        """Return the path edges ``(parent, child)`` in source-to-sink order."""
        verts = self.vertices()
        return list(zip(verts[:-1], verts[1:]))


@dataclass(frozen=True, eq=False)
class MaxFlowResult:
    """Outcome of a max-flow/min-cut computation.

    Attributes:
        total_flow: Maximum flow value from the source to the sink.
        capacity: The ``M x M`` capacity matrix the flow was computed on.
        flow: Signed ``M x M`` flow matrix; ``flow[u, v] == -flow[v, u]``.
        source_side: Vertices reachable from the source in the final
            residual graph. Paired with its complement it forms a minimum cut.
        min_cut_edges: Edges ``(u, v)`` with positive capacity crossing from
            the source side to the sink side. All of them are saturated.
        augmentations: Number of augmenting paths pushed.
    """

    total_flow: Capacity
    capacity: np.ndarray
    flow: np.ndarray
    source_side: FrozenSet[VertexID]
    min_cut_edges: Tuple[Edge, ...]
    augmentations: int = 0

    @property
    def num_vertices(self) -> int:
        """Number of vertices ``M``."""
        return int(self.capacity.shape[0])

    @property
    def cut_capacity(self) -> Capacity:
        """Summed capacity of the minimum-cut edges."""
        return sum(int(self.capacity[u, v]) for u, v in self.min_cut_edges)

    def display_flow(self, clamp: bool = True) -> np.ndarray:
        """Return a copy of the flow matrix for presentation.

        Args:
            clamp: Replace negative (reverse pseudo-flow) entries with zero.
        """
        if clamp:
            return np.maximum(self.flow, 0)
        return self.flow.copy()

    def source_side_labels(self) -> List[int]:
        """Return the source side as sorted 1-based vertex numbers."""
        return [v + 1 for v in sorted(self.source_side)]

    def to_dict(self, clamp: bool = True) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation."""
        return {
            "total_flow": int(self.total_flow),
            "num_vertices": self.num_vertices,
            "flow": self.display_flow(clamp).tolist(),
            "source_side": self.source_side_labels(),
            "min_cut_edges": [[u + 1, v + 1] for u, v in self.min_cut_edges],
            "cut_capacity": self.cut_capacity,
            "augmentations": self.augmentations,
        }
