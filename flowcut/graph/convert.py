"""Conversion between NetworkX graphs and dense capacity matrices.

``from_networkx`` places the chosen source at index 0 and the sink at index
``M-1`` so the result can be fed straight into ``calc_max_flow``. The
returned ``NodeMap`` translates indices back to node names.

Example:
    >>> import networkx as nx
    >>> from flowcut.graph.convert import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("s", "a", capacity=3)
    >>> G.add_edge("a", "t", capacity=2)
    >>> capacity, node_map = from_networkx(G, "s", "t")
    >>> node_map.to_name[capacity.shape[0] - 1]
    't'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional

import networkx as nx
import numpy as np

from flowcut.graph.residual import as_capacity, coerce_capacity_matrix


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and matrix indices.

    Attributes:
        to_index: Maps original node names to integer indices
        to_name: Maps integer indices back to original node names

    Example:
        >>> node_map = NodeMap.from_names(["s", "a", "t"])
        >>> node_map.to_index["a"]
        1
        >>> node_map.to_name[2]
        't'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        if len(set(names)) != len(names):
            raise ValueError("node names must be unique")
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def names(self) -> List[Hashable]:
        """Return node names in index order."""
        return [self.to_name[i] for i in range(len(self))]

    def __len__(self) -> int:
        """Return the number of nodes in the mapping."""
        return len(self.to_index)


def from_networkx(
    G: nx.Graph,
    source: Hashable,
    sink: Hashable,
    *,
    capacity_attr: str = "capacity",
    default_capacity: int = 1,
) -> tuple[np.ndarray, NodeMap]:
    """Convert a NetworkX graph to a capacity matrix with fixed source/sink.

    Node order is: ``source``, the remaining nodes sorted by ``str``, then
    ``sink``. Parallel edges of multigraphs are summed. Undirected edges
    contribute capacity in both directions.

    Args:
        G: Any NetworkX graph (Graph, DiGraph, MultiGraph, MultiDiGraph).
        source: Node to place at index 0.
        sink: Node to place at index ``M-1``.
        capacity_attr: Edge attribute holding the capacity.
        default_capacity: Capacity for edges without ``capacity_attr``.

    Returns:
        Tuple of (capacity matrix, node map).

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
        KeyError: If ``source`` or ``sink`` is not in ``G``.
        ValueError: If ``source`` and ``sink`` are the same node.
        InvalidCapacityError: If an edge capacity is not a non-negative integer.
    """
    if not isinstance(G, nx.Graph):
        raise TypeError(f"Expected a NetworkX graph, got {type(G).__name__}")
    for role, node in (("source", source), ("sink", sink)):
        if node not in G:
            raise KeyError(f"{role} node {node!r} not in graph")
    if source == sink:
        raise ValueError(f"source and sink must differ, both are {source!r}")

    inner = sorted((n for n in G.nodes() if n not in (source, sink)), key=str)
    names: List[Hashable] = [source] + inner + [sink]
    node_map = NodeMap.from_names(names)

    size = len(names)
    rows: List[List[int]] = [[0] * size for _ in range(size)]
    for u, v, data in G.edges(data=True):
        i, j = node_map.to_index[u], node_map.to_index[v]
        # Validate each edge before parallel edges are summed
        cap = as_capacity(data.get(capacity_attr, default_capacity), i, j)
        rows[i][j] += cap
        if not G.is_directed() and i != j:
            rows[j][i] += cap

    return coerce_capacity_matrix(rows), node_map


def to_networkx(
    capacity: np.ndarray,
    flow: Optional[np.ndarray] = None,
    node_map: Optional[NodeMap] = None,
    *,
    capacity_attr: str = "capacity",
    flow_attr: str = "flow",
) -> nx.DiGraph:
    """Convert a capacity matrix (and optional flow) to a NetworkX DiGraph.

    Only pairs with positive capacity become edges. Flow values are reported
    as net flow clamped at zero.

    Args:
        capacity: ``M x M`` capacity matrix.
        flow: Optional ``M x M`` signed flow matrix.
        node_map: Restores original node names; integer labels otherwise.
        capacity_attr: Edge attribute name for capacity.
        flow_attr: Edge attribute name for flow.

    Returns:
        nx.DiGraph with integer edge attributes.
    """
    size = capacity.shape[0]
    if node_map is not None and len(node_map) != size:
        raise ValueError(
            f"node map covers {len(node_map)} nodes, matrix has {size} vertices"
        )

    def name(idx: int) -> Hashable:
        return node_map.to_name[idx] if node_map is not None else idx

    G = nx.DiGraph()
    G.add_nodes_from(name(i) for i in range(size))
    for u, v in np.argwhere(capacity > 0).tolist():
        attrs = {capacity_attr: int(capacity[u, v])}
        if flow is not None:
            attrs[flow_attr] = max(int(flow[u, v]), 0)
        G.add_edge(name(u), name(v), **attrs)
    return G
