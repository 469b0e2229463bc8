"""Maximum flow via Edmonds-Karp and the minimum cut it certifies."""

from __future__ import annotations

from typing import List, Literal, Optional, Tuple, Union, overload

from flowcut.algorithms.bfs import find_augmenting_path
from flowcut.algorithms.min_cut import cut_edges, find_cut_source_side
from flowcut.algorithms.validate import validate_flow
from flowcut.config import FLOW_CONFIG, FlowConfig
from flowcut.graph.residual import CapacityLike, ResidualGraph
from flowcut.logging import get_logger
from flowcut.types.base import SOURCE, Capacity, Edge, VertexID, sink_of
from flowcut.types.dto import MaxFlowResult

logger = get_logger(__name__)


@overload
def calc_max_flow(
    capacity: CapacityLike,
    *,
    return_summary: Literal[False] = False,
    return_graph: Literal[False] = False,
    config: Optional[FlowConfig] = None,
) -> Capacity: ...


@overload
def calc_max_flow(
    capacity: CapacityLike,
    *,
    return_summary: Literal[True],
    return_graph: Literal[False] = False,
    config: Optional[FlowConfig] = None,
) -> Tuple[Capacity, MaxFlowResult]: ...


@overload
def calc_max_flow(
    capacity: CapacityLike,
    *,
    return_summary: Literal[False] = False,
    return_graph: Literal[True],
    config: Optional[FlowConfig] = None,
) -> Tuple[Capacity, ResidualGraph]: ...


@overload
def calc_max_flow(
    capacity: CapacityLike,
    *,
    return_summary: Literal[True],
    return_graph: Literal[True],
    config: Optional[FlowConfig] = None,
) -> Tuple[Capacity, MaxFlowResult, ResidualGraph]: ...


def calc_max_flow(
    capacity: CapacityLike,
    *,
    return_summary: bool = False,
    return_graph: bool = False,
    config: Optional[FlowConfig] = None,
) -> Union[Capacity, tuple]:
    """Compute the maximum flow from vertex 0 to vertex ``M-1``.

    The function:
      1. Validates ``capacity`` and builds a ``ResidualGraph`` with zero flow.
      2. Repeatedly finds a shortest augmenting path with
         ``find_augmenting_path`` and pushes its bottleneck along it, until no
         path with positive residual is left.
      3. Sweeps the residual graph from the source to get the source side of
         a minimum cut (only when a summary is requested or invariant checks
         are enabled).

    Args:
        capacity: Square matrix of non-negative integer capacities. Entry
            ``[u][v]`` is the capacity of edge ``u -> v``; 0 means no edge.
        return_summary: If True, also return a ``MaxFlowResult``.
        return_graph: If True, also return the final ``ResidualGraph``.
        config: Overrides ``FLOW_CONFIG``.

    Returns:
        Union[int, tuple]:
            - neither flag: the total flow as an int
            - return_summary only: ``(total, MaxFlowResult)``
            - return_graph only: ``(total, ResidualGraph)``
            - both flags: ``(total, MaxFlowResult, ResidualGraph)``

    Raises:
        InvalidCapacityError: If ``capacity`` is malformed. No work is done.
        FlowInvariantError: If the finished flow violates a max-flow
            invariant (algorithm defect).

    Examples:
        >>> calc_max_flow([[0, 5], [0, 0]])
        5
        >>> total, result = calc_max_flow([[0, 3, 2, 0],
        ...                                [0, 0, 0, 2],
        ...                                [0, 0, 0, 3],
        ...                                [0, 0, 0, 0]], return_summary=True)
        >>> total, result.source_side_labels()
        (4, [1, 2])
    """
    cfg = config if config is not None else FLOW_CONFIG
    graph = ResidualGraph(capacity)
    src_node, dst_node = SOURCE, sink_of(len(graph))

    total_flow, rounds = _augment_until_blocked(graph, src_node, dst_node)

    summary: Optional[MaxFlowResult] = None
    if return_summary or cfg.check_invariants:
        source_side = find_cut_source_side(graph, src_node, dst_node)
        if cfg.check_invariants and len(graph):
            validate_flow(
                graph.capacity,
                graph.flow,
                total_flow,
                source_side,
                src_node,
                dst_node,
            )
        summary = MaxFlowResult(
            total_flow=total_flow,
            capacity=graph.capacity,
            flow=graph.flow.copy(),
            source_side=source_side,
            min_cut_edges=tuple(cut_edges(graph.capacity, source_side)),
            augmentations=rounds,
        )

    if not (return_summary or return_graph):
        return total_flow

    ret: list = [total_flow]
    if return_summary:
        ret.append(summary)
    if return_graph:
        ret.append(graph)
    return tuple(ret)


def _augment_until_blocked(
    graph: ResidualGraph,
    src_node: VertexID,
    dst_node: VertexID,
) -> Tuple[Capacity, int]:
    """Push flow along shortest augmenting paths until none is left.

    Returns:
        The total flow pushed and the number of augmentations.
    """
    if len(graph) == 0 or src_node == dst_node:
        # Degenerate case: conservation forces the flow value to zero.
        return 0, 0

    total_flow = 0
    rounds = 0
    while True:
        path = find_augmenting_path(graph, src_node, dst_node)
        if path is None or path.bottleneck <= 0:
            break
        graph.augment(path, path.bottleneck)
        total_flow += path.bottleneck
        rounds += 1
        logger.debug(
            "Augmentation %d: pushed %d along %s (total %d)",
            rounds,
            path.bottleneck,
            path.vertices(),
            total_flow,
        )
    logger.debug(
        "Max flow %d from %d to %d after %d augmentations",
        total_flow,
        src_node,
        dst_node,
        rounds,
    )
    return total_flow, rounds


def solve(capacity: CapacityLike, config: Optional[FlowConfig] = None) -> MaxFlowResult:
    """Compute the maximum flow and minimum cut for ``capacity``.

    Shorthand for ``calc_max_flow(capacity, return_summary=True)[1]``.
    """
    _, result = calc_max_flow(capacity, return_summary=True, config=config)
    return result


def saturated_edges(
    capacity: CapacityLike,
    config: Optional[FlowConfig] = None,
) -> List[Edge]:
    """Identify edges left without residual capacity at maximum flow.

    Args:
        capacity: Square capacity matrix.
        config: Overrides ``FLOW_CONFIG``.

    Returns:
        Sorted ``(u, v)`` pairs with positive capacity and zero residual.
    """
    _, graph = calc_max_flow(capacity, return_graph=True, config=config)
    return [
        (u, v)
        for u in range(len(graph))
        for v in graph.neighbors(u).tolist()
        if graph.has_edge(u, v) and graph.residual(u, v) == 0
    ]
