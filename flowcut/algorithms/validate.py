"""Post-condition checks for a computed maximum flow.

Each check raises ``FlowInvariantError`` on failure. A failure points at a
defect in the algorithm, not at the input.
"""

from __future__ import annotations

from typing import AbstractSet

import numpy as np

from flowcut.algorithms.min_cut import cut_capacity
from flowcut.logging import get_logger
from flowcut.types.base import Capacity, FlowInvariantError, VertexID

logger = get_logger(__name__)


def check_antisymmetry(flow: np.ndarray) -> None:
    """Require ``flow[u, v] == -flow[v, u]`` for every pair."""
    if not np.array_equal(flow, -flow.T):
        bad = np.argwhere(flow != -flow.T)[0]
        logger.error("Flow not antisymmetric at (%d, %d)", bad[0], bad[1])
        raise FlowInvariantError(
            f"flow is not antisymmetric at ({int(bad[0])}, {int(bad[1])})"
        )


def check_capacity_bounds(capacity: np.ndarray, flow: np.ndarray) -> None:
    """Require ``flow[u, v] <= capacity[u, v]`` for every pair."""
    over = np.argwhere(flow > capacity)
    if over.size:
        u, v = (int(x) for x in over[0])
        logger.error(
            "Flow %d exceeds capacity %d on (%d, %d)",
            flow[u, v],
            capacity[u, v],
            u,
            v,
        )
        raise FlowInvariantError(
            f"flow {int(flow[u, v])} exceeds capacity {int(capacity[u, v])} on ({u}, {v})"
        )


def check_conservation(
    flow: np.ndarray,
    total_flow: Capacity,
    src_node: VertexID,
    dst_node: VertexID,
) -> None:
    """Require zero net flow at inner vertices and ``total_flow`` at the ends.

    With an antisymmetric matrix the net outflow of ``v`` is its row sum.
    """
    net_out = flow.sum(axis=1)
    for v, net in enumerate(net_out.tolist()):
        if v in (src_node, dst_node):
            continue
        if net != 0:
            logger.error("Flow not conserved at vertex %d (net %d)", v, net)
            raise FlowInvariantError(f"flow not conserved at vertex {v}: net {net}")
    if src_node != dst_node and len(net_out):
        if int(net_out[src_node]) != total_flow or int(net_out[dst_node]) != -total_flow:
            raise FlowInvariantError(
                f"net source outflow {int(net_out[src_node])} / sink inflow "
                f"{-int(net_out[dst_node])} differ from total flow {total_flow}"
            )


def check_duality(
    capacity: np.ndarray,
    source_side: AbstractSet[VertexID],
    total_flow: Capacity,
) -> None:
    """Require the cut capacity to equal the total flow."""
    cut_cap = cut_capacity(capacity, source_side)
    if cut_cap != total_flow:
        logger.error("Cut capacity %d differs from total flow %d", cut_cap, total_flow)
        raise FlowInvariantError(
            f"cut capacity {cut_cap} differs from total flow {total_flow}"
        )


def validate_flow(
    capacity: np.ndarray,
    flow: np.ndarray,
    total_flow: Capacity,
    source_side: AbstractSet[VertexID],
    src_node: VertexID,
    dst_node: VertexID,
) -> None:
    """Run every check against one finished computation."""
    check_antisymmetry(flow)
    check_capacity_bounds(capacity, flow)
    check_conservation(flow, total_flow, src_node, dst_node)
    if src_node != dst_node:
        check_duality(capacity, source_side, total_flow)
