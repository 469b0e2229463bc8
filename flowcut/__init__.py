"""flowcut: maximum flow and minimum cut on dense capacity matrices.

Vertex 0 is the source and vertex ``M-1`` the sink of an ``M x M`` matrix of
non-negative integer capacities. Flow is found with Edmonds-Karp (shortest
augmenting paths by BFS); the source side of a minimum cut is read off the
final residual graph.

Primary API:
    calc_max_flow() - Total flow, optionally with a MaxFlowResult and the
        final ResidualGraph
    solve() - MaxFlowResult with flow matrix and minimum cut
    ResidualGraph - Capacity/flow state with residual queries
    from_networkx() / to_networkx() - NetworkX interop

Example:
    from flowcut import solve

    result = solve([[0, 3, 2, 0],
                    [0, 0, 0, 2],
                    [0, 0, 0, 3],
                    [0, 0, 0, 0]])
    result.total_flow             # 4
    result.source_side_labels()   # [1, 2]
"""

from __future__ import annotations

from flowcut import cli, logging
from flowcut._version import __version__
from flowcut.algorithms.max_flow import calc_max_flow, saturated_edges, solve
from flowcut.config import FLOW_CONFIG, FlowConfig
from flowcut.graph.convert import NodeMap, from_networkx, to_networkx
from flowcut.graph.residual import ResidualGraph
from flowcut.types.base import FlowInvariantError, InvalidCapacityError
from flowcut.types.dto import AugmentingPath, MaxFlowResult

__all__ = [
    # Version
    "__version__",
    # Algorithms
    "calc_max_flow",
    "solve",
    "saturated_edges",
    # Model
    "ResidualGraph",
    "AugmentingPath",
    "MaxFlowResult",
    # Errors
    "InvalidCapacityError",
    "FlowInvariantError",
    # Configuration
    "FlowConfig",
    "FLOW_CONFIG",
    # Library integrations (NetworkX)
    "NodeMap",
    "from_networkx",
    "to_networkx",
    # Utilities
    "cli",
    "logging",
]
