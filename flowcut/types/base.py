"""Base types and error classes shared across flowcut modules."""

from __future__ import annotations

from typing import Tuple

#: Vertices are dense integer indices ``0 .. M-1``.
VertexID = int

#: Edge capacities and flows are integers; no floating point is involved.
Capacity = int

#: Directed edge as an ordered vertex pair ``(u, v)``.
Edge = Tuple[VertexID, VertexID]

#: Vertex 0 is always the source.
SOURCE: VertexID = 0

#: Largest value storable in the int64 matrices.
INT64_MAX = 2**63 - 1


def sink_of(num_vertices: int) -> VertexID:
    """Return the sink index for a graph with ``num_vertices`` vertices.

    The sink is the last vertex. For a single-vertex graph it coincides with
    the source.
    """
    return num_vertices - 1


class InvalidCapacityError(ValueError):
    """Raised when a capacity matrix or its textual form is malformed.

    Covers non-square or short matrices, non-integer entries, negative
    capacities, and totals too large for 64-bit storage.
    """


class FlowInvariantError(AssertionError):
    """Raised when the computed flow breaks a max-flow/min-cut invariant.

    This always indicates a defect in the algorithm, never bad input.
    """
