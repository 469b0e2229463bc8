"""Dense residual graph over an ``M x M`` capacity matrix.

The graph owns two ``int64`` matrices: ``capacity`` (read-only, fixes the
topology) and ``flow`` (signed, antisymmetric). Residual capacity is derived on
demand as ``capacity - flow`` and never stored.
"""

from __future__ import annotations

import numbers
from typing import Any, Iterable, List, Sequence, Union

import numpy as np

from flowcut.logging import get_logger
from flowcut.types.base import (
    INT64_MAX,
    Capacity,
    Edge,
    FlowInvariantError,
    InvalidCapacityError,
    VertexID,
)
from flowcut.types.dto import AugmentingPath

logger = get_logger(__name__)

CapacityLike = Union[np.ndarray, Sequence[Sequence[Any]]]


def as_capacity(value: Any, u: int, v: int) -> int:
    """Return ``value`` as a non-negative Python int or raise."""
    if isinstance(value, (bool, np.bool_)):
        raise InvalidCapacityError(f"capacity[{u}][{v}] must be an integer, got bool")
    if isinstance(value, numbers.Integral):
        cap = int(value)
    elif isinstance(value, numbers.Real) and float(value).is_integer():
        cap = int(value)
    else:
        logger.error("Non-integer capacity at (%d, %d): %r", u, v, value)
        raise InvalidCapacityError(
            f"capacity[{u}][{v}] must be an integer, got {value!r}"
        )
    if cap < 0:
        logger.error("Negative capacity at (%d, %d): %d", u, v, cap)
        raise InvalidCapacityError(f"capacity[{u}][{v}] must be non-negative, got {cap}")
    return cap


def coerce_capacity_matrix(data: CapacityLike) -> np.ndarray:
    """Validate a square capacity matrix and return it as a new int64 array.

    Accepts nested sequences or a 2-D numpy array. Entries must be
    non-negative integers (integral floats such as ``5.0`` are accepted).
    The total of all capacities must fit in a signed 64-bit integer, which
    bounds every flow and residual value the algorithm can produce.

    Args:
        data: Row-major ``M x M`` capacities; ``M`` may be zero.

    Returns:
        A fresh, read-only ``int64`` array of shape ``(M, M)``.

    Raises:
        InvalidCapacityError: On shape, type, sign, or overflow problems.
    """
    if isinstance(data, np.ndarray):
        if data.ndim == 2:
            rows: List[Any] = data.tolist()
        elif data.size == 0:
            rows = []
        else:
            raise InvalidCapacityError(
                f"capacity matrix must be 2-dimensional, got shape {data.shape}"
            )
    else:
        if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
            raise InvalidCapacityError(
                f"capacity matrix must be a sequence of rows, got {type(data).__name__}"
            )
        rows = list(data)

    size = len(rows)
    values: List[List[int]] = []
    total = 0
    for u, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not isinstance(row, Iterable):
            raise InvalidCapacityError(f"row {u} is not a sequence: {row!r}")
        row = list(row)
        if len(row) != size:
            logger.error(
                "Capacity row %d has %d entries, expected %d", u, len(row), size
            )
            raise InvalidCapacityError(
                f"capacity matrix must be square: row {u} has {len(row)} entries, "
                f"expected {size}"
            )
        caps = [as_capacity(value, u, v) for v, value in enumerate(row)]
        total += sum(caps)
        values.append(caps)

    if total > INT64_MAX:
        logger.error("Capacity total %d exceeds 64-bit range", total)
        raise InvalidCapacityError(
            f"sum of capacities ({total}) exceeds the supported 64-bit range"
        )

    matrix = np.array(values, dtype=np.int64).reshape(size, size)
    matrix.flags.writeable = False
    return matrix


class ResidualGraph:
    """Capacity and flow state for one max-flow computation.

    The capacity matrix is immutable. The flow matrix starts at zero and is
    only changed by ``augment``, which keeps ``flow[u, v] == -flow[v, u]``.

    Example:
        >>> g = ResidualGraph([[0, 5], [0, 0]])
        >>> g.residual(0, 1)
        5
    """

    def __init__(self, capacity: CapacityLike) -> None:
        self.capacity: np.ndarray = coerce_capacity_matrix(capacity)
        self.flow: np.ndarray = np.zeros_like(self.capacity)

    def __len__(self) -> int:
        return int(self.capacity.shape[0])

    def __repr__(self) -> str:
        return f"ResidualGraph(num_vertices={len(self)}, num_edges={self.num_edges})"

    @property
    def num_vertices(self) -> int:
        return len(self)

    @property
    def num_edges(self) -> int:
        """Number of ordered pairs with positive capacity."""
        return int(np.count_nonzero(self.capacity))

    def has_edge(self, u: VertexID, v: VertexID) -> bool:
        """Return True if the directed edge ``u -> v`` has positive capacity."""
        return bool(self.capacity[u, v] > 0)

    def residual(self, u: VertexID, v: VertexID) -> Capacity:
        """Return ``capacity[u][v] - flow[u][v]``."""
        return int(self.capacity[u, v] - self.flow[u, v])

    def residual_row(self, u: VertexID) -> np.ndarray:
        """Return residual capacities of all edges leaving ``u``."""
        return self.capacity[u] - self.flow[u]

    def neighbors(self, u: VertexID) -> np.ndarray:
        """Return residual-network neighbours of ``u`` in increasing index order.

        ``v`` is a neighbour when an edge exists between ``u`` and ``v`` in
        either direction: a forward edge carries spare capacity, a reverse one
        carries flow that can be cancelled. Only existence is considered; a
        pair whose residual is currently zero is still listed.

        Keep the reverse direction: scanning forward edges only never revisits
        flow pushed earlier, and the search then stops below the maximum.
        """
        return np.flatnonzero((self.capacity[u] > 0) | (self.capacity[:, u] > 0))

    def augment(self, path: AugmentingPath, amount: Capacity) -> None:
        """Push ``amount`` units of flow along ``path``.

        Every edge ``(parent, child)`` gets ``flow[parent, child] += amount``
        and the mirrored ``flow[child, parent] -= amount``.

        Raises:
            FlowInvariantError: If ``amount`` is not positive or exceeds the
                residual capacity of an edge on the path. The flow is left
                untouched in that case.
        """
        if amount <= 0:
            raise FlowInvariantError(f"augmentation amount must be positive: {amount}")
        edges: List[Edge] = path.edges()
        for u, v in edges:
            if self.residual(u, v) < amount:
                logger.error(
                    "Augmenting %d over (%d, %d) with residual %d",
                    amount,
                    u,
                    v,
                    self.residual(u, v),
                )
                raise FlowInvariantError(
                    f"augmentation of {amount} exceeds residual {self.residual(u, v)} "
                    f"on edge ({u}, {v})"
                )
        for u, v in edges:
            self.flow[u, v] += amount
            self.flow[v, u] -= amount

    def reset_flow(self) -> None:
        """Zero out all flow."""
        self.flow.fill(0)

    def copy(self) -> ResidualGraph:
        """Return an independent copy with the same capacities and flow."""
        clone = ResidualGraph.__new__(ResidualGraph)
        clone.capacity = self.capacity
        clone.flow = self.flow.copy()
        return clone
