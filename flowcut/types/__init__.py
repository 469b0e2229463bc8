"""Shared type aliases, errors and result containers."""

from flowcut.types.base import (
    SOURCE,
    Capacity,
    FlowInvariantError,
    InvalidCapacityError,
    VertexID,
    sink_of,
)
from flowcut.types.dto import AugmentingPath, MaxFlowResult

__all__ = [
    "SOURCE",
    "Capacity",
    "VertexID",
    "sink_of",
    "InvalidCapacityError",
    "FlowInvariantError",
    "AugmentingPath",
    "MaxFlowResult",
]
