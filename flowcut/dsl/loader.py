"""YAML loader + schema validation for network documents.

A document is a mapping with a required ``capacity`` matrix and optional
``nodes`` names and ``description``. JSON documents are accepted as well,
since YAML is a superset of JSON.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from typing import Any, Dict, List, Optional

import jsonschema
import numpy as np
import yaml

from flowcut.graph.convert import NodeMap
from flowcut.graph.residual import coerce_capacity_matrix
from flowcut.logging import get_logger
from flowcut.types.base import InvalidCapacityError

logger = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class NetworkDocument:
    """Validated contents of a network document."""

    capacity: np.ndarray
    nodes: Optional[List[str]] = None
    description: Optional[str] = None

    @property
    def node_map(self) -> Optional[NodeMap]:
        if self.nodes is None:
            return None
        return NodeMap.from_names(list(self.nodes))


def _load_schema() -> Dict[str, Any]:
    with (
        resources.files("flowcut.schemas")
        .joinpath("network.json")
        .open("r", encoding="utf-8")
    ) as f:
        return json.load(f)


def load_network_yaml(yaml_str: str) -> NetworkDocument:
    """Load, validate and convert a network document.

    Args:
        yaml_str: YAML or JSON text.

    Returns:
        The document with its capacity matrix coerced to int64.

    Raises:
        InvalidCapacityError: If the text is not valid YAML, does not match
            the packaged schema, the matrix is not square, or the node name
            count does not match the vertex count.
    """
    try:
        data = yaml.safe_load(yaml_str)
    except yaml.YAMLError as exc:
        raise InvalidCapacityError(f"document is not valid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidCapacityError(
            "The provided document must map to a dictionary at top-level."
        )

    try:
        jsonschema.validate(data, _load_schema())
    except jsonschema.ValidationError as exc:
        location = "/".join(str(p) for p in exc.absolute_path) or "<root>"
        logger.error(
            "Network document failed validation at %s: %s", location, exc.message
        )
        raise InvalidCapacityError(
            f"invalid network document at {location}: {exc.message}"
        ) from exc

    capacity = coerce_capacity_matrix(data["capacity"])
    nodes = data.get("nodes")
    if nodes is not None and len(nodes) != capacity.shape[0]:
        raise InvalidCapacityError(
            f"'nodes' lists {len(nodes)} names but the matrix has "
            f"{capacity.shape[0]} vertices"
        )
    return NetworkDocument(
        capacity=capacity,
        nodes=list(nodes) if nodes is not None else None,
        description=data.get("description"),
    )
