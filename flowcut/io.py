"""Reading capacity matrices and writing max-flow results.

Matrix text format: whitespace-separated integers. The first is the vertex
count ``M``, followed by the ``M * M`` capacities in row-major order.

Result text format: the total flow on the first line, one line per row of the
flow matrix (negative entries shown as 0, every value followed by a space),
and a final line with the 1-based source-side vertices of the minimum cut.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import List, Optional, Tuple, Union

import numpy as np

from flowcut.dsl.loader import load_network_yaml
from flowcut.graph.convert import NodeMap
from flowcut.graph.residual import coerce_capacity_matrix
from flowcut.logging import get_logger
from flowcut.types.base import InvalidCapacityError
from flowcut.types.dto import MaxFlowResult

logger = get_logger(__name__)

PathLike = Union[str, Path]

#: File suffixes read as YAML/JSON network documents.
DOCUMENT_SUFFIXES = (".yaml", ".yml", ".json")


_INT_TOKEN = re.compile(r"[+-]?[0-9]+", re.ASCII)


def _parse_int(token: str, what: str) -> int:
    # int() alone would also take "1_000" and non-ASCII digits
    if not _INT_TOKEN.fullmatch(token):
        raise InvalidCapacityError(f"{what} must be an integer, got {token!r}")
    return int(token)


def parse_capacity_text(text: str) -> np.ndarray:
    """Parse the matrix text format into a capacity matrix.

    Args:
        text: Vertex count followed by ``M * M`` capacities.

    Returns:
        Read-only ``int64`` matrix of shape ``(M, M)``.

    Raises:
        InvalidCapacityError: If the vertex count is missing or not positive,
            the number of entries is not exactly ``M * M``, or an entry is not
            a non-negative integer.
    """
    tokens = text.split()
    if not tokens:
        raise InvalidCapacityError("input is empty; expected a vertex count")

    size = _parse_int(tokens[0], "vertex count")
    if size <= 0:
        raise InvalidCapacityError(f"vertex count must be positive, got {size}")

    entries = tokens[1:]
    expected = size * size
    if len(entries) != expected:
        logger.error(
            "Expected %d capacity entries for %d vertices, found %d",
            expected,
            size,
            len(entries),
        )
        raise InvalidCapacityError(
            f"expected {expected} capacity entries for {size} vertices, "
            f"found {len(entries)}"
        )

    rows: List[List[int]] = []
    for u in range(size):
        rows.append(
            [
                _parse_int(tok, f"capacity[{u}][{v}]")
                for v, tok in enumerate(entries[u * size : (u + 1) * size])
            ]
        )
    return coerce_capacity_matrix(rows)


def format_capacity_text(capacity: np.ndarray) -> str:
    """Render a capacity matrix in the matrix text format."""
    lines = [str(capacity.shape[0])]
    lines.extend(" ".join(str(x) for x in row) for row in capacity.tolist())
    return "\n".join(lines) + "\n"


def load_capacity(path: PathLike) -> Tuple[np.ndarray, Optional[NodeMap]]:
    """Load a capacity matrix from a file, choosing the format by suffix.

    ``.yaml``, ``.yml`` and ``.json`` files are network documents; anything
    else is read as matrix text.

    Returns:
        Tuple of (capacity matrix, node map or None).

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        InvalidCapacityError: If the contents are malformed.
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in DOCUMENT_SUFFIXES:
        doc = load_network_yaml(text)
        return doc.capacity, doc.node_map
    return parse_capacity_text(text), None


def render_result(result: MaxFlowResult, clamp: bool = True) -> str:
    """Render a result in the result text format."""
    lines = [str(result.total_flow)]
    for row in result.display_flow(clamp).tolist():
        lines.append("".join(f"{x} " for x in row))
    lines.append("".join(f"{label} " for label in result.source_side_labels()))
    return "\n".join(lines)


def render_json(
    result: MaxFlowResult,
    clamp: bool = True,
    node_map: Optional[NodeMap] = None,
) -> str:
    """Render a result as indented JSON.

    When ``node_map`` is given, a ``nodes`` list with names in matrix order
    is included.
    """
    payload = result.to_dict(clamp)
    if node_map is not None:
        payload["nodes"] = [str(n) for n in node_map.names()]
    return json.dumps(payload, indent=2)


def ensure_parent_dir(path: Path) -> None:
    """Ensure the parent directory exists for a file path."""
    path.parent.mkdir(parents=True, exist_ok=True)


def write_result(path: PathLike, text: str) -> Path:
    """Write rendered output to ``path``, replacing any existing file.

    Returns:
        The path written.
    """
    path = Path(path)
    ensure_parent_dir(path)
    path.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d bytes to %s", len(text), path)
    return path
