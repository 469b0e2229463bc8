"""Command-line interface for flowcut."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

import numpy as np

from flowcut.algorithms.max_flow import solve
from flowcut.config import FLOW_CONFIG, FlowConfig
from flowcut.io import load_capacity, render_json, render_result, write_result
from flowcut.logging import get_logger, set_global_log_level
from flowcut.types.base import SOURCE, sink_of

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Render ``rows`` under ``headers`` as an indented plain-text table.

    Columns are left-aligned and at least ``min_width`` characters wide.
    An empty ``rows`` list renders as an empty string.
    """
    if not rows:
        return ""

    widths = [
        max(min_width, *(len(str(cell)) for cell in column))
        for column in zip(headers, *rows)
    ]

    def render(cells: List[Any]) -> str:
        padded = (str(cell).ljust(width) for cell, width in zip(cells, widths))
        return "   " + " | ".join(padded)

    rule = "   " + "-+-".join("-" * width for width in widths)
    return "\n".join([render(headers), rule] + [render(row) for row in rows])


def _format_duration(seconds: float) -> str:
    """Format elapsed wall time, e.g. ``123.0 ms``, ``1.23 s`` or ``1m 15.2s``."""
    if seconds < 1.0:
        return f"{seconds * 1e3:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes, rest = divmod(seconds, 60.0)
    return f"{int(minutes)}m {rest:.1f}s"


def _default_output_path(input_path: Path, as_json: bool) -> Path:
    """Return ``<stem>.flow.txt`` (or ``.flow.json``) in the working directory."""
    suffix = ".flow.json" if as_json else ".flow.txt"
    return Path.cwd() / f"{input_path.stem}{suffix}"


def _solve(
    path: Path,
    output: Optional[Path] = None,
    as_json: bool = False,
    stdout: bool = False,
    clamp: bool = True,
    check: bool = True,
) -> None:
    """Compute max flow/min cut for an input file and emit the result.

    Args:
        path: Matrix text file or YAML/JSON network document.
        output: Output file; defaults to ``<stem>.flow.txt`` in the working
            directory unless only ``stdout`` output was requested.
        as_json: Emit JSON instead of the text format.
        stdout: Print the rendered result.
        clamp: Show negative (reverse) flow entries as zero.
        check: Verify max-flow invariants after the computation.
    """
    logger.info(f"Loading capacities from: {path}")
    start = perf_counter()

    try:
        capacity, node_map = load_capacity(path)
        config = FlowConfig(check_invariants=check, clamp_negative_flow=clamp)
        result = solve(capacity, config=config)
        logger.info(
            f"Max flow {result.total_flow} over {result.num_vertices} vertices "
            f"after {result.augmentations} augmentations"
        )

        text = (
            render_json(result, clamp=clamp, node_map=node_map)
            if as_json
            else render_result(result, clamp=clamp)
        )

        target = output
        if target is None and not stdout:
            target = _default_output_path(path, as_json)
        if target is not None:
            logger.info(f"Writing results to: {target}")
            write_result(target, text)
            print(f"✅ Results written to: {target}")
        if stdout:
            print(text)

        logger.info(f"Solved in {_format_duration(perf_counter() - start)}")

    except FileNotFoundError:
        logger.error(f"Input file not found: {path}")
        print(f"❌ ERROR: Input file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to solve: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to solve: {type(e).__name__}: {e}")
        sys.exit(1)


def _inspect(path: Path) -> None:
    """Validate an input file and print a summary of the network."""
    logger.info(f"Inspecting: {path}")
    try:
        capacity, node_map = load_capacity(path)
        size = capacity.shape[0]
        src, dst = SOURCE, sink_of(size)
        out_of_source = int(capacity[src].sum())
        into_sink = int(capacity[:, dst].sum())

        def label(idx: int) -> str:
            if node_map is not None:
                return str(node_map.to_name[idx])
            return str(idx + 1)

        upper_bound = 0 if src == dst else min(out_of_source, into_sink)

        rows = [
            ["Vertices", str(size)],
            ["Edges", str(int(np.count_nonzero(capacity)))],
            ["Source", label(src)],
            ["Sink", label(dst)],
            ["Capacity out of source", str(out_of_source)],
            ["Capacity into sink", str(into_sink)],
            ["Flow upper bound", str(upper_bound)],
        ]
        print("✅ Input is valid")
        print(_format_table(["Property", "Value"], rows))

    except FileNotFoundError:
        logger.error(f"Input file not found: {path}")
        print(f"❌ ERROR: Input file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect input: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to inspect input: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``flowcut`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="flowcut",
        description="Compute maximum flow and minimum cut of a capacity matrix.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress console output (logs only)"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve,inspect}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser(
        "solve", help="Compute max flow and the source side of a min cut"
    )
    solve_parser.add_argument(
        "input",
        type=Path,
        help="Matrix text file, or a .yaml/.yml/.json network document",
    )
    solve_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help=(
            "Write results to this file (default: <input_stem>.flow.txt in the"
            " working directory, skipped when only --stdout is given)"
        ),
    )
    solve_parser.add_argument(
        "--json", action="store_true", help="Emit JSON instead of the text format"
    )
    solve_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print results to stdout (INFO logs are suppressed unless --verbose)",
    )
    solve_parser.add_argument(
        "--no-clamp",
        action="store_true",
        help="Show negative (cancelled) flow entries instead of zero",
    )
    solve_parser.add_argument(
        "--no-check",
        action="store_true",
        help="Skip post-computation invariant checks",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Validate an input file and summarize it"
    )
    inspect_parser.add_argument(
        "input",
        type=Path,
        help="Matrix text file, or a .yaml/.yml/.json network document",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet or (args.command == "solve" and args.stdout):
        # Log lines share stdout with the printed result
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    if args.command == "solve":
        _solve(
            path=args.input,
            output=args.output,
            as_json=args.json,
            stdout=args.stdout,
            clamp=FLOW_CONFIG.clamp_negative_flow and not args.no_clamp,
            check=FLOW_CONFIG.check_invariants and not args.no_check,
        )
    elif args.command == "inspect":
        _inspect(args.input)


if __name__ == "__main__":
    main()
