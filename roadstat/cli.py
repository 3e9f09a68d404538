"""
roadstat CLI: command-line interface for road network statistics.
"""

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path

from roadstat.analysis import (
    GraphAnalyzer,
    StartNodeError,
    load_settings,
    render_report_text,
    report_to_dict,
)
from roadstat.ingestion import EdgeListFormatError, read_dataset


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code: 0 on success, 1 on errors
    """
    parser = argparse.ArgumentParser(
        description="roadstat: structural statistics for undirected edge-list graphs"
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Analyze an edge-list dataset")
    analyze_parser.add_argument("path", help="Path to edge-list file")
    analyze_parser.add_argument(
        "--config",
        help="Settings YAML file path (default: built-in defaults)",
    )
    analyze_parser.add_argument(
        "--start", type=int, help="Shortest-path start node (internal index unless --start-label)"
    )
    analyze_parser.add_argument(
        "--start-label",
        action="store_true",
        default=None,
        help="Interpret --start as an external node label",
    )
    analyze_parser.add_argument("--cutoff", type=int, help="Maximum hop distance for shortest paths")
    analyze_parser.add_argument(
        "--degree-threshold", type=int, help="Count nodes with degree above this value"
    )
    analyze_parser.add_argument(
        "--gap-threshold", type=int, help="Minimum index gap for the distance-gap analysis"
    )
    analyze_parser.add_argument(
        "--parallel",
        action="store_true",
        default=None,
        help="Run independent analyses on worker threads",
    )
    analyze_parser.add_argument(
        "--format", choices=("text", "json"), default="text", help="Output format"
    )
    analyze_parser.add_argument(
        "--output",
        help="Output file path (default: print to stdout)",
    )
    analyze_parser.add_argument("--verbose", action="store_true", help="Debug logging on stderr")

    args = parser.parse_args(argv)

    if args.command == "analyze":
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )
        return _run_analyze(args)
    else:
        parser.print_help()
        return 1


def _overrides(args: argparse.Namespace) -> dict:
    """Settings fields given explicitly on the command line."""
    mapping = {
        "start_node": args.start,
        "start_by_label": args.start_label,
        "cutoff": args.cutoff,
        "degree_threshold": args.degree_threshold,
        "gap_threshold": args.gap_threshold,
        "parallel": args.parallel,
    }
    return {k: v for k, v in mapping.items() if v is not None}


def _run_analyze(args: argparse.Namespace) -> int:
    """
    Run the analyze command.

    Returns:
        Exit code: 0 on success, 1 on errors
    """
    try:
        settings = load_settings(args.config)
        overrides = _overrides(args)
        if overrides:
            # route through the loader so overrides are validated too
            settings = load_settings({**dataclasses.asdict(settings), **overrides})

        graph = read_dataset(args.path)
        report = GraphAnalyzer(settings).analyze(graph)

        if args.format == "json":
            output_text = json.dumps(report_to_dict(report), indent=2)
        else:
            output_text = "\n".join(render_report_text(report))

        if args.output:
            Path(args.output).write_text(output_text + "\n", encoding="utf-8")
        else:
            print(output_text)
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except EdgeListFormatError as e:
        print(f"Error: malformed edge list: {e}", file=sys.stderr)
        return 1
    except StartNodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
