"""wdgraph CLI entry point.

Usage: uv run wdgraph [command]
"""
import argparse
import logging
import sys

log = logging.getLogger(__name__)


def _add_demo_parser(subparsers: argparse._SubParsersAction) -> None:
    from wdgraph.demo import DEMO_GRAPHS

    p = subparsers.add_parser(
        "demo",
        help="Build an example graph and print its shortest-path tree.",
    )
    p.add_argument(
        "--graph", choices=sorted(DEMO_GRAPHS), default="cities",
        help="Example graph to build (default: cities)",
    )
    p.add_argument(
        "--source", default=None,
        help="Source vertex (default: Stockholm for cities, A for letters)",
    )
    p.add_argument(
        "--variant", choices=["basic", "optimal", "both"], default="optimal",
        help="Relaxation rule to run (default: optimal)",
    )
    p.add_argument(
        "--verbose", action="store_true",
        help="Log the frontier and weight table after every iteration.",
    )
    p.add_argument(
        "--log-level", default=None,
        help="Root log level (default: INFO with --verbose, else WARNING)",
    )


def _run_demo(args: argparse.Namespace, parser: argparse.ArgumentParser) -> None:
    from wdgraph.demo import DEMO_GRAPHS
    from wdgraph.graph.weighted import VertexNotFoundError
    from wdgraph.paths.engine import ShortestPathEngine

    build, default_source = DEMO_GRAPHS[args.graph]
    source = args.source if args.source is not None else default_source
    engine = ShortestPathEngine(build())
    log.debug("demo graph %s: %r", args.graph, engine.graph)

    runs = []
    if args.variant in ("basic", "both"):
        runs.append(("Shortest Path", engine.shortest_path))
    if args.variant in ("optimal", "both"):
        runs.append(("Optimal Shortest Path", engine.optimal_shortest_path))

    for i, (title, run) in enumerate(runs):
        try:
            tree = run(source, verbose=args.verbose)
        except VertexNotFoundError as exc:
            parser.error(f"unknown source vertex: {exc}")
        if i:
            print()
        print(f"{title} from '{source}' to all the other vertices:")
        print(tree)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="wdgraph",
        description="Weighted directed graph with shortest-path trees.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_demo_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    level = args.log_level or ("INFO" if args.verbose else "WARNING")
    logging.basicConfig(level=level.upper(), format="%(message)s")

    if args.command == "demo":
        _run_demo(args, parser)
