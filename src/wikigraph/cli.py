"""CLI for wikigraph - link graphs of vimwiki and markdown notes."""

import argparse
import logging
import platform
import subprocess
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .export.data import to_json
from .export.dot import DotExporter
from .runtime import build_runtime

logger = logging.getLogger("wikigraph.cli")


def _non_negative(value: str) -> int:
    level = int(value)
    if level < 0:
        raise argparse.ArgumentTypeError("level must not be negative")
    return level


def _commit() -> str:
    """Short git commit of the source checkout, 'unknown' outside of one."""
    try:
        result = subprocess.run(
            ["git", "rev-parse", "--short", "HEAD"],
            cwd=Path(__file__).resolve().parent,
            capture_output=True,
            text=True,
            check=True,
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return result.stdout.strip() or "unknown"


def version_text() -> str:
    return "\n".join([
        f"wikigraph {__version__}",
        f"python {platform.python_version()}",
        f"platform {platform.platform()}",
        f"commit {_commit()}",
    ])


def _write(args: argparse.Namespace, text: str) -> None:
    if not text.endswith("\n"):
        text += "\n"
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)


def cmd_graph(args: argparse.Namespace, rt: Any) -> int:
    """Walk the wiki and print its link graph."""
    if args.root is None and rt.config.wiki.root is None:
        logger.warning("no root given, using current directory: %s", rt.wiki.root)

    level = args.level if args.level is not None else rt.config.graph.level
    cluster = args.cluster or rt.config.graph.cluster

    rt.wiki.walk(rt.skip_dirs)

    if args.format == "json":
        _write(args, to_json(rt.wiki.graph, level=level))
    else:
        dot = DotExporter(rt.wiki.graph).render(level=level, cluster=cluster)
        _write(args, dot.to_string())
    return 0


def cmd_links(args: argparse.Namespace, rt: Any) -> int:
    """Print the links a single document contributes to the graph."""
    path = Path(args.path)
    if not path.is_file():
        raise FileNotFoundError(f"Document {args.path} not found")
    if rt.wiki.remapper.ignore_path(str(path)):
        logger.info("ignored: %s", path)
        return 0
    for edge in rt.wiki.links_of(path):
        print(f"{edge.source}\t{edge.target}")
    return 0


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="wikigraph", description="Link graphs for vimwiki and markdown notes"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/wikigraph.toml, root/wikigraph.toml)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output"
    )
    parser.add_argument(
        "--version", action="store_true", help="Show version information and exit"
    )

    subparsers = parser.add_subparsers(dest="cmd")

    # graph command
    parser_graph = subparsers.add_parser("graph", help="Print the link graph of a wiki")
    parser_graph.add_argument(
        "root", nargs="?", type=Path, default=None,
        help="Wiki root directory (default: config, then current directory)"
    )
    parser_graph.add_argument(
        "skip", nargs="*", default=[],
        help="Directory names to skip in addition to .git"
    )
    parser_graph.add_argument(
        "--cluster", action="store_true", help="Cluster nodes in sub directories"
    )
    parser_graph.add_argument(
        "--diary", action="store_true",
        help="Keep diary entries apart instead of collapsing them into diary.wiki"
    )
    parser_graph.add_argument(
        "--level", type=_non_negative, default=None,
        help="Only draw documents with at least this many links (default: 0)"
    )
    parser_graph.add_argument(
        "--ignore", default=None,
        help="Regular expression of paths to leave out (default: none)"
    )
    parser_graph.add_argument(
        "--format", choices=["dot", "json"], default="dot",
        help="Output format (default: dot)"
    )
    parser_graph.add_argument(
        "-o", "--output", default=None, help="Write to this file instead of stdout"
    )

    # links command
    parser_links = subparsers.add_parser(
        "links", help="Show the resolved links of one document"
    )
    parser_links.add_argument("path", help="Document path")
    parser_links.add_argument(
        "--root", type=Path, default=None,
        help="Wiki root directory (default: config, then current directory)"
    )
    parser_links.add_argument(
        "--diary", action="store_true",
        help="Keep diary entries apart instead of collapsing them into diary.wiki"
    )
    parser_links.add_argument(
        "--ignore", default=None, help="Regular expression of paths to leave out"
    )

    args = parser.parse_args()

    if args.version:
        print(version_text())
        sys.exit(0)
    if args.cmd is None:
        parser.error("a command is required")

    level = logging.INFO
    if args.quiet:
        level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr)

    handlers = {
        "graph": cmd_graph,
        "links": cmd_links,
    }
    handler = handlers.get(args.cmd)
    if handler is None:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)

    try:
        # Build runtime
        rt = build_runtime(
            wiki_path=args.root,
            config_path=args.config,
            collapse_diary=False if args.diary else None,
            ignore=args.ignore,
            skip_dirs=getattr(args, "skip", None),
        )
        exit_code = handler(args, rt)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
