#!/usr/bin/env python3
"""
Main CLI entry point with argument parser and command dispatch.
"""

from __future__ import annotations

import argparse
import logging

from taggable.__version__ import __version__
from taggable.interfaces.cli.commands.find import cmd_find
from taggable.interfaces.cli.commands.list_tags import cmd_list_tags
from taggable.interfaces.cli.commands.rebuild_index import cmd_rebuild_index


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    p = argparse.ArgumentParser(
        prog="taggable",
        description="taggable - tag lists and tag frequency index for ArangoDB collections",
        epilog="Examples:\n"
        "  taggable rebuild-index articles                 # Recompute the tags index\n"
        "  taggable tags articles --weights                # Tag cloud weights\n"
        "  taggable tags posts --locale pt-BR              # Tags of one locale\n"
        "  taggable find articles food bee --match all     # Documents with both tags",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    sub = p.add_subparsers(
        dest="cmd",
        title="commands",
        description="Available commands (use 'taggable <command> --help' for command-specific help)",
    )

    # rebuild-index: Full index rebuild
    s = sub.add_parser("rebuild-index", help="Rebuild the tags index of a collection")
    s.add_argument("collection", help="document collection name")
    s.set_defaults(func=cmd_rebuild_index)

    # tags: Read the index
    s = sub.add_parser("tags", help="List indexed tags")
    s.add_argument("collection", help="document collection name")
    s.add_argument("--weights", action="store_true", help="show counts, ranked by popularity")
    s.add_argument("--locale", help="locale to read (localized collections only)")
    s.set_defaults(func=cmd_list_tags)

    # find: Query the primary collection
    s = sub.add_parser("find", help="Find documents by tags")
    s.add_argument("collection", help="document collection name")
    s.add_argument("tags", nargs="+", help="tags to match")
    s.add_argument("--match", choices=["any", "all"], default="any", help="match any (default) or all tags")
    s.add_argument("--locale", help="locale to match (localized collections only)")
    s.add_argument("--limit", type=int, default=None, help="max documents to return")
    s.set_defaults(func=cmd_find)

    return p


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Configure logging once for the whole process
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # If no command provided, show help
    if args.cmd is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
