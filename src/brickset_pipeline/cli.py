"""Command-line interface for printing the LEGO set reports.

Provides subcommands: `basics`, `groupings`, `summary`, and `all`. Each
command is implemented as a `cmd_*` function that accepts an argparse
namespace and the loaded record store.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from brickset_pipeline.config import get_settings
from brickset_pipeline.logging_config import configure_logging
from brickset_pipeline.ingest.load_sets import LegoSetStore
from brickset_pipeline.aggregate.report import LegoSetReport

log = logging.getLogger(__name__)


# --------------------------------------------------
# Commands
# --------------------------------------------------
def cmd_basics(args: argparse.Namespace, store: LegoSetStore) -> None:
    """Print counts, sorted names, first names and the average piece count."""
    LegoSetReport(store.get_all).print_basics(args.theme, args.threshold)


def cmd_groupings(args: argparse.Namespace, store: LegoSetStore) -> None:
    """Print the piece-count match, distinct tags, max pieces and groupings."""
    LegoSetReport(store.get_all).print_groupings(args.piece_count)


def cmd_summary(args: argparse.Namespace, store: LegoSetStore) -> None:
    """Print per-theme tables and the largest sets."""
    LegoSetReport(store.get_all).print_summary(args.top_n)


def cmd_all(args: argparse.Namespace, store: LegoSetStore) -> None:
    """Convenience: run basics → groupings → summary with the provided args."""
    cmd_basics(args, store)
    cmd_groupings(args, store)
    cmd_summary(args, store)


# --------------------------------------------------
# CLI
# --------------------------------------------------
def _add_basics_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--theme", default="Games")
    p.add_argument("--threshold", type=int, default=450)


def _add_groupings_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--piece-count", type=int, default=481)


def _add_summary_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--top-n", type=int, default=5)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the top-level argument parser for the CLI.

    The returned parser has subcommands `basics`, `groupings`, `summary`
    and `all`, plus a global `--data-file` overriding the bundled dataset.

    Returns:
        Configured argparse.ArgumentParser instance.
    """
    p = argparse.ArgumentParser(prog="brickset-pipeline")
    p.add_argument("--data-file", type=Path, default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    _add_basics_args(sub.add_parser("basics"))
    _add_groupings_args(sub.add_parser("groupings"))
    _add_summary_args(sub.add_parser("summary"))

    p_all = sub.add_parser("all")
    _add_basics_args(p_all)
    _add_groupings_args(p_all)
    _add_summary_args(p_all)

    return p


COMMANDS = {
    "basics": cmd_basics,
    "groupings": cmd_groupings,
    "summary": cmd_summary,
    "all": cmd_all,
}


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and dispatch commands."""
    s = get_settings()
    configure_logging(level=s.log_level)

    args = build_parser().parse_args(argv)
    store = LegoSetStore(args.data_file or s.data_file)

    log.info("Running %s over %d sets", args.cmd, len(store))
    COMMANDS[args.cmd](args, store)


if __name__ == "__main__":
    main()
