"""
jdiff.cli — Command line entry point.

    jdiff <input1> <input2> <output-prefix> [--indent N] [--sort-keys]
          [--show-delta] [-v | -vv | -q]

Writes <output-prefix>_eq.json, <output-prefix>_diff_ab.json and
<output-prefix>_diff_ba.json.  Exit status is 0 on success and 1 on any
usage, input or output error.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from . import __version__
from .core import compare, format_delta, summarize
from .formats import JdiffError, output_paths, read_document, write_document
from .views import VIEW_FILTERS, build_views

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that exits with 1 instead of 2 on usage errors."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    ap = _Parser(
        prog="jdiff",
        description="Compare two JSON documents and write the equal part and "
                    "the differences seen from each side.",
    )
    ap.add_argument("input1", help="first JSON document")
    ap.add_argument("input2", help="second JSON document")
    ap.add_argument("output_prefix", help="prefix for <prefix>_eq.json, "
                                          "<prefix>_diff_ab.json, <prefix>_diff_ba.json")
    ap.add_argument("--indent", type=int, default=2,
                    help="indentation of the output files (default: 2)")
    ap.add_argument("--sort-keys", action="store_true",
                    help="write object keys in sorted order")
    ap.add_argument("--show-delta", action="store_true",
                    help="also print every compared position to stdout")
    verbosity = ap.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="count", dest="verbosity", default=0,
                           help="log progress to stderr (-vv for debug output)")
    verbosity.add_argument("-q", "--quiet", action="store_const", const=-1, dest="verbosity",
                           help="log errors only")
    ap.set_defaults(verbosity=0)
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


@dataclass
class Config:
    """Program configuration, as given on the command line."""
    first_input: Path
    second_input: Path
    output_prefix: str
    indent: int = 2
    sort_keys: bool = False
    show_delta: bool = False
    verbosity: int = 0

    @classmethod
    def from_argv(cls, argv: Optional[Sequence[str]] = None) -> "Config":
        """Parse arguments.  Exits with status 1 on a usage error."""
        args = build_parser().parse_args(argv)
        return cls(
            first_input=Path(args.input1),
            second_input=Path(args.input2),
            output_prefix=args.output_prefix,
            indent=args.indent,
            sort_keys=args.sort_keys,
            show_delta=args.show_delta,
            verbosity=args.verbosity,
        )


def log_level(verbosity: int) -> int:
    if verbosity > 1:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    if verbosity < 0:
        return logging.ERROR
    return logging.WARNING


def configure_logging(verbosity: int = 0) -> None:
    logging.basicConfig(level=log_level(verbosity), stream=sys.stderr,
                        format="%(levelname)s %(name)s: %(message)s")


def run(config: Config) -> dict[str, Path]:
    """
    Compare the two inputs and write the three views.

    Returns the written paths keyed by view suffix.  Raises JdiffError
    on the first read, parse or write failure; files written before the
    failure are left in place.
    """
    first = read_document(config.first_input)
    second = read_document(config.second_input)
    logger.info("read %s and %s", config.first_input, config.second_input)

    delta = compare(first, second)
    counts = summarize(delta)
    logger.info("compared: %s",
                ", ".join(f"{kind.name.lower()}={n}" for kind, n in counts.items()))

    if config.show_delta:
        print(format_delta(delta))

    views = build_views(delta).by_suffix()
    written = {}
    for suffix, path in output_paths(config.output_prefix, VIEW_FILTERS).items():
        written[suffix] = write_document(path, views[suffix],
                                         indent=config.indent, sort_keys=config.sort_keys)
        logger.info("wrote %s", path)
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    config = Config.from_argv(argv)
    configure_logging(config.verbosity)
    try:
        run(config)
    except JdiffError as e:
        logger.debug("run failed", exc_info=True)
        print(f"jdiff: error: {e}", file=sys.stderr)
        return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
