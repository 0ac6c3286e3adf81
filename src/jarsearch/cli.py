"""
Command-line entry point for jarsearch.

    jarsearch <search_path> <search_string> [-v]

Matches and the summary go to stdout; warnings and diagnostics go to stderr.
Exit code is 0 for any completed run (including a usage message) and 1 when
an unexpected error stops the search.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .models.config import SearchConfig
from .models.search_target import SearchTarget
from .search import StringSearcher
from .tools.reporter import SearchReporter


logger = logging.getLogger(__name__)

USAGE = (
    "Usage: jarsearch <search_path> <search_string>\n"
    "Example: jarsearch /path/to/project \"myString\""
)

EXIT_OK = 0
EXIT_FAILURE = 1


class _ConsoleHandler(logging.StreamHandler):
    """stderr handler installed by the CLI; replaced on every run."""


def configure_logging(verbose: bool = False) -> None:
    """Send package log records to stderr as bare messages."""
    package_logger = logging.getLogger('jarsearch')
    for handler in list(package_logger.handlers):
        if isinstance(handler, _ConsoleHandler):
            package_logger.removeHandler(handler)

    handler = _ConsoleHandler(sys.stderr)
    handler.setFormatter(logging.Formatter('%(message)s'))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def build_option_parser() -> argparse.ArgumentParser:
    """
    Parser for the options that may follow the two positional arguments.

    The search path and search string are taken verbatim before this parser
    runs, so a query such as '-Xmx512m' is searched for, not parsed.
    """
    parser = argparse.ArgumentParser(prog="jarsearch", usage=USAGE, add_help=False)
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging and scan statistics")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Arguments without the program name; sys.argv[1:] when omitted

    Returns:
        Process exit code
    """
    argv = list(sys.argv[1:] if argv is None else argv)

    if len(argv) < 2:
        print(USAGE)
        return EXIT_OK

    search_path, search_string = argv[0], argv[1]
    options, extra = build_option_parser().parse_known_args(argv[2:])

    configure_logging(options.verbose)
    if extra:
        logger.debug(f"Ignoring extra arguments: {' '.join(extra)}")

    try:
        target = SearchTarget(root_path=search_path, query=search_string)
        results = StringSearcher(SearchConfig(), SearchReporter()).search(target)
    except Exception as e:
        logger.exception(f"Error during search: {e}")
        return EXIT_FAILURE

    logger.info(f"{results}")
    for name, value in results.stats.items():
        logger.debug(f"  {name}: {value}")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
