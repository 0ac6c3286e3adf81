"""
Console reporting for jarsearch.

Prints the run header, a line for each match as soon as it is found, and the
final summary. Warnings are not printed here; they go through logging.
"""

import sys
from typing import Optional, TextIO

from ..models.config import SearchConfig
from ..models.search_results import MatchResult, SearchResults
from ..models.search_target import SearchTarget


SEPARATOR = "=" * 42


class SearchReporter:
    """
    Writes search progress and results to a text stream.

    Args:
        stream: Output stream; sys.stdout at call time when omitted
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _print(self, line: str = "") -> None:
        print(line, file=self.stream, flush=True)

    def print_header(self, target: SearchTarget, config: SearchConfig) -> None:
        self._print(f'Searching for string: "{target.query}"')
        self._print(f"In directory: {target.root_path}")
        self._print(f"Looking for files with extensions: {config.describe_extensions()}")
        self._print(SEPARATOR)

    def report_match(self, match: MatchResult) -> None:
        """Announce a single match."""
        if match.is_archive_entry:
            self._print(f"Found in JAR: {match.container_path} -> {match.inner_entry_path}")
        else:
            self._print(f"Found in file: {match.container_path}")

    def print_summary(self, results: SearchResults) -> None:
        """
        Print the final summary: either a not-found line, or the match count
        followed by every match in discovery order.
        """
        if results.is_empty():
            self._print("String not found in specified files.")
            return

        self._print(f"Found matches: {results.get_match_count()}")
        self._print("Results:")
        for match in results.matches:
            self._print(f"  {match}")
