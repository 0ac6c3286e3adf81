"""
Search orchestration for jarsearch.

Wires the walker, extension filter, extractor, matcher and reporter into a
single pass over a directory tree. The SearchResults accumulator is created
per run and passed explicitly through every step.
"""

from pathlib import Path
from typing import Optional
import logging

from .models.config import SearchConfig
from .models.extraction import ExtractionResult, ErrorKind
from .models.search_results import MatchResult, SearchResults
from .models.search_target import SearchTarget
from .tools.content_extractor import ContentExtractor
from .tools.extension_filter import is_archive, is_target_file
from .tools.fs_walker import FSWalker
from .tools.matcher import TextMatcher
from .tools.reporter import SearchReporter


logger = logging.getLogger(__name__)


class StringSearcher:
    """
    Searches a directory tree for a literal string.

    Per-file and per-archive failures are logged and recorded on the results;
    they never abort the walk.
    """

    def __init__(self, config: Optional[SearchConfig] = None, reporter: Optional[SearchReporter] = None):
        """
        Initialize the searcher.

        Args:
            config: Search policy; defaults are used when omitted
            reporter: Console reporter; prints to stdout when omitted
        """
        self.config = config or SearchConfig()
        self.reporter = reporter or SearchReporter()
        self.extractor = ContentExtractor(self.config)

    def search(self, target: SearchTarget) -> SearchResults:
        """
        Run a complete search and print its summary.

        Args:
            target: Root directory and query

        Returns:
            SearchResults with matches in discovery order
        """
        results = SearchResults(target=target)
        matcher = TextMatcher(target.query)
        walker = FSWalker(self.config)

        self.reporter.print_header(target, self.config)

        for path in walker.walk(target.root_path):
            if not is_target_file(path.name, self.config.target_extensions):
                continue
            if is_archive(path.name, self.config.archive_extensions):
                self._search_archive(path, matcher, results)
            else:
                self._search_file(path, matcher, results)

        walk_stats = walker.get_stats()
        results.increment('directories_traversed', walk_stats['directories_traversed'])
        results.increment('files_scanned', walk_stats['files_scanned'])
        for error in walker.get_errors():
            results.add_error(error)

        self.reporter.print_summary(results)
        logger.debug(f"Search finished: {results}")
        return results

    def _search_file(self, path: Path, matcher: TextMatcher, results: SearchResults) -> None:
        results.increment('files_inspected')
        extraction = self.extractor.read_text_file(path)
        if not extraction.ok:
            self._handle_failure(extraction, results)
            return
        if matcher.matches(extraction.text):
            self._record_match(MatchResult(container_path=str(path)), results)

    def _search_archive(self, path: Path, matcher: TextMatcher, results: SearchResults) -> None:
        opened = True
        for extraction in self.extractor.iter_archive(path):
            if extraction.is_archive_entry:
                results.increment('entries_inspected')
            else:
                opened = False
            if not extraction.ok:
                self._handle_failure(extraction, results)
                continue
            if matcher.matches(extraction.text):
                self._record_match(
                    MatchResult(container_path=str(path), inner_entry_path=extraction.entry_name),
                    results
                )
        if opened:
            results.increment('archives_opened')

    def _record_match(self, match: MatchResult, results: SearchResults) -> None:
        results.add_match(match)
        self.reporter.report_match(match)

    def _handle_failure(self, extraction: ExtractionResult, results: SearchResults) -> None:
        """Log a failed extraction unless its kind is suppressed."""
        if extraction.kind.is_suppressed:
            logger.debug(f"Skipping undecodable file: {self._describe(extraction)} - {extraction.message}")
            return

        message = self._format_failure(extraction)
        logger.warning(message)
        results.add_error(message)

    @staticmethod
    def _describe(extraction: ExtractionResult) -> str:
        if extraction.is_archive_entry:
            return f"{extraction.path} -> {extraction.entry_name}"
        return str(extraction.path)

    def _format_failure(self, extraction: ExtractionResult) -> str:
        path = extraction.path
        if extraction.is_archive_entry:
            return f"Failed to read file in JAR: {path} -> {extraction.entry_name} - {extraction.message}"

        if is_archive(path.name, self.config.archive_extensions):
            if extraction.kind is ErrorKind.EMPTY:
                return f"Skipping empty JAR file: {path}"
            if extraction.kind is ErrorKind.ACCESS_DENIED:
                return f"Skipping JAR file (access restricted): {path}"
            return f"Failed to open JAR file: {path} - {extraction.message}"

        return f"Failed to read file: {path} - {extraction.message}"
