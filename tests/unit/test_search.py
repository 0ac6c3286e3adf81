"""
Unit tests for search orchestration.

Runs StringSearcher over real temporary trees containing plain files and
JAR archives.
"""

import io
import os
import tempfile
import shutil
import zipfile
from pathlib import Path
from unittest.mock import patch
import pytest

from jarsearch.search import StringSearcher
from jarsearch.models.config import SearchConfig
from jarsearch.models.search_results import MatchResult
from jarsearch.models.search_target import SearchTarget
from jarsearch.tools.reporter import SearchReporter


def make_jar(path: Path, entries: dict) -> Path:
    with zipfile.ZipFile(path, 'w', compression=zipfile.ZIP_DEFLATED) as zf:
        for name, data in entries.items():
            zf.writestr(name, data)
    return path


class TestStringSearcher:
    """Test cases for the StringSearcher class."""

    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()
        self.root = Path(self.temp_dir)
        self.output = io.StringIO()
        self.searcher = StringSearcher(SearchConfig(), SearchReporter(self.output))

    def teardown_method(self):
        if os.path.exists(self.temp_dir):
            shutil.rmtree(self.temp_dir)

    def _search(self, query, root=None):
        return self.searcher.search(SearchTarget(root_path=str(root or self.root), query=query))

    def _create_scenario(self):
        (self.root / "a.properties").write_text("port=5432 database=x")
        (self.root / "b.txt").write_text("database")
        make_jar(self.root / "lib.jar", {"pkg/Config.class": b"db=database;"})

    def test_mixed_tree_scenario(self):
        """A properties file and a JAR member match; the .txt file never does."""
        self._create_scenario()

        results = self._search("database")

        assert results.matches == [
            MatchResult(container_path=str(self.root / "a.properties")),
            MatchResult(container_path=str(self.root / "lib.jar"), inner_entry_path="pkg/Config.class"),
        ]
        output = self.output.getvalue()
        assert "b.txt" not in output
        assert f"Found in file: {self.root / 'a.properties'}" in output
        assert f"Found in JAR: {self.root / 'lib.jar'} -> pkg/Config.class" in output
        assert "Found matches: 2" in output

    def test_non_target_files_are_never_read(self):
        self._create_scenario()
        real_open = open
        opened = []

        def tracking_open(file, *args, **kwargs):
            opened.append(Path(file).name)
            return real_open(file, *args, **kwargs)

        with patch("builtins.open", side_effect=tracking_open):
            self._search("database")

        assert "b.txt" not in opened
        assert "a.properties" in opened

    def test_case_insensitive(self):
        (self.root / "one.properties").write_text("database")
        (self.root / "two.properties").write_text("DATABASE")
        (self.root / "three.properties").write_text("DaTaBaSe")

        results = self._search("Database")

        assert results.get_match_count() == 3

    def test_deterministic_results(self):
        self._create_scenario()
        (self.root / "sub").mkdir()
        (self.root / "sub" / "Z.class").write_text("database")

        first = self._search("database")
        second = self._search("database")

        assert first.matches == second.matches
        assert first is not second

    def test_nested_directories_and_latin1(self):
        nested = self.root / "com" / "example"
        nested.mkdir(parents=True)
        (nested / "Dao.class").write_bytes(b"\xca\xfe\xba\xbe\x00jdbc:postgresql")

        results = self._search("JDBC:PostgreSQL")

        assert [m.container_path for m in results.matches] == [str(nested / "Dao.class")]

    def test_empty_archive_warns_once(self, caplog):
        (self.root / "empty.jar").write_bytes(b"")

        with caplog.at_level("WARNING"):
            results = self._search("anything")

        assert results.is_empty()
        assert results.errors == [f"Skipping empty JAR file: {self.root / 'empty.jar'}"]
        warnings = [r for r in caplog.records if r.levelname == "WARNING"]
        assert len(warnings) == 1

    def test_corrupt_archive_is_skipped(self, caplog):
        (self.root / "bad.jar").write_bytes(b"definitely not a zip")
        (self.root / "good.properties").write_text("needle")

        with caplog.at_level("WARNING"):
            results = self._search("needle")

        assert [m.container_path for m in results.matches] == [str(self.root / "good.properties")]
        assert len(results.errors) == 1
        assert results.errors[0].startswith(f"Failed to open JAR file: {self.root / 'bad.jar'}")

    def test_restricted_archive_is_skipped(self):
        make_jar(self.root / "signed.jar", {"A.class": b"needle"})

        with patch("jarsearch.tools.content_extractor.zipfile.ZipFile",
                   side_effect=PermissionError(13, "Permission denied")):
            results = self._search("needle")

        assert results.is_empty()
        assert results.errors == [f"Skipping JAR file (access restricted): {self.root / 'signed.jar'}"]

    def test_unreadable_member_reported_and_others_searched(self):
        make_jar(self.root / "lib.jar", {"A.class": b"needle", "B.class": b"needle"})
        real_open = zipfile.ZipFile.open

        def fake_open(archive, info, *args, **kwargs):
            if info.filename == "A.class":
                raise RuntimeError("File 'A.class' is encrypted, password required for extraction")
            return real_open(archive, info, *args, **kwargs)

        with patch.object(zipfile.ZipFile, "open", fake_open):
            results = self._search("needle")

        assert [m.inner_entry_path for m in results.matches] == ["B.class"]
        assert len(results.errors) == 1
        assert results.errors[0].startswith(f"Failed to read file in JAR: {self.root / 'lib.jar'} -> A.class")

    def test_encoding_failures_are_suppressed(self, caplog):
        searcher = StringSearcher(SearchConfig(encodings=['utf-8']), SearchReporter(self.output))
        (self.root / "Binary.class").write_bytes(b"\xff\xfe\xfd")

        with caplog.at_level("WARNING"):
            results = searcher.search(SearchTarget(root_path=str(self.root), query="x"))

        assert results.is_empty()
        assert results.errors == []
        assert caplog.records == []

    def test_unreadable_file_is_reported(self):
        (self.root / "locked.properties").write_text("needle")
        (self.root / "open.properties").write_text("needle")
        real_open = open

        def failing_open(file, *args, **kwargs):
            if Path(file).name == "locked.properties":
                raise PermissionError(13, "Permission denied")
            return real_open(file, *args, **kwargs)

        with patch("builtins.open", side_effect=failing_open):
            results = self._search("needle")

        assert [Path(m.container_path).name for m in results.matches] == ["open.properties"]
        assert len(results.errors) == 1
        assert results.errors[0].startswith(f"Failed to read file: {self.root / 'locked.properties'}")

    def test_missing_root(self, caplog):
        missing = self.root / "nope"

        with caplog.at_level("WARNING"):
            results = self._search("x", root=missing)

        assert results.is_empty()
        assert results.errors == [f"Directory does not exist or is not a directory: {missing}"]
        assert len(caplog.records) == 1
        assert "String not found in specified files." in self.output.getvalue()

    def test_nested_jar_member_matched_as_text(self):
        inner = make_jar(self.root / "inner.zip", {"Inner.class": b"needle"})
        make_jar(self.root / "outer.jar", {"lib/inner.jar": inner.read_bytes()})

        results = self._search("Inner.class")

        # Member names are stored uncompressed in the inner archive
        assert results.matches == [
            MatchResult(container_path=str(self.root / "outer.jar"), inner_entry_path="lib/inner.jar")
        ]

    def test_stats(self):
        self._create_scenario()
        (self.root / "empty.jar").write_bytes(b"")

        results = self._search("database")

        assert results.stats['directories_traversed'] == 1
        assert results.stats['files_scanned'] == 4
        assert results.stats['files_inspected'] == 1
        assert results.stats['archives_opened'] == 1
        assert results.stats['entries_inspected'] == 1
        assert results.stats['errors'] == 1

    def test_output_layout(self):
        self._create_scenario()

        self._search("database")

        lines = self.output.getvalue().splitlines()
        assert lines[0] == 'Searching for string: "database"'
        assert lines[1] == f"In directory: {self.root}"
        assert lines[2] == "Looking for files with extensions: .class, .properties, .jar"
        assert lines[3] == "=" * 42
        assert lines[-4:] == [
            "Found matches: 2",
            "Results:",
            f"  {self.root / 'a.properties'}",
            f"  {self.root / 'lib.jar'} -> pkg/Config.class",
        ]
