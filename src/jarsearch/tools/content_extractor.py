"""
Content extraction for jarsearch.

This module turns files into searchable text. Plain files are decoded with a
chain of encodings; archives are opened as zip files and each member with a
target extension is decoded as UTF-8. Failures are returned as
ExtractionResult values carrying an ErrorKind instead of being raised, so the
caller decides what to report.
"""

import zipfile
import zlib
from pathlib import Path
from typing import Iterator, Optional
import logging

from ..models.config import SearchConfig
from ..models.extraction import ErrorKind, ExtractionResult
from .extension_filter import is_target_file


logger = logging.getLogger(__name__)


def _kind_for_os_error(error: OSError) -> ErrorKind:
    """Map an OSError raised while reading to an ErrorKind."""
    if isinstance(error, PermissionError):
        return ErrorKind.ACCESS_DENIED
    if isinstance(error, FileNotFoundError):
        return ErrorKind.NOT_FOUND
    return ErrorKind.READ_ERROR


class ContentExtractor:
    """
    Extracts text from plain files and from archive members.

    Every file and archive handle is opened in a with block so it is closed
    on all exit paths, including when a consumer abandons iter_archive early.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """
        Initialize the extractor.

        Args:
            config: Search configuration providing target extensions and encodings
        """
        self.config = config or SearchConfig()

    def read_text_file(self, path: Path) -> ExtractionResult:
        """
        Read a plain file as text.

        Encodings from the configuration are tried in order and the first one
        that decodes the whole file wins.

        Args:
            path: File to read

        Returns:
            ExtractionResult with the decoded text, or the failure kind
        """
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            return ExtractionResult(path=path, kind=_kind_for_os_error(e), message=str(e))

        text = self.decode(data)
        if text is None:
            return ExtractionResult(
                path=path,
                kind=ErrorKind.ENCODING_UNSUPPORTED,
                message=f"Not decodable as any of: {', '.join(self.config.encodings)}"
            )
        return ExtractionResult(path=path, text=text)

    def decode(self, data: bytes) -> Optional[str]:
        """
        Decode bytes with the configured encoding chain.

        Returns:
            Decoded text, or None if no encoding accepts the data
        """
        for encoding in self.config.encodings:
            try:
                return data.decode(encoding)
            except UnicodeDecodeError:
                continue
        return None

    def iter_archive(self, path: Path) -> Iterator[ExtractionResult]:
        """
        Extract text from every target member of a zip archive.

        A failure of the archive as a whole is yielded as a single result
        whose entry_name is None. Member failures are yielded per member and
        the remaining members are still processed.

        Args:
            path: Archive to open

        Yields:
            ExtractionResult per target member, in archive order
        """
        try:
            size = path.stat().st_size
        except OSError as e:
            yield ExtractionResult(path=path, kind=_kind_for_os_error(e), message=str(e))
            return

        if size == 0:
            yield ExtractionResult(path=path, kind=ErrorKind.EMPTY, message="zip file is empty")
            return

        try:
            archive = zipfile.ZipFile(path)
        except PermissionError as e:
            yield ExtractionResult(path=path, kind=ErrorKind.ACCESS_DENIED, message=str(e))
            return
        except (zipfile.BadZipFile, zipfile.LargeZipFile, ValueError, EOFError) as e:
            yield ExtractionResult(path=path, kind=ErrorKind.CORRUPT, message=str(e))
            return
        except OSError as e:
            yield ExtractionResult(path=path, kind=_kind_for_os_error(e), message=str(e))
            return

        with archive:
            for info in archive.infolist():
                if info.is_dir() or not is_target_file(info.filename, self.config.target_extensions):
                    continue
                yield self._read_member(archive, info, path)

    def _read_member(self, archive: zipfile.ZipFile, info: zipfile.ZipInfo, path: Path) -> ExtractionResult:
        """Read and decode a single archive member."""
        name = info.filename
        try:
            with archive.open(info) as member:
                data = member.read()
        except RuntimeError as e:
            # zipfile raises RuntimeError for encrypted members without a password
            return ExtractionResult(path=path, entry_name=name, kind=ErrorKind.ACCESS_DENIED, message=str(e))
        except (zipfile.BadZipFile, zlib.error, NotImplementedError, EOFError) as e:
            return ExtractionResult(path=path, entry_name=name, kind=ErrorKind.CORRUPT, message=str(e))
        except OSError as e:
            return ExtractionResult(path=path, entry_name=name, kind=_kind_for_os_error(e), message=str(e))

        # Members get no fallback chain; undecodable bytes become U+FFFD
        return ExtractionResult(path=path, entry_name=name, text=data.decode('utf-8', errors='replace'))
