"""
Extraction outcome types for jarsearch.

Reading a file or an archive member never raises for per-item failures;
it returns an ExtractionResult whose kind tells the caller what happened.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class ErrorKind(Enum):
    """Outcome of a single extraction step."""
    OK = "ok"
    ENCODING_UNSUPPORTED = "encoding_unsupported"
    ACCESS_DENIED = "access_denied"
    CORRUPT = "corrupt"
    EMPTY = "empty"
    NOT_FOUND = "not_found"
    READ_ERROR = "read_error"

    @property
    def is_suppressed(self) -> bool:
        """Failures that are expected noise and not reported to the user."""
        return self is ErrorKind.ENCODING_UNSUPPORTED


@dataclass
class ExtractionResult:
    """
    Text extracted from a file or archive member, or the reason it failed.

    Attributes:
        path: Filesystem path of the file or archive
        entry_name: Member name inside the archive; None for plain files and
            for failures of the archive as a whole
        kind: Outcome of the extraction
        text: Decoded text when kind is OK
        message: Underlying error message for failures
    """
    path: Path
    entry_name: Optional[str] = None
    kind: ErrorKind = ErrorKind.OK
    text: Optional[str] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.kind is ErrorKind.OK

    @property
    def is_archive_entry(self) -> bool:
        return self.entry_name is not None
