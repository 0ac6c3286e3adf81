"""
Configuration data models for jarsearch.

This module defines the fixed search policy for a run: which file extensions
are inspected, which of them are treated as archives, and which text
encodings are tried when reading plain files.
"""

import codecs
import locale
from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


TARGET_EXTENSIONS: Tuple[str, ...] = ('.class', '.properties', '.jar')
ARCHIVE_EXTENSIONS: Tuple[str, ...] = ('.jar',)


def _default_encodings() -> List[str]:
    return ['utf-8', 'latin-1', locale.getpreferredencoding(False)]


def normalize_extension(ext: str) -> str:
    """Normalize an extension to lowercase with a leading dot."""
    ext = ext.strip().lower()
    if not ext:
        raise ValueError("Extension cannot be empty")
    if not ext.startswith('.'):
        ext = '.' + ext
    return ext


class SearchConfig(BaseModel):
    """
    Search policy for a single run.

    Attributes:
        target_extensions: Extensions whose files and archive entries are searched
        archive_extensions: Extensions opened as zip archives
        encodings: Encodings tried in order when decoding plain files
        follow_symlinks: Whether symbolic links to directories are followed
    """

    target_extensions: Tuple[str, ...] = Field(TARGET_EXTENSIONS, description="Extensions to search")
    archive_extensions: Tuple[str, ...] = Field(ARCHIVE_EXTENSIONS, description="Extensions opened as archives")
    encodings: List[str] = Field(default_factory=_default_encodings, min_length=1,
                                 description="Encodings tried when reading plain files")
    follow_symlinks: bool = Field(True, description="Follow symbolic links to directories")

    @field_validator('target_extensions', 'archive_extensions', mode='before')
    @classmethod
    def validate_extensions(cls, v) -> Tuple[str, ...]:
        """Normalize extensions, dropping duplicates but keeping order."""
        if isinstance(v, str):
            v = [v]
        normalized = []
        for ext in v:
            ext = normalize_extension(ext)
            if ext not in normalized:
                normalized.append(ext)
        return tuple(normalized)

    @field_validator('encodings')
    @classmethod
    def validate_encodings(cls, v: List[str]) -> List[str]:
        """Validate that every encoding is known to the codec registry."""
        normalized = []
        for name in v:
            try:
                codec = codecs.lookup(name).name
            except LookupError:
                raise ValueError(f"Unknown encoding: {name}")
            if codec not in normalized:
                normalized.append(codec)
        return normalized

    @model_validator(mode='after')
    def validate_archive_subset(self):
        """Archive extensions must also be target extensions."""
        missing = [ext for ext in self.archive_extensions if ext not in self.target_extensions]
        if missing:
            raise ValueError(f"Archive extensions not in target set: {', '.join(missing)}")
        return self

    def describe_extensions(self) -> str:
        """Comma separated extension list for display."""
        return ", ".join(self.target_extensions)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        data = self.model_dump()
        data['target_extensions'] = list(self.target_extensions)
        data['archive_extensions'] = list(self.archive_extensions)
        return data
