"""
Search results data models for jarsearch.

This module defines the structures for individual matches and the ordered
result accumulator that lives for the duration of one search run.
"""

from typing import Any, Dict, List, Optional
from datetime import datetime
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .search_target import SearchTarget


class MatchResult(BaseModel):
    """
    A single place where the query was found.

    Attributes:
        container_path: Filesystem path of the matched file or archive
        inner_entry_path: Path of the member inside the archive, or None when
            the match is a standalone file
    """

    model_config = ConfigDict(frozen=True)

    container_path: str = Field(..., min_length=1, description="Path of the matched file or archive")
    inner_entry_path: Optional[str] = Field(None, description="Member path inside the archive")

    @field_validator('inner_entry_path')
    @classmethod
    def validate_inner_entry_path(cls, v: Optional[str]) -> Optional[str]:
        """An entry path, when given, must be non-empty."""
        if v is not None and not v:
            raise ValueError("Archive entry path cannot be empty")
        return v

    @property
    def is_archive_entry(self) -> bool:
        """Whether the match occurred inside an archive."""
        return self.inner_entry_path is not None

    def to_dict(self) -> Dict[str, Any]:
        """Convert match to dictionary representation."""
        data = self.model_dump()
        data['is_archive_entry'] = self.is_archive_entry
        return data

    def __str__(self) -> str:
        if self.is_archive_entry:
            return f"{self.container_path} -> {self.inner_entry_path}"
        return self.container_path


def _empty_stats() -> Dict[str, int]:
    return {
        'directories_traversed': 0,
        'files_scanned': 0,
        'files_inspected': 0,
        'archives_opened': 0,
        'entries_inspected': 0,
        'errors': 0,
    }


class SearchResults(BaseModel):
    """
    Ordered results of one search run.

    Matches are kept in discovery order. The object is owned by the searcher
    for the length of the run and handed back to the caller at the end.

    Attributes:
        target: The target that produced these results
        matches: Matches in the order they were found
        errors: Warnings reported while searching
        stats: Scan counters
        timestamp: When the search was started
    """

    target: SearchTarget = Field(..., description="The target that produced these results")
    matches: List[MatchResult] = Field(default_factory=list, description="Matches in discovery order")
    errors: List[str] = Field(default_factory=list, description="Warnings reported while searching")
    stats: Dict[str, int] = Field(default_factory=_empty_stats, description="Scan counters")
    timestamp: datetime = Field(default_factory=datetime.now, description="When the search was started")

    def add_match(self, match: MatchResult) -> None:
        """Append a match to the results."""
        self.matches.append(match)

    def add_error(self, error: str) -> None:
        """Record a reported warning."""
        self.errors.append(error)
        self.stats['errors'] += 1

    def increment(self, counter: str, amount: int = 1) -> None:
        """Increment a scan counter."""
        self.stats[counter] = self.stats.get(counter, 0) + amount

    def get_match_count(self) -> int:
        return len(self.matches)

    def is_empty(self) -> bool:
        return not self.matches

    def has_errors(self) -> bool:
        return len(self.errors) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert search results to dictionary representation."""
        data = self.model_dump()
        data['target'] = self.target.to_dict()
        data['matches'] = [match.to_dict() for match in self.matches]
        data['match_count'] = self.get_match_count()
        data['timestamp'] = self.timestamp.isoformat()
        data['has_errors'] = self.has_errors()
        return data

    def __str__(self) -> str:
        parts = [f"Found {self.get_match_count()} matches"]
        parts.append(f"Scanned {self.stats.get('files_scanned', 0)} files")
        if self.has_errors():
            parts.append(f"Errors: {len(self.errors)}")
        return " | ".join(parts)
