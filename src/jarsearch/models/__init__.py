"""
Data models for jarsearch.

This module contains all the core data structures used throughout the system.
"""

from .config import SearchConfig, TARGET_EXTENSIONS, ARCHIVE_EXTENSIONS
from .extraction import ErrorKind, ExtractionResult
from .search_results import MatchResult, SearchResults
from .search_target import SearchTarget

__all__ = [
    'SearchConfig',
    'TARGET_EXTENSIONS',
    'ARCHIVE_EXTENSIONS',
    'ErrorKind',
    'ExtractionResult',
    'MatchResult',
    'SearchResults',
    'SearchTarget',
]
