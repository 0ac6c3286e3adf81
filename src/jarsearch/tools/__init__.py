"""
Search tools for jarsearch.

This module contains the pipeline components: filesystem walking, extension
filtering, content extraction, matching and reporting.
"""

from .content_extractor import ContentExtractor
from .extension_filter import get_file_extension, is_archive, is_target_file
from .fs_walker import FSWalker
from .matcher import TextMatcher
from .reporter import SearchReporter

__all__ = [
    'ContentExtractor',
    'FSWalker',
    'SearchReporter',
    'TextMatcher',
    'get_file_extension',
    'is_archive',
    'is_target_file',
]
