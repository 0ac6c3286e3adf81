"""
jarsearch - Core Package

Recursive, case-insensitive string search over .class, .properties and .jar
files, looking inside JAR archives without unpacking them to disk.
"""

from .models import MatchResult, SearchConfig, SearchResults, SearchTarget
from .search import StringSearcher

__version__ = "0.1.0"

__all__ = [
    'MatchResult',
    'SearchConfig',
    'SearchResults',
    'SearchTarget',
    'StringSearcher',
]
