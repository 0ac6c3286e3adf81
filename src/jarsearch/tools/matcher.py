"""
Case-insensitive literal substring matching.
"""

from typing import Optional


class TextMatcher:
    """
    Tests whether text contains a query, ignoring letter case.

    No word boundaries or pattern syntax: the query is a plain literal.
    """

    def __init__(self, query: str):
        self.query = query
        self._needle = query.lower()

    def matches(self, text: Optional[str]) -> bool:
        """Check whether the lowercased text contains the lowercased query."""
        if text is None:
            return False
        return self._needle in text.lower()
