"""
Search target data model for jarsearch.

A search target is the immutable input of one run: the directory to walk and
the literal string to look for.
"""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchTarget(BaseModel):
    """
    Represents what to search for and where.

    The query is matched case-insensitively as a literal substring; it is not
    stripped or otherwise normalized so that leading and trailing whitespace
    stay significant.

    Attributes:
        root_path: Directory to search, absolute or relative
        query: Literal text to look for
    """

    model_config = ConfigDict(frozen=True)

    root_path: str = Field(..., description="Directory to search")
    query: str = Field(..., description="Literal text to search for")

    @field_validator('root_path')
    @classmethod
    def validate_root_path(cls, v: str) -> str:
        """
        Reject root paths that cannot name a filesystem location.

        An empty path is accepted and means the current directory.
        """
        if '\x00' in v:
            raise ValueError("Root path cannot contain NUL characters")
        return v

    def to_dict(self) -> Dict[str, Any]:
        """Convert the target to a dictionary representation."""
        return self.model_dump()

    def __str__(self) -> str:
        return f"Query: '{self.query}' | Root: {self.root_path}"
