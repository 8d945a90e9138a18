"""
Schemas - Search Models

Pydantic models for GitHub repository search results.
"""

from enum import Enum
from typing import Any, Dict, List

from pydantic import BaseModel


class SearchResultKind(str, Enum):
    """Tag separating "never searched" from "searched, nothing found"."""
    NO_TERM = "no_term"
    EMPTY = "empty"
    POPULATED = "populated"


class SearchResultItem(BaseModel):
    """Single repository hit."""
    full_name: str
    url: str
    avatar_url: str

    model_config = {"frozen": True}

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "SearchResultItem":
        """Build an item from a GitHub repository object."""
        return cls(
            full_name=data["full_name"],
            url=data["html_url"],
            avatar_url=data["owner"]["avatar_url"],
        )


class SearchResult(BaseModel):
    """Outcome of a completed search."""
    kind: SearchResultKind
    items: List[SearchResultItem] = []

    model_config = {"frozen": True}

    @classmethod
    def no_term(cls) -> "SearchResult":
        return cls(kind=SearchResultKind.NO_TERM)

    @classmethod
    def from_items(cls, items: List[SearchResultItem]) -> "SearchResult":
        kind = SearchResultKind.POPULATED if items else SearchResultKind.EMPTY
        return cls(kind=kind, items=list(items))

    @classmethod
    def from_json(cls, items_json: List[Dict[str, Any]]) -> "SearchResult":
        """Parse the ``items`` array of a search API response."""
        return cls.from_items([SearchResultItem.from_json(i) for i in items_json])

    @property
    def is_no_term(self) -> bool:
        return self.kind == SearchResultKind.NO_TERM

    @property
    def is_empty(self) -> bool:
        return self.kind == SearchResultKind.EMPTY

    @property
    def is_populated(self) -> bool:
        return self.kind == SearchResultKind.POPULATED
