"""
Schemas - Search State

Immutable snapshot of the search process at one instant. The pipeline
emits a new SearchState for every transition; nothing mutates one.
"""

from typing import Optional

from pydantic import BaseModel, model_validator

from github_search.schemas.search import SearchResult


class SearchState(BaseModel):
    """Point-in-time view of the search: result, loading and error flags."""
    result: Optional[SearchResult] = None
    has_error: bool = False
    is_loading: bool = False

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_loading_excludes_error(self) -> "SearchState":
        if self.is_loading and self.has_error:
            raise ValueError("a snapshot cannot be loading and failed at once")
        return self

    @classmethod
    def initial(cls) -> "SearchState":
        """Seed snapshot shown before any term is entered."""
        return cls(result=SearchResult.no_term())

    @classmethod
    def loading(cls) -> "SearchState":
        return cls(is_loading=True)

    @classmethod
    def error(cls) -> "SearchState":
        return cls(has_error=True)

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchState":
        return cls(result=result)
