from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field


class SearchResultItem(BaseModel):
    title: str = Field(..., min_length=3)
    url: str
    snippet: str = ""
    author: str = ""
    date: str = ""
    forum: Optional[str] = Field(None, description="Forum category; omitted from output when absent")

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class SearchSuccess(BaseModel):
    query: str
    result_count: int
    results: List[SearchResultItem] = Field(default_factory=list)

    @classmethod
    def from_results(cls, query: str, results: List[SearchResultItem]) -> "SearchSuccess":
        return cls(query=query, result_count=len(results), results=results)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class SearchFailure(BaseModel):
    error: str
    query: str
    results: List[SearchResultItem] = Field(default_factory=list)
    google_fallback: str

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


SearchResponse = Union[SearchSuccess, SearchFailure]
