from .models import SearchFailure, SearchResponse, SearchResultItem, SearchSuccess
from .forum import ForumSearchClient, google_fallback_url, search_forum

__all__ = [
    "ForumSearchClient",
    "google_fallback_url",
    "search_forum",
    "SearchFailure",
    "SearchResponse",
    "SearchResultItem",
    "SearchSuccess",
]
