"""Search the B4X community forum from the command line."""

from .search.forum import ForumSearchClient, search_forum
from .search.models import SearchFailure, SearchResponse, SearchResultItem, SearchSuccess

__all__ = [
    "ForumSearchClient",
    "search_forum",
    "SearchFailure",
    "SearchResponse",
    "SearchResultItem",
    "SearchSuccess",
]

__version__ = "0.1.0"
