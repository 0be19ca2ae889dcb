from .cookies import CookieSet
from .fetcher import fetch
from .models import FetchOptions, FetchResult

__all__ = ["CookieSet", "fetch", "FetchOptions", "FetchResult"]
