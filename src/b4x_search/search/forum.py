from __future__ import annotations

import logging
import re
from typing import List, Optional
from urllib.parse import quote, urlencode

import httpx

from ..crawl.cookies import cookie_header_from_set_cookie
from ..crawl.fetcher import fetch
from ..crawl.models import FetchOptions
from ..extract.results import parse_search_results
from ..forum_config import ForumConfig, load_forum_config
from ..settings import Settings, get_settings
from .models import SearchFailure, SearchResponse, SearchResultItem, SearchSuccess

logger = logging.getLogger(__name__)

GOOGLE_SEARCH_URL = "https://www.google.com/search"

# Characters encodeURIComponent leaves alone.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def google_fallback_url(query: str, site: str) -> str:
    return f"{GOOGLE_SEARCH_URL}?q=site:{site}+{quote(query, safe=_URI_COMPONENT_SAFE)}"


def extract_token(html: str, field_name: str) -> str:
    rx = re.compile(r'<input[^>]*name="' + re.escape(field_name) + r'"[^>]*value="([^"]*)"', re.I)
    m = rx.search(html)
    return m.group(1) if m else ""


class ForumSearchClient:
    """Anonymous search against a XenForo 2 forum.

    The landing page supplies the CSRF token and session cookies; the search
    form is then POSTed and the results page is scraped.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        forum: Optional[ForumConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._settings = settings or get_settings()
        self._forum = forum or load_forum_config(self._settings.forum_config_path)
        self._transport = transport

    @property
    def base_url(self) -> str:
        return self._settings.base_url.rstrip("/")

    def fallback_url(self, query: str) -> str:
        return google_fallback_url(query, self._forum.fallback_site)

    async def search(self, query: str, limit: int = 10) -> SearchResponse:
        try:
            results = await self._search(query, limit)
        except Exception as e:
            logger.warning("Forum search for %r failed: %s", query, e)
            return SearchFailure(
                error=str(e) or type(e).__name__,
                query=query,
                results=[],
                google_fallback=self.fallback_url(query),
            )
        return SearchSuccess.from_results(query, results)

    async def _search(self, query: str, limit: int) -> List[SearchResultItem]:
        landing = await fetch(
            self.base_url + self._forum.search_path,
            FetchOptions(max_redirects=self._settings.max_redirects),
            settings=self._settings,
            transport=self._transport,
        )
        token = extract_token(landing.body, self._forum.token_field)
        if not token:
            logger.debug("No %s token found on %s", self._forum.token_field, landing.final_url)
        cookies = cookie_header_from_set_cookie(landing.set_cookies)

        form_data = urlencode(
            {
                "keywords": query,
                "order": self._forum.order,
                "search_type": self._forum.search_type,
                self._forum.token_field: token,
            }
        )
        res = await fetch(
            self.base_url + self._forum.submit_path,
            FetchOptions(
                method="POST",
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                cookies=cookies,
                max_redirects=self._settings.max_redirects,
            ),
            form_data,
            settings=self._settings,
            transport=self._transport,
        )
        results = parse_search_results(res.body, limit, self.base_url)
        logger.info("Parsed %d results for %r from %s", len(results), query, res.final_url)
        return results


async def search_forum(
    query: str,
    limit: int = 10,
    *,
    settings: Optional[Settings] = None,
    forum: Optional[ForumConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> SearchResponse:
    try:
        client = ForumSearchClient(settings=settings, forum=forum, transport=transport)
    except Exception as e:
        logger.warning("Forum search setup failed: %s", e)
        return SearchFailure(
            error=str(e) or type(e).__name__,
            query=query,
            results=[],
            google_fallback=google_fallback_url(query, ForumConfig().fallback_site),
        )
    return await client.search(query, limit)
