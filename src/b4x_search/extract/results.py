from __future__ import annotations

import re
from typing import Iterable, List, Optional, Pattern

from ..search.models import SearchResultItem
from ..settings import DEFAULT_BASE_URL
from .text import strip_html

SNIPPET_MAX_CHARS = 300
MIN_TITLE_CHARS = 3
MIN_FALLBACK_TITLE_CHARS = 5

# XenForo 2 renders each search hit as <li class="block-row ...">.
_BLOCK_ROW_RX = re.compile(r'<li[^>]*class="[^"]*block-row[^"]*"[^>]*>(.*?)</li>', re.I | re.S)
_THREAD_LINK_RX = re.compile(r'<a[^>]*href="([^"]*/threads/[^"]*)"[^>]*>([^<]+)</a>', re.I)

# Each list is tried in order; the first pattern that matches wins.
_TITLE_PATTERNS: List[Pattern[str]] = [
    re.compile(r'<a[^>]*class="[^"]*contentRow-title[^"]*"[^>]*href="([^"]*)"[^>]*>(.*?)</a>', re.I | re.S),
    re.compile(
        r'<h3[^>]*class="[^"]*contentRow-title[^"]*"[^>]*>.*?<a[^>]*href="([^"]*)"[^>]*>(.*?)</a>',
        re.I | re.S,
    ),
    re.compile(r'<a[^>]*href="([^"]*/threads/[^"]*)"[^>]*>(.*?)</a>', re.I | re.S),
]
_SNIPPET_RX = re.compile(r'<div[^>]*class="[^"]*contentRow-snippet[^"]*"[^>]*>(.*?)</div>', re.I | re.S)
_AUTHOR_PATTERNS: List[Pattern[str]] = [
    re.compile(r'<a[^>]*data-user-id="[^"]*"[^>]*>([^<]+)</a>', re.I),
    re.compile(r'<a[^>]*class="[^"]*username[^"]*"[^>]*>([^<]+)</a>', re.I),
]
_DATE_ATTR_RX = re.compile(r'<time[^>]*datetime="([^"]*)"[^>]*>', re.I)
_DATE_TEXT_RX = re.compile(r"<time[^>]*>([^<]*)</time>", re.I)
_FORUM_RX = re.compile(r'<a[^>]*href="[^"]*/forums/[^"]*"[^>]*>([^<]+)</a>', re.I)


def _first_match(patterns: Iterable[Pattern[str]], text: str) -> Optional[re.Match[str]]:
    for rx in patterns:
        m = rx.search(text)
        if m:
            return m
    return None


def absolute_url(href: str, base_url: str = DEFAULT_BASE_URL) -> str:
    return href if href.startswith("http") else base_url + href


def extract_result_from_item(item_html: str, base_url: str = DEFAULT_BASE_URL) -> Optional[SearchResultItem]:
    """Build a result from the inner HTML of one block-row item.

    Returns None when no title is found or the stripped title is shorter
    than three characters.
    """
    title_match = _first_match(_TITLE_PATTERNS, item_html)
    if not title_match:
        return None
    title = strip_html(title_match.group(2))
    if len(title) < MIN_TITLE_CHARS:
        return None
    url = absolute_url(title_match.group(1), base_url)

    snippet_match = _SNIPPET_RX.search(item_html)
    snippet = strip_html(snippet_match.group(1))[:SNIPPET_MAX_CHARS] if snippet_match else ""

    author_match = _first_match(_AUTHOR_PATTERNS, item_html)
    author = strip_html(author_match.group(1)) if author_match else ""

    date_match = _DATE_ATTR_RX.search(item_html)
    if date_match:
        date = date_match.group(1)
    else:
        date_match = _DATE_TEXT_RX.search(item_html)
        date = strip_html(date_match.group(1)) if date_match else ""

    forum_match = _FORUM_RX.search(item_html)
    forum = strip_html(forum_match.group(1)) if forum_match else None

    return SearchResultItem(
        title=title,
        url=url,
        snippet=snippet,
        author=author,
        date=date,
        forum=forum,
    )


def _parse_block_rows(html: str, limit: int, base_url: str) -> List[SearchResultItem]:
    results: List[SearchResultItem] = []
    for m in _BLOCK_ROW_RX.finditer(html):
        if len(results) >= limit:
            break
        item = extract_result_from_item(m.group(1), base_url)
        if item and item.title:
            results.append(item)
    return results


def _parse_thread_links(html: str, limit: int, base_url: str) -> List[SearchResultItem]:
    results: List[SearchResultItem] = []
    seen: set[str] = set()
    for m in _THREAD_LINK_RX.finditer(html):
        if len(results) >= limit:
            break
        href = m.group(1)
        title = strip_html(m.group(2))
        if href in seen or len(title) < MIN_FALLBACK_TITLE_CHARS:
            continue
        seen.add(href)
        results.append(SearchResultItem(title=title, url=absolute_url(href, base_url)))
    return results


def parse_search_results(html: str, limit: int, base_url: str = DEFAULT_BASE_URL) -> List[SearchResultItem]:
    """Extract at most ``limit`` results from a search results page.

    Block-row items are used when any yield a result; otherwise thread links
    anywhere on the page are collected, first occurrence of each href wins.
    """
    results = _parse_block_rows(html, limit, base_url)
    if not results:
        results = _parse_thread_links(html, limit, base_url)
    return results
