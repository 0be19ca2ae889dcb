from __future__ import annotations

import logging
from typing import Dict, List, Optional
from urllib.parse import urljoin, urlparse

import httpx

from ..errors import FetchTimeoutError, RedirectLimitError, TransportError
from ..settings import Settings, get_settings
from .cookies import CookieSet
from .models import FetchOptions, FetchResult

logger = logging.getLogger(__name__)

# Headers that describe a request body and must not survive a switch to GET.
_BODY_HEADERS = ("content-type", "content-length")


def _default_headers(settings: Settings) -> httpx.Headers:
    return httpx.Headers({
        "User-Agent": settings.user_agent,
        "Accept": settings.accept,
    })


def _resolve_location(current_url: str, location: str) -> str:
    if location.startswith("http"):
        return location
    parsed = urlparse(current_url)
    return urljoin(f"{parsed.scheme}://{parsed.netloc}/", location)


def _redirect_method(method: str, status_code: int) -> str:
    if status_code == 303 and method != "HEAD":
        return "GET"
    if status_code in (301, 302) and method == "POST":
        return "GET"
    return method


def _group_headers(headers: httpx.Headers) -> Dict[str, List[str]]:
    grouped: Dict[str, List[str]] = {}
    for name, value in headers.multi_items():
        grouped.setdefault(name.lower(), []).append(value)
    return grouped


async def fetch(
    url: str,
    options: Optional[FetchOptions] = None,
    body: Optional[str | bytes] = None,
    *,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FetchResult:
    """Issue one logical request, following redirects by hand.

    Cookies from ``options.cookies`` and from any Set-Cookie header seen on a
    redirect are sent on every following hop. The caller only sees the final
    non-redirect response. A 303, or a 301/302 answering a POST, is followed
    with a body-less GET the way browsers do; other redirects re-send the
    same method and body.

    Raises ``RedirectLimitError`` once more than ``options.max_redirects``
    redirects are seen, ``FetchTimeoutError`` when no response arrives within
    ``settings.request_timeout`` and ``TransportError`` for connection failures.
    """

    settings = settings or get_settings()
    options = options or FetchOptions()
    method = (options.method or "GET").upper()
    headers = _default_headers(settings)
    headers.update(options.headers)
    cookies = CookieSet(options.cookies)
    content = body
    redirect_count = 0
    current_url = url

    async with httpx.AsyncClient(
        timeout=settings.request_timeout,
        follow_redirects=False,
        transport=transport,
    ) as client:
        while True:
            request_headers = httpx.Headers(headers)
            if cookies:
                request_headers["Cookie"] = cookies.header_value()
            logger.debug("%s %s", method, current_url)
            try:
                request = client.build_request(method, current_url, headers=request_headers, content=content)
                res = await client.send(request)
            except httpx.TimeoutException as e:
                logger.warning("Request timeout for %s: %s", current_url, e)
                raise FetchTimeoutError("Request timeout") from e
            except httpx.TransportError as e:
                logger.warning("Transport error for %s: %s", current_url, e)
                raise TransportError(str(e) or type(e).__name__) from e

            location = res.headers.get("location")
            if 300 <= res.status_code < 400 and location:
                if redirect_count >= options.max_redirects:
                    raise RedirectLimitError("Too many redirects")
                redirect_count += 1
                cookies.update_from_set_cookie(res.headers.get_list("set-cookie"))
                next_url = _resolve_location(current_url, location)
                next_method = _redirect_method(method, res.status_code)
                if next_method != method:
                    content = None
                    for name in _BODY_HEADERS:
                        headers.pop(name, None)
                    method = next_method
                logger.debug("Redirect %d (%d) %s -> %s", redirect_count, res.status_code, current_url, next_url)
                current_url = next_url
                continue

            return FetchResult(
                status_code=res.status_code,
                headers=_group_headers(res.headers),
                body=res.text,
                final_url=current_url,
            )
