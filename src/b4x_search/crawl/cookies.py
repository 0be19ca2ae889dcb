from __future__ import annotations

from typing import Dict, Iterable, Optional


class CookieSet:
    """Ordered name/value cookie pairs rendered as a single Cookie header.

    Setting a name that is already present replaces its value in place, so
    repeated redirects never produce duplicate names in the header.
    """

    def __init__(self, header: Optional[str] = None):
        self._pairs: Dict[str, str] = {}
        if header:
            self.update_from_header(header)

    def __len__(self) -> int:
        return len(self._pairs)

    def __bool__(self) -> bool:
        return bool(self._pairs)

    def update_from_header(self, header: str) -> None:
        for part in header.split(";"):
            self._add_pair(part)

    def update_from_set_cookie(self, values: Iterable[str]) -> None:
        # Only the leading name=value counts; Path, Expires etc. are dropped.
        for raw in values:
            self._add_pair(raw.split(";", 1)[0])

    def _add_pair(self, pair: str) -> None:
        pair = pair.strip()
        if not pair:
            return
        name, sep, value = pair.partition("=")
        name = name.strip()
        if not name:
            return
        self._pairs[name] = value.strip() if sep else ""

    def header_value(self) -> str:
        return "; ".join(f"{k}={v}" for k, v in self._pairs.items())


def cookie_header_from_set_cookie(values: Iterable[str]) -> str:
    jar = CookieSet()
    jar.update_from_set_cookie(values)
    return jar.header_value()
