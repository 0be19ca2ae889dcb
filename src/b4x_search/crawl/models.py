from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class FetchOptions:
    method: str = "GET"
    headers: Dict[str, str] = field(default_factory=dict)
    cookies: Optional[str] = None
    max_redirects: int = 5


@dataclass(frozen=True)
class FetchResult:
    status_code: int
    headers: Dict[str, List[str]]
    body: str
    final_url: str

    def header(self, name: str) -> Optional[str]:
        values = self.headers.get(name.lower())
        return values[0] if values else None

    @property
    def set_cookies(self) -> List[str]:
        return list(self.headers.get("set-cookie", []))
