from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class ForumConfig:
    search_path: str = "/search/"
    submit_path: str = "/search/search"
    token_field: str = "_xfToken"
    order: str = "relevance"
    search_type: str = "thread"
    fallback_site: str = "b4x.com/android/forum"


def load_forum_config(path: Optional[str | Path]) -> ForumConfig:
    """Load a forum profile from YAML.

    Without an explicit path, ``forum.yaml``, ``forum.yml`` and
    ``config/forum.yaml`` are tried in that order. Keys missing from the
    file keep their defaults; a missing file, or one whose top level is not a
    mapping, yields the B4X defaults.
    """

    cfg = ForumConfig()
    data = {}
    if path:
        p = Path(path)
        if p.is_file():
            with p.open("r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
    else:
        for candidate in ("forum.yaml", "forum.yml", "config/forum.yaml"):
            pc = Path(candidate)
            if pc.is_file():
                with pc.open("r", encoding="utf-8") as fh:
                    data = yaml.safe_load(fh) or {}
                break

    if not isinstance(data, dict):
        data = {}
    forum = data.get("forum") or data
    if not isinstance(forum, dict):
        forum = {}
    cfg.search_path = forum.get("search_path") or cfg.search_path
    cfg.submit_path = forum.get("submit_path") or cfg.submit_path
    cfg.token_field = forum.get("token_field") or cfg.token_field
    cfg.order = forum.get("order") or cfg.order
    cfg.search_type = forum.get("search_type") or cfg.search_type
    cfg.fallback_site = forum.get("fallback_site") or cfg.fallback_site
    return cfg
