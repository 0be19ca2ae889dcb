from __future__ import annotations

import pytest

from b4x_search.settings import Settings

BASE = "https://forum.test/android/forum"


@pytest.fixture
def settings() -> Settings:
    return Settings(base_url=BASE, request_timeout=5.0, forum_config_path=None)
