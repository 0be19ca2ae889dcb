from typing import Optional

from pydantic_settings import BaseSettings

DEFAULT_BASE_URL = "https://www.b4x.com/android/forum"
BROWSER_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables.

    Environment variables (all prefixed with B4X_):
    - B4X_BASE_URL: forum root (default: "https://www.b4x.com/android/forum")
    - B4X_USER_AGENT: HTTP user agent (default: a desktop browser string)
    - B4X_REQUEST_TIMEOUT: per-request timeout in seconds (default: 30.0)
    - B4X_MAX_REDIRECTS: redirects followed per request (default: 5)
    - B4X_DEFAULT_LIMIT: results returned when --limit is absent or invalid (default: 10)
    - B4X_LOG_LEVEL: logging level for the CLI (default: "WARNING")
    - B4X_FORUM_CONFIG_PATH: optional path to a YAML forum profile
    """

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = BROWSER_USER_AGENT
    accept: str = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"
    request_timeout: float = 30.0
    max_redirects: int = 5
    default_limit: int = 10
    log_level: str = "WARNING"
    forum_config_path: Optional[str] = None

    class Config:
        env_prefix = "B4X_"
        env_file = ".env"
        env_file_encoding = "utf-8"


def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
