"""Client configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from hn_api import __version__


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="HN_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Hacker News API
    api_base_url: str = "https://hacker-news.firebaseio.com/v0"
    user_agent: str = f"hn-api/{__version__}"

    # Transport
    request_timeout: float = 10.0  # Seconds, per request
    transport_retries: int = 0  # Connection-level retries only
    max_connections: int = 100


settings = Settings()
