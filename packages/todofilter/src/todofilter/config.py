"""Application configuration from environment variables."""

from pydantic_settings import BaseSettings

from todofilter.domains.todoist.extract import MatchStrategy


class Settings(BaseSettings):
    """Application settings."""

    # Todoist
    todoist_api_token: str = ""
    todoist_api_url: str = "https://api.todoist.com/rest/v2"
    request_timeout: float = 10.0

    # Filter translation
    filter_match_strategy: MatchStrategy = MatchStrategy.SUBSTRING

    # API
    api_host: str = "127.0.0.1"
    api_port: int = 8000
    cors_origins: str = "http://localhost:5173"

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
