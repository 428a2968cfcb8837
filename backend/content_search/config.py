from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    content_path: Path = Path.cwd() / "content"
    page_files: list[str] = ["pages/about-historia.json"]
    portfolio_file: str = "dynamic-content/portfolio/content.json"
    careers_file: str = "dynamic-content/careers/content.json"
    newsletter_file: str = "dynamic-content/newsletter/content.json"
    default_limit: int = 50
    max_limit: int = 500
    min_term_length: int = 2
    # Upper bound for each per-domain repository read, not for a whole adapter:
    # an adapter serving three domains may take up to three times this long.
    # A domain whose read times out yields no results.
    adapter_timeout_seconds: float = 10.0
    # Bearer token for the admin API. When unset the gate is open and
    # authorization is left to whatever sits in front of the service.
    admin_token: str | None = None
    api_prefix: str = "/api/admin"
    host: str = "127.0.0.1"
    port: int = 8000

    model_config = {"env_prefix": "CONTENT_SEARCH_"}


settings = Settings()
