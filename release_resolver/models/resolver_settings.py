from pydantic.dataclasses import dataclass

DEFAULT_GITHUB_API_URL = "https://api.github.com"

@dataclass(frozen=True)
class ResolverSettings:
    github_api_url: str = DEFAULT_GITHUB_API_URL
    per_page: int = 30
    install_dir: str | None = None
    download_dir: str | None = None
    download_timeout: int = 300
