from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class Asset:
    name: str
    browser_download_url: str
