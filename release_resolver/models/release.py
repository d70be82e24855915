from pydantic.dataclasses import dataclass
from .asset import Asset

@dataclass(frozen=True)
class Release:
    tag_name: str
    assets: list[Asset]
    name: str | None = None

    def has_assets(self) -> bool:
        return len(self.assets) > 0
