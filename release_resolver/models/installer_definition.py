from typing import Literal
from pydantic.dataclasses import dataclass

@dataclass(frozen=True)
class InstallerDefinition:
    name: str
    repository: str
    asset_name_pattern: str
    executable_name: str
    bin_dir: str | None = None
    version_source: Literal["tag_name", "name"] = "tag_name"
