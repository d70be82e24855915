from dataclasses import dataclass

@dataclass(frozen=True)
class ResolutionResult:
    installer: str
    request: str
    version: str
    tag_name: str
    asset: str
    path: str | None = None
