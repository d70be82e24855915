from dataclasses import dataclass
from typing import Literal

from semantic_version import Version

from release_resolver.utils.semver import to_semver

RequestKind = Literal["head", "latest", "semver", "tag"]


@dataclass(frozen=True)
class VersionRequest:
    kind: RequestKind
    value: str
    semver: Version | None = None

    @classmethod
    def parse(cls, value: str) -> "VersionRequest":
        if value == "head":
            return cls(kind="head", value=value)
        if value == "latest":
            return cls(kind="latest", value=value)
        semver = to_semver(value)
        if semver is not None:
            return cls(kind="semver", value=value, semver=semver)
        return cls(kind="tag", value=value)
