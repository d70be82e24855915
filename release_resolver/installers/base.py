import re
from typing import Literal, Protocol, runtime_checkable

from release_resolver.models import Release

InstallType = Literal["download", "build"]


class ReleaseSource(Protocol):
    @property
    def repository(self) -> str: ...

    def to_version_string(self, release: Release) -> str: ...


@runtime_checkable
class Installer(ReleaseSource, Protocol):
    @property
    def asset_name_pattern(self) -> re.Pattern[str]: ...

    @property
    def install_type(self) -> InstallType: ...

    def can_install(self, version: str) -> bool: ...

    def get_executable_name(self) -> str: ...

    def resolve_version(self, version: str) -> str: ...

    def install(self, version: str) -> None: ...

    def get_path(self, version: str) -> str: ...
