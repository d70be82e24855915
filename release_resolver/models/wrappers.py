from pydantic.dataclasses import dataclass

from release_resolver.models.installer_definition import InstallerDefinition

@dataclass(frozen=True)
class InstallersFile:
    installers: list[InstallerDefinition]
