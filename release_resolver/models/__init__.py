from .asset import Asset
from .git_object import GitObject
from .installer_definition import InstallerDefinition
from .release import Release
from .resolution_result import ResolutionResult
from .resolver_settings import ResolverSettings
from .version_request import VersionRequest
from .wrappers import InstallersFile

__all__ = [
    "Asset",
    "GitObject",
    "InstallerDefinition",
    "Release",
    "ResolutionResult",
    "ResolverSettings",
    "VersionRequest",
    "InstallersFile",
]
