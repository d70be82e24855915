import logging
import os
import re
import shutil
from typing_extensions import override

from release_resolver.clients.download_client import DownloadClient
from release_resolver.clients.github_client import GitHubClient
from release_resolver.installers.releases_installer import ReleasesInstaller
from release_resolver.models import InstallerDefinition, Release
from release_resolver.utils.logging import setup_logger


class DefinedReleasesInstaller(ReleasesInstaller):
    def __init__(
        self,
        definition: InstallerDefinition,
        install_dir: str,
        github: GitHubClient,
        fetcher: DownloadClient,
        is_gui: bool = False,
    ):
        self.definition: InstallerDefinition = definition
        self._asset_name_pattern: re.Pattern[str] = re.compile(definition.asset_name_pattern)
        self.logger: logging.Logger = setup_logger("DefinedReleasesInstaller")
        super().__init__(install_dir, is_gui, github, fetcher)

    @property
    @override
    def repository(self) -> str:
        return self.definition.repository

    @property
    @override
    def asset_name_pattern(self) -> re.Pattern[str]:
        return self._asset_name_pattern

    @override
    def get_executable_name(self) -> str:
        return self.definition.executable_name

    @override
    def to_version_string(self, release: Release) -> str:
        if self.definition.version_source == "name" and release.name:
            return release.name
        return release.tag_name

    @override
    def install(self, version: str) -> None:
        archive = self.download_asset(version)
        target = self._version_dir(version)
        self.logger.info(f"Unpacking {archive} into {target}")
        os.makedirs(target, exist_ok=True)
        shutil.unpack_archive(archive, target)

    @override
    def get_path(self, version: str) -> str:
        if self.definition.bin_dir:
            return os.path.join(self._version_dir(version), self.definition.bin_dir)
        return self._version_dir(version)

    def _version_dir(self, version: str) -> str:
        return os.path.join(self.install_dir, self.definition.name, version)
