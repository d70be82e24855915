import json
import logging
import os
from dataclasses import asdict
from typing_extensions import override

from release_resolver.clients.download_client import DownloadClient
from release_resolver.clients.github_client import GitHubClient
from release_resolver.installers.defined_releases_installer import DefinedReleasesInstaller
from release_resolver.models import ResolutionResult
from release_resolver.repositories import InstallerRepository, SettingsRepository
from release_resolver.services.service import Service
from release_resolver.utils.logging import setup_logger

DEFAULT_INSTALL_DIR = os.path.join(os.path.expanduser("~"), ".cache", "release-resolver")


class ResolveService(Service):
    def __init__(
        self,
        installers_file: str,
        settings_file: str | None,
        installer_name: str,
        version: str,
        install: bool = False,
        dry_run: bool = False,
    ):
        self.installers_repo: InstallerRepository = InstallerRepository(installers_file)
        self.settings_repo: SettingsRepository = SettingsRepository(settings_file)
        self.installer_name: str = installer_name
        self.version: str = version
        self.install: bool = install
        self.dry_run: bool = dry_run
        self.result: ResolutionResult | None = None
        self.logger: logging.Logger = setup_logger("ResolveService")

    def build_installer(self) -> DefinedReleasesInstaller:
        definition = self.installers_repo.find_by_name(self.installer_name)
        if definition is None:
            raise ValueError(f"Unknown installer: {self.installer_name}")
        settings = self.settings_repo.load()
        github = GitHubClient(base_url=settings.github_api_url, per_page=settings.per_page)
        fetcher = DownloadClient(settings.download_dir, settings.download_timeout)
        return DefinedReleasesInstaller(definition, settings.install_dir or DEFAULT_INSTALL_DIR, github, fetcher)

    @override
    def run(self) -> None:
        installer = self.build_installer()
        resolved = installer.resolve_version(self.version)
        release = installer.releases.find_by_version(resolved)
        asset = installer.find_asset(resolved)

        path = None
        if self.install and not self.dry_run:
            installer.install(resolved)
            path = installer.get_path(resolved)
            self.logger.info(f"Installed {self.installer_name} {resolved} into {path}")
        elif self.dry_run:
            self.logger.info(f"Dry run mode. {asset.name} of {resolved} has not been downloaded")

        self.result = ResolutionResult(
            installer=self.installer_name,
            request=self.version,
            version=resolved,
            tag_name=release.tag_name,
            asset=asset.name,
            path=path,
        )
        print(json.dumps(asdict(self.result)))
