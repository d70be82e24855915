import re
from abc import ABC, abstractmethod

from release_resolver.clients.download_client import DownloadClient
from release_resolver.clients.github_client import GitHubClient
from release_resolver.installers.base import InstallType
from release_resolver.models import Asset, Release
from release_resolver.repositories import ReleaseCacheRepository
from release_resolver.services.asset_resolution_service import AssetResolutionService
from release_resolver.services.tag_reconciliation_service import TagReconciliationService
from release_resolver.services.version_resolution_service import VersionResolutionService


class ReleasesInstaller(ABC):
    """Base for installers that download prebuilt assets from GitHub releases.

    Each instance owns one catalog client and one release cache: a version
    returned by ``resolve_version`` is the key ``download_asset`` expects.
    """

    install_type: InstallType = "download"

    def __init__(self, install_dir: str, is_gui: bool, github: GitHubClient, fetcher: DownloadClient):
        self.install_dir: str = install_dir
        self.is_gui: bool = is_gui
        self.github: GitHubClient = github
        self.releases: ReleaseCacheRepository = ReleaseCacheRepository()
        self.reconciler: TagReconciliationService = TagReconciliationService(github, self)
        self.resolver: VersionResolutionService = VersionResolutionService(
            github, self, self.reconciler, self.releases
        )
        self.assets: AssetResolutionService = AssetResolutionService(
            self.releases, fetcher, self.asset_name_pattern
        )

    @property
    @abstractmethod
    def repository(self) -> str:
        pass

    @property
    @abstractmethod
    def asset_name_pattern(self) -> re.Pattern[str]:
        pass

    @abstractmethod
    def get_executable_name(self) -> str:
        pass

    @abstractmethod
    def to_version_string(self, release: Release) -> str:
        pass

    @abstractmethod
    def install(self, version: str) -> None:
        pass

    @abstractmethod
    def get_path(self, version: str) -> str:
        pass

    def can_install(self, version: str) -> bool:
        return True

    def resolve_version(self, version: str) -> str:
        return self.resolver.resolve_version(version)

    def find_asset(self, version: str) -> Asset:
        return self.assets.find_asset(version)

    def download_asset(self, version: str) -> str:
        return self.assets.download_asset(version)
