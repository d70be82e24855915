import logging
import re
from release_resolver.clients.download_client import DownloadClient
from release_resolver.errors import AssetNotFoundError, UnknownVersionError
from release_resolver.models import Asset
from release_resolver.repositories import ReleaseCacheRepository
from release_resolver.utils.logging import setup_logger


class AssetResolutionService:
    def __init__(self, cache: ReleaseCacheRepository, fetcher: DownloadClient, pattern: re.Pattern[str]):
        self.cache: ReleaseCacheRepository = cache
        self.fetcher: DownloadClient = fetcher
        self.pattern: re.Pattern[str] = pattern
        self.logger: logging.Logger = setup_logger("AssetResolutionService")

    def find_asset(self, version: str) -> Asset:
        release = self.cache.find_by_version(version)
        if release is None:
            raise UnknownVersionError(version)
        asset = next((a for a in release.assets if self.pattern.search(a.name)), None)
        if asset is None:
            raise AssetNotFoundError(self.pattern.pattern, [a.name for a in release.assets])
        return asset

    def download_asset(self, version: str) -> str:
        asset = self.find_asset(version)
        self.logger.info(f"Downloading asset {asset.name} for version {version}")
        return self.fetcher.fetch(asset.browser_download_url)
