import logging
from collections.abc import Callable
from enum import Enum

from release_resolver.clients.github_client import GitHubClient
from release_resolver.errors import TargetReleaseNotFoundError
from release_resolver.installers.base import ReleaseSource
from release_resolver.models import Release, VersionRequest
from release_resolver.repositories import ReleaseCacheRepository
from release_resolver.services.tag_reconciliation_service import TagReconciliationService
from release_resolver.utils.logging import setup_logger
from release_resolver.utils.semver import to_semver


class ScanVerdict(Enum):
    SKIP = "skip"
    ACCEPT = "accept"
    DONE = "done"


class VersionResolutionService:
    def __init__(
        self,
        github: GitHubClient,
        source: ReleaseSource,
        reconciler: TagReconciliationService,
        cache: ReleaseCacheRepository,
    ):
        self.github: GitHubClient = github
        self.source: ReleaseSource = source
        self.reconciler: TagReconciliationService = reconciler
        self.cache: ReleaseCacheRepository = cache
        self.logger: logging.Logger = setup_logger("VersionResolutionService")

    def resolve_version(self, request: str) -> str:
        release, version = self.find_release(request)
        self.cache.save(version, release)
        self.logger.info(f"Resolved {request} of {self.source.repository} to {version}")
        return version

    def find_release(self, request: str) -> tuple[Release, str]:
        parsed = VersionRequest.parse(request)
        match parsed.kind:
            case "head":
                return self._find_from_releases(self._first_release_verdict())
            case "latest":
                release = self.github.get_latest_release(self.source.repository)
                return release, self.reconciler.reconcile(release)
            case "semver":
                return self._find_from_releases(self._at_least_verdict(parsed))
            case "tag":
                release = self.github.get_release_by_tag(self.source.repository, parsed.value)
                return release, self.reconciler.reconcile(release)
            case _:
                raise ValueError(f"Unsupported version request: {request}")

    def _find_from_releases(self, verdict_of: Callable[[Release], ScanVerdict]) -> tuple[Release, str]:
        target: Release | None = None
        for release in self.github.iter_releases(self.source.repository):
            if not release.has_assets():
                self.logger.debug(f"Skipping release {release.tag_name} without assets")
                continue
            verdict = verdict_of(release)
            if verdict is ScanVerdict.SKIP:
                continue
            if verdict is ScanVerdict.DONE:
                # releases are newest first, nothing older can be accepted anymore
                break
            target = release

        if target is None:
            raise TargetReleaseNotFoundError("Target release not found")

        self.logger.info(f"Selected release {target.tag_name} of {self.source.repository}")
        return target, self.reconciler.reconcile(target)

    def _first_release_verdict(self) -> Callable[[Release], ScanVerdict]:
        first = True

        def verdict_of(release: Release) -> ScanVerdict:
            nonlocal first
            if first:
                first = False
                return ScanVerdict.ACCEPT
            return ScanVerdict.DONE

        return verdict_of

    def _at_least_verdict(self, request: VersionRequest) -> Callable[[Release], ScanVerdict]:
        def verdict_of(release: Release) -> ScanVerdict:
            release_semver = to_semver(self.source.to_version_string(release))
            if release_semver is None:
                return ScanVerdict.SKIP
            return ScanVerdict.ACCEPT if request.semver <= release_semver else ScanVerdict.DONE

        return verdict_of
