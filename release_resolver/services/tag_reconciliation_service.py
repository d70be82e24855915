import logging
from release_resolver.clients.github_client import GitHubClient
from release_resolver.installers.base import ReleaseSource
from release_resolver.models import Release
from release_resolver.utils.logging import setup_logger
from release_resolver.utils.semver import to_semver


class TagReconciliationService:
    """Maps a release to a stable version string.

    Releases whose version string is a semantic version are returned as is.
    Anything else (``stable``, ``nightly``) is a floating tag: the numbered
    release sharing its commit is looked up on the first page of releases,
    falling back to the commit sha itself.
    """

    def __init__(self, github: GitHubClient, source: ReleaseSource):
        self.github: GitHubClient = github
        self.source: ReleaseSource = source
        self.logger: logging.Logger = setup_logger("TagReconciliationService")

    def reconcile(self, release: Release) -> str:
        version = self.source.to_version_string(release)
        if to_semver(version) is not None:
            return version

        repo = self.source.repository
        target_sha = self.github.resolve_tag_commit(repo, release.tag_name)
        self.logger.info(f"Floating tag {release.tag_name} of {repo} points at {target_sha}")

        # numbered releases aliasing a floating tag are expected to be recent
        for candidate in self.github.get_first_page_releases(repo):
            tag_name = candidate.tag_name
            if to_semver(tag_name) is None:
                continue
            if self.github.resolve_tag_commit(repo, tag_name) == target_sha:
                self.logger.info(f"Floating tag {release.tag_name} resolved to {tag_name}")
                return tag_name

        self.logger.info(f"No numbered release found for {release.tag_name}, using commit {target_sha}")
        return target_sha
