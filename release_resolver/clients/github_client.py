import os
import logging
from collections.abc import Iterator
from github import Auth, Github, GitRelease, Repository, UnknownObjectException

from release_resolver.errors import TargetReleaseNotFoundError
from release_resolver.models import Asset, GitObject, Release
from release_resolver.models.resolver_settings import DEFAULT_GITHUB_API_URL
logger = logging.getLogger(__name__)


def to_release(gh_release: GitRelease.GitRelease) -> Release:
    assets = [
        Asset(name=asset.name, browser_download_url=asset.browser_download_url)
        for asset in gh_release.assets
    ]
    return Release(tag_name=gh_release.tag_name, name=gh_release.title, assets=assets)


class GitHubClient:
    def __init__(self, token: str | None = None, base_url: str = DEFAULT_GITHUB_API_URL, per_page: int = 30):
        token = token or os.getenv("GITHUB_TOKEN") or os.getenv("INPUT_GITHUB_TOKEN")
        if not token:
            logger.error("GitHub token is mandatory, set GITHUB_TOKEN")
            raise EnvironmentError("Missing GitHub token")
        self.client: Github = Github(auth=Auth.Token(token), base_url=base_url, per_page=per_page)

    def get_repo(self, full_name: str) -> Repository.Repository:
        return self.client.get_repo(full_name, lazy=True)

    def get_latest_release(self, repo: str) -> Release:
        try:
            return to_release(self.get_repo(repo).get_latest_release())
        except UnknownObjectException as e:
            raise TargetReleaseNotFoundError(f"No latest release in {repo}") from e

    def get_release_by_tag(self, repo: str, tag: str) -> Release:
        try:
            return to_release(self.get_repo(repo).get_release(tag))
        except UnknownObjectException as e:
            raise TargetReleaseNotFoundError(f"No release tagged {tag} in {repo}") from e

    def iter_releases(self, repo: str) -> Iterator[Release]:
        # PaginatedList fetches the next page only when the current one is exhausted
        for gh_release in self.get_repo(repo).get_releases():
            yield to_release(gh_release)

    def get_first_page_releases(self, repo: str) -> list[Release]:
        return [to_release(r) for r in self.get_repo(repo).get_releases().get_page(0)]

    def get_tag_ref(self, repo: str, tag: str) -> GitObject:
        ref = self.get_repo(repo).get_git_ref(f"tags/{tag}")
        return GitObject(type=ref.object.type, sha=ref.object.sha)

    def get_tag_object(self, repo: str, sha: str) -> GitObject:
        tag = self.get_repo(repo).get_git_tag(sha)
        return GitObject(type=tag.object.type, sha=tag.object.sha)

    def resolve_tag_commit(self, repo: str, tag: str) -> str:
        target = self.get_tag_ref(repo, tag)
        if target.is_tag_object():
            target = self.get_tag_object(repo, target.sha)
        return target.sha
