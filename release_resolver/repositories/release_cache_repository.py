from release_resolver.models import Release


class ReleaseCacheRepository:
    """Releases keyed by the version string they were resolved to.

    Lives as long as the installer that owns it. Entries are only ever
    added by a completed resolution and read back by the asset download
    that follows it.
    """

    def __init__(self):
        self._releases: dict[str, Release] = {}

    def save(self, version: str, release: Release) -> None:
        self._releases[version] = release

    def find_by_version(self, version: str) -> Release | None:
        return self._releases.get(version)

    def find_all(self) -> dict[str, Release]:
        return dict(self._releases)
