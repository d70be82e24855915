class ReleaseResolverError(Exception):
    pass


class TargetReleaseNotFoundError(ReleaseResolverError):
    pass


class UnknownVersionError(ReleaseResolverError):
    def __init__(self, version: str):
        super().__init__(f"Unknown version: {version}")
        self.version: str = version


class AssetNotFoundError(ReleaseResolverError):
    def __init__(self, pattern: str, asset_names: list[str]):
        super().__init__(f"Target asset not found: /{pattern}/ in {asset_names}")
        self.pattern: str = pattern
        self.asset_names: list[str] = asset_names
