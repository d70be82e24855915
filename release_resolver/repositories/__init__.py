from .installer_repository import InstallerRepository
from .release_cache_repository import ReleaseCacheRepository
from .settings_repository import SettingsRepository

__all__ = [
    'InstallerRepository',
    'ReleaseCacheRepository',
    'SettingsRepository'
]
