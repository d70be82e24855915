import os
from ruamel.yaml import YAML
from release_resolver.models import ResolverSettings
from release_resolver.utils.yaml_loader import get_yaml_instance


class SettingsRepository:
    def __init__(self, file_path: str | None):
        self.file_path: str | None = file_path
        self.yaml: YAML = get_yaml_instance()

    def load(self) -> ResolverSettings:
        data = {}
        if self.file_path and os.path.isfile(self.file_path):
            with open(self.file_path, "r") as f:
                data = dict(self.yaml.load(f) or {})
        # GitHub Actions runners provide these
        data.setdefault("install_dir", os.environ.get("RUNNER_TOOL_CACHE"))
        data.setdefault("download_dir", os.environ.get("RUNNER_TEMP"))
        try:
            return ResolverSettings(**data)
        except Exception as e:
            raise ValueError(f"Invalid resolver settings file {self.file_path}: {e}") from e
