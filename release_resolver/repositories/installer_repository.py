import os
from ruamel.yaml import YAML
from release_resolver.models import InstallerDefinition, InstallersFile
from release_resolver.utils.yaml_loader import get_yaml_instance


class InstallerRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find_all(self) -> list[InstallerDefinition]:
        if not os.path.isfile(self.file_path):
            return []
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f)
            try:
                parsed = InstallersFile(**data)
                return parsed.installers
            except Exception as e:
                raise ValueError(f"Invalid installers.yaml structure: {e}") from e

    def find_by_name(self, name: str) -> InstallerDefinition | None:
        return next((i for i in self.find_all() if i.name == name), None)
