from ruamel.yaml import YAML


def get_yaml_instance() -> YAML:
    yaml = YAML(typ="safe", pure=True)
    yaml.allow_duplicate_keys = False
    return yaml
