import json
import os

import yaml

from wordcrawl.exceptions import ConfigNotFoundError, InvalidConfigError


class ConfigFileStore:
    """Filesystem IO for crawl configuration files.

    Responsibility: locate, read, and decode JSON or YAML files on disk.
    Relative paths resolve against `configs_dir` (the working directory by default).
    """

    def __init__(self, *, configs_dir: str = "."):
        self.configs_dir = configs_dir

    def _resolve_path(self, config_path: str) -> str:
        return config_path if os.path.isabs(config_path) else os.path.join(self.configs_dir, config_path)

    def load(self, config_path: str) -> dict:
        """Return the decoded config mapping stored at `config_path`."""
        full_path = self._resolve_path(config_path)
        if not os.path.isfile(full_path):
            raise ConfigNotFoundError(config_path)
        with open(full_path, "r", encoding="utf-8") as f:
            raw = f.read()
        try:
            if full_path.endswith(".yml") or full_path.endswith(".yaml"):
                data = yaml.safe_load(raw)
            else:
                data = json.loads(raw)
        except (yaml.YAMLError, ValueError) as e:
            raise InvalidConfigError(f"could not decode {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise InvalidConfigError(f"{config_path} must contain a mapping at the top level")
        return data
