import os
from dataclasses import asdict

from pydantic import SecretStr
from ruamel.yaml import YAML

from image_release.errors import ConfigError
from image_release.models import ConfigFile, PipelineConfig
from image_release.utils.yaml_loader import get_yaml_instance


class ConfigRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find(self) -> ConfigFile:
        if not os.path.isfile(self.file_path):
            return ConfigFile()
        with open(self.file_path, "r") as f:
            data = self.yaml.load(f) or {}
            try:
                return ConfigFile(**data)
            except Exception as e:
                raise ConfigError(f"Invalid release configuration: {e}") from e

    def load(self, credential: str | None) -> PipelineConfig:
        settings = self.find().release
        return PipelineConfig(**asdict(settings), credential=SecretStr(credential or ""))
