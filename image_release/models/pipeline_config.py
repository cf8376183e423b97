from dataclasses import field

from pydantic import ConfigDict, SecretStr
from pydantic.dataclasses import dataclass

from .release_settings import ReleaseSettings


@dataclass(frozen=True, config=ConfigDict(extra="forbid"))
class PipelineConfig(ReleaseSettings):
    """Release settings plus the registry secret taken from the environment."""

    credential: SecretStr = field(default_factory=lambda: SecretStr(""), repr=False)

    @property
    def repository(self) -> str:
        if self.registry:
            return f"{self.registry}/{self.namespace}/{self.image_name}"
        return f"{self.namespace}/{self.image_name}"
