from dataclasses import field

from pydantic.dataclasses import dataclass

from image_release.models.release_settings import ReleaseSettings

@dataclass(frozen=True)
class ConfigFile:
    release: ReleaseSettings = field(default_factory=ReleaseSettings)
