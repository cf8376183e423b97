from pydantic.dataclasses import dataclass
from .image_tag import ImageTag
from .release_version import ReleaseVersion

@dataclass(frozen=True)
class ReleasePlan:
    version: ReleaseVersion
    tags: list[ImageTag]
