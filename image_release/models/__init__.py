from .image_tag import ImageTag
from .pipeline_config import PipelineConfig
from .release_plan import ReleasePlan
from .release_settings import ReleaseSettings
from .release_version import ReleaseVersion
from .wrappers import ConfigFile

__all__ = [
    "ImageTag",
    "PipelineConfig",
    "ReleasePlan",
    "ReleaseSettings",
    "ReleaseVersion",
    "ConfigFile",
]
