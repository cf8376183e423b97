from .docker_client import DockerClient
from .image_registry_client import ImageRegistryClient
from .interfaces import Authenticator, Builder, Publisher

__all__ = [
    "Authenticator",
    "Builder",
    "DockerClient",
    "ImageRegistryClient",
    "Publisher",
]
