from .config_repository import ConfigRepository
from .manifest_repository import ManifestRepository

__all__ = [
    'ConfigRepository',
    'ManifestRepository'
]
