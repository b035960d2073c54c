from .manifest import PackageManifest
from .registry import RegistryEntry, SearchHit

__all__ = [
    "PackageManifest",
    "RegistryEntry",
    "SearchHit",
]
