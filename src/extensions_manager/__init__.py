from .config import ExtensionsConfig
from .errors import (
    CheckUpdatesError,
    CommandError,
    ErrorCode,
    ExtensionError,
    InstallError,
    InvalidInputError,
    LoadError,
    NotFoundError,
    RegistryTimeoutError,
    UninstallError,
    UnsupportedPackageError,
    UpdateError,
    WrongTypeError,
)
from .loaders import load_config, load_manifest
from .manager import (
    ExtensionCache,
    ExtensionRecord,
    ExtensionsManager,
    InMemoryRegistryAdapter,
    LocalPackageManager,
    NpmCliAdapter,
    NpmExtensionsManager,
    make_extensions_manager,
)
from .models import PackageManifest, RegistryEntry, SearchHit
from .paths import ExtensionPaths, encode_for_registry
from .registry import RegistryClient

__all__ = [
    "CheckUpdatesError",
    "CommandError",
    "ErrorCode",
    "ExtensionCache",
    "ExtensionError",
    "ExtensionPaths",
    "ExtensionRecord",
    "ExtensionsConfig",
    "ExtensionsManager",
    "InMemoryRegistryAdapter",
    "InstallError",
    "InvalidInputError",
    "LoadError",
    "LocalPackageManager",
    "NotFoundError",
    "NpmCliAdapter",
    "NpmExtensionsManager",
    "PackageManifest",
    "RegistryClient",
    "RegistryEntry",
    "RegistryTimeoutError",
    "SearchHit",
    "UninstallError",
    "UnsupportedPackageError",
    "UpdateError",
    "WrongTypeError",
    "encode_for_registry",
    "load_config",
    "load_manifest",
    "make_extensions_manager",
]
