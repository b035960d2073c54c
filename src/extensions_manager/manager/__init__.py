"""Extension management API and the factory wiring its default adapters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..config import ExtensionsConfig
from ..registry import RegistryClient
from ._cache import ExtensionCache, ExtensionRecord
from ._in_memory import InMemoryRegistryAdapter, LocalPackageManager
from ._manager import NpmExtensionsManager, is_version_lower
from ._npm import NpmCliAdapter
from ._protocols import ExtensionsManager, PackageManagerAdapter, RegistryAdapter

if TYPE_CHECKING:
    import httpx


def make_extensions_manager(
    config: ExtensionsConfig | None = None,
    http_client: httpx.AsyncClient | None = None,
    logger: logging.Logger | None = None,
) -> NpmExtensionsManager:
    """Build an NpmExtensionsManager talking to the npm registry and npm CLI.

    config: defaults to ExtensionsConfig() (no types, install root ".")
    http_client: shared client for registry calls; one per request if omitted
    """
    config = config or ExtensionsConfig()
    return NpmExtensionsManager(
        config=config,
        registry=RegistryClient(
            search_url=config.search_url,
            search_by_package_name_url=config.search_by_package_name_url,
            package_url=config.package_url,
            client=http_client,
        ),
        package_manager=NpmCliAdapter(
            executable=config.npm_executable,
            timeout=config.cli_command_timeout,
        ),
        logger=logger,
    )


__all__ = [
    "ExtensionCache",
    "ExtensionRecord",
    "ExtensionsManager",
    "InMemoryRegistryAdapter",
    "LocalPackageManager",
    "NpmCliAdapter",
    "NpmExtensionsManager",
    "PackageManagerAdapter",
    "RegistryAdapter",
    "is_version_lower",
    "make_extensions_manager",
]
