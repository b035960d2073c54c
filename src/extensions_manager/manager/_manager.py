"""NpmExtensionsManager: lifecycle operations for npm-hosted extensions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import semver

from ..errors import (
    CheckUpdatesError,
    CommandError,
    ExtensionError,
    InstallError,
    NotFoundError,
    UninstallError,
    UnsupportedPackageError,
    UpdateError,
    WrongTypeError,
)
from ..loaders.package import load_manifest, load_optional_json
from ..paths import ExtensionPaths, join_relative, package_dir
from ._cache import ExtensionCache, ExtensionRecord
from ._scanner import scan_installed

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from ..config import ExtensionsConfig
    from ..models.manifest import PackageManifest
    from ..models.registry import RegistryEntry
    from ._protocols import PackageManagerAdapter, RegistryAdapter

_module_logger = logging.getLogger(__name__)


def is_version_lower(installed: str | None, latest: str | None) -> bool:
    """True iff ``installed`` sorts strictly before ``latest`` in semver order."""
    if not installed or not latest:
        raise ValueError(f"Cannot compare versions {installed!r} and {latest!r}")
    return semver.Version.parse(installed) < semver.Version.parse(latest)


class NpmExtensionsManager:
    def __init__(
        self,
        config: ExtensionsConfig,
        registry: RegistryAdapter,
        package_manager: PackageManagerAdapter,
        cache: ExtensionCache | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._config = config
        self._registry = registry
        self._pm = package_manager
        self._cache = cache if cache is not None else ExtensionCache()
        self._logger = logger or _module_logger
        self._paths = ExtensionPaths(config.install_path)

    @property
    def language(self) -> str:
        return "JS"

    @property
    def extension_types(self) -> list[str]:
        return list(self._config.extension_types)

    @property
    def cache(self) -> ExtensionCache:
        return self._cache

    @property
    def paths(self) -> ExtensionPaths:
        return self._paths

    async def init(self) -> None:
        """Create and initialise the install root of every configured type."""
        for ext_type in self._config.extension_types:
            cwd = self._paths.install_path(ext_type)
            try:
                cwd.mkdir(parents=True, exist_ok=True)
                await self._pm.init(cwd)
            except (CommandError, OSError) as e:
                self._logger.warning("Initialising %s failed: %s", cwd, e)
                raise InstallError(f"Cannot initialise {cwd}: {e}", type=ext_type) from e

    # --- registry ---

    async def search(
        self,
        text: str,
        keywords: Sequence[str] | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[RegistryEntry]:
        return await self._registry.search(text, keywords=keywords, offset=offset, limit=limit)

    async def lookup_by_name(self, name: str, version: str = "latest") -> RegistryEntry | None:
        return await self._registry.lookup_by_name(name, version)

    def info_url(self, name: str) -> str:
        return self._registry.info_url(name)

    async def get_type_by_name(self, name: str) -> str:
        """Cached type, else the first registry keyword that is a configured type.

        Raises:
            NotFoundError: The registry does not know ``name``.
            WrongTypeError: No keyword matches a configured type.
            RegistryTimeoutError: The registry could not be reached.
        """
        record = self._cache.get(name)
        if record is not None:
            return record.type

        entry = await self._registry.lookup_by_name(name)
        if entry is None:
            raise NotFoundError(f"Extension not found in registry: {name}", name=name)
        for keyword in entry.keywords:
            if keyword in self._config.extension_types:
                return keyword
        raise WrongTypeError(
            f"Extension {name} has no keyword among {self._config.extension_types}",
            name=name,
            keywords=list(entry.keywords),
        )

    # --- paths ---

    async def get_extension_path(self, name: str, ext_type: str = "") -> Path:
        record = self._cache.get(name)
        if record is not None:
            return package_dir(record.install_path, name)
        if not ext_type:
            ext_type = await self.get_type_by_name(name)
        return self._paths.extension_dir(name, ext_type)

    async def is_installed(self, name: str, ext_type: str) -> bool:
        try:
            path = await self.get_extension_path(name, ext_type)
        except NotFoundError:
            return False
        return path.exists()

    async def get_install_path(self, name: str, ext_type: str) -> Path:
        """The type-scoped install root of an installed extension."""
        if not await self.is_installed(name, ext_type):
            raise NotFoundError(f"Extension not installed: {name}", name=name, type=ext_type)
        record = self._cache.get(name)
        if record is not None:
            return record.install_path
        return self._paths.install_path(ext_type)

    # --- lifecycle ---

    async def install(self, name: str, ext_type: str) -> None:
        install_path = self._paths.install_path(ext_type)
        async with self._cache.lock(name):
            try:
                await self._pm.install(name, install_path)
                manifest = load_manifest(package_dir(install_path, name))
            except (CommandError, ExtensionError, OSError) as e:
                self._logger.warning("Installing %s (%s) failed: %s", name, ext_type, e)
                raise InstallError(
                    f"Cannot install {name}: {e}", name=name, type=ext_type
                ) from e
            self._cache.set(
                name, ExtensionRecord(install_path=install_path, type=ext_type, manifest=manifest)
            )

    async def update(self, name: str, ext_type: str) -> None:
        async with self._cache.lock(name):
            install_path = await self.get_install_path(name, ext_type)
            try:
                await self._pm.update(name, install_path)
                manifest = load_manifest(package_dir(install_path, name))
            except (CommandError, ExtensionError, OSError) as e:
                self._logger.warning("Updating %s (%s) failed: %s", name, ext_type, e)
                raise UpdateError(f"Cannot update {name}: {e}", name=name, type=ext_type) from e
            if name in self._cache:
                self._cache.update_manifest(name, manifest)
            else:
                self._cache.set(
                    name,
                    ExtensionRecord(install_path=install_path, type=ext_type, manifest=manifest),
                )

    async def uninstall(self, name: str, ext_type: str) -> None:
        async with self._cache.lock(name):
            install_path = await self.get_install_path(name, ext_type)
            try:
                await self._pm.uninstall(name, install_path)
            except CommandError as e:
                self._logger.warning("Uninstalling %s (%s) failed: %s", name, ext_type, e)
                raise UninstallError(
                    f"Cannot uninstall {name}: {e}", name=name, type=ext_type
                ) from e
            self._cache.delete(name)

    async def has_update_available(self, name: str, ext_type: str) -> bool:
        try:
            manifest = await self.get_manifest(name, ext_type)
            entry = await self._registry.lookup_by_name(name)
            if entry is None or not entry.version:
                raise UnsupportedPackageError(
                    f"Registry has no version for {name}", name=name, type=ext_type
                )
            return is_version_lower(manifest.version, entry.version)
        except UnsupportedPackageError:
            raise
        except (ExtensionError, ValueError, TypeError) as e:
            self._logger.warning("Checking updates for %s (%s) failed: %s", name, ext_type, e)
            raise CheckUpdatesError(
                f"Cannot check updates for {name}: {e}", name=name, type=ext_type
            ) from e

    # --- installed package contents ---

    async def get_manifest(self, name: str, ext_type: str = "") -> PackageManifest:
        path = await self.get_extension_path(name, ext_type)
        if not path.exists():
            raise NotFoundError(f"Extension not installed: {name}", name=name, type=ext_type)
        return load_manifest(path)

    async def get_scheme(self, name: str, ext_type: str) -> Any:
        """Parsed configuration scheme of an extension, or [] if it ships none."""
        path = await self.get_extension_path(name, ext_type)
        manifest = await self.get_manifest(name, ext_type)
        scheme_path = join_relative(path, manifest.scheme_path or self._config.default_scheme_path)
        return load_optional_json(scheme_path, [])

    async def get_icon_path(self, name: str, ext_type: str) -> Path:
        record = self._cache.get(name)
        manifest = record.manifest if record is not None else await self.get_manifest(name, ext_type)
        install_path = await self.get_install_path(name, ext_type)
        return join_relative(
            package_dir(install_path, name), manifest.icon_path or self._config.default_icon_path
        )

    async def scan_installed(self) -> list[PackageManifest]:
        return await scan_installed(
            self._paths, self._config.extension_types, self._cache, self._logger
        )
