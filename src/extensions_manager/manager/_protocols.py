"""Protocols (ports) for the extensions manager."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from ..models.manifest import PackageManifest
    from ..models.registry import RegistryEntry


class RegistryAdapter(Protocol):
    """Remote package index: search, exact lookup, browse URL."""

    async def search(
        self,
        text: str,
        keywords: Sequence[str] | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[RegistryEntry]: ...
    async def lookup_by_name(self, name: str, version: str = "latest") -> RegistryEntry | None: ...
    def info_url(self, name: str) -> str: ...


class PackageManagerAdapter(Protocol):
    """Runs package-manager commands inside a type's install root.

    Every method raises CommandError on failure or timeout.
    """

    async def init(self, cwd: Path) -> None: ...
    async def install(self, name: str, cwd: Path) -> None: ...
    async def update(self, name: str, cwd: Path) -> None: ...
    async def uninstall(self, name: str, cwd: Path) -> None: ...


class ExtensionsManager(Protocol):
    """Discover, install, update, and uninstall extensions of a host application."""

    @property
    def language(self) -> str: ...

    async def init(self) -> None: ...
    async def search(
        self,
        text: str,
        keywords: Sequence[str] | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[RegistryEntry]: ...
    async def lookup_by_name(self, name: str, version: str = "latest") -> RegistryEntry | None: ...
    async def get_type_by_name(self, name: str) -> str: ...
    async def is_installed(self, name: str, ext_type: str) -> bool: ...
    async def install(self, name: str, ext_type: str) -> None: ...
    async def update(self, name: str, ext_type: str) -> None: ...
    async def uninstall(self, name: str, ext_type: str) -> None: ...
    async def has_update_available(self, name: str, ext_type: str) -> bool: ...
    async def get_manifest(self, name: str, ext_type: str = "") -> PackageManifest: ...
    async def get_scheme(self, name: str, ext_type: str) -> Any: ...
    async def get_icon_path(self, name: str, ext_type: str) -> Path: ...
    async def scan_installed(self) -> list[PackageManifest]: ...
    def info_url(self, name: str) -> str: ...
