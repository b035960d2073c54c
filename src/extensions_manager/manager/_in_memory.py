"""Local adapters: a dict-backed registry and a package manager that needs no network."""

from __future__ import annotations

import json
import shutil
from typing import TYPE_CHECKING, Any

from ..errors import CommandError
from ..models.registry import RegistryEntry
from ..paths import MANIFEST_FILE, encode_for_registry, package_dir

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path


class InMemoryRegistryAdapter:
    """Registry holding the latest published descriptor of each package."""

    def __init__(
        self,
        entries: Sequence[RegistryEntry | dict[str, Any]] = (),
        package_url: str = "https://registry.invalid/package",
    ) -> None:
        self._entries: dict[str, RegistryEntry] = {}
        self._package_url = package_url
        for entry in entries:
            self.publish(entry)

    def publish(self, entry: RegistryEntry | dict[str, Any]) -> RegistryEntry:
        if not isinstance(entry, RegistryEntry):
            entry = RegistryEntry.model_validate(entry)
        self._entries[entry.name] = entry
        return entry

    def unpublish(self, name: str) -> None:
        self._entries.pop(name, None)

    async def search(
        self,
        text: str,
        keywords: Sequence[str] | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[RegistryEntry]:
        hits = [
            e
            for e in self._entries.values()
            if (text in e.name or text in (e.description or ""))
            and all(k in e.keywords for k in keywords or ())
        ]
        start = offset or 0
        end = start + limit if limit is not None else None
        return hits[start:end]

    async def lookup_by_name(self, name: str, version: str = "latest") -> RegistryEntry | None:
        entry = self._entries.get(name)
        if entry is None or version not in ("latest", entry.version):
            return None
        return entry

    def info_url(self, name: str) -> str:
        return f"{self._package_url}/{encode_for_registry(name)}"


class LocalPackageManager:
    """Writes registry descriptors straight into node_modules as package.json.

    Set ``fail`` to make every command raise CommandError.
    """

    def __init__(self, registry: InMemoryRegistryAdapter) -> None:
        self._registry = registry
        self.fail = False
        self.calls: list[tuple[str, str | None, Path]] = []

    async def init(self, cwd: Path) -> None:
        self._record("init", None, cwd)
        cwd.mkdir(parents=True, exist_ok=True)
        manifest = cwd / MANIFEST_FILE
        if not manifest.exists():
            manifest.write_text(
                json.dumps({"name": cwd.name, "version": "1.0.0"}, indent=2), encoding="utf-8"
            )

    async def install(self, name: str, cwd: Path) -> None:
        self._record("install", name, cwd)
        await self._materialise(name, cwd)

    async def update(self, name: str, cwd: Path) -> None:
        self._record("update", name, cwd)
        await self._materialise(name, cwd)

    async def uninstall(self, name: str, cwd: Path) -> None:
        self._record("uninstall", name, cwd)
        dest = package_dir(cwd, name)
        if dest.is_dir():
            shutil.rmtree(dest)

    def _record(self, action: str, name: str | None, cwd: Path) -> None:
        self.calls.append((action, name, cwd))
        if self.fail:
            raise CommandError(f"{action} failed", command=[action, name or ""], returncode=1)

    async def _materialise(self, name: str, cwd: Path) -> None:
        entry = await self._registry.lookup_by_name(name)
        if entry is None:
            raise CommandError(f"404 Not Found - {name}", command=["install", name], returncode=1)
        dest = package_dir(cwd, name)
        dest.mkdir(parents=True, exist_ok=True)
        (dest / MANIFEST_FILE).write_text(
            entry.model_dump_json(by_alias=True, exclude_none=True, indent=2),
            encoding="utf-8",
        )
