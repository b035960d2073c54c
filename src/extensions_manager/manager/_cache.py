"""In-memory index of installed extensions."""

from __future__ import annotations

import asyncio
import weakref
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from ..models.manifest import PackageManifest


@dataclass
class ExtensionRecord:
    install_path: Path  # <install root>/<type>
    type: str
    manifest: PackageManifest


class ExtensionCache:
    """Name -> ExtensionRecord store, plus one asyncio.Lock per name.

    A name is present iff the extension is believed installed at
    ``record.install_path``. Mutating callers hold ``lock(name)`` across the
    package-manager call and the cache write.
    """

    def __init__(self) -> None:
        self._records: dict[str, ExtensionRecord] = {}
        # a lock lives only while some coroutine holds or awaits it
        self._locks: weakref.WeakValueDictionary[str, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )

    def get(self, name: str) -> ExtensionRecord | None:
        return self._records.get(name)

    def set(self, name: str, record: ExtensionRecord) -> None:
        self._records[name] = record

    def update_manifest(self, name: str, manifest: PackageManifest) -> None:
        record = self._records.get(name)
        if record is None:
            raise KeyError(name)
        record.manifest = manifest

    def delete(self, name: str) -> None:
        self._records.pop(name, None)

    def names(self) -> list[str]:
        return list(self._records)

    def snapshot(self) -> dict[str, ExtensionRecord]:
        return dict(self._records)

    def lock(self, name: str) -> asyncio.Lock:
        lock = self._locks.get(name)
        if lock is None:
            lock = self._locks[name] = asyncio.Lock()
        return lock

    def __contains__(self, name: object) -> bool:
        return name in self._records

    def __len__(self) -> int:
        return len(self._records)
