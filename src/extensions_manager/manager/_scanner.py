"""Reconcile the cache with what is installed on disk."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..errors import ExtensionError
from ..loaders.package import load_manifest
from ..paths import iter_package_names
from ._cache import ExtensionRecord

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..models.manifest import PackageManifest
    from ..paths import ExtensionPaths
    from ._cache import ExtensionCache


async def scan_installed(
    paths: ExtensionPaths,
    extension_types: Sequence[str],
    cache: ExtensionCache,
    logger: logging.Logger,
) -> list[PackageManifest]:
    """Find installed extensions of every type and (re)insert them into ``cache``.

    Packages under a type's node_modules whose manifest keywords do not
    include that type are dependencies, not extensions, and are skipped.
    Per-package failures are logged and skipped; an unexpected failure stops
    the scan and returns what was found so far.
    """
    manifests: list[PackageManifest] = []
    try:
        for ext_type in extension_types:
            packages_dir = paths.packages_dir(ext_type)
            if not packages_dir.is_dir():
                continue
            try:
                names = iter_package_names(packages_dir)
            except OSError as e:
                logger.warning("Cannot list %s: %s", packages_dir, e)
                continue

            for name in names:
                try:
                    manifest = load_manifest(paths.extension_dir(name, ext_type))
                except ExtensionError as e:
                    logger.warning("Skipping %s (%s): %s", name, ext_type, e)
                    continue
                if ext_type not in manifest.keywords:
                    continue

                async with cache.lock(name):
                    cache.set(
                        name,
                        ExtensionRecord(
                            install_path=paths.install_path(ext_type),
                            type=ext_type,
                            manifest=manifest,
                        ),
                    )
                manifests.append(manifest)
    except Exception:
        logger.exception("Scanning installed extensions failed")
    return manifests
