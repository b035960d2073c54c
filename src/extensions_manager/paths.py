"""Install-root layout: where each extension type and package lives on disk."""

from __future__ import annotations

from pathlib import Path
from urllib.parse import quote

PACKAGES_DIR = "node_modules"
MANIFEST_FILE = "package.json"
SCOPE_PREFIX = "@"


def encode_for_registry(name: str) -> str:
    """Percent-encode a package name for use as a single URL path segment.

    "@scope/pkg" becomes "%40scope%2Fpkg". Filesystem paths never use this.
    """
    return quote(name, safe="!~*'()")


def join_relative(base: Path, relative: str) -> Path:
    """Join a manifest-declared path under ``base``, even if it starts with "/"."""
    return base / relative.lstrip("/")


class ExtensionPaths:
    """Type-partitioned install layout rooted at ``install_root``.

    <install_root>/<type>/node_modules/<name>
    """

    def __init__(self, install_root: Path | str) -> None:
        self._root = Path(install_root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def install_path(self, ext_type: str) -> Path:
        return self._root / ext_type

    def packages_dir(self, ext_type: str) -> Path:
        return self.install_path(ext_type) / PACKAGES_DIR

    def extension_dir(self, name: str, ext_type: str) -> Path:
        return package_dir(self.install_path(ext_type), name)


def package_dir(install_path: Path, name: str) -> Path:
    # scoped names ("@scope/pkg") nest one directory deeper
    return install_path / PACKAGES_DIR / name


def iter_package_names(packages_dir: Path) -> list[str]:
    """List the package names installed directly in a node_modules directory.

    Scope directories ("@scope") are expanded to "@scope/<pkg>" for each of
    their subdirectories. Dot-directories such as ".bin" are skipped.
    """
    names: list[str] = []
    for entry in sorted(packages_dir.iterdir()):
        if not entry.is_dir() or entry.name.startswith("."):
            continue
        if entry.name.startswith(SCOPE_PREFIX):
            names.extend(
                f"{entry.name}/{scoped.name}"
                for scoped in sorted(entry.iterdir())
                if scoped.is_dir()
            )
            continue
        names.append(entry.name)
    return names
