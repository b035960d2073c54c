from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ..errors import LoadError
from ..models.manifest import PackageManifest
from ..paths import MANIFEST_FILE

if TYPE_CHECKING:
    from pathlib import Path


def load_manifest(package_dir: Path) -> PackageManifest:
    """Parse <package_dir>/package.json."""
    manifest_path = package_dir / MANIFEST_FILE
    data = _read_json(manifest_path)
    try:
        return PackageManifest.model_validate(data)
    except ValidationError as e:
        raise LoadError(f"Invalid package manifest {manifest_path}: {e}", path=manifest_path) from e


def load_optional_json(path: Path, default: Any) -> Any:
    """Parse a JSON file, returning ``default`` when it does not exist."""
    if not path.is_file():
        return default
    return _read_json(path)


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise LoadError(f"File not found: {path}", path=path) from e
    except json.JSONDecodeError as e:
        raise LoadError(f"Invalid JSON in {path}: {e}", path=path) from e
    except UnicodeDecodeError as e:
        raise LoadError(f"{path} is not valid UTF-8: {e}", path=path) from e
    except OSError as e:
        raise LoadError(f"Cannot read {path}: {e}", path=path) from e
