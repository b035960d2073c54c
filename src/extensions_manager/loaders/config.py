from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ..config import ExtensionsConfig
from ..errors import LoadError

if TYPE_CHECKING:
    from pathlib import Path


def load_config(path: Path) -> ExtensionsConfig:
    """Load an ExtensionsConfig from a JSON file.

    Raises:
        LoadError: If the file is missing or is not valid JSON.
        pydantic.ValidationError: If the JSON does not match the schema.
    """
    if not path.is_file():
        raise LoadError(f"Config file not found: {path}", path=path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise LoadError(f"Invalid JSON in {path}: {e}", path=path) from e
    return ExtensionsConfig.model_validate(data)
