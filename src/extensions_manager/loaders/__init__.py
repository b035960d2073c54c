from .config import load_config
from .package import load_manifest, load_optional_json

__all__ = ["load_config", "load_manifest", "load_optional_json"]
