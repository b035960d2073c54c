from ._client import RegistryClient, build_search_url

__all__ = ["RegistryClient", "build_search_url"]
