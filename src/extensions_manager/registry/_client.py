from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx

from ..config import NPM_PACKAGE_INFO_URL, NPM_PACKAGE_PAGE_URL, NPM_SEARCH_URL
from ..errors import RegistryTimeoutError
from ..models.registry import RegistryEntry, SearchHit
from ..paths import encode_for_registry

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Sequence

logger = logging.getLogger(__name__)


def build_search_url(
    search_url: str,
    text: str,
    keywords: Sequence[str] | None = None,
    offset: int | None = None,
    limit: int | None = None,
) -> str:
    # the keywords qualifier must follow the text value with no separator,
    # otherwise the registry does not match packages by keyword
    qualifier = f"+keywords:{'+'.join(keywords)}" if keywords else ""
    url = f"{search_url}?text={text}{qualifier}"
    if offset is not None:
        url += f"&from={offset}"
    if limit is not None:
        url += f"&size={limit}"
    return url


class RegistryClient:
    """Search and exact-name lookup against an npm-compatible registry."""

    def __init__(
        self,
        search_url: str = NPM_SEARCH_URL,
        search_by_package_name_url: str = NPM_PACKAGE_INFO_URL,
        package_url: str = NPM_PACKAGE_PAGE_URL,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._search_url = search_url
        self._lookup_url = search_by_package_name_url
        self._package_url = package_url.rstrip("/")
        self._client = client

    @asynccontextmanager
    async def _http(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient(follow_redirects=True) as client:
            yield client

    async def search(
        self,
        text: str,
        keywords: Sequence[str] | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[RegistryEntry]:
        """Full-text search, optionally restricted to packages with all ``keywords``.

        Raises:
            RegistryTimeoutError: On any transport failure or unreadable response.
        """
        url = build_search_url(self._search_url, text, keywords, offset, limit)
        try:
            async with self._http() as client:
                response = await client.get(url)
            data = response.json()
            hits = [SearchHit.model_validate(obj) for obj in data["objects"]]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.warning("Registry search failed for %s: %s", url, e)
            raise RegistryTimeoutError(f"Registry search failed: {e}", url=url) from e
        return [hit.package for hit in hits]

    async def lookup_by_name(self, name: str, version: str = "latest") -> RegistryEntry | None:
        """Fetch the descriptor of ``name`` at ``version``.

        Returns None when the registry answers with a non-success status.

        Raises:
            RegistryTimeoutError: On transport failure or an unreadable body.
        """
        url = f"{self._lookup_url.rstrip('/')}/{encode_for_registry(name)}/{version}"
        try:
            async with self._http() as client:
                response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Registry lookup failed for %s: %s", url, e)
            raise RegistryTimeoutError(f"Registry lookup failed: {e}", name=name, url=url) from e

        if not response.is_success:
            logger.warning(
                "Registry lookup for %s returned %s %s",
                url,
                response.status_code,
                response.reason_phrase,
            )
            return None

        try:
            return RegistryEntry.model_validate(response.json())
        except ValueError as e:  # includes pydantic.ValidationError
            raise RegistryTimeoutError(
                f"Invalid registry response for {name}: {e}", name=name, url=url
            ) from e

    def info_url(self, name: str) -> str:
        return f"{self._package_url}/{encode_for_registry(name)}"
