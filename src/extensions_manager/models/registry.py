from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RegistryEntry(BaseModel):
    """Package descriptor returned by a registry search or name lookup."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    name: str
    version: str | None = None
    description: Any = None
    # order matters: the first keyword that is a configured type wins
    keywords: list[str] = []
    scheme_path: str | None = Field(None, alias="schemePath")
    icon_path: str | None = Field(None, alias="iconPath")

    @field_validator("keywords", mode="before")
    @classmethod
    def _coerce_keywords(cls, v: Any) -> list[str]:
        # some published package.json files carry a comma-separated string or null
        if v is None:
            return []
        if isinstance(v, str):
            return [k.strip() for k in v.split(",") if k.strip()]
        if isinstance(v, list):
            return [k for k in v if isinstance(k, str)]
        return []


class SearchHit(BaseModel):
    """Single element of the registry search response's ``objects`` list."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)
    package: RegistryEntry
    score: dict[str, object] | None = None
    search_score: float | None = Field(None, alias="searchScore")
