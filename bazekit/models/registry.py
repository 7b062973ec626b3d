"""Registry document structures."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bazekit.url_utils import is_absolute_url


class RegistrySource(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["github"]
    url: str
    branch: str = "main"
    base_path: str = Field(default="", alias="basePath")

    @field_validator("url")
    @classmethod
    def require_absolute_url(cls, v: str) -> str:
        if not is_absolute_url(v):
            raise ValueError(f"Invalid url '{v}'")
        return v


class Snippet(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    kind: str = Field(default="component", alias="type")
    folder: Optional[str] = None
    files: list[str] = Field(min_length=1)
    dependencies: Optional[list[str]] = None


class RawRegistry(BaseModel):
    source: RegistrySource
    snippets: dict[str, Snippet]


class Registry(RawRegistry):
    """A validated registry with its computed download prefix."""

    base_url: str

    @classmethod
    def from_raw(cls, raw: RawRegistry) -> "Registry":
        return cls(source=raw.source, snippets=raw.snippets, base_url=build_base_url(raw))


def build_base_url(raw: RawRegistry) -> str:
    """Join source url, branch and base path into a prefix ending in one slash."""
    base_path = raw.source.base_path.strip("/")
    repo = raw.source.url.rstrip("/")
    suffix = f"{base_path}/" if base_path else ""
    return f"{repo}/{raw.source.branch}/{suffix}"
