"""
Mapping component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ._impl import MappingsFile

# --- Document Schema ---


class MappingsDocument(BaseModel):
    """Schema of the YAML mappings file."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    # host -> {path: target}; a host with no entries decodes to None
    mapping: dict[str, dict[str, str | None] | None] | None = None

    @field_validator("mapping", mode="before")
    @classmethod
    def _blank_as_none(cls, value: Any) -> Any:
        """Untyped YAML loads empty values as "" rather than null."""
        if value == "":
            return None
        if isinstance(value, dict):
            return {host: table if table != "" else None for host, table in value.items()}
        return value


# --- Error Detail ---


@dataclass(frozen=True)
class MappingErrorDetail:
    """Load or validation failure, reported without raising."""

    code: str
    message: str
    host: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class ParseMappingsInput:
    """Input for parsing raw configuration."""

    data: bytes | str


@dataclass(frozen=True)
class LoadMappingsInput:
    """Input for loading a mappings file from disk."""

    mapping_path: Path | str | None = None


@dataclass(frozen=True)
class LookupInput:
    """Input for resolving a redirect."""

    host: str
    path: str


# --- Output Models ---


@dataclass(frozen=True)
class MappingsOutput:
    """Output from parsing or loading."""

    mappings: MappingsFile | None
    errors: list[MappingErrorDetail] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class LookupOutput:
    """Output from a redirect lookup."""

    target: str
    found: bool
