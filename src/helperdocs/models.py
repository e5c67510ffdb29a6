"""Domain models for helperdocs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .constants import (
    DOCS_DIR_NAME,
    GROUP_INDEX_NAME,
    HELPERS_DIR_NAME,
    PAGE_SUFFIX,
    README_NAME,
)


class DocGroup(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str = Field(min_length=1)
    summary: str
    group_id: str = Field(min_length=1)
    sections: tuple[str, ...] = Field(min_length=1)

    @property
    def index_path(self) -> str:
        """Group index path relative to the docs directory."""
        return f"{self.group_id}/{GROUP_INDEX_NAME}"


class ScriptRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    group_id: str
    section: str
    script_name: str
    file_stem: str
    title: str
    summary: str
    description: str
    example: str
    raw_source: str

    @property
    def page_name(self) -> str:
        return f"{self.file_stem}{PAGE_SUFFIX}"

    @property
    def page_path(self) -> str:
        """Script page path relative to the docs directory."""
        return f"{self.group_id}/{self.section}/{self.page_name}"

    @property
    def script_path(self) -> str:
        """Script path relative to the helpers directory."""
        return f"{self.group_id}/{self.section}/{self.script_name}"


class TocEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    summary: str
    group_id: str
    records: tuple[ScriptRecord, ...] = ()


class GenerationData(BaseModel):
    model_config = ConfigDict(frozen=True)

    toc: tuple[TocEntry, ...]
    records: tuple[ScriptRecord, ...]


class RegistryFile(BaseModel):
    """On-disk shape of a --config registry file."""

    groups: list[DocGroup]


@dataclass(frozen=True)
class ProjectPaths:
    root: Path
    readme: Path
    docs_dir: Path
    helpers_dir: Path

    @classmethod
    def from_root(cls, root: Path) -> ProjectPaths:
        return cls(
            root=root,
            readme=root / README_NAME,
            docs_dir=root / DOCS_DIR_NAME,
            helpers_dir=root / HELPERS_DIR_NAME,
        )


@dataclass(frozen=True)
class RenderedDocs:
    readme_fragment: str
    # Keyed by path relative to the docs directory, in write order.
    script_pages: dict[str, str]
    group_indexes: dict[str, str]


@dataclass(frozen=True)
class GenerationReport:
    record_count: int
    written_paths: list[Path] = field(default_factory=list)
    unchanged_paths: list[Path] = field(default_factory=list)
