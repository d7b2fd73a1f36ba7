"""Data models for chunked file diffs and their segmented display form"""

from enum import Enum
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ChunkKind(str, Enum):
    """Restrict diff chunks to the three kinds emitted by the diff producer"""
    equal = "Equal"
    insert = "Insert"
    delete = "Delete"


class SectionKind(str, Enum):
    """Display role of a contiguous slice of lines"""
    context = "context"
    change = "change"
    expanded = "expanded"


class DiffChunk(BaseModel):
    """One contiguous run of same-kind lines, joined with '\\n'."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: ChunkKind = Field(..., validation_alias=AliasChoices("kind", "chunk_type"))
    text: str = Field(default="", validation_alias=AliasChoices("text", "content"))


class FileDiff(BaseModel):
    """Ordered chunk list for one file."""
    model_config = ConfigDict(frozen=True)

    path: str
    chunks: list[DiffChunk] = []


class WorktreeDiff(BaseModel):
    """All file diffs produced for one attempt."""
    model_config = ConfigDict(frozen=True)

    files: list[FileDiff] = []


class Line(BaseModel):
    """A single rendered row. old_number is set for equal/delete, new_number for equal/insert."""
    model_config = ConfigDict(frozen=True)

    text: str
    kind: ChunkKind
    old_number: Optional[int] = None
    new_number: Optional[int] = None


class Section(BaseModel):
    """A slice of lines grouped for display; gap_key marks a collapsible gap."""
    model_config = ConfigDict(frozen=True)

    kind: SectionKind
    lines: list[Line] = []
    gap_key: Optional[str] = None
    hidden: int = 0                 # lines behind a placeholder; 0 otherwise

    @property
    def is_placeholder(self) -> bool:
        return self.kind == SectionKind.context and self.gap_key is not None


class FileView(BaseModel):
    """Per-file display result: header stats plus sections (empty when collapsed)."""
    model_config = ConfigDict(frozen=True)

    path: str
    collapsed: bool = False
    insertions: int = 0
    deletions: int = 0
    sections: list[Section] = []
