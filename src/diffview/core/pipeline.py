"""Pipeline step functions: load a worktree diff and build per-file views"""

import json
import logging
from collections.abc import Collection
from pathlib import Path

from pydantic import ValidationError

from diffview.core.linearize import linearize
from diffview.core.models import FileDiff, FileView, WorktreeDiff
from diffview.core.segment import segment
from diffview.core.stats import change_counts, collapsed_summary


logger = logging.getLogger(__name__)


def load_worktree_diff(path: Path) -> WorktreeDiff:
    """Read a worktree diff JSON file; a bare list of file diffs is also accepted."""
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Invalid diff file {path}: {e}") from e
    if isinstance(raw, list):
        raw = {"files": raw}
    try:
        return WorktreeDiff.model_validate(raw)
    except ValidationError as e:
        raise ValueError(f"Invalid diff file {path}: {e}") from e


def build_file_view(
    file: FileDiff,
    file_key: str | int,
    context_lines: int,
    expanded: Collection[str] = frozenset(),
    collapsed: Collection[str] = frozenset(),
    ) -> FileView:
    """Compute header counts and, unless the file is collapsed, its sections."""
    summary = collapsed_summary(file, collapsed)
    if summary is not None:
        return FileView(path=file.path, collapsed=True, **summary)

    sections = segment(linearize(file.chunks), context_lines, expanded, file_key)
    logger.debug("segmented %s into %d section(s)", file.path, len(sections))
    return FileView(path=file.path, sections=sections, **change_counts(file.chunks))


def run_view(
    worktree: WorktreeDiff,
    context_lines: int,
    expanded: Collection[str] = frozenset(),
    collapsed: Collection[str] = frozenset(),
    ) -> list[FileView]:
    """Build one FileView per file, keyed by the file's index in the worktree diff."""
    views = [
        build_file_view(f, index, context_lines, expanded, collapsed)
        for index, f in enumerate(worktree.files)
    ]
    logger.debug("built %d file view(s) with context_lines=%d", len(views), context_lines)
    return views
