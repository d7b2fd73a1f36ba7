"""CLI command implementations"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from diffview.config import Settings, load_config
from diffview.core.models import FileView, WorktreeDiff
from diffview.core.pipeline import load_worktree_diff, run_view
from diffview.core.render import render_file
from diffview.core.stats import change_counts
from diffview.core.utils.diff import file_diff


logger = logging.getLogger(__name__)

CompactOpt = Annotated[bool, typer.Option("--compact", help="Use the compact context window")]
ContextOpt = Annotated[Optional[int], typer.Option("--context-lines", min=1, help="Anchor lines around each change")]
ExpandOpt = Annotated[Optional[list[str]], typer.Option("--expand", help="Gap key to reveal (repeatable)")]
CollapseOpt = Annotated[Optional[list[str]], typer.Option("--collapse", help="File path to collapse (repeatable)")]
FormatOpt = Annotated[Optional[str], typer.Option("--format", help="Output format: text or json")]


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def _load(path: Path) -> WorktreeDiff:
    try:
        return load_worktree_diff(path)
    except ValueError as e:
        _fail(str(e))


def _echo_views(views: list[FileView], fmt: str) -> None:
    """Print file views as rendered text or a JSON array."""
    if fmt == "json":
        typer.echo(json.dumps([v.model_dump(mode="json") for v in views], indent=2))
        return
    for view in views:
        typer.echo(render_file(view))


def _display(worktree: WorktreeDiff, compact: bool, context: Optional[int],
             expand: Optional[list[str]], collapse: Optional[list[str]], fmt: Optional[str]) -> None:
    settings = _settings(overrides={
        "compact": compact or None, "context_lines": context, "output_format": fmt,
    })
    window = context if context is not None else settings.window
    views = run_view(worktree, window, frozenset(expand or ()), frozenset(collapse or ()))
    _echo_views(views, settings.output_format)


def main_callback(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ):
    """Segment chunked file diffs into collapsible context and change sections."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


def show_cmd(
    path: Annotated[Path, typer.Argument(help="Worktree diff JSON file")],
    compact: CompactOpt = False,
    context: ContextOpt = None,
    expand: ExpandOpt = None,
    collapse: CollapseOpt = None,
    fmt: FormatOpt = None,
    ):
    """Render every file of a worktree diff with long unchanged runs collapsed."""
    worktree = _load(path)
    logger.debug("loaded %d file(s) from %s", len(worktree.files), path)
    _display(worktree, compact, context, expand, collapse, fmt)


def compare_cmd(
    old: Annotated[Path, typer.Argument(help="Original file")],
    new: Annotated[Path, typer.Argument(help="Modified file")],
    compact: CompactOpt = False,
    context: ContextOpt = None,
    expand: ExpandOpt = None,
    collapse: CollapseOpt = None,
    fmt: FormatOpt = None,
    ):
    """Diff two files and render the result like 'show'."""
    try:
        old_text = old.read_text(encoding="utf-8")
        new_text = new.read_text(encoding="utf-8")
    except OSError as e:
        _fail("Cannot read input", e)
    worktree = WorktreeDiff(files=[file_diff(str(new), old_text, new_text)])
    _display(worktree, compact, context, expand, collapse, fmt)


def stats_cmd(
    path: Annotated[Path, typer.Argument(help="Worktree diff JSON file")],
    ):
    """Print insertion and deletion counts per file."""
    worktree = _load(path)
    if not worktree.files:
        typer.echo("No files in diff.")
        raise typer.Exit(1)
    for f in worktree.files:
        counts = change_counts(f.chunks)
        typer.echo(f"+{counts['insertions']} -{counts['deletions']} {f.path}")
