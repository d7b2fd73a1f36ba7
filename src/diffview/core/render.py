"""Plain-text rendering of file views for terminal output"""

from diffview.core.models import ChunkKind, FileView, Line, Section


MARKERS: dict[ChunkKind, str] = {
    ChunkKind.equal:  " ",
    ChunkKind.insert: "+",
    ChunkKind.delete: "-",
}


def _number(value: int | None, width: int) -> str:
    return str(value).rjust(width) if value is not None else " " * width


def render_line(line: Line, width: int = 4) -> str:
    """Format one row as 'old new marker text'."""
    return (
        f"{_number(line.old_number, width)} {_number(line.new_number, width)} "
        f"{MARKERS[line.kind]} {line.text}"
    )


def render_section(section: Section, width: int = 4) -> list[str]:
    """Render a section; a placeholder becomes a single gap marker row."""
    if section.is_placeholder:
        noun = "line" if section.hidden == 1 else "lines"
        return [f"{'':>{width * 2 + 1}} ... {section.hidden} hidden {noun} [{section.gap_key}]"]
    return [render_line(line, width) for line in section.lines]


def render_header(view: FileView) -> str:
    marker = "+" if view.collapsed else "-"
    header = f"[{marker}] {view.path}"
    if view.collapsed:
        header += f"  +{view.insertions} -{view.deletions}"
    return header


def render_file(view: FileView) -> str:
    """Header plus all section rows; collapsed views render the header only."""
    rows = [render_header(view)]
    numbers = [n for s in view.sections for line in s.lines for n in (line.old_number, line.new_number) if n]
    width = max(4, len(str(max(numbers, default=0))))
    for section in view.sections:
        rows.extend(render_section(section, width))
    return "\n".join(rows)
