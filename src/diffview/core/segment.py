"""Partition numbered lines into context, change, and collapsible gap sections"""

from collections.abc import Collection

from diffview.core.models import ChunkKind, Line, Section, SectionKind


DEFAULT_CONTEXT_LINES = 3
COMPACT_CONTEXT_LINES = 2


def context_window(
    compact: bool = False,
    context_lines: int = DEFAULT_CONTEXT_LINES,
    compact_context_lines: int = COMPACT_CONTEXT_LINES,
    ) -> int:
    """Return the anchor width for normal or compact display."""
    return compact_context_lines if compact else context_lines


def gap_key(file_key: str | int, start: int, end: int) -> str:
    """Identify the hidden span [start, end) of one file's line sequence."""
    return f"{file_key}-{start}-{end}"


def _run_end(lines: list[Line], start: int) -> int:
    """Return the index just past the run of lines sharing the equal/non-equal class of lines[start]."""
    is_equal = lines[start].kind == ChunkKind.equal
    end = start + 1
    while end < len(lines) and (lines[end].kind == ChunkKind.equal) == is_equal:
        end += 1
    return end


def _gap(lines: list[Line], start: int, end: int, key: str, expanded: Collection[str]) -> Section:
    if key in expanded:
        return Section(kind=SectionKind.expanded, lines=lines[start:end], gap_key=key)
    return Section(kind=SectionKind.context, lines=[], gap_key=key, hidden=end - start)


def segment(
    lines: list[Line],
    context_lines: int = DEFAULT_CONTEXT_LINES,
    expanded: Collection[str] = frozenset(),
    file_key: str | int = 0,
    ) -> list[Section]:
    """Group lines into display sections, collapsing long context runs around changes.

    A context run longer than 2 * context_lines keeps context_lines anchors next to
    each adjacent change and hides the middle behind a gap keyed by gap_key(). Runs
    at the file edges keep only the anchor facing the change; their gap also takes
    the lines an outer anchor would have shown, so a leading run of length L hides
    [0, L - context_lines). A run with no adjacent change (an unchanged file) is
    never collapsed. Gaps whose key is in expanded are emitted as expanded sections
    in the same position.
    """
    if context_lines < 1:
        raise ValueError(f"context_lines must be positive, got {context_lines}")

    sections: list[Section] = []
    total = len(lines)
    i = 0

    while i < total:
        end = _run_end(lines, i)

        if lines[i].kind != ChunkKind.equal:
            sections.append(Section(kind=SectionKind.change, lines=lines[i:end]))
            i = end
            continue

        has_prev = i > 0
        has_next = end < total
        if end - i <= 2 * context_lines or not (has_prev or has_next):
            sections.append(Section(kind=SectionKind.context, lines=lines[i:end]))
            i = end
            continue

        gap_start = i + context_lines if has_prev else i
        gap_end = end - context_lines if has_next else end
        if has_prev:
            sections.append(Section(kind=SectionKind.context, lines=lines[i:gap_start]))
        if gap_end > gap_start:
            key = gap_key(file_key, gap_start, gap_end)
            sections.append(_gap(lines, gap_start, gap_end, key, expanded))
        if has_next:
            sections.append(Section(kind=SectionKind.context, lines=lines[gap_end:end]))
        i = end

    return sections
