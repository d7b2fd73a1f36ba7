"""Insertion/deletion counts for collapsed file headers"""

from collections.abc import Collection

from diffview.core.models import ChunkKind, DiffChunk, FileDiff


def chunk_line_count(text: str) -> int:
    """Count '\\n' separators in text. A final line without a separator is not counted."""
    return len(text.split("\n")) - 1


def change_counts(chunks: list[DiffChunk]) -> dict[str, int]:
    """Return insertion/deletion counts summed over Insert and Delete chunks."""
    insertions = deletions = 0
    for chunk in chunks:
        if chunk.kind == ChunkKind.insert:
            insertions += chunk_line_count(chunk.text)
        elif chunk.kind == ChunkKind.delete:
            deletions += chunk_line_count(chunk.text)
    return {"insertions": insertions, "deletions": deletions}


def collapsed_summary(file: FileDiff, collapsed: Collection[str]) -> dict[str, int] | None:
    """Header counts for a file whose diff view is collapsed, else None."""
    if file.path not in collapsed:
        return None
    return change_counts(file.chunks)
