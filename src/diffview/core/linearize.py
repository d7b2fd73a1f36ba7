"""Chunk-to-line conversion with old/new line number bookkeeping"""

from diffview.core.models import ChunkKind, DiffChunk, Line


def split_chunk(text: str) -> list[str]:
    """Split chunk text on '\\n', dropping the trailing empty element left by a final separator.

    An empty text yields no lines; 'a\\n\\n' yields ['a', ''] since only the last
    element is treated as a join artifact.
    """
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return parts


def linearize(chunks: list[DiffChunk]) -> list[Line]:
    """Flatten ordered chunks into numbered lines (both counters start at 1)."""
    lines: list[Line] = []
    old_number = new_number = 1

    for chunk in chunks:
        for text in split_chunk(chunk.text):
            if chunk.kind == ChunkKind.equal:
                line = Line(text=text, kind=chunk.kind, old_number=old_number, new_number=new_number)
                old_number += 1
                new_number += 1
            elif chunk.kind == ChunkKind.delete:
                line = Line(text=text, kind=chunk.kind, old_number=old_number)
                old_number += 1
            else:
                line = Line(text=text, kind=chunk.kind, new_number=new_number)
                new_number += 1
            lines.append(line)

    return lines
