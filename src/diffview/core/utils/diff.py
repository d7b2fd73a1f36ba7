"""Build chunk lists from two text strings with difflib"""

import difflib
import re

from diffview.core.models import ChunkKind, DiffChunk, FileDiff


LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


def split_keepends(text: str) -> list[str]:
    """Split text on '\\n' only, keeping separators; other line-break characters stay inside a line."""
    return LINE_RE.findall(text)


def build_chunks(old: str, new: str) -> list[DiffChunk]:
    """Return ordered chunks turning old into new. Replacements become Delete then Insert.

    Chunk text keeps each line's trailing newline, so a file ending without one
    yields a final chunk without a trailing separator.
    """
    old_lines = split_keepends(old)
    new_lines = split_keepends(new)
    matcher = difflib.SequenceMatcher(None, old_lines, new_lines, autojunk=False)
    chunks: list[DiffChunk] = []

    for tag, i1, i2, j1, j2 in matcher.get_opcodes():
        if tag == "equal":
            chunks.append(DiffChunk(kind=ChunkKind.equal, text="".join(old_lines[i1:i2])))
        if tag in ("replace", "delete"):
            chunks.append(DiffChunk(kind=ChunkKind.delete, text="".join(old_lines[i1:i2])))
        if tag in ("replace", "insert"):
            chunks.append(DiffChunk(kind=ChunkKind.insert, text="".join(new_lines[j1:j2])))

    return chunks


def file_diff(path: str, old: str, new: str) -> FileDiff:
    """Wrap build_chunks output for a single file path."""
    return FileDiff(path=path, chunks=build_chunks(old, new))
