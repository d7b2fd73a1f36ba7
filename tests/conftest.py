"""Root test configuration: shared chunk builders"""

import pytest

from diffview.core.models import ChunkKind, DiffChunk


def _make_chunk(kind: ChunkKind, count: int, prefix: str = "l") -> DiffChunk:
    """Chunk of count lines named prefix1..prefixN, each ending in a newline."""
    return DiffChunk(kind=kind, text="".join(f"{prefix}{n}\n" for n in range(1, count + 1)))


@pytest.fixture(name="make_chunk")
def make_chunk_fixture():
    return _make_chunk


@pytest.fixture(name="scenario_chunks")
def scenario_chunks_fixture():
    """Ten unchanged lines, one deletion, ten unchanged lines."""
    return [
        _make_chunk(ChunkKind.equal, 10, "a"),
        _make_chunk(ChunkKind.delete, 1, "d"),
        _make_chunk(ChunkKind.equal, 10, "b"),
    ]
