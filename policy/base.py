from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from disk.diskmap import DiskMap

@dataclass(frozen=True)
class Move:
    src: int
    dst: int
    length: int
    file_id: int

@dataclass
class CompactionResult:
    blocks: List[Optional[int]]
    moves: List[Move] = field(default_factory=list)

    @property
    def moved_blocks(self) -> int:
        return sum(m.length for m in self.moves)

class Compactor:
    """Base for compaction policies.

    Subclasses implement iter_moves(), which rewrites the block buffer in
    place and yields every relocation as it happens.
    """
    name = 'base'

    def iter_moves(self, blocks: List[Optional[int]]) -> Iterator[Move]:
        raise NotImplementedError

    def compact(self, diskmap: DiskMap) -> CompactionResult:
        blocks = diskmap.expand()
        moves = list(self.iter_moves(blocks))
        return CompactionResult(blocks, moves)
