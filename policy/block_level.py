from __future__ import annotations
from typing import Iterator, List, Optional

from policy.base import Compactor, Move

class BlockCompactor(Compactor):
    """Moves single blocks from the end of the disk into the leftmost gaps.

    Files may end up split. The scan stops once the cursors meet, at which
    point no free block precedes a file block.
    """
    name = 'block'

    def iter_moves(self, blocks: List[Optional[int]]) -> Iterator[Move]:
        left, right = 0, len(blocks) - 1
        while left < right:
            if blocks[left] is not None:
                left += 1
            elif blocks[right] is None:
                right -= 1
            else:
                fid = blocks[right]
                blocks[left], blocks[right] = fid, None
                yield Move(right, left, 1, fid)
                left += 1
                right -= 1
