from __future__ import annotations
from typing import Iterator, List, Optional

from disk.fragmentation import extents_free
from policy.base import Compactor, Move

class WholeFileCompactor(Compactor):
    """Moves whole files, highest id first, into the leftmost gap that fits.

    Each file is considered once and only moves left. A file with no large
    enough gap before it stays where it is.
    """
    name = 'file'

    def iter_moves(self, blocks: List[Optional[int]]) -> Iterator[Move]:
        # file id -> (start, length); ids appear in ascending order on disk
        spans = {}
        for pos, fid in enumerate(blocks):
            if fid is None:
                continue
            if fid in spans:
                start, length = spans[fid]
                spans[fid] = (start, length + 1)
            else:
                spans[fid] = (pos, 1)

        # Space freed by a move lies right of every file still to be
        # processed, so the gap list only ever shrinks.
        gaps = extents_free(blocks)
        for fid in sorted(spans, reverse=True):
            start, length = spans[fid]
            for i, (gstart, glen) in enumerate(gaps):
                if gstart >= start:
                    break
                if glen >= length:
                    blocks[gstart:gstart+length] = [fid] * length
                    blocks[start:start+length] = [None] * length
                    gaps[i] = (gstart+length, glen-length)
                    yield Move(start, gstart, length, fid)
                    break
