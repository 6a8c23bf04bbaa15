from __future__ import annotations
from typing import Optional, Sequence

def checksum(blocks: Sequence[Optional[int]]) -> int:
    return sum(pos * fid for pos, fid in enumerate(blocks) if fid is not None)
