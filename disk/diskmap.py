from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Tuple

class ParseError(ValueError):
    pass

@dataclass(frozen=True)
class Segment:
    start: int
    length: int
    file_id: Optional[int] = None

    @property
    def is_file(self) -> bool:
        return self.file_id is not None

    @property
    def end(self) -> int:
        return self.start + self.length

class DiskMap:
    """Ordered segments of a virtual disk, as described by a dense disk map.

    Even digits are file lengths (ids 0, 1, 2, ...), odd digits are gaps.
    Zero-length segments are kept so ids line up with input positions,
    but they cover no blocks.
    """
    def __init__(self, segments: List[Segment]):
        self.segments = segments
        self.size = segments[-1].end if segments else 0

    def files(self) -> List[Segment]:
        return [s for s in self.segments if s.is_file]

    def free_extents(self) -> List[Tuple[int,int]]:
        return [(s.start, s.length) for s in self.segments if not s.is_file and s.length > 0]

    def file_block_count(self) -> int:
        return sum(s.length for s in self.files())

    def expand(self) -> List[Optional[int]]:
        blocks: List[Optional[int]] = []
        for s in self.segments:
            blocks.extend([s.file_id] * s.length)
        return blocks

def parse_disk_map(text: str) -> DiskMap:
    text = text.strip()
    segments=[]
    cursor=0
    for i, ch in enumerate(text):
        # str.isdigit() also accepts superscripts and other unicode digits
        if ch not in '0123456789':
            raise ParseError(f"invalid character {ch!r} at position {i}")
        length = int(ch)
        file_id = i // 2 if i % 2 == 0 else None
        segments.append(Segment(cursor, length, file_id))
        cursor += length
    return DiskMap(segments)
