from __future__ import annotations
import string
from typing import Optional, Sequence

GLYPHS = string.digits + string.ascii_lowercase + string.ascii_uppercase

def glyph(file_id: Optional[int]) -> str:
    if file_id is None:
        return '.'
    return GLYPHS[file_id % len(GLYPHS)]

def render_layout(blocks: Sequence[Optional[int]], width: Optional[int]=None) -> str:
    n=len(blocks)
    if width is None or n <= width:
        return ''.join(glyph(fid) for fid in blocks)
    buf=[]
    for i in range(width):
        s=(i*n)//width
        e=max(s+1, ((i+1)*n)//width)
        occupant=next((fid for fid in blocks[s:e] if fid is not None), None)
        buf.append(glyph(occupant))
    return ''.join(buf)
