from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import math

@dataclass
class FragMetrics:
    total_free: int
    lfe: int
    external_frag: float
    entropy: float
    hole_count: int

def extents_free(blocks: Sequence[Optional[int]]) -> List[Tuple[int,int]]:
    ext=[]
    start=None
    for pos, fid in enumerate(blocks):
        if fid is None:
            if start is None:
                start = pos
        elif start is not None:
            ext.append((start, pos-start))
            start = None
    if start is not None:
        ext.append((start, len(blocks)-start))
    return ext

def _entropy(ext_sizes: List[int]) -> float:
    total = sum(ext_sizes)
    if total <= 0:
        return 0.0
    ps = [s/total for s in ext_sizes if s>0]
    return -sum(p*math.log(p, 2) for p in ps)

def compute_metrics(free_extents: List[Tuple[int,int]]) -> FragMetrics:
    sizes=[s for _,s in free_extents if s>0]
    total_free=sum(sizes)
    lfe=max(sizes, default=0)
    external = 0.0 if total_free==0 else 1.0 - (lfe/total_free)
    return FragMetrics(total_free, lfe, external, _entropy(sizes), len(sizes))
