"""
Disk Compactor - Visualizer

Generates a Matplotlib heatmap of disk occupancy while a compaction policy
runs. Each row is a snapshot of the disk, each column a block address; the
colour is the file id occupying the block (free blocks are left blank).

How to run (recommended, from repo root):
    python -m tools.visualize_compaction --input inputs/sample09.txt --part 1 --out out_compaction.png
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure repo root is on sys.path when running as a script:
# (python -m tools.visualize_compaction already works without this,
#  but this makes `python tools/visualize_compaction.py ...` work too.)
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt

from disk.checksum import checksum
from disk.diskmap import ParseError, parse_disk_map
from disk.fragmentation import compute_metrics, extents_free
from policy.block_level import BlockCompactor
from policy.whole_file import WholeFileCompactor

POLICIES = {1: BlockCompactor, 2: WholeFileCompactor}


def render_state(blocks, width: int) -> np.ndarray:
    """
    Return a 1D array over the disk address space, binned to 'width'.
    A bin holds the id of its first occupied block, or NaN when empty.
    """
    n = len(blocks)
    row = np.full(width, np.nan, dtype=np.float32)
    if n == 0:
        return row
    for i in range(width):
        s = (i * n) // width
        e = max(s + 1, ((i + 1) * n) // width)
        for fid in blocks[s:e]:
            if fid is not None:
                row[i] = fid
                break
    return row


def capture_frames(blocks, compactor, width: int, every: int) -> list[np.ndarray]:
    """Run the compactor over 'blocks', snapshotting every N moves."""
    frames = [render_state(blocks, width)]
    moves = 0
    for _ in compactor.iter_moves(blocks):
        moves += 1
        if every <= 1 or moves % every == 0:
            frames.append(render_state(blocks, width))
    if moves % max(every, 1) != 0:
        frames.append(render_state(blocks, width))
    return frames


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="Path to a disk map file")
    ap.add_argument("--part", type=int, choices=sorted(POLICIES), default=1, help="1 = block-level, 2 = whole-file")
    ap.add_argument("--out", default="out_compaction.png", help="Output image file")
    ap.add_argument("--width", type=int, default=140, help="Heatmap width (bins)")
    ap.add_argument("--every", type=int, default=1, help="Record every N moves")
    args = ap.parse_args()

    input_path = Path(args.input)
    if not input_path.exists():
        raise SystemExit(f"Input not found: {input_path}")

    try:
        diskmap = parse_disk_map(input_path.read_text(encoding="utf-8"))
    except ParseError as e:
        raise SystemExit(f"Bad disk map: {e}")

    blocks = diskmap.expand()
    frames = capture_frames(blocks, POLICIES[args.part](), min(args.width, max(len(blocks), 1)), args.every)

    H = np.stack(frames, axis=0)  # (time, width)

    fig = plt.figure(figsize=(10.5, 4.6))
    ax = fig.add_subplot(111)
    ax.imshow(np.ma.masked_invalid(H), aspect="auto", interpolation="nearest")
    ax.set_title(f"Disk Occupancy Heatmap (part {args.part})")
    ax.set_xlabel("block address (binned)")
    ax.set_ylabel("time (frames)")

    m = compute_metrics(extents_free(blocks))
    caption = (
        f"Checksum={checksum(blocks)}, final fragmentation: LFE={m.lfe}, holes={m.hole_count}, "
        f"external_frag={m.external_frag:.3f}, entropy={m.entropy:.3f}"
    )
    fig.text(0.01, 0.01, caption, fontsize=9)

    fig.tight_layout()
    out_path = Path(args.out)
    fig.savefig(str(out_path), dpi=220)
    print(f"Wrote: {out_path.resolve()}")


if __name__ == "__main__":
    main()
