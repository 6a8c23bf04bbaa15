from __future__ import annotations
import argparse
import time
from pathlib import Path

from disk.checksum import checksum
from disk.diskmap import ParseError, parse_disk_map
from disk.fragmentation import compute_metrics, extents_free
from policy.block_level import BlockCompactor
from policy.whole_file import WholeFileCompactor

POLICIES = [BlockCompactor, WholeFileCompactor]

def run(policy_cls, text: str):
    diskmap = parse_disk_map(text)
    t0 = time.perf_counter()
    result = policy_cls().compact(diskmap)
    elapsed = time.perf_counter() - t0
    m = compute_metrics(extents_free(result.blocks))
    return {
        "checksum": checksum(result.blocks),
        "moves": len(result.moves),
        "moved": result.moved_blocks,
        "holes": m.hole_count,
        "lfe": m.lfe,
        "external_frag": m.external_frag,
        "ms": elapsed * 1e3,
    }

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", default=str(Path("inputs") / "sample09.txt"))
    args = ap.parse_args()

    try:
        text = Path(args.input).read_text(encoding="utf-8")
        rows = [(cls.name, run(cls, text)) for cls in POLICIES]
    except OSError as e:
        raise SystemExit(f"Could not read input file: {e}")
    except ParseError as e:
        raise SystemExit(f"Bad disk map: {e}")

    header = ["policy","checksum","moves","moved","holes","LFE","ext_frag","ms"]
    print("="*96)
    print(f"Disk Compactor - Policy Comparison ({args.input})")
    print("="*96)
    print("{:<8} {:>18} {:>8} {:>8} {:>7} {:>6} {:>9} {:>9}".format(*header))
    for name, m in rows:
        print("{:<8} {:>18} {:>8} {:>8} {:>7} {:>6} {:>9.3f} {:>9.2f}".format(
            name, m["checksum"], m["moves"], m["moved"], m["holes"], m["lfe"], m["external_frag"], m["ms"]
        ))
    print("="*96)
    print("Tip: render a compaction heatmap with")
    print("  python -m tools.visualize_compaction --input inputs/sample09.txt --part 2 --out out_compaction.png")

if __name__ == "__main__":
    main()
