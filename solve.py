from __future__ import annotations
import argparse
from pathlib import Path
from typing import Callable, Dict, Optional, Tuple

from days import day09
from disk.diskmap import ParseError, parse_disk_map
from disk.fragmentation import compute_metrics, extents_free
from policy.base import Compactor
from policy.block_level import BlockCompactor
from policy.whole_file import WholeFileCompactor
from viz.ascii_map import render_layout

class SolveError(Exception):
    pass

class ArgumentParseError(SolveError):
    pass

class InputReadError(SolveError):
    pass

class UnsupportedDayPart(SolveError):
    pass

SOLUTIONS: Dict[Tuple[int,int], Callable[[str], int]] = {
    (9, 1): day09.part1,
    (9, 2): day09.part2,
}

# Compaction policy behind each solution, for --show-map / --metrics
COMPACTORS: Dict[Tuple[int,int], type] = {
    (9, 1): BlockCompactor,
    (9, 2): WholeFileCompactor,
}

def parse_number(value: str, what: str) -> int:
    try:
        return int(value)
    except ValueError as e:
        raise ArgumentParseError(f"{what} must be a number") from e

def input_path(day: int, inputs: str='inputs') -> Path:
    return Path(inputs) / f"day{day:02}.txt"

def read_input(path: Path) -> str:
    try:
        return path.read_text(encoding='utf-8')
    except OSError as e:
        raise InputReadError(f"Could not read input file: {path}") from e

def print_report(compactor: Compactor, text: str):
    diskmap = parse_disk_map(text)
    before = compute_metrics(diskmap.free_extents())
    result = compactor.compact(diskmap)
    after = compute_metrics(extents_free(result.blocks))
    print("-"*72)
    print(f"Policy: {compactor.name}  Disk size: {diskmap.size}  File blocks: {diskmap.file_block_count()}")
    print(f"Moves: {len(result.moves)}  Blocks moved: {result.moved_blocks}")
    for label, m in (('before', before), ('after', after)):
        print(f"Fragmentation {label}: LFE={m.lfe} holes={m.hole_count} external_frag={m.external_frag:.3f} entropy={m.entropy:.3f}")
    print("-"*72)
    return result

def solve(day: int, part: int, path: Optional[Path]=None, show_map: bool=False, metrics: bool=False) -> int:
    if path is None:
        path = input_path(day)
    print(f"Day: {day}")
    print(f"Part: {part}")
    print(path)
    text = read_input(path)

    fn = SOLUTIONS.get((day, part))
    if fn is None:
        raise UnsupportedDayPart(f"Day {day} part {part} not implemented")
    result = fn(text)

    if show_map or metrics:
        layout = print_report(COMPACTORS[(day, part)](), text)
        if show_map:
            print("Disk map (ASCII):")
            print(render_layout(layout.blocks, width=80))
    print(f"Result: {result}")
    return result

def main(argv=None) -> int:
    ap=argparse.ArgumentParser(description="Advent of Code 2024 solutions")
    ap.add_argument('positional', nargs='*', metavar='<day> <part>')
    ap.add_argument('--inputs', default='inputs', help="Directory holding dayNN.txt input files")
    ap.add_argument('--input', help="Read this file instead of <inputs>/dayNN.txt")
    ap.add_argument('--show-map', action='store_true', help="Print the compacted disk layout")
    ap.add_argument('--metrics', action='store_true', help="Print fragmentation before and after compaction")
    args=ap.parse_args(argv)

    if len(args.positional) != 2:
        print(f"Usage: {ap.prog} <day> <part>")
        print(f"Example: {ap.prog} 9 1")
        return 0

    try:
        day = parse_number(args.positional[0], "Day")
        part = parse_number(args.positional[1], "Part")
        path = Path(args.input) if args.input else input_path(day, args.inputs)
        solve(day, part, path, show_map=args.show_map, metrics=args.metrics)
    except (SolveError, ParseError) as e:
        raise SystemExit(f"Error: {e}")
    return 0

if __name__=='__main__':
    raise SystemExit(main())
