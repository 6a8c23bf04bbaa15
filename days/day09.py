"""Day 9: Disk Fragmenter."""
from __future__ import annotations

from disk.checksum import checksum
from disk.diskmap import parse_disk_map
from policy.block_level import BlockCompactor
from policy.whole_file import WholeFileCompactor

def part1(text: str) -> int:
    result = BlockCompactor().compact(parse_disk_map(text))
    return checksum(result.blocks)

def part2(text: str) -> int:
    result = WholeFileCompactor().compact(parse_disk_map(text))
    return checksum(result.blocks)
