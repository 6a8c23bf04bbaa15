import math

import numpy as np

from bench import run
from disk.diskmap import parse_disk_map
from policy.block_level import BlockCompactor
from policy.whole_file import WholeFileCompactor
from tools.visualize_compaction import capture_frames, render_state


def test_render_state():
    row = render_state([0, None, 3, None], width=4)
    assert row[0] == 0 and row[2] == 3
    assert math.isnan(row[1]) and math.isnan(row[3])
    assert np.isnan(render_state([], width=3)).all()


def test_capture_frames_every_move(sample):
    blocks = parse_disk_map(sample).expand()
    frames = capture_frames(blocks, WholeFileCompactor(), width=len(blocks), every=1)
    assert len(frames) == 5
    assert np.isnan(frames[-1][11])


def test_capture_frames_keeps_final_state():
    blocks = parse_disk_map("12345").expand()
    frames = capture_frames(blocks, BlockCompactor(), width=15, every=2)
    # initial, after moves 2 and 4, final after move 5
    assert len(frames) == 4
    assert list(np.isnan(frames[-1])) == [False] * 9 + [True] * 6


def test_bench_run(sample):
    assert run(BlockCompactor, sample)["checksum"] == 1928
    m = run(WholeFileCompactor, sample)
    assert (m["checksum"], m["moves"], m["moved"]) == (2858, 4, 8)
