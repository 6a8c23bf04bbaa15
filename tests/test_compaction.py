import pytest

from disk.checksum import checksum
from disk.diskmap import parse_disk_map
from policy.base import Move
from policy.block_level import BlockCompactor
from policy.whole_file import WholeFileCompactor
from viz.ascii_map import render_layout

INPUTS = ["2333133121414131402", "12345", "1", "02", "90909", "1313165", "714892711", "2333133121414131499"]


def test_block_level_sample(sample):
    result = BlockCompactor().compact(parse_disk_map(sample))
    assert render_layout(result.blocks) == "0099811188827773336446555566.............."
    assert checksum(result.blocks) == 1928


def test_block_level_moves():
    result = BlockCompactor().compact(parse_disk_map("12345"))
    assert render_layout(result.blocks) == "022111222......"
    assert result.moves[:2] == [Move(14, 1, 1, 2), Move(13, 2, 1, 2)]
    assert len(result.moves) == 5
    assert result.moved_blocks == 5
    assert checksum(result.blocks) == 60


def test_whole_file_sample(sample):
    result = WholeFileCompactor().compact(parse_disk_map(sample))
    assert render_layout(result.blocks) == "00992111777.44.333....5555.6666.....8888.."
    assert result.moves == [
        Move(40, 2, 2, 9),
        Move(32, 8, 3, 7),
        Move(19, 12, 2, 4),
        Move(11, 4, 1, 2),
    ]
    assert result.moved_blocks == 8
    assert checksum(result.blocks) == 2858


def test_whole_file_without_room_stays():
    result = WholeFileCompactor().compact(parse_disk_map("12345"))
    assert result.moves == []
    assert render_layout(result.blocks) == "0..111....22222"
    assert checksum(result.blocks) == 132


@pytest.mark.parametrize("policy", [BlockCompactor, WholeFileCompactor])
@pytest.mark.parametrize("text", INPUTS)
def test_file_blocks_conserved(policy, text):
    dm = parse_disk_map(text)
    before = dm.expand()
    result = policy().compact(dm)
    assert len(result.blocks) == len(before)
    for fid in {f for f in before if f is not None}:
        assert result.blocks.count(fid) == before.count(fid)


@pytest.mark.parametrize("text", INPUTS)
def test_block_level_leaves_no_gap_before_files(text):
    blocks = BlockCompactor().compact(parse_disk_map(text)).blocks
    used = [fid is not None for fid in blocks]
    assert used == sorted(used, reverse=True)


@pytest.mark.parametrize("text", INPUTS)
def test_whole_file_keeps_files_contiguous_and_moves_left(text):
    dm = parse_disk_map(text)
    result = WholeFileCompactor().compact(dm)
    for seg in dm.files():
        if seg.length == 0:
            continue
        positions = [p for p, fid in enumerate(result.blocks) if fid == seg.file_id]
        assert positions == list(range(positions[0], positions[0] + seg.length))
        assert positions[0] <= seg.start
    assert len({m.file_id for m in result.moves}) == len(result.moves)


def test_compact_does_not_touch_diskmap(sample):
    dm = parse_disk_map(sample)
    before = dm.expand()
    BlockCompactor().compact(dm)
    assert dm.expand() == before


def test_iter_moves_rewrites_buffer_in_place():
    blocks = parse_disk_map("12345").expand()
    moves = BlockCompactor().iter_moves(blocks)
    first = next(moves)
    assert first == Move(14, 1, 1, 2)
    assert blocks[1] == 2 and blocks[14] is None
