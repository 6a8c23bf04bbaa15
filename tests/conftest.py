import pytest

SAMPLE = "2333133121414131402"


@pytest.fixture()
def sample() -> str:
    return SAMPLE


@pytest.fixture()
def inputs_dir(tmp_path):
    """An inputs/ directory holding the sample as day09.txt."""
    d = tmp_path / "inputs"
    d.mkdir()
    (d / "day09.txt").write_text(SAMPLE + "\n", encoding="utf-8")
    return d
