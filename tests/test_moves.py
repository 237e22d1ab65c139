import pytest

from hanoi.moves import Move, is_legal, try_move
from hanoi.pegs import Peg


def test_move_onto_empty_peg():
    src, dst = Peg([2, 1]), Peg()
    assert try_move(src, dst)
    assert src.disks() == [2]
    assert dst.disks() == [1]


def test_empty_source_fails():
    src, dst = Peg(), Peg([1])
    assert not try_move(src, dst)
    assert dst.disks() == [1]


@pytest.mark.parametrize("src,dst", [
    ([1], [3]),
    ([2], [4]),
    ([3], [1]),
    ([4], [2]),
    ([1], [5]),
])
def test_same_parity_rejected_regardless_of_size(src, dst):
    src, dst = Peg(src), Peg(dst)
    assert not is_legal(src, dst)
    assert not try_move(src, dst)
    assert len(src) == 1 and len(dst) == 1


def test_larger_on_smaller_rejected():
    src, dst = Peg([2]), Peg([1])
    assert not try_move(src, dst)
    assert src.disks() == [2]
    assert dst.disks() == [1]


def test_opposite_parity_smaller_accepted():
    src, dst = Peg([1]), Peg([4, 2])
    assert try_move(src, dst)
    assert src.is_empty()
    assert dst.disks() == [4, 2, 1]


def test_move_str():
    assert str(Move(0, 2)) == "A -> C"
