import pytest

from hanoi.exceptions import ConfigurationError, EmptyPegError, IllegalPlacementError, InvariantViolation
from hanoi.pegs import Board, Peg


def test_empty_peg():
    peg = Peg()
    assert peg.is_empty()
    assert len(peg) == 0
    with pytest.raises(EmptyPegError):
        peg.top()
    with pytest.raises(EmptyPegError):
        peg.pop_top()


def test_push_and_pop_keep_order():
    peg = Peg([5, 3])
    peg.push_top(1)
    assert peg.top() == 1
    assert peg.disks() == [5, 3, 1]
    assert peg.pop_top() == 1
    assert peg.top() == 3


@pytest.mark.parametrize("disk", [3, 4, 0, -1])
def test_push_rejects_out_of_order(disk):
    peg = Peg([5, 3])
    with pytest.raises(IllegalPlacementError):
        peg.push_top(disk)
    assert peg.disks() == [5, 3]


def test_initial_board():
    board = Board.initial(4)
    assert board.snapshot() == [[4, 3, 2, 1], [], []]
    assert not board.is_solved()
    board.check()


@pytest.mark.parametrize("disks", [0, -3])
def test_initial_board_needs_a_disk(disks):
    with pytest.raises(ConfigurationError):
        Board.initial(disks)


def test_check_catches_lost_disk():
    board = Board((Peg([3, 1]), Peg(), Peg()), 3)
    with pytest.raises(InvariantViolation):
        board.check()


def test_render_lists_bottom_to_top():
    board = Board((Peg([3]), Peg([2, 1]), Peg()), 3)
    assert board.render() == ["A:  3", "B:  2 1", "C: "]
