from typing import NamedTuple

from hanoi.constants import PEG_LABELS
from hanoi.pegs import Peg


class Move(NamedTuple):
    src: int
    dst: int

    def __str__(self):
        return f"{PEG_LABELS[self.src]} -> {PEG_LABELS[self.dst]}"


def is_legal(src: Peg, dst: Peg) -> bool:
    """
    Whether the top disk of *src* may go onto *dst*.

    Besides the usual size rule, a disk may only land on a disk of the
    opposite parity. Every move of the optimal solution obeys this, so
    the extra rule prunes the candidates without losing the solution.
    """
    if src.is_empty():
        return False
    if dst.is_empty():
        return True
    disk, under = src.top(), dst.top()
    # Odd on odd or even on even
    if (disk & 1) == (under & 1):
        return False
    return disk < under


def try_move(src: Peg, dst: Peg) -> bool:
    """Move the top disk of *src* onto *dst*. Returns False and leaves both pegs untouched if illegal."""
    if not is_legal(src, dst):
        return False
    dst.push_top(src.pop_top())
    return True
