# --------------------------------------------------------------------------- #
#                             Imports                                         #
# --------------------------------------------------------------------------- #
from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple

import click

from hanoi.constants import DUMP_BOARD, SOURCE, SPARE, TARGET
from hanoi.exceptions import ConfigurationError, StuckBoardError
from hanoi.moves import Move, try_move
from hanoi.pegs import Board
from hanoi.results import SolveResult

logger = logging.getLogger("hanoi.solver")

# --------------------------------------------------------------------------- #
#                           Candidate orderings                               #
# --------------------------------------------------------------------------- #
# The odd and even drivers differ only in the order of the forward sweep.
FORWARD_CANDIDATES: Dict[bool, Tuple[Move, ...]] = {
    True:  (Move(SOURCE, TARGET), Move(SOURCE, SPARE), Move(SPARE, TARGET)),
    False: (Move(SOURCE, SPARE), Move(SOURCE, TARGET), Move(SPARE, TARGET)),
}
BACKWARD_CANDIDATES: Tuple[Move, ...] = (Move(TARGET, SOURCE), Move(TARGET, SPARE), Move(SPARE, SOURCE))


def forward_candidates(disks: int) -> Tuple[Move, ...]:
    return FORWARD_CANDIDATES[bool(disks & 1)]

# --------------------------------------------------------------------------- #
#                               Driver                                        #
# --------------------------------------------------------------------------- #
class Solver:
    """
    Greedy iterative solver.

    Each outer iteration repeats the forward sweep until it stalls, then
    tries one backward move. A candidate is skipped when its source is
    the peg that received the previous disk, so a move is never undone
    straight away. The forward ordering is picked once from the parity
    of the disk count.

    Parameters
    ----------
    disks : int
        Number of disks, at least one.
    dump : bool, optional
        Echo the board before every outer iteration. Defaults to
        ``hanoi.constants.DUMP_BOARD``.
    record : bool, default False
        Keep the ordered list of moves on the result.
    """

    def __init__(self, disks: int, dump: Optional[bool] = None, record: bool = False):
        if disks < 1:
            raise ConfigurationError(f"Need at least one disk, got {disks}.")
        self.board = Board.initial(disks)
        self.forward = forward_candidates(disks)
        self.dump = DUMP_BOARD if dump is None else dump
        self.last = TARGET  # peg that received the most recent disk
        self.moves = 0
        self.sequence: Optional[List[Move]] = [] if record else None
        self._done = False

    def _sweep(self, candidates: Tuple[Move, ...]) -> bool:
        """Make the first legal move in *candidates*; False if none applies."""
        pegs = self.board.pegs
        for move in candidates:
            if self.last != move.src and try_move(pegs[move.src], pegs[move.dst]):
                self.moves += 1
                self.last = move.dst
                if self.sequence is not None:
                    self.sequence.append(move)
                logger.trace("move %d: %s", self.moves, move)
                return True
        return False

    def _dump(self) -> None:
        for line in self.board.render():
            click.echo(line)
        click.echo()

    def run(self) -> SolveResult:
        if self._done:
            raise ConfigurationError("Solver instances are single use; create a new one.")
        self._done = True
        logger.debug("Solving %d disks with forward order %s", self.board.disks,
                     ", ".join(str(m) for m in self.forward))

        while not self.board.is_solved():
            if self.dump:
                self._dump()
            while self._sweep(self.forward):
                pass
            if self._sweep(BACKWARD_CANDIDATES):
                continue
            if not self.board.is_solved():
                raise StuckBoardError(
                    f"No legal move from {self.board.snapshot()} after {self.moves} moves.",
                    snapshot=self.board.snapshot(), moves=self.moves,
                )

        logger.debug("Solved %d disks in %d moves", self.board.disks, self.moves)
        return SolveResult(
            disks=self.board.disks,
            moves=self.moves,
            final=self.board.snapshot(),
            sequence=None if self.sequence is None else [tuple(m) for m in self.sequence],
        )


def solve(disks: int, dump: Optional[bool] = None, record: bool = False) -> SolveResult:
    """Solve a fresh board of *disks* disks and return the result."""
    return Solver(disks, dump=dump, record=record).run()
