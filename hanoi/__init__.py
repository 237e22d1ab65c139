# --------------------------------------------------------------------------- #
#                             Imports                                         #
# --------------------------------------------------------------------------- #
from __future__ import annotations
__version__ = "0.1.0"

from .logging import TRACE, logger, setup_logging
from .exceptions import *
from .constants import SOURCE, SPARE, TARGET, PEG_LABELS

# --------------------------------------------------------------------------- #
#                             Core                                            #
# --------------------------------------------------------------------------- #
from .pegs import Peg, Board
from .moves import Move, is_legal, try_move
from .results import SolveResult, expected_moves
from .solver import Solver, solve, forward_candidates, FORWARD_CANDIDATES, BACKWARD_CANDIDATES
