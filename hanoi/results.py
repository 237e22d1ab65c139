from typing import List, Optional, Tuple
from pydantic import BaseModel
from rich.table import Table


def expected_moves(disks: int) -> int:
    return 2 ** disks - 1


class SolveResult(BaseModel):
    disks: int
    moves: int
    final: List[List[int]]
    sequence: Optional[List[Tuple[int, int]]] = None
    # Filled in by the caller that timed the solve
    elapsed_us: Optional[int] = None

    @property
    def optimal(self) -> bool:
        return self.moves == expected_moves(self.disks)

    def summary_line(self) -> str:
        return f"{self.disks} disks done in {self.moves} moves"

    def timing_line(self) -> str:
        return f"It took {self.elapsed_us} us"

    def __repr__(self):
        return f"<SolveResult disks={self.disks} moves={self.moves} elapsed_us={self.elapsed_us}>"
    __str__ = __repr__


def get_summary_table(results: List[SolveResult]) -> Table:
    """Generates a Rich table from a series of solves."""
    table = Table(header_style="table.header", box=None, show_header=True, title_style="", caption_style="")
    table.add_column("Disks", justify="right")
    table.add_column("Moves", justify="right")
    table.add_column("Expected", justify="right")
    table.add_column("Time (us)", justify="right")
    table.add_column("us/move", justify="right")

    for r in results:
        per_move = r.elapsed_us / r.moves if r.elapsed_us is not None and r.moves else 0
        table.add_row(
            str(r.disks),
            str(r.moves),
            str(expected_moves(r.disks)),
            "-" if r.elapsed_us is None else str(r.elapsed_us),
            f"{per_move:.3f}",
            style=None if r.optimal else "mismatch",
        )
    return table
