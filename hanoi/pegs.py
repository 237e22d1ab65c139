"""
Peg and board model.

A peg keeps its disks bottom-to-top in a plain list, so the top disk is
the last element. Sizes must strictly decrease from bottom to top.
"""
from typing import Iterator, List, Tuple

from hanoi.constants import PEG_COUNT, PEG_LABELS, TARGET
from hanoi.exceptions import (
    ConfigurationError, EmptyPegError, IllegalPlacementError, InvariantViolation,
)


class Peg:
    """One of the three stacks of disks."""
    __slots__ = ("_disks",)

    def __init__(self, disks=()):
        self._disks: List[int] = []
        for d in disks:
            self.push_top(d)

    def is_empty(self) -> bool:
        return not self._disks

    def top(self) -> int:
        if not self._disks:
            raise EmptyPegError("Cannot read the top of an empty peg.")
        return self._disks[-1]

    def push_top(self, disk: int) -> None:
        if disk < 1:
            raise IllegalPlacementError(f"Disk size must be positive, got {disk}.", disk=disk)
        if self._disks and disk >= self._disks[-1]:
            raise IllegalPlacementError(
                f"Cannot place disk {disk} on disk {self._disks[-1]}.", disk=disk, top=self._disks[-1]
            )
        self._disks.append(disk)

    def pop_top(self) -> int:
        if not self._disks:
            raise EmptyPegError("Cannot remove the top of an empty peg.")
        return self._disks.pop()

    def disks(self) -> List[int]:
        """Snapshot of the peg, bottom to top."""
        return list(self._disks)

    def is_ordered(self) -> bool:
        return all(a > b for a, b in zip(self._disks, self._disks[1:]))

    def __len__(self) -> int:   return len(self._disks)
    def __iter__(self) -> Iterator[int]: return iter(self._disks)
    def __repr__(self) -> str:  return f"Peg({self._disks!r})"


class Board:
    """Fixed triple of pegs holding disks 1..N."""
    __slots__ = ("pegs", "disks")

    def __init__(self, pegs: Tuple[Peg, Peg, Peg], disks: int):
        if len(pegs) != PEG_COUNT:
            raise ConfigurationError(f"A board has exactly {PEG_COUNT} pegs, got {len(pegs)}.")
        self.pegs = tuple(pegs)
        self.disks = disks

    @classmethod
    def initial(cls, disks: int) -> "Board":
        if disks < 1:
            raise ConfigurationError(f"A board needs at least one disk, got {disks}.")
        return cls((Peg(range(disks, 0, -1)), Peg(), Peg()), disks)

    def __getitem__(self, idx: int) -> Peg:
        return self.pegs[idx]

    def is_solved(self) -> bool:
        return len(self.pegs[TARGET]) == self.disks

    def snapshot(self) -> List[List[int]]:
        return [p.disks() for p in self.pegs]

    def check(self) -> None:
        """Raise InvariantViolation unless every peg is ordered and disks 1..N are all present once."""
        for label, peg in zip(PEG_LABELS, self.pegs):
            if not peg.is_ordered():
                raise InvariantViolation(f"Peg {label} is out of order: {peg.disks()}")
        seen = sorted(d for peg in self.pegs for d in peg)
        if seen != list(range(1, self.disks + 1)):
            raise InvariantViolation(f"Board holds disks {seen}, expected 1..{self.disks}")

    def render(self) -> List[str]:
        """Diagnostic lines `A: …`, `B: …`, `C: …`, each peg listed bottom to top."""
        return [f"{label}: " + "".join(f" {d}" for d in peg) for label, peg in zip(PEG_LABELS, self.pegs)]

    def __repr__(self) -> str:
        return f"<Board disks={self.disks} pegs={self.snapshot()!r}>"
