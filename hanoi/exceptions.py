class HanoiError(Exception):
    """Base exception for the hanoi tool."""
    pass

class ConfigurationError(HanoiError):
    """Raised for invalid solver or CLI configuration."""
    pass

class IllegalPlacementError(HanoiError):
    """Raised when a disk would break the ordering of a peg."""
    def __init__(self, message, disk=None, top=None):
        super().__init__(message)
        self.disk = disk
        self.top = top

class EmptyPegError(HanoiError):
    """Raised when reading or removing the top of an empty peg."""
    pass

class InvariantViolation(HanoiError):
    """Raised when the board breaks ordering or disk conservation."""
    pass

class StuckBoardError(InvariantViolation):
    """Raised when the driver finds no legal move on an unsolved board."""
    def __init__(self, message, snapshot=None, moves=0):
        super().__init__(message)
        self.snapshot = snapshot
        self.moves = moves
