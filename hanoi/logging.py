# --------------------------------------------------------------------------- #
#                               Logging                                       #
# --------------------------------------------------------------------------- #
import logging
from rich.logging import RichHandler
from hanoi.theme import err_console

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

def _trace(self, msg, *args, **kwargs):
    if self.isEnabledFor(TRACE):
        self._log(TRACE, msg, args, **kwargs)
logging.Logger.trace = _trace
logger = logging.getLogger("hanoi")

LEVELS = {"TRACE": TRACE, "DEBUG": logging.DEBUG, "INFO": logging.INFO,
          "WARNING": logging.WARNING, "ERROR": logging.ERROR, "CRITICAL": logging.CRITICAL}

class AppLogHandler(RichHandler):
    """A rich log handler using the application's central theme."""
    def __init__(self, *args, **kwargs):
        super().__init__(
            *args,
            **kwargs,
            console=err_console, # stdout is reserved for solver output
            show_path=False,
            show_level=True,
            show_time=False,
            rich_tracebacks=True,
            markup=False
        )
        self.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

def level_for(verbosity: int, default: str = "WARNING") -> int:
    """Map a -v count onto a logging level (-v INFO, -vv DEBUG, -vvv TRACE)."""
    if verbosity >= 3: return TRACE
    if verbosity == 2: return logging.DEBUG
    if verbosity == 1: return logging.INFO
    return LEVELS.get(default.upper(), logging.WARNING)

def setup_logging(verbosity: int = 0, default: str = "WARNING") -> int:
    level = level_for(verbosity, default)
    if not any(isinstance(h, AppLogHandler) for h in logger.handlers):
        logger.addHandler(AppLogHandler())
        logger.propagate = False
    logger.setLevel(level)
    return level
