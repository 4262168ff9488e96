# reporter.py

import logging
import sys
from typing import Optional, TextIO

from mainmat.errors import FatalFault, MatrixCommandError

logger = logging.getLogger(__name__)


class ErrorReporter:
    """Writes faults as single '[Error] [...]' lines to the error stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        # Resolved late so that a replaced sys.stderr is honoured
        return self._stream if self._stream is not None else sys.stderr

    @staticmethod
    def format(fault: MatrixCommandError) -> str:
        return f"[Error] [{fault.message}]"

    def report(self, fault: MatrixCommandError) -> None:
        if isinstance(fault, FatalFault):
            logger.error(f"Fatal fault: {type(fault).__name__}")
        else:
            logger.debug(f"Command rejected: {type(fault).__name__}")
        print(self.format(fault), file=self.stream)
