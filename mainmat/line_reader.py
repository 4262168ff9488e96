# line_reader.py

"""
Line acquisition.

Two readers share the same contract: ``read_line()`` returns the next line without
its line feed, and raises ``PrematureEndOfFileError`` when the input ends before a
line feed arrives. A partial last line without a line feed is not returned.

StreamLineReader reads from any text stream (stdin redirected from a file, a pipe,
io.StringIO in tests). PromptLineReader reads from an interactive terminal through
prompt_toolkit and adds history and completion of command and register names.
"""

import logging
import sys
from typing import List, Optional, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import WordCompleter
from prompt_toolkit.history import InMemoryHistory

from mainmat.errors import MemoryAllocationError, PrematureEndOfFileError
from mainmat.scanner import LINE_FEED
from mainmat.tables import COMMAND_NAMES, REGISTER_NAMES

logger = logging.getLogger(__name__)

INIT_LINE_SIZE = 100


class StreamLineReader:
    """
    Reads lines of unbounded length from a text stream.

    The line is collected into a buffer whose capacity starts at ``initial_size``
    characters and doubles every time it fills up.
    """

    def __init__(self, stream: Optional[TextIO] = None, initial_size: int = INIT_LINE_SIZE):
        if initial_size < 1:
            raise ValueError("initial_size must be positive")
        self.stream = stream if stream is not None else sys.stdin
        self.initial_size = initial_size

    def read_line(self) -> str:
        capacity = self.initial_size
        buffer: List[str] = []
        length = 0
        while True:
            try:
                chunk = self.stream.readline(capacity - length)
            except MemoryError:
                raise MemoryAllocationError()
            if not chunk:
                logger.debug(f"End of stream after {length} characters")
                raise PrematureEndOfFileError()

            if chunk.endswith(LINE_FEED):
                buffer.append(chunk[:-1])
                return ''.join(buffer)

            buffer.append(chunk)
            length += len(chunk)
            if length >= capacity:
                capacity *= 2
                logger.debug(f"Line buffer grown to {capacity} characters")


class PromptLineReader:
    """
    Reads lines from an interactive terminal.

    Ctrl-D ends the input, which is treated like the end of a redirected file.
    Ctrl-C discards the line being typed and prompts again.
    """

    def __init__(self, prompt: str = '> ', session: Optional[PromptSession] = None):
        self.prompt = prompt
        self.completer = WordCompleter(list(COMMAND_NAMES + REGISTER_NAMES))
        if session is None:
            session = PromptSession(history=InMemoryHistory())
        self.session = session

    def read_line(self) -> str:
        while True:
            try:
                return self.session.prompt(self.prompt, completer=self.completer)
            except KeyboardInterrupt:
                print("^C")
                continue
            except EOFError:
                raise PrematureEndOfFileError()
