# repl.py

"""
The read-eval loop of the matrix command interpreter.

State machine:

    AWAITING_LINE --end of input--------------------------> TERMINATED (failure)
    AWAITING_LINE --blank line-----> notice ---------------> AWAITING_LINE
    AWAITING_LINE --line--> CLASSIFYING --unknown word-----> REPORTING -> AWAITING_LINE
    CLASSIFYING ----------> DISPATCHING --fault------------> REPORTING -> AWAITING_LINE
    DISPATCHING --stop----------------------------------------> TERMINATED (success)
    DISPATCHING --done----------------------------------------> AWAITING_LINE

Only this module decides when the process ends. Handlers raise, the loop reports.
"""

import logging
import sys
from enum import Enum
from typing import Optional, TextIO

from mainmat.errors import FatalFault, RecoverableFault, StopRequested
from mainmat.handlers import CommandInterpreter
from mainmat.reporter import ErrorReporter
from mainmat.scanner import is_end_of_command, skip_whitespace

logger = logging.getLogger(__name__)

OPENING_MESSAGE = "\nHello,\nPlease enter a command."
PROMPT_MESSAGE = "\nPlease enter a command."
EMPTY_LINE_MESSAGE = "The line is empty."
EXIT_MESSAGE = ("\nThank you for using the program. "
                "You have successfully processed the input. \nHave a great day!")


class ReplState(Enum):
    AWAITING_LINE = 'awaiting_line'
    CLASSIFYING = 'classifying'
    DISPATCHING = 'dispatching'
    REPORTING = 'reporting'
    TERMINATED = 'terminated'


class MatrixRepl:
    """
    Drives a line reader, the command interpreter and the error reporter.

    ``reader`` is any object with a ``read_line()`` method (see line_reader).
    """

    def __init__(self, reader, interpreter: Optional[CommandInterpreter] = None,
                 reporter: Optional[ErrorReporter] = None, echo_input: bool = True,
                 out: Optional[TextIO] = None):
        self.reader = reader
        self.interpreter = interpreter if interpreter is not None else CommandInterpreter()
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.echo_input = echo_input
        self._out = out
        self.state = ReplState.AWAITING_LINE
        self.exit_code: Optional[int] = None

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def _say(self, text: str) -> None:
        print(text, file=self.out)

    def _set_state(self, state: ReplState) -> None:
        logger.debug(f"{self.state.name} -> {state.name}")
        self.state = state

    def _terminate(self, exit_code: int) -> int:
        self._set_state(ReplState.TERMINATED)
        self.exit_code = exit_code
        return exit_code

    def run(self) -> int:
        """Runs until a stop command or the end of the input. Returns the exit code."""
        self._say(OPENING_MESSAGE)
        while self.state is not ReplState.TERMINATED:
            try:
                line = self.reader.read_line()
            except FatalFault as e:
                self.reporter.report(e)
                return self._terminate(e.exit_code)

            self.process_line(line)
            if self.state is ReplState.AWAITING_LINE:
                self._say(PROMPT_MESSAGE)
        return self.exit_code

    def process_line(self, line: str) -> None:
        """Handles one line; leaves the driver in AWAITING_LINE or TERMINATED."""
        if is_end_of_command(line, skip_whitespace(line, 0)):
            self._say(EMPTY_LINE_MESSAGE)
            return

        if self.echo_input:
            self._say(f"The input is: {line}")

        try:
            self._set_state(ReplState.CLASSIFYING)
            command, pos = self.interpreter.classify(line)
            self._set_state(ReplState.DISPATCHING)
            output = self.interpreter.dispatch(command, line, pos)
        except RecoverableFault as e:
            self._set_state(ReplState.REPORTING)
            self.reporter.report(e)
        except StopRequested as e:
            self._say(EXIT_MESSAGE)
            self._terminate(e.exit_code)
            return
        else:
            if output is not None:
                self._say(f"\n{output}")

        self._set_state(ReplState.AWAITING_LINE)
