# errors.py

"""
Fault taxonomy for the matrix command interpreter.

Recoverable faults abort the current line only. Fatal faults are reported once and
end the process with a failure status; only the REPL driver acts on them.
"""

from typing import Optional


class MatrixCommandError(Exception):
    """Base class for interpreter faults."""
    message = "Unknown error"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)
        self.message = message or self.message


# ---------------------------
# Recoverable faults
# ---------------------------

class RecoverableFault(MatrixCommandError):
    """A malformed command. The registers are left untouched."""
    pass

class UndefinedCommandError(RecoverableFault):
    message = "Undefined command name"

class UndefinedMatrixError(RecoverableFault):
    message = "Undefined matrix name"

class IllegalCommaError(RecoverableFault):
    message = "Illegal comma"

class MissingCommaError(RecoverableFault):
    message = "Missing comma"

class UnnecessaryCommaError(RecoverableFault):
    message = "Multiple consecutive commas"

class MissingArgumentError(RecoverableFault):
    message = "Missing argument"

class ExtraneousTextError(RecoverableFault):
    message = "Extraneous text after end of command"

class NotANumberError(RecoverableFault):
    message = "Argument is not a real number"

    @classmethod
    def scalar(cls) -> "NotANumberError":
        return cls("Argument is not a scalar")


# ---------------------------
# Fatal faults
# ---------------------------

class FatalFault(MatrixCommandError):
    """Ends the process after being reported."""
    exit_code = 1

class PrematureEndOfFileError(FatalFault):
    message = ("Premature end of file encountered. "
               "Missing stop command to properly terminate the file processing")

class MemoryAllocationError(FatalFault):
    message = "Memory allocation failed"


class StopRequested(Exception):
    """Raised by the stop command; the driver ends the loop with success."""
    exit_code = 0
