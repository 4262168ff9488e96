# handlers.py

"""
Command handlers for the matrix command language.

Each handler owns the grammar of its argument list and walks the line with the
cursor primitives from ``scanner``. Handlers raise a ``RecoverableFault`` on the first
problem they find and only write the destination register after the whole line has
been checked, so a rejected command leaves every register as it was.

Grammar:
    stop
    print_mat  REG
    trans_mat  REG , REG
    mul_scalar REG , SCALAR , REG
    add_mat | sub_mat | mul_mat  REG , REG , REG
    read_mat   REG , VALUE (, VALUE)*
"""

import logging
from typing import Callable, Dict, List, Optional, Tuple

from mainmat import matrix
from mainmat.errors import (
    ExtraneousTextError, IllegalCommaError, MissingArgumentError, MissingCommaError,
    NotANumberError, StopRequested, UndefinedCommandError, UndefinedMatrixError,
    UnnecessaryCommaError,
)
from mainmat.registers import RegisterFile
from mainmat.scanner import (
    COMMA, is_end_of_command, peek, scan_number, skip_fixed_width, skip_to_next_token,
    skip_whitespace,
)
from mainmat.tables import CommandType, classify_command, resolve_register

logger = logging.getLogger(__name__)


# ---------------------------
# Shared grammar checks
# ---------------------------

def check_illegal_comma(text: str, pos: int) -> None:
    """A comma where the first operand should start."""
    if peek(text, pos) == COMMA:
        raise IllegalCommaError()


def check_extraneous_text(text: str, pos: int) -> None:
    """Anything left over once the command is complete."""
    if not is_end_of_command(text, pos):
        raise ExtraneousTextError()


def check_missing_argument(text: str, pos: int) -> None:
    if is_end_of_command(text, pos):
        raise MissingArgumentError()


def check_missing_comma(text: str, pos: int) -> None:
    if peek(text, pos) != COMMA:
        raise MissingCommaError()


def check_unnecessary_comma(text: str, pos: int) -> None:
    if peek(text, pos) == COMMA:
        raise UnnecessaryCommaError()


def expect_comma(text: str, pos: int) -> int:
    """Consumes a separator comma and the whitespace around it."""
    pos = skip_whitespace(text, pos)
    check_missing_comma(text, pos)
    pos = skip_whitespace(text, pos + 1)
    check_unnecessary_comma(text, pos)
    return pos


def read_register(text: str, pos: int) -> Tuple[str, int]:
    """
    Reads a register operand at pos.

    Returns the register name and the position after it and any whitespace that
    follows.
    """
    check_missing_argument(text, pos)
    name = resolve_register(text, pos)
    if name is None:
        raise UndefinedMatrixError()
    pos = skip_fixed_width(text, pos)
    return name, skip_whitespace(text, pos)


def read_scalar(text: str, pos: int) -> Tuple[float, int]:
    value, end = scan_number(text, pos)
    if end == pos:
        raise NotANumberError.scalar()
    return value, skip_whitespace(text, end)


def read_values(text: str, pos: int) -> List[float]:
    """
    Reads the comma separated value list of read_mat.

    Every value is scanned and checked, including the ones past the sixteenth that
    the matrix will not keep.
    """
    values: List[float] = []
    while not is_end_of_command(text, pos):
        value, end = scan_number(text, pos)
        if end == pos:
            raise NotANumberError()
        values.append(value)

        pos = skip_whitespace(text, end)
        if is_end_of_command(text, pos):
            break

        separator = text[pos]
        pos = skip_whitespace(text, pos + 1)
        if is_end_of_command(text, pos):
            # A trailing comma or a stray character closing the line
            raise ExtraneousTextError()
        if separator != COMMA:
            raise MissingCommaError()
        check_unnecessary_comma(text, pos)
    return values


# ---------------------------
# Interpreter
# ---------------------------

_BINARY_OPS: Dict[CommandType, Callable[[matrix.Matrix, matrix.Matrix], matrix.Matrix]] = {
    CommandType.ADD_MAT: matrix.add,
    CommandType.SUB_MAT: matrix.sub,
    CommandType.MUL_MAT: matrix.mul,
}


class CommandInterpreter:
    """
    Parses and executes one command line against a register file.
    """

    def __init__(self, registers: Optional[RegisterFile] = None):
        self.registers = registers if registers is not None else RegisterFile()
        self._handlers = {
            CommandType.READ_MAT: self._read_mat,
            CommandType.PRINT_MAT: self._print_mat,
            CommandType.ADD_MAT: self._binary_op,
            CommandType.SUB_MAT: self._binary_op,
            CommandType.MUL_MAT: self._binary_op,
            CommandType.MUL_SCALAR: self._mul_scalar,
            CommandType.TRANS_MAT: self._trans_mat,
        }

    def classify(self, line: str) -> Tuple[Optional[CommandType], int]:
        """
        Classifies the first word of a line.

        Returns the command tag and the position of its first operand. The tag is None
        for a blank line.
        """
        pos = skip_whitespace(line, 0)
        if is_end_of_command(line, pos):
            return None, pos

        command = classify_command(line, pos)
        if command is None:
            raise UndefinedCommandError()
        logger.debug(f"Classified command {command.name}")
        return command, skip_whitespace(line, skip_to_next_token(line, pos))

    def dispatch(self, command: CommandType, line: str, pos: int) -> Optional[str]:
        """Runs the handler of a classified command from its first operand."""
        check_illegal_comma(line, pos)

        if command is CommandType.STOP:
            check_extraneous_text(line, pos)
            raise StopRequested()

        first, pos = read_register(line, pos)
        return self._handlers[command](command, line, pos, first)

    def execute(self, line: str) -> Optional[str]:
        """
        Executes a command line.

        Returns the text to display (the rendered matrix for print_mat) or None.
        Raises a RecoverableFault for a malformed command and StopRequested for a
        valid stop command.
        """
        command, pos = self.classify(line)
        if command is None:
            return None
        return self.dispatch(command, line, pos)

    def _print_mat(self, command: CommandType, line: str, pos: int, first: str) -> str:
        check_extraneous_text(line, pos)
        return matrix.render(self.registers[first])

    def _trans_mat(self, command: CommandType, line: str, pos: int, first: str) -> None:
        pos = expect_comma(line, pos)
        second, pos = read_register(line, pos)
        check_extraneous_text(line, pos)

        self.registers[second] = matrix.transpose(self.registers[first])

    def _mul_scalar(self, command: CommandType, line: str, pos: int, first: str) -> None:
        pos = expect_comma(line, pos)
        scalar, pos = read_scalar(line, pos)
        pos = expect_comma(line, pos)
        second, pos = read_register(line, pos)
        check_extraneous_text(line, pos)

        self.registers[second] = matrix.mul_scalar(self.registers[first], scalar)

    def _binary_op(self, command: CommandType, line: str, pos: int, first: str) -> None:
        pos = expect_comma(line, pos)
        second, pos = read_register(line, pos)
        pos = expect_comma(line, pos)
        third, pos = read_register(line, pos)
        check_extraneous_text(line, pos)

        op = _BINARY_OPS[command]
        self.registers[third] = op(self.registers[first], self.registers[second])

    def _read_mat(self, command: CommandType, line: str, pos: int, first: str) -> None:
        check_missing_argument(line, pos)
        pos = expect_comma(line, pos)
        check_missing_argument(line, pos)
        values = read_values(line, pos)
        if len(values) > matrix.CELL_COUNT:
            logger.debug(f"Ignoring {len(values) - matrix.CELL_COUNT} values past the last cell")

        self.registers[first] = matrix.load(values)
