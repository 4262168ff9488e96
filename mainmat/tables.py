# tables.py

"""
Command and register name tables, and the lookups that classify a line's first
word and resolve register operands.
"""

from enum import IntEnum
from typing import Optional

from mainmat.scanner import MATRIX_NAME_WIDTH, token_length


class CommandType(IntEnum):
    """Command tags, in table order."""
    READ_MAT = 0
    PRINT_MAT = 1
    ADD_MAT = 2
    SUB_MAT = 3
    MUL_MAT = 4
    MUL_SCALAR = 5
    TRANS_MAT = 6
    STOP = 7


COMMAND_NAMES = (
    'read_mat',
    'print_mat',
    'add_mat',
    'sub_mat',
    'mul_mat',
    'mul_scalar',
    'trans_mat',
    'stop',
)

REGISTER_NAMES = (
    'MAT_A',
    'MAT_B',
    'MAT_C',
    'MAT_D',
    'MAT_E',
    'MAT_F',
)


def classify_command(text: str, pos: int) -> Optional[CommandType]:
    """
    Matches the word at pos against the command table.

    The comparison is case-sensitive and needs an exact length match. Returns None
    when the word names no command.
    """
    length = token_length(text, pos)
    word = text[pos:pos + length]
    for tag, name in zip(CommandType, COMMAND_NAMES):
        if len(name) == length and name == word:
            return tag
    return None


def resolve_register(text: str, pos: int) -> Optional[str]:
    """
    Matches the fixed-width window at pos against the register names.

    Only the window itself is compared, so whatever follows it (a comma, a space or
    any other character) does not take part in the match: 'MAT_AX' resolves to
    'MAT_A' and the trailing 'X' is left for the caller's grammar checks.
    """
    window = text[pos:pos + MATRIX_NAME_WIDTH]
    for name in REGISTER_NAMES:
        if window == name:
            return name
    return None
