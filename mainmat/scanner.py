# scanner.py

"""
Cursor primitives over a command line.

Every primitive is a pure function ``(text, pos) -> pos`` and never moves the cursor
past ``len(text)``. A position equal to ``len(text)`` stands for the end of the
buffer.
"""

from typing import Tuple

WHITESPACE = " \t\n\r\f\v"
LINE_FEED = "\n"
COMMA = ","
DIGITS = "0123456789"

# Register names are fixed width.
MATRIX_NAME_WIDTH = 5


def peek(text: str, pos: int) -> str:
    """Returns the character at pos, or '' at the end of the buffer."""
    return text[pos] if 0 <= pos < len(text) else ''


def skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos


def is_end_of_command(text: str, pos: int) -> bool:
    """True at the end of the buffer or on a line feed."""
    return pos >= len(text) or text[pos] == LINE_FEED


def token_length(text: str, pos: int) -> int:
    """Length of the non-whitespace run starting at pos."""
    end = pos
    while end < len(text) and text[end] not in WHITESPACE:
        end += 1
    return end - pos


def skip_to_next_token(text: str, pos: int) -> int:
    """Steps over leading whitespace and then over the current word."""
    pos = skip_whitespace(text, pos)
    return pos + token_length(text, pos)


def skip_fixed_width(text: str, pos: int, width: int = MATRIX_NAME_WIDTH) -> int:
    return min(pos + width, len(text))


def _skip_digits(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in DIGITS:
        pos += 1
    return pos


def scan_number(text: str, pos: int) -> Tuple[float, int]:
    """
    Scans a floating point literal starting at pos.

    Accepts an optional sign, digits with an optional fraction, and an optional
    exponent. Returns (value, end); end == pos when no number could be read, in which
    case the value is 0.0.
    """
    start = pos
    if peek(text, pos) in ('+', '-'):
        pos += 1
    int_end = _skip_digits(text, pos)
    digits = int_end - pos
    pos = int_end
    if peek(text, pos) == '.':
        frac_end = _skip_digits(text, pos + 1)
        digits += frac_end - (pos + 1)
        pos = frac_end
    if digits == 0:
        return 0.0, start

    # The exponent only counts when at least one digit follows it
    if peek(text, pos) in ('e', 'E'):
        exp_pos = pos + 1
        if peek(text, exp_pos) in ('+', '-'):
            exp_pos += 1
        exp_end = _skip_digits(text, exp_pos)
        if exp_end > exp_pos:
            pos = exp_end

    return float(text[start:pos]), pos
