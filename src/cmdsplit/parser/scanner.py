"""
Scanning primitives shared by every phase of the statement splitter.

All functions take a buffer and a position and return a new position; none of
them ever reads past the end of the buffer.
"""

from ..types_ import Buffer

BLANKS = frozenset(" \t")
REDIRECTION_CHARS = frozenset("<>")
CONTROL_CHARS = frozenset("&|;")
OPERATOR_CHARS = REDIRECTION_CHARS | CONTROL_CHARS
SEPARATORS = BLANKS | OPERATOR_CHARS
QUOTE = '"'


def char_at(buffer: Buffer, pos: int) -> str:
    """Return the character at ``pos`` as a str, or "" at end of input."""
    if pos >= len(buffer):
        return ""
    if isinstance(buffer, str):
        return buffer[pos]
    return chr(buffer[pos])


def is_blank(buffer: Buffer, pos: int) -> bool:
    return char_at(buffer, pos) in BLANKS


def is_operator(buffer: Buffer, pos: int) -> bool:
    return char_at(buffer, pos) in OPERATOR_CHARS


def skip_blanks(buffer: Buffer, pos: int) -> int:
    end = len(buffer)
    while pos < end and char_at(buffer, pos) in BLANKS:
        pos += 1
    return pos


def scan_token(buffer: Buffer, pos: int) -> int:
    """Advance over one token, treating a double-quoted region as opaque.

    Stops on a blank, a redirection or control operator character, or end of
    input. An unterminated quote runs to end of input.
    """
    end = len(buffer)
    while pos < end:
        char = char_at(buffer, pos)
        if char in SEPARATORS:
            break
        pos += 1
        if char == QUOTE:
            while pos < end and char_at(buffer, pos) != QUOTE:
                pos += 1
            if pos < end:
                pos += 1
    return pos
