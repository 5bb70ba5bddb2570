"""
Statement Splitter

Splits a shell-style command line into statements of the form

    <command>[ params][ redirection target][ control operator]

one statement per call. Each call returns the parsed statement and a cursor
from which the next statement of the chain can be read. Only double quotes
are recognized; a quoted region is never split on blanks or operators.
"""

import logging
from typing import Optional, TypeVar

from ..errors import MisuseError
from ..types_ import (
    Buffer,
    ControlOperator,
    Cursor,
    ParsedStatement,
    RedirectionKind,
    TokenRange,
)
from .scanner import char_at, is_blank, is_operator, scan_token, skip_blanks

logger = logging.getLogger(__name__)

Operator = TypeVar("Operator", RedirectionKind, ControlOperator)

# First character -> (single-character operator, {second character: upgraded operator})
REDIRECTIONS: dict[str, tuple[RedirectionKind, dict[str, RedirectionKind]]] = {
    ">": (RedirectionKind.OUT, {">": RedirectionKind.OUT_APPEND}),
    "<": (RedirectionKind.IN, {">": RedirectionKind.IN_OUT}),
}

CONTROL_OPERATORS: dict[str, tuple[ControlOperator, dict[str, ControlOperator]]] = {
    "&": (ControlOperator.BACKGROUND, {"&": ControlOperator.AND}),
    "|": (ControlOperator.PIPE, {"|": ControlOperator.OR}),
    ";": (ControlOperator.NEXT, {}),
}


def _check_buffer(input: object) -> Buffer:
    if not isinstance(input, (str, bytes, bytearray)):
        raise TypeError(
            f"Expected str, bytes or bytearray input, got {type(input).__name__}"
        )
    return input


def resolve_start(
    input: Optional[Buffer], context: Optional[Cursor]
) -> tuple[Buffer, int]:
    """Pick the buffer and position a call should start from."""
    if input is not None:
        return _check_buffer(input), 0
    if context is None or context.buffer is None:
        raise MisuseError(
            "No input buffer: pass the input on the first call of a chain"
        )
    return context.buffer, context.offset


def _match_operator(
    buffer: Buffer, pos: int, table: dict[str, tuple[Operator, dict[str, Operator]]]
) -> tuple[Optional[Operator], int]:
    entry = table.get(char_at(buffer, pos))
    if entry is None:
        return None, pos
    operator, upgrades = entry
    pos += 1
    upgraded = upgrades.get(char_at(buffer, pos))
    if upgraded is not None:
        return upgraded, pos + 1
    return operator, pos


def _scan_command(buffer: Buffer, pos: int) -> tuple[TokenRange, TokenRange, int]:
    start = skip_blanks(buffer, pos)
    end = scan_token(buffer, start)
    command = TokenRange(start, end)
    params = TokenRange(end, end)
    pos = end

    if is_blank(buffer, pos):
        pos = skip_blanks(buffer, pos)
        params = TokenRange(pos, pos)
        # Blanks between words belong to the parameters, trailing ones do not
        while pos < len(buffer) and not is_operator(buffer, pos):
            word_end = scan_token(buffer, pos)
            params = TokenRange(params.start, word_end)
            pos = skip_blanks(buffer, word_end)

    return command, params, pos


def _scan_redirection(
    buffer: Buffer, pos: int
) -> tuple[RedirectionKind, TokenRange, int]:
    kind, pos = _match_operator(buffer, pos, REDIRECTIONS)
    if kind is None:
        return RedirectionKind.NONE, TokenRange(pos, pos), pos

    start = skip_blanks(buffer, pos)
    end = scan_token(buffer, start)
    return kind, TokenRange(start, end), skip_blanks(buffer, end)


def _scan_control_operator(buffer: Buffer, pos: int) -> tuple[ControlOperator, int]:
    operator, pos = _match_operator(buffer, pos, CONTROL_OPERATORS)
    return operator or ControlOperator.NONE, pos


def split_statement(
    input: Optional[Buffer] = None, context: Optional[Cursor] = None
) -> tuple[ParsedStatement, Cursor]:
    """Split the next statement off a command line.

    Pass ``input`` on the first call of a chain and only the returned cursor
    on the following ones. Stop once the statement's control operator is
    ``ControlOperator.NONE``; anything left after the cursor at that point is
    not part of the chain.

    Raises:
        MisuseError: neither ``input`` nor a cursor carrying a buffer was given.
    """
    buffer, offset = resolve_start(input, context)

    command, params, pos = _scan_command(buffer, offset)
    redirection_kind, redirection_target, pos = _scan_redirection(buffer, pos)
    control_operator, pos = _scan_control_operator(buffer, pos)

    statement = ParsedStatement(
        command=command,
        params=params,
        redirection_kind=redirection_kind,
        redirection_target=redirection_target,
        control_operator=control_operator,
        source=buffer,
    )
    logger.debug(f"Split statement {statement!s} at {offset}..{pos}")
    return statement, Cursor(buffer, pos)


def next_token(
    input: Optional[Buffer] = None, context: Optional[Cursor] = None
) -> tuple[TokenRange, Cursor]:
    """Read a single blank-delimited token, following the same cursor protocol."""
    buffer, offset = resolve_start(input, context)

    start = skip_blanks(buffer, offset)
    end = scan_token(buffer, start)
    return TokenRange(start, end), Cursor(buffer, end)
