from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional, Union

from pydantic import BaseModel as PydanticBaseModel


class NoExtraArgs(PydanticBaseModel):
    class Config:
        extra = "forbid"


BaseModel = NoExtraArgs


Buffer = Union[str, bytes, bytearray]


class RedirectionKind(Enum):
    NONE = ""
    OUT = ">"
    OUT_APPEND = ">>"
    IN = "<"
    IN_OUT = "<>"

    @property
    def symbol(self) -> str:
        return self.value


class ControlOperator(Enum):
    NONE = ""
    AND = "&&"
    OR = "||"
    BACKGROUND = "&"
    PIPE = "|"
    NEXT = ";"

    @property
    def symbol(self) -> str:
        return self.value


class TokenRange(NamedTuple):
    """A (start, end) view into an input buffer. Owns no data."""

    start: int
    end: int

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    @property
    def length(self) -> int:
        return self.end - self.start

    def slice(self, buffer: Buffer) -> Buffer:
        return buffer[self.start : self.end]


def decode(chunk: Buffer) -> str:
    if isinstance(chunk, str):
        return chunk
    return bytes(chunk).decode("utf-8", errors="replace")


@dataclass(frozen=True)
class Cursor:
    """Resume point of a statement chain.

    The cursor borrows the buffer it was created over; it never copies it, so
    the buffer must stay unchanged for as long as the chain is being driven.
    """

    buffer: Optional[Buffer] = field(default=None, repr=False)
    offset: int = 0

    def __post_init__(self) -> None:
        limit = 0 if self.buffer is None else len(self.buffer)
        if not 0 <= self.offset <= limit:
            raise ValueError(
                f"Cursor offset {self.offset} is outside the buffer (length {limit})"
            )

    @property
    def at_end(self) -> bool:
        return self.buffer is None or self.offset >= len(self.buffer)

    @property
    def remaining(self) -> Buffer:
        if self.buffer is None:
            return ""
        return self.buffer[self.offset :]


class StatementView(BaseModel):
    command: str
    params: str
    redirection: str
    redirection_target: str
    control_operator: str


@dataclass(frozen=True)
class ParsedStatement:
    """One command of a chain, with ranges pointing into ``source``."""

    command: TokenRange
    params: TokenRange
    redirection_kind: RedirectionKind
    redirection_target: TokenRange
    control_operator: ControlOperator
    source: Buffer = field(repr=False, compare=False)

    @property
    def command_text(self) -> str:
        return decode(self.command.slice(self.source))

    @property
    def params_text(self) -> str:
        return decode(self.params.slice(self.source))

    @property
    def redirection_target_text(self) -> str:
        return decode(self.redirection_target.slice(self.source))

    @property
    def is_empty(self) -> bool:
        return (
            self.command.is_empty
            and self.params.is_empty
            and self.redirection_kind is RedirectionKind.NONE
            and self.control_operator is ControlOperator.NONE
        )

    def to_view(self) -> StatementView:
        return StatementView(
            command=self.command_text,
            params=self.params_text,
            redirection=self.redirection_kind.symbol,
            redirection_target=self.redirection_target_text,
            control_operator=self.control_operator.symbol,
        )

    def __str__(self) -> str:
        parts = [self.command_text, self.params_text]
        if self.redirection_kind is not RedirectionKind.NONE:
            parts.append(self.redirection_kind.symbol + self.redirection_target_text)
        parts.append(self.control_operator.symbol)
        return " ".join(part for part in parts if part)
