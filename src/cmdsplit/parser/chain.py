"""Drive the statement splitter over a whole command chain."""

import logging
from pathlib import Path
from typing import Iterator, List, Union

from ..types_ import Buffer, ControlOperator, ParsedStatement
from .statement_splitter import split_statement

logger = logging.getLogger(__name__)


def iter_statements(content: Buffer) -> Iterator[ParsedStatement]:
    """Yield the statements of ``content`` until one ends without a control operator."""
    statement, cursor = split_statement(content)
    yield statement
    while statement.control_operator is not ControlOperator.NONE:
        statement, cursor = split_statement(context=cursor)
        yield statement
    if not cursor.at_end:
        logger.debug(f"Leaving unconsumed input {cursor.remaining!r}")


def split_chain(content: Buffer) -> List[ParsedStatement]:
    return list(iter_statements(content))


class StatementSplitter:
    def parse_string(self, content: Buffer) -> List[ParsedStatement]:
        """Split a single command line into its statements."""
        return split_chain(content)

    def parse_file(self, file_path: Union[str, Path]) -> List[ParsedStatement]:
        """Split every non-blank line of a file, in order."""
        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()

        statements: List[ParsedStatement] = []
        for line in content.split("\n"):
            if line.strip(" \t"):
                statements.extend(self.parse_string(line))
        return statements


def assert_single_statement(command: str) -> None:
    # Trailing empty statements ("ls;" or "ls &") don't count
    statements = [
        stmt for stmt in split_chain(command) if not stmt.command.is_empty
    ]
    if len(statements) > 1:
        raise ValueError(
            "Error: Command contains multiple statements. Please run only one statement at a time."
        )
