from .errors import CmdsplitError, MisuseError
from .parser import (
    StatementSplitter,
    assert_single_statement,
    iter_statements,
    next_token,
    split_chain,
    split_statement,
)
from .types_ import (
    ControlOperator,
    Cursor,
    ParsedStatement,
    RedirectionKind,
    StatementView,
    TokenRange,
)

__all__ = [
    "CmdsplitError",
    "ControlOperator",
    "Cursor",
    "MisuseError",
    "ParsedStatement",
    "RedirectionKind",
    "StatementSplitter",
    "StatementView",
    "TokenRange",
    "assert_single_statement",
    "iter_statements",
    "next_token",
    "split_chain",
    "split_statement",
]
