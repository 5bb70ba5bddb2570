"""
Splitter for shell-style command lines.

This module segments a command line into statements joined by control operators.
"""

from .chain import StatementSplitter, assert_single_statement, iter_statements, split_chain
from .statement_splitter import next_token, split_statement
