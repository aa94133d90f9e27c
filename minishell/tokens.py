"""Token kinds, the token record and character classes used by the tokenizer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

PIPE = "|"
GREATER_THAN = ">"
LESS_THAN = "<"
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'

APPEND_VALUE = ">>"
HEREDOC_VALUE = "<<"
PIPE_VALUE = "|"
REDIR_IN_VALUE = "<"
REDIR_OUT_VALUE = ">"

_SPACES = frozenset(" \t\n\v\f\r")
_OPERATORS = frozenset((PIPE, GREATER_THAN, LESS_THAN))
_QUOTES = frozenset((SINGLE_QUOTE, DOUBLE_QUOTE))


class TokenType(IntEnum):
    """Kind of a lexical token."""

    NULL = 0
    APPEND = 1
    HEREDOC = 2
    PIPE = 3
    REDIR_IN = 4
    REDIR_OUT = 5
    WORD = 6


@dataclass(frozen=True)
class Token:
    """A single token: its kind and the exact text it was read from."""

    type: TokenType
    value: str


def is_space(c: str) -> bool:
    """Return True for a blank character: space, tab, newline, VT, FF or CR."""
    return c in _SPACES


def is_operator(c: str) -> bool:
    """Return True for a character that starts an operator: ``|``, ``>`` or ``<``."""
    return c in _OPERATORS


def is_quote(c: str) -> bool:
    """Return True for a single or double quote."""
    return c in _QUOTES