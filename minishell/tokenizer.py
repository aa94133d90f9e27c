"""Split a command line into words and operators."""

from __future__ import annotations

from .tokens import (
    APPEND_VALUE,
    GREATER_THAN,
    HEREDOC_VALUE,
    LESS_THAN,
    PIPE,
    PIPE_VALUE,
    REDIR_IN_VALUE,
    REDIR_OUT_VALUE,
    Token,
    TokenType,
    is_operator,
    is_quote,
    is_space,
)

_OPERATOR_VALUES = {
    TokenType.APPEND: APPEND_VALUE,
    TokenType.HEREDOC: HEREDOC_VALUE,
    TokenType.PIPE: PIPE_VALUE,
    TokenType.REDIR_IN: REDIR_IN_VALUE,
    TokenType.REDIR_OUT: REDIR_OUT_VALUE,
}


class UnclosedQuoteError(ValueError):
    """Raised when a quoted section of a word has no closing quote."""

    def __init__(self, message: str = "ERROR NO CLOSING QUOTE") -> None:
        super().__init__(message)


def _operator_type(line: str, start: int) -> TokenType:
    first = line[start]
    following = line[start + 1 : start + 2]
    if first == PIPE:
        return TokenType.PIPE
    if first == GREATER_THAN:
        return TokenType.APPEND if following == GREATER_THAN else TokenType.REDIR_OUT
    if first == LESS_THAN:
        return TokenType.HEREDOC if following == LESS_THAN else TokenType.REDIR_IN
    return TokenType.NULL


def _operator_token(line: str, start: int) -> Token:
    kind = _operator_type(line, start)
    return Token(kind, _OPERATOR_VALUES[kind])


def _word_token(line: str, start: int) -> Token:
    end = start
    length = len(line)
    while end < length and not is_space(line[end]) and not is_operator(line[end]):
        if is_quote(line[end]):
            closing = line.find(line[end], end + 1)
            if closing == -1:
                raise UnclosedQuoteError()
            end = closing
        end += 1
    return Token(TokenType.WORD, line[start:end])


def tokenize_input(line: str) -> list[Token]:
    """Return the tokens of ``line`` in order.

    Quoted sections stay inside their word, quotes included. Blanks after
    the last token yield one empty word, as the shell's reader does.
    Raises UnclosedQuoteError when a quote is never closed.
    """
    tokens: list[Token] = []
    index = 0
    length = len(line)
    while index < length:
        while index < length and is_space(line[index]):
            index += 1
        if index < length and is_operator(line[index]):
            token = _operator_token(line, index)
        else:
            token = _word_token(line, index)
        tokens.append(token)
        index += len(token.value)
    return tokens