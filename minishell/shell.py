"""Interactive prompt that reads lines and shows their tokens."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable

from .tokenizer import UnclosedQuoteError, tokenize_input
from .tokens import Token

PROMPT = "minishell$ "
EXIT_MSG = "exit\n"


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens one per line as ``[<type number>: <value>]``."""
    return "".join(f"[{int(token.type)}: {token.value}]\n" for token in tokens)


def print_tokens(tokens: Iterable[Token]) -> None:
    """Write the rendered tokens to standard output."""
    sys.stdout.write(format_tokens(tokens))


def _line_editing():
    """Return the readline module when reading from a terminal, else None."""
    if not sys.stdin.isatty():
        return None
    try:
        import readline
    except ImportError:
        return None
    return readline


def main(argv: list[str] | None = None) -> int:
    """Run the read-tokenize-print loop until end of input."""
    parser = argparse.ArgumentParser(
        prog="minishell", description="Read command lines and print their tokens."
    )
    parser.parse_args(argv)

    editing = _line_editing()
    try:
        while True:
            try:
                line = input(PROMPT)
            except EOFError:
                sys.stdout.write(EXIT_MSG)
                break
            print(f"You typed: {line}")
            try:
                tokens = tokenize_input(line)
            except UnclosedQuoteError as exc:
                print(exc)
                continue
            print_tokens(tokens)
    finally:
        if editing is not None:
            editing.clear_history()
    return 0