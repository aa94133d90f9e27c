import io
import sys

from minishell.shell import format_tokens, main, print_tokens
from minishell.tokenizer import tokenize_input
from minishell.tokens import Token, TokenType


def test_format_single_token():
    assert format_tokens([Token(TokenType.WORD, "ls")]) == "[6: ls]\n"


def test_format_empty():
    assert format_tokens([]) == ""


def test_format_one_line_per_token():
    tokens = tokenize_input("cat < in | wc")
    lines = format_tokens(tokens).splitlines()
    assert len(lines) == len(tokens)
    for line, token in zip(lines, tokens):
        assert line == f"[{int(token.type)}: {token.value}]"


def test_print_tokens_writes_formatted(capsys):
    tokens = [Token(TokenType.PIPE, "|"), Token(TokenType.APPEND, ">>")]
    print_tokens(tokens)
    assert capsys.readouterr().out == format_tokens(tokens)


def _run(monkeypatch, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    return main([])


def test_main_echoes_and_tokenizes(monkeypatch, capsys):
    status = _run(monkeypatch, "echo hi\n")
    out = capsys.readouterr().out
    assert status == 0
    assert "You typed: echo hi\n" in out
    assert format_tokens(tokenize_input("echo hi")) in out
    assert out.endswith("exit\n")


def test_main_reports_unclosed_quote_and_continues(monkeypatch, capsys):
    status = _run(monkeypatch, "echo 'x\nls\n")
    out = capsys.readouterr().out
    assert status == 0
    assert "ERROR NO CLOSING QUOTE\n" in out
    assert "You typed: ls\n" in out
    assert out.endswith("exit\n")


def test_main_empty_input_exits(monkeypatch, capsys):
    status = _run(monkeypatch, "")
    out = capsys.readouterr().out
    assert status == 0
    assert out.endswith("exit\n")
    assert "You typed" not in out