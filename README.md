# minishell

minishell is a small interactive shell prompt. It splits each line you type
into tokens. A token is a word, a pipe (`|`) or a redirection (`<`, `>`,
`<<`, `>>`). It then prints every token with its type. Quoted text stays
inside its word, with the quotes kept.

## Installation

```
pip install .
```

## Usage

Start the prompt:

```
minishell
```

Here is an example session:

```
minishell$ < infile cat | grep "a b" >> out
You typed: < infile cat | grep "a b" >> out
[4: <]
[6: infile]
[6: cat]
[3: |]
[6: grep]
[6: "a b"]
[1: >>]
[6: out]
```

Each token is shown as `[type: value]`. The type numbers are:

| Number | Type       |
|--------|------------|
| 0      | NULL       |
| 1      | APPEND     |
| 2      | HEREDOC    |
| 3      | PIPE       |
| 4      | REDIR_IN   |
| 5      | REDIR_OUT  |
| 6      | WORD       |

A quote that is never closed gives the message `ERROR NO CLOSING QUOTE`.
The prompt then waits for the next line. Blanks after the last token on a
line give one extra empty word.

At end of input (Ctrl-D) the shell prints `exit` and quits. When it reads
from a terminal, it clears the line-editing history on the way out.
`minishell --help` shows the usage. The command takes no other options.

## What it does not do

minishell does not run commands. It reads each line and shows its tokens,
and nothing more. It does not check syntax. It does not group tokens into
commands or pipelines. It does not expand variables. It does not remove
quotes.

## Library use

```python
from minishell.tokenizer import tokenize_input, UnclosedQuoteError
from minishell.tokens import TokenType

tokens = tokenize_input("echo 'hi there' > out.txt")
assert [t.type for t in tokens] == [
    TokenType.WORD, TokenType.WORD, TokenType.REDIR_OUT, TokenType.WORD,
]
assert tokens[1].value == "'hi there'"

try:
    tokenize_input('echo "oops')
except UnclosedQuoteError:
    ...
```

`UnclosedQuoteError` is a subclass of `ValueError`.

`minishell.tokens` provides these names:

- `Token`: a frozen record with the fields `type` and `value`.
- `TokenType`: an `IntEnum` of the token kinds.
- `is_space`, `is_operator` and `is_quote`: the character tests the
  tokenizer uses.

`minishell.shell.format_tokens` returns the printed lines as one string.
`minishell.shell.print_tokens` writes them to standard output.
`minishell.shell.main` runs the prompt.

## Running the tests

```
pip install .[test]
pytest
```