"""Token kinds, tokens, shell state and the errors raised while reading a line."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

ERR_SQUOTE = ">\nError while looking for matching `''\n"
ERR_DQUOTE = ">\nError while looking for matching `\"'\n"
ERR_PIPE = "bash: syntax error near unexpected token `|'\n"
ERR_SEMICOL = "bash: syntax error near unexpected token `;'\n"
ERR_BACKSLASH = "bash: syntax error near unexpected token `\\'\n"
ERR_DELIM = "bash: syntax error near unexpected token `newline'\n"
ERR_INPUT = "bash: syntax error near unexpected token `<'\n"
ERR_TRUNC = "bash: syntax error near unexpected token `>'\n"
ERR_HEREDOC = "bash: syntax error near unexpected token `<<'\n"
ERR_APPEND = "bash: syntax error near unexpected token `>>'\n"
MAX_HEREDOC = "bash: maximum here-document count exceeded\n"
AMBIGUOUS_REDIRECT = "minishell: {}: ambiguous redirect\n"
EXIT_MESSAGE = "exit\n"
NO_ARGS = "Error. Execution don't allow arguments\n"

HEREDOC_LIMIT = 16

_SPACE_CHARS = frozenset(" \t\n\v\f\r")


class TokenType(IntEnum):
    """Kind of a token produced from a command line."""

    BACKSLASH = -2
    SEMICOL = -1
    CMD = 0
    SPACES = 1
    PIPE = 2
    INPUT = 3
    TRUNC = 4
    SQUOTE = 5
    DQUOTE = 6
    HEREDOC = 7
    APPEND = 8
    END = 9
    ARG = 10
    VAR = 11
    NOEXP = 12


@dataclass
class Token:
    """One piece of a command line with its kind."""

    value: str
    kind: TokenType


@dataclass
class ShellState:
    """State shared across the lines a shell reads."""

    env: dict[str, str | None] = field(default_factory=dict)
    rt_value: int = 0
    signal_num: int = 0
    current_dir: str | None = None


class ParseError(Exception):
    """A command line was rejected.

    ``status`` is the exit status the shell takes on, or None when the
    previous status is kept.
    """

    def __init__(self, message: str, status: int | None = 2) -> None:
        super().__init__(message)
        self.message = message
        self.status = status

    def __str__(self) -> str:
        return self.message


def is_delimiter(char: str) -> TokenType | None:
    """Return the delimiter kind of ``char``, or None for an ordinary character.

    An empty string stands for the end of the line.
    """
    if char == "":
        return TokenType.END
    if char in _SPACE_CHARS:
        return TokenType.SPACES
    return {
        "|": TokenType.PIPE,
        "<": TokenType.INPUT,
        ">": TokenType.TRUNC,
        '"': TokenType.DQUOTE,
        "'": TokenType.SQUOTE,
        "$": TokenType.VAR,
        "\\": TokenType.BACKSLASH,
        ";": TokenType.SEMICOL,
    }.get(char)


def format_tokens(tokens) -> str:
    """Render tokens one per line, numbered, with their kind's value."""
    return "".join(
        f"Token {index} {token.value} * Type:  {int(token.kind)}\n"
        for index, token in enumerate(tokens)
    )