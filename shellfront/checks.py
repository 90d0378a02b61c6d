"""Syntax checks run on a raw command line and on its tokens."""

from __future__ import annotations

from enum import Enum

from shellfront.tokens import (
    ERR_APPEND,
    ERR_BACKSLASH,
    ERR_DELIM,
    ERR_DQUOTE,
    ERR_HEREDOC,
    ERR_INPUT,
    ERR_PIPE,
    ERR_SEMICOL,
    ERR_SQUOTE,
    ERR_TRUNC,
    HEREDOC_LIMIT,
    MAX_HEREDOC,
    ParseError,
    TokenType,
)

_FILE_REDIRECTIONS = frozenset({TokenType.INPUT, TokenType.TRUNC, TokenType.APPEND})
_REDIRECTIONS = _FILE_REDIRECTIONS | {TokenType.HEREDOC}

_UNEXPECTED = {
    TokenType.PIPE: ERR_PIPE,
    TokenType.INPUT: ERR_INPUT,
    TokenType.TRUNC: ERR_TRUNC,
    TokenType.HEREDOC: ERR_HEREDOC,
    TokenType.APPEND: ERR_APPEND,
}


class Previous(Enum):
    """What comes before a token, looking past one run of spaces."""

    FIRST = "first"
    REDIRECTION = "redirection"
    HEREDOC = "heredoc"
    OTHER = "other"


def check_quotes(text: str) -> str:
    """Raise ParseError if a quote in ``text`` is never closed; return ``text``."""
    index = 0
    while index < len(text):
        char = text[index]
        if char in "'\"":
            closing = text.find(char, index + 1)
            if closing == -1:
                raise ParseError(ERR_SQUOTE if char == "'" else ERR_DQUOTE)
            index = closing
        index += 1
    return text


def check_pipes(text: str) -> str:
    """Reject a leading pipe, a doubled pipe or a trailing pipe outside quotes."""
    if text.startswith("|"):
        raise ParseError(ERR_PIPE)
    index = 0
    while index < len(text):
        char = text[index]
        if char in "'\"":
            closing = text.find(char, index + 1)
            index = len(text) if closing == -1 else closing
        elif char == "|" and text[index + 1 : index + 2] in ("|", ""):
            raise ParseError(ERR_PIPE)
        index += 1
    return text


def check_trailing_redirection(text: str) -> str:
    """Reject a line that ends with ``<`` or ``>``."""
    if text.endswith(("<", ">")):
        raise ParseError(ERR_DELIM)
    return text


def check_prompt(text: str) -> str:
    """Run the checks made on a raw line before it is split into tokens."""
    check_quotes(text)
    check_pipes(text)
    check_trailing_redirection(text)
    return text


def check_not_allowed(tokens):
    """Reject tokens for ``;`` and ``\\``, which the shell does not handle."""
    for token in tokens:
        if token.kind == TokenType.SEMICOL:
            raise ParseError(ERR_SEMICOL)
        if token.kind == TokenType.BACKSLASH:
            raise ParseError(ERR_BACKSLASH)
    return tokens


def check_heredoc_count(tokens):
    """Reject more here-documents than the shell allows."""
    if sum(token.kind == TokenType.HEREDOC for token in tokens) > HEREDOC_LIMIT:
        raise ParseError(MAX_HEREDOC, None)
    return tokens


def previous_kind(tokens, index: int) -> Previous:
    """Classify what precedes ``tokens[index]``, skipping one spaces token."""
    if index == 0:
        return Previous.FIRST
    before = tokens[index - 1].kind
    if before == TokenType.SPACES:
        if index < 2:
            return Previous.OTHER
        before = tokens[index - 2].kind
    if before in _FILE_REDIRECTIONS:
        return Previous.REDIRECTION
    if before == TokenType.HEREDOC:
        return Previous.HEREDOC
    return Previous.OTHER


def check_next_types(tokens):
    """Reject a redirection followed by an operator, and two pipes in a row."""
    for current, following in zip(tokens, tokens[1:]):
        if current.kind in _REDIRECTIONS:
            message = _UNEXPECTED.get(following.kind)
            if message is not None:
                raise ParseError(message, 2)
        elif current.kind == TokenType.PIPE and following.kind == TokenType.PIPE:
            raise ParseError(ERR_PIPE, 1)
    return tokens