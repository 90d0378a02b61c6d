"""Splitting a command line into typed tokens."""

from __future__ import annotations

from shellfront.checks import Previous, previous_kind
from shellfront.expander import expand_variables
from shellfront.tokens import ShellState, Token, TokenType, is_delimiter

_QUOTES = frozenset({TokenType.SQUOTE, TokenType.DQUOTE})
_DOUBLED = {TokenType.INPUT: TokenType.HEREDOC, TokenType.TRUNC: TokenType.APPEND}
_JOINABLE = frozenset({TokenType.ARG, TokenType.NOEXP})


def remove_quotes(value: str) -> str:
    """Drop every occurrence of the quote character that opens ``value``."""
    if not value:
        return value
    return value.replace(value[0], "")


def _word_end(text: str, start: int) -> int:
    end = start
    while end < len(text) and is_delimiter(text[end]) is None:
        end += 1
    return end


def tokenize(text: str, state: ShellState) -> list[Token]:
    """Split ``text`` into tokens and strip their quotes.

    Quoted runs, ``<<``, ``>>`` and ``$`` references form one token each;
    a run of blanks becomes a single SPACES token.
    """
    tokens: list[Token] = []
    start = 0
    length = len(text)
    while start < length:
        char = text[start]
        kind = is_delimiter(char)
        following = text[start + 1 : start + 2]
        if kind is None:
            end = _word_end(text, start)
            tokens.append(Token(text[start:end], TokenType.ARG))
            start = end
        elif kind in _QUOTES:
            closing = text.find(char, start + 1)
            end = length if closing == -1 else closing + 1
            tokens.append(Token(text[start:end], kind))
            start = end
        elif kind in _DOUBLED and following == char:
            tokens.append(Token(char * 2, _DOUBLED[kind]))
            start += 2
        elif kind == TokenType.VAR:
            end = _word_end(text, start + 1)
            tokens.append(Token(text[start:end], TokenType.VAR))
            start = end
        elif kind == TokenType.SPACES and is_delimiter(following) == TokenType.SPACES:
            start += 1
        else:
            tokens.append(Token(char, kind))
            start += 1
    return clean_quotes(tokens, state)


def clean_quotes(tokens, state: ShellState):
    """Strip quotes from quoted tokens in place and make them ARG tokens.

    Double-quoted tokens have their variables expanded, unless they are the
    delimiter of a here-document.
    """
    for index, token in enumerate(tokens):
        if token.kind not in _QUOTES:
            continue
        token.value = remove_quotes(token.value)
        after_heredoc = previous_kind(tokens, index) is Previous.HEREDOC
        if token.kind == TokenType.DQUOTE and not after_heredoc and "$" in token.value:
            token.value = expand_variables(token.value, state)
        token.kind = TokenType.ARG
    return tokens


def join_tokens(tokens) -> list[Token]:
    """Merge each run of adjacent ARG or NOEXP tokens into its first token."""
    result: list[Token] = []
    for token in tokens:
        if result and result[-1].kind in _JOINABLE and token.kind in _JOINABLE:
            last = result[-1]
            result[-1] = Token(last.value + token.value, last.kind)
        else:
            result.append(token)
    return result


def delete_token_type(tokens, kind: TokenType) -> list[Token]:
    """Return the tokens that are not of ``kind``."""
    return [token for token in tokens if token.kind != kind]