"""Expansion of ``$`` variables in command-line tokens."""

from __future__ import annotations

from shellfront.checks import Previous, previous_kind
from shellfront.tokens import AMBIGUOUS_REDIRECT, ParseError, ShellState, Token, TokenType

_SPACE_CHARS = frozenset(" \t\n\v\f\r")
_EXPANDABLE = frozenset({TokenType.VAR, TokenType.DQUOTE})


def lookup_variable(env, name: str) -> str | None:
    """Return the value of ``name`` in ``env``.

    A variable that is set without a value gives an empty string; one that
    is not set at all gives None.
    """
    if name not in env:
        return None
    value = env[name]
    return "" if value is None else value


def _is_name_char(char: str) -> bool:
    return char == "_" or (char.isascii() and char.isalnum())


def _is_digit(char: str) -> bool:
    return char.isascii() and char.isdigit()


def expand_variables(text: str, state: ShellState) -> str:
    """Replace every ``$`` reference in ``text`` with its value.

    ``$?`` gives the pending signal status, or the last exit status when
    there is none, and clears the pending signal. ``$0`` gives ``bash``;
    any other digit is dropped. A ``$`` at the end or before a space stays.
    """
    parts: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char != "$":
            parts.append(char)
            index += 1
            continue
        index += 1
        if index == length or text[index] == " ":
            parts.append("$")
            continue
        following = text[index]
        if following == "?":
            parts.append(str(state.signal_num or state.rt_value))
            state.signal_num = 0
            index += 1
        elif _is_digit(following):
            if following == "0":
                parts.append("bash")
            index += 1
            start = index
            while index < length and _is_digit(text[index]):
                index += 1
            parts.append(text[start:index])
        else:
            start = index
            while index < length and _is_name_char(text[index]):
                index += 1
            value = lookup_variable(state.env, text[start:index])
            if value:
                parts.append(value)
    return "".join(parts)


def follows_heredoc(tokens, index: int) -> bool:
    """Tell whether the token at ``index`` is the delimiter of a here-document."""
    if index == 0:
        return False
    before = tokens[index - 1].kind
    if before == TokenType.SPACES:
        return index >= 2 and tokens[index - 2].kind == TokenType.HEREDOC
    return before == TokenType.HEREDOC


def _empty_expansion(result, index: int, original: str, kind: TokenType) -> Token:
    where = previous_kind(result, index)
    if where is Previous.FIRST:
        return Token("", kind)
    if where is Previous.HEREDOC:
        return Token(original, TokenType.ARG)
    if where is Previous.REDIRECTION:
        raise ParseError(AMBIGUOUS_REDIRECT.format(original), 1)
    return Token("", TokenType.END)


def expand_tokens(tokens, state: ShellState) -> list[Token]:
    """Expand variable tokens and return the resulting token list.

    An expansion holding spaces is split into words: the first becomes an
    ARG token, the rest CMD tokens. An empty expansion becomes an END token,
    and raises ParseError (status 1) when it is the target of a redirection.
    Here-document delimiters are kept as written.
    """
    result: list[Token] = []
    for token in tokens:
        if token.kind not in _EXPANDABLE:
            result.append(token)
            continue
        index = len(result)
        if follows_heredoc(result, index):
            result.append(Token(token.value, TokenType.ARG))
            continue
        original = token.value
        expanded = expand_variables(original, state)
        words = [expanded]
        if any(char in _SPACE_CHARS for char in expanded):
            words = [word for word in expanded.split(" ") if word] or [""]
        first, rest = words[0], words[1:]
        if first:
            result.append(Token(first, TokenType.ARG))
        else:
            result.append(_empty_expansion(result, index, original, token.kind))
        result.extend(Token(word, TokenType.CMD) for word in rest)
    return result