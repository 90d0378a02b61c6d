"""Grouping tokens into pipeline sections with their redirections."""

from __future__ import annotations

from dataclasses import dataclass, field

from shellfront.tokens import ERR_DELIM, ParseError, Token, TokenType

_REDIRECTIONS = frozenset(
    {TokenType.INPUT, TokenType.TRUNC, TokenType.APPEND, TokenType.HEREDOC}
)
_WORDS = frozenset({TokenType.ARG, TokenType.CMD, TokenType.NOEXP})


@dataclass
class Redirection:
    """A redirection target and the kind of redirection applied to it."""

    file: str
    kind: TokenType


@dataclass
class Section:
    """One command of a pipeline: its words and its redirections, in order."""

    cmd: list[str] = field(default_factory=list)
    files: list[Redirection] = field(default_factory=list)


def is_redirection(kind: TokenType) -> bool:
    """Tell whether ``kind`` is one of ``<``, ``>``, ``>>`` or ``<<``."""
    return kind in _REDIRECTIONS


def build_sections(tokens: list[Token]) -> list[Section]:
    """Split tokens at pipes into sections.

    A redirection takes the following token as its file. Word tokens become
    the section's command and arguments; other tokens are ignored. There is
    always at least one section.
    """
    sections = [Section()]
    current = sections[0]
    iterator = iter(tokens)
    for token in iterator:
        if is_redirection(token.kind):
            target = next(iterator, None)
            if target is None:
                raise ParseError(ERR_DELIM)
            current.files.append(Redirection(target.value, token.kind))
        elif token.kind in _WORDS:
            current.cmd.append(token.value)
        elif token.kind == TokenType.PIPE:
            current = Section()
            sections.append(current)
    return sections