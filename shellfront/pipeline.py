"""Reading one command line into sections ready to run."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from shellfront.checks import check_heredoc_count, check_next_types, check_not_allowed, check_prompt
from shellfront.expander import expand_tokens
from shellfront.sections import Section, build_sections
from shellfront.tokenizer import delete_token_type, join_tokens, tokenize
from shellfront.tokens import ParseError, ShellState, Token, TokenType, is_delimiter


def is_blank(text: str) -> bool:
    """Tell whether ``text`` holds nothing but blanks."""
    return all(is_delimiter(char) == TokenType.SPACES for char in text)


@contextmanager
def _recording_status(state: ShellState) -> Iterator[None]:
    try:
        yield
    except ParseError as error:
        if error.status is not None:
            state.rt_value = error.status
        raise


def prepare_tokens(text: str, state: ShellState) -> list[Token]:
    """Tokenize and expand ``text``, then clean and check the tokens.

    A rejected line raises ParseError and sets the state's exit status.
    """
    with _recording_status(state):
        tokens = tokenize(text, state)
        tokens = expand_tokens(tokens, state)
        check_not_allowed(tokens)
        tokens = delete_token_type(tokens, TokenType.END)
        tokens = join_tokens(tokens)
        tokens = delete_token_type(tokens, TokenType.SPACES)
        check_heredoc_count(tokens)
        check_next_types(tokens)
    return tokens


def parse_line(line: str, state: ShellState) -> list[Section]:
    """Turn one command line into pipeline sections.

    Leading and trailing spaces are dropped; an empty line gives no
    sections. A rejected line raises ParseError and sets the state's exit
    status.
    """
    text = line.strip(" ")
    if not text:
        return []
    with _recording_status(state):
        check_prompt(text)
    tokens = prepare_tokens(text, state)
    return build_sections(tokens)