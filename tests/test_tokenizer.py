import pytest

from shellfront.tokenizer import (
    clean_quotes,
    delete_token_type,
    join_tokens,
    remove_quotes,
    tokenize,
)
from shellfront.tokens import ShellState, Token, TokenType


def kinds(tokens):
    return [t.kind for t in tokens]


def values(tokens):
    return [t.value for t in tokens]


@pytest.mark.parametrize(
    "quoted, plain",
    [("'abc'", "abc"), ('"a b"', "a b"), ("''", ""), ("'abc", "abc")],
)
def test_remove_quotes(quoted, plain):
    assert remove_quotes(quoted) == plain


def test_remove_quotes_keeps_other_quote():
    assert remove_quotes("\"it's\"") == "it's"


def test_tokenize_words():
    tokens = tokenize("echo hello", ShellState())
    assert values(tokens) == ["echo", " ", "hello"]
    assert kinds(tokens) == [TokenType.ARG, TokenType.SPACES, TokenType.ARG]


@pytest.mark.parametrize("text", ["ls -l /tmp", "a|b", "cat < in > out", "x>>y"])
def test_tokenize_round_trip_without_quotes(text):
    assert "".join(values(tokenize(text, ShellState()))) == text


def test_tokenize_collapses_space_runs():
    tokens = tokenize("a   b", ShellState())
    assert kinds(tokens) == [TokenType.ARG, TokenType.SPACES, TokenType.ARG]


def test_tokenize_heredoc_and_append():
    tokens = tokenize("cat << EOF >> out", ShellState())
    assert kinds(tokens) == [
        TokenType.ARG,
        TokenType.SPACES,
        TokenType.HEREDOC,
        TokenType.SPACES,
        TokenType.ARG,
        TokenType.SPACES,
        TokenType.APPEND,
        TokenType.SPACES,
        TokenType.ARG,
    ]


def test_tokenize_single_operators():
    tokens = tokenize("a|b<c>d;e\\", ShellState())
    assert kinds(tokens) == [
        TokenType.ARG,
        TokenType.PIPE,
        TokenType.ARG,
        TokenType.INPUT,
        TokenType.ARG,
        TokenType.TRUNC,
        TokenType.ARG,
        TokenType.SEMICOL,
        TokenType.ARG,
        TokenType.BACKSLASH,
    ]


def test_tokenize_variable_token():
    tokens = tokenize("echo $USER|x", ShellState())
    assert tokens[2] == Token("$USER", TokenType.VAR)
    assert tokens[3].kind == TokenType.PIPE


def test_tokenize_lone_dollars():
    tokens = tokenize("$$", ShellState())
    assert tokens == [Token("$", TokenType.VAR), Token("$", TokenType.VAR)]


def test_single_quotes_do_not_expand():
    tokens = tokenize("'$HOME'", ShellState(env={"HOME": "/root"}))
    assert tokens == [Token("$HOME", TokenType.ARG)]


def test_double_quotes_expand():
    tokens = tokenize('"$HOME"', ShellState(env={"HOME": "/root"}))
    assert tokens == [Token("/root", TokenType.ARG)]


def test_double_quotes_after_heredoc_do_not_expand():
    tokens = tokenize('cat << "$HOME"', ShellState(env={"HOME": "/root"}))
    assert tokens[-1] == Token("$HOME", TokenType.ARG)


def test_quoted_text_keeps_spaces():
    tokens = tokenize("echo 'a  b'", ShellState())
    assert tokens[-1] == Token("a  b", TokenType.ARG)


def test_clean_quotes_in_place():
    tokens = [Token("'x'", TokenType.SQUOTE), Token(" ", TokenType.SPACES)]
    result = clean_quotes(tokens, ShellState())
    assert result is tokens
    assert tokens[0] == Token("x", TokenType.ARG)
    assert tokens[1] == Token(" ", TokenType.SPACES)


def test_clean_quotes_status_consumes_signal():
    state = ShellState(rt_value=0, signal_num=130)
    tokens = clean_quotes([Token('"$?"', TokenType.DQUOTE)], state)
    assert tokens[0].value == str(130)
    assert state.signal_num == 0


def test_join_tokens_merges_runs():
    tokens = [
        Token("a", TokenType.ARG),
        Token("b", TokenType.NOEXP),
        Token("c", TokenType.ARG),
        Token(" ", TokenType.SPACES),
        Token("d", TokenType.ARG),
    ]
    result = join_tokens(tokens)
    assert result == [
        Token("abc", TokenType.ARG),
        Token(" ", TokenType.SPACES),
        Token("d", TokenType.ARG),
    ]


def test_join_tokens_leaves_cmd_tokens():
    tokens = [Token("x", TokenType.ARG), Token("y", TokenType.CMD)]
    assert join_tokens(tokens) == tokens


def test_join_tokens_preserves_text():
    tokens = tokenize("a'b'\"c\" d", ShellState())
    joined = join_tokens(tokens)
    assert "".join(values(joined)) == "".join(values(tokens))
    assert len(joined) == 3


def test_delete_token_type():
    tokens = [
        Token("a", TokenType.ARG),
        Token(" ", TokenType.SPACES),
        Token("b", TokenType.ARG),
        Token("", TokenType.END),
    ]
    result = delete_token_type(tokens, TokenType.SPACES)
    assert result == [tokens[0], tokens[2], tokens[3]]
    assert delete_token_type(result, TokenType.END) == [tokens[0], tokens[2]]