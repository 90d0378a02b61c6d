# shellfront

`shellfront` turns one line typed at a shell prompt into the structures a
shell needs before it can run anything. It checks the line for syntax
errors, splits it into typed tokens, expands `$VARIABLES`, and groups the
result into pipeline sections with their redirections.

It has no dependencies beyond the standard library and needs Python 3.10 or
later.

## Example

```python
from shellfront.pipeline import parse_line
from shellfront.tokens import ParseError, ShellState

state = ShellState(env={"USER": "alice"})

sections = parse_line('echo "hi $USER" | wc -c > out.txt', state)
# [Section(cmd=['echo', 'hi alice'], files=[]),
#  Section(cmd=['wc', '-c'],
#          files=[Redirection(file='out.txt', kind=<TokenType.TRUNC: 4>)])]

try:
    parse_line("ls |", state)
except ParseError as error:
    print(error, end="")   # bash: syntax error near unexpected token `|'
    print(state.rt_value)  # 2
```

## What it does with a line

`shellfront.pipeline.parse_line(line, state)` drops leading and trailing
spaces (an empty line gives an empty list) and then goes through these
steps.

1. **Prompt checks** (`shellfront.checks`)
   - `check_quotes` rejects an unmatched single or double quote.
   - `check_pipes` rejects a pipe at the start or end of the line, and `||`
     outside quotes.
   - `check_trailing_redirection` rejects a line that ends in `<` or `>`.
   - `check_prompt` runs all three.

2. **Tokenizing** (`shellfront.tokenizer`)
   - `tokenize(text, state)` splits the line into `Token` objects, each with
     a `TokenType`: words, blanks, `|`, `<`, `>`, `<<`, `>>`, quoted strings,
     `$` references, and `;` and `\`. A run of blanks becomes one `SPACES`
     token.
   - `clean_quotes` removes the quotes (see `remove_quotes`) and turns
     quoted tokens into `ARG` tokens. Double-quoted text has its variables
     expanded, unless it is the delimiter of a here-document; single-quoted
     text is kept as written.
   - `join_tokens` merges neighbouring word tokens (`"a"b` becomes `ab`),
     and `delete_token_type` drops every token of one kind.

3. **Expansion** (`shellfront.expander`)
   - `expand_variables(text, state)` replaces `$NAME` with its value from
     `state.env` (an unset variable gives nothing), `$?` with the pending
     signal status or else the last exit status, and `$0` with `bash`; any
     other digit after `$` is dropped. A `$` followed by a space or the end
     of the text stays as it is.
   - `lookup_variable(env, name)` gives a variable's value, `""` for one set
     without a value, and `None` for one that is not set.
   - `expand_tokens(tokens, state)` expands every `$` token. A value with
     spaces is split into several words. A token right after `<<` is left
     unexpanded (see `follows_heredoc`), and an empty expansion that is the
     target of `<`, `>` or `>>` is rejected as an ambiguous redirect.

4. **Token checks** (`shellfront.checks`)
   - `check_not_allowed` rejects `;` and `\`.
   - `check_heredoc_count` allows at most 16 here-documents on one line.
   - `check_next_types` rejects a redirection followed by another operator,
     and two pipes in a row.
   - `previous_kind(tokens, index)` returns a `Previous` value telling what
     comes before a token, looking past one blank.

5. **Sections** (`shellfront.sections`)
   - `build_sections(tokens)` cuts the token list at each pipe into
     `Section` objects, each holding its command words in `cmd` and a list
     of `Redirection` entries (`file`, `kind`) in `files`, in the order they
     were written. `is_redirection` tells whether a token kind is a
     redirection.

`prepare_tokens(text, state)` in `shellfront.pipeline` runs steps 2 to 4
on its own and returns the cleaned token list. `is_blank(text)` tells
whether a line holds only whitespace.

## State and errors

A `ShellState` (`shellfront.tokens`) carries what the front end needs
between lines: `env`, the environment variables; `rt_value`, the exit status
of the last command; `signal_num`, a pending signal status that `$?` reports
and then clears; and `current_dir`.

When a line is rejected, a `ParseError` is raised. Its `message` is the text
bash prints, newline included, and its `status` is the exit status the shell
takes on: 2 for syntax errors, 1 for an ambiguous redirect or two pipes in a
row, and `None` for too many here-documents, which leaves the previous status
alone. `parse_line` and `prepare_tokens` store that status in
`state.rt_value` before passing the error on.

`format_tokens(tokens)` renders a token list one token per line, such as
`Token 0 echo * Type:  10`, which is handy when looking at how a line was
split. `is_delimiter(char)` gives the `TokenType` of a special character, or
`None` for an ordinary one.

## What it does not do

`shellfront` only reads and checks lines. It does not prompt for input, keep
a history, handle signals, read here-documents, open redirection files, run
built-in or external commands, or connect pipelines. Those are left to the
program that uses the sections it returns.