# minishell

The pieces of a small POSIX-style shell, usable from Python: checking a
command line for syntax errors, splitting it into pipeline segments and
words, expanding variables and removing quotes, keeping an ordered
environment, and running the shell's own built-in commands.

## Installing

```
pip install .
```

## Modules

### `minishell.syntax`

`check_syntax(line)` runs every check in order and raises the first problem
found. The checks can also be called one by one:

- `check_quotes(line)`: an unclosed single or double quote.
- `check_pipes(line)`: a pipe at the start, two pipes in a row, or a pipe at
  the end.
- `check_redirections(line)`: a `<`, `>`, `<<` or `>>` with no target, or a
  tripled operator.
- `check_heredoc_count(line)`: more than 16 `<<` on one line.

Syntax problems raise `ShellSyntaxError` with `status` 258; too many
here-documents raise `HeredocLimitError` with `status` 2. Both carry the
error text in `message`.

```python
from minishell.syntax import check_syntax, ShellSyntaxError

try:
    check_syntax("echo hi |")
except ShellSyntaxError as exc:
    print(exc.status, exc.message)
    # 258 minishell: syntax error: unexpected end of file
```

### `minishell.lexer`

- `pad_redirections(line)` puts spaces around unquoted redirection operators:
  `"cat<in>>out"` becomes `"cat < in >> out"`.
- `split_pipes(line)` splits on pipes outside quotes and drops empty pieces:
  `'echo "a|b" | wc'` gives `['echo "a|b" ', ' wc']`.
- `split_words(segment)` splits on blanks; spaces inside quotes are kept and
  tabs always separate: `'echo "a b"  c'` gives `['echo', '"a b"', 'c']`.

### `minishell.environment`

`Environment` keeps variables in insertion order. A value of `None` means the
variable is declared but has no value.

- `Environment(entries)` takes `KEY=VALUE` strings.
- `get`, `set`, `remove`, `in`, and iteration over `(key, value)` pairs.
- `to_list()` returns `KEY=VALUE` strings for variables that have a value.
- `declarations()` returns `declare -x` lines sorted by key.

`parse_assignment(text)` splits `KEY=VALUE`, `KEY+=VALUE` or a bare `KEY`
into `(key, value, append)`.

### `minishell.expand`

- `expand_variables(text, env, status)` expands `$NAME` and `$?` (to
  `status`).
- `quote_segments(word)` splits a word into `(text, quote)` pieces.
- `expand_word(word, env, status)` removes quotes and expands variables
  everywhere except inside single quotes.
- `strip_quotes(word)` removes quotes without expanding.

```python
from minishell.environment import Environment
from minishell.expand import expand_word

env = Environment(["HOME=/home/user"])
print(expand_word("\"$HOME\"/'$HOME'", env, 0))   # /home/user/$HOME
```

### `minishell.builtins`

Each built-in writes to the text streams it is given and returns an exit
status:

| Function | Command |
|----------|---------|
| `echo(args, out)` | prints its arguments; leading `-n` / `-nnn` flags drop the newline |
| `pwd(out, err)` | prints the working directory |
| `cd(args, env, err)` | changes directory (to `$HOME` with no argument) and updates `PWD` / `OLDPWD` if they exist |
| `print_env(env, out)` | prints variables that have a value |
| `export(args, env, out, err)` | sets variables (`NAME=value`, `NAME+=more`, `NAME`); with no arguments lists them as `declare -x` lines |
| `unset(args, env, err)` | removes variables; `_` is never removed |
| `exit_builtin(args, status, out, err)` | raises `ShellExit` carrying the exit status |

`is_builtin(name)` tells whether a name is one of these, and
`run_builtin(name, args, env, out, err, status)` dispatches to the right one.

```python
import io
from minishell.builtins import run_builtin
from minishell.environment import Environment

env = Environment(["USER=guest"])
out, err = io.StringIO(), io.StringIO()
run_builtin("export", ["GREETING=hello"], env, out, err, 0)
run_builtin("echo", ["-n", env.get("GREETING")], env, out, err, 0)
print(out.getvalue())   # hello
```

## What this package does not do

There is no interactive prompt and no `minishell` command to run. The package
does not turn a line into commands with their redirections, does not read
here-document bodies, does not open redirection files, and does not start
external programs or connect them with pipes. It provides the checking,
splitting, expansion, environment and built-in parts only.

## Running the tests

```
pip install .[test]
pytest
```