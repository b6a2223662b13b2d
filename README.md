# minishell

A small interactive shell. It reads lines from a prompt and splits them into
tokens, keeping quoted text together. It classifies the tokens as commands,
pipes, redirections, file names and arguments, and strips the quotes. It then
runs its built-in commands against an environment taken from the process.

## Running

```
pip install .
minishell
```

The prompt is `🎀 minishell> `. Line editing and history come from Python's
`readline` module where it is available. These built-ins are recognised:

- `echo [-n] words...` prints its arguments separated by spaces. `-n`, and
  flags such as `-nnn` or `-neE`, leave out the final newline.
- `pwd` prints the working directory.
- `cd [dir]` changes directory. With no argument, or with an argument that
  starts with `~`, it goes to `$HOME`.
- `env` lists the environment as `KEY=value` lines.
- `export NAME=value ...` sets variables. With no arguments it sorts the
  variables by name and prints them as `declare -x NAME="value"`. Arguments
  without `=`, or that start with a digit, are reported as not valid
  identifiers.
- `unset NAME ...` removes variables. Unknown names are ignored.
- `exit [n]` prints `exit` and leaves the shell with status `n`. A
  non-numeric argument leaves with status 255.

When the input ends (Ctrl-D), the shell prints `exit` and leaves with status 0.

Some lines are rejected before they run:

- A line ending in `>` reports ``syntax error near unexpected token `newline'``.
- Some lines report `command not found`: those where `echo` appears before any
  double quote and is not followed by a space, such as a bare `echo`.

These lines print their message and the prompt returns.

## Using it as a library

```python
import io
from minishell.environment import Environment
from minishell.shell import run_line

env = Environment.from_strings(["HOME=/tmp", "USER=demo"])
out = io.StringIO()
run_line("export GREETING=hello", env, out, io.StringIO())
run_line('echo "quoted words" plain', env, out, io.StringIO())
print(out.getvalue())   # quoted words plain
```

The pieces can also be used on their own:

- `minishell.tokens`
  - `tokenize` splits a line into `Token` objects.
  - `classify_tokens` and `define_words` assign each token a `TokenType`.
- `minishell.checks`
  - `check_command` raises `ShellSyntaxError` for rejected lines.
  - `has_unmatched_quotes` reports whether a token leaves a quote open.
- `minishell.expander` removes quotes from token values.
- `minishell.commands.split_commands` groups tokens at pipes into numbered
  `Command` objects. It raises `UnmatchedQuotesError` when a quote is left open.
- `minishell.environment.Environment` holds the variables in definition order.
- `minishell.builtins` holds each built-in. `exit_shell` raises `ShellExit`
  carrying the exit code.
- `minishell.shell`
  - `run_line` and `execute_commands` run lines and commands.
  - `repl` is the read loop; it takes any line-reading function.

## What it does not do

- It does not start external programs. Only the built-ins above run, and other
  command names are silently ignored.
- Pipes and redirections (`|`, `<`, `>`, `>>`, `<<`) are tokenized and
  classified, but not carried out.
  - A line containing `|` runs each of its parts one after another, on the
    same output.
  - For `export`, `unset` and `cd`, the built-in is chosen by the first
    command's name.
  - `exit` takes its code from the first command.
- There is no variable expansion: `$NAME` is passed through as written.
- A line with an unmatched quote prints `Error: Unmatched quotes` and ends the
  shell with status 1. An empty line also ends the shell with status 1.

## Tests

```
pip install .[test]
pytest
```