"""Running command lines and the interactive loop."""

from __future__ import annotations

import os
import sys
from typing import Callable, List, Optional, Sequence, TextIO

from minishell.builtins import (
    ShellExit,
    cd,
    echo,
    exit_shell,
    export,
    print_env,
    unset,
)
from minishell.checks import ShellSyntaxError, check_command
from minishell.commands import Command, UnmatchedQuotesError, split_commands
from minishell.environment import Environment
from minishell.tokens import define_words, tokenize

PROMPT = "🎀 minishell> "


def execute_commands(
    commands: Sequence[Command], env: Environment, out: TextIO, err: TextIO
) -> int:
    """Run each command in turn and return the resulting status."""
    status = 0
    first_args: List[str] = list(commands[0].args) if commands else []
    first_name = first_args[0] if first_args else None
    for command in commands:
        if not command.args:
            continue
        name = command.args[0]
        if name == "pwd":
            try:
                out.write(os.getcwd() + "\n")
            except OSError:
                status = 1
        elif name == "echo":
            echo(command.args, out)
            status = 1
        elif name == "exit":
            # The exit code is read from the first command of the line.
            exit_shell(first_args, out, err)
        elif name == "env":
            print_env(env, out)
        # The remaining builtins are chosen by the first command's name.
        elif first_name == "export":
            export(command.args, env, out)
        elif first_name == "unset":
            unset(command.args, env)
        elif first_name == "cd":
            cd(command.args, env, err)
    return status


def run_line(
    line: str, env: Environment, out: TextIO, err: TextIO
) -> Optional[int]:
    """Check, parse and run one input line.

    Returns the status of the commands, or None when the line was rejected.
    Raises ShellExit when the line ends the shell.
    """
    try:
        check_command(line)
    except ShellSyntaxError as exc:
        out.write(exc.message + "\n")
        return None
    tokens = tokenize(line)
    define_words(tokens)
    try:
        commands = split_commands(tokens)
    except UnmatchedQuotesError as exc:
        out.write(exc.message + "\n")
        raise ShellExit(1) from exc
    if not commands:
        raise ShellExit(1)
    return execute_commands(commands, env, out, err)


def repl(
    env: Environment,
    read_line: Callable[[str], Optional[str]],
    out: TextIO,
    err: TextIO,
) -> int:
    """Read and run lines until end of input or exit; return the exit code."""
    while True:
        line = read_line(PROMPT)
        if line is None:
            out.write("exit\n")
            return 0
        try:
            run_line(line, env, out, err)
        except ShellExit as exc:
            return exc.code
        finally:
            out.flush()


def _read_input(prompt: str) -> Optional[str]:
    try:
        return input(prompt)
    except EOFError:
        return None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the interactive shell with the process environment."""
    try:
        import readline  # noqa: F401  (line editing and history for input())
    except ImportError:
        pass
    env = Environment.from_strings(
        f"{key}={value}" for key, value in os.environ.items()
    )
    if len(env) == 0:
        return 1
    return repl(env, _read_input, sys.stdout, sys.stderr) % 256


if __name__ == "__main__":
    sys.exit(main())