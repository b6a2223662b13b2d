"""The commands the shell runs itself: echo, cd, export, unset, env and exit."""

from __future__ import annotations

import os
from typing import Sequence, TextIO

from minishell.environment import Environment

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_QUOTES = "'\""


class ShellExit(Exception):
    """Raised to leave the shell with an exit code."""

    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


def atoi(text: str) -> int:
    """Read a leading signed decimal number, ignoring what follows; 0 if there is none."""
    i = 0
    length = len(text)
    while i < length and text[i] in _WHITESPACE:
        i += 1
    sign = 1
    if i < length and text[i] in "+-":
        if text[i] == "-":
            sign = -1
        i += 1
    result = 0
    while i < length and text[i] in _DIGITS:
        result = result * 10 + int(text[i])
        i += 1
    value = sign * result
    return (value + 2**31) % 2**32 - 2**31


def is_numeric(text: str) -> bool:
    """Tell whether ``text`` is an optional sign followed by at least one digit."""
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    return bool(body) and all(char in _DIGITS for char in body)


def is_echo_flag(arg: str) -> bool:
    """Tell whether ``arg`` is an echo option that suppresses the newline."""
    if not arg.startswith("-n"):
        return False
    rest = arg[1:].lstrip("n")
    return all(char in "eEn" for char in rest)


def echo(args: Sequence[str], out: TextIO) -> None:
    """Write the arguments after the command name, separated by spaces."""
    i = 1
    no_newline = False
    while i < len(args) and is_echo_flag(args[i]):
        no_newline = True
        i += 1
    words = list(args[i:])
    for current, following in zip(words, words[1:] + [None]):
        out.write(current)
        if following is None or current == "":
            continue
        glued = current[-1] in _QUOTES and following[:1] not in ("'", '"')
        if not glued:
            out.write(" ")
    if not no_newline:
        out.write("\n")


def cd(args: Sequence[str], env: Environment, err: TextIO) -> int:
    """Change the working directory; with no argument or ``~`` go to HOME."""
    if len(args) < 2 or args[1].startswith("~"):
        home = env.get("HOME")
        if home is None:
            err.write("minishell: cd: HOME not set\n")
            return 1
        target = home
    elif len(args) > 2:
        err.write("minishell: cd: too many arguments\n")
        return 1
    else:
        target = args[1]
    try:
        os.chdir(target)
    except OSError as exc:
        err.write(f"minishell: cd: {exc.strerror}\n")
        return 1
    return 0


def is_valid_export(arg: str) -> bool:
    """Tell whether ``arg`` is a ``KEY=VALUE`` assignment export accepts."""
    index = arg.find("=")
    if index <= 0:
        return False
    if arg[index - 1] == " " or arg[index + 1 : index + 2] == " ":
        return False
    return arg[0] not in _DIGITS


def print_export(env: Environment, out: TextIO) -> int:
    """Sort the environment by key and list it as ``declare -x`` lines."""
    env.sort()
    for key, value in env.items():
        out.write(f'declare -x {key}="{value}"\n')
    return 0


def export(args: Sequence[str], env: Environment, out: TextIO) -> int:
    """Set each ``KEY=VALUE`` argument; with none, list the environment."""
    if len(args) < 2:
        return print_export(env, out)
    for arg in args[1:]:
        if not is_valid_export(arg):
            out.write(f"minishell: export: `{arg}': not a valid identifier\n")
            continue
        env.assign(arg)
    return 0


def unset(args: Sequence[str], env: Environment) -> int:
    """Remove each named variable; unknown names are ignored."""
    for key in args[1:]:
        env.remove(key)
    return 0


def print_env(env: Environment, out: TextIO) -> None:
    """Write every variable as ``KEY=VALUE``."""
    for key, value in env.items():
        out.write(f"{key}={value}\n")


def exit_shell(args: Sequence[str], out: TextIO, err: TextIO) -> None:
    """Announce the exit and raise ShellExit with the requested code."""
    code = 0
    if len(args) > 1:
        code = atoi(args[1])
        if not is_numeric(args[1]):
            out.write("exit\n")
            err.write(f"minishell: exit: {args[1]}: numeric argument required\n")
            raise ShellExit(255)
    out.write("exit\n")
    raise ShellExit(code)