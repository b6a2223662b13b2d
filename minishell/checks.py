"""Early checks on an input line and its tokens."""

from __future__ import annotations

from typing import Iterable

from minishell.tokens import Token

NEWLINE_ERROR = "syntax error near unexpected token `newline'"
NOT_FOUND_ERROR = "command not found"


class ShellSyntaxError(Exception):
    """Raised when an input line is rejected before it is parsed."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def check_command(line: str) -> str:
    """Return ``line`` unchanged if it passes the checks, else raise ShellSyntaxError."""
    seen_double_quote = False
    for i, char in enumerate(line):
        if char == '"':
            seen_double_quote = True
        if char == ">" and i + 1 == len(line):
            raise ShellSyntaxError(NEWLINE_ERROR)
        if (
            not seen_double_quote
            and line.startswith("echo", i)
            and line[i + 4 : i + 5] != " "
        ):
            raise ShellSyntaxError(NOT_FOUND_ERROR)
    return line


def has_unmatched_quotes(tokens: Iterable[Token]) -> bool:
    """Tell whether any token leaves a single or double quote open."""
    for token in tokens:
        in_double = False
        in_single = False
        for char in token.value or "":
            if char == '"' and not in_single:
                in_double = not in_double
            elif char == "'" and not in_double:
                in_single = not in_single
        if in_single != in_double:
            return True
    return False