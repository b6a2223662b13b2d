"""Grouping tokens into the commands of a pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from minishell.checks import has_unmatched_quotes
from minishell.expander import expand_tokens, strip_mixed_quotes
from minishell.tokens import Token

_PIPE = "|"


class UnmatchedQuotesError(Exception):
    """Raised when a token leaves a quote open."""

    def __init__(self, message: str = "Error: Unmatched quotes") -> None:
        super().__init__(message)
        self.message = message


@dataclass
class Command:
    """One command of a pipeline: its arguments and its position, counted from 1."""

    args: List[str] = field(default_factory=list)
    number: int = 0


def build_command(
    tokens: Sequence[Token], number: int
) -> Tuple[Command, List[Token]]:
    """Build a command from the leading tokens up to a pipe.

    The first token triggers quote removal on every token from there to the
    end of the sequence. Returns the command and the tokens after the pipe.
    """
    command = Command(number=number)
    remaining = list(tokens)
    position = 0
    while position < len(remaining) and remaining[position].value != _PIPE:
        token = remaining[position]
        if not command.args:
            expand_tokens(remaining[position:])
            command.args.append(token.value)
        elif "'" in token.value and '"' in token.value:
            command.args.append(strip_mixed_quotes(token.value))
        else:
            command.args.append(token.value)
        position += 1
    if position < len(remaining) and remaining[position].value == _PIPE:
        position += 1
    return command, remaining[position:]


def split_commands(tokens: Sequence[Token]) -> List[Command]:
    """Split a token list at pipes into numbered commands."""
    if has_unmatched_quotes(tokens):
        raise UnmatchedQuotesError()
    commands: List[Command] = []
    remaining = list(tokens)
    number = 1
    while remaining:
        command, remaining = build_command(remaining, number)
        commands.append(command)
        number += 1
    return commands


def format_commands(commands: Sequence[Command]) -> str:
    """Render the commands and their arguments, one block per command."""
    blocks = []
    for command in commands:
        lines = [f"Command {command.number}:\n"]
        lines.extend(f"arg[{i}]:{arg}\n" for i, arg in enumerate(command.args))
        lines.append("\n")
        blocks.append("".join(lines))
    return "".join(blocks)