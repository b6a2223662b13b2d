"""Removing quote characters from token values."""

from __future__ import annotations

from typing import Iterable

from minishell.tokens import Token

_EMPTY_QUOTES = frozenset({'""', "''"})


def strip_mixed_quotes(value: str) -> str:
    """Drop the quotes that open or close a quoted run, keeping quotes nested in the other kind."""
    result = []
    inside_double = False
    inside_single = False
    for char in value:
        if char == '"' and not inside_single:
            inside_double = not inside_double
        elif char == "'" and not inside_double:
            inside_single = not inside_single
        else:
            result.append(char)
    return "".join(result)


def strip_double_quotes(value: str) -> str:
    """Drop double quotes that are not preceded by a backslash, keeping what they enclose."""
    result = []
    i = 0
    length = len(value)
    while i < length:
        if value[i] == '"' and (i == 0 or value[i - 1] != "\\"):
            i += 1
            while i < length and value[i] != '"':
                result.append(value[i])
                i += 1
            if i < length:
                i += 1
        else:
            result.append(value[i])
            i += 1
    return "".join(result)


def strip_single_quotes(value: str) -> str:
    """Drop every single quote."""
    return "".join(char for char in value if char != "'")


def expand_tokens(tokens: Iterable[Token]) -> None:
    """Remove quoting from every token value in place."""
    for token in tokens:
        value = token.value
        if value is None:
            continue
        if value in _EMPTY_QUOTES:
            token.value = ""
            continue
        has_single = "'" in value
        has_double = '"' in value
        if has_single and has_double:
            token.value = strip_mixed_quotes(value)
        elif has_single:
            token.value = strip_single_quotes(value)
        elif has_double:
            token.value = strip_double_quotes(value)