"""Splitting an input line into tokens and classifying them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple

_OPERATORS = "|<>"
_QUOTES = "\"'"


class TokenType(IntEnum):
    """Kinds of token the parser distinguishes."""

    WORD = 0
    PIPE = 1
    REDIRECT_IN = 2
    REDIRECT_OUT = 3
    APPEND = 4
    HEREDOC = 5
    DQUOTE = 6
    SQUOTE = 7
    COMMAND = 8
    INFILE = 9
    OUTFILE = 10
    ARGS = 11


@dataclass
class Token:
    """A single word of an input line together with its kind."""

    value: str
    type: TokenType = TokenType.WORD


_OPERATOR_TYPES = {
    "|": TokenType.PIPE,
    ">": TokenType.REDIRECT_OUT,
    "<": TokenType.REDIRECT_IN,
    ">>": TokenType.APPEND,
    "<<": TokenType.HEREDOC,
    '"': TokenType.DQUOTE,
    "'": TokenType.SQUOTE,
}

_CONTEXT_TYPES = frozenset(
    {
        TokenType.PIPE,
        TokenType.REDIRECT_IN,
        TokenType.REDIRECT_OUT,
        TokenType.APPEND,
    }
)


def pad_operators(line: str) -> str:
    """Surround unquoted ``|``, ``<``, ``>`` and ``>>`` with spaces."""
    out: List[str] = []
    in_quotes = False
    quote_char = ""
    i = 0
    length = len(line)
    while i < length:
        char = line[i]
        if char in _QUOTES and not in_quotes:
            in_quotes = True
            quote_char = char
        elif char == quote_char:
            in_quotes = False
        if not in_quotes and char in _OPERATORS:
            if i > 0 and line[i - 1] != " ":
                out.append(" ")
            out.append(char)
            if char == ">" and line[i + 1 : i + 2] == ">":
                i += 1
                out.append(">")
            if line[i + 1 : i + 2] not in ("", " ", ">"):
                out.append(" ")
        else:
            out.append(char)
        i += 1
    return "".join(out)


def _extract_word(text: str, start: int) -> Tuple[str, int]:
    """Read one word beginning at ``start``; return it and the next position."""
    i = start
    quote = ""
    if text[i] in _QUOTES:
        quote = text[i]
        i += 1
    while i < len(text) and (quote or text[i] != " "):
        if quote and text[i] == quote:
            i += 1
            break
        i += 1
    return text[start:i], i


def split_with_quotes(text: str) -> List[str]:
    """Split on spaces, keeping a word that starts with a quote whole up to its closing quote."""
    words: List[str] = []
    i = 0
    length = len(text)
    while True:
        while i < length and text[i] == " ":
            i += 1
        if i >= length:
            break
        word, i = _extract_word(text, i)
        words.append(word)
    return words


def split_line(line: str) -> List[str]:
    """Split an input line into words, separating operators from their neighbours."""
    return split_with_quotes(pad_operators(line))


def tokenize(line: str) -> List[Token]:
    """Turn an input line into a list of untyped tokens."""
    return [Token(word) for word in split_line(line)]


def define_words(tokens: Iterable[Token]) -> None:
    """Give each word token its role: command, infile, outfile or argument."""
    context = TokenType.PIPE
    for token in tokens:
        if token.type is TokenType.WORD:
            if context is TokenType.PIPE:
                token.type = TokenType.COMMAND
            elif context is TokenType.REDIRECT_IN:
                token.type = TokenType.INFILE
            elif context in (TokenType.REDIRECT_OUT, TokenType.APPEND):
                token.type = TokenType.OUTFILE
            else:
                token.type = TokenType.ARGS
            context = TokenType.WORD
        elif token.type in _CONTEXT_TYPES:
            context = token.type


def classify_tokens(tokens: Sequence[Token]) -> None:
    """Assign operator types by value, then the roles of the remaining words."""
    for token in tokens:
        token.type = _OPERATOR_TYPES.get(token.value, TokenType.WORD)
    define_words(tokens)


def format_tokens(tokens: Sequence[Token]) -> str:
    """Classify the tokens and render one line per token with its numeric type."""
    classify_tokens(tokens)
    body = "".join(f"[{token.value}] type {int(token.type)} \n" for token in tokens)
    return body + "\n"