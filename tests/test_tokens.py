import pytest

from minishell.tokens import (
    Token,
    TokenType,
    classify_tokens,
    define_words,
    format_tokens,
    pad_operators,
    split_line,
    split_with_quotes,
    tokenize,
)


def test_pad_operators_pipe():
    assert pad_operators("ls|wc") == "ls | wc"


@pytest.mark.parametrize(
    "line",
    ["ls|wc", "cat<in>>out", "a>>>b", "echo 'x|y' | cat", "cat << eof", ""],
)
def test_pad_operators_only_inserts_spaces(line):
    padded = pad_operators(line)
    assert padded.replace(" ", "") == line.replace(" ", "")
    assert len(padded) >= len(line)


def test_pad_operators_leaves_quoted_operators():
    line = 'echo "a|b>c"'
    assert pad_operators(line) == line


def test_pad_operators_already_spaced_is_unchanged():
    line = "ls -l | wc > out"
    assert pad_operators(line) == line


def test_split_line_pipeline():
    assert split_line("ls -l | wc") == ["ls", "-l", "|", "wc"]


def test_split_line_redirections_without_spaces():
    assert split_line("cat<in>>out") == ["cat", "<", "in", ">>", "out"]


def test_split_line_triple_greater():
    assert split_line("a>>>b") == ["a", ">>", ">", "b"]


def test_split_line_heredoc_is_not_merged():
    assert split_line("cat << eof") == ["cat", "<", "<", "eof"]


def test_split_line_quoted_word_ends_at_closing_quote():
    assert split_line('echo "hello world"x') == ["echo", '"hello world"', "x"]


def test_split_with_quotes_collapses_spaces():
    assert split_with_quotes("  a   b ") == ["a", "b"]


def test_split_with_quotes_empty():
    assert split_with_quotes("") == []
    assert split_with_quotes("    ") == []


def test_split_with_quotes_unclosed_quote_runs_to_end():
    assert split_with_quotes('"abc def') == ['"abc def']


def test_split_with_quotes_quote_inside_word_is_plain():
    assert split_with_quotes("a'b c'") == ["a'b", "c'"]


def test_split_with_quotes_empty_quotes():
    assert split_with_quotes('echo ""') == ["echo", '""']


def test_tokenize_matches_split_line():
    line = "grep -v x | sort > out"
    tokens = tokenize(line)
    assert [t.value for t in tokens] == split_line(line)
    assert all(t.type is TokenType.WORD for t in tokens)


def test_token_defaults_to_word():
    assert Token("ls").type is TokenType.WORD


def test_classify_tokens_full_line():
    tokens = tokenize("cat < in | grep x > out >> app")
    classify_tokens(tokens)
    assert [t.type for t in tokens] == [
        TokenType.COMMAND,
        TokenType.REDIRECT_IN,
        TokenType.INFILE,
        TokenType.PIPE,
        TokenType.COMMAND,
        TokenType.ARGS,
        TokenType.REDIRECT_OUT,
        TokenType.OUTFILE,
        TokenType.APPEND,
        TokenType.OUTFILE,
    ]


def test_classify_tokens_heredoc_and_quotes():
    tokens = [Token("cat"), Token("<<"), Token("eof"), Token('"'), Token("'")]
    classify_tokens(tokens)
    assert [t.type for t in tokens] == [
        TokenType.COMMAND,
        TokenType.HEREDOC,
        TokenType.ARGS,
        TokenType.DQUOTE,
        TokenType.SQUOTE,
    ]


def test_define_words_uses_existing_types():
    tokens = [Token("ls"), Token("|", TokenType.PIPE), Token("wc"), Token("-l")]
    define_words(tokens)
    assert [t.type for t in tokens] == [
        TokenType.COMMAND,
        TokenType.PIPE,
        TokenType.COMMAND,
        TokenType.ARGS,
    ]


def test_define_words_leaves_heredoc_context():
    tokens = [Token("<<", TokenType.HEREDOC), Token("eof")]
    define_words(tokens)
    assert tokens[0].type is TokenType.HEREDOC
    assert tokens[1].type is TokenType.COMMAND


def test_format_tokens_single_command():
    assert format_tokens(tokenize("ls")) == "[ls] type 8 \n\n"


def test_format_tokens_has_line_per_token():
    tokens = tokenize("ls | wc")
    text = format_tokens(tokens)
    lines = text.split("\n")
    assert len(lines) == len(tokens) + 2
    assert lines[1] == f"[|] type {int(TokenType.PIPE)} "