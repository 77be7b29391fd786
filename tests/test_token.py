import io

import pytest
from hypothesis import given

from _shellquote.errors import (
    SplitError,
    UnterminatedDoubleQuoteError,
    UnterminatedEscapeError,
    UnterminatedSingleQuoteError,
)
from _shellquote.tokenizer import split, token

from .generators.shell_words import shell_lines
from .test_split import simple_split_cases


@pytest.fixture
def garbage_buffer():
    return io.StringIO("buffer is filled with garbage contents")


@pytest.mark.parametrize("line, expected", simple_split_cases)
def test_token(garbage_buffer, line, expected):
    buffer = garbage_buffer
    rest = line
    for i, expected_word in enumerate(expected):
        assert rest != "", f"consumed {line!r} after {i} words, expected {expected}"
        word, rest, buffer = token(rest, buffer)
        assert word == expected_word
    assert token(rest, buffer)[:2] == ("", "")


def test_token_reuses_buffer(garbage_buffer):
    word, rest, buffer = token("a b", garbage_buffer)
    assert buffer is garbage_buffer
    assert (word, rest) == ("a", "b")
    word, rest, buffer = token(rest, buffer)
    assert buffer is garbage_buffer
    assert (word, rest) == ("b", "")


def test_token_creates_buffer():
    word, rest, buffer = token("'a b' c")
    assert isinstance(buffer, io.StringIO)
    assert (word, rest) == ("a b", "c")


def test_token_returns_rest_after_separator():
    assert token("  foo   bar ")[:2] == ("foo", "  bar ")


@pytest.mark.parametrize("line", ["", "   ", " \t\n", "\\\n  \\\n"])
def test_token_no_more_words(garbage_buffer, line):
    assert token(line, garbage_buffer) == ("", "", garbage_buffer)


@pytest.mark.parametrize(
    "line, error",
    [
        ("don't", UnterminatedSingleQuoteError),
        ('"foo', UnterminatedDoubleQuoteError),
        ("foo\\", UnterminatedEscapeError),
        ("   \\", UnterminatedEscapeError),
    ],
)
def test_token_error(line, error):
    with pytest.raises(error):
        token(line)


@given(shell_lines)
def test_token_agrees_with_split(line):
    error = None
    try:
        expected = split(line)
    except SplitError as err:
        expected = err.words
        error = type(err)

    words = []
    rest = line
    buffer = None
    for _ in expected:
        word, rest, buffer = token(rest, buffer)
        words.append(word)
    assert words == expected

    if error is None:
        assert token(rest, buffer)[:2] == ("", "")
    else:
        with pytest.raises(error):
            token(rest, buffer)
