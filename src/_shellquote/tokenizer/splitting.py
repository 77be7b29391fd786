import io

from _shellquote.errors import SplitError, UnterminatedEscapeError
from _shellquote.tokenizer.characters import ESCAPE, NEWLINE, SEPARATORS
from _shellquote.tokenizer.word import split_word


def skip_separators(text, pos):
    """
    Skips separators and escaped newlines (line continuations)
    in front of a word.

    :returns: The index of the first character of the next word,
        or len(text) if there are no more words.
    :raises UnterminatedEscapeError: If text ends in a backslash.
    """
    end = len(text)
    while pos < end:
        char = text[pos]
        if char in SEPARATORS:
            pos += 1
            continue
        if char == ESCAPE:
            if pos + 1 == end:
                raise UnterminatedEscapeError(pos)
            if text[pos + 1] == NEWLINE:
                pos += 2
                continue
        break
    return pos


def iter_split(text):
    """
    Generates the words of text one at a time, see split.
    """
    buffer = io.StringIO()
    pos = skip_separators(text, 0)
    while pos < len(text):
        word, pos = split_word(text, pos, buffer)
        yield word
        pos = skip_separators(text, pos)


def split(text):
    """
    Splits text according to the word splitting rules of /bin/sh,
    ie. split("cp 'my file' a\\\\ b") == ["cp", "my file", "a b"].

    Supports backslash-escapes, single quotes and double quotes. $''
    quoting is not supported, and no expansion of any kind (variables,
    braces, pathnames, ...) is performed.

    :raises SplitError: One of UnterminatedSingleQuoteError,
        UnterminatedDoubleQuoteError or UnterminatedEscapeError if
        text has an unterminated quote or ends in a backslash. The words
        split before the error are available as the words attribute.
    """
    words = []
    try:
        for word in iter_split(text):
            words.append(word)
    except SplitError as err:
        err.words = words
        raise
    return words


def token(text, buffer=None):
    """
    Splits off the first word of text, see split.

    >>> word, rest, buffer = token("cp 'my file' dir")
    >>> word, rest
    ('cp', "'my file' dir")
    >>> word, rest, buffer = token(rest, buffer)
    >>> word, rest
    ('my file', 'dir')

    :param text: The text to split a word from.
    :param buffer: A text stream (io.StringIO) to accumulate the word in,
        typically the buffer returned from the previous call. A new buffer
        is created if not given. A buffer must not be shared between threads.
    :returns: Tuple of the word, the rest of the text following the word and
        the buffer. If text contains no more words, the word and the rest
        are both empty.
    """
    if buffer is None:
        buffer = io.StringIO()
    pos = skip_separators(text, 0)
    if pos == len(text):
        return "", "", buffer
    word, pos = split_word(text, pos, buffer)
    return word, text[pos:], buffer
