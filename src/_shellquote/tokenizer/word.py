from _shellquote.errors import (
    UnterminatedDoubleQuoteError,
    UnterminatedEscapeError,
    UnterminatedSingleQuoteError,
)
from _shellquote.tokenizer.characters import (
    DOUBLE_QUOTE,
    DOUBLE_QUOTE_ESCAPES,
    ESCAPE,
    NEWLINE,
    SEPARATORS,
    SINGLE_QUOTE,
    ScanState,
)

_opened_by = ScanState.opened_by()


def reset_buffer(buffer):
    buffer.seek(0)
    buffer.truncate()


def split_word(text, pos, buffer):
    """
    Split one word off the text, ie. for text containing 'foo"bar baz" qux'
    and pos=0, writes 'foobar baz' to buffer and returns ('foobar baz', 13).

    Literal text is written to the buffer in spans: everything between the
    start of the current span and the cursor is flushed when a quote,
    backslash, separator or the end of text is reached.

    :param text: The whole input line.
    :param pos: Index of the first character of the word, separators
        in front of the word must already be skipped.
    :param buffer: A text stream (io.StringIO) used to accumulate
        the word. Its previous contents are discarded.
    :returns: The word and the index in text following the word
        and its terminating separator.
    :raises SplitError: If a quote or escape is left open.
    """
    reset_buffer(buffer)
    end = len(text)
    state = ScanState.RAW
    opened_at = pos

    while True:
        if state == ScanState.RAW:
            start = pos
            while pos < end:
                char = text[pos]
                if char in SEPARATORS:
                    buffer.write(text[start:pos])
                    return buffer.getvalue(), pos + 1
                if char in _opened_by:
                    break
                pos += 1
            buffer.write(text[start:pos])
            if pos == end:
                return buffer.getvalue(), pos
            state = _opened_by[text[pos]]
            opened_at = pos
            pos += 1
        elif state == ScanState.ESCAPED:
            if pos == end:
                raise UnterminatedEscapeError(opened_at)
            # An escaped newline is a line continuation and is dropped
            if text[pos] != NEWLINE:
                buffer.write(text[pos])
            pos += 1
            state = ScanState.RAW
        elif state == ScanState.SINGLE_QUOTED:
            closing = text.find(SINGLE_QUOTE, pos)
            if closing == -1:
                raise UnterminatedSingleQuoteError(opened_at)
            buffer.write(text[pos:closing])
            pos = closing + 1
            state = ScanState.RAW
        else:
            pos = split_double_quoted(text, pos, buffer, opened_at)
            state = ScanState.RAW


def split_double_quoted(text, pos, buffer, opened_at):
    """
    Write the contents of a double quoted span to buffer.

    Only the characters in DOUBLE_QUOTE_ESCAPES can be escaped, for
    any other character both the backslash and the character are
    kept, ie. '"a\\\\b"' gives 'a\\\\b' while '"a\\\\$"' gives 'a$'.

    :param pos: Index of the first character after the opening quote.
    :param opened_at: Index of the opening quote, used for errors.
    :returns: The index following the closing quote.
    """
    end = len(text)
    start = pos
    while pos < end:
        char = text[pos]
        if char == DOUBLE_QUOTE:
            buffer.write(text[start:pos])
            return pos + 1
        if char == ESCAPE:
            escaped = text[pos + 1 : pos + 2]
            if escaped and escaped in DOUBLE_QUOTE_ESCAPES:
                buffer.write(text[start:pos])
                if escaped != NEWLINE:
                    buffer.write(escaped)
                start = pos + 2
            pos += 2
        else:
            pos += 1
    raise UnterminatedDoubleQuoteError(opened_at)
