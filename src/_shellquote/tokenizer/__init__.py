"""
In this module, a line of text is split into words according to the
lexical rules /bin/sh uses for argument splitting.

The scanner is a state machine over the characters of the line, with the
states raw, escaped, single quoted and double quoted (see ScanState).
Words are delimited by unquoted space, tab or newline, and adjacent
quoted and unquoted spans with no separator between them make up one
word, ie. 'foo"bar"baz' is the single word 'foobarbaz'.

The line can either be split as a whole (split, iter_split) or one word at
a time (token). token hands its accumulation buffer back to the caller so
that it can be reused for the next word, but gives exactly the same words
and errors as split.

No expansion is performed, that is, '$HOME', '*' and '~' are all
kept as they are.
"""

from .splitting import iter_split, skip_separators, split, token

__all__ = ["iter_split", "skip_separators", "split", "token"]
