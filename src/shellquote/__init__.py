import shellquote.version
from _shellquote.errors import (
    SplitError,
    UnterminatedDoubleQuoteError,
    UnterminatedEscapeError,
    UnterminatedSingleQuoteError,
)
from _shellquote.tokenizer import iter_split, split, token
from _shellquote.writing import join, quote

__author__ = """Equinor"""
__email__ = "fg_sib-scout@equinor.com"

__version__ = shellquote.version.version

__all__ = [
    "SplitError",
    "UnterminatedDoubleQuoteError",
    "UnterminatedEscapeError",
    "UnterminatedSingleQuoteError",
    "iter_split",
    "join",
    "quote",
    "split",
    "token",
]
