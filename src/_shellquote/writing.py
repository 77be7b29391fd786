import re
import warnings

_unsafe_character = re.compile(r"[^\w@%+=:,./-]", re.ASCII).search


def quote(word):
    """
    Quote a word so that it is split back into exactly that word,
    ie. quote("don't") == "'don'\\\\''t'".

    Words consisting only of letters, digits and @%+=:,./-_ are
    returned as they are, anything else is single quoted.
    """
    if not isinstance(word, str):
        raise TypeError(f"Can only quote str, got {type(word).__name__}: {word!r}")
    if "\0" in word:
        warnings.warn(
            f"Quoting word containing zero-character {word!r}, "
            "it cannot be passed as a command line argument.",
            stacklevel=2,
        )
    if not word:
        return "''"
    if _unsafe_character(word) is None:
        return word
    return "'" + word.replace("'", "'\\''") + "'"


def join(words):
    """
    Joins words into one line, quoting as needed, such
    that split(join(words)) == list(words).
    """
    return " ".join(quote(word) for word in words)
