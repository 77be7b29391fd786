class SplitError(ValueError):
    """
    Base class for the errors raised when a line cannot be split into
    words. All of them are terminal: no words are produced after the
    failing one.

    :ivar position: Index in the input of the construct that was left
        open, ie. the opening quote or the trailing backslash.
    :ivar words: The words successfully split before the failure. Only
        informational, the line as a whole is invalid.
    """

    message = "Could not split line"

    def __init__(self, position=None, words=None):
        super().__init__(self.message)
        self.position = position
        self.words = [] if words is None else words

    def __str__(self):
        if self.position is None:
            return self.message
        return f"{self.message} at {self.position}"


class UnterminatedSingleQuoteError(SplitError):
    """
    Raised when a single quote is opened and no matching
    single quote is found before the end of input.
    """

    message = "Unterminated single-quoted string"


class UnterminatedDoubleQuoteError(SplitError):
    """
    Raised when a double quote is opened and no matching (unescaped)
    double quote is found before the end of input.
    """

    message = "Unterminated double-quoted string"


class UnterminatedEscapeError(SplitError):
    """
    Raised when the input ends with a backslash, so there is
    no character for it to escape.
    """

    message = "Unterminated backslash-escape"
