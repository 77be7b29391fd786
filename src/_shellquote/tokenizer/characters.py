from enum import Enum, auto, unique

SEPARATORS = " \n\t"
SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
ESCAPE = "\\"
NEWLINE = "\n"

# Inside double quotes, a backslash only escapes these characters.
DOUBLE_QUOTE_ESCAPES = "$`\"\n\\"


@unique
class ScanState(Enum):
    RAW = auto()
    ESCAPED = auto()
    SINGLE_QUOTED = auto()
    DOUBLE_QUOTED = auto()

    @classmethod
    def opened_by(cls):
        """
        :returns: The states entered from RAW when
            the given character is read.
        """
        return {
            SINGLE_QUOTE: cls.SINGLE_QUOTED,
            DOUBLE_QUOTE: cls.DOUBLE_QUOTED,
            ESCAPE: cls.ESCAPED,
        }
