"""ANSI escape sequences for styling terminal text."""

from enum import Enum


class Style(str, Enum):
    """Terminal text attributes and colours."""

    PLAIN = "\x1b[0m"
    BOLD = "\x1b[1m"
    DIM = "\x1b[2m"
    ITALIC = "\x1b[3m"
    UNDERLINED = "\x1b[4m"
    BLINKING = "\x1b[5m"
    INVERTED_COLOUR = "\x1b[7m"
    STRIKETHROUGHED = "\x1b[9m"

    RESET_ALL = "\x1b[0m"
    RESET_BOLD = "\x1b[21m"
    RESET_DIM = "\x1b[22m"
    RESET_ITALIC = "\x1b[23m"
    RESET_UNDERLINED = "\x1b[24m"
    RESET_BLINKING = "\x1b[25m"
    RESET_INVERTED_COLOUR = "\x1b[27m"
    RESET_STRIKETHROUGHED = "\x1b[29m"

    TEXT_BLACK = "\x1b[30m"
    TEXT_RED = "\x1b[91m"
    TEXT_GREEN = "\x1b[92m"
    TEXT_YELLOW = "\x1b[93m"
    TEXT_BLUE = "\x1b[34m"
    TEXT_MAGENTA = "\x1b[95m"
    TEXT_CYAN = "\x1b[36m"
    TEXT_WHITE = "\x1b[97m"

    BACKGROUND_BLACK = "\x1b[40m"
    BACKGROUND_RED = "\x1b[41m"
    BACKGROUND_GREEN = "\x1b[42m"
    BACKGROUND_YELLOW = "\x1b[43m"
    BACKGROUND_BLUE = "\x1b[44m"
    BACKGROUND_MAGENTA = "\x1b[45m"
    BACKGROUND_CYAN = "\x1b[46m"
    BACKGROUND_WHITE = "\x1b[107m"


def styled(text, *args):
    """Wrap ``text`` in the given styles, resetting all attributes afterwards.

    Each style may be a :class:`Style` member or its escape sequence; an
    unknown sequence raises ``ValueError``. With no styles the text is
    returned unchanged.
    """
    if not args:
        return text
    prefix = "".join(Style(style).value for style in args)
    return f"{prefix}{text}{Style.RESET_ALL.value}"