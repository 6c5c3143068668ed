"""Escape codes, colors and alignment modes."""

from enum import Enum

# Control sequence pieces: ESC '[' <codes> 'm'
ESC_CODE = "\x1b"
CSI_CODE = "["
END_CODE = "m"

# Graphics modes
RESET_ALL_MODES = "0"
BOLD_MODE = "1"
FAINT_MODE = "2"
ITALICIZE_MODE = "3"
UNDERLINE_MODE = "4"
SLOW_BLINK_MODE = "5"
RAPID_BLINK_MODE = "6"
INVERSE_MODE = "7"
HIDDEN_MODE = "8"
STRIKE_THROUGH_MODE = "9"

ELLIPSIS = "..."


class ForegroundColor(str, Enum):
    """Foreground colors (30-37)."""

    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    WHITE = "37"


class BrightForegroundColor(str, Enum):
    """Bright foreground colors (90-97)."""

    BRIGHT_BLACK = "90"
    BRIGHT_RED = "91"
    BRIGHT_GREEN = "92"
    BRIGHT_YELLOW = "93"
    BRIGHT_BLUE = "94"
    BRIGHT_MAGENTA = "95"
    BRIGHT_CYAN = "96"
    BRIGHT_WHITE = "97"


class BgColor(str, Enum):
    """Background colors (40-47)."""

    BLACK = "40"
    RED = "41"
    GREEN = "42"
    YELLOW = "43"
    BLUE = "44"
    MAGENTA = "45"
    CYAN = "46"
    WHITE = "47"


class BrightBgColor(str, Enum):
    """Bright background colors (100-107)."""

    BRIGHT_BLACK = "100"
    BRIGHT_RED = "101"
    BRIGHT_GREEN = "102"
    BRIGHT_YELLOW = "103"
    BRIGHT_BLUE = "104"
    BRIGHT_MAGENTA = "105"
    BRIGHT_CYAN = "106"
    BRIGHT_WHITE = "107"


class Alignment(str, Enum):
    """
    Alignment of the text in a table cell.

    Horizontal modes are matched by prefix (``left``, ``center``, ``right``)
    and vertical modes by suffix (``top``, ``middle``, ``bottom``), so the
    combined values such as ``right-bottom`` drive both axes.
    """

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"

    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"

    LEFT_TOP = "left-top"
    LEFT_MIDDLE = "left-middle"
    LEFT_BOTTOM = "left-bottom"

    CENTER_TOP = "center-top"
    CENTER_MIDDLE = "center-middle"
    CENTER_BOTTOM = "center-bottom"

    RIGHT_TOP = "right-top"
    RIGHT_MIDDLE = "right-middle"
    RIGHT_BOTTOM = "right-bottom"
