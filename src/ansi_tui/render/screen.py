"""Terminal control sequences and frame-fitting helpers."""

from __future__ import annotations

import base64

from ansi_tui.codec.ansi_text import string_width, truncate

ESC = '\x1b'
CSI = ESC + '['
BEL = '\x07'


# Cursor movement
def cursor_up(n: int = 1) -> str:
    return f"{CSI}{n}A"


def cursor_down(n: int = 1) -> str:
    return f"{CSI}{n}B"


def cursor_forward(n: int = 1) -> str:
    return f"{CSI}{n}C"


def cursor_back(n: int = 1) -> str:
    return f"{CSI}{n}D"


def cursor_to(row: int, col: int) -> str:
    """Move cursor to position (1-indexed)."""
    return f"{CSI}{row};{col}H"


CURSOR_HOME = f"{CSI}H"
CURSOR_SAVE = f"{CSI}s"
CURSOR_RESTORE = f"{CSI}u"

# Cursor visibility
CURSOR_HIDE = f"{CSI}?25l"
CURSOR_SHOW = f"{CSI}?25h"

# Screen clearing
CLEAR_SCREEN = f"{CSI}2J"
CLEAR_LINE = f"{CSI}K"
CLEAR_LINE_BEFORE = f"{CSI}1K"
CLEAR_LINE_FULL = f"{CSI}2K"
CLEAR_BELOW = f"{CSI}J"

# Alternate screen buffer
ENTER_ALT_SCREEN = f"{CSI}?1049h"
EXIT_ALT_SCREEN = f"{CSI}?1049l"

# Mouse tracking
ENABLE_MOUSE_NORMAL = f"{CSI}?1000h"
DISABLE_MOUSE_NORMAL = f"{CSI}?1000l"
ENABLE_MOUSE_CELL_MOTION = f"{CSI}?1002h"
DISABLE_MOUSE_CELL_MOTION = f"{CSI}?1002l"
ENABLE_MOUSE_ALL_MOTION = f"{CSI}?1003h"
DISABLE_MOUSE_ALL_MOTION = f"{CSI}?1003l"
ENABLE_MOUSE_SGR = f"{CSI}?1006h"
DISABLE_MOUSE_SGR = f"{CSI}?1006l"

# Focus reporting
ENABLE_FOCUS_REPORTING = f"{CSI}?1004h"
DISABLE_FOCUS_REPORTING = f"{CSI}?1004l"

# Bracketed paste
ENABLE_BRACKETED_PASTE = f"{CSI}?2004h"
DISABLE_BRACKETED_PASTE = f"{CSI}?2004l"

RESET = f"{CSI}0m"


def set_window_title(title: str) -> str:
    return f"{ESC}]2;{title}{BEL}"


def copy_to_clipboard(text: str) -> str:
    """OSC 52 clipboard copy, for terminals that support it."""
    encoded = base64.b64encode(text.encode('utf-8')).decode('ascii')
    return f"{ESC}]52;c;{encoded}{BEL}"


def content_to_lines(content: str) -> list[str]:
    """Split content into lines, handling CRLF and LF. Trailing blank lines are dropped."""
    lines = content.replace('\r\n', '\n').split('\n')
    while lines and not lines[-1]:
        lines.pop()
    return lines


def truncate_line(line: str, width: int, tail: str = "") -> str:
    """Truncate a line to fit within terminal width; width <= 0 disables."""
    if width <= 0 or string_width(line) <= width:
        return line
    return truncate(line, width, tail=tail)


def fit_content(content: str, width: int, height: int, tail: str = "") -> list[str]:
    """
    Fit content to screen dimensions.

    Keeps the last ``height`` lines on overflow and truncates each line to
    ``width``. Zero disables either limit.
    """
    lines = content_to_lines(content)
    if height > 0 and len(lines) > height:
        lines = lines[-height:]
    return [truncate_line(line, width, tail) for line in lines]


def lines_diff(old_lines: list[str], new_lines: list[str]) -> list[int]:
    """Indices of lines that differ (including lines present in only one)."""
    max_len = max(len(old_lines), len(new_lines))
    return [
        i for i in range(max_len)
        if i >= len(old_lines) or i >= len(new_lines) or old_lines[i] != new_lines[i]
    ]
