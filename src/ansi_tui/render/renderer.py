"""Frame renderer with line-level diffing."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from ansi_tui.render import screen as scr

logger = logging.getLogger(__name__)

MOUSE_MODES = {
    "normal": scr.ENABLE_MOUSE_NORMAL,
    "cell": scr.ENABLE_MOUSE_CELL_MOTION,
    "all": scr.ENABLE_MOUSE_ALL_MOTION,
}


@runtime_checkable
class ByteSink(Protocol):
    """Output side of the terminal driver."""

    def write(self, data: bytes) -> object:
        ...

    def flush(self) -> None:
        ...


@dataclass(frozen=True)
class Frame:
    """Display lines bound to the size they were fitted to."""
    lines: tuple[str, ...]
    width: int
    height: int


@dataclass
class RenderState:
    """What the terminal currently shows, as far as the renderer knows."""
    lines: list[str] = field(default_factory=list)
    lines_rendered: int = 0

    def reset(self) -> None:
        self.lines = []
        self.lines_rendered = 0


class FrameRenderer:
    """
    Repaint a terminal region from full-frame text.

    Each render is diffed line by line against the previous one and only
    changed lines are rewritten. The cursor is parked at column 0 of the
    last line after every render, so nothing else may write to the terminal
    between renders.

    Not thread-safe: one owner issues render calls sequentially.
    """

    def __init__(
        self,
        sink: Optional[ByteSink] = None,
        width: int = 0,
        height: int = 0,
        tail: str = "…",
        alt_screen: bool = False,
        hide_cursor: bool = True,
    ) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Invalid renderer size: {width}x{height}")
        self.sink = sink
        self.width = width
        self.height = height
        self.tail = tail
        self.use_alt_screen = alt_screen
        self.manage_cursor = hide_cursor
        self.state = RenderState()
        self._in_alt_screen = False
        self.running = False

    @property
    def size(self) -> tuple[int, int]:
        """Current target size as (width, height)."""
        return self.width, self.height

    def fit(self, content: str) -> Frame:
        """Fit content to the target size without rendering it."""
        if not content:
            content = " "
        lines = scr.fit_content(content, self.width, self.height, self.tail)
        return Frame(tuple(lines), self.width, self.height)

    def render(self, content: str) -> bytes:
        """
        Render content, write the update to the sink and return it.

        Content is a multi-line string; empty content renders as a blank line.
        """
        frame = self.fit(content)
        output = self._diff(list(frame.lines))
        data = output.encode('utf-8')
        self._write(data)
        return data

    def _diff(self, new_lines: list[str]) -> str:
        last_lines = self.state.lines
        lines_rendered = self.state.lines_rendered
        last_index = len(new_lines) - 1
        out: list[str] = []

        # Back to the top of the previous render
        if lines_rendered > 1:
            out.append(scr.cursor_up(lines_rendered - 1))

        for i, line in enumerate(new_lines):
            if i < len(last_lines) and last_lines[i] == line:
                if i < last_index:
                    out.append(scr.cursor_down(1))
                continue
            out.append('\r')
            out.append(line)
            out.append(scr.CLEAR_LINE)
            if i < last_index:
                out.append('\n')

        if lines_rendered > len(new_lines):
            out.append(scr.CLEAR_BELOW)

        out.append('\r')

        self.state.lines = new_lines
        self.state.lines_rendered = len(new_lines)
        return ''.join(out)

    def repaint(self) -> None:
        """Force a full repaint on next render."""
        self.state.reset()

    def update_size(self, width: int, height: int) -> None:
        """Update the target size (call on window resize)."""
        if width < 0 or height < 0:
            raise ValueError(f"Invalid renderer size: {width}x{height}")
        logger.debug("Renderer resized to %dx%d", width, height)
        self.width = width
        self.height = height
        self.repaint()

    def _write(self, data: bytes) -> None:
        if self.sink is None:
            return
        self.sink.write(data)
        self.sink.flush()

    def _write_text(self, text: str) -> None:
        self._write(text.encode('utf-8'))

    # Cursor control

    def show_cursor(self) -> None:
        self._write_text(scr.CURSOR_SHOW)

    def hide_cursor(self) -> None:
        self._write_text(scr.CURSOR_HIDE)

    def move_cursor(self, row: int, col: int) -> None:
        """Move cursor to position (1-indexed)."""
        self._write_text(scr.cursor_to(row, col))

    # Screen control

    def enter_alt_screen(self) -> None:
        """Enter the alternate screen buffer."""
        if self._in_alt_screen:
            return
        self._write_text(scr.ENTER_ALT_SCREEN + scr.CLEAR_SCREEN + scr.CURSOR_HOME)
        self._in_alt_screen = True
        self.repaint()

    def exit_alt_screen(self) -> None:
        """Exit the alternate screen buffer."""
        if not self._in_alt_screen:
            return
        self._write_text(scr.EXIT_ALT_SCREEN)
        self._in_alt_screen = False
        self.repaint()

    @property
    def in_alt_screen(self) -> bool:
        return self._in_alt_screen

    def clear_screen(self) -> None:
        self._write_text(scr.CLEAR_SCREEN + scr.CURSOR_HOME)
        self.repaint()

    # Terminal modes

    def enable_mouse(self, mode: str = "normal") -> None:
        """
        Enable mouse tracking with SGR-style reports.

        Mode can be:
            normal - Button events only
            cell   - Button events and motion while a button is held
            all    - All mouse events including motion
        """
        try:
            enable = MOUSE_MODES[mode]
        except KeyError:
            raise ValueError(f"Unknown mouse mode: {mode!r}") from None
        self._write_text(enable + scr.ENABLE_MOUSE_SGR)

    def disable_mouse(self) -> None:
        self._write_text(
            scr.DISABLE_MOUSE_SGR
            + scr.DISABLE_MOUSE_NORMAL
            + scr.DISABLE_MOUSE_CELL_MOTION
            + scr.DISABLE_MOUSE_ALL_MOTION
        )

    def enable_focus_reporting(self) -> None:
        self._write_text(scr.ENABLE_FOCUS_REPORTING)

    def disable_focus_reporting(self) -> None:
        self._write_text(scr.DISABLE_FOCUS_REPORTING)

    def enable_bracketed_paste(self) -> None:
        self._write_text(scr.ENABLE_BRACKETED_PASTE)

    def disable_bracketed_paste(self) -> None:
        self._write_text(scr.DISABLE_BRACKETED_PASTE)

    def set_window_title(self, title: str) -> None:
        self._write_text(scr.set_window_title(title))

    def copy_to_clipboard(self, text: str) -> None:
        """Copy text to the system clipboard (if the terminal supports OSC 52)."""
        self._write_text(scr.copy_to_clipboard(text))

    # Lifecycle

    def start(self) -> None:
        """Apply the configured cursor and screen options."""
        if self.manage_cursor:
            self.hide_cursor()
        if self.use_alt_screen:
            self.enter_alt_screen()
        self.running = True

    def stop(self) -> None:
        """Restore terminal state."""
        if self._in_alt_screen:
            self.exit_alt_screen()
        if self.manage_cursor:
            self.show_cursor()
        self.disable_mouse()
        self.disable_focus_reporting()
        self.running = False
