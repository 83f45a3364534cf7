"""Low-level terminal driver - raw byte I/O on a POSIX tty."""

from __future__ import annotations

import os
import select
import sys
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional

from ansi_tui.config import TerminalConfig, load_config
from ansi_tui.input.decoder import InputDecoder
from ansi_tui.render.renderer import FrameRenderer


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Terminal:
    """
    Byte source and sink over a pair of file descriptors.

    Uses os.read()/os.write() directly to bypass Python's I/O buffering,
    so that single bytes of an escape sequence are seen as soon as they
    arrive.
    """

    def __init__(self, in_fd: Optional[int] = None, out_fd: Optional[int] = None) -> None:
        self.in_fd = sys.stdin.fileno() if in_fd is None else in_fd
        self.out_fd = sys.stdout.fileno() if out_fd is None else out_fd

    def read(self, timeout_ms: int) -> Optional[int]:
        """Read one byte, or None if nothing arrives within timeout_ms."""
        if not self._has_input(timeout_ms / 1000):
            return None
        try:
            data = os.read(self.in_fd, 1)
        except OSError:
            return None
        if not data:
            return None
        return data[0]

    def read_blocking(self) -> Optional[int]:
        """Read one byte, waiting as long as it takes. None on EOF."""
        data = os.read(self.in_fd, 1)
        return data[0] if data else None

    def write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = os.write(self.out_fd, view)
            view = view[written:]

    def flush(self) -> None:
        # os.write is unbuffered
        pass

    def size(self) -> TerminalSize:
        """Get current terminal dimensions."""
        try:
            size = os.get_terminal_size(self.out_fd)
            return TerminalSize(size.lines, size.columns)
        except OSError:
            return TerminalSize(24, 80)

    def _has_input(self, timeout: float) -> bool:
        """Check if input is available within timeout (seconds)."""
        try:
            ready, _, _ = select.select([self.in_fd], [], [], timeout)
            return bool(ready)
        except (ValueError, OSError):
            return False

    @contextmanager
    def raw_mode(self) -> Iterator[None]:
        """Context manager for raw terminal mode (Unix only)."""
        try:
            import termios
            import tty
        except ImportError:
            # Windows or no termios - just yield
            yield
            return
        old_settings = termios.tcgetattr(self.in_fd)
        try:
            tty.setraw(self.in_fd)
            yield
        finally:
            termios.tcsetattr(self.in_fd, termios.TCSADRAIN, old_settings)

    def decoder(self, config: Optional[TerminalConfig] = None) -> InputDecoder:
        """Create an input decoder reading from this terminal."""
        config = config or load_config()
        return InputDecoder(self, timeout_ms=config.input.escape_timeout_ms)

    def renderer(self, config: Optional[TerminalConfig] = None) -> FrameRenderer:
        """Create a frame renderer sized to this terminal."""
        config = config or load_config()
        size = self.size()
        return FrameRenderer(
            self,
            width=size.cols,
            height=size.rows,
            tail=config.render.ellipsis,
            alt_screen=config.render.alt_screen,
            hide_cursor=config.render.hide_cursor,
        )

    @contextmanager
    def managed_mode(
        self, config: Optional[TerminalConfig] = None,
    ) -> Iterator[tuple[InputDecoder, FrameRenderer]]:
        """Full TUI mode: raw input, renderer started, modes restored on exit."""
        config = config or load_config()
        decoder = self.decoder(config)
        renderer = self.renderer(config)
        with self.raw_mode():
            try:
                renderer.start()
                if config.render.mouse:
                    renderer.enable_mouse(config.render.mouse)
                renderer.enable_focus_reporting()
                renderer.enable_bracketed_paste()
                yield decoder, renderer
            finally:
                decoder.stop()
                renderer.disable_bracketed_paste()
                renderer.stop()
