"""
ansi-tui: terminal I/O protocol layer for text UIs

Turns raw terminal bytes into structured input events, and turns full-frame
text into the minimal control codes needed to repaint the screen.

Quick Start:
    >>> from ansi_tui import Terminal, KeyEvent
    >>> term = Terminal()
    >>> with term.managed_mode() as (decoder, renderer):
    ...     renderer.render("Press any key")
    ...     event = decoder.read_event_blocking()

Features:
    - Parse, split and generate CSI / OSC / SGR escape sequences
    - Width-aware truncation of styled text (wide characters included)
    - Keyboard decoding: arrows, navigation, F1-F20, modifier combinations
    - Mouse decoding: legacy X10 and SGR-style reports
    - Focus and bracketed-paste markers
    - Line-diffing frame renderer
"""

__version__ = "0.1.0"

# Escape sequences
from ansi_tui.codec.ansi_parser import (
    AnsiSpan,
    Sequence,
    SequenceKind,
    TextSpan,
    extract_sequences,
    parse_csi,
    parse_osc,
    parse_sgr,
    reset_style,
    sgr,
    split_ansi,
)
from ansi_tui.codec.ansi_text import string_width, truncate

# Input
from ansi_tui.input.decoder import (
    ByteSource,
    CancellationToken,
    FocusEvent,
    InputDecoder,
    InputEvent,
    PasteEvent,
)
from ansi_tui.input.keys import Key, KeyEvent, key_matches
from ansi_tui.input.mouse import MouseAction, MouseButton, MouseEvent

# Output
from ansi_tui.render.renderer import ByteSink, Frame, FrameRenderer

# Driver and configuration
from ansi_tui.config import TerminalConfig, load_config
from ansi_tui.terminal import Terminal, TerminalSize

__all__ = [
    # Version
    "__version__",
    # Escape sequences
    "AnsiSpan",
    "Sequence",
    "SequenceKind",
    "TextSpan",
    "extract_sequences",
    "parse_csi",
    "parse_osc",
    "parse_sgr",
    "reset_style",
    "sgr",
    "split_ansi",
    "string_width",
    "truncate",
    # Input
    "ByteSource",
    "CancellationToken",
    "FocusEvent",
    "InputDecoder",
    "InputEvent",
    "PasteEvent",
    "Key",
    "KeyEvent",
    "key_matches",
    "MouseAction",
    "MouseButton",
    "MouseEvent",
    # Output
    "ByteSink",
    "Frame",
    "FrameRenderer",
    # Driver
    "TerminalConfig",
    "load_config",
    "Terminal",
    "TerminalSize",
]
