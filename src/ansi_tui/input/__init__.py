"""Input decoding - keyboard, mouse, focus and paste events."""

from ansi_tui.input.decoder import (
    ByteSource,
    CancellationToken,
    FocusEvent,
    InputDecoder,
    InputEvent,
    PasteEvent,
    classify_escape_body,
    parse_input,
)
from ansi_tui.input.keys import Key, KeyEvent, key_matches, lookup_sequence
from ansi_tui.input.mouse import (
    MouseAction,
    MouseButton,
    MouseEvent,
    parse_legacy_mouse,
    parse_param_mouse,
)

__all__ = [
    "ByteSource",
    "CancellationToken",
    "FocusEvent",
    "InputDecoder",
    "InputEvent",
    "PasteEvent",
    "classify_escape_body",
    "parse_input",
    "Key",
    "KeyEvent",
    "key_matches",
    "lookup_sequence",
    "MouseAction",
    "MouseButton",
    "MouseEvent",
    "parse_legacy_mouse",
    "parse_param_mouse",
]
