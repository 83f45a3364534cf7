"""Key identities, the control-byte table and the escape sequence table."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Optional, Union


class Key(Enum):
    """Named key constants."""
    NULL = auto()
    ENTER = auto()
    TAB = auto()
    BACKSPACE = auto()
    ESCAPE = auto()
    SPACE = auto()
    # Navigation
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    INSERT = auto()
    DELETE = auto()
    # Function keys
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    F16 = auto()
    F17 = auto()
    F18 = auto()
    F19 = auto()
    F20 = auto()
    # Text and fallbacks
    RUNES = auto()
    UNKNOWN = auto()
    # Markers, turned into FocusEvent / PasteEvent by the decoder
    FOCUS_IN = auto()
    FOCUS_OUT = auto()
    PASTE_START = auto()
    PASTE_END = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Key
    runes: Optional[str] = None  # Text for RUNES (and UNKNOWN with text)
    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    raw: str = ""  # Bytes that produced the event, for diagnostics

    @property
    def is_rune(self) -> bool:
        """Check if this is printable text."""
        return self.key is Key.RUNES

    def matches(self, pattern: KeyPattern) -> bool:
        """Shorthand for :func:`key_matches`."""
        return key_matches(self, pattern)

    def __str__(self) -> str:
        parts = [m for m, on in (("ctrl", self.ctrl), ("alt", self.alt), ("shift", self.shift)) if on]
        if self.key is Key.RUNES and self.runes:
            parts.append(self.runes)
        else:
            parts.append(self.key.name.lower().replace('_', '-'))
        return '+'.join(parts)


KeyPattern = Union[Key, str, dict]


def key_matches(event: KeyEvent, pattern: KeyPattern) -> bool:
    """
    Check if a key event matches a pattern.

    Pattern can be:
        - A Key member, e.g. ``Key.ENTER`` (modifiers ignored)
        - A string such as ``"ctrl+c"``, ``"alt+x"``, ``"enter"``, ``"page-up"``
          (modifiers must match exactly)
        - A dict of attribute values, e.g. ``{"key": Key.RUNES, "runes": "c"}``
    """
    if isinstance(pattern, Key):
        return event.key is pattern

    if isinstance(pattern, dict):
        return all(getattr(event, k, None) == v for k, v in pattern.items())

    if isinstance(pattern, str):
        *mods, key_part = pattern.lower().split('+') if pattern != '+' else ['+']
        mods_set = set(mods)
        if ("ctrl" in mods_set) != event.ctrl:
            return False
        if ("alt" in mods_set) != event.alt:
            return False
        if ("shift" in mods_set) != event.shift:
            return False
        if event.key is Key.RUNES:
            return event.runes is not None and event.runes.lower() == key_part
        return event.key.name.lower().replace('_', '-') == key_part.replace('_', '-')

    return False


def _ctrl(letter: str) -> KeyEvent:
    return KeyEvent(Key.RUNES, runes=letter, ctrl=True)


# Control bytes (0-32, 127)
CONTROL_KEYS: dict[int, KeyEvent] = {
    0: KeyEvent(Key.NULL),
    **{code: _ctrl(chr(ord('a') + code - 1)) for code in range(1, 27)},
    8: KeyEvent(Key.BACKSPACE),   # Ctrl+H
    9: KeyEvent(Key.TAB),         # Ctrl+I
    10: KeyEvent(Key.ENTER),      # Ctrl+J / LF
    13: KeyEvent(Key.ENTER),      # Ctrl+M / CR
    27: KeyEvent(Key.ESCAPE),
    28: _ctrl('\\'),
    29: _ctrl(']'),
    30: _ctrl('^'),
    31: _ctrl('_'),
    32: KeyEvent(Key.SPACE),
    127: KeyEvent(Key.BACKSPACE),  # DEL
}


def is_control_byte(byte: int) -> bool:
    """Check if a byte value is a control character."""
    return 0 <= byte <= 31 or byte == 127


def parse_control_byte(byte: int) -> KeyEvent:
    """Resolve a control byte (or space) to a key event."""
    event = CONTROL_KEYS.get(byte)
    if event is None:
        return KeyEvent(Key.UNKNOWN, raw=chr(byte))
    return replace(event, raw=chr(byte))


def _modifiers(param: int) -> dict[str, bool]:
    """Decode an xterm modifier parameter (1 + shift=1 | alt=2 | ctrl=4)."""
    mod = param - 1
    return {"shift": bool(mod & 1), "alt": bool(mod & 2), "ctrl": bool(mod & 4)}


# Keys sent as ESC [ <letter> (or ESC O <letter>)
_LETTER_KEYS: dict[str, Key] = {
    'A': Key.UP,
    'B': Key.DOWN,
    'C': Key.RIGHT,
    'D': Key.LEFT,
    'H': Key.HOME,
    'F': Key.END,
    'P': Key.F1,
    'Q': Key.F2,
    'R': Key.F3,
    'S': Key.F4,
}

# Keys sent as ESC [ <number> ~
_TILDE_KEYS: dict[int, Key] = {
    1: Key.HOME,
    2: Key.INSERT,
    3: Key.DELETE,
    4: Key.END,
    5: Key.PAGE_UP,
    6: Key.PAGE_DOWN,
    7: Key.HOME,     # rxvt
    8: Key.END,      # rxvt
    11: Key.F1,      # legacy duplicates of the SS3 F1-F4
    12: Key.F2,
    13: Key.F3,
    14: Key.F4,
    15: Key.F5,
    17: Key.F6,
    18: Key.F7,
    19: Key.F8,
    20: Key.F9,
    21: Key.F10,
    23: Key.F11,
    24: Key.F12,
    25: Key.F13,
    26: Key.F14,
    28: Key.F15,
    29: Key.F16,
    31: Key.F17,
    32: Key.F18,
    33: Key.F19,
    34: Key.F20,
}


def _build_sequences() -> dict[str, KeyEvent]:
    table: dict[str, KeyEvent] = {}

    for letter, key in _LETTER_KEYS.items():
        # F1-F4 only come as SS3 unmodified; arrows/home/end come both ways
        if key not in (Key.F1, Key.F2, Key.F3, Key.F4):
            table[f'[{letter}'] = KeyEvent(key)
        table[f'O{letter}'] = KeyEvent(key)
        for param in range(2, 9):
            table[f'[1;{param}{letter}'] = KeyEvent(key, **_modifiers(param))

    for number, key in _TILDE_KEYS.items():
        table[f'[{number}~'] = KeyEvent(key)
        for param in range(2, 9):
            table[f'[{number};{param}~'] = KeyEvent(key, **_modifiers(param))

    table['[Z'] = KeyEvent(Key.TAB, shift=True)

    # Focus reporting and bracketed paste
    table['[I'] = KeyEvent(Key.FOCUS_IN)
    table['[O'] = KeyEvent(Key.FOCUS_OUT)
    table['[200~'] = KeyEvent(Key.PASTE_START)
    table['[201~'] = KeyEvent(Key.PASTE_END)

    return table


# Escape sequence mappings (without the \x1b prefix)
SEQUENCES: dict[str, KeyEvent] = _build_sequences()


def lookup_sequence(body: str) -> KeyEvent:
    """Look up an escape body; unknown bodies are returned as UNKNOWN."""
    event = SEQUENCES.get(body)
    if event is None:
        return KeyEvent(Key.UNKNOWN, runes=body or None, raw='\x1b' + body)
    return replace(event, raw='\x1b' + body)
