"""
Mouse report decoding.

Two wire protocols are supported:
- Legacy (X10-style): ESC [ M <button+32> <x+32> <y+32>
- Parameterized (SGR-style): ESC [ < <code> ; <x> ; <y> (M | m)

Coordinates are 1-indexed exactly as reported by the terminal.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class MouseButton(Enum):
    """Mouse button identities."""
    NONE = "none"
    LEFT = "left"
    MIDDLE = "middle"
    RIGHT = "right"
    WHEEL_UP = "wheel-up"
    WHEEL_DOWN = "wheel-down"
    WHEEL_LEFT = "wheel-left"
    WHEEL_RIGHT = "wheel-right"
    BACKWARD = "backward"
    FORWARD = "forward"
    BUTTON_10 = "button-10"
    BUTTON_11 = "button-11"


class MouseAction(Enum):
    """What happened to the button."""
    PRESS = "press"
    RELEASE = "release"
    MOTION = "motion"


WHEEL_BUTTONS = frozenset({
    MouseButton.WHEEL_UP,
    MouseButton.WHEEL_DOWN,
    MouseButton.WHEEL_LEFT,
    MouseButton.WHEEL_RIGHT,
})


@dataclass(frozen=True)
class MouseEvent:
    """Represents a mouse input event."""
    button: MouseButton
    action: MouseAction
    x: int
    y: int
    ctrl: bool = False
    alt: bool = False
    shift: bool = False

    @property
    def is_click(self) -> bool:
        return self.action is MouseAction.PRESS and self.button not in WHEEL_BUTTONS

    @property
    def is_release(self) -> bool:
        return self.action is MouseAction.RELEASE

    @property
    def is_motion(self) -> bool:
        return self.action is MouseAction.MOTION

    @property
    def is_wheel(self) -> bool:
        return self.button in WHEEL_BUTTONS

    @property
    def is_left_click(self) -> bool:
        return self.is_click and self.button is MouseButton.LEFT

    @property
    def is_right_click(self) -> bool:
        return self.is_click and self.button is MouseButton.RIGHT

    @property
    def is_middle_click(self) -> bool:
        return self.is_click and self.button is MouseButton.MIDDLE


@dataclass(frozen=True)
class ButtonState:
    """Decoded button code, before coordinates are attached."""
    button: MouseButton
    motion: bool = False
    shift: bool = False
    alt: bool = False
    ctrl: bool = False


# Bit layout of the button code
_BIT_SHIFT = 4
_BIT_ALT = 8
_BIT_CTRL = 16
_BIT_MOTION = 32
_BIT_WHEEL = 64
_BIT_EXTENDED = 128

_BASE_BUTTONS = (
    MouseButton.LEFT,
    MouseButton.MIDDLE,
    MouseButton.RIGHT,
    MouseButton.NONE,  # release in the legacy protocol
)
_WHEEL_BUTTONS = (
    MouseButton.WHEEL_UP,
    MouseButton.WHEEL_DOWN,
    MouseButton.WHEEL_LEFT,
    MouseButton.WHEEL_RIGHT,
)
_EXTENDED_BUTTONS = (
    MouseButton.BACKWARD,
    MouseButton.FORWARD,
    MouseButton.BUTTON_10,
    MouseButton.BUTTON_11,
)


def decode_button(code: int) -> ButtonState:
    """Decode a button code (without the +32 wire offset)."""
    low = code & 3
    if code & _BIT_EXTENDED:
        button = _EXTENDED_BUTTONS[low]
    elif code & _BIT_WHEEL:
        button = _WHEEL_BUTTONS[low]
    else:
        button = _BASE_BUTTONS[low]
    return ButtonState(
        button=button,
        motion=bool(code & _BIT_MOTION),
        shift=bool(code & _BIT_SHIFT),
        alt=bool(code & _BIT_ALT),
        ctrl=bool(code & _BIT_CTRL),
    )


def _action(state: ButtonState) -> MouseAction:
    if state.motion:
        return MouseAction.MOTION
    if state.button is MouseButton.NONE:
        return MouseAction.RELEASE
    return MouseAction.PRESS


def parse_legacy_mouse(button_byte: int, x_byte: int, y_byte: int) -> MouseEvent:
    """Decode the three raw bytes that follow ESC [ M."""
    state = decode_button(max(button_byte - 32, 0))
    return MouseEvent(
        button=state.button,
        action=_action(state),
        x=x_byte - 32,
        y=y_byte - 32,
        ctrl=state.ctrl,
        alt=state.alt,
        shift=state.shift,
    )


SGR_MOUSE_PATTERN = re.compile(r'\x1b\[<(\d+);(\d+);(\d+)([Mm])')


def parse_param_mouse(text: str) -> Optional[MouseEvent]:
    """Decode an SGR-style mouse report, or None if ``text`` is not one."""
    match = SGR_MOUSE_PATTERN.match(text)
    if not match:
        return None
    code, x, y = (int(g) for g in match.group(1, 2, 3))
    state = decode_button(code)

    if match.group(4) == 'm':
        button = MouseButton.NONE
        action = MouseAction.RELEASE
    else:
        button = state.button
        action = MouseAction.MOTION if state.motion else MouseAction.PRESS

    return MouseEvent(
        button=button,
        action=action,
        x=x,
        y=y,
        ctrl=state.ctrl,
        alt=state.alt,
        shift=state.shift,
    )
