"""
Byte-level input decoding.

Reads one byte at a time from a timeout-bounded source and turns the
stream into structured events. A lone ESC is told apart from the start of
an escape sequence purely by timing: if nothing follows within the read
timeout, it is the Escape key.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, Union, runtime_checkable

from ansi_tui.input.keys import (
    Key,
    KeyEvent,
    is_control_byte,
    lookup_sequence,
    parse_control_byte,
)
from ansi_tui.input.mouse import MouseEvent, parse_legacy_mouse, parse_param_mouse

logger = logging.getLogger(__name__)

ESC = 0x1B
CSI_BRACKET = ord('[')
SS3_O = ord('O')

DEFAULT_TIMEOUT_MS = 50

# Longest CSI body kept before giving up on a final byte
MAX_CSI_LENGTH = 256


@dataclass(frozen=True)
class FocusEvent:
    """Terminal window gained (focused=True) or lost focus."""
    focused: bool


@dataclass(frozen=True)
class PasteEvent:
    """Start or end marker of a bracketed paste."""
    start: bool


InputEvent = Union[KeyEvent, MouseEvent, FocusEvent, PasteEvent]


@runtime_checkable
class ByteSource(Protocol):
    """Timeout-bounded byte reader provided by the terminal driver."""

    def read(self, timeout_ms: int) -> Optional[int]:
        """Return the next byte value, or None if nothing arrived in time."""
        ...


class CancellationToken:
    """Cooperative stop flag, checked before each read attempt."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


def is_csi_final_byte(byte: int) -> bool:
    """Check if a byte terminates a CSI sequence (0x40-0x7E)."""
    return 0x40 <= byte <= 0x7E


def _utf8_length(lead: int) -> int:
    """Total length of a UTF-8 sequence from its lead byte."""
    if lead >= 0xF0:
        return 4
    if lead >= 0xE0:
        return 3
    if lead >= 0xC0:
        return 2
    return 1


def _legacy_mouse(body: str) -> Optional[MouseEvent]:
    if body.startswith('[M') and len(body) == 5:
        return parse_legacy_mouse(ord(body[2]), ord(body[3]), ord(body[4]))
    return None


def _marker_event(event: KeyEvent) -> InputEvent:
    """Turn focus/paste table entries into their own event types."""
    if event.key is Key.FOCUS_IN:
        return FocusEvent(focused=True)
    if event.key is Key.FOCUS_OUT:
        return FocusEvent(focused=False)
    if event.key is Key.PASTE_START:
        return PasteEvent(start=True)
    if event.key is Key.PASTE_END:
        return PasteEvent(start=False)
    return event


def classify_escape_body(body: Optional[str]) -> InputEvent:
    """
    Classify a completed escape body (the text after ESC).

    Order matters: mouse reports are recognized before the table lookup,
    and a single-character body is Alt+key rather than an unknown sequence.
    A None body means ESC arrived alone.
    """
    if not body:
        return KeyEvent(Key.ESCAPE, raw='\x1b')

    mouse = _legacy_mouse(body)
    if mouse is not None:
        return mouse

    if body.startswith('[<'):
        mouse = parse_param_mouse('\x1b' + body)
        if mouse is not None:
            return mouse

    if len(body) == 1:
        return KeyEvent(Key.RUNES, runes=body, alt=True, raw='\x1b' + body)

    event = lookup_sequence(body)
    if event.key is Key.UNKNOWN:
        logger.debug("Unknown escape sequence: %r", body)
    return _marker_event(event)


def parse_input(byte: int, escape_body: Optional[str] = None) -> InputEvent:
    """
    Parse a byte that was read in the idle state.

    For ESC, pass the body that followed it (None if nothing did).
    """
    if byte == ESC:
        return classify_escape_body(escape_body)
    if is_control_byte(byte) or byte == 0x20:
        return parse_control_byte(byte)
    ch = chr(byte)
    return KeyEvent(Key.RUNES, runes=ch, raw=ch)


class InputDecoder:
    """
    Turns a terminal byte stream into input events.

    Not thread-safe; drive it from a single task. Each ``read_event`` call
    produces at most one event.

    Example:
        decoder = InputDecoder(terminal, timeout_ms=50)
        for event in decoder.events():
            if isinstance(event, KeyEvent) and event.matches("ctrl+c"):
                decoder.stop()
    """

    def __init__(
        self,
        source: ByteSource,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        token: Optional[CancellationToken] = None,
    ) -> None:
        if timeout_ms < 0:
            raise ValueError(f"timeout_ms must be >= 0, got {timeout_ms}")
        self.source = source
        self.timeout_ms = timeout_ms
        self.token = token if token is not None else CancellationToken()

    def stop(self) -> None:
        """Ask the event loop to finish before its next read."""
        self.token.cancel()

    @property
    def running(self) -> bool:
        return not self.token.cancelled

    def read_event(self, timeout_ms: Optional[int] = None) -> Optional[InputEvent]:
        """
        Read a single input event.

        Returns None if no input arrived within the timeout, or if the
        decoder was stopped.
        """
        if self.token.cancelled:
            return None
        timeout = self.timeout_ms if timeout_ms is None else timeout_ms

        byte = self.source.read(timeout)
        if byte is None:
            return None

        if byte == ESC:
            return classify_escape_body(self._read_escape_body(timeout))
        if byte >= 0x80:
            return self._read_utf8(byte, timeout)
        return parse_input(byte)

    def read_event_blocking(self) -> Optional[InputEvent]:
        """Read an event, waiting until one arrives or the decoder is stopped."""
        while not self.token.cancelled:
            event = self.read_event()
            if event is not None:
                return event
        return None

    def events(self) -> Iterator[InputEvent]:
        """Yield events until the cancellation token is set."""
        while not self.token.cancelled:
            event = self.read_event()
            if event is not None:
                yield event

    def _read_escape_body(self, timeout: int) -> Optional[str]:
        """Read what follows ESC; None if it arrived alone."""
        byte = self.source.read(timeout)
        if byte is None:
            return None
        if byte == CSI_BRACKET:
            return self._read_csi(timeout)
        if byte == SS3_O:
            return self._read_ss3(timeout)
        if byte >= 0x80:
            return self._read_utf8_text(byte, timeout)
        # Alt+key
        return chr(byte)

    def _read_csi(self, timeout: int) -> str:
        chars = ['[']
        while True:
            byte = self.source.read(timeout)
            if byte is None:
                body = ''.join(chars)
                logger.debug("Timeout inside CSI sequence, returning partial %r", body)
                return body
            chars.append(chr(byte))
            if len(chars) == 2 and byte == ord('M'):
                # Legacy mouse: three raw bytes follow, any value
                return self._read_legacy_mouse(chars, timeout)
            if is_csi_final_byte(byte):
                return ''.join(chars)
            if len(chars) >= MAX_CSI_LENGTH:
                body = ''.join(chars)
                logger.debug("CSI sequence exceeded %d bytes, returning partial %r", MAX_CSI_LENGTH, body[:16])
                return body

    def _read_legacy_mouse(self, chars: list[str], timeout: int) -> str:
        for _ in range(3):
            byte = self.source.read(timeout)
            if byte is None:
                logger.debug("Timeout inside mouse report, returning partial %r", ''.join(chars))
                break
            chars.append(chr(byte))
        return ''.join(chars)

    def _read_ss3(self, timeout: int) -> str:
        byte = self.source.read(timeout)
        if byte is None:
            return 'O'
        return 'O' + chr(byte)

    def _read_utf8(self, lead: int, timeout: int) -> KeyEvent:
        text = self._read_utf8_text(lead, timeout)
        return KeyEvent(Key.RUNES, runes=text, raw=text)

    def _read_utf8_text(self, lead: int, timeout: int) -> str:
        """Read the continuation bytes of a UTF-8 character; invalid input becomes U+FFFD."""
        data = bytearray([lead])
        for _ in range(_utf8_length(lead) - 1):
            byte = self.source.read(timeout)
            if byte is None:
                break
            data.append(byte)
        return data.decode('utf-8', errors='replace')
