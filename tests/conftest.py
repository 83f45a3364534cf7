"""Shared fixtures: scripted byte sources and recording sinks."""

from typing import Optional, Union

import pytest

from ansi_tui.input.decoder import InputDecoder


class TIMEOUT:
    """Marker in a scripted byte stream: the next read times out."""


class ScriptedSource:
    """
    ByteSource that replays a fixed script.

    Items are byte values, ``bytes``/``str`` chunks (expanded to bytes),
    or TIMEOUT. Reads past the end time out.
    """

    def __init__(self, *items: Union[int, bytes, str, type]) -> None:
        self._queue: list[Optional[int]] = []
        for item in items:
            if item is TIMEOUT:
                self._queue.append(None)
            elif isinstance(item, int):
                self._queue.append(item)
            elif isinstance(item, str):
                self._queue.extend(item.encode('utf-8'))
            else:
                self._queue.extend(item)
        self.timeouts: list[int] = []

    def read(self, timeout_ms: int) -> Optional[int]:
        self.timeouts.append(timeout_ms)
        if not self._queue:
            return None
        return self._queue.pop(0)

    @property
    def remaining(self) -> int:
        return len(self._queue)


class RecordingSink:
    """ByteSink that keeps everything written to it."""

    def __init__(self) -> None:
        self.chunks: list[bytes] = []
        self.flushes = 0

    def write(self, data: bytes) -> None:
        self.chunks.append(data)

    def flush(self) -> None:
        self.flushes += 1

    @property
    def data(self) -> bytes:
        return b''.join(self.chunks)

    @property
    def text(self) -> str:
        return self.data.decode('utf-8')


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def decode():
    """Decode every event from a script until the source runs dry."""
    def _decode(*items) -> list:
        source = ScriptedSource(*items)
        decoder = InputDecoder(source, timeout_ms=50)
        events = []
        # One call per item is an upper bound on the events a script can hold
        for _ in range(len(items) + source.remaining + 1):
            if source.remaining == 0:
                break
            event = decoder.read_event()
            if event is not None:
                events.append(event)
        return events
    return _decode
