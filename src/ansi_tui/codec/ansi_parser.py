"""ANSI escape sequence parsing and generation.

Parses CSI, OSC and SGR sequences into structured data and scans arbitrary
text into alternating plain-text and escape-sequence spans.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


ESC = '\x1b'
CSI = ESC + '['
OSC = ESC + ']'
BEL = '\x07'
ST = ESC + '\\'


class SequenceKind(Enum):
    """Classification of an escape sequence."""
    CSI = "csi"
    OSC = "osc"
    SGR = "sgr"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Sequence:
    """
    A parsed escape sequence.

    Empty parameter slots are kept as None rather than dropped, since
    some codes are positionally significant (e.g. ``ESC[;5H``).
    """
    kind: SequenceKind
    raw: str
    params: tuple[Optional[int], ...] = ()
    private: str = ""       # Leading <=>? marker (CSI only)
    intermediate: str = ""
    final: str = ""
    command: Optional[int] = None   # OSC only
    data: Optional[str] = None      # OSC only
    span: tuple[int, int] = (0, 0)

    @property
    def start(self) -> int:
        return self.span[0]

    @property
    def end(self) -> int:
        return self.span[1]


@dataclass(frozen=True)
class TextSpan:
    """A run of plain text."""
    content: str


@dataclass(frozen=True)
class AnsiSpan:
    """A single escape sequence, with its parsed form."""
    content: str
    parsed: Sequence


Span = Union[TextSpan, AnsiSpan]


# ESC [ <params> <intermediate> <final>
CSI_PATTERN = re.compile(
    r'\x1b\[([0-9;:<=>?]*)([ !"#$%&\'()*+,\-./]*)([@A-Z\\^_`a-z{|}~])'
)

# ESC ] <command> ; <data> (BEL | ST)
OSC_PATTERN = re.compile(r'\x1b\]([^\x07\x1b]*)(?:\x07|\x1b\\)')

# ESC [ <digits and semicolons> m
SGR_PATTERN = re.compile(r'\x1b\[([0-9;]*)m')

# Fallback for an unterminated CSI: introducer plus parameter/intermediate bytes
_PARTIAL_CSI = re.compile(r'\x1b\[[\x20-\x3f]*')


def _parse_int(field: str) -> Optional[int]:
    """Decimal field to int; empty or non-decimal fields are absent."""
    if field and field.isascii() and field.isdigit():
        return int(field)
    return None


def _split_params(params: str) -> tuple[Optional[int], ...]:
    if not params:
        return ()
    return tuple(_parse_int(p) for p in params.split(';'))


def parse_sgr(text: str, pos: int = 0) -> Optional[Sequence]:
    """Parse an SGR (style) sequence at ``pos``. An empty list means reset."""
    match = SGR_PATTERN.match(text, pos)
    if not match:
        return None
    params = _split_params(match.group(1)) or (0,)
    return Sequence(
        kind=SequenceKind.SGR,
        raw=match.group(0),
        params=params,
        final='m',
        span=(match.start(), match.end()),
    )


def parse_csi(text: str, pos: int = 0) -> Optional[Sequence]:
    """Parse a general CSI sequence at ``pos``."""
    match = CSI_PATTERN.match(text, pos)
    if not match:
        return None
    params_str, intermediate, final = match.groups()

    private = ""
    while params_str and params_str[0] in '<=>?':
        private += params_str[0]
        params_str = params_str[1:]

    return Sequence(
        kind=SequenceKind.CSI,
        raw=match.group(0),
        params=_split_params(params_str),
        private=private,
        intermediate=intermediate,
        final=final,
        span=(match.start(), match.end()),
    )


def parse_osc(text: str, pos: int = 0) -> Optional[Sequence]:
    """Parse an OSC sequence at ``pos`` into command number and data."""
    match = OSC_PATTERN.match(text, pos)
    if not match:
        return None
    content = match.group(1)
    cmd, sep, data = content.partition(';')
    return Sequence(
        kind=SequenceKind.OSC,
        raw=match.group(0),
        command=_parse_int(cmd),
        data=data if sep else None,
        span=(match.start(), match.end()),
    )


def _unknown_at(text: str, pos: int) -> Sequence:
    """Minimal unknown token at an ESC that no parser accepted."""
    partial = _PARTIAL_CSI.match(text, pos)
    if partial:
        end = partial.end()
    else:
        end = min(pos + 2, len(text))
    return Sequence(
        kind=SequenceKind.UNKNOWN,
        raw=text[pos:end],
        span=(pos, end),
    )


def extract_sequences(text: str) -> list[Sequence]:
    """
    Extract all escape sequences from a string, left to right.

    At each ESC tries SGR, then CSI, then OSC, and otherwise emits an
    UNKNOWN token. Every token is at least one character long.
    """
    results: list[Sequence] = []
    i = text.find(ESC)
    while i != -1:
        seq = (
            parse_sgr(text, i)
            or parse_csi(text, i)
            or parse_osc(text, i)
            or _unknown_at(text, i)
        )
        results.append(seq)
        i = text.find(ESC, seq.end)
    return results


def split_ansi(text: str) -> list[Span]:
    """
    Split a string into plain-text and escape-sequence segments.

    Joining every segment's ``content`` gives back ``text`` exactly.
    """
    sequences = extract_sequences(text)
    if not sequences:
        return [TextSpan(text)]

    result: list[Span] = []
    pos = 0
    for seq in sequences:
        if pos < seq.start:
            result.append(TextSpan(text[pos:seq.start]))
        result.append(AnsiSpan(seq.raw, seq))
        pos = seq.end
    if pos < len(text):
        result.append(TextSpan(text[pos:]))
    return result


# Common SGR parameter codes
SGR_CODES: dict[str, int] = {
    "reset": 0,
    "bold": 1,
    "dim": 2,
    "italic": 3,
    "underline": 4,
    "blink": 5,
    "reverse": 7,
    "hidden": 8,
    "strikethrough": 9,
    # Foreground colors
    "fg_black": 30,
    "fg_red": 31,
    "fg_green": 32,
    "fg_yellow": 33,
    "fg_blue": 34,
    "fg_magenta": 35,
    "fg_cyan": 36,
    "fg_white": 37,
    "fg_default": 39,
    # Background colors
    "bg_black": 40,
    "bg_red": 41,
    "bg_green": 42,
    "bg_yellow": 43,
    "bg_blue": 44,
    "bg_magenta": 45,
    "bg_cyan": 46,
    "bg_white": 47,
    "bg_default": 49,
    # Bright foreground
    "fg_bright_black": 90,
    "fg_bright_red": 91,
    "fg_bright_green": 92,
    "fg_bright_yellow": 93,
    "fg_bright_blue": 94,
    "fg_bright_magenta": 95,
    "fg_bright_cyan": 96,
    "fg_bright_white": 97,
    # Bright background
    "bg_bright_black": 100,
    "bg_bright_red": 101,
    "bg_bright_green": 102,
    "bg_bright_yellow": 103,
    "bg_bright_blue": 104,
    "bg_bright_magenta": 105,
    "bg_bright_cyan": 106,
    "bg_bright_white": 107,
}

SGR_NAMES: dict[int, str] = {code: name for name, code in SGR_CODES.items()}


def sgr_code(param: Union[int, str]) -> int:
    """Resolve a numeric code or symbolic name; unknown names are reset (0)."""
    if isinstance(param, int):
        return param
    return SGR_CODES.get(param.strip().lower().replace('-', '_'), 0)


def sgr(*params: Union[int, str]) -> str:
    """
    Generate an SGR escape sequence.

    Example:
        >>> sgr("bold", "fg-red")
        '\\x1b[1;31m'
    """
    codes = [sgr_code(p) for p in params] or [0]
    return f"{CSI}{';'.join(str(c) for c in codes)}m"


def reset_style() -> str:
    """Generate a reset SGR sequence."""
    return f"{CSI}0m"
