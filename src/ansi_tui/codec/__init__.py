"""Parsing, generation and measurement of ANSI escape sequences."""

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
from ansi_tui.codec.ansi_text import string_width, strip_ansi, truncate

__all__ = [
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
    "strip_ansi",
    "truncate",
]
