"""ANSI text utilities - measuring and truncating strings with escape codes."""

from __future__ import annotations

from wcwidth import wcwidth

from ansi_tui.codec.ansi_parser import AnsiSpan, SequenceKind, reset_style, split_ansi


def char_width(ch: str) -> int:
    """Display width of a single character (0 for non-printing)."""
    return max(wcwidth(ch), 0)


def strip_ansi(s: str) -> str:
    """Remove every escape sequence, keeping only the plain text."""
    return ''.join(
        span.content for span in split_ansi(s) if not isinstance(span, AnsiSpan)
    )


def string_width(s: str) -> int:
    """Get display width of a string, ignoring escape sequences."""
    return sum(char_width(ch) for ch in strip_ansi(s))


def truncate(s: str, max_width: int, tail: str = "", reset: bool = True) -> str:
    """
    Truncate an ANSI-styled string to a maximum display width.

    Escape sequences before the cut are kept; a wide character that would
    straddle the limit is dropped rather than split.

    Args:
        s: String to truncate
        max_width: Maximum display width
        tail: Marker appended when the string is cut (e.g. an ellipsis),
            only if it fits within max_width
        reset: If True, append a reset sequence when a style is still
            active at the cut, to prevent color bleed
    """
    if max_width <= 0:
        return ""
    if string_width(s) <= max_width:
        return s

    tail_width = string_width(tail)
    if tail_width > max_width:
        tail = ""
        tail_width = 0
    budget = max_width - tail_width

    result: list[str] = []
    vis_len = 0
    styled = False
    done = False

    for span in split_ansi(s):
        if isinstance(span, AnsiSpan):
            result.append(span.content)
            if span.parsed.kind == SequenceKind.SGR:
                styled = span.parsed.params != (0,)
            continue
        for ch in span.content:
            w = char_width(ch)
            if vis_len + w > budget:
                done = True
                break
            result.append(ch)
            vis_len += w
        if done:
            break

    output = ''.join(result) + tail
    if reset and styled:
        output += reset_style()
    return output


def pad_to_width(s: str, width: int, char: str = ' ') -> str:
    """Pad string with char to reach exactly width display columns."""
    current = string_width(s)
    if current >= width:
        return s
    return s + char * (width - current)


def truncate_and_pad(s: str, width: int) -> str:
    """Truncate if too long, pad if too short. Always returns exactly width columns."""
    if string_width(s) > width:
        return pad_to_width(truncate(s, width), width)
    return pad_to_width(s, width)
