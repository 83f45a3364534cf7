"""Tests for display-width measurement and truncation."""

from ansi_tui.codec.ansi_text import (
    pad_to_width,
    string_width,
    strip_ansi,
    truncate,
    truncate_and_pad,
)


class TestWidth:

    def test_plain(self) -> None:
        assert string_width('hello') == 5

    def test_ignores_escape_sequences(self) -> None:
        assert string_width('\x1b[1;31mred\x1b[0m') == 3

    def test_wide_characters(self) -> None:
        assert string_width('日本') == 4

    def test_combining_characters(self) -> None:
        assert string_width('e\u0301') == 1

    def test_strip_ansi(self) -> None:
        assert strip_ansi('\x1b[1mbold\x1b[0m \x1b]2;t\x07x') == 'bold x'


class TestTruncate:

    def test_short_string_unchanged(self) -> None:
        assert truncate('hi', 10) == 'hi'

    def test_exact_fit_unchanged(self) -> None:
        assert truncate('hello', 5, tail='…') == 'hello'

    def test_cut_without_tail(self) -> None:
        assert truncate('hello', 4) == 'hell'

    def test_cut_with_tail(self) -> None:
        assert truncate('hello world', 6, tail='…') == 'hello…'

    def test_tail_wider_than_width_is_dropped(self) -> None:
        assert truncate('hello', 2, tail='...') == 'he'

    def test_zero_width(self) -> None:
        assert truncate('hello', 0) == ''

    def test_keeps_styles_and_resets(self) -> None:
        result = truncate('\x1b[31mhello world', 5)
        assert result == '\x1b[31mhello\x1b[0m'

    def test_no_reset_after_explicit_reset(self) -> None:
        result = truncate('\x1b[31mred\x1b[0m plain text', 6)
        assert result == '\x1b[31mred\x1b[0m pl'

    def test_wide_character_not_split(self) -> None:
        # Each character is two columns; a third column cannot hold half of one
        assert truncate('日本語', 3) == '日'
        assert string_width(truncate('日本語', 5, tail='…')) <= 5

    def test_result_never_exceeds_width(self) -> None:
        for width in range(1, 12):
            assert string_width(truncate('a日b本c語d\x1b[1me', width, tail='…')) <= width


class TestPadding:

    def test_pad(self) -> None:
        assert pad_to_width('ab', 4) == 'ab  '

    def test_pad_styled(self) -> None:
        assert pad_to_width('\x1b[1mab\x1b[0m', 3) == '\x1b[1mab\x1b[0m '

    def test_truncate_and_pad(self) -> None:
        assert truncate_and_pad('abcdef', 3) == 'abc'
        assert truncate_and_pad('ab', 3) == 'ab '
        assert string_width(truncate_and_pad('日本語', 3)) == 3
