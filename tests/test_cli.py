"""Tests for the diagnostic CLI."""

from typer.testing import CliRunner

from ansi_tui.cli.app import create_app, describe_event
from ansi_tui.input.decoder import FocusEvent, PasteEvent
from ansi_tui.input.keys import Key, KeyEvent
from ansi_tui.input.mouse import MouseAction, MouseButton, MouseEvent

runner = CliRunner()


class TestDescribeEvent:

    def test_key(self) -> None:
        event = KeyEvent(Key.RUNES, runes='c', ctrl=True, raw='\x03')
        assert describe_event(event) == "key ctrl+c  raw='\\x03'"

    def test_plain_rune_hides_raw(self) -> None:
        assert describe_event(KeyEvent(Key.RUNES, runes='a', raw='a')) == "key a"

    def test_mouse(self) -> None:
        event = MouseEvent(MouseButton.LEFT, MouseAction.PRESS, 3, 4, ctrl=True)
        text = describe_event(event)
        assert text.startswith("mouse ")
        assert "at 3,4" in text
        assert text.endswith("[ctrl]")

    def test_focus_and_paste(self) -> None:
        assert describe_event(FocusEvent(focused=True)) == "focus in"
        assert describe_event(FocusEvent(focused=False)) == "focus out"
        assert describe_event(PasteEvent(start=True)) == "paste start"
        assert describe_event(PasteEvent(start=False)) == "paste end"


class TestCommands:

    def test_scan_file(self, tmp_path) -> None:
        path = tmp_path / "sample.txt"
        path.write_text("hi\x1b[1;31mred\x1b[0m", encoding="utf-8")
        result = runner.invoke(create_app(), ["scan", str(path)])
        assert result.exit_code == 0
        assert "sgr" in result.output
        assert "red" in result.output

    def test_scan_stdin(self) -> None:
        result = runner.invoke(create_app(), ["scan", "-"], input="plain\x1b[K")
        assert result.exit_code == 0
        assert "plain" in result.output

    def test_sgr_names(self) -> None:
        result = runner.invoke(create_app(), ["sgr", "bold", "fg-red"])
        assert result.exit_code == 0
        assert "'\\x1b[1;31m'" in result.output

    def test_sgr_numbers(self) -> None:
        result = runner.invoke(create_app(), ["sgr", "4", "32"])
        assert result.exit_code == 0
        assert "'\\x1b[4;32m'" in result.output

    def test_sgr_unknown_name_warns(self) -> None:
        result = runner.invoke(create_app(), ["sgr", "sparkly"])
        assert result.exit_code == 0
        assert "Unknown style name" in result.output

    def test_keys_rejects_unknown_mouse_mode(self) -> None:
        result = runner.invoke(create_app(), ["keys", "--mouse", "bogus"])
        assert result.exit_code == 2
