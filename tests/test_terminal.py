"""Tests for the terminal driver over plain pipes."""

import os

import pytest

from ansi_tui.config import RenderConfig, TerminalConfig
from ansi_tui.input.keys import Key
from ansi_tui.terminal import Terminal, TerminalSize


@pytest.fixture
def pipes():
    in_r, in_w = os.pipe()
    out_r, out_w = os.pipe()
    yield Terminal(in_fd=in_r, out_fd=out_w), in_w, out_r
    for fd in (in_r, in_w, out_r, out_w):
        os.close(fd)


class TestTerminalIO:

    def test_read_times_out(self, pipes) -> None:
        terminal, _, _ = pipes
        assert terminal.read(10) is None

    def test_read_one_byte(self, pipes) -> None:
        terminal, in_w, _ = pipes
        os.write(in_w, b'ab')
        assert terminal.read(10) == ord('a')
        assert terminal.read(10) == ord('b')

    def test_write(self, pipes) -> None:
        terminal, _, out_r = pipes
        terminal.write(b'hello')
        terminal.flush()
        assert os.read(out_r, 5) == b'hello'

    def test_size_falls_back_off_tty(self, pipes) -> None:
        terminal, _, _ = pipes
        assert terminal.size() == TerminalSize(24, 80)


class TestFactories:

    def test_decoder_reads_terminal(self, pipes) -> None:
        terminal, in_w, _ = pipes
        os.write(in_w, b'\x1b[A')
        assert terminal.decoder(TerminalConfig()).read_event().key == Key.UP

    def test_renderer_uses_config(self, pipes) -> None:
        terminal, _, out_r = pipes
        config = TerminalConfig(render=RenderConfig(ellipsis='~', hide_cursor=False))
        renderer = terminal.renderer(config)
        assert renderer.size == (80, 24)
        assert renderer.tail == '~'
        renderer.render('hi')
        assert os.read(out_r, 64) == b'\rhi\x1b[K\r'


class TestManagedMode:

    @pytest.fixture
    def tty_terminal(self):
        master, slave = os.openpty()
        out_r, out_w = os.pipe()
        yield Terminal(in_fd=slave, out_fd=out_w), out_r
        for fd in (master, slave, out_r, out_w):
            os.close(fd)

    def test_restores_modes_on_exit(self, tty_terminal) -> None:
        terminal, out_r = tty_terminal
        config = TerminalConfig(render=RenderConfig(alt_screen=True))
        with terminal.managed_mode(config) as (decoder, renderer):
            assert renderer.in_alt_screen
        output = os.read(out_r, 4096)
        assert output.startswith(b'\x1b[?25l\x1b[?1049h')
        assert b'\x1b[?2004h' in output
        assert output.index(b'\x1b[?2004l') < output.index(b'\x1b[?1049l')
        assert b'\x1b[?25h' in output
        assert not decoder.running

    def test_restores_modes_when_setup_fails(self, tty_terminal) -> None:
        terminal, out_r = tty_terminal
        config = TerminalConfig(render=RenderConfig(alt_screen=True, mouse='bogus'))
        with pytest.raises(ValueError):
            with terminal.managed_mode(config):
                pass
        output = os.read(out_r, 4096)
        assert b'\x1b[?1049l' in output
        assert b'\x1b[?25h' in output
