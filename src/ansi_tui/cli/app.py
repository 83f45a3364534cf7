"""Typer CLI application with diagnostic commands."""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from ansi_tui.codec.ansi_parser import AnsiSpan, sgr, sgr_code, split_ansi
from ansi_tui.input.decoder import FocusEvent, InputEvent, PasteEvent
from ansi_tui.input.keys import KeyEvent
from ansi_tui.input.mouse import MouseEvent


class MouseMode(str, Enum):
    """Mouse tracking modes accepted by --mouse."""
    normal = "normal"
    cell = "cell"
    all = "all"


def describe_event(event: InputEvent) -> str:
    """One-line human readable description of an input event."""
    if isinstance(event, KeyEvent):
        text = f"key {event}"
        if event.raw and event.raw != event.runes:
            text += f"  raw={event.raw!r}"
        return text
    if isinstance(event, MouseEvent):
        mods = [m for m, on in (("ctrl", event.ctrl), ("alt", event.alt), ("shift", event.shift)) if on]
        suffix = f" [{'+'.join(mods)}]" if mods else ""
        return f"mouse {event.button.value} {event.action.value} at {event.x},{event.y}{suffix}"
    if isinstance(event, FocusEvent):
        return "focus in" if event.focused else "focus out"
    if isinstance(event, PasteEvent):
        return "paste start" if event.start else "paste end"
    return repr(event)


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-tui",
        help="Inspect terminal input and ANSI escape sequences.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    @app.callback()
    def configure(
        log_level: Annotated[Optional[str], typer.Option("--log-level", "-l", help="Enable logging at this level (e.g. DEBUG)")] = None,
    ) -> None:
        if log_level:
            logging.basicConfig(
                level=log_level.upper(),
                format="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
                stream=sys.stderr,
            )

    @app.command()
    def keys(
        timeout_ms: Annotated[Optional[int], typer.Option("--timeout-ms", "-t", help="Escape disambiguation timeout")] = None,
        mouse: Annotated[Optional[MouseMode], typer.Option("--mouse", "-m", help="Mouse tracking mode")] = None,
    ) -> None:
        """Show decoded key, mouse, focus and paste events. Press q or Ctrl+C to quit."""
        from dataclasses import replace

        from ansi_tui.config import load_config
        from ansi_tui.terminal import Terminal

        if not sys.stdin.isatty():
            console.print("[red]keys needs an interactive terminal[/]")
            raise typer.Exit(1)

        config = load_config()
        if timeout_ms is not None:
            config = replace(config, input=replace(config.input, escape_timeout_ms=timeout_ms))
        if mouse is not None:
            config = replace(config, render=replace(config.render, mouse=mouse.value, hide_cursor=False))

        terminal = Terminal()
        console.print("[bold cyan]Listening for input[/] (q or Ctrl+C to quit)", end="\r\n")
        with terminal.managed_mode(config) as (decoder, _renderer):
            for event in decoder.events():
                console.print(describe_event(event), end="\r\n", markup=False, highlight=False)
                if isinstance(event, KeyEvent) and (event.matches("ctrl+c") or event.matches("q")):
                    decoder.stop()

    @app.command()
    def scan(
        path: Annotated[Path, typer.Argument(help="Text file to scan, or - for stdin")],
    ) -> None:
        """Split text into plain-text and escape-sequence spans."""
        text = sys.stdin.read() if str(path) == "-" else path.read_text(encoding="utf-8", errors="replace")

        table = Table(title=f"Spans in {path}")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Type")
        table.add_column("Content", overflow="fold")
        table.add_column("Parsed", overflow="fold")

        for i, span in enumerate(split_ansi(text)):
            if isinstance(span, AnsiSpan):
                seq = span.parsed
                parsed = f"{seq.kind.value} params={list(seq.params)}"
                if seq.private:
                    parsed += f" private={seq.private!r}"
                if seq.final:
                    parsed += f" final={seq.final!r}"
                if seq.command is not None:
                    parsed += f" command={seq.command} data={seq.data!r}"
                table.add_row(str(i), "[magenta]ansi[/]", repr(span.content), parsed)
            else:
                table.add_row(str(i), "text", repr(span.content), "")

        console.print(table)

    @app.command(name="sgr")
    def sgr_command(
        params: Annotated[list[str], typer.Argument(help="SGR codes or names (bold, fg-red, ...)")],
    ) -> None:
        """Print the SGR sequence for the given codes or names."""
        values = [int(p) if p.isdigit() else p for p in params]
        for p in values:
            if isinstance(p, str) and sgr_code(p) == 0 and p.lower() != "reset":
                console.print(f"[yellow]Unknown style name {p!r}, using reset (0)[/]")
        seq = sgr(*values)
        print(repr(seq))
        print(f"{seq}sample text\x1b[0m")

    return app
