"""Runtime configuration, read from ANSI_TUI_* environment variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

_ESC_TIMEOUT_MS_ENVVAR = "ANSI_TUI_ESC_TIMEOUT_MS"
_ALT_SCREEN_ENVVAR = "ANSI_TUI_ALT_SCREEN"
_HIDE_CURSOR_ENVVAR = "ANSI_TUI_HIDE_CURSOR"
_MOUSE_MODE_ENVVAR = "ANSI_TUI_MOUSE"
_ELLIPSIS_ENVVAR = "ANSI_TUI_ELLIPSIS"

_MOUSE_MODES = ("normal", "cell", "all")


def _bool_from_env(var_name: str, default: bool) -> bool:
    raw = os.getenv(var_name)
    if raw is None:
        return default
    val = str(raw).strip().lower()
    if val in ("1", "true", "yes", "on"):
        return True
    if val in ("0", "false", "no", "off", ""):
        return False
    logger.warning("Ignoring %s=%r: not a boolean", var_name, raw)
    return default


def _int_from_env(var_name: str, default: int) -> int:
    raw = os.getenv(var_name)
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", var_name, raw)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must be >= 0", var_name, raw)
        return default
    return value


def _mouse_from_env(var_name: str) -> Optional[str]:
    raw = os.getenv(var_name)
    if raw is None:
        return None
    val = raw.strip().lower()
    if val in ("", "0", "off", "none", "false", "no"):
        return None
    if val not in _MOUSE_MODES:
        logger.warning("Ignoring %s=%r: expected one of %s", var_name, raw, ", ".join(_MOUSE_MODES))
        return None
    return val


@dataclass(frozen=True)
class InputConfig:
    # How long to wait after ESC before deciding it was the Escape key
    escape_timeout_ms: int = 50


@dataclass(frozen=True)
class RenderConfig:
    alt_screen: bool = False
    hide_cursor: bool = True
    mouse: Optional[str] = None  # "normal", "cell", "all" or None
    ellipsis: str = "…"


@dataclass(frozen=True)
class TerminalConfig:
    input: InputConfig = field(default_factory=InputConfig)
    render: RenderConfig = field(default_factory=RenderConfig)


def load_config() -> TerminalConfig:
    """Build configuration from the environment, falling back to defaults."""
    defaults_input = InputConfig()
    defaults_render = RenderConfig()
    return TerminalConfig(
        input=InputConfig(
            escape_timeout_ms=_int_from_env(_ESC_TIMEOUT_MS_ENVVAR, defaults_input.escape_timeout_ms),
        ),
        render=RenderConfig(
            alt_screen=_bool_from_env(_ALT_SCREEN_ENVVAR, defaults_render.alt_screen),
            hide_cursor=_bool_from_env(_HIDE_CURSOR_ENVVAR, defaults_render.hide_cursor),
            mouse=_mouse_from_env(_MOUSE_MODE_ENVVAR),
            ellipsis=os.getenv(_ELLIPSIS_ENVVAR, defaults_render.ellipsis),
        ),
    )
