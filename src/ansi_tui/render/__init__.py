"""Render frames to a terminal with minimal control-code output."""

from ansi_tui.render.renderer import ByteSink, Frame, FrameRenderer, RenderState

__all__ = ["ByteSink", "Frame", "FrameRenderer", "RenderState"]
