"""Tests for legacy and SGR-style mouse report decoding."""

from ansi_tui.input.mouse import (
    MouseAction,
    MouseButton,
    MouseEvent,
    decode_button,
    parse_legacy_mouse,
    parse_param_mouse,
)


class TestDecodeButton:

    def test_basic_buttons(self) -> None:
        assert decode_button(0).button == MouseButton.LEFT
        assert decode_button(1).button == MouseButton.MIDDLE
        assert decode_button(2).button == MouseButton.RIGHT
        assert decode_button(3).button == MouseButton.NONE

    def test_wheel_buttons(self) -> None:
        assert decode_button(64).button == MouseButton.WHEEL_UP
        assert decode_button(65).button == MouseButton.WHEEL_DOWN
        assert decode_button(66).button == MouseButton.WHEEL_LEFT
        assert decode_button(67).button == MouseButton.WHEEL_RIGHT

    def test_extended_buttons(self) -> None:
        assert decode_button(128).button == MouseButton.BACKWARD
        assert decode_button(129).button == MouseButton.FORWARD

    def test_modifiers(self) -> None:
        shift = decode_button(4)
        assert (shift.shift, shift.alt, shift.ctrl) == (True, False, False)
        alt = decode_button(8)
        assert (alt.shift, alt.alt, alt.ctrl) == (False, True, False)
        ctrl = decode_button(16)
        assert (ctrl.shift, ctrl.alt, ctrl.ctrl) == (False, False, True)

    def test_motion(self) -> None:
        assert decode_button(32).motion is True
        assert decode_button(0).motion is False


class TestLegacyMouse:

    def test_left_click(self) -> None:
        event = parse_legacy_mouse(32, 42, 37)
        assert event == MouseEvent(MouseButton.LEFT, MouseAction.PRESS, 10, 5)

    def test_release(self) -> None:
        event = parse_legacy_mouse(32 + 3, 42, 37)
        assert event.action == MouseAction.RELEASE
        assert event.button == MouseButton.NONE

    def test_drag(self) -> None:
        event = parse_legacy_mouse(32 + 32, 50, 40)
        assert event.button == MouseButton.LEFT
        assert event.action == MouseAction.MOTION

    def test_wheel_with_ctrl(self) -> None:
        event = parse_legacy_mouse(32 + 64 + 16, 33, 33)
        assert event.button == MouseButton.WHEEL_UP
        assert event.ctrl is True
        assert event.is_wheel

    def test_coordinates_stay_one_indexed(self) -> None:
        event = parse_legacy_mouse(32, 33, 33)
        assert (event.x, event.y) == (1, 1)


class TestParamMouse:

    def test_left_click(self) -> None:
        event = parse_param_mouse('\x1b[<0;15;10M')
        assert event == MouseEvent(MouseButton.LEFT, MouseAction.PRESS, 15, 10)

    def test_left_release(self) -> None:
        event = parse_param_mouse('\x1b[<0;15;10m')
        assert event.action == MouseAction.RELEASE
        assert event.button == MouseButton.NONE

    def test_right_click(self) -> None:
        event = parse_param_mouse('\x1b[<2;20;25M')
        assert event.button == MouseButton.RIGHT
        assert (event.x, event.y) == (20, 25)

    def test_wheel(self) -> None:
        assert parse_param_mouse('\x1b[<64;10;5M').button == MouseButton.WHEEL_UP
        assert parse_param_mouse('\x1b[<65;10;5M').button == MouseButton.WHEEL_DOWN

    def test_motion_with_button(self) -> None:
        event = parse_param_mouse('\x1b[<32;3;4M')
        assert event.button == MouseButton.LEFT
        assert event.action == MouseAction.MOTION

    def test_motion_without_button(self) -> None:
        event = parse_param_mouse('\x1b[<35;3;4M')
        assert event.button == MouseButton.NONE
        assert event.action == MouseAction.MOTION

    def test_large_coordinates(self) -> None:
        event = parse_param_mouse('\x1b[<0;300;200M')
        assert (event.x, event.y) == (300, 200)

    def test_modifiers(self) -> None:
        event = parse_param_mouse('\x1b[<20;1;1M')
        assert event.shift is True
        assert event.ctrl is True
        assert event.alt is False

    def test_invalid_input(self) -> None:
        assert parse_param_mouse('not a mouse sequence') is None
        assert parse_param_mouse('') is None
        assert parse_param_mouse('\x1b[<0;15M') is None


class TestPredicates:

    def test_click_predicates(self) -> None:
        click = MouseEvent(MouseButton.LEFT, MouseAction.PRESS, 10, 5)
        right = MouseEvent(MouseButton.RIGHT, MouseAction.PRESS, 10, 5)
        middle = MouseEvent(MouseButton.MIDDLE, MouseAction.PRESS, 10, 5)
        assert click.is_click and click.is_left_click
        assert not click.is_right_click
        assert right.is_right_click
        assert middle.is_middle_click

    def test_release_motion_wheel(self) -> None:
        release = MouseEvent(MouseButton.NONE, MouseAction.RELEASE, 10, 5)
        motion = MouseEvent(MouseButton.LEFT, MouseAction.MOTION, 12, 5)
        wheel = MouseEvent(MouseButton.WHEEL_UP, MouseAction.PRESS, 10, 5)
        assert release.is_release and not release.is_click
        assert motion.is_motion and not motion.is_click
        assert wheel.is_wheel and not wheel.is_click
