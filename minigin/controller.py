"""Gamepad state with per-frame press and release detection."""

from __future__ import annotations

from enum import IntFlag
from typing import Callable, Optional

import pygame

_BUTTON_MASK = 0xFFFF


class ControllerButton(IntFlag):
    DPAD_UP = 0x0001
    DPAD_DOWN = 0x0002
    DPAD_LEFT = 0x0004
    DPAD_RIGHT = 0x0008
    START = 0x0010
    BACK = 0x0020
    LEFT_THUMB = 0x0040
    RIGHT_THUMB = 0x0080
    LEFT_SHOULDER = 0x0100
    RIGHT_SHOULDER = 0x0200
    BUTTON_A = 0x1000
    BUTTON_B = 0x2000
    BUTTON_X = 0x4000
    BUTTON_Y = 0x8000


# Joystick button indices in the common Xbox-style layout.
_JOYSTICK_BUTTONS = {
    0: ControllerButton.BUTTON_A,
    1: ControllerButton.BUTTON_B,
    2: ControllerButton.BUTTON_X,
    3: ControllerButton.BUTTON_Y,
    4: ControllerButton.LEFT_SHOULDER,
    5: ControllerButton.RIGHT_SHOULDER,
    6: ControllerButton.BACK,
    7: ControllerButton.START,
    8: ControllerButton.LEFT_THUMB,
    9: ControllerButton.RIGHT_THUMB,
}


class _GamepadPoller:
    """Reads the button mask of a physical gamepad through pygame."""

    def __init__(self, index: int) -> None:
        self._index = index
        self._joystick: Optional["pygame.joystick.JoystickType"] = None

    def __call__(self) -> int:
        if not pygame.joystick.get_init():
            return 0
        try:
            if self._joystick is None:
                if self._index >= pygame.joystick.get_count():
                    return 0
                self._joystick = pygame.joystick.Joystick(self._index)
            return self._read(self._joystick)
        except pygame.error:
            self._joystick = None
            return 0

    @staticmethod
    def _read(joystick: "pygame.joystick.JoystickType") -> int:
        mask = 0
        if joystick.get_numhats() > 0:
            hat_x, hat_y = joystick.get_hat(0)
            if hat_y > 0:
                mask |= ControllerButton.DPAD_UP
            if hat_y < 0:
                mask |= ControllerButton.DPAD_DOWN
            if hat_x < 0:
                mask |= ControllerButton.DPAD_LEFT
            if hat_x > 0:
                mask |= ControllerButton.DPAD_RIGHT
        for index, button in _JOYSTICK_BUTTONS.items():
            if index < joystick.get_numbuttons() and joystick.get_button(index):
                mask |= button
        return int(mask)


class Controller:
    """One gamepad; call update once per frame, then query its buttons."""

    def __init__(self, controller_index: int) -> None:
        self.controller_index = controller_index
        self.button_source: Callable[[], int] = _GamepadPoller(controller_index)
        self._current = 0
        self._previous = 0
        self._pressed_this_frame = 0
        self._released_this_frame = 0

    def update(self, buttons: Optional[int] = None) -> None:
        """Advance one frame with the given button mask, or poll the gamepad."""
        if buttons is None:
            buttons = self.button_source()
        self._previous = self._current
        self._current = int(buttons) & _BUTTON_MASK
        changes = self._current ^ self._previous
        self._pressed_this_frame = changes & self._current
        self._released_this_frame = changes & ~self._current & _BUTTON_MASK

    def is_down_this_frame(self, button: ControllerButton) -> bool:
        return bool(self._pressed_this_frame & button)

    def is_up_this_frame(self, button: ControllerButton) -> bool:
        return bool(self._released_this_frame & button)

    def is_pressed(self, button: ControllerButton) -> bool:
        return bool(self._current & button)