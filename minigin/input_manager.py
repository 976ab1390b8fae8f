"""Maps keyboard keys and gamepad buttons to commands."""

from __future__ import annotations

from collections.abc import Set
from enum import IntEnum
from typing import Any, ClassVar, Iterable, Optional

import pygame

from .commands import Command
from .controller import Controller, ControllerButton


class InputState(IntEnum):
    DOWN = 0
    PRESSED = 1
    UP = 2


def _key_held(pressed_keys: Any, key: int) -> bool:
    if isinstance(pressed_keys, Set):
        return key in pressed_keys
    try:
        return bool(pressed_keys[key])
    except (IndexError, KeyError):
        return False


class InputManager:
    """Polls input once per frame and runs the commands bound to it."""

    _instance: ClassVar[Optional["InputManager"]] = None

    def __init__(self, controller_count: int = 1) -> None:
        self._key_commands: dict[tuple[int, InputState], Command] = {}
        self._controller_commands: dict[
            tuple[int, ControllerButton, InputState], Command
        ] = {}
        self._controllers = [Controller(index) for index in range(controller_count)]

    @classmethod
    def instance(cls) -> "InputManager":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def controllers(self) -> tuple[Controller, ...]:
        return tuple(self._controllers)

    def bind_key_command(self, key: int, state: InputState, command: Command) -> None:
        """Bind a command to a key; replaces any earlier binding for that key and state."""
        self._key_commands[(key, InputState(state))] = command

    def bind_controller_command(
        self,
        controller_index: int,
        button: ControllerButton,
        state: InputState,
        command: Command,
    ) -> None:
        key = (controller_index, ControllerButton(button), InputState(state))
        self._controller_commands[key] = command

    def process_input(
        self, events: Optional[Iterable[Any]] = None, pressed_keys: Any = None
    ) -> bool:
        """Handle one frame of input; return False when a quit was requested.

        Without arguments the events and keyboard state are read from pygame.
        """
        for controller in self._controllers:
            controller.update()

        if events is None:
            events = pygame.event.get()
        for event in events:
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN:
                if not getattr(event, "repeat", 0):
                    self._run_key(event.key, InputState.DOWN)
            elif event.type == pygame.KEYUP:
                self._run_key(event.key, InputState.UP)

        if pressed_keys is None:
            pressed_keys = pygame.key.get_pressed()
        for (key, state), command in sorted(self._key_commands.items(), key=lambda i: i[0]):
            if state is InputState.PRESSED and _key_held(pressed_keys, key):
                command.execute()

        bindings = sorted(self._controller_commands.items(), key=lambda i: i[0])
        for (index, button, state), command in bindings:
            if not 0 <= index < len(self._controllers):
                continue
            controller = self._controllers[index]
            if state is InputState.DOWN:
                triggered = controller.is_down_this_frame(button)
            elif state is InputState.UP:
                triggered = controller.is_up_this_frame(button)
            else:
                triggered = controller.is_pressed(button)
            if triggered:
                command.execute()

        return True

    def _run_key(self, key: int, state: InputState) -> None:
        command = self._key_commands.get((key, state))
        if command is not None:
            command.execute()