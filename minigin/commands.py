"""Commands that input can trigger, including ones acting on a game object."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any

from .movement import MovementComponent


class Command(ABC):
    """An action that can be executed on demand."""

    @abstractmethod
    def execute(self) -> None:
        """Perform the action."""


class ActorCommand(Command):
    """A command that acts on a particular game object."""

    def __init__(self, game_object: Any) -> None:
        self._game_object = game_object

    @property
    def game_object(self) -> Any:
        return self._game_object


class Direction(IntEnum):
    NEGATIVE = -1
    POSITIVE = 1


class MoveVertical(ActorCommand):
    """Move the game object along the y axis, if it can move."""

    def __init__(self, game_object: Any, direction: Direction) -> None:
        super().__init__(game_object)
        self.direction = int(direction)

    def execute(self) -> None:
        movement = self.game_object.get_component(MovementComponent)
        if movement is not None:
            movement.move_vertical(self.direction)


class MoveHorizontal(ActorCommand):
    """Move the game object along the x axis, if it can move."""

    def __init__(self, game_object: Any, direction: Direction) -> None:
        super().__init__(game_object)
        self.direction = int(direction)

    def execute(self) -> None:
        movement = self.game_object.get_component(MovementComponent)
        if movement is not None:
            movement.move_horizontal(self.direction)