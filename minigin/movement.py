"""Components that move or spin their owner over time."""

from __future__ import annotations

from typing import Any

from .components import BaseComponent
from .gametime import GameTime


class MovementComponent(BaseComponent):
    """Moves its owner at a fixed speed, scaled by frame time."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self.speed = 100.0
        self.game_time = GameTime.instance()

    def update(self) -> None:
        pass

    def render(self) -> None:
        pass

    def move_vertical(self, direction: int) -> None:
        self._move(1, direction)

    def move_horizontal(self, direction: int) -> None:
        self._move(0, direction)

    def _move(self, axis: int, direction: int) -> None:
        transform = self.owner.transform
        position = transform.local_position
        position[axis] += direction * self.speed * self.game_time.delta_time
        transform.set_local_position(position)


class RotationComponent(BaseComponent):
    """Spins its owner about the z axis at a speed in degrees per second."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self.rotation_speed = 0.0
        self.game_time = GameTime.instance()

    def update(self) -> None:
        transform = self.owner.transform
        if transform is None:
            return
        delta = self.rotation_speed * self.game_time.delta_time
        transform.set_local_rotation(transform.local_rotation + delta)

    def render(self) -> None:
        pass