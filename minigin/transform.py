"""Positions and hierarchical world transforms."""

from __future__ import annotations

import math
from typing import Any, Sequence

import numpy as np

from .components import BaseComponent


def _as_vec3(position: Sequence[float]) -> np.ndarray:
    vec = np.array(position, dtype=float)
    if vec.shape != (3,):
        raise ValueError(f"expected a 3-component position, got shape {vec.shape}")
    return vec


class Transform:
    """A plain position in space."""

    def __init__(self) -> None:
        self._position = np.zeros(3)

    @property
    def position(self) -> np.ndarray:
        return self._position.copy()

    def set_position(self, x: float, y: float, z: float = 0.0) -> None:
        self._position = np.array([x, y, z], dtype=float)


class TransformComponent(BaseComponent):
    """Local position and rotation, combined with the owner's parents into a world matrix."""

    def __init__(self, owner: Any) -> None:
        super().__init__(owner)
        self._local_position = np.zeros(3)
        self._local_rotation = 0.0
        self._world_matrix = np.eye(4)
        self._dirty = True

    def update(self) -> None:
        pass

    def render(self) -> None:
        pass

    def set_local_position(self, position: Sequence[float]) -> None:
        self._local_position = _as_vec3(position)
        self.set_position_dirty()

    def set_local_rotation(self, angle: float) -> None:
        """Set the rotation about the z axis, in degrees."""
        self._local_rotation = float(angle)
        self.set_position_dirty()

    @property
    def local_position(self) -> np.ndarray:
        return self._local_position.copy()

    @property
    def local_rotation(self) -> float:
        return self._local_rotation

    @property
    def world_position(self) -> np.ndarray:
        return self.world_matrix[:3, 3].copy()

    @property
    def world_matrix(self) -> np.ndarray:
        if self._dirty:
            translation = np.eye(4)
            translation[:3, 3] = self._local_position
            angle = math.radians(self._local_rotation)
            cos, sin = math.cos(angle), math.sin(angle)
            rotation = np.eye(4)
            rotation[0, 0], rotation[0, 1] = cos, -sin
            rotation[1, 0], rotation[1, 1] = sin, cos
            local = translation @ rotation

            parent = self.owner.parent
            if parent is not None:
                self._world_matrix = parent.transform.world_matrix @ local
            else:
                self._world_matrix = local
            self._dirty = False
        return self._world_matrix.copy()

    def set_position_dirty(self) -> None:
        """Invalidate the cached world matrix of this transform and its descendants."""
        if self._dirty:
            return
        self._dirty = True
        for child in self.owner.children:
            child.transform.set_position_dirty()