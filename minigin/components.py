"""Base classes for components attached to game objects."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseComponent(ABC):
    """A piece of behaviour owned by a game object."""

    def __init__(self, owner: Any) -> None:
        self._owner = owner
        self._marked_for_destruction = False

    @property
    def owner(self) -> Any:
        """The game object this component belongs to."""
        return self._owner

    @abstractmethod
    def update(self) -> None:
        """Advance the component by one frame."""

    @abstractmethod
    def render(self) -> None:
        """Draw the component."""

    def render_ui(self) -> None:
        """Draw immediate-mode UI; does nothing by default."""

    def mark_for_destruction(self) -> None:
        """Flag the component for removal at the end of the frame."""
        self._marked_for_destruction = True

    @property
    def is_marked_for_destruction(self) -> bool:
        return self._marked_for_destruction


class UIComponent(BaseComponent):
    """A component that only draws user interface."""

    def update(self) -> None:
        pass

    def render(self) -> None:
        pass

    @abstractmethod
    def render_ui(self) -> None:
        """Draw the component's user interface."""