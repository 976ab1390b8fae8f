"""Game objects: a transform, a list of components and a place in a hierarchy."""

from __future__ import annotations

from typing import Any, Optional, Type, TypeVar

from .components import BaseComponent
from .transform import TransformComponent

C = TypeVar("C", bound=BaseComponent)


class GameObject:
    """An entity made up of components, optionally parented to another object."""

    def __init__(self) -> None:
        self._parent: Optional[GameObject] = None
        self._children: list[GameObject] = []
        self._components: list[BaseComponent] = []
        self._transform = TransformComponent(self)
        self._marked_for_destruction = False

    def update(self) -> None:
        for component in list(self._components):
            component.update()

    def render(self) -> None:
        for component in self._components:
            component.render()

    def render_ui(self) -> None:
        for component in self._components:
            component.render_ui()

    def late_update(self) -> None:
        """Drop components marked for destruction."""
        self._components = [c for c in self._components if not c.is_marked_for_destruction]

    def add_component(self, component_type: Type[C], *args: Any, **kwargs: Any) -> C:
        """Create a component owned by this object and attach it."""
        component = component_type(self, *args, **kwargs)
        self._components.append(component)
        return component

    def get_component(self, component_type: Type[C]) -> Optional[C]:
        """Return the first attached component of the given type, or None."""
        return next((c for c in self._components if isinstance(c, component_type)), None)

    def has_component(self, component_type: Type[BaseComponent]) -> bool:
        return self.get_component(component_type) is not None

    def remove_component(self, component_type: Type[BaseComponent]) -> None:
        """Mark the first component of the given type for removal."""
        component = self.get_component(component_type)
        if component is not None:
            component.mark_for_destruction()

    def mark_for_destruction(self) -> None:
        self._marked_for_destruction = True

    @property
    def is_marked_for_destruction(self) -> bool:
        return self._marked_for_destruction

    def set_parent(self, parent: Optional["GameObject"], keep_world_position: bool) -> None:
        """Attach to a new parent (or detach with None); cycles are ignored."""
        if parent is self._parent or parent is self or self._is_child(parent):
            return
        transform = self._transform
        if parent is None:
            transform.set_local_position(transform.world_position)
        else:
            if keep_world_position:
                transform.set_local_position(
                    transform.world_position - parent.transform.world_position
                )
            transform.set_position_dirty()
        if self._parent is not None:
            self._parent._remove_child(self)
        self._parent = parent
        if parent is not None:
            parent._add_child(self)

    @property
    def parent(self) -> Optional["GameObject"]:
        return self._parent

    @property
    def children(self) -> list["GameObject"]:
        return list(self._children)

    @property
    def transform(self) -> TransformComponent:
        return self._transform

    def _add_child(self, child: "GameObject") -> None:
        if child is None or child is self or child in self._children:
            return
        child._parent = self
        self._children.append(child)

    def _remove_child(self, child: "GameObject") -> None:
        self._children = [c for c in self._children if c is not child]

    def _is_child(self, obj: Optional["GameObject"]) -> bool:
        return any(child is obj or child._is_child(obj) for child in self._children)