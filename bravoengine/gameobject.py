"""Game objects: containers of components sharing one transform."""

from __future__ import annotations

from typing import Any, List, Optional, Type, TypeVar

from .components import Component
from .geometry import Transform

C = TypeVar("C", bound=Component)


class GameObject:
    """A named, tagged object in a scene holding components and a transform.

    The parent link is not owning; children are kept as references.
    """

    def __init__(self, name: str = "", tag: str = "") -> None:
        self.id = -1
        self.name = name
        self.tag = tag
        self.active = True
        self.transform = Transform()
        self._components: List[Component] = []
        self._parent: Optional[GameObject] = None
        self._children: List[GameObject] = []

    @property
    def components(self) -> List[Component]:
        return list(self._components)

    def add_component(self, component: Component) -> Component:
        """Attach ``component`` to this object and return it."""
        component.game_object = self
        self._components.append(component)
        return component

    def create_component(self, kind: Type[C], *args: Any, **kwargs: Any) -> C:
        """Construct a component of ``kind`` with the given arguments and attach it."""
        component = kind(*args, **kwargs)
        self.add_component(component)
        return component

    def remove_component(self, component: Component) -> None:
        """Detach ``component``; does nothing if it is not attached here."""
        remaining = [c for c in self._components if c is not component]
        if len(remaining) != len(self._components):
            self._components = remaining
            component.game_object = None

    def has_component(self, kind: Type[Component]) -> bool:
        return any(isinstance(c, kind) for c in self._components)

    def get_components(self, kind: Type[C]) -> List[C]:
        return [c for c in self._components if isinstance(c, kind)]

    def components_with_tag(self, tag: str, kind: Type[C] = Component) -> List[C]:
        return [c for c in self._components if c.tag == tag and isinstance(c, kind)]

    @property
    def parent(self) -> Optional[GameObject]:
        return self._parent

    @property
    def has_parent(self) -> bool:
        return self._parent is not None

    @property
    def children(self) -> List[GameObject]:
        return list(self._children)

    def set_parent(self, parent: GameObject) -> None:
        """Make ``parent`` this object's parent, leaving any previous one."""
        if self._parent is parent:
            return
        self.remove_parent()
        self._parent = parent
        if not any(child is self for child in parent._children):
            parent._children.append(self)

    def remove_parent(self) -> None:
        if self._parent is None:
            return
        parent = self._parent
        self._parent = None
        parent._children = [child for child in parent._children if child is not self]

    def add_child(self, child: GameObject) -> None:
        child.set_parent(self)

    def remove_child(self, child: GameObject) -> None:
        if child._parent is self:
            child.remove_parent()

    def clone(self) -> GameObject:
        """A copy with cloned components and transform, detached from any hierarchy."""
        other = type(self).__new__(type(self))
        other.__dict__.update(self.__dict__)
        other.transform = Transform(
            self.transform.position, self.transform.rotation, self.transform.scale
        )
        other._parent = None
        other._children = []
        other._components = []
        for component in self._components:
            other.add_component(component.clone())
        return other