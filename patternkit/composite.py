"""Composite pattern: leaves and containers share one interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Component(ABC):
    """A node of the tree; child operations do nothing by default."""

    @abstractmethod
    def show_name(self) -> None:
        """Print this node's name, or its children's names."""

    def add(self, component: Component) -> None:
        pass

    def remove(self, component: Component) -> None:
        pass

    def get_component(self, index: int) -> Component | None:
        return None


class Composite(Component):
    """A node holding an ordered list of children."""

    def __init__(self) -> None:
        self._children: list[Component] = []

    def show_name(self) -> None:
        for child in self._children:
            child.show_name()

    def add(self, component: Component) -> None:
        self._children.append(component)

    def remove(self, component: Component) -> None:
        """Remove the first occurrence of this exact object, if present."""
        for position, child in enumerate(self._children):
            if child is component:
                del self._children[position]
                break

    def get_component(self, index: int) -> Component | None:
        if 0 <= index < len(self._children):
            return self._children[index]
        return None


class Leaf(Component):
    def __init__(self, name: str) -> None:
        self.name = name

    def show_name(self) -> None:
        print(f"This leaf'name is: {self.name}")