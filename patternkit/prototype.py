"""Prototype pattern: new objects are made by cloning an existing one."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace


class Prototype(ABC):
    """An object that can produce a copy of itself."""

    @abstractmethod
    def clone(self) -> Prototype:
        """Return a new object equal to this one."""


@dataclass
class ConcretePrototype(Prototype):
    """A prototype carrying a single integer payload."""

    data: int

    def clone(self) -> ConcretePrototype:
        return replace(self)