"""Chain of responsibility: a demand is passed down to the last subordinate."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Demand:
    """A request travelling along the chain."""

    name: str
    kind: str


class Owner(ABC):
    """A link in the chain; hands demands to its subordinate when it has one."""

    def __init__(self, subordinate: Owner | None = None) -> None:
        self.subordinate = subordinate

    def handle_demand(self, demand: Demand) -> None:
        if self.subordinate is not None:
            self.subordinate.handle_demand(demand)
        else:
            self.handle(demand)

    @abstractmethod
    def handle(self, demand: Demand) -> None:
        """Take responsibility for the demand."""


def _announce(role: str, demand: Demand) -> None:
    print(f"{role} is responsible for this demand of type-{demand.kind},name={demand.name}")


class Manager(Owner):
    def handle(self, demand: Demand) -> None:
        _announce("Manager", demand)


class Supervisor(Owner):
    def handle(self, demand: Demand) -> None:
        _announce("Supervisor", demand)


class Developer(Owner):
    def handle(self, demand: Demand) -> None:
        _announce("Developer", demand)