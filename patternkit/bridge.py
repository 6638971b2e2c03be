"""Bridge pattern: an abstraction delegates to an interchangeable implementor."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Implementor(ABC):
    """The implementation side of the bridge."""

    @abstractmethod
    def operation_imp(self) -> None:
        """Carry out the operation."""


class ConcreteImpl(Implementor):
    def operation_imp(self) -> None:
        print("ConcreteImpl operationImplementation")


class ConcreteImplNew(Implementor):
    """An implementor that wraps its work in before and after steps."""

    def operation_imp(self) -> None:
        self.before_operate()
        print("ConcreteImplNew operationImplementation new")
        self.after_operate()

    def before_operate(self) -> str:
        message = "Before operate in impNew"
        print(message)
        return message

    def after_operate(self) -> str:
        message = "After operate in impNew"
        print(message)
        return message


class Abstraction(ABC):
    """The interface side of the bridge."""

    @abstractmethod
    def operate(self) -> None:
        """Run the operation."""


class RefinedAbstraction(Abstraction):
    def __init__(self, implementor: Implementor) -> None:
        self._implementor = implementor

    def operate(self) -> None:
        self._implementor.operation_imp()