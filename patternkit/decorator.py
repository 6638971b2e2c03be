"""Decorator pattern: wrap a car to add decorations to its description."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Car(ABC):
    """Anything that can show itself as a car."""

    @abstractmethod
    def show(self) -> None:
        """Describe the car."""


class SportsCar(Car):
    def __init__(self, name: str) -> None:
        self.name = name

    def show(self) -> None:
        print(f"This is a sports car with name {self.name} ")


class LogoDecoratedCar(Car):
    """Adds a logo to the wrapped car."""

    def __init__(self, car: Car) -> None:
        self._car = car

    def show(self) -> None:
        self._car.show()
        self.add_decoration()

    def add_decoration(self) -> str:
        message = "with logo decoration"
        print(message)
        return message


class WingDecoratedCar(Car):
    """Adds a wing to the wrapped car."""

    def __init__(self, car: Car) -> None:
        self._car = car

    def show(self) -> None:
        self._car.show()
        self.add_decoration()

    def add_decoration(self) -> str:
        message = "with wind decoration"
        print(message)
        return message