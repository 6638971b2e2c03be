"""Factory method pattern: each factory decides which product to make."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Product(ABC):
    """Something a factory produces."""

    @abstractmethod
    def play(self) -> str:
        """Use the product and return the line it reported."""


class ProductA(Product):
    def play(self) -> str:
        message = "play ConcreteProductA"
        print(message)
        return message


class ProductB(Product):
    def play(self) -> str:
        message = "play ConcreteProductB"
        print(message)
        return message


class Factory(ABC):
    """Creates products; subclasses choose the concrete product."""

    @abstractmethod
    def create_product(self) -> Product:
        """Return a new product."""


class FactoryA(Factory):
    def create_product(self) -> Product:
        return ProductA()


class FactoryB(Factory):
    def create_product(self) -> Product:
        return ProductB()