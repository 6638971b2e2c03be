"""Builder pattern: a director drives a builder through construction steps."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ComplexProduct:
    """The object assembled step by step."""

    initialized: bool = False
    mode: str = ""

    def initialize(self) -> None:
        self.initialized = True

    def switch_mode(self, mode: str) -> None:
        self.mode = mode

    def show(self) -> str:
        """Print the product's state and return the printed text."""
        text = f"Initialized: {int(self.initialized)}\nMode: {self.mode}"
        print(text)
        return text


class Builder(ABC):
    """Owns a product and knows how to carry out each construction step."""

    def __init__(self) -> None:
        self.product = ComplexProduct()

    def initialize(self) -> None:
        self.product.initialize()

    @abstractmethod
    def switch_mode(self) -> None:
        """Put the product into this builder's mode."""


class BuilderA(Builder):
    def switch_mode(self) -> None:
        self.product.switch_mode("A")


class BuilderB(Builder):
    def switch_mode(self) -> None:
        self.product.switch_mode("B")


class Director:
    """Runs the construction steps in order on a builder."""

    def __init__(self, builder: Builder) -> None:
        self._builder = builder

    def construct(self) -> None:
        self._builder.initialize()
        self._builder.switch_mode()

    @property
    def product(self) -> ComplexProduct:
        return self._builder.product