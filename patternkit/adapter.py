"""Adapter pattern: expose an existing class through a target interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Adaptee:
    """An existing class with an incompatible interface."""

    def specific_request(self) -> str:
        message = "invoke SpecificRequest"
        print(message)
        return message


class Target(ABC):
    """The interface clients expect."""

    @abstractmethod
    def request(self) -> None:
        """Perform the request."""


class Adapter(Target):
    """Forwards Target.request to an Adaptee."""

    def __init__(self, adaptee: Adaptee) -> None:
        self._adaptee = adaptee

    def request(self) -> None:
        self._adaptee.specific_request()