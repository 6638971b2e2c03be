"""Proxy pattern: guard and wrap access to a client."""

from __future__ import annotations

from abc import ABC, abstractmethod

_MIN_ALLOWED = 10


class ClientBase(ABC):
    """Something that serves requests."""

    @abstractmethod
    def request(self) -> None:
        """Serve a request."""


class Client(ClientBase):
    def request(self) -> None:
        print("Invoke Request")


class Proxy(ClientBase):
    """Forwards requests to a client only when the number permits it."""

    def __init__(self, client: ClientBase, number: int) -> None:
        self._client = client
        self.number = number

    def request(self) -> None:
        if self.allow_request():
            self.before_request()
            self._client.request()
            self.after_request()
        else:
            print("Request is not allowed")

    def allow_request(self) -> bool:
        return self.number >= _MIN_ALLOWED

    def before_request(self) -> str:
        message = "Before Request"
        print(message)
        return message

    def after_request(self) -> str:
        message = "After Request"
        print(message)
        return message