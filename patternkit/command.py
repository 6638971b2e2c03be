"""Command pattern: named commands route work to their receivers."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Receiver(ABC):
    """Does the actual work of a command."""

    @abstractmethod
    def process(self) -> str:
        """Carry out the work and return the line it reported."""


class IOSEngineer(Receiver):
    def process(self) -> str:
        message = "IOSEngineer process command"
        print(message)
        return message


class AndroidEngineer(Receiver):
    def process(self) -> str:
        message = "AndroidEngineer process command"
        print(message)
        return message


class Command(ABC):
    """A named request bound to a receiver."""

    name: str

    def __init__(self, receiver: Receiver) -> None:
        self._receiver = receiver

    def process(self) -> None:
        self._receiver.process()

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if not isinstance(cls.__dict__.get("name"), str):
            raise TypeError(f"{cls.__name__} must define a string 'name'")


class IOSAppCommand(Command):
    name = "iOS"


class AndroidAppCommand(Command):
    name = "Android"


class Invoker:
    """Keeps commands and runs every one whose name matches a request."""

    def __init__(self) -> None:
        self._commands: list[Command] = []

    def add_command(self, command: Command) -> None:
        self._commands.append(command)

    def process(self, command: str) -> bool:
        """Run all matching commands; return whether any matched."""
        matched = [candidate for candidate in self._commands if candidate.name == command]
        for candidate in matched:
            candidate.process()
        if not matched:
            print(f"no processor for this command - {command}")
        return bool(matched)