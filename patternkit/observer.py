"""Observer pattern: a subject tells registered observers about changes."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Observer(ABC):
    """Receives notifications from a Subject."""

    @abstractmethod
    def update(self) -> None:
        """Hear that the subject changed."""

    @abstractmethod
    def update_data(self, subject: Subject) -> None:
        """Hear that the subject changed, with access to its data."""


class _NamedObserver(Observer):
    label = ""

    def update(self) -> str:
        message = f"Observer{self.label} being notified:   data has been changed"
        print(message)
        return message

    def update_data(self, subject: Subject) -> str:
        message = f"Observer{self.label} being notified:   new data is {subject.data}"
        print(message)
        return message


class ObserverA(_NamedObserver):
    label = "A"


class ObserverB(_NamedObserver):
    label = "B"


class ObserverC(_NamedObserver):
    label = "C"


class Subject:
    """Holds an integer and notifies observers only while marked changed."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []
        self.changed = False
        self.data = 0

    @property
    def observers(self) -> tuple[Observer, ...]:
        return tuple(self._observers)

    def register_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Remove the first registration of this exact observer, if any."""
        for position, registered in enumerate(self._observers):
            if registered is observer:
                del self._observers[position]
                break

    def set_changed(self, changed: bool) -> None:
        self.changed = changed

    def _find(self, observer: Observer) -> Observer | None:
        return next((o for o in self._observers if o is observer), None)

    def notify(self, observer: Observer) -> None:
        if self.changed and (found := self._find(observer)) is not None:
            found.update()

    def notify_all(self) -> None:
        if self.changed:
            for observer in self._observers:
                observer.update()

    def notify_data(self, observer: Observer) -> None:
        if self.changed and (found := self._find(observer)) is not None:
            found.update_data(self)

    def notify_data_all(self) -> None:
        if self.changed:
            for observer in self._observers:
                observer.update_data(self)