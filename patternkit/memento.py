"""Memento pattern: capture and restore a work object's state."""

from __future__ import annotations

import weakref
from dataclasses import dataclass


@dataclass
class _State:
    content: str = ""
    is_open: bool = False


class Memento:
    """A weak handle on a saved state that only its WorkObj reads or writes."""

    def __init__(self, state: _State) -> None:
        self._state_ref = weakref.ref(state)

    @property
    def state(self) -> _State | None:
        """The saved state, or None once its owner has gone."""
        return self._state_ref()


class WorkObj:
    """A document-like object with content and an open flag.

    A WorkObj keeps a single saved state: every memento it creates refers to
    that same state, so creating a new memento overwrites what the earlier
    ones hold.
    """

    def __init__(self) -> None:
        self.content = ""
        self.is_open = False
        self._state: _State | None = None

    def open(self) -> None:
        self.is_open = True

    def close(self) -> None:
        self.is_open = False

    def create_memento(self) -> Memento:
        if self._state is None:
            self._state = _State()
        self._state.is_open = self.is_open
        self._state.content = self.content
        return Memento(self._state)

    def save_to_memento(self, memento: Memento) -> None:
        state = memento.state
        if state is not None:
            state.is_open = self.is_open
            state.content = self.content

    def recover_from_memento(self, memento: Memento) -> None:
        state = memento.state
        if state is not None:
            self.is_open = state.is_open
            self.content = state.content