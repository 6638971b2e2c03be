"""Iterator pattern: walk a fixed aggregate of elements with a cursor."""

from __future__ import annotations

from collections.abc import Iterator

_AGGREGATE_SIZE = 5


class Element:
    """An item held by the aggregate."""

    def echo(self) -> str:
        message = "Element"
        print(message)
        return message


class MyAggregate:
    """A fixed collection of five elements."""

    def __init__(self) -> None:
        self._elements = tuple(Element() for _ in range(_AGGREGATE_SIZE))

    def create_iterator(self) -> MyIterator:
        return MyIterator(self)

    def get_item(self, index: int) -> Element:
        if not 0 <= index < len(self._elements):
            raise IndexError(f"element index {index} out of range")
        return self._elements[index]

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[Element]:
        return iter(self._elements)


class MyIterator:
    """A cursor over an aggregate that stays on the last item once reached."""

    def __init__(self, aggregate: MyAggregate) -> None:
        self._aggregate = aggregate
        self.position = 0

    def first(self) -> None:
        self.position = 0

    def last(self) -> None:
        self.position = len(self._aggregate) - 1

    def next(self) -> None:
        if self.has_next():
            self.position += 1

    def has_next(self) -> bool:
        return self.position < len(self._aggregate) - 1

    def current_item(self) -> Element:
        return self._aggregate.get_item(self.position)