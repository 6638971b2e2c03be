"""Flyweight pattern: share intrinsic state, keep extrinsic state outside."""

from __future__ import annotations

import weakref
from dataclasses import dataclass, field
from functools import lru_cache


@dataclass(frozen=True, order=True)
class ExtrinsicData:
    """State supplied by the client; ordered field by field."""

    data1: int
    data2: int
    data3: int


@dataclass(eq=False)
class FlyWeight:
    """A shared object identified by its three intrinsic values."""

    data1: int
    data2: int
    data3: int
    ex_data: ExtrinsicData = field(default_factory=lambda: ExtrinsicData(0, 0, 0))

    @property
    def intrinsic(self) -> tuple[int, int, int]:
        return (self.data1, self.data2, self.data3)


class FlyWeightFactory:
    """Holds flyweights and hands out a shared one per intrinsic triple."""

    def __init__(self) -> None:
        self._flyweights: list[FlyWeight] = []

    def create_flyweight(self, data1: int, data2: int, data3: int) -> FlyWeight:
        key = (data1, data2, data3)
        for flyweight in self._flyweights:
            if flyweight.intrinsic == key:
                return flyweight
        flyweight = FlyWeight(data1, data2, data3)
        self._flyweights.append(flyweight)
        return flyweight

    def __len__(self) -> int:
        return len(self._flyweights)


@lru_cache(maxsize=None)
def get_factory() -> FlyWeightFactory:
    """Return the process-wide flyweight factory."""
    return FlyWeightFactory()


class FlyWeightClient:
    """Maps extrinsic data to weak references of shared flyweights."""

    def __init__(self, factory: FlyWeightFactory | None = None) -> None:
        self._factory = factory if factory is not None else get_factory()
        self._entries: dict[ExtrinsicData, weakref.ref[FlyWeight]] = {}

    def add_flyweight(self, ex_data: ExtrinsicData, data1: int, data2: int, data3: int) -> None:
        """Attach a shared flyweight to ex_data; an existing key is kept as is."""
        flyweight = self._factory.create_flyweight(data1, data2, data3)
        self._entries.setdefault(ex_data, weakref.ref(flyweight))

    def get(self, ex_data: ExtrinsicData) -> FlyWeight | None:
        """Return the flyweight attached to ex_data, if still alive."""
        ref = self._entries.get(ex_data)
        return ref() if ref is not None else None

    def show_all(self) -> None:
        for ex_data, ref in sorted(self._entries.items()):
            print("FlyWeight:")
            flyweight = ref()
            if flyweight is not None:
                print(
                    f"\tIntrinsic data = {flyweight.data1},{flyweight.data2},{flyweight.data3},"
                    f"Extrinsic data={ex_data.data1},{ex_data.data2},{ex_data.data3}"
                )

    def __len__(self) -> int:
        return len(self._entries)