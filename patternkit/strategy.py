"""Strategy pattern: a client runs whichever algorithm it is given."""

from __future__ import annotations

from abc import ABC, abstractmethod

_NO_RESULT = -1


class Algorithm(ABC):
    @abstractmethod
    def calculate(self) -> int:
        """Run the algorithm and return its result."""


class AlgorithmA(Algorithm):
    def calculate(self) -> int:
        print("concrete algorithmA caculation")
        return 1


class AlgorithmB(Algorithm):
    def calculate(self) -> int:
        print("concrete algorithmB caculation")
        return 2


class AlgorithmC(Algorithm):
    def calculate(self) -> int:
        print("concrete algorithmC caculation")
        return 3


class StrategyClient:
    """Runs its current algorithm; the algorithm may be swapped at any time."""

    def __init__(self, algorithm: Algorithm | None) -> None:
        self.algorithm = algorithm

    def do_calculation(self) -> int:
        """Return the algorithm's result, or -1 when there is none."""
        result = self.algorithm.calculate() if self.algorithm is not None else _NO_RESULT
        print(f"Result is : {result}")
        return result