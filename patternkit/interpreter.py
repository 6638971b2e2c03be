"""Interpreter pattern: evaluate Roman numerals place by place.

Grammar:
    numeral ::= thousands hundreds tens ones
    place   ::= nine | four | [five] one{0,3}
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class _Place:
    one: str
    five: str
    four: str
    nine: str
    multiplier: int

    def consume(self, text: str) -> tuple[int, str]:
        """Read this place's digits from the front of text."""
        if self.nine and text.startswith(self.nine):
            return 9 * self.multiplier, text[len(self.nine):]
        if self.four and text.startswith(self.four):
            return 4 * self.multiplier, text[len(self.four):]
        value = 0
        if self.five and text.startswith(self.five):
            value += 5 * self.multiplier
            text = text[1:]
        for _ in range(3):
            if not text.startswith(self.one):
                break
            value += self.multiplier
            text = text[1:]
        return value, text


_PLACES = (
    _Place("M", "", "", "", 1000),
    _Place("C", "D", "CD", "CM", 100),
    _Place("X", "L", "XL", "XC", 10),
    _Place("I", "V", "IV", "IX", 1),
)


class RomanNumberInterpreter:
    """Evaluates upper-case Roman numerals from 1 to 3999."""

    def interpret(self, text: str) -> int:
        """Return the numeral's value, or 0 if text is not a valid numeral."""
        total = 0
        rest = text
        for place in _PLACES:
            value, rest = place.consume(rest)
            total += value
        return 0 if rest else total