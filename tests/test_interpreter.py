import pytest

from patternkit.interpreter import RomanNumberInterpreter

_SYMBOLS = [
    (1000, "M"), (900, "CM"), (500, "D"), (400, "CD"),
    (100, "C"), (90, "XC"), (50, "L"), (40, "XL"),
    (10, "X"), (9, "IX"), (5, "V"), (4, "IV"), (1, "I"),
]


def _to_roman(number):
    parts = []
    for value, symbol in _SYMBOLS:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)


def test_round_trip_all_numerals():
    interpreter = RomanNumberInterpreter()
    for number in range(1, 4000):
        assert interpreter.interpret(_to_roman(number)) == number


def test_worked_example():
    assert RomanNumberInterpreter().interpret("MCMXCIV") == 1994


@pytest.mark.parametrize("text", ["", "IIII", "MMMM", "VV", "IL", "xiv", "ABC", "XIVX"])
def test_invalid_numerals_give_zero(text):
    assert RomanNumberInterpreter().interpret(text) == 0


def test_interpret_is_repeatable():
    interpreter = RomanNumberInterpreter()
    first = interpreter.interpret("XLII")
    assert interpreter.interpret("XLII") == first
    assert first == interpreter.interpret("XL") + interpreter.interpret("II")