import pytest

from patternkit.state import Machine, OffState, OnState, PausedState, ResumedState


def test_starts_off(capsys):
    machine = Machine()
    assert isinstance(machine.state, OffState)
    assert capsys.readouterr().out == "Original state: Off\n"


def test_full_cycle(capsys):
    machine = Machine()
    machine.on()
    assert isinstance(machine.state, OnState)
    machine.pause()
    assert isinstance(machine.state, PausedState)
    machine.resume()
    assert isinstance(machine.state, ResumedState)
    machine.off()
    assert isinstance(machine.state, OffState)
    assert capsys.readouterr().out.splitlines() == [
        "Original state: Off",
        "switch to On",
        "switch to Pause",
        "switch to Resume",
        "switch to Off",
    ]


@pytest.mark.parametrize("request_name", ["off", "pause", "resume"])
def test_off_ignores_other_requests(request_name):
    machine = Machine()
    before = machine.state
    getattr(machine, request_name)()
    assert machine.state is before


def test_on_ignores_on_and_resume():
    machine = Machine()
    machine.on()
    before = machine.state
    machine.on()
    machine.resume()
    assert machine.state is before


def test_resumed_can_pause_again(capsys):
    machine = Machine()
    machine.on()
    machine.pause()
    machine.resume()
    capsys.readouterr()
    machine.pause()
    assert capsys.readouterr().out == "switch to Pause\n"
    assert type(machine.state) is PausedState