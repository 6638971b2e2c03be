"""State pattern: a machine whose behaviour depends on its current state.

Transitions: off -> on; on -> pause/off; pause -> resume/off; resume -> pause/off.
Any other request is ignored.
"""

from __future__ import annotations


class State:
    """A machine state; requests it does not allow do nothing."""

    def on(self, machine: Machine) -> None:
        pass

    def off(self, machine: Machine) -> None:
        pass

    def pause(self, machine: Machine) -> None:
        pass

    def resume(self, machine: Machine) -> None:
        pass


def _switch_off(machine: Machine) -> None:
    print("switch to Off")
    machine.set_state(OffState())


def _switch_pause(machine: Machine) -> None:
    print("switch to Pause")
    machine.set_state(PausedState())


class OffState(State):
    def on(self, machine: Machine) -> None:
        print("switch to On")
        machine.set_state(OnState())


class OnState(State):
    def pause(self, machine: Machine) -> None:
        _switch_pause(machine)

    def off(self, machine: Machine) -> None:
        _switch_off(machine)


class PausedState(State):
    def resume(self, machine: Machine) -> None:
        print("switch to Resume")
        machine.set_state(ResumedState())

    def off(self, machine: Machine) -> None:
        _switch_off(machine)


class ResumedState(State):
    def pause(self, machine: Machine) -> None:
        _switch_pause(machine)

    def off(self, machine: Machine) -> None:
        _switch_off(machine)


class Machine:
    """Delegates each request to its current state."""

    def __init__(self) -> None:
        self.state: State = OffState()
        print("Original state: Off")

    def set_state(self, state: State) -> None:
        self.state = state

    def on(self) -> None:
        self.state.on(self)

    def off(self) -> None:
        self.state.off(self)

    def pause(self) -> None:
        self.state.pause(self)

    def resume(self) -> None:
        self.state.resume(self)