"""
Logic gates.

A Gate connects some input Wires to one output Wire, through an Agenda.
Whenever an input changes, the gate schedules a recompute after its propagation delay.
When that runs, it reads the inputs *as they then are*, and sets the output to the
gate's logic function of them.

The delay is the class 'DELAY', unless a 'delay' keyword is given.
"""

from logicsim.agenda import Agenda, check_delay
from logicsim.wire import Wire

__all__ = ["AndGate", "Gate", "Inverter", "OrGate"]


class Gate:
    """
    Common behaviour of gates.

    Subclasses define the DELAY and the 'logic' function.
    """

    DELAY: int = 0

    def __init__(
        self,
        agenda: Agenda,
        inputs: list[Wire],
        output: Wire,
        delay: int | None = None,
    ):
        self.agenda = agenda
        self.inputs = list(inputs)
        self.output = output
        if delay is None:
            delay = self.DELAY
        self.delay = check_delay(delay)
        # N.B. each 'add' also calls the callback, so this schedules one initial
        # recompute per input.
        for wire in self.inputs:
            wire.add(self.input_changed)

    def __repr__(self):
        return f"{self.__class__.__name__}(delay={self.delay})"

    def logic(self, *signals: bool) -> bool:
        raise NotImplementedError

    def input_changed(self):
        self.agenda.after_delay(self.delay, self.recompute)

    def recompute(self):
        signals = [wire.get_signal() for wire in self.inputs]
        self.output.set_signal(self.logic(*signals))


class AndGate(Gate):
    DELAY = 3

    def __init__(self, agenda: Agenda, a: Wire, b: Wire, output: Wire, **kwargs):
        super().__init__(agenda, [a, b], output, **kwargs)

    def logic(self, a: bool, b: bool) -> bool:
        return a and b


class OrGate(Gate):
    DELAY = 5

    def __init__(self, agenda: Agenda, a: Wire, b: Wire, output: Wire, **kwargs):
        super().__init__(agenda, [a, b], output, **kwargs)

    def logic(self, a: bool, b: bool) -> bool:
        return a or b


class Inverter(Gate):
    DELAY = 2

    def __init__(self, agenda: Agenda, input: Wire, output: Wire, **kwargs):
        super().__init__(agenda, [input], output, **kwargs)

    def logic(self, signal: bool) -> bool:
        return not signal
