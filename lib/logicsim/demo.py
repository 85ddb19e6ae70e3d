"""
Demonstration : the half adder of SICP section 3.3.4.

Probes the sum and carry of a half adder, then sets each input in turn and propagates.
"""

from logicsim import Agenda, HalfAdder, Probe, Wire
from logicsim.probe import ProbeSink

__all__ = ["run"]


def run(sink: ProbeSink | None = None):
    agenda = Agenda()
    input1 = Wire("input1")
    input2 = Wire("input2")
    sum = Wire("sum")
    carry = Wire("carry")

    Probe(agenda, "Sum", sum, sink=sink)
    Probe(agenda, "Carry", carry, sink=sink)
    HalfAdder(agenda, input1, input2, sum, carry)
    print("-----End Setup-----------------\n")

    input1.set_signal(True)
    agenda.propagate()
    print("-----End First Propagation-----\n")

    input2.set_signal(True)
    agenda.propagate()
    print("-----End Second Propagation----")
    print("-----End Test------------------\n")
    return agenda
