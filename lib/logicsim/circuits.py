"""
Circuits composed from gates.

These only create internal wires and gates : all of their behaviour comes from the
gates, so they need to be propagated on an Agenda like anything else.
"""

from logicsim.agenda import Agenda
from logicsim.gates import AndGate, Gate, Inverter, OrGate
from logicsim.wire import Wire

__all__ = ["FullAdder", "HalfAdder", "ripple_carry_adder"]


class HalfAdder:
    """
    Add two bits.

    sum = a XOR b, and carry = a AND b, made from an OR, two ANDs and an inverter.
    """

    def __init__(self, agenda: Agenda, a: Wire, b: Wire, sum: Wire, carry: Wire):
        self.d = Wire("d")
        self.e = Wire("e")
        self.gates: list[Gate] = [
            OrGate(agenda, a, b, self.d),
            AndGate(agenda, a, b, carry),
            Inverter(agenda, carry, self.e),
            AndGate(agenda, self.d, self.e, sum),
        ]


class FullAdder:
    """Add two bits and a carry-in, giving a sum and a carry-out."""

    def __init__(
        self,
        agenda: Agenda,
        a: Wire,
        b: Wire,
        c_in: Wire,
        sum: Wire,
        c_out: Wire,
    ):
        self.s = Wire("s")
        self.c1 = Wire("c1")
        self.c2 = Wire("c2")
        self.half_adders = [
            HalfAdder(agenda, b, c_in, self.s, self.c1),
            HalfAdder(agenda, a, self.s, sum, self.c2),
        ]
        self.or_gate = OrGate(agenda, self.c1, self.c2, c_out)


def ripple_carry_adder(
    agenda: Agenda,
    a_wires: list[Wire],
    b_wires: list[Wire],
    sum_wires: list[Wire],
    carry: Wire,
) -> list[FullAdder]:
    """Add two n-bit numbers, with a chain of full adders.

    The wire lists hold the bits most significant first.
    'carry' is the carry out of the most significant bit.
    The carry into the least significant bit is a fresh wire, so always 0.

    Returns the full adders, most significant first.
    """
    n_bits = len(a_wires)
    if n_bits == 0 or len(b_wires) != n_bits or len(sum_wires) != n_bits:
        msg = (
            "Wire lists must be non-empty and all the same length : got "
            f"{len(a_wires)}, {len(b_wires)} and {len(sum_wires)}."
        )
        raise ValueError(msg)
    adders = []
    c_out = carry
    for i_bit, (a, b, sum) in enumerate(zip(a_wires, b_wires, sum_wires)):
        c_in = Wire(f"c{i_bit}")
        adders.append(FullAdder(agenda, a, b, c_in, sum, c_out))
        c_out = c_in
    return adders
