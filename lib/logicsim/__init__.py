"""
Digital Circuit Simulation

Provides Wires, which carry a boolean signal, and an Agenda, which runs delayed actions
in time order.  Gates and Probes are built on these.

A Wire has a boolean signal, and a list of callbacks which are called whenever the
signal changes.  Adding a callback also calls it once, immediately.

An Agenda has a clock, and a schedule of actions (zero-argument calls), each due at a
particular time.  Agenda.after_delay(delay, action) schedules an action 'delay' units
after the current time, and Agenda.propagate() runs all the scheduled actions in time
order, until none remain.
Actions scheduled for the same time run in the order they were scheduled.

In practice, the callbacks of a gate's input wires schedule a recompute of the gate
after its delay, and that sets the signal of its output wire.  This may in turn trigger
callbacks of gates downstream, which schedule further actions, and so on.
  * gates : AndGate, OrGate, Inverter
  * circuits made from gates : HalfAdder, FullAdder, ripple_carry_adder
  * a Probe reports the changes of a wire

"""

# Import the major commonly used definitions into the root module.
from .ordered_queue import EmptyQueueError, OrderedQueue
from .agenda import Agenda, InvalidDelayError
from .wire import Wire, WireConnection
from .gates import AndGate, Gate, Inverter, OrGate
from .probe import Probe
from .circuits import FullAdder, HalfAdder, ripple_carry_adder

__all__ = [
    "Agenda",
    "AndGate",
    "EmptyQueueError",
    "FullAdder",
    "Gate",
    "HalfAdder",
    "InvalidDelayError",
    "Inverter",
    "OrGate",
    "OrderedQueue",
    "Probe",
    "Wire",
    "WireConnection",
    "ripple_carry_adder",
]
