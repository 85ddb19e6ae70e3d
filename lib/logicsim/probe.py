"""
Probes, to report wire changes.

A Probe connects to a Wire, and reports (name, time, signal) to a "sink" whenever the
wire changes -- and also once when it is first attached.

The sink can be given per-probe.  Otherwise, the module-level PROBE_SINK is used : its
default is the 'default_probe_action' function, which prints to the terminal.
Replacing PROBE_SINK changes the reporting of **all** probes without their own sink.
"""

from typing import Callable, TypeAlias

from logicsim.agenda import Agenda
from logicsim.wire import Wire

__all__ = ["PROBE_SINK", "Probe", "ProbeSink", "default_probe_action"]

ProbeSink: TypeAlias = Callable[[str, int, bool], object]


def default_probe_action(name: str, time: int, signal: bool):
    """The default probe report = print the wire state to the terminal."""
    print(f"{name}\t@ {time}\t=> {signal}")


# : A single common definition for what probe reports do.
PROBE_SINK: ProbeSink = default_probe_action


class Probe:
    def __init__(
        self, agenda: Agenda, name: str, wire: Wire, sink: ProbeSink | None = None
    ):
        self.agenda = agenda
        self.name = name
        self.wire = wire
        self.sink = sink
        self.connection = wire.add(self.report)

    def report(self):
        # N.B. PROBE_SINK is looked up at report time, so it can be changed later.
        sink = PROBE_SINK if self.sink is None else self.sink
        sink(self.name, self.agenda.current_time(), self.wire.get_signal())

    def detach(self):
        """Stop reporting."""
        self.wire.remove(self.connection)
