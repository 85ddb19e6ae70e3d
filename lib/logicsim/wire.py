"""
Wire support.

A Wire is an object with a current boolean signal, which notifies a list of
connections whenever the signal *changes* via Wire.set_signal(value).
Setting a wire to the value it already has does nothing at all.

Connections are zero-argument callbacks, added with Wire.add(callback).
Adding a callback also calls it once, immediately, so that whatever it drives starts
out consistent with the current wire state.
When the signal changes, the callbacks are called most-recently-added first.

A wire's signal is its only state, and it implements no logic or scheduling functions:
callbacks normally schedule delayed work on an Agenda, which in due course sets the
signal of other wires.

NOTE: callbacks run synchronously, within the set_signal call, and may themselves set
other wires or schedule actions.
"""

from dataclasses import dataclass
from typing import Callable, TypeAlias

__all__ = ["Wire", "WireConnection"]

WireCallback: TypeAlias = Callable[[], object]


@dataclass(eq=False)
class WireConnection:
    """
    A callback registered on a Wire.

    Each Wire.add call makes a distinct connection, even for the same callback, so
    that a specific one can be removed again with Wire.remove.
    """

    call: WireCallback


class Wire:
    def __init__(self, name: str | None = None, start_value: bool = False):
        self.name = name
        self._signal = bool(start_value)
        self.connections: list[WireConnection] = []

    def __str__(self):
        name = "" if self.name is None else self.name
        return f"Wire<{name} = {self._signal}>"

    def get_signal(self) -> bool:
        return self._signal

    def set_signal(self, new_value: bool) -> None:
        """Set the signal, and call all the callbacks if it has changed."""
        new_value = bool(new_value)
        if new_value == self._signal:
            return
        self._signal = new_value
        # N.B. iterate over a copy : callbacks may add connections.
        for connection in list(self.connections):
            connection.call()

    def add(self, callback: WireCallback) -> WireConnection:
        """Add a callback, and call it once now.

        The new callback goes at the *start* of the connections, so it is called before
        any earlier ones.
        Returns the connection, which can be passed to 'remove'.
        """
        if not callable(callback):
            raise TypeError(f"Argument 'callback', {callback!r} is not callable.")
        connection = WireConnection(callback)
        self.connections[0:0] = [connection]
        callback()
        return connection

    def remove(self, connection: WireConnection) -> None:
        """Remove a given connection."""
        while connection in self.connections:
            self.connections.remove(connection)
