"""
The simulation agenda.

An Agenda owns the simulation clock, and a schedule of pending actions.
An action is any zero-argument callable : it is scheduled with
Agenda.after_delay(delay, action), to run at (current time + delay).

Agenda.propagate() then executes the scheduled actions in time order, advancing the
clock to each action's time as it goes, until there are none left.
Actions may themselves schedule further actions (typically by changing a Wire, whose
callbacks then call 'after_delay'), and these are executed in the same pass.

Actions scheduled for the same time run in the order they were scheduled.
The clock never goes backwards, so delays must not be negative.
"""

import logging
from typing import Callable, TypeAlias

from logicsim.ordered_queue import OrderedQueue

__all__ = ["Action", "Agenda", "InvalidDelayError", "check_delay"]

_LOG = logging.getLogger(__name__)

Action: TypeAlias = Callable[[], object]


class InvalidDelayError(ValueError):
    """Raised when a delay is negative, i.e. would schedule into the past."""


def check_delay(delay: int) -> int:
    """Check that a delay is a non-negative integer, and return it."""
    if isinstance(delay, bool) or not isinstance(delay, int):
        raise TypeError(f"Argument 'delay', {delay!r} has unsupported type.")
    if delay < 0:
        raise InvalidDelayError(f"Delay {delay!r} is negative.")
    return delay


class Agenda:
    def __init__(self):
        self._time: int = 0
        self._schedule: OrderedQueue[Action] = OrderedQueue()

    def __repr__(self):
        return f"Agenda<time={self._time}, pending={self.pending()}>"

    def __len__(self):
        return self.pending()

    def current_time(self) -> int:
        return self._time

    def pending(self) -> int:
        """Return the number of actions still scheduled."""
        return len(self._schedule)

    def after_delay(self, delay: int, action: Action) -> None:
        """Schedule an action to run 'delay' time units from now.

        Nothing is executed here : even with zero delay, the action only runs when
        the agenda is propagated (but then before any later-scheduled action).
        """
        delay = check_delay(delay)
        if not callable(action):
            raise TypeError(f"Argument 'action', {action!r} is not callable.")
        target_time = self._time + delay
        _LOG.debug("@%d: schedule %r at time %d", self._time, action, target_time)
        self._schedule.push(target_time, action)

    def run(self, steps: int | None = None, *, stop: int | None = None) -> int:
        """Execute scheduled actions, in time order.

        With no arguments, runs until no scheduled actions remain.
        'steps' limits the number of actions executed.
        'stop' halts before any action scheduled at or after that time.

        The clock only ever moves to the time of an action being executed, so a
        halted run leaves it at the time of the last action executed.

        Returns the number of actions executed.
        """
        if steps is None:
            halt_steps = -1
        else:
            halt_steps = int(steps)
            if halt_steps < 0:
                raise ValueError(f"Argument 'steps', {steps!r} is negative.")
        n_done = 0
        while not self._schedule.is_empty():
            if halt_steps >= 0 and n_done >= halt_steps:
                _LOG.debug("Halted after %d steps.", n_done)
                break
            if stop is not None:
                next_time, _ = self._schedule.peek()
                if next_time >= stop:
                    _LOG.debug("Halted at set time: %d >= %d.", next_time, stop)
                    break
            time, action = self._schedule.pop()
            self._time = time
            _LOG.debug("@%d: run %r", time, action)
            action()
            n_done += 1
        return n_done

    def propagate(self) -> int:
        """Execute all scheduled actions, including any they schedule in turn."""
        n_done = self.run()
        _LOG.debug("Propagated %d actions, time is now %d.", n_done, self._time)
        return n_done

    def step(self, steps: int = 1) -> int:
        return self.run(steps=steps)

    def until(self, time: int) -> int:
        return self.run(stop=time)
