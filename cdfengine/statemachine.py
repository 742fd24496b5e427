"""Per-object event queues and timed state machines driven by them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Callable

from .containers import IntDict, Queue

UNTIMED = -1.0
"""Duration of a state that never advances on its own."""

StateCallback = Callable[[int, float], None]
EventFunction = Callable[[tuple, int], int]


class EventType(IntEnum):
    """Kinds of events; NONE doubles as "no transition"."""

    NONE = 0
    ANIMATION_END = 1
    PLAYER_MOVE = 2


# Number of arguments each event type carries.
_ARITY = {
    EventType.NONE: 2,  # an int and a Vector3
    EventType.PLAYER_MOVE: 5,  # input, attributes, mesh, physics, delta
}


@dataclass(frozen=True)
class Event:
    """A queued call of ``function`` with its packed arguments."""

    type: EventType
    function: EventFunction
    args: tuple


def _pack(event_type: EventType, args: tuple[Any, ...]) -> tuple:
    if event_type not in _ARITY:
        raise ValueError(f"events of type {event_type.name} take no parameters")
    expected = _ARITY[event_type]
    if len(args) != expected:
        raise ValueError(
            f"{event_type.name} events take {expected} arguments, got {len(args)}"
        )
    if event_type is EventType.NONE:
        return (int(args[0]), args[1])
    return (*args[:4], float(args[4]))


class EventBus:
    """One FIFO event queue for every registered object id."""

    def __init__(self) -> None:
        self._queues: IntDict[Queue[Event]] = IntDict()

    def add_object(self, object_id: int) -> None:
        """Give ``object_id`` a fresh, empty event queue."""
        self._queues.add(object_id, Queue())

    def _queue(self, object_id: int) -> Queue[Event]:
        queue = self._queues.get(object_id)
        if queue is None:
            raise KeyError(f"no event queue for object {object_id}")
        return queue

    def register(
        self,
        function: EventFunction,
        event_type: EventType,
        object_id: int,
        *args: Any,
    ) -> Event:
        """Queue an event for ``object_id`` and return it."""
        if function is None or not callable(function):
            raise TypeError("event function must be callable")
        event_type = EventType(event_type)
        event = Event(event_type, function, _pack(event_type, args))
        self._queue(object_id).enqueue(event)
        return event

    def next_event(self, object_id: int) -> Event | None:
        """Remove and return the oldest event of ``object_id``, or None."""
        return self._queue(object_id).dequeue()


class StateMachine:
    """A machine whose states advance by timers and by queued events.

    Transition 0 of every state is taken when its timer runs out; it leads
    to the next state, and from the last state back to state 0.
    """

    def __init__(
        self,
        total_states: int,
        total_transitions: int,
        bus: EventBus,
        machine_id: int,
    ) -> None:
        if total_states < 1:
            raise ValueError("a state machine needs at least one state")
        if total_transitions < 1:
            raise ValueError("a state machine needs at least one transition")
        self.total_states = total_states
        self.total_transitions = total_transitions
        self.bus = bus
        self.machine_id = machine_id
        self.state = 0
        self.time_to_next_state: float | None = None
        self.state_durations: list[float] = [UNTIMED] * total_states
        self.transitions: list[list[int]] = [
            [0] * total_transitions for _ in range(total_states)
        ]
        for index, row in enumerate(self.transitions[:-1]):
            row[0] = index + 1
        self.tickers: list[StateCallback | None] = [None] * total_states
        self.entrances: list[StateCallback | None] = [None] * total_states
        self.exits: list[StateCallback | None] = [None] * total_states

    def _call(self, callbacks: list[StateCallback | None], dt: float) -> None:
        callback = callbacks[self.state]
        if callback is not None:
            callback(self.machine_id, dt)

    def _timed(self) -> bool:
        return self.state_durations[self.state] != UNTIMED

    def tick(self, delta: float) -> None:
        """Advance by ``delta`` seconds, then process this machine's events."""
        if not delta > 0:
            raise ValueError("delta must be positive")
        if self.time_to_next_state is None:
            self.time_to_next_state = self.state_durations[self.state]

        remaining = delta
        while self._timed() and 0 < self.time_to_next_state <= remaining:
            remaining -= self.time_to_next_state
            self._call(self.tickers, self.time_to_next_state)
            self._call(self.exits, delta)
            self.state = self.transitions[self.state][0]
            self.time_to_next_state = self.state_durations[self.state]
            self._call(self.entrances, delta)

        self._call(self.tickers, remaining)
        if self._timed():
            self.time_to_next_state -= remaining

        while (event := self.bus.next_event(self.machine_id)) is not None:
            result = event.function(event.args, self.machine_id)
            if result == EventType.NONE:
                continue
            if not 0 <= result < self.total_transitions:
                raise ValueError(f"event returned unknown transition {result}")
            next_state = self.transitions[self.state][result]
            if next_state != EventType.NONE:
                if not 0 <= next_state < self.total_states:
                    raise ValueError(f"transition leads to unknown state {next_state}")
                self.state = next_state