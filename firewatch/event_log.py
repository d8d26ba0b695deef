"""Log of state changes of the alarm elements, kept in a ring of fixed size."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from .date_and_time import RealTimeClock, ctime_string

MAX_STORAGE = 20


@dataclass(frozen=True)
class Event:
    """One logged state change."""

    seconds: int
    name: str


class EventLog:
    """Watches named boolean sources and records every change of state."""

    def __init__(
        self,
        sources: Mapping[str, Callable[[], object]],
        write: Optional[Callable[[str], object]] = None,
        clock: Optional[RealTimeClock] = None,
    ) -> None:
        self.sources = dict(sources)
        self._send = write if write is not None else (lambda text: None)
        self.clock = clock if clock is not None else RealTimeClock()
        self._last_states = {name: False for name in self.sources}
        self._events: list[Optional[Event]] = [None] * MAX_STORAGE
        self._index = 0

    def update(self) -> None:
        """Poll every source and log those whose state changed."""
        for name, source in self.sources.items():
            current = bool(source())
            if current != self._last_states[name]:
                self.write(current, name)
            self._last_states[name] = current

    def read(self, index: int) -> str:
        """Return the stored event at ``index`` as display text."""
        if not 0 <= index < MAX_STORAGE:
            raise IndexError(f"event index out of range: {index}")
        event = self._events[index]
        if event is None:
            raise IndexError(f"no event stored at index {index}")
        return (
            f"Event = {event.name}\r\n"
            f"Date and Time = {ctime_string(event.seconds)}\r\n"
        )

    def write(self, state: bool, element_name: str) -> None:
        """Record ``element_name`` turning on or off and report it."""
        text = element_name + ("_ON" if state else "_OFF")
        self._events[self._index] = Event(self.clock.now(), text)
        self._index = self._index + 1 if self._index < MAX_STORAGE - 1 else 0
        self._send(text)
        self._send("\r\n")

    def __len__(self) -> int:
        """Number of events since the ring last wrapped around."""
        return self._index