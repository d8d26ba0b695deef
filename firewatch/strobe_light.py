"""Strobe light driven by an active-high output pin."""

from __future__ import annotations

from .hardware import OFF, DigitalOut


class StrobeLight:
    """A light that flashes while active and stays dark otherwise."""

    def __init__(self, pin: DigitalOut, time_increment_ms: int = 10) -> None:
        self.pin = pin
        self.time_increment_ms = time_increment_ms
        self.state = False
        self._accumulated_ms = 0

    def init(self) -> None:
        """Turn the light off."""
        self.pin.write(OFF)

    def update(self, strobe_time: int) -> None:
        """Advance one tick, toggling the light every ``strobe_time`` ms while active."""
        self._accumulated_ms += self.time_increment_ms
        if self.state:
            if self._accumulated_ms >= strobe_time:
                self._accumulated_ms = 0
                self.pin.toggle()
        else:
            self.pin.write(OFF)