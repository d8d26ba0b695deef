"""Alarm siren driven by an active-low output pin."""

from __future__ import annotations

from .hardware import ON, DigitalOut


class Siren:
    """A siren that pulses while active; its pin idles high (silent)."""

    def __init__(self, pin: DigitalOut, time_increment_ms: int = 10) -> None:
        self.pin = pin
        self.time_increment_ms = time_increment_ms
        self.state = False
        self._accumulated_ms = 0

    def init(self) -> None:
        """Silence the siren."""
        self.pin.write(ON)

    def update(self, strobe_time: int) -> None:
        """Advance one tick, toggling the pin every ``strobe_time`` ms while active."""
        self._accumulated_ms += self.time_increment_ms
        if self.state:
            if self._accumulated_ms >= strobe_time:
                self._accumulated_ms = 0
                self.pin.toggle()
        else:
            self.pin.write(ON)