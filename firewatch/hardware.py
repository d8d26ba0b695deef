"""Simulated board peripherals: digital and analog pins, a serial port and delays."""

from __future__ import annotations

import time
from collections import deque
from enum import Enum
from typing import Callable, Optional

OFF = 0
ON = 1
LOW = 0
HIGH = 1


class PinMode(Enum):
    """Input pin bias configuration."""

    PULL_NONE = "pull_none"
    PULL_UP = "pull_up"
    PULL_DOWN = "pull_down"


class DigitalOut:
    """A digital output pin holding a logic level of 0 or 1."""

    def __init__(self, value: int = OFF) -> None:
        self._value = 1 if value else 0

    def write(self, value) -> None:
        """Drive the pin to the logic level of ``value``."""
        self._value = 1 if value else 0

    def read(self) -> int:
        """Return the level the pin is currently driven to."""
        return self._value

    def toggle(self) -> None:
        """Invert the current output level."""
        self._value ^= 1

    def __bool__(self) -> bool:
        return bool(self._value)


class DigitalIn:
    """A digital input pin.

    The level comes from ``source`` when one is given, otherwise from the
    value last driven onto the pin, otherwise from the configured bias.
    """

    def __init__(
        self,
        value: Optional[int] = None,
        source: Optional[Callable[[], object]] = None,
    ) -> None:
        self._value = value
        self._source = source
        self.mode = PinMode.PULL_NONE

    def read(self) -> int:
        """Return the logic level seen on the pin."""
        if self._source is not None:
            return 1 if self._source() else 0
        if self._value is not None:
            return 1 if self._value else 0
        return 1 if self.mode is PinMode.PULL_UP else 0

    def set_mode(self, mode: PinMode) -> None:
        """Configure the pin bias."""
        if not isinstance(mode, PinMode):
            raise TypeError(f"expected a PinMode, got {mode!r}")
        self.mode = mode

    def drive(self, value: Optional[int]) -> None:
        """Apply an external level to the pin; ``None`` leaves it floating."""
        self._value = value

    def __bool__(self) -> bool:
        return bool(self.read())


class AnalogIn:
    """An analog input returning a normalised reading between 0.0 and 1.0."""

    def __init__(self, value: float = 0.0) -> None:
        self._value = self._checked(value)

    @staticmethod
    def _checked(value: float) -> float:
        value = float(value)
        if not 0.0 <= value <= 1.0:
            raise ValueError(f"analog reading must be within [0, 1], got {value}")
        return value

    def read(self) -> float:
        """Return the current normalised reading."""
        return self._value

    def drive(self, value: float) -> None:
        """Apply a new normalised voltage to the input."""
        self._value = self._checked(value)


class SerialPort:
    """An in-memory serial link: bytes fed in are read by the program,
    text written by the program is collected for the host."""

    def __init__(self) -> None:
        self._incoming: deque[str] = deque()
        self._outgoing: list[str] = []

    def readable(self) -> bool:
        """Return whether at least one character is waiting to be read."""
        return bool(self._incoming)

    def read(self, size: int = 1) -> str:
        """Return up to ``size`` waiting characters."""
        if size < 1:
            raise ValueError("size must be positive")
        chars = []
        while self._incoming and len(chars) < size:
            chars.append(self._incoming.popleft())
        return "".join(chars)

    def write(self, data: str) -> int:
        """Send ``data`` to the host and return the number of characters sent."""
        self._outgoing.append(data)
        return len(data)

    def feed(self, data: str) -> None:
        """Queue characters as if typed by the host."""
        self._incoming.extend(data)

    def take_output(self) -> str:
        """Return everything written so far and clear it."""
        output = "".join(self._outgoing)
        self._outgoing.clear()
        return output


def delay(ms: float) -> None:
    """Block for ``ms`` milliseconds."""
    time.sleep(ms / 1000)