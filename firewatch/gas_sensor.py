"""Digital gas detector input (low level means gas is present)."""

from __future__ import annotations

from .hardware import DigitalIn


class GasSensor:
    """Reads the digital output of a gas detector module."""

    def __init__(self, pin: DigitalIn) -> None:
        self.pin = pin

    def init(self) -> None:
        """Prepare the sensor; the digital module needs no setup."""
        return None

    def update(self) -> None:
        """Sample the sensor; the digital module is read directly."""
        return None

    def read(self) -> bool:
        """Return the raw detector level (False while gas is detected)."""
        return bool(self.pin.read())