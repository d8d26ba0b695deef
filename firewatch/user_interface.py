"""Local user interface: keypad code entry, indicator LEDs and the LCD."""

from __future__ import annotations

from typing import Callable, Optional

from .code import CODE_NUMBER_OF_KEYS, AlarmIndicators, CodeEntry
from .display import Display, DisplayConnection
from .hardware import OFF, DigitalOut
from .matrix_keypad import MatrixKeypad
from .siren import Siren
from .temperature_sensor import TemperatureSensor

DISPLAY_REFRESH_TIME_MS = 1000
HASH_PRESSES_TO_UNLOCK = 2


class UserInterface:
    """Collects keypad codes, mirrors indicators on LEDs and refreshes the display."""

    def __init__(
        self,
        keypad: MatrixKeypad,
        display: Display,
        siren: Siren,
        indicators: AlarmIndicators,
        entry: CodeEntry,
        temperature_sensor: TemperatureSensor,
        gas_detector_state: Callable[[], object],
        incorrect_code_led: Optional[DigitalOut] = None,
        system_blocked_led: Optional[DigitalOut] = None,
        time_increment_ms: int = 10,
    ) -> None:
        self.keypad = keypad
        self.display = display
        self.siren = siren
        self.indicators = indicators
        self.entry = entry
        self.temperature_sensor = temperature_sensor
        self.gas_detector_state = gas_detector_state
        self.incorrect_code_led = (
            incorrect_code_led if incorrect_code_led is not None else DigitalOut()
        )
        self.system_blocked_led = (
            system_blocked_led if system_blocked_led is not None else DigitalOut()
        )
        self.time_increment_ms = time_increment_ms
        self._code_chars = 0
        self._hash_releases = 0
        self._display_ms = 0

    def init(self) -> None:
        """Turn the LEDs off and draw the display's static labels."""
        self.incorrect_code_led.write(OFF)
        self.system_blocked_led.write(OFF)
        self.display.init(DisplayConnection.GPIO_4BITS)
        for row, label in enumerate(("Temperature:", "Gas:", "Alarm:")):
            self.display.char_position_write(0, row)
            self.display.string_write(label)

    def update(self) -> None:
        """Advance the interface one tick."""
        self._keypad_update()
        self.incorrect_code_led.write(self.indicators.incorrect_code)
        self.system_blocked_led.write(self.indicators.system_blocked)
        self._display_update()

    def _keypad_update(self) -> None:
        key = self.keypad.update()
        if not key:
            return
        if not self.siren.state or self.indicators.system_blocked:
            return
        if not self.indicators.incorrect_code:
            self.entry.keys[self._code_chars] = key
            self._code_chars += 1
            if self._code_chars >= CODE_NUMBER_OF_KEYS:
                self.entry.complete = True
                self._code_chars = 0
        elif key == "#":
            self._hash_releases += 1
            if self._hash_releases >= HASH_PRESSES_TO_UNLOCK:
                self._hash_releases = 0
                self._code_chars = 0
                self.entry.complete = False
                self.indicators.incorrect_code = False

    def _display_update(self) -> None:
        if self._display_ms < DISPLAY_REFRESH_TIME_MS:
            self._display_ms += self.time_increment_ms
            return
        self._display_ms = 0

        self.display.char_position_write(12, 0)
        self.display.string_write(f"{self.temperature_sensor.read_celsius():.0f}")
        self.display.char_position_write(14, 0)
        self.display.string_write("'C")

        self.display.char_position_write(4, 1)
        self.display.string_write(
            "Detected    " if self.gas_detector_state() else "Not Detected"
        )

        self.display.char_position_write(6, 2)
        self.display.string_write("ON " if self.siren.state else "OFF")