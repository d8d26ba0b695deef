"""Character LCD (HD44780-style, 20x4) driven over a 4- or 8-bit GPIO bus."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from . import hardware
from .hardware import OFF, ON, DigitalOut

CLEAR_DISPLAY = 0b00000001
ENTRY_MODE_SET = 0b00000100
DISPLAY_CONTROL = 0b00001000
FUNCTION_SET = 0b00100000
SET_DDRAM_ADDR = 0b10000000

ENTRY_MODE_SET_INCREMENT = 0b00000010
ENTRY_MODE_SET_DECREMENT = 0b00000000
ENTRY_MODE_SET_SHIFT = 0b00000001
ENTRY_MODE_SET_NO_SHIFT = 0b00000000

DISPLAY_CONTROL_DISPLAY_ON = 0b00000100
DISPLAY_CONTROL_DISPLAY_OFF = 0b00000000
DISPLAY_CONTROL_CURSOR_ON = 0b00000010
DISPLAY_CONTROL_CURSOR_OFF = 0b00000000
DISPLAY_CONTROL_BLINK_ON = 0b00000001
DISPLAY_CONTROL_BLINK_OFF = 0b00000000

FUNCTION_SET_8BITS = 0b00010000
FUNCTION_SET_4BITS = 0b00000000
FUNCTION_SET_2LINES = 0b00001000
FUNCTION_SET_1LINE = 0b00000000
FUNCTION_SET_5x10DOTS = 0b00000100
FUNCTION_SET_5x8DOTS = 0b00000000

LINE_ADDRESSES = (0, 64, 20, 84)

RS_INSTRUCTION = 0
RS_DATA = 1


class DisplayConnection(Enum):
    """How the display bus is wired."""

    GPIO_4BITS = "gpio_4bits"
    GPIO_8BITS = "gpio_8bits"


@dataclass
class DisplayPins:
    """The output pins wired to the display."""

    d0: DigitalOut = field(default_factory=DigitalOut)
    d1: DigitalOut = field(default_factory=DigitalOut)
    d2: DigitalOut = field(default_factory=DigitalOut)
    d3: DigitalOut = field(default_factory=DigitalOut)
    d4: DigitalOut = field(default_factory=DigitalOut)
    d5: DigitalOut = field(default_factory=DigitalOut)
    d6: DigitalOut = field(default_factory=DigitalOut)
    d7: DigitalOut = field(default_factory=DigitalOut)
    rs: DigitalOut = field(default_factory=DigitalOut)
    en: DigitalOut = field(default_factory=DigitalOut)

    @property
    def data(self) -> tuple[DigitalOut, ...]:
        """Data lines D0 to D7, in bit order."""
        return (self.d0, self.d1, self.d2, self.d3,
                self.d4, self.d5, self.d6, self.d7)


class Display:
    """Writes instructions and characters to the display controller."""

    def __init__(
        self,
        pins: Optional[DisplayPins] = None,
        delay: Callable[[float], None] = hardware.delay,
    ) -> None:
        self.pins = pins if pins is not None else DisplayPins()
        self._delay = delay
        self.connection = DisplayConnection.GPIO_4BITS
        self._initial_8bit_done = False

    def init(self, connection: DisplayConnection) -> None:
        """Run the controller's power-on initialisation for ``connection``."""
        if not isinstance(connection, DisplayConnection):
            raise TypeError(f"expected a DisplayConnection, got {connection!r}")
        self.connection = connection
        self._initial_8bit_done = False

        self._delay(50)
        for pause in (5, 1, 1):
            self._instruction(FUNCTION_SET | FUNCTION_SET_8BITS, pause)

        if connection is DisplayConnection.GPIO_8BITS:
            self._instruction(
                FUNCTION_SET | FUNCTION_SET_8BITS
                | FUNCTION_SET_2LINES | FUNCTION_SET_5x8DOTS
            )
        else:
            self._instruction(FUNCTION_SET | FUNCTION_SET_4BITS)
            self._initial_8bit_done = True
            self._instruction(
                FUNCTION_SET | FUNCTION_SET_4BITS
                | FUNCTION_SET_2LINES | FUNCTION_SET_5x8DOTS
            )

        self._instruction(
            DISPLAY_CONTROL | DISPLAY_CONTROL_DISPLAY_OFF
            | DISPLAY_CONTROL_CURSOR_OFF | DISPLAY_CONTROL_BLINK_OFF
        )
        self._instruction(CLEAR_DISPLAY)
        self._instruction(
            ENTRY_MODE_SET | ENTRY_MODE_SET_INCREMENT | ENTRY_MODE_SET_NO_SHIFT
        )
        self._instruction(
            DISPLAY_CONTROL | DISPLAY_CONTROL_DISPLAY_ON
            | DISPLAY_CONTROL_CURSOR_OFF | DISPLAY_CONTROL_BLINK_OFF
        )

    def char_position_write(self, x: int, y: int) -> None:
        """Move the cursor to column ``x`` of line ``y``; other lines are ignored."""
        if 0 <= y < len(LINE_ADDRESSES):
            self._instruction(SET_DDRAM_ADDR | ((LINE_ADDRESSES[y] + x) & 0xFF))

    def string_write(self, text: str) -> None:
        """Write ``text`` at the cursor position."""
        for byte in text.encode("latin-1", errors="replace"):
            self._code_write(RS_DATA, byte)

    def _instruction(self, code: int, pause: float = 1) -> None:
        self._code_write(RS_INSTRUCTION, code)
        self._delay(pause)

    def _code_write(self, register: int, byte: int) -> None:
        self.pins.rs.write(RS_DATA if register == RS_DATA else RS_INSTRUCTION)
        # The R/W line is tied to ground: the display is only ever written.
        self._data_bus_write(byte)

    def _data_bus_write(self, byte: int) -> None:
        data = self.pins.data
        self.pins.en.write(OFF)
        for bit in (7, 6, 5, 4):
            data[bit].write(byte & (1 << bit))
        if self.connection is DisplayConnection.GPIO_8BITS:
            for bit in (3, 2, 1, 0):
                data[bit].write(byte & (1 << bit))
        elif self._initial_8bit_done:
            self._pulse_enable()
            for bit in (3, 2, 1, 0):
                data[bit + 4].write(byte & (1 << bit))
        self._pulse_enable()

    def _pulse_enable(self) -> None:
        self.pins.en.write(ON)
        self._delay(1)
        self.pins.en.write(OFF)
        self._delay(1)