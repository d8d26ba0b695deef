"""4x4 matrix keypad scanning with debouncing."""

from __future__ import annotations

from enum import Enum
from functools import partial
from typing import Optional, Sequence

from .hardware import OFF, ON, DigitalIn, DigitalOut, PinMode

NUMBER_OF_ROWS = 4
NUMBER_OF_COLS = 4
DEBOUNCE_KEY_TIME_MS = 40

KEY_LAYOUT = (
    "123A",
    "456B",
    "789C",
    "*0#D",
)


class KeypadState(Enum):
    """Keypad scanning state."""

    SCANNING = "scanning"
    DEBOUNCE = "debounce"
    KEY_HOLD_PRESSED = "key_hold_pressed"


class SimulatedKeyMatrix:
    """Row and column pins wired like a physical keypad with one key pressable."""

    def __init__(self) -> None:
        self.row_pins = [DigitalOut(ON) for _ in range(NUMBER_OF_ROWS)]
        self.col_pins = [
            DigitalIn(source=partial(self._column_level, col))
            for col in range(NUMBER_OF_COLS)
        ]
        self._pressed: Optional[tuple[int, int]] = None

    def _column_level(self, col: int) -> int:
        if self._pressed is not None:
            row, pressed_col = self._pressed
            if pressed_col == col and self.row_pins[row].read() == OFF:
                return OFF
        # Columns are pulled up when nothing connects them to a low row.
        return ON

    def press(self, key: str) -> None:
        """Hold ``key`` down."""
        for row, keys in enumerate(KEY_LAYOUT):
            col = keys.find(key) if len(key) == 1 else -1
            if col >= 0:
                self._pressed = (row, col)
                return
        raise ValueError(f"no such key on the keypad: {key!r}")

    def release(self) -> None:
        """Release any held key."""
        self._pressed = None


class MatrixKeypad:
    """Scans the keypad and reports each key once, when it is released."""

    def __init__(
        self,
        row_pins: Sequence[DigitalOut],
        col_pins: Sequence[DigitalIn],
        update_time_ms: int,
    ) -> None:
        if len(row_pins) != NUMBER_OF_ROWS or len(col_pins) != NUMBER_OF_COLS:
            raise ValueError("keypad needs 4 row pins and 4 column pins")
        self.row_pins = list(row_pins)
        self.col_pins = list(col_pins)
        self.update_time_ms = update_time_ms
        self.state = KeypadState.SCANNING
        self._debounce_ms = 0
        self._last_key = ""
        for pin in self.col_pins:
            pin.set_mode(PinMode.PULL_UP)

    def scan(self) -> str:
        """Return the first key found pressed, or an empty string."""
        for row_index, keys in enumerate(KEY_LAYOUT):
            for pin in self.row_pins:
                pin.write(ON)
            self.row_pins[row_index].write(OFF)
            for key, col_pin in zip(keys, self.col_pins):
                if col_pin.read() == OFF:
                    return key
        return ""

    def update(self) -> str:
        """Advance the scanner one tick; return a released key or ''."""
        released = ""
        if self.state is KeypadState.SCANNING:
            detected = self.scan()
            if detected:
                self._last_key = detected
                self._debounce_ms = 0
                self.state = KeypadState.DEBOUNCE
        elif self.state is KeypadState.DEBOUNCE:
            if self._debounce_ms >= DEBOUNCE_KEY_TIME_MS:
                detected = self.scan()
                if detected == self._last_key:
                    self.state = KeypadState.KEY_HOLD_PRESSED
                else:
                    self.state = KeypadState.SCANNING
            self._debounce_ms += self.update_time_ms
        elif self.state is KeypadState.KEY_HOLD_PRESSED:
            detected = self.scan()
            if detected != self._last_key:
                if not detected:
                    released = self._last_key
                self.state = KeypadState.SCANNING
        else:
            self.reset()
        return released

    def reset(self) -> None:
        """Return to scanning."""
        self.state = KeypadState.SCANNING