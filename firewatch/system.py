"""The complete smart home system: wiring of all parts and the main loop."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Optional, Sequence

from . import hardware
from .code import AlarmIndicators, Code, CodeEntry, CodeOrigin
from .date_and_time import RealTimeClock
from .display import Display, DisplayPins
from .event_log import EventLog
from .fire_alarm import FireAlarm
from .gas_sensor import GasSensor
from .hardware import ON, AnalogIn, DigitalIn, DigitalOut, SerialPort
from .matrix_keypad import MatrixKeypad, SimulatedKeyMatrix
from .pc_serial_com import PcSerialCom
from .siren import Siren
from .strobe_light import StrobeLight
from .temperature_sensor import TemperatureSensor
from .user_interface import UserInterface

SYSTEM_TIME_INCREMENT_MS = 10


class SmartHomeSystem:
    """All peripherals and subsystems of the fire alarm, updated once per tick."""

    def __init__(
        self, delay: Callable[[float], None] = hardware.delay
    ) -> None:
        self._delay = delay

        self.port = SerialPort()
        self.clock = RealTimeClock()
        self.indicators = AlarmIndicators()
        self.keypad_entry = CodeEntry()
        self.serial_entry = CodeEntry()

        # The gas detector output idles high while no gas is present.
        self.gas_input = DigitalIn(value=ON)
        self.temperature_input = AnalogIn(0.0)
        self.test_button = DigitalIn()
        self.keys = SimulatedKeyMatrix()

        self.siren = Siren(DigitalOut(), SYSTEM_TIME_INCREMENT_MS)
        self.strobe_light = StrobeLight(DigitalOut(), SYSTEM_TIME_INCREMENT_MS)
        self.gas_sensor = GasSensor(self.gas_input)
        self.temperature_sensor = TemperatureSensor(self.temperature_input)
        self.keypad = MatrixKeypad(
            self.keys.row_pins, self.keys.col_pins, SYSTEM_TIME_INCREMENT_MS
        )
        self.display = Display(DisplayPins(), delay=delay)

        self.code = Code(
            self.indicators,
            {
                CodeOrigin.KEYPAD: self.keypad_entry,
                CodeOrigin.PC_SERIAL: self.serial_entry,
            },
            write=self.port.write,
        )
        self.fire_alarm = FireAlarm(
            self.temperature_sensor,
            self.gas_sensor,
            self.siren,
            self.strobe_light,
            self.code,
            self.test_button,
        )
        self.user_interface = UserInterface(
            self.keypad,
            self.display,
            self.siren,
            self.indicators,
            self.keypad_entry,
            self.temperature_sensor,
            lambda: self.fire_alarm.gas_detector_state,
            DigitalOut(),
            DigitalOut(),
            SYSTEM_TIME_INCREMENT_MS,
        )
        self.event_log = EventLog(
            {
                "ALARM": lambda: self.siren.state,
                "GAS_DET": lambda: self.fire_alarm.gas_detector_state,
                "OVER_TEMP": lambda: self.fire_alarm.over_temperature_detector_state,
                "LED_IC": lambda: self.indicators.incorrect_code,
                "LED_SB": lambda: self.indicators.system_blocked,
            },
            write=self.port.write,
            clock=self.clock,
        )
        self.pc_serial_com = PcSerialCom(
            self.port,
            self.serial_entry,
            self.siren,
            self.fire_alarm,
            self.code,
            self.temperature_sensor,
            self.clock,
            self.event_log,
        )

    def init(self) -> None:
        """Initialise the user interface, the fire alarm and the serial link."""
        self.user_interface.init()
        self.fire_alarm.init()
        self.pc_serial_com.init()

    def update(self) -> None:
        """Run one tick of every subsystem, then wait one tick period."""
        self.user_interface.update()
        self.fire_alarm.update()
        self.pc_serial_com.update()
        self.event_log.update()
        self._delay(SYSTEM_TIME_INCREMENT_MS)

    def run(self, cycles: Optional[int] = None) -> None:
        """Update ``cycles`` times, or forever when ``cycles`` is None."""
        if cycles is None:
            while True:
                self.update()
        if cycles < 0:
            raise ValueError(f"cycles must not be negative, got {cycles}")
        for _ in range(cycles):
            self.update()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the system and echo its serial output to standard output."""
    parser = argparse.ArgumentParser(
        prog="firewatch", description="Run the smart home fire alarm."
    )
    parser.add_argument(
        "--cycles",
        type=int,
        default=None,
        help="number of update cycles to run (default: run forever)",
    )
    args = parser.parse_args(argv)
    if args.cycles is not None and args.cycles < 0:
        parser.error("--cycles must not be negative")

    system = SmartHomeSystem()
    system.init()
    sys.stdout.write(system.port.take_output())
    sys.stdout.flush()

    remaining = args.cycles
    try:
        while remaining is None or remaining > 0:
            system.update()
            output = system.port.take_output()
            if output:
                sys.stdout.write(output)
                sys.stdout.flush()
            if remaining is not None:
                remaining -= 1
    except KeyboardInterrupt:
        return 130
    return 0