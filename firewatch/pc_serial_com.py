"""Command interface over the PC serial link."""

from __future__ import annotations

import re
import time
from enum import Enum

from .code import CODE_NUMBER_OF_KEYS, Code, CodeEntry
from .date_and_time import RealTimeClock
from .event_log import EventLog
from .fire_alarm import FireAlarm
from .hardware import SerialPort
from .siren import Siren
from .temperature_sensor import TemperatureSensor

_AVAILABLE_COMMANDS = (
    "Available commands:\r\n",
    "Press '1' to get the alarm state\r\n",
    "Press '2' to get the gas detector state\r\n",
    "Press '3' to get the over temperature detector state\r\n",
    "Press '4' to enter the code to deactivate the alarm\r\n",
    "Press '5' to enter a new code to deactivate the alarm\r\n",
    "Press 'f' or 'F' to get lm35 reading in Fahrenheit\r\n",
    "Press 'c' or 'C' to get lm35 reading in Celsius\r\n",
    "Press 's' or 'S' to set the date and time\r\n",
    "Press 't' or 'T' to get the date and time\r\n",
    "Press 'e' or 'E' to get the stored events\r\n",
    "\r\n",
)

_DATE_PROMPTS = (
    ("\r\nType four digits for the current year (YYYY): ", 4),
    ("Type two digits for the current month (01-12): ", 2),
    ("Type two digits for the current day (01-31): ", 2),
    ("Type two digits for the current hour (00-23): ", 2),
    ("Type two digits for the current minutes (00-59): ", 2),
    ("Type two digits for the current seconds (00-59): ", 2),
)

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group()) if match else 0


class SerialMode(Enum):
    """What incoming characters are currently taken as."""

    COMMANDS = "commands"
    GET_CODE = "get_code"
    SAVE_NEW_CODE = "save_new_code"


class PcSerialCom:
    """Interprets single-character commands and code entry from the serial link."""

    def __init__(
        self,
        port: SerialPort,
        entry: CodeEntry,
        siren: Siren,
        fire_alarm: FireAlarm,
        code: Code,
        temperature_sensor: TemperatureSensor,
        clock: RealTimeClock,
        event_log: EventLog,
    ) -> None:
        self.port = port
        self.entry = entry
        self.siren = siren
        self.fire_alarm = fire_alarm
        self.code = code
        self.temperature_sensor = temperature_sensor
        self.clock = clock
        self.event_log = event_log
        self.mode = SerialMode.COMMANDS
        self._code_chars = 0
        self._new_code = [""] * CODE_NUMBER_OF_KEYS
        self._commands = {
            "1": self._show_alarm_state,
            "2": self._show_gas_detector_state,
            "3": self._show_over_temperature_detector_state,
            "4": self._enter_code_sequence,
            "5": self._enter_new_code,
            "c": self._show_temperature_celsius,
            "f": self._show_temperature_fahrenheit,
            "s": self._set_date_and_time,
            "t": self._show_date_and_time,
            "e": self._show_stored_events,
        }

    def init(self) -> None:
        """Print the list of available commands."""
        self._available_commands()

    def char_read(self) -> str:
        """Return one waiting character, or '' if none."""
        return self.port.read(1) if self.port.readable() else ""

    def string_write(self, text: str) -> None:
        """Send ``text`` over the link."""
        self.port.write(text)

    def update(self) -> None:
        """Handle at most one incoming character."""
        char = self.char_read()
        if not char:
            return
        if self.mode is SerialMode.COMMANDS:
            self._command_update(char)
        elif self.mode is SerialMode.GET_CODE:
            self._get_code_update(char)
        elif self.mode is SerialMode.SAVE_NEW_CODE:
            self._save_new_code_update(char)
        else:
            self.mode = SerialMode.COMMANDS

    def _read_char_blocking(self) -> str:
        while not self.port.readable():
            time.sleep(0.001)
        return self.port.read(1)

    def _string_read(self, length: int) -> str:
        chars = []
        for _ in range(length):
            char = self._read_char_blocking()
            self.port.write(char)
            chars.append(char)
        return "".join(chars)

    def _get_code_update(self, char: str) -> None:
        self.entry.keys[self._code_chars] = char
        self.string_write("*")
        self._code_chars += 1
        if self._code_chars >= CODE_NUMBER_OF_KEYS:
            self.mode = SerialMode.COMMANDS
            self.entry.complete = True
            self._code_chars = 0

    def _save_new_code_update(self, char: str) -> None:
        self._new_code[self._code_chars] = char
        self.string_write("*")
        self._code_chars += 1
        if self._code_chars >= CODE_NUMBER_OF_KEYS:
            self.mode = SerialMode.COMMANDS
            self._code_chars = 0
            self.code.write(self._new_code)
            self.string_write("\r\nNew code configured\r\n\r\n")

    def _command_update(self, char: str) -> None:
        command = self._commands.get(char.lower(), self._available_commands)
        command()

    def _available_commands(self) -> None:
        for line in _AVAILABLE_COMMANDS:
            self.string_write(line)

    def _show_alarm_state(self) -> None:
        if self.siren.state:
            self.string_write("The alarm is activated\r\n")
        else:
            self.string_write("The alarm is not activated\r\n")

    def _show_gas_detector_state(self) -> None:
        if self.fire_alarm.gas_detector_state:
            self.string_write("Gas is being detected\r\n")
        else:
            self.string_write("Gas is not being detected\r\n")

    def _show_over_temperature_detector_state(self) -> None:
        if self.fire_alarm.over_temperature_detector_state:
            self.string_write("Temperature is above the maximum level\r\n")
        else:
            self.string_write("Temperature is below the maximum level\r\n")

    def _enter_code_sequence(self) -> None:
        if self.siren.state:
            self.string_write("Please enter the four digits numeric code ")
            self.string_write("to deactivate the alarm: ")
            self.mode = SerialMode.GET_CODE
            self.entry.complete = False
            self._code_chars = 0
        else:
            self.string_write("Alarm is not activated.\r\n")

    def _enter_new_code(self) -> None:
        self.string_write("Please enter the new four digits numeric code ")
        self.string_write("to deactivate the alarm: ")
        self._code_chars = 0
        self.mode = SerialMode.SAVE_NEW_CODE

    def _show_temperature_celsius(self) -> None:
        value = self.temperature_sensor.read_celsius()
        self.string_write(f"Temperature: {value:.2f} \xb0 C\r\n")

    def _show_temperature_fahrenheit(self) -> None:
        # The unit label reads "C" for both scales on the wire.
        value = self.temperature_sensor.read_fahrenheit()
        self.string_write(f"Temperature: {value:.2f} \xb0 C\r\n")

    def _set_date_and_time(self) -> None:
        fields = []
        for prompt, length in _DATE_PROMPTS:
            self.string_write(prompt)
            fields.append(_atoi(self._string_read(length)))
            self.string_write("\r\n")
        self.string_write("Date and time has been set\r\n")
        self.clock.write(*fields)

    def _show_date_and_time(self) -> None:
        self.string_write(f"Date and Time = {self.clock.read()}")
        self.string_write("\r\n")

    def _show_stored_events(self) -> None:
        for index in range(len(self.event_log)):
            self.string_write(self.event_log.read(index))
            self.string_write("\r\n")