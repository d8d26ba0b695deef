"""Fire alarm: watches temperature and gas, drives siren and strobe, takes codes."""

from __future__ import annotations

from .code import Code, CodeOrigin
from .gas_sensor import GasSensor
from .hardware import DigitalIn, PinMode
from .siren import Siren
from .strobe_light import StrobeLight
from .temperature_sensor import TemperatureSensor

TEMPERATURE_C_LIMIT_ALARM = 50.0
STROBE_TIME_GAS = 1000
STROBE_TIME_OVER_TEMP = 500
STROBE_TIME_GAS_AND_OVER_TEMP = 100


class FireAlarm:
    """Raises the alarm on gas or over-temperature and clears it on a valid code."""

    def __init__(
        self,
        temperature_sensor: TemperatureSensor,
        gas_sensor: GasSensor,
        siren: Siren,
        strobe_light: StrobeLight,
        code: Code,
        test_button: DigitalIn,
    ) -> None:
        self.temperature_sensor = temperature_sensor
        self.gas_sensor = gas_sensor
        self.siren = siren
        self.strobe_light = strobe_light
        self.code = code
        self.test_button = test_button
        self.gas_detected = False
        self.over_temperature_detected = False
        self.gas_detector_state = False
        self.over_temperature_detector_state = False

    def init(self) -> None:
        """Initialise the sensors and outputs."""
        self.temperature_sensor.init()
        self.gas_sensor.init()
        self.siren.init()
        self.strobe_light.init()
        self.test_button.set_mode(PinMode.PULL_DOWN)

    def update(self) -> None:
        """Advance the alarm one tick."""
        self._activation_update()
        self._deactivation_update()
        self.siren.update(self.strobe_time())
        self.strobe_light.update(self.strobe_time())

    def strobe_time(self) -> int:
        """Return the flashing period in ms for what has been detected (0 if nothing)."""
        if self.gas_detected and self.over_temperature_detected:
            return STROBE_TIME_GAS_AND_OVER_TEMP
        if self.gas_detected:
            return STROBE_TIME_GAS
        if self.over_temperature_detected:
            return STROBE_TIME_OVER_TEMP
        return 0

    def _raise_alarm(self) -> None:
        self.siren.state = True
        self.strobe_light.state = True

    def _activation_update(self) -> None:
        self.temperature_sensor.update()
        self.gas_sensor.update()

        self.over_temperature_detector_state = (
            self.temperature_sensor.read_celsius() > TEMPERATURE_C_LIMIT_ALARM
        )
        if self.over_temperature_detector_state:
            self.over_temperature_detected = True
            self._raise_alarm()

        self.gas_detector_state = not self.gas_sensor.read()
        if self.gas_detector_state:
            self.gas_detected = True
            self._raise_alarm()

        if self.test_button.read():
            self.over_temperature_detected = True
            self.gas_detected = True
            self._raise_alarm()

    def _deactivation_update(self) -> None:
        if self.siren.state and (
            self.code.match_from(CodeOrigin.KEYPAD)
            or self.code.match_from(CodeOrigin.PC_SERIAL)
        ):
            self._deactivate()

    def _deactivate(self) -> None:
        self.siren.state = False
        self.strobe_light.state = False
        self.over_temperature_detected = False
        self.gas_detected = False