"""LM35 temperature sensor read through an analog input with a moving average."""

from __future__ import annotations

from .hardware import AnalogIn

NUMBER_OF_AVG_SAMPLES = 10
_REFERENCE_VOLTS = 3.3
_VOLTS_PER_DEGREE = 0.01


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert degrees Celsius to degrees Fahrenheit."""
    return celsius * 9.0 / 5.0 + 32.0


class TemperatureSensor:
    """Averages the last readings of an LM35 and converts them to Celsius."""

    def __init__(self, analog_in: AnalogIn) -> None:
        self.analog_in = analog_in
        self._readings = [0.0] * NUMBER_OF_AVG_SAMPLES
        self._sample_index = 0
        self._celsius = 0.0

    def init(self) -> None:
        """Clear the averaging window."""
        self._readings = [0.0] * NUMBER_OF_AVG_SAMPLES

    def update(self) -> None:
        """Take one sample and recompute the averaged temperature."""
        self._readings[self._sample_index] = self.analog_in.read()
        self._sample_index = (self._sample_index + 1) % NUMBER_OF_AVG_SAMPLES
        average = sum(self._readings) / NUMBER_OF_AVG_SAMPLES
        self._celsius = average * _REFERENCE_VOLTS / _VOLTS_PER_DEGREE

    def read_celsius(self) -> float:
        """Return the last averaged temperature in Celsius."""
        return self._celsius

    def read_fahrenheit(self) -> float:
        """Return the last averaged temperature in Fahrenheit."""
        return celsius_to_fahrenheit(self._celsius)