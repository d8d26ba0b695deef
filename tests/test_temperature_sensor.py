import pytest

from firewatch.hardware import AnalogIn
from firewatch.temperature_sensor import (
    NUMBER_OF_AVG_SAMPLES,
    TemperatureSensor,
    celsius_to_fahrenheit,
)


def _settled(reading):
    sensor = TemperatureSensor(AnalogIn(reading))
    sensor.init()
    for _ in range(NUMBER_OF_AVG_SAMPLES):
        sensor.update()
    return sensor


def test_celsius_to_fahrenheit_fixed_points():
    assert celsius_to_fahrenheit(0.0) == pytest.approx(32.0)
    assert celsius_to_fahrenheit(100.0) == pytest.approx(212.0)


def test_starts_at_zero():
    sensor = TemperatureSensor(AnalogIn(0.5))
    assert sensor.read_celsius() == 0.0


def test_zero_reading_is_zero_degrees():
    assert _settled(0.0).read_celsius() == 0.0


def test_temperature_is_linear_in_reading():
    low = _settled(0.1).read_celsius()
    high = _settled(0.2).read_celsius()
    assert high == pytest.approx(2 * low)
    assert low > 0


def test_single_sample_contributes_a_tenth_of_the_window():
    full = _settled(0.3).read_celsius()
    sensor = TemperatureSensor(AnalogIn(0.3))
    sensor.init()
    sensor.update()
    assert sensor.read_celsius() == pytest.approx(full / NUMBER_OF_AVG_SAMPLES)


def test_window_forgets_old_samples():
    pin = AnalogIn(0.4)
    sensor = TemperatureSensor(pin)
    sensor.init()
    for _ in range(NUMBER_OF_AVG_SAMPLES):
        sensor.update()
    pin.drive(0.1)
    for _ in range(NUMBER_OF_AVG_SAMPLES):
        sensor.update()
    assert sensor.read_celsius() == pytest.approx(_settled(0.1).read_celsius())


def test_fahrenheit_matches_conversion_of_celsius():
    sensor = _settled(0.15)
    assert sensor.read_fahrenheit() == pytest.approx(
        celsius_to_fahrenheit(sensor.read_celsius())
    )


def test_init_clears_window():
    pin = AnalogIn(0.5)
    sensor = TemperatureSensor(pin)
    for _ in range(NUMBER_OF_AVG_SAMPLES):
        sensor.update()
    sensor.init()
    pin.drive(0.0)
    sensor.update()
    assert sensor.read_celsius() == 0.0