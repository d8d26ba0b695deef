from types import SimpleNamespace

from firewatch.code import AlarmIndicators, Code, CodeEntry, CodeOrigin
from firewatch.fire_alarm import FireAlarm
from firewatch.gas_sensor import GasSensor
from firewatch.hardware import AnalogIn, DigitalIn, DigitalOut, PinMode
from firewatch.siren import Siren
from firewatch.strobe_light import StrobeLight
from firewatch.temperature_sensor import TemperatureSensor


def make_alarm():
    analog = AnalogIn(0.0)
    gas_pin = DigitalIn(1)
    button = DigitalIn()
    keypad_entry = CodeEntry()
    serial_entry = CodeEntry()
    indicators = AlarmIndicators()
    sent = []
    code = Code(
        indicators,
        {CodeOrigin.KEYPAD: keypad_entry, CodeOrigin.PC_SERIAL: serial_entry},
        sent.append,
    )
    alarm = FireAlarm(
        TemperatureSensor(analog),
        GasSensor(gas_pin),
        Siren(DigitalOut()),
        StrobeLight(DigitalOut()),
        code,
        button,
    )
    alarm.init()
    return SimpleNamespace(
        alarm=alarm, analog=analog, gas_pin=gas_pin, button=button,
        keypad_entry=keypad_entry, serial_entry=serial_entry,
        indicators=indicators, sent=sent,
    )


def test_init_sets_outputs_and_button_mode():
    env = make_alarm()
    assert env.button.mode is PinMode.PULL_DOWN
    assert env.alarm.siren.pin.read() == 1
    assert env.alarm.strobe_light.pin.read() == 0


def test_quiet_conditions_leave_alarm_off():
    env = make_alarm()
    env.alarm.update()
    assert env.alarm.siren.state is False
    assert env.alarm.strobe_light.state is False
    assert env.alarm.strobe_time() == 0


def test_gas_raises_alarm():
    env = make_alarm()
    env.gas_pin.drive(0)
    env.alarm.update()
    assert env.alarm.gas_detector_state is True
    assert env.alarm.gas_detected is True
    assert env.alarm.siren.state is True
    assert env.alarm.strobe_light.state is True
    assert env.alarm.strobe_time() == 1000


def test_over_temperature_raises_alarm():
    env = make_alarm()
    env.analog.drive(1.0)
    env.alarm.update()
    env.alarm.update()
    assert env.alarm.over_temperature_detector_state is True
    assert env.alarm.siren.state is True
    assert env.alarm.strobe_time() == 500


def test_gas_and_over_temperature():
    env = make_alarm()
    env.analog.drive(1.0)
    env.gas_pin.drive(0)
    env.alarm.update()
    env.alarm.update()
    assert env.alarm.strobe_time() == 100


def test_test_button_sets_both_detections():
    env = make_alarm()
    env.button.drive(1)
    env.alarm.update()
    assert env.alarm.gas_detected is True
    assert env.alarm.over_temperature_detected is True
    assert env.alarm.gas_detector_state is False
    assert env.alarm.strobe_time() == 100


def test_detection_is_latched_after_gas_clears():
    env = make_alarm()
    env.gas_pin.drive(0)
    env.alarm.update()
    env.gas_pin.drive(1)
    env.alarm.update()
    assert env.alarm.gas_detector_state is False
    assert env.alarm.gas_detected is True
    assert env.alarm.siren.state is True


def test_correct_keypad_code_deactivates():
    env = make_alarm()
    env.gas_pin.drive(0)
    env.alarm.update()
    env.gas_pin.drive(1)
    env.keypad_entry.keys = list("1805")
    env.keypad_entry.complete = True
    env.alarm.update()
    assert env.alarm.siren.state is False
    assert env.alarm.strobe_light.state is False
    assert env.alarm.gas_detected is False
    assert env.alarm.strobe_time() == 0
    assert env.keypad_entry.complete is False


def test_correct_serial_code_deactivates_and_reports():
    env = make_alarm()
    env.button.drive(1)
    env.alarm.update()
    env.button.drive(0)
    env.serial_entry.keys = list("1805")
    env.serial_entry.complete = True
    env.alarm.update()
    assert env.alarm.siren.state is False
    assert env.sent == ["\r\nThe code is correct\r\n\r\n"]


def test_wrong_code_keeps_alarm_and_flags_indicator():
    env = make_alarm()
    env.gas_pin.drive(0)
    env.alarm.update()
    env.keypad_entry.keys = list("0000")
    env.keypad_entry.complete = True
    env.alarm.update()
    assert env.alarm.siren.state is True
    assert env.indicators.incorrect_code is True


def test_codes_not_consumed_while_siren_off():
    env = make_alarm()
    env.keypad_entry.keys = list("1805")
    env.keypad_entry.complete = True
    env.alarm.update()
    assert env.keypad_entry.complete is True
    assert env.alarm.siren.state is False


def test_siren_pin_stays_high_while_inactive():
    env = make_alarm()
    for _ in range(5):
        env.alarm.update()
    assert env.alarm.siren.pin.read() == 1
    assert env.alarm.strobe_light.pin.read() == 0