# firewatch

firewatch is a smart home fire alarm controller that runs entirely in
software. It models the parts of a small embedded alarm system and wires
them together. All pins, the serial port and the clock are simulated, and
the whole system advances in fixed 10 ms ticks.

## What it models

- **Temperature sensor** (`TemperatureSensor`). It averages the last ten
  analog readings and converts the average to °C. A reading above 50 °C
  raises the over-temperature alarm.
- **Gas sensor** (`GasSensor`). It is active-low: a low input level means
  gas is present.
- **Siren and strobe light** (`Siren`, `StrobeLight`). Both toggle while
  the alarm is active. The period depends on what was detected:
  - gas and high temperature together: 100 ms
  - gas alone: 1000 ms
  - high temperature alone: 500 ms
- **Alarm test button.** Pressing it raises the alarm as if both gas and
  high temperature had been detected.
- **4×4 matrix keypad** (`MatrixKeypad`). Scanning has 40 ms of
  debouncing. A key is reported once, when it is released.
- **20×4 character LCD** (`Display`). It can be driven over a 4-bit or an
  8-bit bus. The screen shows the temperature, the gas state and the alarm
  state, and refreshes about once a second.
- **Deactivation code** (`Code`). The code has four keys and defaults to
  `1805`.
  - A wrong code turns on the incorrect-code indicator.
  - Five wrong codes in a row turn on the system-blocked indicator.
  - A correct code clears both indicators and turns the alarm off.
  - While the incorrect-code indicator is on, the keypad accepts no code.
    Releasing `#` twice clears the indicator. This works only while the
    alarm is on and the system is not blocked.
- **Serial console** (`PcSerialCom`). It takes single-character commands,
  listed below.
- **Event log** (`EventLog`). It records every change of the alarm, gas
  detector, over-temperature detector, incorrect-code indicator and
  system-blocked indicator.
  - Each entry is named like `ALARM_ON` or `GAS_DET_OFF`.
  - Each change is also echoed on the serial link.
  - The log is a ring of 20 entries.

## Serial console commands

The console handles one character per tick.

| Key       | Action                                                 |
|-----------|--------------------------------------------------------|
| `1`       | show whether the alarm is activated                    |
| `2`       | show the gas detector state                            |
| `3`       | show the over-temperature detector state               |
| `4`       | enter the four-key code to deactivate the alarm        |
| `5`       | enter a new four-key deactivation code                 |
| `c` / `C` | show the temperature in Celsius                        |
| `f` / `F` | show the temperature in Fahrenheit (the label says C)  |
| `s` / `S` | set the date and time (YYYY, MM, DD, hh, mm, ss)       |
| `t` / `T` | show the date and time                                 |
| `e` / `E` | list the events stored since the ring last wrapped     |

Any other key prints the list of commands.

- `4` is accepted only while the alarm is on.
- Code characters are echoed as `*`.
- `s` waits until all of its digits have arrived. Feed all fourteen digits
  together with the command.

## Installation

```
pip install .
```

## Running

```
firewatch [--cycles N]
```

The command builds and starts the system and runs the control loop. With
`--cycles` it stops after N ticks; without it, it runs until interrupted.
Everything the system writes to its serial link is printed to standard
output: first the list of commands, then event reports as they happen.

## Using it from Python

Inputs are driven through the simulated hardware that `SmartHomeSystem`
exposes:

- `gas_input`, `temperature_input` and `test_button` set the sensor inputs.
- `keys` is a `SimulatedKeyMatrix`, with `press(key)` and `release()`.
- `port` is the serial link. `port.feed(text)` types characters, and
  `port.take_output()` collects what was written.

```python
from firewatch.system import SmartHomeSystem

system = SmartHomeSystem(delay=lambda ms: None)
system.init()
system.port.take_output()

system.test_button.drive(1)      # press the alarm test button
system.run(1)
system.test_button.drive(0)
print(system.siren.state)        # True

system.port.feed("41805")        # command 4, then the code
system.run(10)
print(system.siren.state)        # False
print(system.port.take_output())
```

- `SmartHomeSystem.update()` advances one tick.
- `run(cycles)` advances the given number of ticks, or runs forever when
  `cycles` is `None`.

Each part can also be used on its own, each in its own module:

| Class | Module |
|-------|--------|
| `Siren` | `firewatch.siren` |
| `StrobeLight` | `firewatch.strobe_light` |
| `TemperatureSensor` | `firewatch.temperature_sensor` |
| `GasSensor` | `firewatch.gas_sensor` |
| `RealTimeClock` | `firewatch.date_and_time` |
| `MatrixKeypad` | `firewatch.matrix_keypad` |
| `Display` | `firewatch.display` |
| `Code` | `firewatch.code` |
| `EventLog` | `firewatch.event_log` |
| `FireAlarm` | `firewatch.fire_alarm` |
| `UserInterface` | `firewatch.user_interface` |
| `PcSerialCom` | `firewatch.pc_serial_com` |

The simulated hardware is in `firewatch.hardware`: `DigitalOut`,
`DigitalIn`, `AnalogIn`, `SerialPort` and `delay`.

## What it does not do

- The `firewatch` command does not connect the terminal's keyboard to the
  serial console. It cannot be used interactively. To send commands, feed
  characters to `system.port` from Python.
- The command has no way to change the sensor inputs or press keypad keys.
  Run from the command line, the system stays idle: no gas, 0 °C, no
  button pressed.
- The LCD is not drawn anywhere. `Display` only sets the levels of its
  simulated pins.
- The event log is kept in memory only.

## Tests

```
pip install .[test]
pytest
```