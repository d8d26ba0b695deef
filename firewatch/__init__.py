"""Simulated smart home fire alarm: sensors, siren, strobe light, keypad, LCD, serial console and event log."""

__version__ = "0.1.0"