"""Alarm deactivation code: storage, comparison and attempt counting."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Mapping, Optional, Sequence

CODE_NUMBER_OF_KEYS = 4
MAX_INCORRECT_CODES = 5
DEFAULT_CODE = "1805"


class CodeOrigin(Enum):
    """Where a code attempt was entered."""

    KEYPAD = "keypad"
    PC_SERIAL = "pc_serial"


@dataclass
class CodeEntry:
    """A code being typed on one input, and whether it is complete."""

    keys: list = field(default_factory=lambda: [""] * CODE_NUMBER_OF_KEYS)
    complete: bool = False


@dataclass
class AlarmIndicators:
    """The incorrect-code and system-blocked indicator states."""

    incorrect_code: bool = False
    system_blocked: bool = False


class Code:
    """Holds the deactivation code and checks attempts against it."""

    def __init__(
        self,
        indicators: AlarmIndicators,
        sources: Mapping[CodeOrigin, CodeEntry],
        write: Optional[Callable[[str], object]] = None,
    ) -> None:
        self.indicators = indicators
        self.sources = dict(sources)
        self._send = write if write is not None else (lambda text: None)
        self._sequence = list(DEFAULT_CODE)
        self.incorrect_attempts = 0

    def write(self, sequence: Sequence[str]) -> None:
        """Replace the stored code."""
        keys = list(sequence)
        if len(keys) != CODE_NUMBER_OF_KEYS:
            raise ValueError(
                f"a code has {CODE_NUMBER_OF_KEYS} keys, got {len(keys)}"
            )
        self._sequence = keys

    def match(self, candidate: Sequence[str]) -> bool:
        """Return whether ``candidate`` starts with the stored code."""
        return list(candidate[:CODE_NUMBER_OF_KEYS]) == self._sequence

    def match_from(self, origin: CodeOrigin) -> bool:
        """Check a completed attempt from ``origin`` and update the indicators."""
        correct = False
        entry = self.sources.get(origin)
        if entry is not None and entry.complete:
            correct = self.match(entry.keys)
            entry.complete = False
            if correct:
                self._deactivate()
            else:
                self.indicators.incorrect_code = True
                self.incorrect_attempts += 1
            if origin is CodeOrigin.PC_SERIAL:
                verdict = "correct" if correct else "incorrect"
                self._send(f"\r\nThe code is {verdict}\r\n\r\n")

        if self.incorrect_attempts >= MAX_INCORRECT_CODES:
            self.indicators.system_blocked = True
        return correct

    def _deactivate(self) -> None:
        self.indicators.system_blocked = False
        self.indicators.incorrect_code = False
        self.incorrect_attempts = 0