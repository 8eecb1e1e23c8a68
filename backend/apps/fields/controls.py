"""
=============================================================================
INPUT CONTROLS
=============================================================================

Server-side model of the rendered <input> an editor owns.

A control holds the live text the user typed, exposes the same validity
signal a browser computes for that input type (ValidityState), and
dispatches "blur" / "valuechange" events to explicitly registered
listeners.

- TextTimeInput: <input type="text" pattern="...">, manual entry
- NativeTimeInput: <input type="time">, the control parses the time itself
=============================================================================
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, NamedTuple

BLUR = "blur"
VALUE_CHANGE = "valuechange"
EVENTS = (BLUR, VALUE_CHANGE)

# Pattern of the manual text control, as written into the pattern attribute.
TEXT_TIME_PATTERN = r"\d{1,2}:\d{2}(:\d{2})?"
TEXT_TIME_RE = re.compile(TEXT_TIME_PATTERN, re.ASCII)

# Values a native time control accepts: 24h clock, optional seconds and fraction.
NATIVE_TIME_RE = re.compile(r"([01]\d|2[0-3]):([0-5]\d)(?::([0-5]\d)(?:\.(\d{1,3}))?)?", re.ASCII)


class InputEvent(NamedTuple):
    type: str
    target: "InputControl"


Listener = Callable[[InputEvent], None]


@dataclass(frozen=True)
class InputValidity:
    """Subset of the browser ValidityState the time editors look at."""
    value_missing: bool = False
    bad_input: bool = False
    pattern_mismatch: bool = False

    @property
    def valid(self) -> bool:
        return not (self.value_missing or self.bad_input or self.pattern_mismatch)


class InputControl:
    input_type = "text"

    def __init__(self, value: str = "", *, required: bool = False) -> None:
        self._value = value or ""
        self.required = required
        self._listeners: dict[str, list[Listener]] = {event: [] for event in EVENTS}

    @property
    def value(self) -> str:
        return self._value

    def set_value(self, value: str | None) -> None:
        """Replaces the text and fires valuechange when it actually changed."""
        value = value or ""
        if value == self._value:
            return
        self._value = value
        self._dispatch(VALUE_CHANGE)

    def blur(self) -> None:
        self._dispatch(BLUR)

    @property
    def validity(self) -> InputValidity:
        return InputValidity(value_missing=self.required and self._value == "")

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------

    def add_listener(self, event: str, listener: Listener) -> None:
        if event not in self._listeners:
            raise ValueError(f"Unsupported input event: {event!r}")
        self._listeners[event].append(listener)

    def remove_listener(self, event: str, listener: Listener) -> None:
        listeners = self._listeners.get(event, [])
        if listener in listeners:
            listeners.remove(listener)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, []))

    def _dispatch(self, event: str) -> None:
        for listener in list(self._listeners[event]):
            listener(InputEvent(event, self))


class TextTimeInput(InputControl):
    """Plain text control matched against HH:MM or HH:MM:SS."""
    input_type = "text"
    pattern = TEXT_TIME_PATTERN

    @property
    def validity(self) -> InputValidity:
        # Like browsers, an empty value never mismatches the pattern.
        mismatch = self._value != "" and TEXT_TIME_RE.fullmatch(self._value) is None
        return InputValidity(
            value_missing=self.required and self._value == "",
            pattern_mismatch=mismatch,
        )


class NativeTimeInput(InputControl):
    """Native time control: parses its own text and exposes valueAsNumber."""
    input_type = "time"

    @property
    def value_as_number(self) -> int | None:
        """Milliseconds since midnight, or None when empty or unparseable."""
        match = NATIVE_TIME_RE.fullmatch(self._value)
        if match is None:
            return None
        hours, minutes, seconds, fraction = match.groups()
        millis = int((fraction or "0").ljust(3, "0"))
        return ((int(hours) * 60 + int(minutes)) * 60 + int(seconds or 0)) * 1000 + millis

    @property
    def validity(self) -> InputValidity:
        return InputValidity(
            value_missing=self.required and self._value == "",
            bad_input=self._value != "" and self.value_as_number is None,
        )
