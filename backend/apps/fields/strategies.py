"""
=============================================================================
TIME INPUT STRATEGIES
=============================================================================

The time editor renders one of two controls depending on what the client
supports, and each control needs its own validation, value extraction and
display formatting:

- NativeTimeInputStrategy: <input type="time">; the control parses the
  text and reports badInput / valueAsNumber
- TextTimeInputStrategy: manual HH:MM(:SS) text; parsed here

The editor picks one strategy when it is built and delegates to it.
Validation returns the error status (False or a message) instead of
raising: the hosting form decides what an invalid field means.
=============================================================================
"""
from __future__ import annotations

import logging
import re

from .controls import InputControl, NativeTimeInput, TextTimeInput

logger = logging.getLogger(__name__)

REQUIRED_MESSAGE = "This field is required"
NATIVE_INVALID_MESSAGE = "This is not a valid input"
TEXT_INVALID_MESSAGE = "This time is invalid, enter a correct time: HH:MM(:SS)"

HOURS_RE = re.compile(r"[0-9]{1,2}")
MINUTES_SECONDS_RE = re.compile(r"[0-9]{2}")


# =============================================================================
# FORMATTING & PARSING
# =============================================================================


def format_seconds(seconds: int, *, with_seconds: bool) -> str:
    """Formats seconds since midnight as HH:MM:SS or HH:MM."""
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if with_seconds:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{hours:02d}:{minutes:02d}"


def _parse_component(raw: str, pattern: re.Pattern[str]) -> int:
    if pattern.fullmatch(raw) is None:
        raise ValueError(f"Malformed time component: {raw!r}")
    return int(raw)


def parse_text_time(text: str) -> int | None:
    """
    Converts "H:MM", "HH:MM" or "HH:MM:SS" into seconds since midnight.

    Returns None when there are fewer than two components or when any
    component is malformed. Ranges are not checked: "25:00" gives 90000.
    """
    parts = (text or "").split(":")
    if len(parts) < 2:
        return None
    if len(parts) > 3:
        logger.warning("Cannot extract time from %r: too many components", text)
        return None
    try:
        hours = _parse_component(parts[0], HOURS_RE)
        minutes = _parse_component(parts[1], MINUTES_SECONDS_RE)
        seconds = _parse_component(parts[2], MINUTES_SECONDS_RE) if len(parts) > 2 else 0
    except ValueError as exc:
        logger.warning("Cannot extract time from %r: %s", text, exc)
        return None
    return hours * 3600 + minutes * 60 + seconds


# =============================================================================
# STRATEGIES
# =============================================================================


class TimeInputStrategy:
    control_class: type[InputControl] = InputControl
    invalid_message = TEXT_INVALID_MESSAGE

    def create_control(self, text: str = "", *, required: bool = False) -> InputControl:
        return self.control_class(text, required=required)

    def validate(self, control: InputControl) -> bool | str:
        raise NotImplementedError

    def extract_value(self, control: InputControl) -> int | None:
        raise NotImplementedError

    def format_for_display(self, seconds: int | None, *, use_seconds: bool) -> str:
        raise NotImplementedError


class NativeTimeInputStrategy(TimeInputStrategy):
    control_class = NativeTimeInput
    invalid_message = NATIVE_INVALID_MESSAGE

    def validate(self, control: NativeTimeInput) -> bool | str:
        validity = control.validity
        if validity.value_missing:
            return REQUIRED_MESSAGE
        if validity.bad_input:
            return self.invalid_message
        return False

    def extract_value(self, control: NativeTimeInput) -> int | None:
        millis = control.value_as_number
        if millis is None:
            return None
        return millis // 1000

    def format_for_display(self, seconds: int | None, *, use_seconds: bool) -> str:
        # Native controls are always fed the full HH:MM:SS value.
        if seconds is None:
            return ""
        return format_seconds(seconds, with_seconds=True)


class TextTimeInputStrategy(TimeInputStrategy):
    control_class = TextTimeInput
    invalid_message = TEXT_INVALID_MESSAGE

    def validate(self, control: TextTimeInput) -> bool | str:
        validity = control.validity
        if validity.value_missing:
            return REQUIRED_MESSAGE
        if validity.pattern_mismatch:
            return self.invalid_message
        return False

    def extract_value(self, control: TextTimeInput) -> int | None:
        return parse_text_time(control.value)

    def format_for_display(self, seconds: int | None, *, use_seconds: bool) -> str:
        if seconds is None:
            return ""
        return format_seconds(seconds, with_seconds=use_seconds)


def strategy_for(supports_native_time_input: bool) -> TimeInputStrategy:
    if supports_native_time_input:
        return NativeTimeInputStrategy()
    return TextTimeInputStrategy()
