import pytest

from apps.fields.controls import NativeTimeInput, TextTimeInput
from apps.fields.strategies import (
    NATIVE_INVALID_MESSAGE,
    REQUIRED_MESSAGE,
    TEXT_INVALID_MESSAGE,
    NativeTimeInputStrategy,
    TextTimeInputStrategy,
    format_seconds,
    parse_text_time,
    strategy_for,
)


class TestFormatSeconds:
    def test_hours_minutes(self):
        assert format_seconds(52200, with_seconds=False) == "14:30"

    def test_hours_minutes_seconds(self):
        assert format_seconds(52245, with_seconds=True) == "14:30:45"

    def test_midnight(self):
        assert format_seconds(0, with_seconds=False) == "00:00"
        assert format_seconds(0, with_seconds=True) == "00:00:00"

    def test_last_second_of_day(self):
        assert format_seconds(86399, with_seconds=True) == "23:59:59"

    def test_without_seconds_drops_them(self):
        assert format_seconds(52245, with_seconds=False) == "14:30"


class TestParseTextTime:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("14:30", 52200),
            ("14:30:45", 52245),
            ("9:05", 9 * 3600 + 5 * 60),
            ("00:00", 0),
            ("23:59:59", 86399),
        ],
    )
    def test_valid_text(self, text, expected):
        assert parse_text_time(text) == expected

    @pytest.mark.parametrize("text", ["", "14", "1430"])
    def test_fewer_than_two_components(self, text):
        assert parse_text_time(text) is None

    @pytest.mark.parametrize("text", ["14:3", "14:3x", "ab:30", "14:30:4", "14:30:", " 14:30", "1:2:3:4", "123:00"])
    def test_malformed_components_return_none(self, text):
        assert parse_text_time(text) is None

    def test_malformed_component_is_logged(self, caplog):
        with caplog.at_level("WARNING", logger="apps.fields.strategies"):
            parse_text_time("14:3x")
        assert "14:3x" in caplog.text

    def test_out_of_range_values_are_not_rejected(self):
        assert parse_text_time("25:00") == 90000
        assert parse_text_time("99:99:99") == 99 * 3600 + 99 * 60 + 99

    def test_round_trip_for_every_second_of_the_day(self):
        for seconds in range(86400):
            assert parse_text_time(format_seconds(seconds, with_seconds=True)) == seconds

    def test_round_trip_without_seconds_on_whole_minutes(self):
        for seconds in range(0, 86400, 60):
            assert parse_text_time(format_seconds(seconds, with_seconds=False)) == seconds


class TestNativeTimeInputStrategy:
    strategy = NativeTimeInputStrategy()

    def test_required_and_empty(self):
        assert self.strategy.validate(NativeTimeInput("", required=True)) == REQUIRED_MESSAGE

    def test_bad_input(self):
        assert self.strategy.validate(NativeTimeInput("25:00")) == NATIVE_INVALID_MESSAGE

    def test_valid_input(self):
        assert self.strategy.validate(NativeTimeInput("14:30")) is False

    def test_empty_not_required_is_valid(self):
        assert self.strategy.validate(NativeTimeInput("")) is False

    def test_extract_whole_seconds(self):
        assert self.strategy.extract_value(NativeTimeInput("14:30:45.999")) == 52245

    def test_extract_midnight(self):
        assert self.strategy.extract_value(NativeTimeInput("00:00")) == 0

    def test_extract_absent(self):
        assert self.strategy.extract_value(NativeTimeInput("")) is None
        assert self.strategy.extract_value(NativeTimeInput("garbage")) is None

    def test_always_displays_seconds(self):
        assert self.strategy.format_for_display(52200, use_seconds=False) == "14:30:00"
        assert self.strategy.format_for_display(None, use_seconds=False) == ""


class TestTextTimeInputStrategy:
    strategy = TextTimeInputStrategy()

    def test_required_and_empty(self):
        assert self.strategy.validate(TextTimeInput("", required=True)) == REQUIRED_MESSAGE

    @pytest.mark.parametrize("text", ["14:3", "abc", "14:30:4", "14-30", "1430"])
    def test_pattern_mismatch(self, text):
        assert self.strategy.validate(TextTimeInput(text)) == TEXT_INVALID_MESSAGE

    @pytest.mark.parametrize("text", ["14:30", "9:30", "14:30:45", "25:00", "99:99:99"])
    def test_pattern_match(self, text):
        assert self.strategy.validate(TextTimeInput(text)) is False

    def test_display_follows_use_seconds(self):
        assert self.strategy.format_for_display(52245, use_seconds=False) == "14:30"
        assert self.strategy.format_for_display(52245, use_seconds=True) == "14:30:45"
        assert self.strategy.format_for_display(None, use_seconds=True) == ""


def test_strategy_for_capability():
    assert isinstance(strategy_for(True), NativeTimeInputStrategy)
    assert isinstance(strategy_for(False), TextTimeInputStrategy)


def test_invalid_message_can_be_overridden():
    class LenientTextStrategy(TextTimeInputStrategy):
        invalid_message = "Use HH:MM"

    class LenientNativeStrategy(NativeTimeInputStrategy):
        invalid_message = "Pick a time"

    assert LenientTextStrategy().validate(TextTimeInput("noon")) == "Use HH:MM"
    assert LenientNativeStrategy().validate(NativeTimeInput("noon")) == "Pick a time"
