from __future__ import annotations

from typing import Any

from django import forms

from .capabilities import Probe, detect_native_time_support
from .controls import TEXT_TIME_PATTERN
from .definitions import SECONDS_PER_DAY, FieldDefinition, FieldValue
from .editors import TimeFieldEditor
from .strategies import strategy_for


class TimeEditWidget(forms.Widget):
    """
    Renders a time control for seconds-since-midnight values.

    Native clients get <input type="time">; others get a text input with
    an HH:MM(:SS) pattern. The editor's template variables are exposed to
    the template as widget.editor.
    """
    template_name = "fields/time_edit.html"

    def __init__(
        self,
        attrs: dict[str, Any] | None = None,
        *,
        use_seconds: bool = False,
        supports_native_time_input: bool | None = None,
        probe: Probe | None = None,
    ) -> None:
        super().__init__(attrs)
        if supports_native_time_input is None:
            supports_native_time_input = detect_native_time_support(probe)
        self.use_seconds = use_seconds
        self.supports_native_time_input = supports_native_time_input
        self.strategy = strategy_for(supports_native_time_input)

    @property
    def input_type(self) -> str:
        return self.strategy.control_class.input_type

    def format_value(self, value: Any) -> str:
        if value is None or value == "":
            return ""
        if isinstance(value, str):
            # Bound data is shown back exactly as typed.
            return value
        return self.strategy.format_for_display(int(value), use_seconds=self.use_seconds)

    def _editor_variables(self, value: Any) -> dict[str, Any]:
        stored = None
        if isinstance(value, int) and not isinstance(value, bool) and 0 <= value < SECONDS_PER_DAY:
            stored = value
        editor = TimeFieldEditor(
            FieldDefinition(is_required=self.is_required, use_seconds=self.use_seconds),
            FieldValue(stored) if stored is not None else None,
            probe=lambda: self.supports_native_time_input,
        )
        try:
            variables = editor.compute_template_variables()
        finally:
            editor.destroy()
        if stored is None:
            # Bound text, or a value the editor cannot hold, is shown as formatted here.
            variables["display_text"] = self.format_value(value)
        return variables

    def get_context(self, name: str, value: Any, attrs: dict[str, Any] | None) -> dict[str, Any]:
        context = super().get_context(name, value, attrs)
        widget_attrs = context["widget"]["attrs"]
        if self.supports_native_time_input:
            if self.use_seconds:
                widget_attrs.setdefault("step", "1")
        else:
            widget_attrs.setdefault("pattern", TEXT_TIME_PATTERN)
            widget_attrs.setdefault("placeholder", "HH:MM:SS" if self.use_seconds else "HH:MM")
        context["widget"]["type"] = self.input_type
        context["widget"]["editor"] = self._editor_variables(value)
        return context
