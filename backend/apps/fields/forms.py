"""
=============================================================================
FIELD FORMS
=============================================================================

Django form layer around the field editors.

- TimeSecondsField: a form field whose cleaned value is seconds since
  midnight. Submitted text goes through a TimeFieldEditor, so the form
  reports exactly the error status the editor shows in the page.
- FieldEditForm: the hosting form for a content item. Its fields are
  built from FieldDefinitions via the field type registry, and its
  cleaned_data maps field identifiers to editor values.
=============================================================================
"""
from __future__ import annotations

from typing import Any, Iterable

from django import forms
from django.core.exceptions import ValidationError
from django.utils.module_loading import import_string

from .capabilities import Probe, detect_native_time_support
from .definitions import FieldDefinition, FieldValue
from .editors import TimeFieldEditor
from .registry import get_field_edit_view
from .strategies import REQUIRED_MESSAGE, strategy_for
from .widgets import TimeEditWidget


class TimeSecondsField(forms.Field):
    """
    Form field for "eztime" values.

    The capability probe runs once, when the field is built; the widget and
    every editor created for cleaning share that answer.
    """
    def __init__(
        self,
        *,
        use_seconds: bool = False,
        probe: Probe | None = None,
        supports_native_time_input: bool | None = None,
        **kwargs: Any,
    ) -> None:
        if supports_native_time_input is None:
            supports_native_time_input = detect_native_time_support(probe)
        self.use_seconds = use_seconds
        self.supports_native_time_input = supports_native_time_input
        self.strategy = strategy_for(supports_native_time_input)
        kwargs.setdefault(
            "widget",
            TimeEditWidget(
                use_seconds=use_seconds,
                supports_native_time_input=supports_native_time_input,
            ),
        )
        super().__init__(**kwargs)

    @classmethod
    def from_definition(cls, definition: FieldDefinition, *, probe: Probe | None = None, **kwargs: Any) -> "TimeSecondsField":
        kwargs.setdefault("label", definition.label)
        return cls(
            use_seconds=definition.use_seconds,
            required=definition.is_required,
            probe=probe,
            **kwargs,
        )

    @property
    def field_definition(self) -> FieldDefinition:
        return FieldDefinition(is_required=self.required, use_seconds=self.use_seconds)

    def create_editor(self, field: FieldValue | None = None) -> TimeFieldEditor:
        return TimeFieldEditor(
            self.field_definition,
            field,
            probe=lambda: self.supports_native_time_input,
        )

    def to_python(self, value: Any) -> int | None:
        if value is None or isinstance(value, int):
            return value
        control = self.strategy.create_control(str(value))
        return self.strategy.extract_value(control)

    def clean(self, value: Any) -> int | None:
        if isinstance(value, int) and not isinstance(value, bool):
            # Stored seconds (disabled fields get their initial value) need no parsing.
            self.run_validators(value)
            return value
        editor = self.create_editor()
        try:
            editor.control.set_value(value)
            # Submitting moves focus away from the control.
            editor.control.blur()
            if editor.error_status:
                code = "required" if editor.error_status == REQUIRED_MESSAGE else "invalid"
                raise ValidationError(editor.error_status, code=code)
            seconds = editor.get_field_value()
        finally:
            editor.destroy()
        self.run_validators(seconds)
        return seconds


class FieldEditForm(forms.Form):
    """
    Edit form for the fields of one content item.

    Usage:
        form = FieldEditForm(request.POST or None, fields=[(definition, value), ...])
        if form.is_valid():
            form.cleaned_data["opening_time"]  # seconds since midnight or None
    """

    def __init__(
        self,
        data=None,
        *args: Any,
        fields: Iterable[tuple[FieldDefinition, FieldValue | None]] = (),
        probe: Probe | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(data, *args, **kwargs)
        self.field_definitions: dict[str, FieldDefinition] = {}
        for definition, value in fields:
            editor_class = get_field_edit_view(definition.field_type_identifier)
            field_class = import_string(editor_class.form_field_class)
            self.fields[definition.identifier] = field_class.from_definition(definition, probe=probe)
            self.field_definitions[definition.identifier] = definition
            if value is not None and not value.is_empty:
                self.initial.setdefault(definition.identifier, value.seconds_since_midnight)
