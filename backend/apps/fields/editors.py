"""
=============================================================================
FIELD EDITORS
=============================================================================

Editors own one rendered field while a content item is being edited:

- build the variables the field template needs
- validate the control on blur and on every value change
- hand the parsed value to the hosting form on submit

TimeFieldEditor handles "eztime" fields. Whether it renders a native
time control or a manual text control is decided once, when it is built,
and the matching strategy does the work from then on.

Lifecycle:
    editor = TimeFieldEditor(definition, value)   # binds input listeners
    editor.control.set_value("14:30")             # revalidates
    editor.error_status, editor.get_field_value()
    editor.destroy()                              # unbinds listeners
=============================================================================
"""
from __future__ import annotations

import enum
import logging
from typing import Any

from .capabilities import Probe, detect_native_time_support
from .controls import BLUR, VALUE_CHANGE, InputControl, InputEvent
from .definitions import TIME_FIELD_TYPE, FieldDefinition, FieldValue
from .registry import register_field_edit_view
from .strategies import TimeInputStrategy, strategy_for

logger = logging.getLogger(__name__)


class ValidationState(enum.Enum):
    UNVALIDATED = "unvalidated"
    VALID = "valid"
    INVALID = "invalid"


class TimeFieldEditor:
    field_type_identifier = TIME_FIELD_TYPE
    form_field_class = "apps.fields.forms.TimeSecondsField"

    def __init__(
        self,
        field_definition: FieldDefinition,
        field: FieldValue | None = None,
        *,
        probe: Probe | None = None,
    ) -> None:
        self.field_definition = field_definition
        self.field = field
        self._supports_native_time_input = detect_native_time_support(probe)
        self._strategy: TimeInputStrategy = strategy_for(self._supports_native_time_input)
        # None until the first validation.
        self._error_status: bool | str | None = None
        self.control: InputControl | None = self._strategy.create_control(
            self._display_text(), required=field_definition.is_required,
        )
        self._bind_events()

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def supports_native_time_input(self) -> bool:
        return self._supports_native_time_input

    @property
    def error_status(self) -> bool | str | None:
        """False when valid, the message when invalid, None before validation."""
        return self._error_status

    @property
    def validation_state(self) -> ValidationState:
        if self._error_status is None:
            return ValidationState.UNVALIDATED
        if self._error_status is False:
            return ValidationState.VALID
        return ValidationState.INVALID

    @property
    def is_valid(self) -> bool:
        return self._error_status is False

    @property
    def is_destroyed(self) -> bool:
        return self.control is None

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def _display_text(self) -> str:
        seconds = self.field.seconds_since_midnight if self.field else None
        return self._strategy.format_for_display(
            seconds, use_seconds=self.field_definition.use_seconds,
        )

    def compute_template_variables(self) -> dict[str, Any]:
        return {
            "is_required": self.field_definition.is_required,
            "supports_native_time_input": self._supports_native_time_input,
            "use_seconds": self.field_definition.use_seconds,
            "display_text": self._display_text(),
        }

    # -------------------------------------------------------------------------
    # Validation & value
    # -------------------------------------------------------------------------

    def validate(self) -> None:
        """Recomputes the error status from the control's current input."""
        if self.control is None:
            logger.debug("Validation skipped for %s: editor destroyed", self.field_definition.identifier)
            return
        previous = self.validation_state
        self._error_status = self._strategy.validate(self.control)
        if self.validation_state is not previous:
            logger.debug(
                "%s: %s -> %s (%r)",
                self.field_definition.identifier, previous.value,
                self.validation_state.value, self.control.value,
            )

    def get_field_value(self) -> int | None:
        """Seconds since midnight entered in the control, or None."""
        if self.control is None:
            return None
        return self._strategy.extract_value(self.control)

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def _handle_input_event(self, event: InputEvent) -> None:
        self.validate()

    def _bind_events(self) -> None:
        for event in (BLUR, VALUE_CHANGE):
            self.control.add_listener(event, self._handle_input_event)

    def destroy(self) -> None:
        """Unbinds the input listeners and releases the control."""
        if self.control is None:
            return
        for event in (BLUR, VALUE_CHANGE):
            self.control.remove_listener(event, self._handle_input_event)
        self.control = None


register_field_edit_view(TimeFieldEditor.field_type_identifier, TimeFieldEditor)
