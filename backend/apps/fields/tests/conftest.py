"""
Shared fixtures for the field editor tests.

The capability probe is injected explicitly so the tests never depend on
how the deployment sets FIELDS_NATIVE_TIME_INPUT.
"""
import pytest

from apps.fields.definitions import FieldDefinition, FieldValue
from apps.fields.editors import TimeFieldEditor


def native_probe() -> bool:
    return True


def text_probe() -> bool:
    return False


@pytest.fixture
def make_editor():
    """Builds a TimeFieldEditor and destroys everything it built afterwards."""
    editors = []

    def _make(*, native=False, required=False, use_seconds=False, value=None):
        definition = FieldDefinition(identifier="opening_time", is_required=required, use_seconds=use_seconds)
        field = FieldValue(value) if value is not None else None
        editor = TimeFieldEditor(definition, field, probe=native_probe if native else text_probe)
        editors.append(editor)
        return editor

    yield _make
    for editor in editors:
        editor.destroy()
