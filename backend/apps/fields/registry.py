from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

_field_edit_views: dict[str, type] = {}


class UnknownFieldTypeError(LookupError):
    def __init__(self, field_type_identifier: str) -> None:
        super().__init__(f"No field edit view registered for {field_type_identifier!r}.")
        self.field_type_identifier = field_type_identifier


def register_field_edit_view(field_type_identifier: str, editor_class: type) -> type:
    """Maps a field type identifier (e.g. "eztime") to its editor class."""
    previous = _field_edit_views.get(field_type_identifier)
    if previous is not None and previous is not editor_class:
        logger.info(
            "Replacing field edit view for %s: %s -> %s",
            field_type_identifier, previous.__name__, editor_class.__name__,
        )
    _field_edit_views[field_type_identifier] = editor_class
    return editor_class


def get_field_edit_view(field_type_identifier: str) -> type:
    try:
        return _field_edit_views[field_type_identifier]
    except KeyError:
        raise UnknownFieldTypeError(field_type_identifier) from None


def registered_field_types() -> list[str]:
    return sorted(_field_edit_views)
