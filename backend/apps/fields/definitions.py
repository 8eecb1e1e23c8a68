"""
=============================================================================
FIELD DEFINITIONS & VALUES
=============================================================================

Read-only value objects handed to field editors by the hosting form:

- FieldDefinition: schema metadata for one content field
- FieldValue: the stored data of one field on one content item

Both can be built from the REST-style payloads the content repository
returns (camelCase keys, settings nested under "fieldSettings").
=============================================================================
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

SECONDS_PER_DAY = 86400

TIME_FIELD_TYPE = "eztime"


@dataclass(frozen=True)
class FieldDefinition:
    """
    Schema metadata for one content field.

    Only is_required and use_seconds drive the time editor; the rest
    identifies the field inside the hosting form.
    """
    identifier: str = "time"
    field_type_identifier: str = TIME_FIELD_TYPE
    is_required: bool = False
    use_seconds: bool = False
    names: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "FieldDefinition":
        settings = payload.get("fieldSettings") or {}
        return cls(
            identifier=payload.get("identifier", "time"),
            field_type_identifier=payload.get("fieldTypeIdentifier", TIME_FIELD_TYPE),
            is_required=bool(payload.get("isRequired", False)),
            use_seconds=bool(settings.get("useSeconds", False)),
            names=dict(payload.get("names") or {}),
        )

    @property
    def label(self) -> str:
        """First translated name, falling back to the identifier."""
        for name in self.names.values():
            if name:
                return name
        return self.identifier


@dataclass(frozen=True)
class FieldValue:
    """
    Stored time value: seconds elapsed since 00:00:00, or None when empty.

    The value is a duration since midnight, not a calendar time, so no
    timezone ever applies to it.
    """
    seconds_since_midnight: int | None = None

    def __post_init__(self) -> None:
        value = self.seconds_since_midnight
        if value is None:
            return
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Time value must be an integer, got {value!r}.")
        if not 0 <= value < SECONDS_PER_DAY:
            raise ValueError(f"Time value must be within [0, {SECONDS_PER_DAY - 1}], got {value}.")

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any] | None) -> "FieldValue":
        if not payload:
            return cls()
        return cls(payload.get("fieldValue"))

    @property
    def is_empty(self) -> bool:
        return self.seconds_since_midnight is None
