from django.apps import AppConfig


class FieldsConfig(AppConfig):
    name = "apps.fields"
    label = "fields"
    verbose_name = "Field editors"

    def ready(self) -> None:
        # Editors register their field type identifiers on import.
        from . import editors  # noqa: F401
