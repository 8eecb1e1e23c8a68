from __future__ import annotations

import logging
from typing import Callable

from django.conf import settings
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)

Probe = Callable[[], bool]

DEFAULT_PROBE = "apps.fields.capabilities.settings_probe"


def settings_probe() -> bool:
    """Reports native time input support as configured for the deployment."""
    return bool(getattr(settings, "FIELDS_NATIVE_TIME_INPUT", True))


def get_default_probe() -> Probe:
    return import_string(getattr(settings, "FIELDS_TIME_INPUT_PROBE", DEFAULT_PROBE))


def detect_native_time_support(probe: Probe | None = None) -> bool:
    """
    Asks the presentation layer whether it renders <input type="time">.

    Callers cache the answer; the probe is meant to run once per editor.
    """
    probe = probe or get_default_probe()
    supported = bool(probe())
    logger.debug("Native time input support: %s", supported)
    return supported
