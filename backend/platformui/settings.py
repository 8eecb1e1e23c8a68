"""
=============================================================================
PLATFORM UI SETTINGS
=============================================================================

Django settings for the platform UI field editors.

Everything environment specific is read from os.environ (after loading
a .env file at the repository root, when present) so the same module
serves development, CI and the test suite:

- DJANGO_SECRET_KEY / DJANGO_DEBUG / DJANGO_ALLOWED_HOSTS
- FIELDS_NATIVE_TIME_INPUT: whether the client renders <input type="time">
- FIELDS_LOG_LEVEL: level for the apps.fields loggers
=============================================================================
"""
from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


BASE_DIR = Path(__file__).resolve().parent.parent

load_dotenv(BASE_DIR.parent / ".env")

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-only-insecure-secret-key")
DEBUG = _env_bool("DJANGO_DEBUG", True)
ALLOWED_HOSTS = [h for h in os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",") if h]

INSTALLED_APPS = [
    "django.contrib.staticfiles",
    "apps.fields",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "platformui.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": []},
    },
]

DATABASES = {}

USE_TZ = True
TIME_ZONE = "UTC"
STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"


# =============================================================================
# FIELD EDITORS
# =============================================================================

# What the default capability probe reports for time inputs.
FIELDS_NATIVE_TIME_INPUT = _env_bool("FIELDS_NATIVE_TIME_INPUT", True)

# Dotted path to a zero-argument callable returning bool.
FIELDS_TIME_INPUT_PROBE = "apps.fields.capabilities.settings_probe"


# =============================================================================
# LOGGING
# =============================================================================

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "simple"},
    },
    "loggers": {
        "apps.fields": {
            "handlers": ["console"],
            "level": os.environ.get("FIELDS_LOG_LEVEL", "INFO"),
            "propagate": True,
        },
    },
}
