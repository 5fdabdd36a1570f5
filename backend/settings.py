"""Base Django settings for the coordinate summary service."""
from __future__ import annotations

import os

from django.core.exceptions import ImproperlyConfigured


def env(name: str, default: str | None = None) -> str:
    """Fetch environment variables while allowing explicit defaults."""

    value = os.environ.get(name, default)
    if value is None:
        raise ImproperlyConfigured(f"Environment variable {name} is required")
    return value


SECRET_KEY = env("DJANGO_SECRET_KEY")
DEBUG = os.environ.get("DJANGO_DEBUG", "0") == "1"
ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",")

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "backend.api",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "backend.urls"

WSGI_APPLICATION = "backend.wsgi.application"

# Results are never persisted; caching is left to HTTP intermediaries.
DATABASES: dict = {}

GEOSUMMARY_WEATHER_URL = os.environ.get("GEOSUMMARY_WEATHER_URL", "https://api.open-meteo.com/v1/forecast")
GEOSUMMARY_LOCATION_URL = os.environ.get("GEOSUMMARY_LOCATION_URL", "https://nominatim.openstreetmap.org/reverse")
GEOSUMMARY_USER_AGENT = os.environ.get("GEOSUMMARY_USER_AGENT", "WeatherApp")
GEOSUMMARY_UPSTREAM_TIMEOUT = float(os.environ.get("GEOSUMMARY_UPSTREAM_TIMEOUT", "10"))
GEOSUMMARY_CACHE_MAX_AGE = int(os.environ.get("GEOSUMMARY_CACHE_MAX_AGE", "60"))
GEOSUMMARY_LOG_LEVEL = os.environ.get("GEOSUMMARY_LOG_LEVEL", "INFO")

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "backend": {"handlers": ["console"], "level": GEOSUMMARY_LOG_LEVEL},
        "SummaryService": {"handlers": ["console"], "level": GEOSUMMARY_LOG_LEVEL},
        "OpenMeteoProvider": {"handlers": ["console"], "level": GEOSUMMARY_LOG_LEVEL},
        "NominatimProvider": {"handlers": ["console"], "level": GEOSUMMARY_LOG_LEVEL},
    },
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True
