"""
Settings for the event ticketing storefront.

Values can be overridden via environment variables, optionally loaded from
a `.env` file next to manage.py. There is no database: the event collection
lives in a cache slot and admin sessions live in signed cookies.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env")

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-insecure")
DEBUG = os.getenv("DJANGO_DEBUG", "False") == "True"
ALLOWED_HOSTS = [
    h.strip()
    for h in os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")
    if h.strip()
]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "django.contrib.sessions",
    "rest_framework",
    "events.apps.EventsConfig",
    "payments.apps.PaymentsConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "storefront.urls"
WSGI_APPLICATION = "storefront.wsgi.application"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {"context_processors": []},
    },
]

DATABASES = {}

SESSION_ENGINE = "django.contrib.sessions.backends.signed_cookies"
SESSION_COOKIE_HTTPONLY = True

CACHES = {
    "default": {
        "BACKEND": os.getenv(
            "CACHE_BACKEND", "django.core.cache.backends.locmem.LocMemCache"
        ),
        "LOCATION": os.getenv("CACHE_LOCATION", "storefront"),
    },
}

USE_TZ = True
TIME_ZONE = "UTC"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": ["rest_framework.permissions.AllowAny"],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "UNAUTHENTICATED_USER": None,
    "TEST_REQUEST_DEFAULT_FORMAT": "json",
}

# The event collection: one JSON snapshot in one cache slot.
EVENT_STORE = {
    "CACHE_ALIAS": os.getenv("EVENT_STORE_CACHE_ALIAS", "default"),
    "KEY": os.getenv("EVENT_STORE_KEY", "events"),
    "SEED_PATH": os.getenv(
        "EVENT_STORE_SEED_PATH", str(BASE_DIR / "events" / "data" / "events.json")
    ),
}

# Defaults are eSewa's public sandbox values. Override both the secret and the
# admin pair in any deployment reachable from outside.
ESEWA = {
    "MERCHANT_ID": os.getenv("ESEWA_MERCHANT_ID", "EPAYTEST"),
    "SECRET_KEY": os.getenv("ESEWA_SECRET_KEY", "8gBm/:&EnhH.1/q"),
    "BASE_URL": os.getenv("ESEWA_BASE_URL", "https://rc-epay.esewa.com.np"),
    "SUCCESS_URL": os.getenv("ESEWA_SUCCESS_URL", "http://localhost:3000/payment/success"),
    "FAILURE_URL": os.getenv("ESEWA_FAILURE_URL", "http://localhost:3000/payment/failure"),
}

ADMIN_CONSOLE = {
    "USERNAME": os.getenv("ADMIN_CONSOLE_USERNAME", "admin"),
    "PASSWORD": os.getenv("ADMIN_CONSOLE_PASSWORD", "admin123"),
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {"console": {"class": "logging.StreamHandler", "formatter": "simple"}},
    "loggers": {
        "events": {"handlers": ["console"], "level": LOG_LEVEL},
        "payments": {"handlers": ["console"], "level": LOG_LEVEL},
    },
}
