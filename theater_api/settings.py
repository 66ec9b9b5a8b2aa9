"""Django settings for the theater billing API."""

import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "insecure-dev-key")
DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() == "true"
ALLOWED_HOSTS = os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "rest_framework",
    "billing.apps.BillingConfig",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
]

ROOT_URLCONF = "theater_api.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": os.getenv("DATABASE_PATH", str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

USE_TZ = True
TIME_ZONE = "UTC"
STATIC_URL = "static/"

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "theater-billing",
    }
}

STATEMENT_CACHE_TIMEOUT = int(os.getenv("STATEMENT_CACHE_TIMEOUT", "300"))

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
}

# Rates in cents. Any option left out keeps its default.
THEATER_PRICING = {
    "TRAGEDY_BASE_AMOUNT": 40000,
    "TRAGEDY_AUDIENCE_THRESHOLD": 30,
    "TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON": 1000,
    "COMEDY_BASE_AMOUNT": 30000,
    "COMEDY_AUDIENCE_THRESHOLD": 20,
    "COMEDY_OVER_BASE_CAPACITY_AMOUNT": 10000,
    "COMEDY_OVER_BASE_CAPACITY_PER_PERSON": 500,
    "COMEDY_AMOUNT_PER_AUDIENCE": 300,
    "BASE_VOLUME_CREDIT_THRESHOLD": 30,
    "COMEDY_EXTRA_VOLUME_FACTOR": 5,
    "PERCENT_FACTOR": 100,
}

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
        "billing": {
            "handlers": ["console"],
            "level": os.getenv("BILLING_LOG_LEVEL", "INFO"),
        },
    },
}
