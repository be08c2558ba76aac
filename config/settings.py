"""
Entropy - Django Settings (Infrastructure Only)
=================================================
Django serves as the framework container for the temporal core.
The core does not import Django settings; only the adapter wiring
in adapters.django_app reads them.
"""

import os
from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = os.environ.get("ENTROPY_SECRET_KEY", "entropy-dev-key-replace-before-deployment")

DEBUG = os.environ.get("ENTROPY_DEBUG", "1") == "1"

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

# ── Database ──────────────────────────────────────────────────
# SQLite for development. Production DB configured separately.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": BASE_DIR / "db.sqlite3",
    }
}

# ── Internationalization ──────────────────────────────────────
# Finnish is the primary content language, English the secondary.
LANGUAGE_CODE = "fi"
LANGUAGES = [("fi", "Suomi"), ("en", "English")]
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ── Temporal Clock ────────────────────────────────────────────
# Selected once at process wiring time.
#   system   real wall-clock time (production)
#   fixed    frozen at TEMPORAL_CLOCK_INSTANT (staging, demos)
#   mutable  settable clock, only honoured when DEBUG is on
TEMPORAL_CLOCK = os.environ.get("ENTROPY_CLOCK", "system")
TEMPORAL_CLOCK_INSTANT = os.environ.get("ENTROPY_CLOCK_INSTANT") or None

# ── Logging ───────────────────────────────────────────────────
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
        "entropy": {
            "handlers": ["console"],
            "level": os.environ.get("ENTROPY_LOG_LEVEL", "INFO"),
        },
    },
}
