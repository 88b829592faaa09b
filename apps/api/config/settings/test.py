# PATH: apps/api/config/settings/test.py
from .base import *

DEBUG = False
ALLOWED_HOSTS = ["*"]

SECRET_KEY = "test-secret-key"

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

PASSWORD_HASHERS = [
    "django.contrib.auth.hashers.MD5PasswordHasher",
]

CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "academy-site-test",
    }
}

ADMIN_PASSWORD = "admin-test-password"

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = False
CELERY_BROKER_URL = "memory://"

NOTIFICATIONS_ENABLED = True
GOOGLE_SHEET_ID = ""
GOOGLE_SERVICE_ACCOUNT_JSON = ""
GOOGLE_SERVICE_ACCOUNT_FILE = ""

REST_FRAMEWORK = {
    **REST_FRAMEWORK,
    "DEFAULT_THROTTLE_RATES": {
        "phone_send": "1000/min",
        "phone_verify": "1000/min",
    },
}

LOGGING["root"]["level"] = "WARNING"
