# PATH: apps/api/config/settings/dev.py
from .base import *

DEBUG = True
ALLOWED_HOSTS = ["*"]

INSTALLED_APPS += [
    "debug_toolbar",
]

MIDDLEWARE.insert(0, "debug_toolbar.middleware.DebugToolbarMiddleware")

INTERNAL_IPS = [
    "127.0.0.1",
]

# 로컬 DB 미설정 시 sqlite 로 기동
if not os.getenv("DB_NAME"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": BASE_DIR / "db.sqlite3",
        }
    }

# eager 면 시트 기록이 요청 스레드(커밋 직후)에서 돈다.
# CELERY_BROKER_URL 을 지정하면 워커로 넘긴다.
CELERY_TASK_ALWAYS_EAGER = env_bool(
    "CELERY_TASK_ALWAYS_EAGER", not os.getenv("CELERY_BROKER_URL")
)

LOGGING["loggers"].update({
    "apps": {"level": "DEBUG"},
    "academy": {"level": "DEBUG"},
})
