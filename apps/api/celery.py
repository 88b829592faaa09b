# PATH: apps/api/celery.py

import os

from celery import Celery

# 외부에서 주입되지 않았을 때만 dev 로 기동
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "apps.api.config.settings.dev")

app = Celery("academy_site")

app.config_from_object(
    "django.conf:settings",
    namespace="CELERY",
)

# Django INSTALLED_APPS 기준으로 tasks.py 자동 탐색
app.autodiscover_tasks()
