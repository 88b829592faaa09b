# Django 기동 시 celery app 을 함께 로드 (shared_task 바인딩)
from .celery import app as celery_app

__all__ = ("celery_app",)
