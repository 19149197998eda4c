import os
import time

from celery import Celery
from celery.signals import task_prerun, task_postrun, task_failure
from prometheus_client import Counter, Histogram, REGISTRY

# Django의 settings 모듈을 Celery에 기본값으로 설정합니다.
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

app = Celery('kidaaa')

# 'CELERY_'로 시작하는 모든 Django 설정 키를 사용합니다.
app.config_from_object('django.conf:settings', namespace='CELERY')

# 등록된 Django 앱에서 tasks 모듈을 자동으로 찾습니다.
app.autodiscover_tasks()

# ==============================================
# Celery Prometheus 메트릭 정의
# ==============================================

celery_tasks_total = Counter(
    'kidaaa_celery_tasks_total',
    'Total number of tasks executed',
    ['task_name', 'status'],
    registry=REGISTRY
)

celery_task_duration = Histogram(
    'kidaaa_celery_task_duration_seconds',
    'Task execution time in seconds',
    ['task_name'],
    buckets=[0.1, 0.5, 1.0, 5.0, 30.0, 120.0, 600.0, float('inf')],
    registry=REGISTRY
)

# task_id -> 시작 시각
task_start_times = {}


def _observe_duration(task_id, task_name):
    started = task_start_times.pop(task_id, None)
    if started is not None:
        celery_task_duration.labels(task_name=task_name).observe(time.time() - started)


@task_prerun.connect
def task_prerun_handler(sender=None, task_id=None, task=None, **extra):
    task_start_times[task_id] = time.time()


@task_postrun.connect
def task_postrun_handler(sender=None, task_id=None, task=None, state=None, **extra):
    task_name = task.name if task else sender.name
    _observe_duration(task_id, task_name)
    if state != 'FAILURE':
        celery_tasks_total.labels(task_name=task_name, status='success').inc()


@task_failure.connect
def task_failure_handler(sender=None, task_id=None, exception=None, **extra):
    _observe_duration(task_id, sender.name)
    celery_tasks_total.labels(task_name=sender.name, status='failure').inc()
