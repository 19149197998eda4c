"""
Kidaaa Backend 프로젝트 설정 패키지

Django가 시작될 때 Celery 앱도 함께 로드해서 @shared_task(미디어 정리 작업)가 이 앱에 등록되도록 합니다.
"""
from .celery import app as celery_app

__all__ = ('celery_app',)
