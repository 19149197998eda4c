"""
테스트 전용 설정

PostgreSQL 대신 SQLite, 임시 MEDIA_ROOT, 즉시 실행 Celery를 사용합니다.
"""
import tempfile
from pathlib import Path

from .settings import *  # noqa: F401,F403

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

MEDIA_ROOT = Path(tempfile.mkdtemp(prefix='kidaaa-media-'))
ID3_COVER_IMAGE = MEDIA_ROOT / 'generalCover' / 'kidaaa.png'

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

CELERY_TASK_ALWAYS_EAGER = True
CELERY_TASK_EAGER_PROPAGATES = True
CELERY_BROKER_URL = 'memory://'
