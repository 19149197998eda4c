"""
WSGI 엔트리포인트 (gunicorn config.wsgi:application)
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_wsgi_application()
