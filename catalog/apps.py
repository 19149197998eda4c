from django.apps import AppConfig


class CatalogConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'catalog'
    verbose_name = '카탈로그'

    def ready(self):
        # post_delete 파일 정리 signal 등록
        from . import signals  # noqa: F401
