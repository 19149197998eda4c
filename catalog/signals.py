"""
Django Signals for media file housekeeping

아티스트나 곡이 삭제되면 연결된 업로드 파일(프로필, 곡 파일, 커버)을 함께 삭제합니다.
"""
import logging
from django.db import transaction
from django.db.models.signals import post_delete
from django.dispatch import receiver

from .models import Artist, Song
from .utils.files import media_path, remove_file_quietly

logger = logging.getLogger(__name__)


def _delete_field_files(instance, field_names):
    """레코드 삭제가 커밋된 뒤 파일 삭제 (롤백되면 파일 유지)"""
    names = [getattr(instance, f).name for f in field_names if getattr(instance, f)]
    if not names:
        return

    def delete_files():
        for name in names:
            if remove_file_quietly(media_path(name)):
                logger.info(f"[Signal] {instance._meta.model_name} 삭제로 파일 제거: {name}")

    transaction.on_commit(delete_files)


@receiver(post_delete, sender=Artist)
def artist_deleted(sender, instance, **kwargs):
    _delete_field_files(instance, ['avatar'])


@receiver(post_delete, sender=Song)
def song_deleted(sender, instance, **kwargs):
    _delete_field_files(instance, ['song_file', 'cover'])
