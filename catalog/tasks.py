"""
미디어 정리 Celery 작업
"""
import logging
import os
import time

from celery import shared_task
from django.conf import settings

from .models import ARTIST_AVATAR_DIR, SONG_COVER_DIR, SONG_FILE_DIR, Artist, Song
from .utils.files import remove_file_quietly

logger = logging.getLogger(__name__)

# 정리 대상 디렉토리 (하위 디렉토리는 제외, generalCover 등은 건드리지 않음)
MEDIA_DIRS = (SONG_FILE_DIR, SONG_COVER_DIR, ARTIST_AVATAR_DIR)


def referenced_media_names() -> set:
    """레코드가 참조하고 있는 모든 스토리지 이름"""
    names = set()
    for song_file, cover in Song.objects.values_list('song_file', 'cover'):
        names.update(n for n in (song_file, cover) if n)
    names.update(n for n in Artist.objects.values_list('avatar', flat=True) if n)
    return names


@shared_task(name='catalog.tasks.cleanup_orphaned_media')
def cleanup_orphaned_media(max_age_hours=None):
    """
    어떤 레코드도 참조하지 않는 업로드 파일 삭제 (매일 새벽 4시 실행)
    - 훅에서 삭제에 실패한 원본, 교체된 이전 이미지 등
    - 업로드 직후 처리 중인 파일을 피하기 위해 max_age_hours보다 오래된 파일만 삭제
    """
    if max_age_hours is None:
        max_age_hours = settings.ORPHAN_MEDIA_MAX_AGE_HOURS
    cutoff = time.time() - max_age_hours * 3600
    referenced = referenced_media_names()

    logger.info(f"[미디어 정리] 시작: 참조 파일 {len(referenced)}개, 기준 {max_age_hours}시간")

    deleted = []
    for directory in MEDIA_DIRS:
        root = os.path.join(settings.MEDIA_ROOT, directory)
        if not os.path.isdir(root):
            continue

        for entry in os.scandir(root):
            if not entry.is_file():
                continue
            name = f'{directory}{entry.name}'
            if name in referenced or entry.stat().st_mtime > cutoff:
                continue
            if remove_file_quietly(entry.path):
                deleted.append(name)

    logger.info(f"[미디어 정리] 삭제 완료: {len(deleted)}개")
    return {"status": "success", "deleted_count": len(deleted), "deleted": deleted}
