"""
업로드 파일 처리 유틸리티

삭제/이름 변경 실패는 로그만 남기고 호출자에게 전파하지 않습니다.
"""
import logging
import os

from django.conf import settings
from django.core.exceptions import ValidationError
from django.core.files.storage import default_storage
from django.template.defaultfilters import filesizeformat

logger = logging.getLogger(__name__)


def validate_upload_size(file):
    """MAX_UPLOAD_SIZE를 넘는 업로드 거부"""
    limit = settings.MAX_UPLOAD_SIZE
    if file.size is not None and file.size > limit:
        raise ValidationError(
            f'File too large ({filesizeformat(file.size)}). Maximum is {filesizeformat(limit)}.'
        )


def media_path(name: str) -> str:
    """스토리지 이름(files/xxx.mp3) -> 로컬 절대 경로"""
    return default_storage.path(name)


def available_name(name: str, current: str = None, max_length: int = None) -> str:
    """
    name을 사용할 수 있으면 그대로, 다른 파일이 이미 쓰고 있으면 빈 이름을 반환

    Args:
        name: 원하는 스토리지 이름
        current: 지금 레코드가 가리키는 이름 (같으면 덮어쓰기 허용)
        max_length: 필드의 max_length (넘으면 파일명 앞부분을 잘라냄)
    """
    if name == current:
        return name
    return default_storage.get_available_name(name, max_length=max_length)


def remove_file_quietly(path: str) -> bool:
    """
    파일 삭제 (best effort)

    Returns:
        삭제 성공 여부 (파일이 없으면 False)
    """
    if not path or not os.path.exists(path):
        return False
    try:
        os.remove(path)
        logger.info(f"[파일] 이전 파일 삭제: {path}")
        return True
    except OSError as e:
        logger.error(f"[파일] 삭제 실패: {path}, 오류: {e}")
        return False


def move_file(old_path: str, new_path: str) -> bool:
    """
    파일 이름 변경 (best effort)

    Returns:
        이름 변경 성공 여부
    """
    if old_path == new_path:
        return True
    try:
        os.makedirs(os.path.dirname(new_path), exist_ok=True)
        os.replace(old_path, new_path)
        logger.info(f"[파일] 이름 변경: {old_path} -> {new_path}")
        return True
    except OSError as e:
        logger.error(f"[파일] 이름 변경 실패: {old_path} -> {new_path}, 오류: {e}")
        return False
