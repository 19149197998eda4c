"""
이미지 리사이징 유틸리티

업로드된 아티스트 프로필/곡 커버 이미지를 정사각형으로 잘라 리사이징하고
WebP로 변환합니다.
- 아티스트 프로필: 200x200, 무손실 WebP (images/profiles/)
- 곡 커버: 200x200, WebP (images/)
"""
import logging
import os

from PIL import Image, UnidentifiedImageError

from .files import available_name, media_path, remove_file_quietly

logger = logging.getLogger(__name__)


def create_square_image(image: Image.Image, size: tuple) -> Image.Image:
    """
    이미지를 사각형으로 리사이징합니다.

    Args:
        image: PIL Image 객체
        size: (width, height) 튜플

    Returns:
        리사이징된 사각형 이미지 (투명도가 있으면 RGBA, 없으면 RGB)
    """
    img = image.copy()

    # 정사각형으로 중앙 크롭 (비율 유지)
    width, height = img.size
    min_dimension = min(width, height)

    left = (width - min_dimension) // 2
    top = (height - min_dimension) // 2
    cropped = img.crop((left, top, left + min_dimension, top + min_dimension))

    resized = cropped.resize(size, Image.Resampling.LANCZOS)

    # WebP는 RGB/RGBA만 지원
    if resized.mode in ('RGBA', 'LA') or (resized.mode == 'P' and 'transparency' in resized.info):
        return resized.convert('RGBA')
    if resized.mode != 'RGB':
        return resized.convert('RGB')
    return resized


def webp_name(name: str) -> str:
    """images/profiles/ada.png -> images/profiles/ada.webp"""
    return f"{os.path.splitext(name)[0]}.webp"


def convert_to_webp(name: str, size: tuple, lossless: bool = False, max_length: int = None) -> dict:
    """
    스토리지에 저장된 이미지를 리사이징해 같은 디렉토리에 WebP로 저장하고 원본을 삭제합니다.

    Args:
        name: 원본 스토리지 이름 (예: images/profiles/ada.png)
        size: (width, height) 튜플
        lossless: 무손실 WebP 여부
        max_length: 이미지 필드의 max_length

    Returns:
        {'name', 'width', 'height', 'filesize'} 또는 원본을 읽을 수 없으면 None
    """
    old_path = media_path(name)

    try:
        with Image.open(old_path) as image:
            square = create_square_image(image, size)
    except (FileNotFoundError, UnidentifiedImageError, OSError) as e:
        logger.error(f"[이미지 리사이징] 원본 이미지를 읽을 수 없음: {name}, 오류: {e}")
        return None

    new_name = available_name(webp_name(name), current=name, max_length=max_length)
    new_path = media_path(new_name)

    try:
        square.save(new_path, format='WEBP', lossless=lossless)
    except OSError as e:
        logger.error(f"[이미지 리사이징] WebP 저장 실패: {new_name}, 오류: {e}", exc_info=True)
        return None

    logger.info(f"[이미지 리사이징] 완료: {name} -> {new_name} ({size[0]}x{size[1]})")

    # 원본과 경로가 다르면 원본 삭제
    if new_path != old_path:
        remove_file_quietly(old_path)

    return {
        'name': new_name,
        'width': square.width,
        'height': square.height,
        'filesize': os.path.getsize(new_path),
    }
