"""
Kidaaa Backend - Pytest Configuration & Shared Fixtures

Provides reusable fixtures for:
- 테스트마다 비어 있는 임시 MEDIA_ROOT (+ ID3 공통 커버 이미지)
- 실제 Pillow 이미지 / mp3 업로드 파일
- 아티스트, 앨범, 사용자, API 클라이언트
"""
import io
from pathlib import Path

import pytest
from django.core.files.uploadedfile import SimpleUploadedFile
from PIL import Image
from rest_framework.test import APIClient


def image_bytes(size=(400, 300), fmt='PNG', mode='RGB', color=(200, 40, 40)) -> bytes:
    buffer = io.BytesIO()
    Image.new(mode, size, color).save(buffer, format=fmt)
    return buffer.getvalue()


def image_upload(name='photo.png', size=(400, 300), fmt='PNG', mode='RGB') -> SimpleUploadedFile:
    """Pillow로 만든 실제 이미지 업로드 파일"""
    color = (200, 40, 40, 128) if mode == 'RGBA' else (200, 40, 40)
    return SimpleUploadedFile(name, image_bytes(size, fmt, mode, color), content_type=f'image/{fmt.lower()}')


def mp3_upload(name='upload.mp3') -> SimpleUploadedFile:
    """ID3 헤더 없는 mp3 업로드 파일 (MPEG 프레임 헤더 + 무음 데이터)"""
    return SimpleUploadedFile(name, b'\xff\xfb\x90\x00' + b'\x00' * 2048, content_type='audio/mpeg')


# ---------------------------------------------------------------------------
# 미디어 디렉토리
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path: Path) -> Path:
    """테스트마다 새 MEDIA_ROOT, 공통 커버 이미지 포함"""
    root = tmp_path / 'media'
    cover = root / 'generalCover' / 'kidaaa.png'
    cover.parent.mkdir(parents=True)
    cover.write_bytes(image_bytes((64, 64)))

    settings.MEDIA_ROOT = root
    settings.ID3_COVER_IMAGE = cover
    settings.SITE_BRAND_NAME = 'Kidaaa.com'
    settings.MEDIA_IMAGE_SIZE = (200, 200)
    return root


# ---------------------------------------------------------------------------
# 레코드
# ---------------------------------------------------------------------------


@pytest.fixture
def artist(db):
    from catalog.models import Artist

    return Artist.objects.create(name='Wizkid', genre='Afrobeats')


@pytest.fixture
def album(db, artist):
    from catalog.models import Album

    album = Album.objects.create(title='Made in Lagos')
    album.artists.add(artist)
    return album


@pytest.fixture
def user(db):
    from catalog.models import User

    return User.objects.create_user(email='editor@kidaaa.com', name='Editor', password='s3cret-pass!')


@pytest.fixture
def admin_user(db):
    from catalog.models import User

    return User.objects.create_superuser(email='admin@kidaaa.com', name='Admin', password='s3cret-pass!')


# ---------------------------------------------------------------------------
# API 클라이언트
# ---------------------------------------------------------------------------


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def auth_client(user) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=user)
    return client
