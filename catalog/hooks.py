"""
리스트별 resolve-input 훅

레코드가 생성/수정될 때 새로 업로드된 파일이 있으면 동기적으로 후처리하고,
변경된 필드 이름 목록을 돌려줍니다. 호출자(serializer, admin)가 그 필드들을 저장합니다.

- Artist.avatar : 200x200 무손실 WebP 변환, 원본 삭제
- Song.song_file: ID3 태그 재기록, "{제목}-by-{아티스트}...mp3"로 이름 변경
- Song.cover    : 200x200 WebP 변환, 원본 삭제

파일 삭제/이름 변경 실패는 로그만 남기고 넘어갑니다 (재시도, 트랜잭션 없음).
"""
import logging
import os

from django.conf import settings
from prometheus_client import Counter, REGISTRY

from .models import Artist, Song, SONG_FILE_DIR
from .utils.files import available_name, media_path, move_file
from .utils.id3_tags import build_song_filename, build_song_tags, write_id3_tags
from .utils.image_resizer import convert_to_webp

logger = logging.getLogger(__name__)

media_hook_total = Counter(
    'catalog_media_hook_total',
    'Media post-processing hook runs',
    ['hook', 'status'],
    registry=REGISTRY
)


def _convert_image_field(instance, field_name, lossless):
    """이미지 필드를 WebP로 변환하고 변경된 필드 목록 반환"""
    field_file = getattr(instance, field_name)
    result = convert_to_webp(
        field_file.name,
        settings.MEDIA_IMAGE_SIZE,
        lossless=lossless,
        max_length=instance._meta.get_field(field_name).max_length,
    )
    if result is None:
        media_hook_total.labels(hook=f'{instance._meta.model_name}.{field_name}', status='failure').inc()
        return []

    media_hook_total.labels(hook=f'{instance._meta.model_name}.{field_name}', status='success').inc()
    return instance.apply_image_result(field_name, result)


def resolve_artist_input(artist: Artist, changed_fields) -> list:
    """
    아티스트 프로필 이미지 후처리

    Args:
        artist: 저장이 끝난 Artist 인스턴스
        changed_fields: 이번 요청에서 입력된 필드 이름들

    Returns:
        변경된 필드 이름 목록
    """
    if 'avatar' not in changed_fields or not artist.avatar:
        return []

    logger.info(f"[아티스트 훅] 프로필 이미지 변환 시작: artist_id={artist.pk}, file={artist.avatar.name}")
    return _convert_image_field(artist, 'avatar', lossless=True)


def _process_song_file(song: Song) -> list:
    """ID3 태그 기록 후 곡 파일 이름 변경"""
    brand = settings.SITE_BRAND_NAME

    # 첫 번째로 연결된 아티스트/앨범 기준
    artist = song.artists.order_by('pk').first()
    album = song.albums.order_by('pk').first()
    artist_name = artist.name if artist else None
    featured = song.featured_artist_name

    if artist is None:
        logger.warning(f"[곡 훅] 연결된 아티스트 없음: song_id={song.pk}, title={song.title}")

    old_name = song.song_file.name
    old_path = media_path(old_name)

    tags = build_song_tags(
        song.title,
        artist_name,
        brand,
        featured=featured,
        album_title=album.title if album else None,
        genre=song.genre,
        cover_path=str(settings.ID3_COVER_IMAGE),
    )
    tagged = write_id3_tags(old_path, tags)

    new_name = available_name(
        os.path.join(SONG_FILE_DIR, build_song_filename(song.title, artist_name, brand, featured=featured)),
        current=old_name,
        max_length=song._meta.get_field('song_file').max_length,
    )
    new_path = media_path(new_name)

    if not move_file(old_path, new_path):
        # 이름 변경 실패 시 기존 파일을 계속 가리킴
        media_hook_total.labels(hook='song.song_file', status='failure').inc()
        new_name, new_path = old_name, old_path
    else:
        media_hook_total.labels(hook='song.song_file', status='success' if tagged else 'partial').inc()

    song.song_file.name = new_name
    try:
        song.song_filesize = os.path.getsize(new_path)
    except OSError as e:
        logger.error(f"[곡 훅] 파일 크기 확인 실패: {new_path}, 오류: {e}")
        return ['song_file']

    logger.info(f"[곡 훅] 곡 파일 처리 완료: song_id={song.pk}, {old_name} -> {new_name}")
    return ['song_file', 'song_filesize']


def resolve_song_input(song: Song, changed_fields) -> list:
    """
    곡 파일/커버 이미지 후처리

    관계(아티스트, 앨범)가 저장된 뒤에 호출되어야 태그와 파일명에 반영됩니다.

    Args:
        song: 저장이 끝난 Song 인스턴스
        changed_fields: 이번 요청에서 입력된 필드 이름들

    Returns:
        변경된 필드 이름 목록
    """
    updated = []

    if 'song_file' in changed_fields and song.song_file:
        logger.info(f"[곡 훅] 곡 파일 처리 시작: song_id={song.pk}, file={song.song_file.name}")
        updated += _process_song_file(song)

    if 'cover' in changed_fields and song.cover:
        logger.info(f"[곡 훅] 커버 이미지 변환 시작: song_id={song.pk}, file={song.cover.name}")
        updated += _convert_image_field(song, 'cover', lossless=False)

    return updated


LIST_HOOKS = {
    Artist: resolve_artist_input,
    Song: resolve_song_input,
}


def run_resolve_input(instance, changed_fields) -> list:
    """
    모델에 등록된 훅을 실행하고 변경된 필드를 저장

    Returns:
        저장된 필드 이름 목록 (훅이 없거나 변경이 없으면 빈 리스트)
    """
    hook = LIST_HOOKS.get(type(instance))
    if hook is None:
        return []

    updated = hook(instance, set(changed_fields))
    if updated:
        instance.save(update_fields=updated + ['updated_at'])
    return updated
