"""
곡 파일 ID3 태그 / 파일명 유틸리티

업로드된 mp3에 사이트 브랜드가 들어간 ID3 태그를 기록하고,
"{제목}-by-{아티스트}[-ft-{피처링}]-{브랜드}.mp3" 형식의 파일명을 만듭니다.
"""
import logging
import mimetypes
import os
from dataclasses import dataclass
from typing import Optional

from django.utils.text import get_valid_filename
from mutagen import MutagenError
from mutagen.id3 import APIC, COMM, ID3, ID3NoHeaderError, TALB, TCON, TIT2, TPE1

logger = logging.getLogger(__name__)

UNKNOWN_ARTIST = 'Unknown Artist'


@dataclass
class SongTags:
    """곡 파일에 기록할 태그 값"""
    title: str
    artist: str
    album: Optional[str] = None
    genre: Optional[str] = None
    comment: Optional[str] = None
    cover_path: Optional[str] = None


def feature_suffix(featured: Optional[str]) -> str:
    """피처링 아티스트가 있으면 '-ft-{이름}', 없으면 빈 문자열"""
    return f'-ft-{featured}' if featured else ''


def brand_slug(brand: str) -> str:
    """'Kidaaa.com' -> 'Kidaaa-com'"""
    return brand.replace('.', '-')


def build_song_tags(title, artist_name, brand, featured=None, album_title=None, genre=None, cover_path=None) -> SongTags:
    """
    곡 정보로 ID3 태그 값 생성

    예:
        title="Essence", artist_name="Wizkid", featured="Tems", brand="Kidaaa.com"
        -> title="Essence || Kidaaa.com", artist="Wizkid-ft-Tems"
    """
    return SongTags(
        title=f'{title} || {brand}',
        artist=f'{artist_name or UNKNOWN_ARTIST}{feature_suffix(featured)}',
        album=album_title or None,
        genre=genre or None,
        comment=f'From the possession of {brand}',
        cover_path=cover_path,
    )


def build_song_filename(title, artist_name, brand, featured=None, extension='mp3') -> str:
    """
    곡 파일명 생성 (디렉토리 제외)

    예: "Essence-by-Wizkid-ft-Tems-Kidaaa-com.mp3"
    """
    raw = f'{title}-by-{artist_name or UNKNOWN_ARTIST}{feature_suffix(featured)}-{brand_slug(brand)}.{extension}'
    return get_valid_filename(raw)


def _cover_frame(cover_path: str):
    """공통 커버 이미지를 APIC(앞표지) 프레임으로"""
    mime = mimetypes.guess_type(cover_path)[0] or 'image/png'
    with open(cover_path, 'rb') as f:
        return APIC(encoding=3, mime=mime, type=3, desc='Cover', data=f.read())


def write_id3_tags(path: str, tags: SongTags) -> bool:
    """
    파일에 ID3 태그 기록 (기존 태그가 없으면 새로 생성)

    Returns:
        기록 성공 여부
    """
    try:
        try:
            id3 = ID3(path)
        except ID3NoHeaderError:
            id3 = ID3()

        id3.setall('TIT2', [TIT2(encoding=3, text=tags.title)])
        id3.setall('TPE1', [TPE1(encoding=3, text=tags.artist)])
        if tags.album:
            id3.setall('TALB', [TALB(encoding=3, text=tags.album)])
        if tags.genre:
            id3.setall('TCON', [TCON(encoding=3, text=tags.genre)])
        if tags.comment:
            id3.setall('COMM', [COMM(encoding=3, lang='eng', desc='', text=tags.comment)])

        if tags.cover_path:
            if os.path.exists(tags.cover_path):
                id3.setall('APIC', [_cover_frame(tags.cover_path)])
            else:
                logger.warning(f"[ID3] 공통 커버 이미지 없음, APIC 생략: {tags.cover_path}")

        id3.save(path)
        logger.info(f"[ID3] 태그 기록 완료: {path} (title={tags.title}, artist={tags.artist})")
        return True

    except (MutagenError, OSError) as e:
        logger.error(f"[ID3] 태그 기록 실패: {path}, 오류: {e}")
        return False
