"""
카탈로그 모델

User, Artist, Song, Album, Comment, Reply 6개의 리스트를 정의합니다.
관계는 모두 다대다(ManyToMany)이며 related_name으로 반대편 필드를 노출합니다.
"""
from django.contrib.auth.base_user import AbstractBaseUser
from django.contrib.auth.models import PermissionsMixin
from django.core.validators import FileExtensionValidator
from django.db import models

from .managers import UserManager
from .mixins import ImageMetadataMixin, TimestampMixin
from .utils.files import validate_upload_size

# 업로드 경로 (MEDIA_ROOT 기준)
SONG_FILE_DIR = 'files/'
SONG_COVER_DIR = 'images/'
ARTIST_AVATAR_DIR = 'images/profiles/'


def default_song_featuring():
    return {'features': {'artist_name': False}}


def default_album_featuring():
    return {'features': False, 'moreInfo': False}


class User(AbstractBaseUser, PermissionsMixin, TimestampMixin):
    """email로 로그인하는 사용자 (관리자 화면, API 인증)"""
    name = models.CharField(max_length=150, verbose_name="이름")
    email = models.EmailField(unique=True, verbose_name="이메일")
    is_staff = models.BooleanField(default=False, verbose_name="관리자 화면 접근")
    is_active = models.BooleanField(default=True, verbose_name="활성 여부")

    objects = UserManager()

    USERNAME_FIELD = 'email'
    EMAIL_FIELD = 'email'
    REQUIRED_FIELDS = ['name']

    class Meta:
        db_table = 'users'
        verbose_name = '사용자'
        verbose_name_plural = '사용자'
        ordering = ['name']

    def __str__(self):
        return self.name


class Artist(ImageMetadataMixin, TimestampMixin):
    name = models.CharField(max_length=200, unique=True, verbose_name="이름")
    about = models.JSONField(default=list, blank=True, verbose_name="소개")  # 리치 텍스트 문서 (노드 배열)
    birthname = models.CharField(max_length=200, blank=True, default='', verbose_name="본명")
    genre = models.CharField(max_length=100, blank=True, default='', verbose_name="장르")
    dob = models.CharField(max_length=50, blank=True, default='', verbose_name="생년월일")
    record_label = models.CharField(max_length=200, blank=True, default='', verbose_name="레이블")
    avatar = models.ImageField(
        upload_to=ARTIST_AVATAR_DIR,
        blank=True,
        validators=[validate_upload_size],
        width_field='avatar_width',
        height_field='avatar_height',
        verbose_name="프로필 이미지",
    )
    avatar_width = models.PositiveIntegerField(blank=True, null=True)
    avatar_height = models.PositiveIntegerField(blank=True, null=True)
    avatar_filesize = models.PositiveIntegerField(blank=True, null=True)

    image_metadata_fields = {
        'avatar': ('avatar_width', 'avatar_height', 'avatar_filesize'),
    }

    class Meta:
        db_table = 'artists'
        verbose_name = '아티스트'
        verbose_name_plural = '아티스트'
        ordering = ['name']

    def __str__(self):
        return self.name


class Album(TimestampMixin):
    title = models.CharField(max_length=255, unique=True, verbose_name="제목")
    about = models.TextField(blank=True, default='', verbose_name="소개")
    featuring = models.JSONField(default=default_album_featuring, blank=True, verbose_name="피처링")
    artists = models.ManyToManyField(Artist, related_name='albums', blank=True, verbose_name="아티스트")

    class Meta:
        db_table = 'albums'
        verbose_name = '앨범'
        verbose_name_plural = '앨범'
        ordering = ['title']

    def __str__(self):
        return self.title


class Song(ImageMetadataMixin, TimestampMixin):
    title = models.CharField(max_length=255, unique=True, verbose_name="제목")
    description = models.TextField(blank=True, default='', verbose_name="설명")
    genre = models.CharField(max_length=100, blank=True, default='', verbose_name="장르")
    listened_count = models.PositiveIntegerField(default=0, verbose_name="재생 수")
    downloads = models.PositiveIntegerField(default=0, verbose_name="다운로드 수")
    tags = models.CharField(max_length=500, blank=True, default='', verbose_name="태그")
    song_file = models.FileField(
        upload_to=SONG_FILE_DIR,
        blank=True,
        max_length=255,
        validators=[FileExtensionValidator(['mp3']), validate_upload_size],
        verbose_name="곡 파일",
    )
    song_filesize = models.PositiveIntegerField(blank=True, null=True)
    cover = models.ImageField(
        upload_to=SONG_COVER_DIR,
        blank=True,
        validators=[validate_upload_size],
        width_field='cover_width',
        height_field='cover_height',
        verbose_name="커버 이미지",
    )
    cover_width = models.PositiveIntegerField(blank=True, null=True)
    cover_height = models.PositiveIntegerField(blank=True, null=True)
    cover_filesize = models.PositiveIntegerField(blank=True, null=True)
    featuring = models.JSONField(default=default_song_featuring, blank=True, verbose_name="피처링")
    lyrics = models.JSONField(default=list, blank=True, verbose_name="가사")  # 리치 텍스트 문서
    albums = models.ManyToManyField(Album, related_name='songs', blank=True, verbose_name="앨범")
    artists = models.ManyToManyField(Artist, related_name='songs', blank=True, verbose_name="아티스트")

    image_metadata_fields = {
        'cover': ('cover_width', 'cover_height', 'cover_filesize'),
    }

    class Meta:
        db_table = 'songs'
        verbose_name = '곡'
        verbose_name_plural = '곡'
        ordering = ['-created_at']

    def __str__(self):
        return self.title

    @property
    def featured_artist_name(self):
        """featuring = {"features": {"artist_name": "..."}} 에서 피처링 아티스트 이름 (없으면 None)"""
        featuring = self.featuring if isinstance(self.featuring, dict) else {}
        features = featuring.get('features')
        if isinstance(features, dict):
            return features.get('artist_name') or None
        return None


class Comment(TimestampMixin):
    name = models.CharField(max_length=150, verbose_name="이름")
    email = models.EmailField(unique=True, verbose_name="이메일")
    content = models.TextField(blank=True, default='', verbose_name="내용")
    songs = models.ManyToManyField(Song, related_name='comments', blank=True, verbose_name="곡")

    class Meta:
        db_table = 'comments'
        verbose_name = '댓글'
        verbose_name_plural = '댓글'
        ordering = ['-created_at']

    def __str__(self):
        return f'{self.name}: {self.content[:30]}'


class Reply(TimestampMixin):
    name = models.CharField(max_length=150, verbose_name="이름")
    content = models.TextField(blank=True, default='', verbose_name="내용")
    comments = models.ManyToManyField(Comment, related_name='replies', blank=True, verbose_name="댓글")

    class Meta:
        db_table = 'replies'
        verbose_name = '답글'
        verbose_name_plural = '답글'
        ordering = ['created_at']

    def __str__(self):
        return f'{self.name}: {self.content[:30]}'
