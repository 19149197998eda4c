"""
리스트 CRUD Serializers - 사용자, 아티스트, 곡, 앨범, 댓글, 답글
"""
from django.contrib.auth import get_user_model
from rest_framework import serializers

from ..models import Album, Artist, Comment, Reply, Song
from .base import ResolveInputMixin


class UserSerializer(serializers.ModelSerializer):
    """사용자 Serializer (비밀번호는 쓰기 전용, 해시 저장)"""
    password = serializers.CharField(write_only=True, min_length=8, style={'input_type': 'password'})

    class Meta:
        model = get_user_model()
        fields = ['id', 'name', 'email', 'password', 'is_staff', 'is_active', 'created_at']
        read_only_fields = ['created_at']

    def create(self, validated_data):
        return get_user_model().objects.create_user(**validated_data)

    def update(self, instance, validated_data):
        password = validated_data.pop('password', None)
        instance = super().update(instance, validated_data)
        if password:
            instance.set_password(password)
            instance.save(update_fields=['password'])
        return instance


class ArtistSerializer(ResolveInputMixin, serializers.ModelSerializer):
    """아티스트 Serializer (avatar 업로드 시 WebP 변환)"""

    class Meta:
        model = Artist
        fields = [
            'id', 'name', 'about', 'birthname', 'genre', 'dob', 'record_label',
            'avatar', 'avatar_width', 'avatar_height', 'avatar_filesize',
            'songs', 'albums', 'created_at', 'updated_at',
        ]
        read_only_fields = ['avatar_width', 'avatar_height', 'avatar_filesize', 'created_at', 'updated_at']
        extra_kwargs = {
            'songs': {'required': False},
            'albums': {'required': False},
        }


class AlbumSerializer(serializers.ModelSerializer):
    """앨범 Serializer"""
    artist_names = serializers.SlugRelatedField(source='artists', slug_field='name', many=True, read_only=True)

    class Meta:
        model = Album
        fields = ['id', 'title', 'about', 'featuring', 'artists', 'artist_names', 'songs', 'created_at', 'updated_at']
        read_only_fields = ['created_at', 'updated_at']
        extra_kwargs = {
            'artists': {'required': False},
            'songs': {'required': False},
        }


class SongSerializer(ResolveInputMixin, serializers.ModelSerializer):
    """
    곡 Serializer

    song_file 업로드 시 ID3 태그 기록 + 파일명 변경,
    cover 업로드 시 WebP 변환이 저장 직후 실행됩니다.
    """
    artist_names = serializers.SlugRelatedField(source='artists', slug_field='name', many=True, read_only=True)
    album_titles = serializers.SlugRelatedField(source='albums', slug_field='title', many=True, read_only=True)

    class Meta:
        model = Song
        fields = [
            'id', 'title', 'description', 'genre', 'listened_count', 'downloads', 'tags',
            'song_file', 'song_filesize',
            'cover', 'cover_width', 'cover_height', 'cover_filesize',
            'featuring', 'lyrics',
            'artists', 'artist_names', 'albums', 'album_titles', 'comments',
            'created_at', 'updated_at',
        ]
        read_only_fields = [
            'song_filesize', 'cover_width', 'cover_height', 'cover_filesize',
            'created_at', 'updated_at',
        ]
        extra_kwargs = {
            'artists': {'required': False},
            'albums': {'required': False},
            'comments': {'required': False},
        }

    def validate_featuring(self, value):
        """{"features": {"artist_name": ...}} 형태만 허용"""
        if value in (None, {}):
            return {'features': {'artist_name': False}}
        if not isinstance(value, dict) or not isinstance(value.get('features'), dict):
            raise serializers.ValidationError('featuring must look like {"features": {"artist_name": "..."}}.')
        return value


class CommentSerializer(serializers.ModelSerializer):
    """댓글 Serializer"""

    class Meta:
        model = Comment
        fields = ['id', 'name', 'email', 'content', 'songs', 'replies', 'created_at']
        read_only_fields = ['created_at']
        extra_kwargs = {
            'songs': {'required': False},
            'replies': {'required': False},
        }


class ReplySerializer(serializers.ModelSerializer):
    """답글 Serializer"""

    class Meta:
        model = Reply
        fields = ['id', 'name', 'content', 'comments', 'created_at']
        read_only_fields = ['created_at']
        extra_kwargs = {
            'comments': {'required': False},
        }
