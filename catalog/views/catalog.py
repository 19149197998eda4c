"""
리스트 CRUD ViewSets

모든 리스트를 /api/v1/{users,artists,songs,albums,comments,replies}/ 로 노출합니다.
- 조회: 누구나
- 쓰기: 로그인 사용자 (댓글/답글 작성은 누구나)
- 사용자 관리: 관리자만
"""
from django.contrib.auth import get_user_model
from rest_framework import viewsets
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny, IsAdminUser, IsAuthenticatedOrReadOnly
from drf_spectacular.utils import extend_schema, extend_schema_view

from ..models import Album, Artist, Comment, Reply, Song
from ..serializers import (
    AlbumSerializer,
    ArtistSerializer,
    CommentSerializer,
    ReplySerializer,
    SongSerializer,
    UserSerializer,
)


@extend_schema_view(
    list=extend_schema(summary="사용자 목록", tags=['인증']),
    retrieve=extend_schema(summary="사용자 상세", tags=['인증']),
)
class UserViewSet(viewsets.ModelViewSet):
    queryset = get_user_model().objects.all()
    serializer_class = UserSerializer
    permission_classes = [IsAdminUser]
    search_fields = ['name', 'email']
    ordering_fields = ['name', 'email', 'created_at']


@extend_schema_view(
    list=extend_schema(summary="아티스트 목록", tags=['카탈로그']),
    retrieve=extend_schema(summary="아티스트 상세", tags=['카탈로그']),
    create=extend_schema(summary="아티스트 생성 (프로필 이미지 WebP 변환)", tags=['카탈로그']),
)
class ArtistViewSet(viewsets.ModelViewSet):
    queryset = Artist.objects.prefetch_related('songs', 'albums')
    serializer_class = ArtistSerializer
    parser_classes = [JSONParser, MultiPartParser, FormParser]
    search_fields = ['name', 'birthname', 'genre', 'record_label']
    ordering_fields = ['name', 'created_at']


@extend_schema_view(
    list=extend_schema(summary="곡 목록", tags=['카탈로그']),
    retrieve=extend_schema(summary="곡 상세", tags=['카탈로그']),
    create=extend_schema(summary="곡 생성 (ID3 태그 기록, 파일명 변경, 커버 WebP 변환)", tags=['카탈로그']),
)
class SongViewSet(viewsets.ModelViewSet):
    queryset = Song.objects.prefetch_related('artists', 'albums', 'comments')
    serializer_class = SongSerializer
    parser_classes = [JSONParser, MultiPartParser, FormParser]
    search_fields = ['title', 'genre', 'tags', 'artists__name']
    ordering_fields = ['title', 'listened_count', 'downloads', 'created_at']


@extend_schema_view(
    list=extend_schema(summary="앨범 목록", tags=['카탈로그']),
    retrieve=extend_schema(summary="앨범 상세", tags=['카탈로그']),
)
class AlbumViewSet(viewsets.ModelViewSet):
    queryset = Album.objects.prefetch_related('artists', 'songs')
    serializer_class = AlbumSerializer
    search_fields = ['title', 'artists__name']
    ordering_fields = ['title', 'created_at']


class PublicCreateMixin:
    """목록/조회/작성은 누구나, 수정/삭제는 로그인 사용자"""

    def get_permissions(self):
        if self.action == 'create':
            return [AllowAny()]
        return [IsAuthenticatedOrReadOnly()]


@extend_schema_view(
    list=extend_schema(summary="댓글 목록", tags=['댓글']),
    create=extend_schema(summary="댓글 작성", tags=['댓글']),
)
class CommentViewSet(PublicCreateMixin, viewsets.ModelViewSet):
    queryset = Comment.objects.prefetch_related('songs', 'replies')
    serializer_class = CommentSerializer
    search_fields = ['name', 'content']
    ordering_fields = ['created_at']


@extend_schema_view(
    list=extend_schema(summary="답글 목록", tags=['댓글']),
    create=extend_schema(summary="답글 작성", tags=['댓글']),
)
class ReplyViewSet(PublicCreateMixin, viewsets.ModelViewSet):
    queryset = Reply.objects.prefetch_related('comments')
    serializer_class = ReplySerializer
    search_fields = ['name', 'content']
    ordering_fields = ['created_at']
