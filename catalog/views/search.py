"""
곡 제목 검색 View

SONG_SEARCH_ENABLED=1 일 때만 URL에 등록됩니다 (기본 비활성화).
"""
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema

from ..models import Song


class SongSearchView(APIView):
    """
    제목이 정확히 일치하는 곡 조회
    - GET /api/search/{search_data} -> {"id": 3, "title": "..."} 또는 null
    """
    permission_classes = [AllowAny]

    @extend_schema(summary="곡 제목 검색", tags=['검색'])
    def get(self, request, search_data):
        song = Song.objects.filter(title=search_data).only('id', 'title').first()
        if song is None:
            return Response(None)
        return Response({'id': song.pk, 'title': song.title})
