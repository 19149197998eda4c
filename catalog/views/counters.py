"""
재생/다운로드 카운터 Views

프론트엔드 플레이어가 직접 호출하는 인증 없는 엔드포인트입니다.
"""
import logging

from django.db.models import F
from django.shortcuts import get_object_or_404
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema, OpenApiResponse, OpenApiExample

from ..models import Song
from ..serializers import DownloadCounterSerializer, PlayCounterSerializer

logger = logging.getLogger(__name__)


def update_counter(song_id, field_name, value=None):
    """
    곡 카운터 갱신

    value가 있으면 그 값으로 설정, 없으면 DB에서 원자적으로 1 증가
    """
    song = get_object_or_404(Song, pk=song_id)
    new_value = F(field_name) + 1 if value is None else value
    Song.objects.filter(pk=song.pk).update(**{field_name: new_value})
    song.refresh_from_db(fields=[field_name])
    logger.info(f"[카운터] {field_name} 갱신: song_id={song.pk}, value={getattr(song, field_name)}")
    return song


class PlayCounterView(APIView):
    """
    재생 수 갱신 API
    - POST /api/ping  {"counter": 12, "sid": 3}
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        summary="재생 수 갱신",
        description="""
        곡의 재생 수(listened_count)를 갱신합니다.

        - counter가 있으면 그 값으로 설정
        - counter가 없으면 1 증가
        """,
        request=PlayCounterSerializer,
        responses={
            200: OpenApiResponse(
                description="갱신 성공",
                examples=[OpenApiExample(name="성공 응답", value={"id": 3, "listenedCount": 12})]
            ),
            400: OpenApiResponse(description="잘못된 요청 본문"),
            404: OpenApiResponse(description="곡을 찾을 수 없음"),
        },
        tags=['카운터']
    )
    def post(self, request):
        serializer = PlayCounterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        song = update_counter(
            serializer.validated_data['sid'],
            'listened_count',
            serializer.validated_data.get('counter'),
        )
        return Response({'id': song.pk, 'listenedCount': song.listened_count}, status=status.HTTP_200_OK)


class DownloadCounterView(APIView):
    """
    다운로드 수 갱신 API
    - POST /api/updatedownload  {"downloadCounts": 5, "id": 3}
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(
        summary="다운로드 수 갱신",
        description="""
        곡의 다운로드 수(downloads)를 갱신합니다.

        - downloadCounts가 있으면 그 값으로 설정
        - downloadCounts가 없으면 1 증가
        """,
        request=DownloadCounterSerializer,
        responses={
            200: OpenApiResponse(
                description="갱신 성공",
                examples=[OpenApiExample(name="성공 응답", value={"id": 3, "downloads": 5})]
            ),
            400: OpenApiResponse(description="잘못된 요청 본문"),
            404: OpenApiResponse(description="곡을 찾을 수 없음"),
        },
        tags=['카운터']
    )
    def post(self, request):
        serializer = DownloadCounterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        song = update_counter(
            serializer.validated_data['id'],
            'downloads',
            serializer.validated_data.get('downloadCounts'),
        )
        return Response({'id': song.pk, 'downloads': song.downloads}, status=status.HTTP_200_OK)
