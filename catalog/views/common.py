"""
공통 유틸리티 - 페이지네이션, 헬스 체크
"""
import time

from rest_framework.pagination import PageNumberPagination
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView
from drf_spectacular.utils import extend_schema


class CatalogPagination(PageNumberPagination):
    """리스트 목록 페이지네이션"""
    page_size = 20
    page_size_query_param = 'page_size'
    max_page_size = 100


class HealthCheckView(APIView):
    """
    헬스 체크 엔드포인트

    - GET /_healthcheck -> {"status": "pass", "timestamp": <epoch ms>}
    """
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="헬스 체크", tags=['카탈로그'])
    def get(self, request):
        return Response({'status': 'pass', 'timestamp': int(time.time() * 1000)})
