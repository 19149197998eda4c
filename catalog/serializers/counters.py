"""
재생/다운로드 카운터 Serializers

프론트엔드가 보내는 camelCase 키(counter/sid, downloadCounts/id)를 그대로 받습니다.
"""
from rest_framework import serializers

# PositiveIntegerField 컬럼 상한 (PostgreSQL integer)
MAX_COUNTER_VALUE = 2147483647


class PlayCounterSerializer(serializers.Serializer):
    """POST /api/ping 요청 본문"""
    sid = serializers.IntegerField(min_value=1)
    counter = serializers.IntegerField(min_value=0, max_value=MAX_COUNTER_VALUE, required=False)


class DownloadCounterSerializer(serializers.Serializer):
    """POST /api/updatedownload 요청 본문"""
    id = serializers.IntegerField(min_value=1)
    downloadCounts = serializers.IntegerField(min_value=0, max_value=MAX_COUNTER_VALUE, required=False)
