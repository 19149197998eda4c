"""
기본 Serializer Mixin - 업로드 후처리 훅 연결
"""
from django.core.files.uploadedfile import UploadedFile

from ..hooks import run_resolve_input


class ResolveInputMixin:
    """
    ModelSerializer의 create/update가 끝난 뒤(다대다 관계 저장 이후) 훅 실행

    이번 요청에서 새 파일이 업로드된 필드만 훅에 전달합니다.
    """

    @staticmethod
    def uploaded_fields(validated_data):
        return [name for name, value in validated_data.items() if isinstance(value, UploadedFile)]

    def create(self, validated_data):
        uploaded = self.uploaded_fields(validated_data)
        instance = super().create(validated_data)
        run_resolve_input(instance, uploaded)
        return instance

    def update(self, instance, validated_data):
        uploaded = self.uploaded_fields(validated_data)
        instance = super().update(instance, validated_data)
        run_resolve_input(instance, uploaded)
        return instance
