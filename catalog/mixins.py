"""
Model Mixins

재사용 가능한 모델 기능을 제공하는 Mixin 클래스들입니다.
"""
from django.db import models


class TimestampMixin(models.Model):
    """
    생성/수정 시각을 자동으로 관리하는 Mixin

    사용 예시:
        class Song(TimestampMixin):
            # created_at, updated_at 필드가 자동으로 추가됨
            pass
    """
    created_at = models.DateTimeField(auto_now_add=True, verbose_name="생성 시각")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="수정 시각")

    class Meta:
        abstract = True


class ImageMetadataMixin:
    """
    이미지 필드와 그 부가 정보(가로, 세로, 파일 크기) 필드 이름을 묶어주는 Mixin

    훅이 이미지를 변환한 뒤 어떤 필드를 갱신해야 하는지 모델이 직접 알려줍니다.

    사용 예시:
        class Artist(ImageMetadataMixin, TimestampMixin):
            image_metadata_fields = {
                'avatar': ('avatar_width', 'avatar_height', 'avatar_filesize'),
            }
    """
    image_metadata_fields = {}

    def apply_image_result(self, field_name, result):
        """
        이미지 변환 결과를 인스턴스에 반영하고 변경된 필드 이름 목록을 반환

        Args:
            field_name: 이미지 필드 이름 (예: 'avatar')
            result: convert_to_webp()가 반환한 dict (name, width, height, filesize)
        """
        width_field, height_field, filesize_field = self.image_metadata_fields[field_name]
        getattr(self, field_name).name = result['name']
        setattr(self, width_field, result['width'])
        setattr(self, height_field, result['height'])
        setattr(self, filesize_field, result['filesize'])
        return [field_name, width_field, height_field, filesize_field]
