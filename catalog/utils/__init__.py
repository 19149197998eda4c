"""
카탈로그 유틸리티 (파일 처리, 이미지 변환, ID3 태그)
"""
