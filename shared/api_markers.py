# shared/api_markers.py
"""
API 문서화용 마커 시리얼라이저

@extend_schema 의 responses 에 에러/삭제 응답 모양을 적기 위한 용도.
실제 직렬화에는 쓰지 않는다.
"""
from rest_framework import serializers


class ErrorSerializer(serializers.Serializer):
    """
    모든 에러 응답 공통 모양

    {"error": "number is required"}
    {"error": "Bad Request", "detail": {...업스트림 원본...}}
    """
    error = serializers.CharField()
    detail = serializers.JSONField(required=False)


class SecretRequestSerializer(serializers.Serializer):
    """
    공유 시크릿이 필요한 쓰기 요청의 공통 필드

    secret / secretKey / key 중 아무거나 하나.
    """
    secret = serializers.CharField(required=False)
    secretKey = serializers.CharField(required=False)
    key = serializers.CharField(required=False)
