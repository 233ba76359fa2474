from __future__ import annotations

from rest_framework import serializers


# ---------------------------
# 입력용: 조회 요청
# number 필수 여부는 오케스트레이터가 판단 (TRACK17_KEY 확인 뒤)
# ---------------------------
class TrackRequestSerializer(serializers.Serializer):
    number = serializers.CharField(required=False, allow_blank=True, trim_whitespace=True)
    carrier = serializers.JSONField(required=False, allow_null=True)
    carrierText = serializers.CharField(required=False, allow_blank=True, allow_null=True, trim_whitespace=True)


# ---------------------------
# 출력용: 업스트림 원본 3종
# ---------------------------
class TrackResultSerializer(serializers.Serializer):
    register = serializers.JSONField()
    info = serializers.JSONField()
    stop = serializers.JSONField()
