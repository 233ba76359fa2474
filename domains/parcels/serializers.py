from __future__ import annotations

from rest_framework import serializers

from .models import ParcelUpdate


# ---------------------------
# 출력용: ParcelUpdateSerializer
# ---------------------------
class ParcelUpdateSerializer(serializers.ModelSerializer):
    code = serializers.CharField(source="parcel_id", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = ParcelUpdate
        fields = ("id", "code", "time", "event", "location", "createdAt", "updatedAt")


# ---------------------------
# 입력용: 관리자 변경 요청
# parcelCode / code / number, updateId / data.id / data.updateId 를
# validate 에서 code / update_id 로 정규화
# ---------------------------
class ParcelUpdateCommandSerializer(serializers.Serializer):
    MODES = ("CREATE", "UPDATE", "DELETE")

    mode = serializers.CharField(required=False, allow_blank=True, default="")
    parcelCode = serializers.CharField(required=False, allow_blank=True)
    code = serializers.CharField(required=False, allow_blank=True)
    number = serializers.CharField(required=False, allow_blank=True)
    updateId = serializers.JSONField(required=False, allow_null=True)
    data = serializers.DictField(required=False, default=dict)

    def validate(self, attrs):
        mode = (attrs.get("mode") or "").strip().upper()
        if not mode:
            raise serializers.ValidationError({"mode": "mode is required"})

        code = (attrs.get("parcelCode") or attrs.get("code") or attrs.get("number") or "").strip()
        if not code:
            raise serializers.ValidationError({"parcelCode": "parcelCode is required"})

        if mode not in self.MODES:
            raise serializers.ValidationError({"mode": "Unknown mode. Use CREATE, UPDATE or DELETE."})

        data = attrs.get("data") or {}
        update_id = attrs.get("updateId") or data.get("id") or data.get("updateId")
        return {"mode": mode, "code": code, "data": data, "update_id": update_id}
