# shared/permissions.py
from __future__ import annotations

from typing import Any, Optional

from django.conf import settings
from rest_framework.permissions import SAFE_METHODS, BasePermission

from shared.exceptions import InvalidSharedSecret, SharedSecretNotConfigured

# 요청 body 에서 시크릿을 찾는 키 (앞쪽 우선)
SECRET_FIELDS = ("secret", "secretKey", "key")

# ---- helpers ---------------------------------------------------------------


def _is_schema_generation(view) -> bool:
    """drf-spectacular 스키마 생성 시 True (권한을 널널하게 통과시켜 문서 생성 편의)."""
    return bool(getattr(view, "swagger_fake_view", False))


def provided_secret(data: Any) -> Optional[str]:
    """body 의 secret / secretKey / key 중 처음으로 값이 있는 것."""
    if not hasattr(data, "get"):
        return None
    for field in SECRET_FIELDS:
        value = data.get(field)
        if value:
            return value
    return None


# ---- shared-secret permissions --------------------------------------------


def shared_secret_required(setting_name: str):
    """
    SAFE_METHODS 는 통과, 그 외 메서드는 body 의 시크릿이
    settings.<setting_name> 과 정확히 같아야 함.

    - 설정값 비어 있음 → 500 (서버 설정 오류)
    - 불일치          → 401

    사용 예)
        permission_classes = [shared_secret_required("NEWS_SECRET")]
    """

    class _SharedSecretRequired(BasePermission):
        def has_permission(self, request, view):
            if request.method in SAFE_METHODS:
                return True
            if _is_schema_generation(view):
                return True

            expected = getattr(settings, setting_name, "") or ""
            if not expected:
                raise SharedSecretNotConfigured(f"{setting_name} not set")
            if provided_secret(request.data) != expected:
                raise InvalidSharedSecret()
            return True

    _SharedSecretRequired.__name__ = f"SharedSecretRequired_{setting_name}"
    return _SharedSecretRequired


__all__ = [
    "SECRET_FIELDS",
    "provided_secret",
    "shared_secret_required",
]
