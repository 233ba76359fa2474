# shared/exceptions.py
from __future__ import annotations

import logging

from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler, set_rollback

from domains.tracking.errors import ErrorKind, TrackingError

logger = logging.getLogger(__name__)


class SharedSecretNotConfigured(exceptions.APIException):
    """서버에 시크릿 환경변수가 없음 → 모든 쓰기 요청 500"""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Shared secret not set"
    default_code = "configuration"


class InvalidSharedSecret(exceptions.APIException):
    # NotAuthenticated 를 쓰면 DRF 가 403 으로 바꿔버림 (인증 클래스 없음)
    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized"
    default_code = "unauthorized"


def _first_message(detail) -> str:
    """ValidationError detail(중첩 dict/list) 에서 첫 메시지만 꺼냄"""
    if isinstance(detail, dict):
        for value in detail.values():
            return _first_message(value)
        return ""
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ""
    return str(detail)


def api_exception_handler(exc, context):
    """
    DRF 기본 핸들러 위에 응답 모양만 통일: {"error": str, "detail"?: any}
    프론트(정적 JS)는 data.error 만 읽는다.
    """
    if isinstance(exc, TrackingError):
        if exc.kind is ErrorKind.CONFIGURATION:
            logger.error("tracking misconfigured: %s", exc.message)
        return Response(exc.as_payload(), status=exc.http_status)

    response = exception_handler(exc, context)
    if response is None:
        # 예상 못한 예외도 프론트가 읽을 수 있게 JSON 500
        logger.error("Unhandled API error: %s", exc, exc_info=exc)
        set_rollback()
        return Response({"error": str(exc) or "Unknown error"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, exceptions.ValidationError):
        response.data = {"error": _first_message(exc.detail) or "Invalid input", "detail": response.data}
    else:
        detail = response.data.get("detail") if isinstance(response.data, dict) else response.data
        response.data = {"error": str(detail)}
    return response
