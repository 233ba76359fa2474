# domains/tracking/errors.py
from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from rest_framework import status


class ErrorKind(str, Enum):
    VALIDATION = "validation"          # 필수 입력 누락 등
    CONFIGURATION = "configuration"    # API 키/시크릿 미설정
    UPSTREAM = "upstream"              # 17TRACK 이 돌려준 에러 payload
    TRANSPORT = "transport"            # 네트워크/파싱 실패


class TrackingError(Exception):
    """
    조회 흐름의 단일 실패 타입.

    kind 로 분기하고, detail 에는 업스트림 원본 body 를 그대로 싣는다.
    status_code 는 업스트림 HTTP 상태가 있을 때만 채운다.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        detail: Any = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.detail = detail
        self.status_code = status_code

    @property
    def http_status(self) -> int:
        if self.kind == ErrorKind.VALIDATION:
            return status.HTTP_400_BAD_REQUEST
        # 200 + errors[] 같은 경우는 성공 상태를 그대로 흘리지 않는다
        if self.kind == ErrorKind.UPSTREAM and self.status_code and self.status_code >= 400:
            return self.status_code
        return status.HTTP_500_INTERNAL_SERVER_ERROR

    def as_payload(self) -> dict:
        payload = {"error": self.message or "Unknown error"}
        if self.detail is not None:
            payload["detail"] = self.detail
        return payload

    @classmethod
    def validation(cls, message: str) -> "TrackingError":
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def configuration(cls, message: str) -> "TrackingError":
        return cls(ErrorKind.CONFIGURATION, message)

    @classmethod
    def upstream(cls, message: str, *, detail: Any = None, status_code: Optional[int] = None) -> "TrackingError":
        return cls(ErrorKind.UPSTREAM, message, detail=detail, status_code=status_code)

    @classmethod
    def transport(cls, message: str) -> "TrackingError":
        return cls(ErrorKind.TRANSPORT, message)

    def __repr__(self) -> str:
        return f"TrackingError(kind={self.kind.value!r}, message={self.message!r}, status_code={self.status_code!r})"


__all__ = ["ErrorKind", "TrackingError"]
