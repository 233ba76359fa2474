# domains/tracking/adapters/seventeen_track.py
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.17track.net/track/v2.4"


@dataclass
class UpstreamResponse:
    """17TRACK 응답 1건: HTTP 상태 + 파싱된 body (파싱 실패 시 {})"""

    status_code: int
    reason: str
    body: Any

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def errors(self) -> List[Dict[str, Any]]:
        """body.data.errors (요청 단위 구조화 에러 목록)"""
        data = self.body.get("data") if isinstance(self.body, dict) else None
        errors = data.get("errors") if isinstance(data, dict) else None
        return errors if isinstance(errors, list) else []

    def message(self) -> str:
        """사람이 읽을 에러 메시지: errors[0].message → message/error → reason"""
        if self.errors:
            first = self.errors[0]
            if isinstance(first, dict) and first.get("message"):
                return str(first["message"])
        if isinstance(self.body, dict):
            msg = self.body.get("message") or self.body.get("error")
            if msg:
                return str(msg)
        return self.reason or f"HTTP {self.status_code}"


class SeventeenTrackAdapter:
    """
    17TRACK Open API v2.4 와의 실제 연동을 위한 어댑터

    세 엔드포인트 모두 POST + JSON 배열 [{number, carrier}] + 17token 헤더.
    HTTP 상태 판단은 호출부(오케스트레이터) 몫이고, 여기서는
    네트워크 예외(requests.RequestException)만 그대로 올려보낸다.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self.api_key = api_key if api_key is not None else getattr(settings, "TRACK17_KEY", "")
        self.base_url = (base_url or getattr(settings, "TRACK17_BASE_URL", "") or DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else getattr(settings, "TRACK17_TIMEOUT", 10)
        self.session = session or requests.Session()

    def _headers(self) -> Dict[str, str]:
        return {"17token": self.api_key, "Content-Type": "application/json"}

    @staticmethod
    def build_batch(number: str, carrier: Optional[int]) -> List[Dict[str, Any]]:
        # carrier 미확정이면 키 자체를 뺀다 (17TRACK 자동 판별)
        item: Dict[str, Any] = {"number": number}
        if carrier:
            item["carrier"] = carrier
        return [item]

    def _post(self, action: str, number: str, carrier: Optional[int]) -> UpstreamResponse:
        url = f"{self.base_url}/{action}"
        payload = self.build_batch(number, carrier)
        logger.info("17TRACK %s: number=%s carrier=%s", action, number, carrier)

        resp = self.session.post(url, headers=self._headers(), json=payload, timeout=self.timeout)
        try:
            body = resp.json()
        except ValueError:
            body = {}

        if not (200 <= resp.status_code < 300):
            logger.warning("17TRACK %s non-2xx: %s %s", action, resp.status_code, (resp.text or "")[:500])
        return UpstreamResponse(status_code=resp.status_code, reason=resp.reason or "", body=body)

    def register(self, number: str, carrier: Optional[int] = None) -> UpstreamResponse:
        return self._post("register", number, carrier)

    def get_track_info(self, number: str, carrier: Optional[int] = None) -> UpstreamResponse:
        return self._post("gettrackinfo", number, carrier)

    def delete_track(self, number: str, carrier: Optional[int] = None) -> UpstreamResponse:
        return self._post("deletetrack", number, carrier)
