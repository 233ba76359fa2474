# domains/tracking/services.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import requests

from domains.carriers.directory import CarrierDirectory

from .adapters import SeventeenTrackAdapter
from .errors import TrackingError

logger = logging.getLogger(__name__)


@dataclass
class TrackingRequest:
    number: str
    carrier_code: Optional[Any] = None
    carrier_text: Optional[str] = None


@dataclass
class TrackingResult:
    register: Any
    info: Any
    stop: Any = field(default_factory=dict)

    def as_dict(self) -> Dict[str, Any]:
        return {"register": self.register, "info": self.info, "stop": self.stop}


class TrackingOrchestrator:
    """
    운송장 1건 조회 흐름: register → gettrackinfo → deletetrack (순차)

    - register 실패(HTTP 에러 또는 data.errors 존재) → 즉시 실패, 2·3단계 생략
    - gettrackinfo HTTP 에러 → 즉시 실패, 3단계 생략
      (이 경우 업스트림 등록이 남는다. 기존 동작 유지)
    - deletetrack 은 best-effort: 어떤 실패든 결과에 접어 넣고 절대 올리지 않는다.
      목적은 17TRACK 이 이 번호를 계속 폴링하지 않게 하는 것.
    """

    def __init__(self, directory: Optional[CarrierDirectory] = None, adapter: Optional[SeventeenTrackAdapter] = None):
        self.directory = directory if directory is not None else CarrierDirectory()
        self.adapter = adapter if adapter is not None else SeventeenTrackAdapter()

    def track(self, number: Any, carrier_code: Any = None, carrier_text: Any = None) -> TrackingResult:
        request = TrackingRequest(
            number=str(number or "").strip(),
            carrier_code=carrier_code,
            carrier_text=str(carrier_text or "").strip(),
        )
        # 키 확인이 입력 검증보다 먼저
        if not self.adapter.api_key:
            raise TrackingError.configuration("TRACK17_KEY not set")
        if not request.number:
            raise TrackingError.validation("number is required")

        carrier = self.directory.resolve(request.carrier_code, request.carrier_text)

        # 1) register
        try:
            register = self.adapter.register(request.number, carrier)
        except requests.RequestException as e:
            logger.exception("17TRACK register request error: %s", e)
            raise TrackingError.transport(str(e) or "Unknown error") from e

        if not register.ok or register.errors:
            raise TrackingError.upstream(
                register.message() or "Register failed",
                detail=register.body,
                status_code=register.status_code,
            )

        # 2) gettrackinfo
        try:
            info = self.adapter.get_track_info(request.number, carrier)
        except requests.RequestException as e:
            logger.exception("17TRACK gettrackinfo request error: %s", e)
            raise TrackingError.transport(str(e) or "Unknown error") from e

        if not info.ok:
            raise TrackingError.upstream(
                info.reason or info.message(),
                detail=info.body,
                status_code=info.status_code,
            )

        # 3) deletetrack (실패 무시)
        stop = self._stop_tracking(request.number, carrier)

        return TrackingResult(register=register.body, info=info.body, stop=stop)

    def _stop_tracking(self, number: str, carrier: Optional[int]) -> Any:
        try:
            stop = self.adapter.delete_track(number, carrier)
        except requests.RequestException as e:
            logger.warning("17TRACK deletetrack failed, ignoring: %s", e)
            return {}
        return stop.body if stop.body is not None else {}


__all__ = ["TrackingRequest", "TrackingResult", "TrackingOrchestrator"]
