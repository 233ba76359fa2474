# domains/carriers/directory.py
"""
17TRACK 캐리어 코드 디렉터리

apicarrier.all.json 을 프로세스 시작 시 한 번 읽어서 불변 객체로 보관한다.
(재로딩은 프로세스 재시작으로만)

resolve() 우선순위 (정확도 우선):
  1) 숫자 캐리어 코드가 명시되면 그대로
  2) 텍스트가 숫자로 시작하면 그 숫자 ("100 - DHL" → 100)
  3) 이름 완전 일치 (대소문자 무시)
  4) 이름 부분 일치 (목록 순서상 첫 번째)
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

_LEADING_DIGITS = re.compile(r"^(\d+)")


@dataclass(frozen=True)
class CarrierRecord:
    key: int
    name: str

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> Optional["CarrierRecord"]:
        """원본 항목 → 레코드. key 가 정수로 안 바뀌면 None."""
        try:
            key = int(raw.get("key"))
        except (TypeError, ValueError, OverflowError):
            # Infinity / NaN 도 json 에서는 파싱됨
            return None
        # 17TRACK 원본은 _name, 다른 덤프는 name
        name = raw.get("_name") or raw.get("name") or ""
        return cls(key=key, name=str(name))


def _norm(text: Any) -> str:
    return str(text or "").strip().lower()


def extract_records(document: Any) -> list:
    """bare 배열 또는 {"data": [...]} 만 인정, 그 외 모양은 빈 목록."""
    if isinstance(document, list):
        items = document
    elif isinstance(document, dict) and isinstance(document.get("data"), list):
        items = document["data"]
    else:
        return []
    return [item for item in items if isinstance(item, Mapping)]


@dataclass(frozen=True)
class CarrierDirectory:
    records: Tuple[CarrierRecord, ...] = ()
    names_by_key: Mapping[int, str] = field(default_factory=lambda: MappingProxyType({}))

    @classmethod
    def from_records(cls, records: Iterable[CarrierRecord]) -> "CarrierDirectory":
        records = tuple(records)
        # 키 중복 시 마지막 항목이 이김
        names = {r.key: r.name for r in records}
        return cls(records=records, names_by_key=MappingProxyType(names))

    @classmethod
    def from_document(cls, document: Any) -> "CarrierDirectory":
        parsed = (CarrierRecord.from_raw(raw) for raw in extract_records(document))
        return cls.from_records(r for r in parsed if r is not None)

    @classmethod
    def load(cls, path: Path) -> "CarrierDirectory":
        """
        파일에서 로드. 읽기/파싱 실패는 치명적이지 않음:
        경고만 남기고 빈 디렉터리를 돌려준다 (캐리어 추론만 비활성).
        """
        try:
            with open(path, "r", encoding="utf-8") as fp:
                document = json.load(fp)
        except FileNotFoundError:
            logger.warning("Carrier list file not found: %s", path)
            return cls()
        except (OSError, ValueError) as e:
            logger.warning("Could not load carriers file %s: %s", path, e)
            return cls()

        directory = cls.from_document(document)
        logger.info("Loaded %d carriers from %s", len(directory), path)
        return directory

    def __len__(self) -> int:
        return len(self.records)

    def name_of(self, key: int) -> Optional[str]:
        return self.names_by_key.get(key)

    def resolve(self, carrier_code: Any = None, carrier_text: Any = None) -> Optional[int]:
        """자유 입력(코드/텍스트) → 17TRACK 캐리어 코드. 못 찾으면 None."""
        if carrier_code:
            try:
                code = int(carrier_code)
            except (TypeError, ValueError):
                code = 0
            if code:
                return code

        if not carrier_text:
            return None

        text = str(carrier_text).strip()
        m = _LEADING_DIGITS.match(text)
        if m:
            try:
                return int(m.group(1))
            except ValueError:
                # int 변환 자릿수 한도 초과
                return None

        target = _norm(text)
        if not target:
            return None

        for record in self.records:
            if _norm(record.name) == target:
                return record.key

        for record in self.records:
            if target in _norm(record.name):
                return record.key

        return None


__all__ = ["CarrierRecord", "CarrierDirectory", "extract_records"]
