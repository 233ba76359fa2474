# domains/parcels/services.py
from __future__ import annotations

from datetime import datetime, time, timezone as dt_timezone
from typing import Any, Dict, Optional

from django.db import transaction
from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime

from rest_framework.exceptions import ValidationError

from .models import Parcel, ParcelUpdate

# 입력 별칭 (앞쪽 우선)
TIME_KEYS = ("time", "timestamp", "date")
EVENT_KEYS = ("event", "description")
LOCATION_KEYS = ("location", "place")


def normalize_code(code: Any) -> str:
    return str(code or "").strip()


def default_midnight() -> datetime:
    """오늘 00:00 UTC"""
    today = timezone.now().astimezone(dt_timezone.utc).date()
    return datetime.combine(today, time.min, tzinfo=dt_timezone.utc)


def _parse_time(value: Any) -> datetime:
    if isinstance(value, datetime):
        dt = value
    else:
        raw = str(value).strip()
        try:
            dt = parse_datetime(raw)
            d = parse_date(raw) if dt is None else None
        except ValueError:
            # 형식은 맞지만 없는 날짜 (2025-02-30)
            d = dt = None
        if dt is None:
            if d is None:
                raise ValidationError({"time": f"invalid datetime: {raw}"})
            dt = datetime.combine(d, time.min)
    if timezone.is_naive(dt):
        dt = timezone.make_aware(dt, dt_timezone.utc)
    return dt


def _pick(data: Dict[str, Any], keys) -> Optional[Any]:
    """별칭 중 처음으로 값이 있는 것, 하나도 없으면 None"""
    for k in keys:
        v = data.get(k)
        if v not in (None, ""):
            return v
    return None


def normalize_input(data: Optional[Dict[str, Any]], *, partial: bool = False) -> Dict[str, Any]:
    """
    관리자 입력 → 모델 필드.
    partial=False(CREATE): 빠진 값은 기본값 (time=오늘 자정 UTC, 나머지 "")
    partial=True(UPDATE): 들어온 키만 반환 (나머지는 기존 값 유지)
    """
    data = data if isinstance(data, dict) else {}
    out: Dict[str, Any] = {}

    raw_time = _pick(data, TIME_KEYS)
    if raw_time is not None:
        out["time"] = _parse_time(raw_time)
    elif not partial:
        out["time"] = default_midnight()

    event = _pick(data, EVENT_KEYS)
    if event is not None or not partial:
        out["event"] = str(event or "")

    location = _pick(data, LOCATION_KEYS)
    if location is not None or not partial:
        out["location"] = str(location or "")

    return out


def ensure_parcel(code: str) -> Parcel:
    parcel, _ = Parcel.objects.get_or_create(code=code)
    return parcel


def fetch_updates(code: str):
    return ParcelUpdate.objects.filter(parcel_id=code).order_by("-time", "-created_at")


def _target_update(code: str, update_id: Any = None) -> Optional[ParcelUpdate]:
    """update_id 지정 시 그 건(같은 코드 한정), 없으면 가장 최근 건"""
    qs = fetch_updates(code)
    if update_id:
        try:
            return qs.filter(pk=int(update_id)).first()
        except (TypeError, ValueError):
            return None
    return qs.first()


@transaction.atomic
def create_update(code: str, data: Optional[Dict[str, Any]]) -> ParcelUpdate:
    fields = normalize_input(data)
    parcel = ensure_parcel(code)
    return ParcelUpdate.objects.create(parcel=parcel, **fields)


@transaction.atomic
def update_update(code: str, update_id: Any, data: Optional[Dict[str, Any]]) -> Optional[ParcelUpdate]:
    fields = normalize_input(data, partial=True)
    target = _target_update(code, update_id)
    if target is None:
        return None
    for attr, value in fields.items():
        setattr(target, attr, value)
    # updated_at 은 auto_now
    target.save()
    return target


@transaction.atomic
def delete_update(code: str, update_id: Any = None) -> Optional[ParcelUpdate]:
    target = _target_update(code, update_id)
    if target is None:
        return None
    # delete() 후에도 응답용으로 값이 남도록 pk 만 보존
    removed_id = target.pk
    target.delete()
    target.pk = removed_id
    return target
