# tests/conftest.py
from datetime import datetime, timezone as dt_timezone

import pytest
from rest_framework.test import APIClient

from domains.carriers.directory import CarrierDirectory
from domains.news.models import NewsPost
from domains.parcels.models import Parcel, ParcelUpdate

NEWS_SECRET = "news-s3cret"
PARCEL_SECRET = "parcel-s3cret"
TRACK17_KEY = "test-17token"


# ─────────────────────────────────────────────────────────────
# 클라이언트 & 시크릿
# ─────────────────────────────────────────────────────────────
@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def secrets(settings):
    """공유 시크릿/API 키를 테스트 값으로 세팅"""
    settings.NEWS_SECRET = NEWS_SECRET
    settings.PARCEL_UPDATES_SECRET = PARCEL_SECRET
    settings.TRACK17_KEY = TRACK17_KEY
    return {
        "news": NEWS_SECRET,
        "parcel": PARCEL_SECRET,
        "track17": TRACK17_KEY,
    }


# ─────────────────────────────────────────────────────────────
# 캐리어 디렉터리
# ─────────────────────────────────────────────────────────────
@pytest.fixture
def carrier_directory():
    return CarrierDirectory.from_document(
        [
            {"key": 100, "_name": "DHL"},
            {"key": 200, "_name": "DHL Express"},
            {"key": 21051, "_name": "USPS"},
            {"key": 3011, "name": "China Post"},
        ]
    )


# ─────────────────────────────────────────────────────────────
# 팩토리 픽스처
# ─────────────────────────────────────────────────────────────
@pytest.fixture
def news_post_factory(db):
    counter = {"n": 0}

    def _make(**kw):
        counter["n"] += 1
        n = counter["n"]
        kw.setdefault("title", f"Post {n}")
        kw.setdefault("slug", f"post-{n}")
        kw.setdefault("content_html", f"<p>body {n}</p>")
        kw.setdefault("published_at", datetime(2025, 1, n % 28 + 1, tzinfo=dt_timezone.utc))
        return NewsPost.objects.create(**kw)

    return _make


@pytest.fixture
def parcel_update_factory(db):
    """
    사용법: parcel_update_factory("VN123", time="2025-01-02T10:00:00Z", event="Arrived")
    """

    def _make(code: str, **kw):
        parcel, _ = Parcel.objects.get_or_create(code=code)
        kw.setdefault("time", datetime(2025, 1, 1, tzinfo=dt_timezone.utc))
        kw.setdefault("event", "Accepted")
        kw.setdefault("location", "Hanoi")
        return ParcelUpdate.objects.create(parcel=parcel, **kw)

    return _make
