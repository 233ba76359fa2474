"""
parcel-updates 엔드포인트 테스트
"""
from datetime import datetime, timezone as dt_timezone

import pytest

from domains.parcels.models import Parcel, ParcelUpdate


def _utc(*args):
    return datetime(*args, tzinfo=dt_timezone.utc)


@pytest.mark.django_db
class TestListUpdates:
    def test_newest_first(self, api_client, parcel_update_factory):
        parcel_update_factory("VN1", time=_utc(2025, 1, 1), event="Accepted")
        parcel_update_factory("VN1", time=_utc(2025, 1, 3), event="Delivered")
        parcel_update_factory("VN1", time=_utc(2025, 1, 2), event="In transit")
        parcel_update_factory("OTHER", time=_utc(2025, 1, 5), event="Other")

        r = api_client.get("/api/parcel-updates?code=%20VN1%20")

        assert r.status_code == 200
        body = r.json()
        assert body["code"] == "VN1"
        assert [u["event"] for u in body["updates"]] == ["Delivered", "In transit", "Accepted"]
        assert set(body["updates"][0]) == {"id", "code", "time", "event", "location", "createdAt", "updatedAt"}

    @pytest.mark.parametrize("param", ["parcel", "number"])
    def test_code_aliases(self, api_client, parcel_update_factory, param):
        parcel_update_factory("VN2")
        r = api_client.get(f"/api/parcel-updates?{param}=VN2")
        assert r.status_code == 200
        assert len(r.json()["updates"]) == 1

    def test_code_required(self, api_client):
        r = api_client.get("/api/parcel-updates")
        assert r.status_code == 400
        assert r.json() == {"error": "code is required"}

    def test_unknown_code_is_empty(self, api_client):
        r = api_client.get("/api/parcel-updates?code=NOPE")
        assert r.status_code == 200
        assert r.json() == {"code": "NOPE", "updates": []}


@pytest.mark.django_db
class TestChangeUpdates:
    def test_create_with_aliases(self, api_client, secrets):
        r = api_client.post(
            "/api/parcel-updates",
            {
                "secret": secrets["parcel"],
                "mode": "create",
                "code": " VN9 ",
                "data": {"timestamp": "2025-03-01T08:30:00Z", "description": "Picked up", "place": "HCMC"},
            },
            format="json",
        )
        assert r.status_code == 200, r.content
        body = r.json()
        assert body["code"] == "VN9"
        assert body["update"]["event"] == "Picked up"
        assert body["update"]["location"] == "HCMC"
        assert Parcel.objects.filter(code="VN9").exists()
        upd = ParcelUpdate.objects.get(pk=body["update"]["id"])
        assert upd.time == _utc(2025, 3, 1, 8, 30)

    def test_create_defaults_to_midnight_utc(self, api_client, secrets):
        r = api_client.post(
            "/api/parcel-updates",
            {"secret": secrets["parcel"], "mode": "CREATE", "parcelCode": "VN10", "data": {}},
            format="json",
        )
        assert r.status_code == 200
        upd = ParcelUpdate.objects.get(pk=r.json()["update"]["id"])
        assert (upd.time.hour, upd.time.minute, upd.time.second) == (0, 0, 0)
        assert upd.event == ""
        assert upd.location == ""

    def test_create_date_only(self, api_client, secrets):
        r = api_client.post(
            "/api/parcel-updates",
            {"secret": secrets["parcel"], "mode": "CREATE", "parcelCode": "VN11", "data": {"date": "2025-02-14"}},
            format="json",
        )
        assert r.status_code == 200
        assert ParcelUpdate.objects.get(pk=r.json()["update"]["id"]).time == _utc(2025, 2, 14)

    def test_create_invalid_time(self, api_client, secrets):
        r = api_client.post(
            "/api/parcel-updates",
            {"secret": secrets["parcel"], "mode": "CREATE", "parcelCode": "VN12", "data": {"time": "yesterday"}},
            format="json",
        )
        assert r.status_code == 400
        assert ParcelUpdate.objects.count() == 0

    @pytest.mark.parametrize("value", ["2025-02-30", "2025-02-30T10:00:00Z", "2025-13-01"])
    def test_create_impossible_date(self, api_client, secrets, value):
        r = api_client.post(
            "/api/parcel-updates",
            {"secret": secrets["parcel"], "mode": "CREATE", "parcelCode": "VN13", "data": {"time": value}},
            format="json",
        )
        assert r.status_code == 400
        assert "invalid datetime" in r.json()["error"]
        assert ParcelUpdate.objects.count() == 0

    def test_update_latest_keeps_missing_fields(self, api_client, secrets, parcel_update_factory):
        parcel_update_factory("VN3", time=_utc(2025, 1, 1), event="Old", location="A")
        latest = parcel_update_factory("VN3", time=_utc(2025, 1, 2), event="Latest", location="B")

        r = api_client.post(
            "/api/parcel-updates",
            {"secret": secrets["parcel"], "mode": "UPDATE", "parcelCode": "VN3", "data": {"event": "Changed"}},
            format="json",
        )
        assert r.status_code == 200, r.content
        latest.refresh_from_db()
        assert latest.event == "Changed"
        assert latest.location == "B"
        assert latest.time == _utc(2025, 1, 2)

    def test_update_by_id(self, api_client, secrets, parcel_update_factory):
        first = parcel_update_factory("VN4", time=_utc(2025, 1, 1), event="First")
        parcel_update_factory("VN4", time=_utc(2025, 1, 2), event="Second")

        r = api_client.post(
            "/api/parcel-updates",
            {"secret": secrets["parcel"], "mode": "UPDATE", "parcelCode": "VN4", "updateId": first.id,
             "data": {"location": "Da Nang"}},
            format="json",
        )
        assert r.status_code == 200
        first.refresh_from_db()
        assert first.location == "Da Nang"

    def test_update_id_from_data(self, api_client, secrets, parcel_update_factory):
        first = parcel_update_factory("VN5", time=_utc(2025, 1, 1))
        parcel_update_factory("VN5", time=_utc(2025, 1, 2))

        r = api_client.post(
            "/api/parcel-updates",
            {"secret": secrets["parcel"], "mode": "UPDATE", "parcelCode": "VN5",
             "data": {"id": first.id, "event": "via data.id"}},
            format="json",
        )
        assert r.status_code == 200
        first.refresh_from_db()
        assert first.event == "via data.id"

    def test_update_other_code_not_found(self, api_client, secrets, parcel_update_factory):
        other = parcel_update_factory("VN6")
        r = api_client.post(
            "/api/parcel-updates",
            {"secret": secrets["parcel"], "mode": "UPDATE", "parcelCode": "VN7", "updateId": other.id, "data": {}},
            format="json",
        )
        assert r.status_code == 404
        assert r.json() == {"error": "Update not found"}

    def test_delete_latest(self, api_client, secrets, parcel_update_factory):
        older = parcel_update_factory("VN8", time=_utc(2025, 1, 1))
        latest = parcel_update_factory("VN8", time=_utc(2025, 1, 2))

        r = api_client.post(
            "/api/parcel-updates",
            {"secret": secrets["parcel"], "mode": "DELETE", "parcelCode": "VN8"},
            format="json",
        )
        assert r.status_code == 200
        assert r.json()["removed"]["id"] == latest.id
        assert list(ParcelUpdate.objects.filter(parcel_id="VN8")) == [older]

    def test_delete_nothing(self, api_client, secrets):
        r = api_client.post(
            "/api/parcel-updates",
            {"secret": secrets["parcel"], "mode": "DELETE", "parcelCode": "EMPTY"},
            format="json",
        )
        assert r.status_code == 404

    @pytest.mark.parametrize(
        "payload,message",
        [
            ({"parcelCode": "X"}, "mode is required"),
            ({"mode": "CREATE"}, "parcelCode is required"),
            ({"mode": "PATCH", "parcelCode": "X"}, "Unknown mode. Use CREATE, UPDATE or DELETE."),
        ],
    )
    def test_bad_commands(self, api_client, secrets, payload, message):
        r = api_client.post("/api/parcel-updates", {"secret": secrets["parcel"], **payload}, format="json")
        assert r.status_code == 400
        assert r.json()["error"] == message

    def test_wrong_secret(self, api_client, secrets):
        r = api_client.post(
            "/api/parcel-updates",
            {"secret": secrets["news"], "mode": "CREATE", "parcelCode": "X"},
            format="json",
        )
        assert r.status_code == 401

    def test_secret_not_configured(self, api_client, settings):
        settings.PARCEL_UPDATES_SECRET = ""
        r = api_client.post(
            "/api/parcel-updates", {"secret": "x", "mode": "CREATE", "parcelCode": "X"}, format="json"
        )
        assert r.status_code == 500
        assert r.json() == {"error": "PARCEL_UPDATES_SECRET not set"}
