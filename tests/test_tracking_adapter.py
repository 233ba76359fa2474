"""
domains/tracking/adapters/seventeen_track.py 테스트
"""
from unittest.mock import MagicMock

import pytest
import requests

from domains.tracking.adapters import SeventeenTrackAdapter, UpstreamResponse


def _http(status_code=200, json_body=None, reason="OK", text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.reason = reason
    resp.text = text
    if json_body is None:
        resp.json.side_effect = ValueError("no json")
    else:
        resp.json.return_value = json_body
    return resp


@pytest.fixture
def session():
    return MagicMock(spec=requests.Session)


@pytest.fixture
def adapter(session):
    return SeventeenTrackAdapter(api_key="tok", base_url="https://api.example/track/v2.4/", timeout=3, session=session)


class TestPost:
    @pytest.mark.parametrize(
        "method,action",
        [("register", "register"), ("get_track_info", "gettrackinfo"), ("delete_track", "deletetrack")],
    )
    def test_endpoint_headers_and_payload(self, adapter, session, method, action):
        session.post.return_value = _http(json_body={"code": 0})

        res = getattr(adapter, method)("RR1", 21051)

        session.post.assert_called_once_with(
            f"https://api.example/track/v2.4/{action}",
            headers={"17token": "tok", "Content-Type": "application/json"},
            json=[{"number": "RR1", "carrier": 21051}],
            timeout=3,
        )
        assert res.ok
        assert res.body == {"code": 0}

    def test_carrier_omitted_when_unresolved(self, adapter, session):
        session.post.return_value = _http(json_body={})
        adapter.register("RR1", None)
        assert session.post.call_args.kwargs["json"] == [{"number": "RR1"}]

    def test_non_json_body_becomes_empty(self, adapter, session):
        session.post.return_value = _http(status_code=502, reason="Bad Gateway", text="<html>")
        res = adapter.get_track_info("RR1")
        assert res.body == {}
        assert not res.ok
        assert res.message() == "Bad Gateway"

    def test_transport_error_propagates(self, adapter, session):
        session.post.side_effect = requests.ConnectionError("down")
        with pytest.raises(requests.RequestException):
            adapter.register("RR1")

    def test_defaults_from_settings(self, settings):
        settings.TRACK17_KEY = "from-settings"
        settings.TRACK17_BASE_URL = "https://api.17track.net/track/v2.4"
        a = SeventeenTrackAdapter()
        assert a.api_key == "from-settings"
        assert a.base_url == "https://api.17track.net/track/v2.4"


class TestUpstreamResponse:
    def test_errors_list(self):
        r = UpstreamResponse(200, "OK", {"data": {"errors": [{"code": 1, "message": "bad key"}]}})
        assert r.errors == [{"code": 1, "message": "bad key"}]
        assert r.message() == "bad key"

    @pytest.mark.parametrize("body", [{}, {"data": None}, {"data": {"errors": None}}, [], "text"])
    def test_no_errors(self, body):
        assert UpstreamResponse(200, "OK", body).errors == []

    def test_message_fallbacks(self):
        assert UpstreamResponse(400, "Bad Request", {"message": "number invalid"}).message() == "number invalid"
        assert UpstreamResponse(400, "Bad Request", {"error": "oops"}).message() == "oops"
        assert UpstreamResponse(400, "", {}).message() == "HTTP 400"
