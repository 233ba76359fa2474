import json

from django.apps import apps

from domains.carriers.apps import get_directory
from domains.carriers.directory import CarrierDirectory


def test_carriers_returns_raw_document(api_client, settings, tmp_path):
    document = {"data": [{"key": 1, "_name": "One", "_url": "https://one.example"}], "meta": {"v": 2}}
    path = tmp_path / "carriers.json"
    path.write_text(json.dumps(document), encoding="utf-8")
    settings.CARRIERS_FILE = path

    r = api_client.get("/api/carriers")

    assert r.status_code == 200
    assert r.json() == document


def test_carriers_missing_file(api_client, settings, tmp_path):
    settings.CARRIERS_FILE = tmp_path / "missing.json"
    r = api_client.get("/api/v1/carriers")
    assert r.status_code == 500
    assert r.json() == {"error": "Carrier list file not found"}


def test_carriers_broken_file(api_client, settings, tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")
    settings.CARRIERS_FILE = path
    r = api_client.get("/api/carriers")
    assert r.status_code == 500
    assert r.json()["error"]


def test_carriers_cors_header(api_client):
    r = api_client.get("/api/carriers", HTTP_ORIGIN="http://example.com")
    assert r["Access-Control-Allow-Origin"] == "*"


def test_directory_loaded_once_at_startup():
    directory = get_directory()
    assert isinstance(directory, CarrierDirectory)
    assert directory is apps.get_app_config("carriers").directory
    assert directory.resolve(None, "royal mail") == 11031
